import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.database import Base, engine
from app.routers import onboarding, project, dashboard, task, query, team, activity
from app.utils.errors import CollabError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Project Collaboration API")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(CollabError)
async def collab_error_handler(request: Request, exc: CollabError):
    """Render service errors as {"detail": ...} with the mapped status code"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())

# Route registration
app.include_router(onboarding.router, prefix="/api/onboarding", tags=["Onboarding"])
app.include_router(project.router, prefix="/api/projects", tags=["Projects"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(query.router, prefix="/api/queries", tags=["Queries"])
app.include_router(team.router, prefix="/api/team", tags=["Team"])
app.include_router(activity.router, prefix="/api/activities", tags=["Activities"])

# Startup event
@app.on_event("startup")
def startup_event():
    """Create any missing tables when the application starts"""
    logger.info("Starting Project Collaboration API...")
    Base.metadata.create_all(bind=engine)

# Root route
@app.get("/")
def read_root():
    return {"message": "Project Collaboration API"}

@app.get("/health")
def health():
    return {"status": "ok"}
