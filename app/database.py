from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from app.config.settings import settings

DATABASE_URL = settings.DATABASE_URL


def get_connect_args(url: str) -> dict:
    """Driver options for the configured database"""
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    # If you're using PostgreSQL on Render or similar, keep sslmode=require
    if url.startswith("postgresql"):
        return {"sslmode": "require"}
    return {}


engine = create_engine(
    DATABASE_URL,
    connect_args=get_connect_args(DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# ✅ This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
