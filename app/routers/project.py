# app/routers/project.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.project import ProjectCreate, ProjectOut
from app.services import project_service
from app.utils.auth import get_token_email, check_identity

router = APIRouter()

@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    db: Session = Depends(get_db),
    token_email: Optional[str] = Depends(get_token_email)
):
    """Create a project; the admin becomes its first member"""
    check_identity(token_email, project_data.admin_email)
    return project_service.create_project(
        db,
        code=project_data.code,
        name=project_data.name,
        admin_email=project_data.admin_email
    )

@router.get("/{email}", response_model=List[ProjectOut])
def get_admin_projects(email: str, db: Session = Depends(get_db)):
    """Projects owned by an admin, newest first"""
    return project_service.list_admin_projects(db, email)
