# app/services/project_service.py
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.project import Project
from app.models.user import User
from app.utils.errors import ConflictError, require
from app.utils.store import normalize_code, storage_boundary

logger = logging.getLogger(__name__)


def create_project(db: Session, code: Optional[str], name: Optional[str], admin_email: Optional[str]) -> Project:
    """
    Register a project owned by admin_email.

    Codes are unique by exact match, so "ACME-1" and "acme-1" may both
    exist. The project row and the admin's User sync are committed
    together; a missing admin User is skipped.
    """
    code = require(normalize_code(code), "Project code")
    name = require(name, "Project name")
    admin_email = require(admin_email, "Admin email")

    with storage_boundary(db, "creating project"):
        existing = db.query(Project).filter(Project.code == code).first()
        if existing:
            raise ConflictError("Project code already exists")

        project = Project(code=code, name=name, admin_email=admin_email)
        project.add_member(admin_email)
        db.add(project)

        admin = db.query(User).filter(User.email == admin_email).first()
        if admin:
            admin.project_code = code
            admin.project_name = name

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError("Project code already exists") from e
        db.refresh(project)

    logger.info("Project %s created by %s", code, admin_email)
    return project


def list_admin_projects(db: Session, admin_email: str) -> List[Project]:
    """Projects owned by admin_email, newest first"""
    with storage_boundary(db, "fetching projects"):
        return (
            db.query(Project)
            .filter(Project.admin_email == admin_email)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .all()
        )


def team_roster(db: Session, project_code: str) -> List[User]:
    """Every user whose project code equals the trimmed code"""
    code = normalize_code(project_code)
    with storage_boundary(db, "fetching team details"):
        return db.query(User).filter(User.project_code == code).order_by(User.id).all()
