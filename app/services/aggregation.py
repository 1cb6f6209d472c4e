# app/services/aggregation.py
"""
Dashboard assembly.

Each section comes from its own query against a separate collection;
nothing here writes, and missing cross-references produce empty
sections rather than errors.
"""

from typing import Dict, Any, List
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.models.user import User
from app.models.project import Project, ProjectMember
from app.utils.errors import NotFoundError, require
from app.utils.store import storage_boundary


def _teammates(db: Session, user: User) -> List[Dict[str, Any]]:
    if not user.project_code:
        return []
    rows = (
        db.query(User)
        .filter(User.project_code == user.project_code, User.email != user.email)
        .order_by(User.id)
        .all()
    )
    return [
        {
            "name": mate.display_name,
            "email": mate.email,
            "role": mate.role,
            "position": mate.position,
        }
        for mate in rows
    ]


def _history(db: Session, user: User) -> List[Dict[str, Any]]:
    member_of = select(ProjectMember.project_id).where(ProjectMember.email == user.email)
    query = db.query(Project).filter(
        or_(Project.admin_email == user.email, Project.id.in_(member_of))
    )
    if user.project_code:
        query = query.filter(Project.code != user.project_code)
    projects = query.order_by(Project.created_at.desc(), Project.id.desc()).all()
    return [{"name": project.name, "code": str(project.code)} for project in projects]


def get_dashboard(db: Session, email: str) -> Dict[str, Any]:
    email = require(email, "Email")

    with storage_boundary(db, "loading dashboard"):
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError("User not found")

        teammates = _teammates(db, user)
        history = _history(db, user)

    return {
        "active_project_name": user.project_name or settings.NO_PROJECT_LABEL,
        "active_project_code": str(user.project_code) if user.project_code else None,
        "role": user.role,
        "teammates": teammates,
        "history": history,
    }
