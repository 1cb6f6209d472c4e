# app/services/membership.py
"""
Membership resolution for onboarding submissions.

Admins bind themselves to whatever project code they submit. Members may
only bind to a code that some admin already claimed; the match is an
exact, case-insensitive comparison against the admins' stored codes
(or against the Project registry when MEMBER_LOOKUP_SOURCE=projects).
"""

import logging
from typing import Optional, Dict, Any
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.models.user import User
from app.models.project import Project
from app.models.activity import ActivityType
from app.services.activity_logger import ActivityLogger, actor_name
from app.utils.errors import ValidationError, NotFoundError, require
from app.utils.store import code_key, normalize_code, storage_boundary

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"
ROLE_MEMBER = "member"
VALID_ROLES = (ROLE_ADMIN, ROLE_MEMBER)

PROFILE_FIELDS = ("position", "team_name", "team_size", "project_name", "member_role")


def find_project_owner(db: Session, project_code: str) -> Optional[str]:
    """Return the admin email that owns project_code, matched by casefolded key"""
    key = code_key(project_code)
    if not key:
        return None

    if settings.uses_project_registry():
        project = db.query(Project).filter(Project.code_key == key).first()
        return project.admin_email if project else None

    admin = db.query(User).filter(
        User.role == ROLE_ADMIN,
        User.project_code_key == key
    ).first()
    return admin.email if admin else None


def project_code_known(db: Session, project_code: str) -> bool:
    """True when a Project row or an admin's onboarding carries this code"""
    code = normalize_code(project_code)
    if not code:
        return False
    if db.query(Project).filter(Project.code == code).first():
        return True
    return db.query(User).filter(
        User.role == ROLE_ADMIN,
        User.project_code_key == code_key(code)
    ).first() is not None


def normalize_role(claimed_role: Optional[str]) -> str:
    role = require(claimed_role, "Role").lower()
    if role not in VALID_ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(VALID_ROLES)}")
    return role


def _apply(user: User, values: Dict[str, Any]) -> None:
    # Unset values leave the stored field untouched
    for field, value in values.items():
        if value is not None:
            setattr(user, field, value)


def upsert_user(db: Session, email: str, values: Dict[str, Any]) -> User:
    """Insert or update the User keyed by email; last write wins"""
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        user = User(email=email)
        db.add(user)
    _apply(user, values)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent submission inserted the same email first
        db.rollback()
        user = db.query(User).filter(User.email == email).one()
        _apply(user, values)
        db.commit()
    db.refresh(user)
    return user


def resolve_onboarding(
    db: Session,
    email: Optional[str],
    claimed_role: Optional[str],
    project_code_input: Optional[str] = None,
    profile_fields: Optional[Dict[str, Any]] = None
) -> User:
    """
    Bind a user to a role and project code.

    Raises ValidationError for a missing email, role, or (for members)
    project code, and NotFoundError when a member's code matches no admin.
    A member join is recorded as a MEMBER_JOINED activity before the
    user row is written.
    """
    email = require(email, "Email")
    role = normalize_role(claimed_role)
    search_code = normalize_code(project_code_input)

    with storage_boundary(db, "saving onboarding details"):
        if role == ROLE_MEMBER:
            if not search_code:
                raise ValidationError("Project code is required for members.")

            owner_email = find_project_owner(db, search_code)
            if owner_email is None:
                logger.warning("Admin not found for project code %r (member %s)", search_code, email)
                raise NotFoundError(
                    f'Project code "{project_code_input}" not found. Please verify with your Admin.'
                )

            ActivityLogger.log(
                db,
                project_code=search_code,
                action_type=ActivityType.MEMBER_JOINED,
                description="Joined the project team.",
                user_name=actor_name(None, email, "Member"),
                user_email=email
            )

        values = {field: (profile_fields or {}).get(field) for field in PROFILE_FIELDS}
        values.update({
            "role": role,
            "project_code": search_code or None,
            "onboarding_complete": True,
        })
        user = upsert_user(db, email, values)

    logger.info("Onboarding saved for %s as %s (project %s)", email, role, user.project_code)
    return user


def onboarding_profile(db: Session, email: str) -> Dict[str, Any]:
    """
    Stored onboarding state for an email.

    Unknown emails get a stub with no role; the role of a user that has
    not completed onboarding is reported as None.
    """
    email = require(email, "Email")
    with storage_boundary(db, "fetching user"):
        user = db.query(User).filter(User.email == email).first()

    if user is None:
        return {"email": email, "role": None, "onboarding_complete": False}

    return {
        "id": user.id,
        "email": user.email,
        "role": user.role if user.onboarding_complete else None,
        "position": user.position,
        "team_name": user.team_name,
        "team_size": user.team_size,
        "project_name": user.project_name,
        "project_code": user.project_code,
        "member_role": user.member_role,
        "onboarding_complete": bool(user.onboarding_complete),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
