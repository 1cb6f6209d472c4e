# app/services/activity_logger.py
"""
Activity logging: an append-only feed of project events
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.models.activity import Activity, ActivityType
from app.utils.store import normalize_code, storage_boundary

logger = logging.getLogger(__name__)


def snippet(text: Optional[str], limit: Optional[int] = None) -> str:
    """First `limit` characters of text, with '...' appended when cut"""
    limit = limit or settings.SNIPPET_LENGTH
    text = text or ""
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def actor_name(user_name: Optional[str], email: Optional[str], fallback: str) -> str:
    """Display name for an activity: explicit name, email local part, then fallback"""
    if user_name and user_name.strip():
        return user_name.strip()
    if email and "@" in email:
        return email.split("@")[0]
    return fallback


class ActivityLogger:
    """Writes and reads project activity entries"""

    @staticmethod
    def log(
        db: Session,
        project_code: Optional[str],
        action_type: ActivityType,
        description: str,
        user_name: Optional[str] = None,
        user_email: Optional[str] = None
    ) -> Optional[Activity]:
        """
        Append an activity entry.

        Fire-and-forget: any failure is logged and swallowed so the
        triggering action is never failed or rolled back. Callers must
        commit their own writes before calling this.
        """
        try:
            activity = Activity(
                project_code=normalize_code(project_code) or None,
                user_name=user_name,
                user_email=user_email,
                action_type=action_type,
                description=description
            )
            db.add(activity)
            db.commit()
            db.refresh(activity)
            logger.debug("Activity logged: %s for %s", action_type.value, activity.project_code)
            return activity
        except Exception:
            logger.exception("Error logging activity %s", action_type.value)
            try:
                db.rollback()
            except Exception:
                logger.exception("Rollback after activity logging failure failed")
            return None

    @staticmethod
    def recent(db: Session, project_code: str, limit: Optional[int] = None) -> List[Activity]:
        """Most recent activities for a project, newest first"""
        limit = min(limit or settings.ACTIVITY_FEED_LIMIT, settings.ACTIVITY_FEED_LIMIT, settings.MAX_ACTIVITY_FEED)
        code = normalize_code(project_code)
        with storage_boundary(db, "fetching activities"):
            return (
                db.query(Activity)
                .filter(Activity.project_code == code)
                .order_by(Activity.timestamp.desc(), Activity.id.desc())
                .limit(limit)
                .all()
            )
