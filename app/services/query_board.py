# app/services/query_board.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.query import Query
from app.models.activity import ActivityType
from app.services.activity_logger import ActivityLogger, actor_name, snippet
from app.services.task_board import ensure_project_reference
from app.utils.errors import NotFoundError, require
from app.utils.store import normalize_code, storage_boundary

logger = logging.getLogger(__name__)


def create_query(
    db: Session,
    project_code: Optional[str],
    text: Optional[str],
    sender_email: Optional[str],
    user_name: Optional[str] = None
) -> Query:
    code = require(normalize_code(project_code), "Project code")
    text = require(text, "Query text")
    sender_email = require(sender_email, "Sender email")

    with storage_boundary(db, "saving query"):
        ensure_project_reference(db, code)
        query = Query(project_code=code, text=text, sender_email=sender_email)
        db.add(query)
        db.commit()
        db.refresh(query)

    ActivityLogger.log(
        db,
        project_code=code,
        action_type=ActivityType.QUERY_ADDED,
        description=f'Added a new query: "{snippet(query.text)}"',
        user_name=actor_name(user_name, sender_email, "Member"),
        user_email=sender_email
    )
    return query


def list_queries(db: Session, project_code: str) -> List[Query]:
    code = normalize_code(project_code)
    with storage_boundary(db, "fetching queries"):
        return (
            db.query(Query)
            .filter(Query.project_code == code)
            .order_by(Query.created_at.desc(), Query.id.desc())
            .all()
        )


def toggle_query_resolved(db: Session, query_id: int, user_name: Optional[str] = None) -> Query:
    """
    Flip a query's resolved flag.

    Only the transition into resolved is logged; flipping back is silent.
    """
    with storage_boundary(db, "updating query"):
        query = db.query(Query).filter(Query.id == query_id).first()
        if not query:
            raise NotFoundError("Query not found")
        query.is_resolved = not query.is_resolved
        db.commit()
        db.refresh(query)

    if query.is_resolved:
        ActivityLogger.log(
            db,
            project_code=query.project_code,
            action_type=ActivityType.QUERY_RESOLVED,
            description=f'Resolved query: "{snippet(query.text)}"',
            user_name=actor_name(user_name, None, "Someone"),
            user_email=query.sender_email
        )
    return query
