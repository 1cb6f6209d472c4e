# app/utils/store.py
"""
Record store helpers: operation boundaries and code normalization
"""

import logging
from contextlib import contextmanager
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.utils.errors import InternalError

logger = logging.getLogger(__name__)


def normalize_code(code) -> str:
    """Project codes are trimmed before storage and before every lookup"""
    if code is None:
        return ""
    return str(code).strip()


def optional_code(code) -> Optional[str]:
    normalized = normalize_code(code)
    return normalized or None


@contextmanager
def storage_boundary(db: Session, operation: str):
    """
    Wrap a service operation so storage failures surface as InternalError.

    The session is rolled back on failure; anything committed earlier in
    the operation stays committed.
    """
    try:
        yield db
    except SQLAlchemyError as e:
        logger.exception("Storage failure during %s", operation)
        db.rollback()
        raise InternalError(f"Error {operation}", error=str(e)) from e


def code_key(code) -> str:
    """Case-insensitive comparison key for a project code"""
    return normalize_code(code).casefold()
