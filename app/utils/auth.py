# app/utils/auth.py
import logging
from typing import Optional
from fastapi import Header
from jose import JWTError, jwt
from app.config.settings import settings

logger = logging.getLogger(__name__)


def verify_token(token: str) -> Optional[dict]:
    """Verify an identity token and return its payload without raising exceptions"""
    if not settings.IDENTITY_TOKEN_SECRET:
        return None
    try:
        return jwt.decode(
            token,
            settings.IDENTITY_TOKEN_SECRET,
            algorithms=[settings.IDENTITY_TOKEN_ALGORITHM]
        )
    except JWTError:
        return None


def get_token_email(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """
    Email claim from an optional bearer token.

    Identity is owned by the external provider; a missing or invalid
    token only yields None and never rejects the request.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    payload = verify_token(authorization.split(" ", 1)[1].strip())
    if payload is None:
        if settings.IDENTITY_TOKEN_SECRET:
            logger.warning("Identity token could not be verified")
        return None
    return payload.get("email") or payload.get("sub")


def check_identity(token_email: Optional[str], submitted_email: Optional[str]) -> bool:
    """Log a warning when a verified token names a different email"""
    if token_email and submitted_email and token_email.lower() != submitted_email.strip().lower():
        logger.warning("Identity mismatch: token for %s, request for %s", token_email, submitted_email)
        return False
    return True
