# app/utils/errors.py
"""
Error taxonomy shared by the services and the HTTP layer
"""

from typing import Optional


class CollabError(Exception):
    """Base class for every failure reported to API callers"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"detail": self.message}


class ValidationError(CollabError):
    """A required field is missing or malformed"""

    status_code = 400


class NotFoundError(CollabError):
    status_code = 404


class ConflictError(CollabError):
    status_code = 409


class InternalError(CollabError):
    """Storage failure; carries the underlying message"""

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.error = error

    def to_response(self) -> dict:
        return {"detail": self.message, "error": self.error}


def require(value, field_label: str) -> str:
    """Return the stripped string value or raise ValidationError"""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_label} is required")
    return str(value).strip()
