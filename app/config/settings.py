# app/config/settings.py
# Runtime configuration for the collaboration backend

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings read from the environment"""

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./collab.db")

    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
        ).split(",")
        if origin.strip()
    ]

    # Activity feed and description formatting
    MAX_ACTIVITY_FEED = 20
    ACTIVITY_FEED_LIMIT = min(int(os.getenv("ACTIVITY_FEED_LIMIT", MAX_ACTIVITY_FEED)), MAX_ACTIVITY_FEED)
    SNIPPET_LENGTH = int(os.getenv("SNIPPET_LENGTH", 30))

    # Dashboard
    NO_PROJECT_LABEL = os.getenv("NO_PROJECT_LABEL", "No Functioning Project")

    # Membership and reference checks
    MEMBER_LOOKUP_SOURCE = os.getenv("MEMBER_LOOKUP_SOURCE", "users").lower()  # users or projects
    ENFORCE_PROJECT_REFERENCES = _env_flag("ENFORCE_PROJECT_REFERENCES")

    # Optional identity token check
    IDENTITY_TOKEN_SECRET = os.getenv("IDENTITY_TOKEN_SECRET")
    IDENTITY_TOKEN_ALGORITHM = os.getenv("IDENTITY_TOKEN_ALGORITHM", "HS256")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server runner
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    RELOAD = _env_flag("RELOAD", "true")

    def uses_project_registry(self) -> bool:
        """Check whether member verification reads the Project registry"""
        return self.MEMBER_LOOKUP_SOURCE == "projects"


settings = Settings()
