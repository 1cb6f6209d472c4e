# app/models/user.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import validates
from sqlalchemy.sql import func
from app.database import Base
from app.utils.store import code_key

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    role = Column(String, nullable=True)  # admin or member, null until onboarded
    position = Column(String, nullable=True)
    team_name = Column(String, nullable=True)
    team_size = Column(String, nullable=True)
    project_name = Column(String, nullable=True)
    project_code = Column(String, nullable=True, index=True)
    project_code_key = Column(String, nullable=True, index=True)  # casefolded project_code
    member_role = Column(String, nullable=True)
    onboarding_complete = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @validates("project_code")
    def _sync_code_key(self, key, value):
        self.project_code_key = code_key(value) or None
        return value

    @property
    def display_name(self) -> str:
        return self.email.split("@")[0]
