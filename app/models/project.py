# app/models/project.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func
from app.database import Base
from app.utils.store import code_key as fold_code

class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)  # exact-match unique
    code_key = Column(String, nullable=False, index=True)  # casefolded code
    name = Column(String, nullable=False)
    admin_email = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @validates("code")
    def _sync_code_key(self, key, value):
        self.code_key = fold_code(value)
        return value

    # Relationships
    member_rows = relationship(
        "ProjectMember",
        back_populates="project",
        order_by="ProjectMember.id",
        cascade="all, delete-orphan"
    )

    @property
    def members(self):
        return [row.email for row in self.member_rows]

    def add_member(self, email: str) -> bool:
        """Append a member email; the roster is append-only"""
        if email in self.members:
            return False
        self.member_rows.append(ProjectMember(email=email))
        return True

class ProjectMember(Base):
    __tablename__ = "project_members"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    email = Column(String, nullable=False, index=True)

    project = relationship("Project", back_populates="member_rows")
