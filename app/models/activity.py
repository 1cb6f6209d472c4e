# app/models/activity.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from datetime import datetime
from app.database import Base
import enum

class ActivityType(str, enum.Enum):
    TASK_CREATED = "TASK_CREATED"
    TASK_UPDATED = "TASK_UPDATED"
    QUERY_ADDED = "QUERY_ADDED"
    QUERY_RESOLVED = "QUERY_RESOLVED"
    MEMBER_JOINED = "MEMBER_JOINED"

class Activity(Base):
    """Append-only audit event, never updated or deleted"""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    project_code = Column(String, nullable=True, index=True)
    user_name = Column(String, nullable=True)
    user_email = Column(String, nullable=True)
    action_type = Column(Enum(ActivityType), nullable=False)
    description = Column(Text, nullable=True)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
