# app/schemas/task.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class TaskCreate(BaseModel):
    project_code: Optional[str] = None
    title: Optional[str] = None
    deadline: Optional[str] = None
    priority: Optional[str] = None
    assignee_name: Optional[str] = None
    assignee_initial: Optional[str] = None
    # Actor details for the activity feed
    user_name: Optional[str] = None
    user_email: Optional[str] = None

class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None

class TaskOut(BaseModel):
    id: int
    project_code: str
    title: str
    deadline: Optional[str] = None
    status: str
    priority: str
    assignee_name: Optional[str] = None
    assignee_initial: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
