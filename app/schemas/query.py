from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class QueryCreate(BaseModel):
    project_code: Optional[str] = None
    text: Optional[str] = None
    sender_email: Optional[str] = None
    user_name: Optional[str] = None

class QueryResolve(BaseModel):
    user_name: Optional[str] = None

class QueryOut(BaseModel):
    id: int
    project_code: str
    text: str
    sender_email: str
    is_resolved: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
