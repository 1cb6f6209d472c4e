from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class ProjectCreate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    admin_email: Optional[str] = None

class ProjectOut(BaseModel):
    id: int
    code: str
    name: str
    admin_email: str
    members: List[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
