from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from app.models.activity import ActivityType

class ActivityOut(BaseModel):
    id: int
    project_code: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    action_type: ActivityType
    description: Optional[str] = None
    timestamp: datetime

    model_config = {
        "from_attributes": True
    }
