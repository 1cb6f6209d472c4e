from pydantic import BaseModel
from typing import Optional, List

class Teammate(BaseModel):
    name: str
    email: str
    role: Optional[str] = None
    position: Optional[str] = None

class ProjectHistoryItem(BaseModel):
    name: str
    code: str

class DashboardView(BaseModel):
    active_project_name: str
    active_project_code: Optional[str] = None
    role: Optional[str] = None
    teammates: List[Teammate]
    history: List[ProjectHistoryItem]
