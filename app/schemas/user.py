from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class OnboardingSubmit(BaseModel):
    # Fields are optional here so missing values surface as ValidationError
    email: Optional[str] = None
    role: Optional[str] = None
    position: Optional[str] = None
    team_name: Optional[str] = None
    team_size: Optional[str] = None
    project_name: Optional[str] = None
    project_code: Optional[str] = None
    member_role: Optional[str] = None

    def profile_fields(self) -> dict:
        return {
            "position": self.position,
            "team_name": self.team_name,
            "team_size": self.team_size,
            "project_name": self.project_name,
            "member_role": self.member_role,
        }

class UserOut(BaseModel):
    id: Optional[int] = None
    email: str
    role: Optional[str] = None
    position: Optional[str] = None
    team_name: Optional[str] = None
    team_size: Optional[str] = None
    project_name: Optional[str] = None
    project_code: Optional[str] = None
    member_role: Optional[str] = None
    onboarding_complete: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

class OnboardingResponse(BaseModel):
    message: str
    user: UserOut

class OnboardingUserResponse(BaseModel):
    user: UserOut

class TeamRoster(BaseModel):
    team_members: List[UserOut]
