# app/routers/team.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import TeamRoster
from app.services.project_service import team_roster

router = APIRouter()

@router.get("/{project_code}", response_model=TeamRoster)
def get_team_members(project_code: str, db: Session = Depends(get_db)):
    """Everyone whose onboarding carries this project code"""
    return {"team_members": team_roster(db, project_code)}
