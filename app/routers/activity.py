# app/routers/activity.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.activity import ActivityOut
from app.services.activity_logger import ActivityLogger

router = APIRouter()

@router.get("/{project_code}", response_model=List[ActivityOut])
def get_project_activities(project_code: str, db: Session = Depends(get_db)):
    """Latest activity for a project, newest first"""
    return ActivityLogger.recent(db, project_code)
