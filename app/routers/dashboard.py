# app/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.dashboard import DashboardView
from app.services.aggregation import get_dashboard

router = APIRouter()

@router.get("/{email}", response_model=DashboardView)
def get_user_dashboard(email: str, db: Session = Depends(get_db)):
    """Active project, teammates and project history for a user"""
    return get_dashboard(db, email)
