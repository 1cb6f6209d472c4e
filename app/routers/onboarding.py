# app/routers/onboarding.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.schemas.user import OnboardingSubmit, OnboardingResponse, OnboardingUserResponse
from app.services import membership
from app.utils.auth import get_token_email, check_identity

router = APIRouter()

@router.post("", response_model=OnboardingResponse)
def submit_onboarding(
    submission: OnboardingSubmit,
    db: Session = Depends(get_db),
    token_email: Optional[str] = Depends(get_token_email)
):
    """Save workspace details; members must name a project code an admin already claimed"""
    check_identity(token_email, submission.email)
    user = membership.resolve_onboarding(
        db,
        email=submission.email,
        claimed_role=submission.role,
        project_code_input=submission.project_code,
        profile_fields=submission.profile_fields()
    )
    return {"message": "Workspace details saved successfully!", "user": user}

@router.get("/user/{email}", response_model=OnboardingUserResponse)
def get_onboarding_user(email: str, db: Session = Depends(get_db)):
    """Fetch a user's onboarding state; unknown emails get an empty profile"""
    return {"user": membership.onboarding_profile(db, email)}
