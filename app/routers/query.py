# app/routers/query.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.query import QueryCreate, QueryResolve, QueryOut
from app.services import query_board

router = APIRouter()

@router.post("", response_model=QueryOut, status_code=status.HTTP_201_CREATED)
def create_query(query_data: QueryCreate, db: Session = Depends(get_db)):
    """Post a question to a project's query board"""
    return query_board.create_query(
        db,
        project_code=query_data.project_code,
        text=query_data.text,
        sender_email=query_data.sender_email,
        user_name=query_data.user_name
    )

@router.get("/{project_code}", response_model=List[QueryOut])
def get_project_queries(project_code: str, db: Session = Depends(get_db)):
    return query_board.list_queries(db, project_code)

@router.patch("/{query_id}/resolve", response_model=QueryOut)
def resolve_query(query_id: int, resolve: Optional[QueryResolve] = None, db: Session = Depends(get_db)):
    """Toggle a query between resolved and unresolved"""
    user_name = resolve.user_name if resolve else None
    return query_board.toggle_query_resolved(db, query_id, user_name=user_name)
