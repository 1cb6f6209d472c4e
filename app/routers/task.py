# app/routers/task.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.task import TaskCreate, TaskStatusUpdate, TaskOut
from app.services import task_board

router = APIRouter()

@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    """Create a task on a project board"""
    return task_board.create_task(
        db,
        project_code=task_data.project_code,
        title=task_data.title,
        deadline=task_data.deadline,
        priority=task_data.priority,
        assignee_name=task_data.assignee_name,
        assignee_initial=task_data.assignee_initial,
        user_name=task_data.user_name,
        user_email=task_data.user_email
    )

@router.get("/{project_code}", response_model=List[TaskOut])
def get_project_tasks(project_code: str, db: Session = Depends(get_db)):
    return task_board.list_tasks(db, project_code)

@router.patch("/{task_id}", response_model=TaskOut)
def update_task_status(task_id: int, update: TaskStatusUpdate, db: Session = Depends(get_db)):
    """Replace a task's status"""
    return task_board.update_task_status(
        db,
        task_id,
        status=update.status,
        user_name=update.user_name,
        user_email=update.user_email
    )
