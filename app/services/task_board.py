# app/services/task_board.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.models.task import Task, TaskStatus, TaskPriority
from app.models.activity import ActivityType
from app.services.activity_logger import ActivityLogger, actor_name, snippet
from app.services.membership import project_code_known
from app.utils.errors import NotFoundError, require
from app.utils.store import normalize_code, storage_boundary

logger = logging.getLogger(__name__)


def ensure_project_reference(db: Session, project_code: str) -> None:
    """Reject unknown project codes when reference checks are enabled"""
    if settings.ENFORCE_PROJECT_REFERENCES and not project_code_known(db, project_code):
        raise NotFoundError(f'Project code "{project_code}" not found')


def create_task(
    db: Session,
    project_code: Optional[str],
    title: Optional[str],
    deadline: Optional[str] = None,
    priority: Optional[str] = None,
    assignee_name: Optional[str] = None,
    assignee_initial: Optional[str] = None,
    user_name: Optional[str] = None,
    user_email: Optional[str] = None
) -> Task:
    code = require(normalize_code(project_code), "Project code")
    title = require(title, "Task title")

    with storage_boundary(db, "creating task"):
        ensure_project_reference(db, code)
        task = Task(
            project_code=code,
            title=title,
            deadline=deadline,
            status=TaskStatus.TODO.value,
            priority=priority or TaskPriority.MEDIUM.value,
            assignee_name=assignee_name,
            assignee_initial=assignee_initial
        )
        db.add(task)
        db.commit()
        db.refresh(task)

    logger.info("Task %s created for project %s", task.id, code)

    ActivityLogger.log(
        db,
        project_code=code,
        action_type=ActivityType.TASK_CREATED,
        description=f'Created task: "{snippet(task.title)}"',
        user_name=actor_name(user_name, user_email, "Admin"),
        user_email=user_email
    )
    return task


def list_tasks(db: Session, project_code: str) -> List[Task]:
    """Tasks for a project, newest first; the code is trimmed like on create"""
    code = normalize_code(project_code)
    with storage_boundary(db, "fetching tasks"):
        tasks = (
            db.query(Task)
            .filter(Task.project_code == code)
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )
    logger.debug("Found %d tasks for project %s", len(tasks), code)
    return tasks


def update_task_status(
    db: Session,
    task_id: int,
    status: Optional[str],
    user_name: Optional[str] = None,
    user_email: Optional[str] = None
) -> Task:
    """Replace a task's status; any status string is accepted"""
    require(status, "Status")

    with storage_boundary(db, "updating task status"):
        task = db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task not found")
        task.status = status
        db.commit()
        db.refresh(task)

    verb = "Completed" if task.is_done else "Updated"
    ActivityLogger.log(
        db,
        project_code=task.project_code,
        action_type=ActivityType.TASK_UPDATED,
        description=f'{verb} task: "{snippet(task.title)}"',
        user_name=actor_name(user_name, user_email, "Member"),
        user_email=user_email
    )
    return task
