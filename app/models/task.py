from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
import enum
from datetime import datetime

class TaskStatus(str, enum.Enum):
    TODO = "To-Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

class TaskPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    project_code = Column(String, nullable=False, index=True)  # trimmed, not checked against projects
    title = Column(String, nullable=False)
    deadline = Column(String, nullable=True)  # free text or date string

    # Status is stored as plain text: any value is accepted on update
    status = Column(String, default=TaskStatus.TODO.value, nullable=False)
    priority = Column(String, default=TaskPriority.MEDIUM.value, nullable=False)

    # Assignee display fields
    assignee_name = Column(String, nullable=True)
    assignee_initial = Column(String, nullable=True)

    # System dates
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE.value
