from .user import User
from .project import Project, ProjectMember
from .task import Task, TaskStatus, TaskPriority
from .query import Query
from .activity import Activity, ActivityType
