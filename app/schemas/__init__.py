from .user import OnboardingSubmit, OnboardingResponse, OnboardingUserResponse, UserOut, TeamRoster
from .project import ProjectCreate, ProjectOut
from .task import TaskCreate, TaskStatusUpdate, TaskOut
from .query import QueryCreate, QueryResolve, QueryOut
from .activity import ActivityOut
from .dashboard import DashboardView, Teammate, ProjectHistoryItem
