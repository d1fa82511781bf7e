from tasklist.schemas.assistant import (
    MessageCreate,
    MessageRead,
    SendMessageResponse,
    ThreadCreate,
    ThreadDetail,
    ThreadRead,
    ThreadUpdate,
)
from tasklist.schemas.auth import AuthResponse, SignOutResponse, Token, UserCreate, UserLogin, UserRead
from tasklist.schemas.dashboard import DashboardSummary, RecentRecord
from tasklist.schemas.task import TaskCreate, TaskRead, TaskUpdate

__all__ = [
    "AuthResponse",
    "DashboardSummary",
    "MessageCreate",
    "MessageRead",
    "RecentRecord",
    "SendMessageResponse",
    "SignOutResponse",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "ThreadCreate",
    "ThreadDetail",
    "ThreadRead",
    "ThreadUpdate",
    "Token",
    "UserCreate",
    "UserLogin",
    "UserRead",
]
