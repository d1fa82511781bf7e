from datetime import datetime
from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field

from tasklist.core.constants import TASK_DESCRIPTION_MAX, TASK_TITLE_MAX, TaskStatus
from tasklist.models.base import TimestampedModel


# Task Model
class Task(TimestampedModel, table=True):
    """
    A single to-do item owned by one user.

    `completed_at` is set exactly when `status` is completed; the data-access
    layer keeps the two in step on every transition.
    """
    __tablename__ = "tasks"
    __table_args__ = (Index("ix_tasks_user_id_status", "user_id", "status"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=TASK_TITLE_MAX)
    description: Optional[str] = Field(default=None, max_length=TASK_DESCRIPTION_MAX)
    status: TaskStatus = Field(default=TaskStatus.ACTIVE)
    completed_at: Optional[datetime] = Field(default=None)
