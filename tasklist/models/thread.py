from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field

from tasklist.core.constants import THREAD_TITLE_MAX, ThreadStatus
from tasklist.models.base import TimestampedModel


# Thread model
class Thread(TimestampedModel, table=True):
    """
    A conversation with the task assistant. Owns its messages: deleting the
    thread removes them too.
    """
    __tablename__ = "threads"
    __table_args__ = (Index("ix_threads_user_id_status", "user_id", "status"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    title: Optional[str] = Field(default=None, max_length=THREAD_TITLE_MAX)
    status: ThreadStatus = Field(default=ThreadStatus.ACTIVE)
