from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tasklist.core.constants import TaskStatus


# Task schemas
# Length limits are enforced by the endpoint layer so callers get the same
# error messages whichever client they use.
class TaskCreate(BaseModel):
    title: str = Field(..., description="What needs to be done")
    description: Optional[str] = Field(default=None, description="Optional details")


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class TaskRead(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
