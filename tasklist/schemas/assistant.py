from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from tasklist.core.constants import MessageRole, ThreadStatus


# Assistant schemas
class ThreadCreate(BaseModel):
    title: Optional[str] = Field(default=None, description="Optional thread title")


class ThreadUpdate(BaseModel):
    title: str


class ThreadRead(BaseModel):
    id: int
    user_id: int
    title: Optional[str] = None
    status: ThreadStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MessageCreate(BaseModel):
    """
    Payload sent to the send-message endpoint.
    """
    content: str = Field(..., description="The message content")


class MessageRead(BaseModel):
    """
    Represents a single message in the conversation history.
    """
    id: int
    thread_id: int
    user_id: int
    role: MessageRole
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ThreadDetail(BaseModel):
    thread: ThreadRead
    messages: List[MessageRead]


class SendMessageResponse(BaseModel):
    user_message: MessageRead
    ai_message: MessageRead
