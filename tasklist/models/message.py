from typing import Optional

from sqlmodel import Field

from tasklist.core.constants import MESSAGE_CONTENT_MAX, MessageRole
from tasklist.models.base import BaseModel


# Message Model
class Message(BaseModel, table=True):
    """A single chat message. Written once, never edited."""
    __tablename__ = "messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    thread_id: int = Field(foreign_key="threads.id", index=True)
    user_id: int = Field(foreign_key="users.id")
    role: MessageRole
    content: str = Field(max_length=MESSAGE_CONTENT_MAX)
