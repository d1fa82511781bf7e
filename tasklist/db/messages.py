"""
Data access: messages.
"""
from typing import List, Optional

from sqlmodel import Session, col, select

from tasklist.core.constants import MESSAGES_PAGE_DEFAULT, MessageRole
from tasklist.models.base import utcnow
from tasklist.models.message import Message


def create_message(session: Session, thread_id: int, user_id: int, role: MessageRole, content: str) -> Message:
    message = Message(
        thread_id=thread_id,
        user_id=user_id,
        role=role,
        content=content,
        created_at=utcnow(),
    )
    session.add(message)
    session.commit()
    session.refresh(message)
    return message


def get_message_by_id(session: Session, message_id: int) -> Optional[Message]:
    return session.get(Message, message_id)


def get_messages_by_thread(session: Session, thread_id: int) -> List[Message]:
    """All messages of a thread in chronological order."""
    statement = (
        select(Message)
        .where(Message.thread_id == thread_id)
        .order_by(col(Message.created_at).asc(), col(Message.id).asc())
    )
    return list(session.exec(statement).all())


def get_recent_messages_by_thread(session: Session, thread_id: int, limit: int = MESSAGES_PAGE_DEFAULT) -> List[Message]:
    """The latest `limit` messages, newest first."""
    statement = (
        select(Message)
        .where(Message.thread_id == thread_id)
        .order_by(col(Message.created_at).desc(), col(Message.id).desc())
        .limit(limit)
    )
    return list(session.exec(statement).all())


def delete_message(session: Session, message: Message) -> None:
    session.delete(message)
    session.commit()


def delete_messages_by_thread(session: Session, thread_id: int, commit: bool = True) -> int:
    """Delete every message of a thread and return how many went."""
    messages = session.exec(select(Message).where(Message.thread_id == thread_id)).all()
    for message in messages:
        session.delete(message)
    if commit:
        session.commit()
    else:
        session.flush()
    return len(messages)
