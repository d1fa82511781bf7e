"""
Data access: threads.
"""
from typing import List, Optional

from sqlmodel import Session, col, select

from tasklist.core.constants import ThreadStatus
from tasklist.core.logging import logger
from tasklist.models.base import utcnow
from tasklist.models.thread import Thread


def _save(session: Session, thread: Thread) -> Thread:
    session.add(thread)
    session.commit()
    session.refresh(thread)
    return thread


def _newest_first(statement):
    return statement.order_by(col(Thread.created_at).desc(), col(Thread.id).desc())


def create_thread(session: Session, user_id: int, title: Optional[str] = None) -> Thread:
    now = utcnow()
    thread = _save(
        session,
        Thread(user_id=user_id, title=title, status=ThreadStatus.ACTIVE, created_at=now, updated_at=now),
    )
    logger.info("thread_created", thread_id=thread.id, user_id=user_id)
    return thread


def get_thread_by_id(session: Session, thread_id: int) -> Optional[Thread]:
    return session.get(Thread, thread_id)


def get_threads_by_user(session: Session, user_id: int) -> List[Thread]:
    statement = _newest_first(select(Thread).where(Thread.user_id == user_id))
    return list(session.exec(statement).all())


def get_active_threads_by_user(session: Session, user_id: int) -> List[Thread]:
    statement = _newest_first(
        select(Thread).where(Thread.user_id == user_id, Thread.status == ThreadStatus.ACTIVE)
    )
    return list(session.exec(statement).all())


def update_thread(session: Session, thread: Thread, title: Optional[str]) -> Thread:
    thread.title = title
    thread.updated_at = utcnow()
    return _save(session, thread)


def archive_thread(session: Session, thread: Thread) -> Thread:
    thread.status = ThreadStatus.ARCHIVED
    thread.updated_at = utcnow()
    return _save(session, thread)


def unarchive_thread(session: Session, thread: Thread) -> Thread:
    thread.status = ThreadStatus.ACTIVE
    thread.updated_at = utcnow()
    return _save(session, thread)


def delete_thread(session: Session, thread: Thread, commit: bool = True) -> None:
    """Remove the thread row. Its messages must already be gone."""
    session.delete(thread)
    if commit:
        session.commit()
