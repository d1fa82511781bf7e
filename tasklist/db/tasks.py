"""
Data access: tasks.

The only module that reads or writes the tasks table. Callers are trusted:
ownership and input validation happen in the endpoint layer.
"""
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from tasklist.core.constants import RECENT_TASKS_DEFAULT, TaskStatus
from tasklist.core.logging import logger
from tasklist.models.base import utcnow
from tasklist.models.task import Task


def _save(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task


def _newest_first(statement):
    return statement.order_by(col(Task.created_at).desc(), col(Task.id).desc())


def create_task(session: Session, user_id: int, title: str, description: Optional[str] = None) -> Task:
    now = utcnow()
    task = _save(
        session,
        Task(
            user_id=user_id,
            title=title,
            description=description,
            status=TaskStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        ),
    )
    logger.info("task_created", task_id=task.id, user_id=user_id)
    return task


def get_task_by_id(session: Session, task_id: int) -> Optional[Task]:
    return session.get(Task, task_id)


def get_tasks_by_user(session: Session, user_id: int) -> List[Task]:
    statement = _newest_first(select(Task).where(Task.user_id == user_id))
    return list(session.exec(statement).all())


def get_tasks_by_user_and_status(session: Session, user_id: int, status: TaskStatus) -> List[Task]:
    statement = _newest_first(
        select(Task).where(Task.user_id == user_id, Task.status == status)
    )
    return list(session.exec(statement).all())


def get_active_tasks_by_user(session: Session, user_id: int) -> List[Task]:
    return get_tasks_by_user_and_status(session, user_id, TaskStatus.ACTIVE)


def get_completed_tasks_by_user(session: Session, user_id: int) -> List[Task]:
    return get_tasks_by_user_and_status(session, user_id, TaskStatus.COMPLETED)


def get_recent_tasks(session: Session, user_id: int, limit: int = RECENT_TASKS_DEFAULT) -> List[Task]:
    statement = _newest_first(select(Task).where(Task.user_id == user_id)).limit(limit)
    return list(session.exec(statement).all())


def count_tasks_by_status(session: Session, user_id: int, status: TaskStatus) -> int:
    statement = select(func.count()).select_from(Task).where(
        Task.user_id == user_id, Task.status == status
    )
    return session.exec(statement).one()


def complete_task(session: Session, task: Task) -> Task:
    now = utcnow()
    task.status = TaskStatus.COMPLETED
    task.completed_at = now
    task.updated_at = now
    return _save(session, task)


def reactivate_task(session: Session, task: Task) -> Task:
    task.status = TaskStatus.ACTIVE
    task.completed_at = None
    task.updated_at = utcnow()
    return _save(session, task)


def update_task(
    session: Session,
    task: Task,
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> Task:
    """Patch only the fields that were given."""
    if title is not None:
        task.title = title
    if description is not None:
        task.description = description
    task.updated_at = utcnow()
    return _save(session, task)


def soft_delete_task(session: Session, task: Task) -> Task:
    """Mark the task deleted but keep the row."""
    task.status = TaskStatus.DELETED
    task.completed_at = None
    task.updated_at = utcnow()
    task = _save(session, task)
    logger.info("task_soft_deleted", task_id=task.id, user_id=task.user_id)
    return task


def hard_delete_task(session: Session, task: Task) -> None:
    """Remove the row permanently."""
    task_id, user_id = task.id, task.user_id
    session.delete(task)
    session.commit()
    logger.info("task_deleted", task_id=task_id, user_id=user_id)
