"""
Data access: dashboard aggregates across the user's tables.
"""
from enum import Enum
from typing import Any, Callable, Dict, List

from sqlalchemy import func
from sqlmodel import Session, col, select

from tasklist.core.constants import RECENT_TASKS_DEFAULT, TaskStatus
from tasklist.db.tasks import count_tasks_by_status
from tasklist.models.message import Message
from tasklist.models.task import Task
from tasklist.models.thread import Thread


class DashboardTable(str, Enum):
    TASKS = "tasks"
    THREADS = "threads"
    MESSAGES = "messages"


PRIMARY_TABLE = DashboardTable.TASKS


def count_tasks(session: Session, user_id: int) -> int:
    return session.exec(select(func.count()).select_from(Task).where(Task.user_id == user_id)).one()


def count_threads(session: Session, user_id: int) -> int:
    return session.exec(select(func.count()).select_from(Thread).where(Thread.user_id == user_id)).one()


def count_messages(session: Session, user_id: int) -> int:
    return session.exec(select(func.count()).select_from(Message).where(Message.user_id == user_id)).one()


TABLE_COUNTERS: Dict[DashboardTable, Callable[[Session, int], int]] = {
    DashboardTable.TASKS: count_tasks,
    DashboardTable.THREADS: count_threads,
    DashboardTable.MESSAGES: count_messages,
}


def load_summary(session: Session, user_id: int) -> Dict[str, Any]:
    """Row counts per table plus a breakdown of the user's tasks by status."""
    per_table = {table.value: TABLE_COUNTERS[table](session, user_id) for table in DashboardTable}

    return {
        "total_records": sum(per_table.values()),
        "per_table": per_table,
        "primary_table_count": per_table[PRIMARY_TABLE.value],
        "task_status_counts": {
            status.value: count_tasks_by_status(session, user_id, status) for status in TaskStatus
        },
    }


def load_recent(session: Session, user_id: int, limit: int = RECENT_TASKS_DEFAULT) -> List[Dict[str, Any]]:
    """The user's most recently touched tasks, whatever their status."""
    statement = (
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(col(Task.updated_at).desc(), col(Task.id).desc())
        .limit(limit)
    )
    return [
        {
            "id": task.id,
            "name": task.title or "Untitled",
            "status": task.status,
            "updated_at": task.updated_at,
        }
        for task in session.exec(statement).all()
    ]
