"""
Task endpoints.

Every mutation runs the same pipeline: authenticate, spend one unit of the
named rate limit, validate, check ownership, then hand off to the data layer.
Queries only authenticate and check ownership.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from tasklist.api.v1.deps import ensure_owner, get_current_user
from tasklist.core.constants import TaskStatus
from tasklist.core.exceptions import ValidationFailed
from tasklist.core.limiter import user_limiter
from tasklist.db import tasks as Tasks
from tasklist.models.task import Task
from tasklist.models.user import User
from tasklist.schemas.task import TaskCreate, TaskRead, TaskUpdate
from tasklist.services.database_service import get_session
from tasklist.utils.validation import validate_and_sanitize_task

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _owned_task(session: Session, task_id: int, user: User, action: str) -> Task:
    return ensure_owner(Tasks.get_task_by_id(session, task_id), user, "task", action)


def _ensure_not_deleted(task: Task) -> None:
    if task.status == TaskStatus.DELETED:
        raise ValidationFailed("Task has been deleted")


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user_limiter.check("create_task", user.id)

    validation = validate_and_sanitize_task(payload.title, payload.description)
    if not validation.valid:
        raise ValidationFailed(validation.error)

    return Tasks.create_task(
        session,
        user_id=user.id,
        title=validation.sanitized.title,
        description=validation.sanitized.description,
    )


@router.get("", response_model=List[TaskRead])
async def list_tasks(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return Tasks.get_tasks_by_user(session, user.id)


@router.get("/active", response_model=List[TaskRead])
async def list_active_tasks(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return Tasks.get_active_tasks_by_user(session, user.id)


@router.get("/completed", response_model=List[TaskRead])
async def list_completed_tasks(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return Tasks.get_completed_tasks_by_user(session, user.id)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return _owned_task(session, task_id, user, "view")


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user_limiter.check("update_task", user.id)
    task = _owned_task(session, task_id, user, "update")

    title, description = payload.title, payload.description
    if title is not None or description is not None:
        validation = validate_and_sanitize_task(title if title is not None else task.title, description)
        if not validation.valid:
            raise ValidationFailed(validation.error)
        if title is not None:
            title = validation.sanitized.title
        description = validation.sanitized.description

    return Tasks.update_task(session, task, title=title, description=description)


@router.post("/{task_id}/complete", response_model=TaskRead)
async def complete_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    user_limiter.check("update_task", user.id)
    task = _owned_task(session, task_id, user, "complete")
    _ensure_not_deleted(task)
    return Tasks.complete_task(session, task)


@router.post("/{task_id}/reactivate", response_model=TaskRead)
async def reactivate_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    user_limiter.check("update_task", user.id)
    task = _owned_task(session, task_id, user, "reactivate")
    _ensure_not_deleted(task)
    return Tasks.reactivate_task(session, task)


@router.delete("/{task_id}", response_model=TaskRead)
async def remove_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    """Soft delete: the row stays, with status `deleted`."""
    user_limiter.check("delete_task", user.id)
    task = _owned_task(session, task_id, user, "delete")
    return Tasks.soft_delete_task(session, task)


@router.delete("/{task_id}/permanent", status_code=status.HTTP_204_NO_CONTENT)
async def permanently_delete_task(
    task_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user_limiter.check("delete_task", user.id)
    task = _owned_task(session, task_id, user, "permanently delete")
    Tasks.hard_delete_task(session, task)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
