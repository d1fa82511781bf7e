"""
Assistant endpoints: conversation threads and their messages.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from tasklist.api.v1.deps import ensure_owner, get_assistant, get_current_user
from tasklist.core.constants import MESSAGE_CONTENT_MAX, THREAD_TITLE_MAX, MessageRole
from tasklist.core.exceptions import ValidationFailed
from tasklist.core.limiter import user_limiter
from tasklist.core.logging import logger
from tasklist.db import messages as Messages
from tasklist.db import threads as Threads
from tasklist.models.thread import Thread
from tasklist.models.user import User
from tasklist.schemas.assistant import (
    MessageCreate,
    MessageRead,
    SendMessageResponse,
    ThreadCreate,
    ThreadDetail,
    ThreadRead,
    ThreadUpdate,
)
from tasklist.services.assistant import TaskAssistant
from tasklist.services.database_service import get_session
from tasklist.utils.validation import is_valid_message_content, is_valid_thread_title, sanitize_thread_title

router = APIRouter(prefix="/assistant", tags=["assistant"])


def _owned_thread(session: Session, thread_id: int, user: User, action: str) -> Thread:
    return ensure_owner(Threads.get_thread_by_id(session, thread_id), user, "thread", action)


def _clean_thread_title(title):
    if not is_valid_thread_title(title):
        raise ValidationFailed(f"Thread title must be at most {THREAD_TITLE_MAX} characters")
    return sanitize_thread_title(title) or None


@router.post("/threads", response_model=ThreadRead, status_code=status.HTTP_201_CREATED)
async def create_thread(
    payload: ThreadCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user_limiter.check("create_thread", user.id)
    return Threads.create_thread(session, user_id=user.id, title=_clean_thread_title(payload.title))


@router.get("/threads", response_model=List[ThreadRead])
async def list_threads(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return Threads.get_threads_by_user(session, user.id)


@router.get("/threads/active", response_model=List[ThreadRead])
async def list_active_threads(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return Threads.get_active_threads_by_user(session, user.id)


@router.get("/threads/{thread_id}", response_model=ThreadDetail)
async def get_thread(thread_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    """A thread together with its messages, oldest first."""
    thread = _owned_thread(session, thread_id, user, "view")
    return ThreadDetail(
        thread=ThreadRead.model_validate(thread),
        messages=[MessageRead.model_validate(m) for m in Messages.get_messages_by_thread(session, thread.id)],
    )


@router.post("/threads/{thread_id}/messages", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    thread_id: int,
    payload: MessageCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
    assistant: TaskAssistant = Depends(get_assistant),
):
    """Store the user's message and the assistant's reply to it."""
    user_limiter.check("send_message", user.id)

    if not is_valid_message_content(payload.content):
        raise ValidationFailed(f"Message content must be between 1 and {MESSAGE_CONTENT_MAX:,} characters")

    thread = _owned_thread(session, thread_id, user, "send messages in")

    user_message = Messages.create_message(
        session, thread_id=thread.id, user_id=user.id, role=MessageRole.USER, content=payload.content
    )

    # Conversation window, oldest first
    history = list(reversed(Messages.get_recent_messages_by_thread(session, thread.id)))
    reply = assistant.respond(payload.content, history)

    ai_message = Messages.create_message(
        session, thread_id=thread.id, user_id=user.id, role=MessageRole.ASSISTANT, content=reply
    )
    logger.info("message_exchanged", thread_id=thread.id, user_id=user.id, history_size=len(history))

    return SendMessageResponse(
        user_message=MessageRead.model_validate(user_message),
        ai_message=MessageRead.model_validate(ai_message),
    )


@router.patch("/threads/{thread_id}", response_model=ThreadRead)
async def update_thread(
    thread_id: int,
    payload: ThreadUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user_limiter.check("update_thread", user.id)
    title = _clean_thread_title(payload.title)
    thread = _owned_thread(session, thread_id, user, "update")
    return Threads.update_thread(session, thread, title)


@router.post("/threads/{thread_id}/archive", response_model=ThreadRead)
async def archive_thread(thread_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    user_limiter.check("update_thread", user.id)
    thread = _owned_thread(session, thread_id, user, "archive")
    return Threads.archive_thread(session, thread)


@router.post("/threads/{thread_id}/unarchive", response_model=ThreadRead)
async def unarchive_thread(thread_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    user_limiter.check("update_thread", user.id)
    thread = _owned_thread(session, thread_id, user, "unarchive")
    return Threads.unarchive_thread(session, thread)


@router.delete("/threads/{thread_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_thread(thread_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    """Delete a thread and every message in it."""
    user_limiter.check("delete_thread", user.id)
    thread = _owned_thread(session, thread_id, user, "delete")

    removed = Messages.delete_messages_by_thread(session, thread.id, commit=False)
    Threads.delete_thread(session, thread)
    logger.info("thread_deleted", thread_id=thread_id, user_id=user.id, messages_removed=removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
