from dataclasses import dataclass
from typing import Optional

from tasklist.core.constants import (
    MESSAGE_CONTENT_MAX,
    TASK_DESCRIPTION_MAX,
    TASK_TITLE_MAX,
    THREAD_TITLE_MAX,
)


# Input Validation
# Pure functions only: no database access, no request context.
def is_valid_task_title(title: str) -> bool:
    return len(title.strip()) > 0 and len(title) <= TASK_TITLE_MAX


def is_valid_task_description(description: Optional[str]) -> bool:
    if description is None:
        return True
    return len(description) <= TASK_DESCRIPTION_MAX


def is_valid_thread_title(title: Optional[str]) -> bool:
    if title is None:
        return True
    return len(title) <= THREAD_TITLE_MAX


def is_valid_message_content(content: str) -> bool:
    return len(content.strip()) > 0 and len(content) <= MESSAGE_CONTENT_MAX


def sanitize_task_title(title: str) -> str:
    return title.strip()[:TASK_TITLE_MAX]


def sanitize_task_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip()[:TASK_DESCRIPTION_MAX]


def sanitize_thread_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    return title.strip()[:THREAD_TITLE_MAX]


@dataclass(frozen=True)
class TaskInput:
    title: str
    description: Optional[str] = None


@dataclass(frozen=True)
class TaskValidation:
    """Outcome of validate_and_sanitize_task: either `error` or `sanitized` is set."""
    valid: bool
    error: Optional[str] = None
    sanitized: Optional[TaskInput] = None


def validate_and_sanitize_task(title: str, description: Optional[str] = None) -> TaskValidation:
    """Validate a task's title and description and return their cleaned-up form."""
    if not is_valid_task_title(title):
        return TaskValidation(
            valid=False,
            error=f"Task title must be between 1 and {TASK_TITLE_MAX} characters",
        )

    if not is_valid_task_description(description):
        return TaskValidation(
            valid=False,
            error=f"Task description must be less than {TASK_DESCRIPTION_MAX} characters",
        )

    return TaskValidation(
        valid=True,
        sanitized=TaskInput(
            title=sanitize_task_title(title),
            description=sanitize_task_description(description),
        ),
    )
