from tasklist.utils.auth import create_access_token, verify_token
from tasklist.utils.validation import (
    is_valid_message_content,
    is_valid_task_description,
    is_valid_task_title,
    is_valid_thread_title,
    sanitize_task_description,
    sanitize_task_title,
    sanitize_thread_title,
    validate_and_sanitize_task,
)

__all__ = [
    "create_access_token",
    "verify_token",
    "is_valid_message_content",
    "is_valid_task_description",
    "is_valid_task_title",
    "is_valid_thread_title",
    "sanitize_task_description",
    "sanitize_task_title",
    "sanitize_thread_title",
    "validate_and_sanitize_task",
]
