# tests/test_validation.py - Pure validation helpers
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


def test_task_title_length_boundary():
    assert is_valid_task_title("a" * 200)
    assert not is_valid_task_title("a" * 201)


def test_task_title_rejects_blank():
    assert not is_valid_task_title("")
    assert not is_valid_task_title("   ")


def test_task_description_optional_and_bounded():
    assert is_valid_task_description(None)
    assert is_valid_task_description("x" * 5000)
    assert not is_valid_task_description("x" * 5001)


def test_thread_title_optional_and_bounded():
    assert is_valid_thread_title(None)
    assert is_valid_thread_title("t" * 200)
    assert not is_valid_thread_title("t" * 201)


def test_message_content_bounds():
    assert is_valid_message_content("hello")
    assert is_valid_message_content("m" * 10000)
    assert not is_valid_message_content("m" * 10001)
    assert not is_valid_message_content(" \n ")


def test_sanitizers_trim_and_truncate():
    assert sanitize_task_title("  Buy milk  ") == "Buy milk"
    assert sanitize_task_title("a" * 250) == "a" * 200
    assert sanitize_task_description(None) is None
    assert sanitize_task_description("  notes ") == "notes"
    assert sanitize_thread_title(" Plans ") == "Plans"


def test_validate_and_sanitize_task_reports_first_error():
    result = validate_and_sanitize_task("", None)
    assert not result.valid
    assert result.error == "Task title must be between 1 and 200 characters"

    result = validate_and_sanitize_task("ok", "d" * 5001)
    assert not result.valid
    assert result.error == "Task description must be less than 5000 characters"


def test_validate_and_sanitize_task_returns_clean_values():
    result = validate_and_sanitize_task("  Buy milk ", "  two litres ")
    assert result.valid
    assert result.sanitized.title == "Buy milk"
    assert result.sanitized.description == "two litres"
