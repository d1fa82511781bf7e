from typing import Optional


# Error Taxonomy
class TaskListError(Exception):
    """
    Base class for every error the API surfaces to its callers.
    The message is shown to the end user verbatim.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationRequired(TaskListError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class RateLimitExceeded(TaskListError):
    """Raised when a named per-user limit is exhausted."""

    status_code = 429

    def __init__(self, retry_after: int, limit_name: Optional[str] = None):
        self.retry_after = max(1, int(retry_after))
        self.limit_name = limit_name
        super().__init__(
            f"Rate limit exceeded. Please try again in {self.retry_after} seconds."
        )


class ValidationFailed(TaskListError):
    status_code = 400


class NotFound(TaskListError):
    status_code = 404


class NotAuthorized(TaskListError):
    """The caller is authenticated but does not own the target entity."""

    status_code = 403


class ProviderConfigurationError(RuntimeError):
    """No assistant provider could be configured. Raised at startup."""
