from enum import Enum


class TaskStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    DELETED = "deleted"


class ThreadStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


# Pagination defaults
TASKS_PAGE_DEFAULT = 50
MESSAGES_PAGE_DEFAULT = 50
RECENT_TASKS_DEFAULT = 10
RECENT_TASKS_MAX = 50

# Validation limits
TASK_TITLE_MAX = 200
TASK_DESCRIPTION_MAX = 5000
THREAD_TITLE_MAX = 200
MESSAGE_CONTENT_MAX = 10000

# bcrypt only looks at the first 72 bytes and newer releases reject anything longer
PASSWORD_MAX_BYTES = 72
