"""
Database Models Export.
This allows us to make simple imports like:
'from tasklist.models.database import User, Task'
"""
from tasklist.models.message import Message
from tasklist.models.task import Task
from tasklist.models.thread import Thread
from tasklist.models.user import User

# Explicitly define what is exported
__all__ = ["Message", "Task", "Thread", "User"]
