"""
rem - a personal task tracker that keeps one Markdown file per task.

Tasks move through TODO -> DOING -> DONE; the directory a task's file lives in
is its status.
"""

from .version import VERSION
from .models import Task, TaskStatus, TaskMetadata
from .board import TaskBoard
from .data import DataCore, TaskRepository

__version__ = VERSION

__all__ = [
    "VERSION",
    "Task",
    "TaskStatus",
    "TaskMetadata",
    "TaskBoard",
    "DataCore",
    "TaskRepository",
]
