"""
TASK CLI - To-do List Manager
=============================

Single-user task tracker backed by a local tasks.json file.

Usage:
    from task_cli import TaskManager, TaskStatus

    manager = TaskManager(tasks_file="tasks.json")
    task = manager.add_task("Buy milk")
    manager.mark_status(task.id, TaskStatus.DONE)

    for task in manager.list_tasks("done"):
        print(task.id, task.description)
"""

from .schema import (
    Task,
    TaskList,
    TaskStatus
)

from .errors import (
    TaskError,
    TaskValidationError,
    TaskNotFoundError,
    StorageError
)

from .storage import TaskStore
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskStore",
    "TaskList",
    "Task",
    "TaskStatus",
    "TaskError",
    "TaskValidationError",
    "TaskNotFoundError",
    "StorageError"
]
