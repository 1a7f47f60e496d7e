"""Exceptions raised by the task store and manager."""


class TaskError(Exception):
    """Base class for every task-cli failure"""


class TaskValidationError(TaskError):
    """Bad input detected before anything was loaded or changed"""


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int):
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class StorageError(TaskError):
    """The tasks file could not be read, parsed or written"""
