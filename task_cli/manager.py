"""
TASK CLI - Task Manager
=======================
Add, update, delete, mark and list tasks. Every operation loads the
full collection from the store, works on it, and saves it back when
something changed. Nothing is kept between calls.
"""

from typing import Optional, List, Tuple, Union
import logging

from .errors import TaskNotFoundError, TaskValidationError
from .schema import Task, TaskList, TaskStatus, local_now
from .storage import DEFAULT_TASKS_FILE, TaskStore

logger = logging.getLogger("task_cli")

INVALID_STATUS_MESSAGE = "Invalid status. Use 'todo', 'in-progress', or 'done'."


class TaskManager:
    """
    To-do list operations over a TaskStore

    Errors are raised, never turned into exits:
    - TaskValidationError: bad input, nothing loaded or changed
    - TaskNotFoundError: no task with that id, nothing saved
    - StorageError: from the store
    """

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        tasks_file: str = DEFAULT_TASKS_FILE
    ):
        self.store = store or TaskStore(tasks_file)

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, description: str) -> Task:
        """Append a new todo task and return it"""
        self._check_description(description)

        task_list = self.store.load()
        now = local_now()
        task = Task(
            id=task_list.next_id(),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now
        )
        task_list.root.append(task)
        self.store.save(task_list)

        logger.info(f"➕ Added task {task.id}: {description}")
        return task

    def update_task(self, task_id: int, description: str) -> Task:
        """Replace a task's description"""
        self._check_description(description)

        task_list = self.store.load()
        task = self._get_task(task_list, task_id)
        task.description = description
        task.touch()
        self.store.save(task_list)

        logger.info(f"✏️ Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove a task; remaining ids are left as they are"""
        task_list = self.store.load()
        task = self._get_task(task_list, task_id)
        task_list.root = [t for t in task_list if t is not task]
        self.store.save(task_list)

        logger.info(f"🗑️ Deleted task {task_id}")
        return task

    def mark_status(
        self,
        task_id: int,
        status: Union[TaskStatus, str]
    ) -> Tuple[Task, bool]:
        """
        Set a task's status.

        Returns (task, changed). Setting the status a task already has is
        a no-op: changed is False and the file is not rewritten.
        """
        status = self._parse_status(status)

        task_list = self.store.load()
        task = self._get_task(task_list, task_id)
        if task.status == status:
            logger.info(f"Task {task_id} is already {status.value}, nothing to do")
            return task, False

        task.status = status
        task.touch()
        self.store.save(task_list)

        logger.info(f"🔁 Task {task_id} -> {status.value}")
        return task, True

    def list_tasks(self, status: Union[TaskStatus, str, None] = "") -> List[Task]:
        """Tasks in stored order, optionally only those with one status"""
        if status:
            status = self._parse_status(status)

        tasks = self.store.load().filter(status)
        logger.debug(f"Listing {len(tasks)} tasks (filter: {status or 'all'})")
        return tasks

    # ========================================
    # HELPER METHODS
    # ========================================

    def _get_task(self, task_list: TaskList, task_id: int) -> Task:
        task = task_list.find(task_id)
        if task is None:
            logger.info(f"Task not found: {task_id}")
            raise TaskNotFoundError(task_id)
        return task

    @staticmethod
    def _check_description(description: Optional[str]) -> None:
        if description is None or not description.strip():
            raise TaskValidationError("Description cannot be empty.")
        try:
            description.encode("utf-8")
        except UnicodeEncodeError:
            # e.g. undecodable argv bytes surfacing as lone surrogates
            raise TaskValidationError("Description is not valid UTF-8 text.") from None

    @staticmethod
    def _parse_status(status: Union[TaskStatus, str]) -> TaskStatus:
        try:
            return TaskStatus(status)
        except ValueError:
            raise TaskValidationError(INVALID_STATUS_MESSAGE) from None
