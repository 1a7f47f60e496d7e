"""
TASK CLI - Storage
==================
Reads and writes the whole task collection as one JSON document.
A missing file is an empty collection; anything else that goes wrong
is a StorageError.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union
import logging

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .errors import StorageError
from .schema import TaskList

logger = logging.getLogger("task_cli")

DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_FILE_MODE = 0o644


class TaskStore:
    """File-backed task collection (tasks.json)"""

    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load(self) -> TaskList:
        """Load the task collection from file"""
        if not self.path.exists():
            logger.debug(f"No tasks file at {self.path}, starting empty")
            return TaskList()

        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        # Bytes go straight to pydantic, which also rejects invalid UTF-8
        try:
            task_list = TaskList.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise StorageError(f"Malformed tasks file {self.path}: {e}") from e

        logger.info(f"📂 Loaded {len(task_list)} tasks from {self.path}")
        return task_list

    def save(self, task_list: TaskList) -> None:
        """Replace the tasks file with the full collection"""
        try:
            data = task_list.model_dump_json(indent=2, by_alias=True)
        except PydanticSerializationError as e:
            raise StorageError(f"Could not encode tasks for {self.path}: {e}") from e

        # Write next to the target and rename over it
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = self._current_mode()
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.write("\n")
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {self.path}: {e}") from e

        logger.info(f"✅ Saved {len(task_list)} tasks to {self.path}")

    def _current_mode(self) -> int:
        """Permissions of the existing file, so a rewrite keeps them"""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE
