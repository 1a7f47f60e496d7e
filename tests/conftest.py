# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_cli.manager import TaskManager
from task_cli.storage import TaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    """Path to a tasks.json that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture()
def manager(store: TaskStore) -> TaskManager:
    return TaskManager(store)
