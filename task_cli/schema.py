"""
TASK CLI - Task Schema Definition
=================================
Pydantic models for the to-do list persisted in tasks.json.
"""

from enum import Enum
from typing import Optional, List, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, RootModel


def local_now() -> datetime:
    """Timezone-aware current time"""
    return datetime.now().astimezone()


class TaskStatus(str, Enum):
    """Task lifecycle states"""
    TODO = "todo"                 # Default on creation
    IN_PROGRESS = "in-progress"   # Being worked on
    DONE = "done"                 # Finished

    @classmethod
    def values(cls) -> List[str]:
        return [status.value for status in cls]


class Task(BaseModel):
    """Individual to-do item"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    description: str
    status: TaskStatus = TaskStatus.TODO

    # Stored as createdAt / updatedAt
    created_at: datetime = Field(default_factory=local_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=local_now, alias="updatedAt")

    def touch(self) -> None:
        self.updated_at = local_now()


class TaskList(RootModel[List[Task]]):
    """Ordered task collection, stored on disk as one JSON array"""
    root: List[Task] = Field(default_factory=list)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def find(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self.root:
            if task.id == task_id:
                return task
        return None

    def next_id(self) -> int:
        # max + 1 so a delete followed by an add never reuses an id
        return max((task.id for task in self.root), default=0) + 1

    def filter(self, status: Union[TaskStatus, str, None] = None) -> List[Task]:
        """Tasks with the given status, all tasks when status is empty"""
        if not status:
            return list(self.root)
        return [task for task in self.root if task.status == status]
