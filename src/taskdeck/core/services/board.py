"""In-memory board: the store that owns tasks for the TUI."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Protocol
from uuid import uuid4

from taskdeck.constants import COLUMN_ORDER
from taskdeck.core.errors import TaskNotFoundError
from taskdeck.core.models.entities import Task

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taskdeck.core.models.enums import TaskStatus, TaskTag

log = logging.getLogger(__name__)


class BoardService(Protocol):
    """Protocol boundary for board task operations."""

    def create_task(
        self,
        title: str,
        description: str,
        status: TaskStatus,
        tags: list[TaskTag] | None = None,
    ) -> Task: ...

    def update_task(self, task: Task) -> Task: ...

    def delete_task(self, task_id: str | int) -> bool: ...

    def get_task(self, task_id: str | int) -> Task | None: ...

    def tasks_by_status(self, status: TaskStatus) -> list[Task]: ...

    def all_tasks(self) -> list[Task]: ...


class InMemoryBoard:
    """Board keeping tasks in insertion order; nothing is persisted."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str | int, Task] = {task.id: task for task in tasks}

    def create_task(
        self,
        title: str,
        description: str,
        status: TaskStatus,
        tags: list[TaskTag] | None = None,
    ) -> Task:
        now = datetime.now()
        task = Task(
            id=uuid4().hex[:8],
            title=title,
            description=description,
            status=status,
            tags=list(tags) if tags else None,
            created_at=now,
            updated_at=now,
        )
        self._tasks[task.id] = task
        log.debug("Created task %s in %s", task.id, status)
        return task

    def update_task(self, task: Task) -> Task:
        """Replace the stored task with the same id.

        Raises:
            TaskNotFoundError: If no task with that id exists.
        """
        if task.id not in self._tasks:
            raise TaskNotFoundError(task.id)
        stored = task.model_copy(update={"updated_at": datetime.now()})
        self._tasks[task.id] = stored
        log.debug("Updated task %s", task.id)
        return stored

    def delete_task(self, task_id: str | int) -> bool:
        removed = self._tasks.pop(task_id, None) is not None
        if removed:
            log.debug("Deleted task %s", task_id)
        else:
            log.warning("Delete requested for unknown task %s", task_id)
        return removed

    def get_task(self, task_id: str | int) -> Task | None:
        return self._tasks.get(task_id)

    def tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [task for task in self._tasks.values() if task.status == status]

    def all_tasks(self) -> list[Task]:
        """Return tasks grouped by column order."""
        return [task for status in COLUMN_ORDER for task in self.tasks_by_status(status)]
