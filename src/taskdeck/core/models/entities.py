"""Core domain entities.

The board owns tasks; the dialog core only reads them and produces values
of the same shape.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - Pydantic needs runtime access
from typing import Any

from pydantic import BaseModel, ConfigDict

from taskdeck.core.models.enums import TaskStatus, TaskTag


class DomainModel(BaseModel):
    """Base model with common config."""

    model_config = ConfigDict(from_attributes=True)


class Task(DomainModel):
    """Unit of work (Kanban card).

    ``tags`` is ``None`` when nothing is selected, never an empty list.
    """

    id: str | int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    tags: list[TaskTag] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_payload(self) -> dict[str, Any]:
        """Dump the task with absent optional fields left out."""
        return self.model_dump(mode="json", exclude_none=True)


class TaskCreate(DomainModel):
    """Fields handed to the board when a new task is committed."""

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    tags: list[TaskTag] | None = None

    def as_args(self) -> tuple[str, str, TaskStatus, list[TaskTag] | None]:
        """Return the positional arguments of the board's create entry point."""
        return (self.title, self.description, self.status, self.tags)

    def to_payload(self) -> dict[str, Any]:
        """Dump the payload with ``tags`` omitted when nothing was selected."""
        return self.model_dump(mode="json", exclude_none=True)
