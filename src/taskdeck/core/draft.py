"""Draft state for a task being composed or edited.

``TaskDraft`` is an immutable value with pure transitions; ``DraftContainer``
is the mutable slot a dialog keeps it in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from taskdeck.core.models.enums import TaskStatus, TaskTag

if TYPE_CHECKING:
    from taskdeck.core.models.entities import Task


class TaskDraft(BaseModel):
    """Working copy of the draft-owned task fields.

    Text fields are stored verbatim; trimming happens at validation and commit.
    ``tags`` keeps selection order.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    tags: tuple[TaskTag, ...] = ()

    @classmethod
    def defaults(cls, status: TaskStatus = TaskStatus.TODO) -> TaskDraft:
        """Return an empty draft for a new task in ``status``."""
        return cls(status=status)

    @classmethod
    def from_task(cls, task: Task) -> TaskDraft:
        """Copy the draft-owned fields out of an existing task."""
        return cls(
            title=task.title,
            description=task.description,
            status=task.status,
            tags=tuple(task.tags or ()),
        )

    def with_title(self, text: str) -> TaskDraft:
        return self.model_copy(update={"title": text})

    def with_description(self, text: str) -> TaskDraft:
        return self.model_copy(update={"description": text})

    def with_status(self, status: TaskStatus) -> TaskDraft:
        return self.model_copy(update={"status": status})

    def with_tag_toggled(self, tag: TaskTag) -> TaskDraft:
        """Remove ``tag`` if selected, otherwise append it to the selection."""
        if tag in self.tags:
            tags = tuple(t for t in self.tags if t != tag)
        else:
            tags = (*self.tags, tag)
        return self.model_copy(update={"tags": tags})

    def has_tag(self, tag: TaskTag) -> bool:
        return tag in self.tags


class DraftContainer:
    """Mutable holder for the draft of one dialog.

    Every operation is total and only replaces the held draft.
    """

    def __init__(self, draft: TaskDraft | None = None) -> None:
        self._draft = draft or TaskDraft()

    @property
    def draft(self) -> TaskDraft:
        return self._draft

    def set_title(self, text: str) -> None:
        self._draft = self._draft.with_title(text)

    def set_description(self, text: str) -> None:
        self._draft = self._draft.with_description(text)

    def set_status(self, status: TaskStatus) -> None:
        self._draft = self._draft.with_status(status)

    def toggle_tag(self, tag: TaskTag) -> None:
        self._draft = self._draft.with_tag_toggled(tag)

    def reset(self, defaults: TaskDraft) -> None:
        """Replace the whole draft with ``defaults``."""
        self._draft = defaults
