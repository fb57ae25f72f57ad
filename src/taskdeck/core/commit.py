"""Turn validated drafts into payloads for the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskdeck.core.models.entities import Task, TaskCreate
from taskdeck.core.validation import trim_text, validate_draft

if TYPE_CHECKING:
    from taskdeck.core.draft import TaskDraft
    from taskdeck.core.models.enums import TaskTag


def _committed_tags(draft: TaskDraft) -> list[TaskTag] | None:
    return list(draft.tags) if draft.tags else None


def build_create_payload(draft: TaskDraft) -> TaskCreate:
    """Build the fields of a new task from a valid draft.

    Raises:
        EmptyTitleError: If the draft does not pass validation.
    """
    validate_draft(draft).raise_for_error()
    return TaskCreate(
        title=trim_text(draft.title),
        description=trim_text(draft.description),
        status=draft.status,
        tags=_committed_tags(draft),
    )


def build_update_payload(original: Task, draft: TaskDraft) -> Task:
    """Merge a valid draft over ``original``.

    ``id`` and every field the draft does not own are carried over unchanged.

    Raises:
        EmptyTitleError: If the draft does not pass validation.
    """
    validate_draft(draft).raise_for_error()
    return original.model_copy(
        update={
            "title": trim_text(draft.title),
            "description": trim_text(draft.description),
            "status": draft.status,
            "tags": _committed_tags(draft),
        },
        deep=True,
    )
