"""Core domain enums."""

from __future__ import annotations

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task status values for Kanban columns.

    Statuses are unordered: any value may be set from any other.
    """

    TODO = "todo"
    DOING = "doing"
    DONE = "done"


class TaskTag(StrEnum):
    """Labels a task may carry."""

    DESIGN = "Design"
    UI_UX = "UI/UX"
    DEV = "Dev"
    TESTING = "Testing"


TAG_VOCABULARY: tuple[TaskTag, ...] = (
    TaskTag.DESIGN,
    TaskTag.UI_UX,
    TaskTag.DEV,
    TaskTag.TESTING,
)
"""Allowed tags, in the order selection controls enumerate them."""


class DraftError(StrEnum):
    """Reasons a draft cannot be committed."""

    EMPTY_TITLE = "EMPTY_TITLE"
