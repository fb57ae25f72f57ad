"""Exception types raised by the taskdeck core."""

from __future__ import annotations

from taskdeck.constants import DRAFT_ERROR_MESSAGES
from taskdeck.core.models.enums import DraftError


class TaskdeckError(Exception):
    """Base class for taskdeck errors."""


class DraftValidationError(TaskdeckError):
    """A draft failed the validation gate."""

    def __init__(self, code: DraftError, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or DRAFT_ERROR_MESSAGES[code])


class EmptyTitleError(DraftValidationError):
    """The draft title is empty after trimming."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(DraftError.EMPTY_TITLE, message)


class TaskNotFoundError(TaskdeckError):
    """The board holds no task with the requested id."""

    def __init__(self, task_id: str | int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
