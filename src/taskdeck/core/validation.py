"""Validation gate deciding whether a draft may be committed."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from taskdeck.constants import DRAFT_ERROR_MESSAGES
from taskdeck.core.errors import DraftValidationError, EmptyTitleError
from taskdeck.core.models.enums import DraftError

if TYPE_CHECKING:
    from taskdeck.core.draft import TaskDraft

# Whitespace plus the byte order mark, which str.isspace does not cover.
_EDGE_BLANKS = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def trim_text(text: str) -> str:
    """Remove leading and trailing blanks, including a stray BOM."""
    return _EDGE_BLANKS.sub("", text)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a draft."""

    error: DraftError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """User-facing text for the failure, empty when valid."""
        if self.error is None:
            return ""
        return DRAFT_ERROR_MESSAGES[self.error]

    def raise_for_error(self) -> None:
        """Raise the matching exception if validation failed."""
        if self.error is None:
            return
        if self.error == DraftError.EMPTY_TITLE:
            raise EmptyTitleError()
        raise DraftValidationError(self.error)


OK = ValidationResult()


def validate_draft(draft: TaskDraft) -> ValidationResult:
    """Check a draft for commit eligibility.

    The only rule is a non-empty title after trimming; description, status
    and tags never block a commit.
    """
    if not trim_text(draft.title):
        return ValidationResult(DraftError.EMPTY_TITLE)
    return OK
