"""Task dialog lifecycle: open, edit, validate, commit, cancel, delete.

The dialog is independent of any rendering surface. A UI forwards user input
to the setters and calls ``submit``/``cancel``/``delete``; collaborators
receive payloads and notices through the callbacks given at construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol, TypeAlias

from taskdeck.constants import NOTICE_TASK_CREATED, NOTICE_TASK_DELETED, NOTICE_TASK_UPDATED
from taskdeck.core.commit import build_create_payload, build_update_payload
from taskdeck.core.draft import DraftContainer, TaskDraft
from taskdeck.core.models.enums import TaskStatus
from taskdeck.core.validation import validate_draft

if TYPE_CHECKING:
    from taskdeck.core.models.entities import Task
    from taskdeck.core.models.enums import TaskTag

log = logging.getLogger(__name__)


class DialogState(Enum):
    CLOSED = auto()
    OPEN = auto()


class DialogMode(Enum):
    CREATE = auto()
    EDIT = auto()


@dataclass(frozen=True, slots=True)
class CreateSeed:
    """Open a dialog for a new task in the column of ``status``."""

    status: TaskStatus = TaskStatus.TODO


@dataclass(frozen=True, slots=True)
class EditSeed:
    """Open a dialog for an existing task; ``None`` opens nothing."""

    task: Task | None


DialogSeed: TypeAlias = CreateSeed | EditSeed


class CreateCallback(Protocol):
    def __call__(
        self,
        title: str,
        description: str,
        status: TaskStatus,
        tags: list[TaskTag] | None = None,
    ) -> object: ...


class UpdateCallback(Protocol):
    def __call__(self, task: Task) -> object: ...


class OpenChangeCallback(Protocol):
    def __call__(self, open: bool) -> object: ...


class Notifier(Protocol):
    """Surface for user-visible notices."""

    def notify_error(self, message: str) -> None: ...

    def notify_success(self, message: str) -> None: ...


class TaskDialog:
    """Open/closed state machine around one task draft.

    States are ``CLOSED`` (initial) and ``OPEN``; the dialog may be reopened
    any number of times. Field setters are ignored while closed.
    """

    def __init__(
        self,
        *,
        notifier: Notifier,
        on_open_change: OpenChangeCallback,
        on_create: CreateCallback | None = None,
        on_update: UpdateCallback | None = None,
    ) -> None:
        self._notifier = notifier
        self._on_open_change = on_open_change
        self._on_create = on_create
        self._on_update = on_update
        self._container = DraftContainer()
        self._state = DialogState.CLOSED
        self._mode = DialogMode.CREATE
        self._seed_status = TaskStatus.TODO
        self._task: Task | None = None

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def mode(self) -> DialogMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._state == DialogState.OPEN

    @property
    def draft(self) -> TaskDraft:
        return self._container.draft

    @property
    def task(self) -> Task | None:
        """The task being edited, or ``None`` in create mode."""
        return self._task

    def open(self, seed: DialogSeed) -> bool:
        """Move from ``CLOSED`` to ``OPEN`` and initialize the draft from ``seed``.

        Returns:
            True if the dialog is now open. An ``EditSeed`` without a task
            leaves the dialog closed.

        Raises:
            ValueError: If no callback was given for the seed's mode.
        """
        if self.is_open:
            log.debug("Dialog already open, ignoring open(%r)", seed)
            return False

        match seed:
            case CreateSeed(status=status):
                if self._on_create is None:
                    raise ValueError("create dialog requires an on_create callback")
                self._mode = DialogMode.CREATE
                self._seed_status = status
                self._task = None
                self._container.reset(TaskDraft.defaults(status))
            case EditSeed(task=None):
                log.debug("Edit dialog opened without a task, staying closed")
                return False
            case EditSeed(task=task):
                if self._on_update is None:
                    raise ValueError("edit dialog requires an on_update callback")
                self._mode = DialogMode.EDIT
                self._task = task.model_copy(deep=True)
                self._container.reset(TaskDraft.from_task(task))

        self._state = DialogState.OPEN
        log.debug("Dialog opened in %s mode", self._mode.name)
        return True

    def set_title(self, text: str) -> None:
        if self._accepts_input("set_title"):
            self._container.set_title(text)

    def set_description(self, text: str) -> None:
        if self._accepts_input("set_description"):
            self._container.set_description(text)

    def set_status(self, status: TaskStatus) -> None:
        if self._accepts_input("set_status"):
            self._container.set_status(status)

    def toggle_tag(self, tag: TaskTag) -> None:
        if self._accepts_input("toggle_tag"):
            self._container.toggle_tag(tag)

    def submit(self) -> bool:
        """Validate the draft and commit it.

        Returns:
            True if the draft was committed and the dialog closed. On a failed
            validation the error is surfaced through the notifier and the
            dialog stays open with the draft untouched.
        """
        if not self.is_open:
            return False

        result = validate_draft(self.draft)
        if not result.ok:
            log.info("Rejected submit: %s", result.error)
            self._notifier.notify_error(result.message)
            return False

        if self._mode == DialogMode.CREATE:
            self._commit_create()
        else:
            self._commit_update()
        return True

    def cancel(self) -> bool:
        """Discard the draft and close without emitting a payload."""
        if not self.is_open:
            return False
        if self._mode == DialogMode.CREATE:
            self._container.reset(TaskDraft.defaults(self._seed_status))
        self._close("cancel")
        return True

    def delete(self) -> Task | None:
        """Signal delete intent for the edited task and close.

        The draft is not validated and nothing is removed here; the caller
        owns removal of the returned task.

        Returns:
            The task to remove, or None if the dialog is closed or creating.
        """
        if not self.is_open or self._mode != DialogMode.EDIT:
            return None
        task = self._task
        self._close("delete")
        self._notifier.notify_success(NOTICE_TASK_DELETED)
        return task

    def _commit_create(self) -> None:
        assert self._on_create is not None
        payload = build_create_payload(self.draft)
        self._on_create(*payload.as_args())
        self._container.reset(TaskDraft.defaults(self._seed_status))
        self._close("submit")
        self._notifier.notify_success(NOTICE_TASK_CREATED)

    def _commit_update(self) -> None:
        assert self._on_update is not None and self._task is not None
        updated = build_update_payload(self._task, self.draft)
        self._on_update(updated)
        self._close("submit")
        self._notifier.notify_success(NOTICE_TASK_UPDATED)

    def _close(self, reason: str) -> None:
        self._state = DialogState.CLOSED
        log.debug("Dialog closed (%s)", reason)
        self._on_open_change(False)

    def _accepts_input(self, operation: str) -> bool:
        if self.is_open:
            return True
        log.debug("Ignoring %s on closed dialog", operation)
        return False
