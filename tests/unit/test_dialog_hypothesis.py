"""Hypothesis stateful tests for the TaskDialog lifecycle."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from taskdeck.core.dialog import CreateSeed, DialogMode, DialogState, EditSeed, TaskDialog
from taskdeck.core.draft import TaskDraft
from taskdeck.core.models.entities import Task
from taskdeck.core.models.enums import TAG_VOCABULARY, TaskStatus
from taskdeck.core.validation import trim_text

pytestmark = pytest.mark.unit

EDIT_TARGET = Task(id="abc123", title="Existing", description="desc", status=TaskStatus.TODO)


class TaskDialogMachine(RuleBasedStateMachine):
    """Drive a dialog with arbitrary input and check what reaches collaborators."""

    def __init__(self) -> None:
        super().__init__()
        self.callbacks = MagicMock()
        self.dialog = TaskDialog(
            notifier=self.callbacks.notifier,
            on_open_change=self.callbacks.on_open_change,
            on_create=self.callbacks.on_create,
            on_update=self.callbacks.on_update,
        )
        self.closes = 0
        self.seed_status = TaskStatus.TODO

    @invariant()
    def created_titles_are_trimmed_and_non_empty(self) -> None:
        for call in self.callbacks.on_create.call_args_list:
            title, description, _status, tags = call.args
            assert title and title == trim_text(title)
            assert description == trim_text(description)
            assert tags is None or len(tags) > 0

    @invariant()
    def updates_preserve_id(self) -> None:
        for call in self.callbacks.on_update.call_args_list:
            (task,) = call.args
            assert task.id == EDIT_TARGET.id
            assert task.title and task.title == trim_text(task.title)
            assert task.tags is None or len(task.tags) > 0

    @invariant()
    def open_change_counts_closes(self) -> None:
        assert self.callbacks.on_open_change.call_count == self.closes

    @rule(status=st.sampled_from(TaskStatus))
    def open_create(self, status: TaskStatus) -> None:
        was_open = self.dialog.is_open
        opened = self.dialog.open(CreateSeed(status))
        assert opened != was_open
        if opened:
            self.seed_status = status

    @rule()
    def open_edit(self) -> None:
        was_open = self.dialog.is_open
        assert self.dialog.open(EditSeed(EDIT_TARGET)) != was_open

    @rule(text=st.text(max_size=8))
    def set_title(self, text: str) -> None:
        self.dialog.set_title(text)

    @rule(text=st.text(max_size=8))
    def set_description(self, text: str) -> None:
        self.dialog.set_description(text)

    @rule(status=st.sampled_from(TaskStatus))
    def set_status(self, status: TaskStatus) -> None:
        self.dialog.set_status(status)

    @rule(tag=st.sampled_from(TAG_VOCABULARY))
    def toggle_tag(self, tag) -> None:
        self.dialog.toggle_tag(tag)

    @precondition(lambda self: self.dialog.is_open)
    @rule()
    def submit(self) -> None:
        draft_before = self.dialog.draft
        mode = self.dialog.mode
        committed = self.dialog.submit()
        assert committed == bool(trim_text(draft_before.title))
        if committed:
            self.closes += 1
            assert self.dialog.state == DialogState.CLOSED
            if mode == DialogMode.CREATE:
                assert self.dialog.draft == TaskDraft.defaults(self.seed_status)
        else:
            assert self.dialog.is_open
            assert self.dialog.draft == draft_before

    @precondition(lambda self: self.dialog.is_open)
    @rule()
    def cancel(self) -> None:
        assert self.dialog.cancel()
        self.closes += 1

    @rule()
    def delete(self) -> None:
        expect_close = self.dialog.is_open and self.dialog.mode == DialogMode.EDIT
        removed = self.dialog.delete()
        assert (removed is not None) == expect_close
        if expect_close:
            self.closes += 1


TestTaskDialogMachine = TaskDialogMachine.TestCase
