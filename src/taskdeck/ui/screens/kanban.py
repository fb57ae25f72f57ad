"""Kanban board screen wiring the task dialog to the in-memory board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import on
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header

from taskdeck.constants import COLUMN_ORDER
from taskdeck.core.dialog import CreateSeed, EditSeed, TaskDialog
from taskdeck.core.errors import TaskNotFoundError
from taskdeck.keybindings import KANBAN_BINDINGS
from taskdeck.ui.modals.task_form import FormOutcome, TaskFormModal, TaskFormResult
from taskdeck.ui.widgets.card import TaskCard
from taskdeck.ui.widgets.column import KanbanColumn

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from taskdeck.config import TaskdeckConfig
    from taskdeck.core.models.entities import Task
    from taskdeck.core.services.board import BoardService

log = logging.getLogger(__name__)


class KanbanScreen(Screen):
    """Three-column board; tasks are created and edited through ``TaskDialog``."""

    BINDINGS = KANBAN_BINDINGS

    def __init__(self, board: BoardService, config: TaskdeckConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.board = board
        self.config = config
        self.dialog = TaskDialog(
            notifier=self,
            on_open_change=self._on_dialog_open_change,
            on_create=board.create_task,
            on_update=self._update_task,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="board"):
            for status in COLUMN_ORDER:
                yield KanbanColumn(status, self.board.tasks_by_status(status))
        yield Footer()

    def on_mount(self) -> None:
        self._focus_first_card()

    # -------------------- dialog collaborators --------------------

    def notify_error(self, message: str) -> None:
        self.notify(message, severity="error", timeout=self.config.ui.notification_timeout)

    def notify_success(self, message: str) -> None:
        self.notify(message, timeout=self.config.ui.notification_timeout)

    def _update_task(self, task: Task) -> None:
        try:
            self.board.update_task(task)
        except TaskNotFoundError as exc:
            log.warning("Update failed: %s", exc)
            self.notify(str(exc), severity="error")

    def _on_dialog_open_change(self, open: bool) -> None:
        log.debug("Task dialog open=%s", open)

    async def _on_form_closed(self, result: TaskFormResult | None) -> None:
        if result is not None and result.outcome == FormOutcome.DELETED:
            assert result.task is not None
            self._remove_task(result.task)
        await self._refresh_board()

    def _remove_task(self, task: Task) -> None:
        if not self.board.delete_task(task.id):
            self.notify(f"Task {task.id} was already removed", severity="warning")

    # -------------------- actions --------------------

    def action_new_task(self) -> None:
        column = self._focused_column()
        status = column.status if column else self.config.general.default_status
        self._open_dialog(CreateSeed(status))

    def action_edit_task(self) -> None:
        if task := self._focused_task():
            self._open_dialog(EditSeed(task))

    async def action_delete_task(self) -> None:
        task = self._focused_task()
        if task is None or not self.dialog.open(EditSeed(task)):
            return
        if removed := self.dialog.delete():
            self._remove_task(removed)
        await self._refresh_board()

    @on(TaskCard.EditRequested)
    def on_card_edit_requested(self, event: TaskCard.EditRequested) -> None:
        self._open_dialog(EditSeed(event.task))

    def _open_dialog(self, seed: CreateSeed | EditSeed) -> None:
        if self.dialog.open(seed):
            modal = TaskFormModal(self.dialog, show_tag_hints=self.config.ui.show_tag_hints)
            self.app.push_screen(modal, self._on_form_closed)

    # -------------------- navigation --------------------

    def _columns(self) -> list[KanbanColumn]:
        return list(self.query(KanbanColumn))

    def _focused_column(self) -> KanbanColumn | None:
        for column in self._columns():
            if column.get_focused_card_index() is not None:
                return column
        return None

    def _focused_task(self) -> Task | None:
        focused = self.app.focused
        if isinstance(focused, TaskCard):
            return focused.task
        return None

    def _focus_first_card(self) -> None:
        for column in self._columns():
            if column.focus_card(0):
                return

    def action_focus_up(self) -> None:
        self._move_vertical(-1)

    def action_focus_down(self) -> None:
        self._move_vertical(1)

    def action_focus_left(self) -> None:
        self._move_horizontal(-1)

    def action_focus_right(self) -> None:
        self._move_horizontal(1)

    def _move_vertical(self, delta: int) -> None:
        column = self._focused_column()
        if column is None:
            self._focus_first_card()
            return
        index = column.get_focused_card_index()
        assert index is not None
        column.focus_card(index + delta)

    def _move_horizontal(self, delta: int) -> None:
        columns = self._columns()
        column = self._focused_column()
        if column is None:
            self._focus_first_card()
            return
        index = columns.index(column) + delta
        while 0 <= index < len(columns):
            if columns[index].focus_card(0):
                return
            index += delta

    async def _refresh_board(self) -> None:
        column = self._focused_column()
        focus_status = column.status if column else None
        for col in self._columns():
            await col.update_tasks(self.board.tasks_by_status(col.status))
        for col in self._columns():
            if col.status == focus_status and col.focus_card(0):
                return
        self._focus_first_card()
