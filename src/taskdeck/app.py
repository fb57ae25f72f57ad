"""Main taskdeck TUI application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import App

from taskdeck.config import TaskdeckConfig
from taskdeck.core.services.board import InMemoryBoard
from taskdeck.debug_log import export_logs_to_file, setup_debug_logging
from taskdeck.keybindings import APP_BINDINGS
from taskdeck.paths import get_log_export_path
from taskdeck.theme import TASKDECK_THEME
from taskdeck.ui.screens.kanban import KanbanScreen

if TYPE_CHECKING:
    from taskdeck.core.services.board import BoardService

log = logging.getLogger(__name__)


class TaskdeckApp(App):
    """Kanban board TUI."""

    TITLE = "taskdeck"
    CSS_PATH = "styles/taskdeck.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config: TaskdeckConfig | None = None,
        board: BoardService | None = None,
        *,
        debug: bool = False,
    ) -> None:
        super().__init__()
        self.register_theme(TASKDECK_THEME)
        self.theme = "taskdeck"
        self.config = config or TaskdeckConfig()
        self.board: BoardService = board or InMemoryBoard()
        self._debug = debug

    def on_mount(self) -> None:
        setup_debug_logging(logging.DEBUG if self._debug else logging.INFO)
        self.push_screen(KanbanScreen(self.board, self.config))

    def action_export_debug_log(self) -> None:
        target = get_log_export_path()
        count = export_logs_to_file(target)
        log.info("Exported %d log entries to %s", count, target)
        self.notify(f"Exported {count} log entries to {target}")
