"""KanbanColumn widget for displaying a status column."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Container, ScrollableContainer, Vertical
from textual.widget import Widget
from textual.widgets import Label

from taskdeck.constants import STATUS_LABELS
from taskdeck.ui.widgets.card import TaskCard

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from taskdeck.core.models.entities import Task
    from taskdeck.core.models.enums import TaskStatus


class KanbanColumn(Widget):
    can_focus = False

    def __init__(self, status: TaskStatus, tasks: list[Task] | None = None, **kwargs) -> None:
        super().__init__(id=f"column-{status.value}", **kwargs)
        self.status = status
        self._tasks: list[Task] = tasks or []

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(
                f"{STATUS_LABELS[self.status]} ({len(self._tasks)})",
                id=f"header-{self.status.value}",
                classes="column-header",
            )
            with ScrollableContainer(classes="column-content"):
                if self._tasks:
                    for task in self._tasks:
                        yield TaskCard(task)
                else:
                    with Container(classes="column-empty"):
                        yield Label("No tasks", classes="empty-message")

    def get_cards(self) -> list[TaskCard]:
        return list(self.query(TaskCard))

    def get_focused_card_index(self) -> int | None:
        for i, card in enumerate(self.get_cards()):
            if card.has_focus:
                return i
        return None

    def focus_card(self, index: int) -> bool:
        cards = self.get_cards()
        if 0 <= index < len(cards):
            cards[index].focus()
            return True
        return False

    async def update_tasks(self, tasks: list[Task]) -> None:
        """Replace the column's tasks and rebuild its content."""
        self._tasks = [t for t in tasks if t.status == self.status]
        await self.recompose()
