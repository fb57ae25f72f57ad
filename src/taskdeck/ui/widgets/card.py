"""TaskCard widget for displaying a Kanban task."""

from __future__ import annotations

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label

from taskdeck.constants import CARD_DESC_MAX_LENGTH, CARD_TITLE_MAX_LENGTH
from taskdeck.core.models.entities import Task
from taskdeck.theme import TAG_CLASSES


def truncate(text: str, max_length: int) -> str:
    """Truncate text with an ellipsis if too long."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class TaskCard(Widget):
    """A card widget representing a single task on the Kanban board."""

    can_focus = True

    @dataclass
    class EditRequested(Message):
        task: Task

    def __init__(self, task: Task, **kwargs) -> None:
        super().__init__(id=f"card-{task.id}", **kwargs)
        self.task = task

    def compose(self) -> ComposeResult:
        yield Label(truncate(self.task.title, CARD_TITLE_MAX_LENGTH), classes="card-title")
        if self.task.description:
            yield Label(
                truncate(self.task.description, CARD_DESC_MAX_LENGTH), classes="card-desc"
            )
        if self.task.tags:
            with Horizontal(classes="card-tags"):
                for tag in self.task.tags:
                    yield Label(tag.value, classes=f"card-tag {TAG_CLASSES[tag]}")

    def on_click(self) -> None:
        self.post_message(self.EditRequested(self.task))
