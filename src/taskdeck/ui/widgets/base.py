"""Reusable base widget classes for the task form.

Provides consistent ids and configuration for the form components.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Button, Input, Select, TextArea

from taskdeck.constants import COLUMN_ORDER, STATUS_LABELS, TITLE_INPUT_MAX_LENGTH
from taskdeck.core.models.enums import TaskStatus, TaskTag
from taskdeck.theme import TAG_CLASSES

if TYPE_CHECKING:
    from collections.abc import Sequence


class TitleInput(Input):
    """Task title input."""

    DEFAULT_PLACEHOLDER = "Enter task title"

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str | None = None,
        widget_id: str = "title-input",
        **kwargs,
    ) -> None:
        super().__init__(
            value=value,
            placeholder=placeholder or self.DEFAULT_PLACEHOLDER,
            max_length=TITLE_INPUT_MAX_LENGTH,
            id=widget_id,
            **kwargs,
        )


class DescriptionArea(TextArea):
    """Task description textarea."""

    def __init__(
        self,
        text: str = "",
        *,
        widget_id: str = "description-input",
        **kwargs,
    ) -> None:
        super().__init__(
            text=text,
            show_line_numbers=False,
            id=widget_id,
            **kwargs,
        )


class StatusSelect(Select[str]):
    """Task status dropdown; offers only the board's columns."""

    OPTIONS: Sequence[tuple[str, str]] = [
        (STATUS_LABELS[status], status.value) for status in COLUMN_ORDER
    ]

    def __init__(
        self,
        value: TaskStatus = TaskStatus.TODO,
        *,
        widget_id: str = "status-select",
        **kwargs,
    ) -> None:
        super().__init__(
            options=self.OPTIONS,
            value=value.value,
            allow_blank=False,
            id=widget_id,
            **kwargs,
        )


class TagToggle(Button):
    """On/off button for one tag of the vocabulary."""

    def __init__(self, tag: TaskTag, *, selected: bool = False, **kwargs) -> None:
        css_class = TAG_CLASSES[tag]
        super().__init__(
            tag.value,
            id=f"toggle-{css_class}",
            classes=f"tag-toggle {css_class}",
            **kwargs,
        )
        self.tag = tag
        self.set_class(selected, "selected")

    @property
    def selected(self) -> bool:
        return self.has_class("selected")
