"""Widget components for the taskdeck TUI."""

from taskdeck.ui.widgets.base import DescriptionArea, StatusSelect, TagToggle, TitleInput
from taskdeck.ui.widgets.card import TaskCard
from taskdeck.ui.widgets.column import KanbanColumn

__all__ = [
    "DescriptionArea",
    "KanbanColumn",
    "StatusSelect",
    "TagToggle",
    "TaskCard",
    "TitleInput",
]
