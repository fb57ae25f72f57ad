"""Keybindings for the taskdeck TUI, using Textual's Binding class directly."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("f12", "export_debug_log", "Export log", show=False),
]

KANBAN_BINDINGS: list[BindingType] = [
    Binding("n", "new_task", "New"),
    Binding("e", "edit_task", "Edit"),
    Binding("enter", "edit_task", "Edit", show=False),
    Binding("x", "delete_task", "Delete"),
    # Navigation - vim style
    Binding("h", "focus_left", "Left", show=False),
    Binding("j", "focus_down", "Down", show=False),
    Binding("k", "focus_up", "Up", show=False),
    Binding("l", "focus_right", "Right", show=False),
    # Navigation - arrow keys
    Binding("left", "focus_left", "Left", show=False),
    Binding("right", "focus_right", "Right", show=False),
    Binding("down", "focus_down", "Down", show=False),
    Binding("up", "focus_up", "Up", show=False),
]
