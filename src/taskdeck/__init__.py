"""taskdeck: a kanban board TUI for composing and editing tasks."""

__version__ = "0.1.0"
