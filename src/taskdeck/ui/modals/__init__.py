"""Modal screens for the taskdeck TUI."""

from taskdeck.ui.modals.task_form import FormOutcome, TaskFormModal, TaskFormResult

__all__ = ["FormOutcome", "TaskFormModal", "TaskFormResult"]
