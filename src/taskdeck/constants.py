"""Display constants and user-facing notice texts."""

from taskdeck.core.models.enums import DraftError, TaskStatus

CARD_TITLE_MAX_LENGTH = 24
CARD_DESC_MAX_LENGTH = 24
TITLE_INPUT_MAX_LENGTH = 200

MAX_LOG_MESSAGE_LENGTH = 4096

COLUMN_ORDER = [
    TaskStatus.TODO,
    TaskStatus.DOING,
    TaskStatus.DONE,
]

STATUS_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.DOING: "In Progress",
    TaskStatus.DONE: "Completed",
}

DRAFT_ERROR_MESSAGES = {
    DraftError.EMPTY_TITLE: "Please enter a task title",
}

NOTICE_TASK_CREATED = "Task created successfully"
NOTICE_TASK_UPDATED = "Task updated successfully"
NOTICE_TASK_DELETED = "Task deleted successfully"
