"""Shared Textual theme and tag styling for taskdeck."""

from __future__ import annotations

from textual.theme import Theme

from taskdeck.core.models.enums import TaskTag

TASKDECK_THEME = Theme(
    name="taskdeck",
    primary="#6c8cff",  # Periwinkle - primary actions
    secondary="#d4a84b",  # Amber - focus accents
    accent="#4ec9b0",  # Teal
    foreground="#c5cdd9",
    background="#10131a",
    surface="#181c25",
    panel="#1f2430",
    warning="#e6c07b",
    error="#e85535",
    success="#3fb58e",
    dark=True,
    variables={
        "border": "#2a3342",
        "border-blurred": "#2a334280",
        "text-muted": "#5c6773",
        "input-cursor-background": "#d4a84b",
        "input-selection-background": "#6c8cff33",
        "footer-key-foreground": "#5c6773",
        "footer-key-background": "transparent",
    },
)

# Tag -> CSS class; the colors live in styles/taskdeck.tcss
TAG_CLASSES: dict[TaskTag, str] = {
    TaskTag.DESIGN: "tag-design",
    TaskTag.UI_UX: "tag-uiux",
    TaskTag.DEV: "tag-dev",
    TaskTag.TESTING: "tag-testing",
}
