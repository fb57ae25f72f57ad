"""Core task-draft lifecycle: models, draft container, validation, commit, dialog."""

from taskdeck.core.models import entities, enums

__all__ = [
    "entities",
    "enums",
]
