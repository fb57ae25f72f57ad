"""Service layer interfaces."""

from taskdeck.core.services.board import BoardService, InMemoryBoard

__all__ = ["BoardService", "InMemoryBoard"]
