"""Pytest fixtures for taskdeck tests."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="taskdeck-tests-"))
os.environ["TASKDECK_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["TASKDECK_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

from taskdeck.core.dialog import TaskDialog  # noqa: E402
from taskdeck.core.models.entities import Task  # noqa: E402
from taskdeck.core.models.enums import TaskStatus, TaskTag  # noqa: E402

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def sample_task() -> Task:
    """The task used by the edit scenarios."""
    return Task(
        id=1,
        title="X",
        description="Y",
        status=TaskStatus.DOING,
        tags=[TaskTag.TESTING],
        created_at=datetime(2024, 1, 2, 3, 4, 5),
        updated_at=datetime(2024, 1, 2, 3, 4, 5),
    )


@pytest.fixture
def callbacks() -> MagicMock:
    """Board and notifier collaborators recorded on one mock."""
    mock = MagicMock()
    mock.on_create.return_value = None
    mock.on_update.return_value = None
    return mock


@pytest.fixture
def dialog(callbacks: MagicMock) -> TaskDialog:
    return TaskDialog(
        notifier=callbacks.notifier,
        on_open_change=callbacks.on_open_change,
        on_create=callbacks.on_create,
        on_update=callbacks.on_update,
    )
