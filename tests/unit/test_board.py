"""Unit tests for the in-memory board."""

from __future__ import annotations

import pytest

from taskdeck.core.errors import TaskNotFoundError
from taskdeck.core.models.enums import TaskStatus, TaskTag
from taskdeck.core.services.board import InMemoryBoard

pytestmark = pytest.mark.unit


@pytest.fixture
def board() -> InMemoryBoard:
    return InMemoryBoard()


def test_create_assigns_id_and_timestamps(board):
    task = board.create_task("Title", "", TaskStatus.DOING, [TaskTag.DEV])

    assert task.id
    assert task.created_at is not None
    assert task.updated_at == task.created_at
    assert board.get_task(task.id) == task
    assert task.tags == [TaskTag.DEV]


def test_create_without_tags_leaves_field_absent(board):
    task = board.create_task("Title", "", TaskStatus.TODO)

    assert task.tags is None


def test_tasks_grouped_by_status(board):
    done = board.create_task("done", "", TaskStatus.DONE)
    todo = board.create_task("todo", "", TaskStatus.TODO)

    assert board.tasks_by_status(TaskStatus.TODO) == [todo]
    assert board.all_tasks() == [todo, done]


def test_update_replaces_task(board):
    task = board.create_task("Title", "", TaskStatus.TODO)

    stored = board.update_task(task.model_copy(update={"status": TaskStatus.DONE}))

    assert board.get_task(task.id) == stored
    assert stored.status == TaskStatus.DONE
    assert stored.created_at == task.created_at


def test_update_unknown_task_raises(board, sample_task):
    with pytest.raises(TaskNotFoundError, match="Task 1 not found"):
        board.update_task(sample_task)


def test_delete_removes_task_once(board):
    task = board.create_task("Title", "", TaskStatus.TODO)

    assert board.delete_task(task.id)
    assert not board.delete_task(task.id)
    assert board.get_task(task.id) is None


def test_seeded_board_keeps_tasks(sample_task):
    board = InMemoryBoard([sample_task])

    assert board.tasks_by_status(TaskStatus.DOING) == [sample_task]
