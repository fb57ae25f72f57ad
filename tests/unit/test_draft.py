"""Unit tests for the draft value and its container."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taskdeck.core.draft import DraftContainer, TaskDraft
from taskdeck.core.models.enums import TAG_VOCABULARY, TaskStatus, TaskTag

pytestmark = pytest.mark.unit

tag_selections = st.lists(st.sampled_from(TAG_VOCABULARY), unique=True).map(tuple)


class TestTaskDraft:
    def test_defaults_are_empty_for_status(self):
        draft = TaskDraft.defaults(TaskStatus.DONE)

        assert draft == TaskDraft(title="", description="", status=TaskStatus.DONE, tags=())

    def test_from_task_copies_fields(self, sample_task):
        draft = TaskDraft.from_task(sample_task)

        assert draft.title == "X"
        assert draft.description == "Y"
        assert draft.status == TaskStatus.DOING
        assert draft.tags == (TaskTag.TESTING,)

    def test_from_task_without_tags_has_empty_selection(self, sample_task):
        task = sample_task.model_copy(update={"tags": None})

        assert TaskDraft.from_task(task).tags == ()

    def test_from_task_does_not_share_tag_storage(self, sample_task):
        draft = TaskDraft.from_task(sample_task)
        assert sample_task.tags is not None
        sample_task.tags.append(TaskTag.DEV)

        assert draft.tags == (TaskTag.TESTING,)

    def test_setters_store_text_verbatim(self):
        draft = TaskDraft().with_title("  padded  ").with_description("\n body \n")

        assert draft.title == "  padded  "
        assert draft.description == "\n body \n"

    def test_transitions_leave_original_untouched(self):
        original = TaskDraft()
        original.with_title("new").with_tag_toggled(TaskTag.DEV)

        assert original == TaskDraft()

    def test_toggle_appends_in_selection_order(self):
        draft = TaskDraft().with_tag_toggled(TaskTag.DEV).with_tag_toggled(TaskTag.DESIGN)

        assert draft.tags == (TaskTag.DEV, TaskTag.DESIGN)

    def test_toggle_removes_selected_tag_positionally(self):
        draft = TaskDraft(tags=(TaskTag.DESIGN, TaskTag.UI_UX, TaskTag.DEV))

        assert draft.with_tag_toggled(TaskTag.UI_UX).tags == (TaskTag.DESIGN, TaskTag.DEV)

    def test_retoggle_moves_tag_to_end(self):
        draft = TaskDraft(tags=(TaskTag.DESIGN, TaskTag.DEV))

        toggled = draft.with_tag_toggled(TaskTag.DESIGN).with_tag_toggled(TaskTag.DESIGN)

        assert toggled.tags == (TaskTag.DEV, TaskTag.DESIGN)

    @given(selection=tag_selections, tag=st.sampled_from(TAG_VOCABULARY))
    def test_double_toggle_restores_membership(self, selection, tag):
        draft = TaskDraft(tags=selection)

        toggled = draft.with_tag_toggled(tag).with_tag_toggled(tag)

        assert set(toggled.tags) == set(selection)
        assert len(toggled.tags) == len(selection)

    def test_draft_is_serializable(self):
        draft = TaskDraft(title="t", tags=(TaskTag.UI_UX,))

        assert draft.model_dump(mode="json") == {
            "title": "t",
            "description": "",
            "status": "todo",
            "tags": ["UI/UX"],
        }


class TestDraftContainer:
    def test_setters_replace_fields(self):
        container = DraftContainer()

        container.set_title("Title")
        container.set_description("Body")
        container.set_status(TaskStatus.DONE)
        container.toggle_tag(TaskTag.TESTING)

        assert container.draft == TaskDraft(
            title="Title",
            description="Body",
            status=TaskStatus.DONE,
            tags=(TaskTag.TESTING,),
        )

    def test_reset_replaces_whole_draft(self):
        container = DraftContainer(TaskDraft(title="old", tags=(TaskTag.DEV,)))

        container.reset(TaskDraft.defaults(TaskStatus.DOING))

        assert container.draft == TaskDraft.defaults(TaskStatus.DOING)
