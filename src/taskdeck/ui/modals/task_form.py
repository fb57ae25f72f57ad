"""Task form modal for creating and editing tasks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from textual import on
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static, TextArea

from taskdeck.core.dialog import DialogMode
from taskdeck.core.models.enums import TAG_VOCABULARY, TaskStatus
from taskdeck.ui.widgets.base import DescriptionArea, StatusSelect, TagToggle, TitleInput

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from taskdeck.core.dialog import TaskDialog
    from taskdeck.core.models.entities import Task


class FormOutcome(Enum):
    SAVED = auto()
    DELETED = auto()


@dataclass(frozen=True, slots=True)
class TaskFormResult:
    outcome: FormOutcome
    task: Task | None = None


class TaskFormModal(ModalScreen[TaskFormResult | None]):
    """Modal screen rendering an open ``TaskDialog``.

    Widget changes are forwarded to the dialog; the modal dismisses once the
    dialog has closed.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "submit", "Save", priority=True),
        Binding("ctrl+d", "delete", "Delete", priority=True),
    ]

    def __init__(self, dialog: TaskDialog, *, show_tag_hints: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self.dialog = dialog
        self.is_edit = dialog.mode == DialogMode.EDIT
        self._show_tag_hints = show_tag_hints

    def compose(self) -> ComposeResult:
        draft = self.dialog.draft
        title = "Edit Task" if self.is_edit else "Create New Task"

        with Container(id="task-form-container"):
            yield Label(title, classes="modal-title")

            with Vertical(classes="form-field"):
                yield Label("Title", classes="form-label")
                yield TitleInput(value=draft.title)

            with Vertical(classes="form-field description-field"):
                yield Label("Description (optional)", classes="form-label")
                yield DescriptionArea(text=draft.description)

            with Vertical(classes="form-field"):
                yield Label("Status", classes="form-label")
                yield StatusSelect(value=draft.status)

            with Vertical(classes="form-field"):
                yield Label("Tags (optional)", classes="form-label")
                with Horizontal(classes="tag-row"):
                    for tag in TAG_VOCABULARY:
                        yield TagToggle(tag, selected=draft.has_tag(tag))
                if self._show_tag_hints:
                    yield Static("Press a tag to select or clear it", classes="form-hint")

            with Horizontal(classes="button-row"):
                if self.is_edit:
                    yield Button("Delete", variant="error", id="delete-btn")
                yield Static("", classes="header-spacer")
                yield Button("Cancel", variant="default", id="cancel-btn")
                yield Button(
                    "Update" if self.is_edit else "Create Task",
                    variant="primary",
                    id="save-btn",
                )

    def on_mount(self) -> None:
        self.query_one(TitleInput).focus()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        # Outside edit mode ctrl+d falls through to the focused text field.
        if action == "delete":
            return self.is_edit
        return True

    @on(Input.Changed, "#title-input")
    def on_title_changed(self, event: Input.Changed) -> None:
        self.dialog.set_title(event.value)

    @on(TextArea.Changed, "#description-input")
    def on_description_changed(self, event: TextArea.Changed) -> None:
        self.dialog.set_description(event.text_area.text)

    @on(Select.Changed, "#status-select")
    def on_status_changed(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self.dialog.set_status(TaskStatus(str(event.value)))

    @on(Button.Pressed, ".tag-toggle")
    def on_tag_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        toggle = event.button
        assert isinstance(toggle, TagToggle)
        self.dialog.toggle_tag(toggle.tag)
        toggle.set_class(self.dialog.draft.has_tag(toggle.tag), "selected")

    @on(Button.Pressed, "#save-btn")
    def on_save(self) -> None:
        self.action_submit()

    @on(Button.Pressed, "#cancel-btn")
    def on_cancel(self) -> None:
        self.action_cancel()

    @on(Button.Pressed, "#delete-btn")
    def on_delete(self) -> None:
        self.action_delete()

    def action_submit(self) -> None:
        """Submit the form; stays open when the draft is rejected."""
        if self.dialog.submit():
            self.dismiss(TaskFormResult(FormOutcome.SAVED))
        else:
            self.query_one(TitleInput).focus()

    def action_cancel(self) -> None:
        """Cancel and close modal."""
        self.dialog.cancel()
        self.dismiss(None)

    def action_delete(self) -> None:
        """Hand the edited task back for removal."""
        task = self.dialog.delete()
        if task is not None:
            self.dismiss(TaskFormResult(FormOutcome.DELETED, task))
