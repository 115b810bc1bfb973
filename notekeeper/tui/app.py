"""
NoteKeeper TUI.

Terminal interface over the note form controller and filtered view:
search and priority filter on top, the note form below, then one card
per matching note with Edit and Delete buttons.

Usage:
    from notekeeper.tui.app import NoteKeeperApp

    NoteKeeperApp(store).run()
"""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from notekeeper.core.logging import get_logger, log_with_source, setup_logging
from notekeeper.events.schemas import NoteIntent
from notekeeper.schemas.note import NOTE_FIELDS, Note, Priority
from notekeeper.services.form import NoteFormController
from notekeeper.services.view import empty_placeholder, filter_notes
from notekeeper.store.note import NoteStore

logger = get_logger(__name__)

PRIORITY_OPTIONS = [(value.title(), value) for value in Priority.values()]

TEXT_FIELDS = ("title", "description", "date")


def _select_value(value: object) -> str:
    """Map a Select value to a draft string; the blank choice becomes ''."""
    return value if isinstance(value, str) else ""


class NoteButton(Button):
    """Card button remembering which note it acts on."""

    def __init__(self, label: str, note_id: str, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.note_id = note_id


class NoteCard(Vertical):
    """One note with its edit and delete buttons."""

    def __init__(self, note: Note) -> None:
        super().__init__(classes="note-card")
        self.note = note

    def compose(self) -> ComposeResult:
        note = self.note
        yield Static(
            Text.assemble(
                ("Title: ", "bold"), note.title, "\n",
                ("Description: ", "bold"), note.description, "\n",
                ("Date: ", "bold"), note.date, "\n",
                ("Priority: ", "bold"), note.priority,
            ),
        )
        with Horizontal(classes="card-actions"):
            yield NoteButton("Edit", note.id, classes="edit")
            yield NoteButton("Delete", note.id, variant="error", classes="delete")


class NoteKeeperApp(App):
    """Single-screen note manager."""

    TITLE = "NoteKeeper"
    SUB_TITLE = "Notes with priorities and dates"

    CSS = """
    #filters {
        height: auto;
        margin: 0 1;
    }

    #filters Input, #filters Select {
        width: 1fr;
    }

    #note-form {
        height: auto;
        margin: 1 1;
        padding: 0 1;
        border: solid $primary;
    }

    .field-error {
        color: $error;
        height: auto;
    }

    #note-list {
        height: 1fr;
        margin: 0 1;
    }

    .note-card {
        height: auto;
        margin: 0 0 1 0;
        padding: 0 1;
        border: solid $success;
    }

    .card-actions {
        height: auto;
    }

    .placeholder {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "submit", "Save"),
        Binding("escape", "clear_form", "Clear"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: NoteStore | None = None,
        form: NoteFormController | None = None,
    ) -> None:
        super().__init__()
        self.store = store if store is not None else NoteStore()
        self.form = form or NoteFormController(self.store)
        self.search_query = ""
        self.priority_filter = ""
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="filters"):
            yield Input(placeholder="Search by title", id="search")
            yield Select(PRIORITY_OPTIONS, prompt="Filter by Priority", id="priority-filter")
        with Vertical(id="note-form"):
            for name in TEXT_FIELDS:
                placeholder = "Date (YYYY-MM-DD)" if name == "date" else name.title()
                yield Input(placeholder=placeholder, id=name)
                yield Label("", id=f"{name}-error", classes="field-error")
            yield Select(PRIORITY_OPTIONS, prompt="Priority..", id="priority")
            yield Label("", id="priority-error", classes="field-error")
            yield Button("Add", id="submit", variant="primary")
        yield VerticalScroll(id="note-list")
        yield Footer()

    async def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self._on_store_changed)
        log_with_source(logger, "tui", "info", "TUI started", notes=len(self.store))
        await self.refresh_notes()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()

    @property
    def visible_notes(self) -> list[Note]:
        """Notes passing the current search and priority filter."""
        return filter_notes(self.store.notes, self.search_query, self.priority_filter)

    async def refresh_notes(self) -> None:
        note_list = self.query_one("#note-list", VerticalScroll)
        await note_list.remove_children()
        notes = self.visible_notes
        if notes:
            await note_list.mount_all([NoteCard(note) for note in notes])
        else:
            await note_list.mount(Static(empty_placeholder(), classes="placeholder"))

    def _on_store_changed(self, intent: NoteIntent) -> None:
        self.call_later(self.refresh_notes)

    # -------------------------------------------------------------------------
    # Input events
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        name = event.input.id
        if name == "search":
            self.search_query = event.value
            self.call_later(self.refresh_notes)
        elif name in TEXT_FIELDS:
            self.form.update_field(name, event.value)
            self._show_errors()

    def on_select_changed(self, event: Select.Changed) -> None:
        value = _select_value(event.value)
        if event.select.id == "priority-filter":
            self.priority_filter = value
            self.call_later(self.refresh_notes)
        elif event.select.id == "priority":
            self.form.update_field("priority", value)
            self._show_errors()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.id == "submit":
            self.action_submit()
        elif isinstance(button, NoteButton) and button.has_class("edit"):
            self.form.begin_edit_by_id(button.note_id)
            self._load_form()
        elif isinstance(button, NoteButton) and button.has_class("delete"):
            self.form.delete(button.note_id)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_submit(self) -> None:
        result = self.form.submit()
        if result.ok:
            self._load_form()
            if self.store.get(result.note.id) is None:
                self.notify(f"Note {result.note.id} no longer exists", severity="warning")
            else:
                self.notify(f"Saved note {result.note.id}")
        self._show_errors()

    def action_clear_form(self) -> None:
        self.form.reset()
        self._load_form()

    def _load_form(self) -> None:
        """Copy the controller draft into the form widgets."""
        draft = self.form.draft
        for name in TEXT_FIELDS:
            self.query_one(f"#{name}", Input).value = getattr(draft, name)
        priority = self.query_one("#priority", Select)
        if draft.priority:
            priority.value = draft.priority
        else:
            priority.clear()
        self.query_one("#submit", Button).label = "Update" if self.form.is_editing else "Add"
        self._show_errors()

    def _show_errors(self) -> None:
        errors = self.form.errors
        for name in NOTE_FIELDS:
            self.query_one(f"#{name}-error", Label).update(errors.get(name, ""))


def main(debug: bool = False) -> None:
    """Run the TUI with file-only logging so records do not draw over the screen."""
    setup_logging("tui", level="DEBUG" if debug else None)
    NoteKeeperApp().run()
