"""
Note Form Controller.

Holds the note form draft, the create/edit mode and per-field validation
messages, and turns a valid submission into an add or edit intent.

Validation failure is a normal outcome: submit() returns the messages in
a SubmitResult and leaves the draft as it was.

Usage:
    from notekeeper.services.form import NoteFormController

    form = NoteFormController(store)
    form.update_field("title", "Pay rent")
    result = form.submit()
    if not result.ok:
        show(result.errors)
"""

from dataclasses import dataclass, field

from notekeeper.core.exceptions import NotFoundError, ValidationError
from notekeeper.events.schemas import AddNote, DeleteNote, EditNote
from notekeeper.schemas.note import NOTE_FIELDS, Note, NoteDraft, Priority, parse_iso_date
from notekeeper.services.base import BaseService
from notekeeper.services.identity import IdentityGenerator
from notekeeper.store.note import NoteStore


@dataclass(frozen=True)
class Creating:
    """Form is composing a new note."""


@dataclass(frozen=True)
class Editing:
    """Form is editing the stored note with target_id."""

    target_id: str


DraftMode = Creating | Editing

CREATING = Creating()


@dataclass
class SubmitResult:
    """Outcome of a form submission."""

    note: Note | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_draft(draft: NoteDraft) -> dict[str, str]:
    """
    Check a draft for required and well-formed fields.

    Args:
        draft: Draft to check; never modified

    Returns:
        Mapping of field name to message, empty when the draft is valid
    """
    errors: dict[str, str] = {}

    for name in NOTE_FIELDS:
        if not getattr(draft, name).strip():
            errors[name] = f"{name.capitalize()} is required."

    if "date" not in errors and parse_iso_date(draft.date) is None:
        errors["date"] = "Date must be a valid date (YYYY-MM-DD)."
    if "priority" not in errors and draft.priority not in Priority.values():
        errors["priority"] = "Priority must be one of: " + ", ".join(Priority.values()) + "."

    return errors


class NoteFormController(BaseService):
    """
    Form state machine for creating and editing notes.

    Two modes: Creating (initial) and Editing(target_id). begin_edit()
    enters Editing; a successful submit() or reset() returns to Creating.
    Deleting a note is independent of the mode and never touches the draft.
    """

    def __init__(
        self,
        store: NoteStore,
        identity: IdentityGenerator | None = None,
    ) -> None:
        super().__init__(store)
        self.identity = identity or IdentityGenerator(store)
        self._draft = NoteDraft()
        self._mode: DraftMode = CREATING
        self._errors: dict[str, str] = {}

    @property
    def draft(self) -> NoteDraft:
        """Copy of the current draft."""
        return self._draft.model_copy()

    @property
    def mode(self) -> DraftMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return isinstance(self._mode, Editing)

    @property
    def errors(self) -> dict[str, str]:
        """Copy of the current validation messages."""
        return dict(self._errors)

    def update_field(self, name: str, value: str) -> None:
        """
        Set one draft field and clear its validation message.

        Raises:
            ValidationError: If name is not an editable note field
        """
        if name not in NOTE_FIELDS:
            raise ValidationError(
                f"Unknown note field: {name}",
                details={"field": name, "allowed": list(NOTE_FIELDS)},
            )
        self._draft = self._draft.model_copy(update={name: value})
        self._errors.pop(name, None)

    def begin_edit(self, note: Note) -> None:
        """Load a copy of the note into the draft and enter edit mode."""
        self._log_debug("Editing note", note_id=note.id)
        self._draft = NoteDraft.from_note(note)
        self._mode = Editing(target_id=note.id)
        self._errors = {}

    def begin_edit_by_id(self, note_id: str) -> None:
        """
        Look a note up in the store and load it for editing.

        Raises:
            NotFoundError: If no stored note has this id
        """
        note = self.store.get(note_id)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        self.begin_edit(note)

    def submit(self) -> SubmitResult:
        """
        Validate the draft and dispatch it to the store.

        Returns:
            SubmitResult with the stored note, or with the validation
            messages when the draft is incomplete

        Raises:
            ConflictError: If no unique id could be generated
        """
        errors = validate_draft(self._draft)
        if errors:
            self._errors = errors
            self._log_debug("Submission rejected", fields=sorted(errors))
            return SubmitResult(errors=dict(errors))

        if isinstance(self._mode, Editing):
            note = self._draft.to_note(self._mode.target_id)
            self._log_operation("Updating note", note_id=note.id)
            self.store.dispatch(EditNote(source="form", note=note))
        else:
            note = self._draft.to_note(self.identity.new_id())
            self._log_operation("Creating note", note_id=note.id, title=note.title)
            self.store.dispatch(AddNote(source="form", note=note))

        self.reset()
        return SubmitResult(note=note)

    def reset(self) -> None:
        """Discard the draft and return to creating a new note."""
        self._draft = NoteDraft()
        self._mode = CREATING
        self._errors = {}

    def delete(self, note_id: str) -> None:
        """Delete a stored note. Unknown ids are ignored."""
        self._log_operation("Deleting note", note_id=note_id)
        self.store.dispatch(DeleteNote(source="form", note_id=note_id))
