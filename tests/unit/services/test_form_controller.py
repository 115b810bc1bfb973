"""
Unit Tests for the Note Form Controller.

Tests validation, the create/edit state machine and intent dispatch
against an in-memory store.
"""

from unittest.mock import MagicMock

import pytest

from notekeeper.core.exceptions import ConflictError, NotFoundError, ValidationError
from notekeeper.events.schemas import AddNote, DeleteNote, EditNote
from notekeeper.schemas.note import NOTE_FIELDS, NoteDraft
from notekeeper.services.form import (
    CREATING,
    Creating,
    Editing,
    NoteFormController,
    validate_draft,
)


def _fill(form: NoteFormController, draft: NoteDraft) -> None:
    for name in NOTE_FIELDS:
        form.update_field(name, getattr(draft, name))


class TestValidateDraft:
    """Tests for validate_draft."""

    def test_empty_draft_reports_every_field(self):
        """Should report all four required fields."""
        errors = validate_draft(NoteDraft())

        assert set(errors) == set(NOTE_FIELDS)
        assert errors["title"] == "Title is required."
        assert errors["description"] == "Description is required."
        assert errors["date"] == "Date is required."
        assert errors["priority"] == "Priority is required."

    @pytest.mark.parametrize("missing", NOTE_FIELDS)
    def test_reports_exactly_the_missing_field(self, complete_draft, missing):
        """Should key errors by the missing field only."""
        draft = complete_draft.model_copy(update={missing: ""})

        assert set(validate_draft(draft)) == {missing}

    def test_whitespace_only_counts_as_missing(self, complete_draft):
        draft = complete_draft.model_copy(update={"title": "   ", "description": "\t"})

        assert set(validate_draft(draft)) == {"title", "description"}

    def test_complete_draft_is_valid(self, complete_draft):
        assert validate_draft(complete_draft) == {}

    def test_rejects_malformed_date(self, complete_draft):
        """Should reject dates that are not YYYY-MM-DD calendar dates."""
        draft = complete_draft.model_copy(update={"date": "2026-13-01"})

        assert validate_draft(draft) == {"date": "Date must be a valid date (YYYY-MM-DD)."}

    @pytest.mark.parametrize("value", ["2026-1-5", "2026-01-5", "20260105"])
    def test_rejects_date_without_zero_padding(self, complete_draft, value):
        """Should only accept the zero-padded YYYY-MM-DD form."""
        draft = complete_draft.model_copy(update={"date": value})

        assert validate_draft(draft) == {"date": "Date must be a valid date (YYYY-MM-DD)."}

    def test_rejects_unknown_priority(self, complete_draft):
        draft = complete_draft.model_copy(update={"priority": "Priority.."})

        errors = validate_draft(draft)

        assert set(errors) == {"priority"}
        assert "high, medium, low" in errors["priority"]

    def test_does_not_modify_draft(self):
        draft = NoteDraft(title=" x ")
        before = draft.model_dump()

        validate_draft(draft)
        validate_draft(draft)

        assert draft.model_dump() == before


class TestUpdateField:
    """Tests for update_field."""

    def test_sets_field(self, form):
        form.update_field("title", "Water plants")

        assert form.draft.title == "Water plants"

    def test_clears_only_that_fields_error(self, form):
        """Should clear the title error and keep the others."""
        form.submit()
        assert set(form.errors) == set(NOTE_FIELDS)

        form.update_field("title", "X")

        assert "title" not in form.errors
        assert set(form.errors) == {"description", "date", "priority"}

    def test_unknown_field_raises(self, form):
        with pytest.raises(ValidationError):
            form.update_field("colour", "red")

    def test_id_is_not_editable(self, form):
        with pytest.raises(ValidationError):
            form.update_field("id", "99999")


class TestSubmitInvalid:
    """Tests for submitting an incomplete draft."""

    def test_returns_errors_without_dispatch(self, form, store):
        before = store.notes
        form.update_field("title", "Only a title")

        result = form.submit()

        assert not result.ok
        assert result.note is None
        assert set(result.errors) == {"description", "date", "priority"}
        assert store.notes == before

    def test_keeps_draft_and_mode(self, form):
        form.begin_edit_by_id("10001")
        form.update_field("description", "")

        form.submit()

        assert form.draft.title == "Buy milk"
        assert form.mode == Editing(target_id="10001")
        assert form.errors == {"description": "Description is required."}


class TestSubmitCreate:
    """Tests for creating a note."""

    def test_adds_exactly_one_note(self, form, store, complete_draft):
        existing_ids = store.ids()
        _fill(form, complete_draft)

        result = form.submit()

        assert result.ok
        assert len(store) == 3
        added = store.notes[-1]
        assert added == result.note
        assert added.id not in existing_ids
        assert added.id.isdigit() and len(added.id) == 5
        assert added.title == "Call plumber"
        assert added.priority == "medium"

    def test_unpadded_date_is_not_stored(self, form, store, complete_draft):
        _fill(form, complete_draft.model_copy(update={"date": "2026-1-5"}))

        result = form.submit()

        assert not result.ok
        assert set(result.errors) == {"date"}
        assert len(store) == 2

    def test_resets_form(self, form, complete_draft):
        _fill(form, complete_draft)

        form.submit()

        assert form.draft.is_empty()
        assert form.mode == CREATING
        assert form.errors == {}

    def test_dispatches_add_intent(self, form, store, complete_draft):
        seen = []
        store.subscribe(seen.append)
        _fill(form, complete_draft)

        form.submit()

        assert len(seen) == 1
        assert isinstance(seen[0], AddNote)
        assert seen[0].source == "form"

    def test_strips_surrounding_whitespace(self, form, store, complete_draft):
        _fill(form, complete_draft.model_copy(update={"title": "  Call plumber  "}))

        result = form.submit()

        assert result.note.title == "Call plumber"

    def test_id_conflict_propagates_and_keeps_draft(self, store, complete_draft):
        identity = MagicMock()
        identity.new_id.side_effect = ConflictError("exhausted")
        form = NoteFormController(store, identity=identity)
        _fill(form, complete_draft)
        before = store.notes

        with pytest.raises(ConflictError):
            form.submit()

        assert store.notes == before
        assert form.draft.title == "Call plumber"


class TestSubmitEdit:
    """Tests for editing a note."""

    def test_replaces_in_place(self, form, store, sample_notes):
        form.begin_edit_by_id("10001")
        form.update_field("title", "Buy oat milk")

        result = form.submit()

        assert result.ok
        assert [note.id for note in store.notes] == ["10001", "10002"]
        assert store.notes[0].title == "Buy oat milk"
        assert store.notes[0].description == sample_notes[0].description
        assert store.notes[1] == sample_notes[1]

    def test_dispatches_edit_intent(self, form, store):
        seen = []
        store.subscribe(seen.append)
        form.begin_edit_by_id("10002")

        form.submit()

        assert len(seen) == 1
        assert isinstance(seen[0], EditNote)
        assert seen[0].note.id == "10002"

    def test_unchanged_edit_is_idempotent(self, form, store):
        """begin_edit followed by submit leaves the store as it was."""
        before = store.notes

        form.begin_edit_by_id("10002")
        form.submit()

        assert store.notes == before

    def test_returns_to_creating(self, form):
        form.begin_edit_by_id("10002")

        form.submit()

        assert isinstance(form.mode, Creating)
        assert not form.is_editing
        assert form.draft.is_empty()

    def test_edit_of_deleted_note_changes_nothing(self, form, store, sample_notes):
        form.begin_edit_by_id("10001")
        form.delete("10001")

        result = form.submit()

        assert result.ok
        assert store.notes == (sample_notes[1],)


class TestBeginEdit:
    """Tests for entering edit mode."""

    def test_copies_note_into_draft(self, form, sample_notes):
        form.begin_edit(sample_notes[1])

        assert form.draft == NoteDraft.from_note(sample_notes[1])
        assert form.draft.id == "10002"
        assert form.mode == Editing(target_id="10002")

    def test_replaces_previous_target(self, form):
        form.begin_edit_by_id("10001")
        form.begin_edit_by_id("10002")

        assert form.mode == Editing(target_id="10002")
        assert form.draft.title == "Pay rent"

    def test_clears_errors(self, form):
        form.submit()

        form.begin_edit_by_id("10001")

        assert form.errors == {}

    def test_unknown_id_raises(self, form):
        with pytest.raises(NotFoundError):
            form.begin_edit_by_id("00000")


class TestResetAndDelete:
    """Tests for reset and delete."""

    def test_reset_leaves_edit_mode(self, form, store):
        before = store.notes
        form.begin_edit_by_id("10001")

        form.reset()

        assert form.mode == CREATING
        assert form.draft.is_empty()
        assert store.notes == before

    def test_delete_removes_note(self, form, store):
        seen = []
        store.subscribe(seen.append)

        form.delete("10001")

        assert [note.id for note in store.notes] == ["10002"]
        assert isinstance(seen[0], DeleteNote)

    def test_delete_unknown_id_leaves_store_unchanged(self, form, store):
        before = store.notes

        form.delete("99999")

        assert store.notes == before
        assert len(store) == 2

    def test_delete_does_not_touch_draft(self, form):
        form.begin_edit_by_id("10002")
        form.update_field("title", "Pay rent early")

        form.delete("10001")

        assert form.draft.title == "Pay rent early"
        assert form.mode == Editing(target_id="10002")
