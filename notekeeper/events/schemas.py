"""
Intent Schemas.

Standardized intent envelope and the three note store intents.
Every mutation of the note store is described by one of these envelopes
and applied through NoteStore.dispatch().

Naming convention for intent_type: domain.entity.action (dot notation)

Usage:
    from notekeeper.events.schemas import AddNote

    intent = AddNote(source="form", note=note)
    store.dispatch(intent)
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from notekeeper.core.utils import utc_now
from notekeeper.schemas.note import Note


class IntentEnvelope(BaseModel):
    """Base intent envelope. All intents inherit from this.

    Fields:
        intent_id: Unique intent identifier (auto-generated UUID)
        intent_type: Intent type in dot notation (e.g. notes.note.add)
        timestamp: ISO 8601 UTC timestamp
        source: Module that issued the intent
    """

    intent_id: str = Field(default_factory=lambda: str(uuid4()))
    intent_type: str
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    source: str = "internal"

    model_config = ConfigDict(frozen=True)


class AddNote(IntentEnvelope):
    """Append a new note to the store."""

    intent_type: str = "notes.note.add"
    note: Note


class EditNote(IntentEnvelope):
    """Replace the stored note sharing this note's id, in place."""

    intent_type: str = "notes.note.edit"
    note: Note


class DeleteNote(IntentEnvelope):
    """Remove the note with this id; no-op when absent."""

    intent_type: str = "notes.note.delete"
    note_id: str


NoteIntent = AddNote | EditNote | DeleteNote
