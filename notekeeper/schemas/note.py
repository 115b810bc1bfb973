"""
Note Schemas.

Pydantic models for stored notes and for the editable form draft.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOTE_FIELDS = ("title", "description", "date", "priority")
"""Editable note fields, in form order."""


class Priority(str, Enum):
    """Fixed set of note priorities."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


def parse_iso_date(value: str) -> date | None:
    """
    Parse a YYYY-MM-DD string, returning None when it is not a calendar date.

    Only the canonical zero-padded form is accepted, so "2026-1-5" and
    compact forms such as "20260105" are rejected.
    """
    value = value.strip()
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return None
    if parsed.isoformat() != value:
        return None
    return parsed


class Note(BaseModel):
    """
    A stored note.

    Every field is required and non-empty. Instances are immutable;
    edits replace the note in the store with a new instance carrying
    the same id.
    """

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque note identifier, assigned at creation",
        examples=["48213"],
    )
    title: str = Field(
        ...,
        min_length=1,
        description="Note title",
        examples=["Pay rent"],
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Note description",
        examples=["Transfer before the 5th"],
    )
    date: str = Field(
        ...,
        description="Calendar date as an ISO string (YYYY-MM-DD)",
        examples=["2026-10-18"],
    )
    priority: Priority = Field(
        ...,
        description="Note priority",
        examples=["high"],
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        use_enum_values=True,
    )

    @field_validator("date")
    @classmethod
    def _check_iso_date(cls, value: str) -> str:
        if parse_iso_date(value) is None:
            raise ValueError("date must be a calendar date in YYYY-MM-DD form")
        return value

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"


class NoteDraft(BaseModel):
    """
    In-progress form state.

    Shape-identical to Note, but any field may be empty. The id is empty
    for a new note and copied from the edited note in edit mode.
    """

    id: str = ""
    title: str = ""
    description: str = ""
    date: str = ""
    priority: str = ""

    @classmethod
    def from_note(cls, note: Note) -> "NoteDraft":
        """Build a draft holding a copy of every field of the note."""
        return cls(**note.model_dump())

    def to_note(self, note_id: str) -> Note:
        """Convert a validated draft into a Note under the given id."""
        return Note(
            id=note_id,
            title=self.title,
            description=self.description,
            date=self.date,
            priority=self.priority,
        )

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in ("id", *NOTE_FIELDS))
