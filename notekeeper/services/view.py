"""
Filtered Note View.

Derives the notes to display from a store snapshot and two independent
criteria: a case-insensitive title search and an exact priority match.
Both must hold; store order is preserved. No state is kept between calls.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from notekeeper.core.config import get_app_config
from notekeeper.core.exceptions import ValidationError
from notekeeper.schemas.note import Note, Priority


class NoteFilter(BaseModel):
    """Search and priority criteria for the note list."""

    search_query: str = ""
    priority_filter: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("priority_filter")
    @classmethod
    def _check_priority(cls, value: str) -> str:
        if value and value not in Priority.values():
            raise ValueError(f"priority_filter must be empty or one of {Priority.values()}")
        return value

    def matches(self, note: Note) -> bool:
        if self.search_query and self.search_query.lower() not in note.title.lower():
            return False
        if self.priority_filter and note.priority != self.priority_filter:
            return False
        return True


def filter_notes(
    notes: Iterable[Note],
    search_query: str = "",
    priority_filter: str = "",
) -> list[Note]:
    """
    Select the notes matching both the title search and the priority filter.

    Args:
        notes: Store snapshot, in store order
        search_query: Case-insensitive title substring; empty matches all
        priority_filter: "", "high", "medium" or "low"; empty matches all

    Returns:
        Matching notes in store order

    Raises:
        ValidationError: If priority_filter is not an accepted value
    """
    if priority_filter and priority_filter not in Priority.values():
        raise ValidationError(
            f"Unknown priority filter: {priority_filter}",
            details={"priority_filter": priority_filter, "allowed": list(Priority.values())},
        )
    criteria = NoteFilter(search_query=search_query, priority_filter=priority_filter)
    return [note for note in notes if criteria.matches(note)]


def empty_placeholder() -> str:
    """Text shown in place of the note list when nothing matches."""
    return get_app_config().notes.view.empty_placeholder
