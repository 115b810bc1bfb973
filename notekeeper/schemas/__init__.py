# Pydantic schemas package
from notekeeper.schemas.note import (
    NOTE_FIELDS,
    Note,
    NoteDraft,
    Priority,
)

__all__ = [
    "NOTE_FIELDS",
    "Note",
    "NoteDraft",
    "Priority",
]
