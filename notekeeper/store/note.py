"""
Note Store.

In-memory, ordered collection of notes. The store is the single owner
of stored notes; it changes only through dispatch() of one of the three
note intents, and every dispatch runs to completion before returning.

Usage:
    from notekeeper.store.note import NoteStore

    store = NoteStore()
    store.dispatch(AddNote(note=note))
    snapshot = store.notes
"""

from collections.abc import Callable, Iterable

from notekeeper.core.exceptions import ConflictError, ValidationError
from notekeeper.core.logging import get_logger
from notekeeper.events.schemas import AddNote, DeleteNote, EditNote, NoteIntent
from notekeeper.schemas.note import Note

logger = get_logger(__name__)

Listener = Callable[[NoteIntent], None]


class NoteStore:
    """
    Ordered note collection applying add, edit and delete intents.

    Notes keep insertion order; edits replace an entry at its position.
    Readers get immutable tuple snapshots, so holding a snapshot across
    a dispatch never observes a partial update.
    """

    def __init__(self, initial: Iterable[Note] = ()) -> None:
        self._notes: list[Note] = []
        self._listeners: list[Listener] = []
        for note in initial:
            self._add(note)

    @property
    def notes(self) -> tuple[Note, ...]:
        """Current notes in insertion order."""
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def get(self, note_id: str) -> Note | None:
        """Get a note by id, returning None if not found."""
        index = self._index_of(note_id)
        return None if index is None else self._notes[index]

    def ids(self) -> set[str]:
        """Ids of every stored note."""
        return {note.id for note in self._notes}

    def dispatch(self, intent: NoteIntent) -> None:
        """
        Apply an intent and notify subscribers.

        Raises:
            ConflictError: If an AddNote carries an id already stored
            ValidationError: If the object is not a note intent
        """
        if isinstance(intent, AddNote):
            self._add(intent.note)
        elif isinstance(intent, EditNote):
            self._edit(intent.note)
        elif isinstance(intent, DeleteNote):
            self._delete(intent.note_id)
        else:
            raise ValidationError(
                "Unsupported intent",
                details={"intent": type(intent).__name__},
            )

        logger.debug(
            "Intent applied",
            extra={
                "intent_type": intent.intent_type,
                "intent_id": intent.intent_id,
                "source": intent.source,
                "count": len(self._notes),
            },
        )

        for listener in list(self._listeners):
            listener(intent)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with each applied intent.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _index_of(self, note_id: str) -> int | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None

    def _add(self, note: Note) -> None:
        if self._index_of(note.id) is not None:
            raise ConflictError(f"Note {note.id} already exists")
        self._notes.append(note)

    def _edit(self, note: Note) -> None:
        index = self._index_of(note.id)
        if index is None:
            logger.warning("Edit for unknown note ignored", extra={"note_id": note.id})
            return
        self._notes[index] = note

    def _delete(self, note_id: str) -> None:
        index = self._index_of(note_id)
        if index is not None:
            del self._notes[index]
