"""
Identity Generator.

Produces fixed-length numeric ids for new notes. Each candidate is checked
against the ids already in the store and regenerated on collision, so the
small id space never yields a duplicate silently.
"""

import secrets
import string

from notekeeper.core.config import get_app_config
from notekeeper.core.exceptions import ConflictError
from notekeeper.services.base import BaseService
from notekeeper.store.note import NoteStore


class IdentityGenerator(BaseService):
    """Generates note ids unique within the injected store."""

    def __init__(
        self,
        store: NoteStore,
        length: int | None = None,
        max_attempts: int | None = None,
    ) -> None:
        super().__init__(store)
        if length is None or max_attempts is None:
            identity = get_app_config().notes.identity
            length = identity.length if length is None else length
            max_attempts = identity.max_attempts if max_attempts is None else max_attempts
        self.length = length
        self.max_attempts = max_attempts

    def candidate(self) -> str:
        """Return a random numeric string of the configured length."""
        return "".join(secrets.choice(string.digits) for _ in range(self.length))

    def new_id(self) -> str:
        """
        Generate an id not used by any note in the store.

        Returns:
            Numeric id string

        Raises:
            ConflictError: If every attempt collided with an existing id
        """
        taken = self.store.ids()
        for attempt in range(1, self.max_attempts + 1):
            note_id = self.candidate()
            if note_id not in taken:
                if attempt > 1:
                    self._log_debug("Id collision resolved", attempts=attempt)
                return note_id

        self._logger.warning(
            "Id space exhausted",
            extra={"length": self.length, "attempts": self.max_attempts, "stored": len(taken)},
        )
        raise ConflictError(
            f"Could not generate a unique id after {self.max_attempts} attempts"
        )
