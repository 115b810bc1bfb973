"""
Base Service.

Base class for all services providing common patterns for business logic.
Services receive the note store explicitly and never reach for a
process-wide instance.

Usage:
    from notekeeper.services.base import BaseService

    class ArchiveService(BaseService):
        def __init__(self, store: NoteStore) -> None:
            super().__init__(store)

        def purge(self, note_id: str) -> None:
            self._log_operation("Purging note", note_id=note_id)
            self.store.dispatch(DeleteNote(note_id=note_id))
"""

from typing import Any

from notekeeper.core.logging import get_logger
from notekeeper.store.note import NoteStore


class BaseService:
    """
    Base class for all services.

    Provides:
    - Injected note store access
    - Logging context

    Subclasses should:
    - Call super().__init__(store) in their __init__
    - Implement business logic methods
    """

    def __init__(self, store: NoteStore) -> None:
        """
        Initialize the service with a note store.

        Args:
            store: Note store the service reads and dispatches to
        """
        self._store = store
        self._logger = get_logger(self.__class__.__module__)

    @property
    def store(self) -> NoteStore:
        """Get the note store."""
        return self._store

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
