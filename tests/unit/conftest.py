"""
Unit Test Fixtures.

Fixtures for unit tests - collaborators are mocked or in-memory.
Unit tests should be fast and isolated.
"""

from unittest.mock import MagicMock

import pytest

from notekeeper.services.form import NoteFormController
from notekeeper.services.identity import IdentityGenerator
from notekeeper.store.note import NoteStore


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def identity(store: NoteStore) -> IdentityGenerator:
    """Identity generator bound to the sample store."""
    return IdentityGenerator(store, length=5, max_attempts=100)


@pytest.fixture
def form(store: NoteStore, identity: IdentityGenerator) -> NoteFormController:
    """Form controller over the sample store."""
    return NoteFormController(store, identity=identity)


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            service._logger = mock_logger
            # Test code that logs
            mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
