"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Tests run from the project root so that .project_root and
config/settings/*.yaml are found by the real config loader.
"""

import pytest
import structlog

from notekeeper.core.config import get_app_config
from notekeeper.schemas.note import Note, NoteDraft
from notekeeper.store.note import NoteStore


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _clear_structlog_contextvars():
    """Keep structlog context bound by one test from leaking into the next."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def sample_notes() -> list[Note]:
    """Two notes with distinct titles and priorities."""
    return [
        Note(
            id="10001",
            title="Buy milk",
            description="Two litres, semi-skimmed",
            date="2026-10-18",
            priority="low",
        ),
        Note(
            id="10002",
            title="Pay rent",
            description="Transfer before the 5th",
            date="2026-11-01",
            priority="high",
        ),
    ]


@pytest.fixture
def store(sample_notes: list[Note]) -> NoteStore:
    """Store preloaded with the sample notes."""
    return NoteStore(sample_notes)


@pytest.fixture
def empty_store() -> NoteStore:
    return NoteStore()


@pytest.fixture
def complete_draft() -> NoteDraft:
    """Draft with every field filled in validly."""
    return NoteDraft(
        title="Call plumber",
        description="Kitchen tap is leaking",
        date="2026-10-20",
        priority="medium",
    )
