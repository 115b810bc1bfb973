"""
Integration Test Fixtures.

Integration tests drive the CLI and TUI end to end against real
configuration files and an in-memory store.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """
    Undo handler changes made by setup_logging() inside the CLI.

    CliRunner swaps sys.stdout during invoke; a StreamHandler left on the
    root logger would keep writing to the closed stream afterwards.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
