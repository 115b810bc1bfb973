"""
Centralized Logging Configuration.

All modules log through structlog loggers from get_logger(). Handlers and
level come from config/settings/logging.yaml; the caller only says which
front end is running.

Modes:
    cli  - console handler and file handler as configured in logging.yaml
    tui  - file handler only; Textual owns the terminal, so nothing is
           written to stdout while the app is on screen

If the configuration would leave no handler at all, records go to the
log file instead of being dropped.

Every record carries a 'source' field. Callers may set it explicitly via
log_with_source(); otherwise it defaults to the running mode.

Usage:
    from notekeeper.core.logging import get_logger, setup_logging

    setup_logging("cli", level="DEBUG")

    logger = get_logger(__name__)
    logger.info("Note added", note_id="48213")

Log File:
    logs/system.jsonl (path from logging.yaml), one JSON object per line
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from notekeeper.core.config import find_project_root, get_app_config
from notekeeper.core.config_schema import FileHandlerSchema, LoggingSchema

MODES = frozenset({"cli", "tui"})

VALID_SOURCES = frozenset({
    "cli",
    "tui",
    "store",
    "form",
    "internal",
})
"""Recognized values of the 'source' field."""


def _default_source(mode: str) -> Processor:
    """Build a processor that fills in 'source' when the caller did not."""

    def add_source(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("source", mode)
        return event_dict

    return add_source


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve a logging.yaml path against the project root."""
    return find_project_root() / configured_path


def _file_handler(file_config: FileHandlerSchema, formatter: logging.Formatter) -> logging.Handler:
    log_path = _resolve_log_path(file_config.path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def _handler_plan(mode: str, config: LoggingSchema) -> tuple[bool, bool]:
    """
    Decide which handlers to attach.

    Returns:
        (console, file) flags for the given mode
    """
    handlers = config.handlers
    if mode == "tui":
        return False, True
    console = handlers.console.enabled
    file = handlers.file.enabled or not console
    return console, file


def setup_logging(mode: str = "cli", level: str | None = None) -> None:
    """
    Configure structured logging for a front end.

    Args:
        mode: "cli" or "tui"
        level: Log level override (DEBUG, INFO, ...); defaults to logging.yaml

    Raises:
        ValueError: If mode is not recognized
    """
    if mode not in MODES:
        raise ValueError(f"Unknown logging mode: {mode}. Expected one of {sorted(MODES)}")

    config = get_app_config().logging
    log_level = getattr(logging, (level or config.level).upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _default_source(mode),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_enabled, file_enabled = _handler_plan(mode, config)

    if console_enabled:
        if config.format == "console":
            console_formatter = structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=True),
                foreign_pre_chain=shared_processors,
            )
        else:
            console_formatter = json_formatter
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if file_enabled:
        root_logger.addHandler(_file_handler(config.handlers.file, json_formatter))

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Raises:
        ValueError: If source is not in VALID_SOURCES
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "tui", "info", "Form submitted", note_id="01234")
    """
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source}")
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
