#!/usr/bin/env python3
"""
NoteKeeper CLI.

Primary entry point for the application.
Use --service to select what to run.

Usage:
    python cli.py --help
    python cli.py --service tui
    python cli.py --service tui --debug
    python cli.py --service config
    python cli.py --service info
"""

import sys
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from notekeeper.core.config import validate_project_root
from notekeeper.core.exceptions import ApplicationError
from notekeeper.core.logging import get_logger, setup_logging

CONFIG_ERRORS = (FileNotFoundError, ValueError, RuntimeError)


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["tui", "config", "info"]),
    default="info",
    help="Service or command to run.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
def main(service: str, verbose: bool, debug: bool) -> None:
    """
    NoteKeeper CLI.

    Use --service to select what to run.

    \b
    Examples:
        python cli.py --service tui
        python cli.py --service tui --debug
        python cli.py --service config
        python cli.py --service info
    """
    try:
        validate_project_root()
    except SystemExit as e:
        click.echo(click.style(str(e.code), fg="red"), err=True)
        sys.exit(1)

    if service == "tui":
        run_tui(debug)
        return

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging("cli", level=log_level)

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    logger.debug("CLI invoked", extra={"service": service, "log_level": log_level})

    if service == "config":
        show_config(logger)
    elif service == "info":
        show_info(logger)


def run_tui(debug: bool) -> None:
    """Start the terminal interface. Logging goes to the file handler only."""
    from notekeeper.tui.app import main as tui_main

    try:
        tui_main(debug=debug)
    except ApplicationError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)


def show_config(logger) -> None:
    """Display loaded configuration."""
    click.echo("Application Configuration:\n")

    try:
        from notekeeper.core.config import get_app_config

        app_config = get_app_config()

        sections = [
            ("Application Settings", app_config.application),
            ("Logging Settings", app_config.logging),
            ("Note Settings", app_config.notes),
        ]
        for title, section in sections:
            click.echo(f"{title} (from YAML):")
            click.echo("-" * 40)
            _echo_mapping(section.model_dump(), indent=2)
            click.echo()

        logger.info("Configuration displayed successfully")

    except CONFIG_ERRORS as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)


def _echo_mapping(values: dict, indent: int) -> None:
    pad = " " * indent
    for key, value in values.items():
        if isinstance(value, dict):
            click.echo(f"{pad}{key}:")
            _echo_mapping(value, indent + 2)
        else:
            click.echo(f"{pad}{key}: {value}")


def show_info(logger) -> None:
    """Display application information."""
    try:
        from notekeeper.core.config import get_app_config
        application = get_app_config().application
    except CONFIG_ERRORS as e:
        logger.error(
            "Failed to load application configuration",
            extra={"error": str(e)},
        )
        click.echo(
            click.style(
                "Error: Could not load application.yaml configuration.",
                fg="red",
            ),
            err=True,
        )
        sys.exit(1)

    click.echo(application.name)
    click.echo("=" * 40)
    click.echo(f"Version: {application.version}")
    click.echo(f"Description: {application.description}")
    click.echo()
    click.echo("Services (--service):")
    click.echo("  tui            Terminal note manager")
    click.echo("  config         Display configuration")
    click.echo("  info           Show this information")
    click.echo()
    click.echo("Options:")
    click.echo("  --verbose, -v  Enable INFO level logging")
    click.echo("  --debug, -d    Enable DEBUG level logging")
    click.echo()
    click.echo("TUI keys:")
    click.echo("  ctrl+s         Save the note in the form")
    click.echo("  escape         Clear the form")
    click.echo("  ctrl+q         Quit")


if __name__ == "__main__":
    main()
