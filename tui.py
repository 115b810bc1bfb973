"""
NoteKeeper TUI entry point.

Usage:
    python tui.py
    python tui.py --debug
"""

import sys

from notekeeper.core.config import validate_project_root
from notekeeper.tui.app import main as run_tui


def main() -> None:
    validate_project_root()
    run_tui(debug="--debug" in sys.argv)


if __name__ == "__main__":
    main()
