# src/dude/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..core.errors import StorageError
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state, notices = create_initial_state(settings=settings)
    except StorageError as e:
        # Only reached when a broken save file couldn't be moved out of the way.
        logger.exception("Startup failed.")
        print(f"Dude, I won't start without keeping your save file safe: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    try:
        run_console_loop(state, notices=notices)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
