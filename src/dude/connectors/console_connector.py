# src/dude/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.errors import NotFoundError, StorageError
from ..core.state import AppState

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "____________________________________"
LOGO = r"""
 ____        _____
|  _ \ _   _|  _ \   ___
| | | | | | | | | |/  _ \
| |_| | |_| | |_| |\  __/
|____/ \__,_|____/  \___|"""


def _print_block(out: TextIO, text: str) -> None:
    print(HORIZONTAL_LINE, file=out)
    print(text, file=out)
    print(HORIZONTAL_LINE, file=out, flush=True)


def _greeting(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "Dude"))
    lines = [LOGO.lstrip("\n"), f"Hello! I'm {app_name}"]

    if getattr(state.settings, "show_saved_on_start", True):
        lines.append("This was your previous saved list of tasks:")
        try:
            lines.extend(state.store.raw_lines())
        except NotFoundError:
            lines.append("File not found")
        except StorageError:
            logger.exception("Failed to read save file for the greeting.")
            lines.append("Couldn't read the save file.")

    lines.append("What can I do for you?")
    return "\n".join(lines)


def run_console_loop(
    state: AppState,
    *,
    notices: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    Blocking read-process-respond loop.

    Each line is fully handled (save included) before the next one is read.
    Stops on "bye", end of input or Ctrl+C.
    """
    in_stream = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    logger.info("Console connector started (tasks=%d).", state.tasks.size())

    for notice in notices or []:
        print(notice, file=out)
    _print_block(out, _greeting(state))

    while state.running:
        try:
            raw = in_stream.readline()
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print(file=out)
            break

        if raw == "":
            logger.info("Console EOF received, exiting.")
            break

        try:
            result = command_registry.process_line(state, raw.rstrip("\r\n"))
        except Exception:
            logger.exception("Command handler crashed.")
            _print_block(out, "Dude, internal error while handling that command.")
            continue

        _print_block(out, result.text)

    logger.info("Console connector finished (session=%s).", state.session)
