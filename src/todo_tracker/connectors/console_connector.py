# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_store import format_listing

logger = logging.getLogger(__name__)

PROMPT = "todo> "


def run_console_loop(state: AppState) -> None:
    """
    Interactive front-end: one TaskStore held in memory for the whole session.

    Every successful mutation is saved straight away; a failed command
    leaves both the file and the in-memory store as they were.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    logger.info("Console shell started snapshot=%s", state.snapshot.path)

    print(f"[{app_name}] Tasks in {state.snapshot.path}. Type help for commands, exit to quit.")
    print(format_listing(state.store.list()))

    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console shell finished.")
