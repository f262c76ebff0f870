# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from typing import TypeVar

from ..core.state import AppState
from ..tasks.snapshot import SnapshotWriteError
from ..tasks.task_models import InvalidIndexError, TaskStatus
from ..tasks.task_store import TaskStore, format_listing

CommandHandler = Callable[[AppState, list[str]], str]
T = TypeVar("T")

logger = logging.getLogger(__name__)


class CommandUsageError(Exception):
    """Bad or missing arguments; reported before the store is touched."""


class CommandRegistry:
    """Simple command registry used by the interactive shell (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like 'add "Buy milk" PENDING'.

        Returns a reply string, or None for a blank line. Usage errors,
        bad indices and save failures come back as reply text; the store
        is left as it was.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return f"Cannot parse command: {e}"
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            return handler(state, args)
        except CommandUsageError as e:
            return str(e)
        except InvalidIndexError as e:
            logger.info("Rejected index=%s (pending=%s)", e.index, e.size)
            return str(e)
        except SnapshotWriteError as e:
            return f"Error: {e}. Nothing was changed."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_index(raw: str) -> int:
    if not raw.isdecimal():
        raise CommandUsageError("Invalid index")
    return int(raw)


def _apply(state: AppState, op: Callable[[TaskStore], T]) -> T:
    """
    Run a mutation on a copy of the store, save it, then adopt it.

    If the operation or the save fails, state.store is untouched.
    """
    draft = state.store.copy()
    result = op(draft)
    state.snapshot.save(draft)
    state.store = draft
    return result


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_listing(state.store.list())


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    add                   -> "Untitled" / PENDING
    add <title>           -> <title> / PENDING
    add <title> <status>  -> as given
    """
    if len(args) > 2:
        raise CommandUsageError('Usage: add <title> [status]  (quote titles with spaces: add "Buy milk")')
    title = args[0] if args else "Untitled"
    status = args[1] if len(args) > 1 else TaskStatus.PENDING.value

    _apply(state, lambda store: store.insert(title, status))
    return f"Added: {title}\n{cmd_list(state, [])}"


def cmd_complete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandUsageError("Usage: complete <index>")
    index = parse_index(args[0])

    task = _apply(state, lambda store: store.complete(index))
    return f"Completed: {task.title}\n{cmd_list(state, [])}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandUsageError("Usage: delete <index>")
    index = parse_index(args[0])

    task = _apply(state, lambda store: store.delete(index))
    return f"Deleted: {task.title}\n{cmd_list(state, [])}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show pending and done tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a pending task: add <title> [status].")
registry.register("complete", cmd_complete, help_text="Move a pending task to done: complete <index>.")
registry.register("delete", cmd_delete, help_text="Remove a pending task: delete <index>.", aliases=["rm"])
