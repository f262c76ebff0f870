# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Each command runs one full cycle: load the snapshot, apply at most one
operation, save the snapshot back. `todo shell` starts the interactive
front-end instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich_click as click

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.snapshot import SnapshotWriteError
from ..tasks.task_models import InvalidIndexError
from ..tasks.task_store import format_listing

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Snapshot file (default: TODO_DATA_FILE or ./todo.json).",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for todo.log (default: TODO_DATA_DIR).",
)
@click.pass_context
def todo(ctx: click.Context, data_file: Path | None, log_dir: Path | None) -> None:
    """Personal task tracker: add, complete, delete and list tasks."""
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if log_dir is None and settings.log_to_file:
        log_dir = settings.data_dir
    setup_logging(log_dir=log_dir, console_level=console_level)

    ctx.obj = create_initial_state(settings=settings, data_file=data_file)


def _persist(state: AppState) -> None:
    try:
        state.persist()
    except SnapshotWriteError as e:
        raise click.ClickException(str(e)) from e


@todo.command("add")
@click.argument("title")
@click.argument("status")
@click.pass_obj
def add(state: AppState, title: str, status: str) -> None:
    """Add a task with TITLE and a free-form STATUS label to the pending list."""
    state.store.insert(title, status)
    _persist(state)


@todo.command("complete")
@click.argument("index", type=click.IntRange(min=0))
@click.pass_obj
def complete(state: AppState, index: int) -> None:
    """Move pending task INDEX to the done list."""
    try:
        state.store.complete(index)
    except InvalidIndexError as e:
        raise click.ClickException(str(e)) from e
    _persist(state)


@todo.command("delete")
@click.argument("index", type=click.IntRange(min=0))
@click.pass_obj
def delete(state: AppState, index: int) -> None:
    """Remove pending task INDEX."""
    try:
        state.store.delete(index)
    except InvalidIndexError as e:
        raise click.ClickException(str(e)) from e
    _persist(state)


@todo.command("list")
@click.pass_obj
def list_tasks(state: AppState) -> None:
    """Show pending and done tasks with their indices."""
    _emit_lines(format_listing(state.store.list()).splitlines())
    _persist(state)


@todo.command("shell")
@click.pass_obj
def shell(state: AppState) -> None:
    """Interactive session: tasks stay loaded, every change is saved at once."""
    run_console_loop(state)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


def main() -> None:
    todo()


if __name__ == "__main__":  # pragma: no cover
    main()
