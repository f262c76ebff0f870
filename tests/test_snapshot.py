# tests/test_snapshot.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from todo_tracker.tasks.snapshot import SnapshotFile, SnapshotWriteError
from todo_tracker.tasks.task_models import Task
from todo_tracker.tasks.task_store import TaskStore


def test_missing_file_loads_empty_store(tmp_path: Path) -> None:
    store = SnapshotFile(tmp_path / "todo.json").load()
    assert store.pending == []
    assert store.done == []


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        "[]",
        '{"pending": []}',
        '{"pending": [{"title": "A"}], "done": []}',
    ],
)
def test_unusable_file_loads_empty_store(tmp_path: Path, content: str, caplog) -> None:
    path = tmp_path / "todo.json"
    path.write_text(content, "utf-8")

    with caplog.at_level(logging.WARNING, logger="todo_tracker"):
        store = SnapshotFile(path).load()

    assert store == TaskStore()
    assert "Unusable snapshot" in caplog.text


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "todo.json"
    store = TaskStore()
    store.insert("Buy milk", "PENDING")
    store.insert("Кофе", "later")
    store.insert("Walk dog", "PENDING")
    store.complete(2)

    snap = SnapshotFile(path)
    snap.save(store)
    restored = snap.load()

    assert restored.pending == [Task("Buy milk", "PENDING"), Task("Кофе", "later")]
    assert restored.done == [Task("Walk dog", "DONE")]
    assert not path.with_name("todo.json.tmp").exists()


def test_saved_file_layout(tmp_path: Path) -> None:
    path = tmp_path / "todo.json"
    store = TaskStore()
    store.insert("A", "PENDING")

    SnapshotFile(path).save(store)

    assert json.loads(path.read_text("utf-8")) == {
        "pending": [{"title": "A", "status": "PENDING"}],
        "done": [],
    }


def test_reads_snapshot_written_by_other_tools(tmp_path: Path) -> None:
    path = tmp_path / "todo.json"
    path.write_text(
        '{"pending":[{"title":"A","status":"PENDING"}],"done":[{"title":"B","status":"DONE"}]}',
        "utf-8",
    )
    store = SnapshotFile(path).load()
    assert store.pending == [Task("A", "PENDING")]
    assert store.done == [Task("B", "DONE")]


def test_save_failure_raises(tmp_path: Path) -> None:
    # the target path is an existing directory, so os.replace cannot succeed
    target = tmp_path / "todo.json"
    target.mkdir()
    (target / "keep").write_text("x", "utf-8")

    with pytest.raises(SnapshotWriteError, match="cannot write snapshot"):
        SnapshotFile(target).save(TaskStore())
