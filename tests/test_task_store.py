# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from dude.core.errors import MalformedRecordError, NotFoundError, StorageError
from dude.tasks.task_models import Deadline, Event, Todo
from dude.tasks.task_store import TaskStore, deserialize, serialize


def test_serialize_format() -> None:
    lines = serialize(
        [
            Todo("read book", is_done=True),
            Deadline("return book", "Sunday"),
            Event("meeting", "Mon 2pm", "Mon 4pm"),
        ]
    )
    assert lines == [
        "T | 1 | read book",
        "D | 0 | return book | Sunday",
        "E | 0 | meeting | Mon 2pm | Mon 4pm",
    ]


def test_round_trip_keeps_variants_and_flags() -> None:
    tasks = [
        Todo("a"),
        Todo("b", is_done=True),
        Deadline("c", "tomorrow 5pm", is_done=True),
        Event("d", "Fri", "Sun"),
    ]
    assert deserialize(serialize(tasks)) == tasks


def test_deserialize_skips_blank_short_and_unknown_lines() -> None:
    lines = ["", "   ", "T | 1", "X | 0 | mystery", "T | 0 | kept"]
    assert deserialize(lines) == [Todo("kept")]


def test_deserialize_tolerates_unpadded_pipes() -> None:
    assert deserialize(["D|1|submit|Fri"]) == [Deadline("submit", "Fri", is_done=True)]


@pytest.mark.parametrize(
    "line",
    ["D | 0 | return book", "E | 0 | meeting | Mon"],
)
def test_deserialize_missing_variant_field_is_malformed(line: str) -> None:
    with pytest.raises(MalformedRecordError) as exc:
        deserialize(["T | 0 | fine", line])
    assert exc.value.line_no == 2


def test_save_overwrites_whole_file(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "dude.txt")
    store.save([Todo("one"), Todo("two")])
    store.save([Todo("only")])

    assert (tmp_path / "dude.txt").read_text(encoding="utf-8") == "T | 0 | only\n"
    assert store.load() == [Todo("only")]
    assert not (tmp_path / "dude.txt.tmp").exists()


def test_save_empty_list_leaves_empty_file(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "dude.txt")
    store.save([Todo("one")])
    store.save([])
    assert (tmp_path / "dude.txt").read_text(encoding="utf-8") == ""
    assert store.load() == []


def test_load_missing_file_raises_not_found(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "dude.txt")
    with pytest.raises(NotFoundError):
        store.load()
    with pytest.raises(FileNotFoundError):
        store.raw_lines()


def test_save_into_missing_directory_raises_storage_error(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "missing" / "dude.txt")
    with pytest.raises(StorageError):
        store.save([Todo("x")])


def test_ensure_file_creates_dir_and_file_once(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "data" / "dude.txt")
    assert store.ensure_file() == (True, True)
    assert store.path.exists()
    assert store.ensure_file() == (False, False)
    assert store.load() == []


def test_raw_lines_returns_file_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "dude.txt"
    path.write_text("T | 0 | a\nD | 1 | b | Fri\n", encoding="utf-8")
    assert TaskStore(path).raw_lines() == ["T | 0 | a", "D | 1 | b | Fri"]


def test_save_then_load_keeps_every_variant_and_done_flag(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "dude.txt")
    tasks = [
        Todo("read book"),
        Deadline("return book", "Sunday", is_done=True),
        Event("meeting", "Mon 2pm", "Mon 4pm", is_done=True),
        Event("party", "Fri", "Sat"),
    ]
    store.save(tasks)

    assert store.raw_lines() == [
        "T | 0 | read book",
        "D | 1 | return book | Sunday",
        "E | 1 | meeting | Mon 2pm | Mon 4pm",
        "E | 0 | party | Fri | Sat",
    ]
    assert store.load() == tasks


@pytest.mark.parametrize("sep", ["\u2028", "\u2029", "\x85", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e"])
def test_descriptions_with_unicode_line_breaks_survive_reload(tmp_path: Path, sep: str) -> None:
    store = TaskStore(tmp_path / "dude.txt")
    tasks = [Todo(f"notes{sep}part two"), Deadline(f"a{sep}b", f"Fri{sep}noon")]
    store.save(tasks)

    assert len(store.raw_lines()) == 2
    assert store.load() == tasks


def test_raw_lines_drops_crlf_terminators(tmp_path: Path) -> None:
    path = tmp_path / "dude.txt"
    path.write_bytes(b"T | 0 | a\r\nT | 1 | b\r\n")
    assert TaskStore(path).raw_lines() == ["T | 0 | a", "T | 1 | b"]


def test_move_aside_picks_a_free_backup_name(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "dude.txt")
    store.save([Todo("first")])
    assert store.move_aside() == tmp_path / "dude.txt.bak"
    assert not store.path.exists()

    store.save([Todo("second")])
    assert store.move_aside() == tmp_path / "dude.txt.bak1"
    assert (tmp_path / "dude.txt.bak").read_text(encoding="utf-8") == "T | 0 | first\n"
    assert (tmp_path / "dude.txt.bak1").read_text(encoding="utf-8") == "T | 0 | second\n"


def test_move_aside_missing_file_raises_storage_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        TaskStore(tmp_path / "dude.txt").move_aside()
