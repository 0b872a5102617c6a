# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dude.core.state import AppState
from dude.tasks.task_list import TaskList
from dude.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Dude",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "dude.txt",
        log_dir=data_dir,
        show_saved_on_start=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real flat-file store under tmp_path.

    The store is real on purpose: what ends up on disk is part of what we test.
    """
    store.ensure_file()
    return AppState(settings=settings, store=store, tasks=TaskList())
