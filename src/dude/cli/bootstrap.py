# src/dude/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- makes sure the data directory and save file exist,
- loads the saved task list,
- wires the store and list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import MalformedRecordError, NotFoundError, StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def prepare_storage(store: TaskStore) -> list[str]:
    """
    Create data dir / save file when missing.
    Returns notices for the greeting (what was created, where the file lives).
    """
    notices: list[str] = []
    try:
        dir_created, file_created = store.ensure_file()
    except StorageError as e:
        logger.exception("Failed to prepare storage at %s", store.path)
        notices.append(f"Error: {e}")
        return notices

    if dir_created:
        notices.append("Dude I created a data directory")
    where = store.path.resolve()
    if file_created:
        notices.append(f"File created at: {where}")
    else:
        notices.append(f"File already exists at: {where}")
    return notices


def load_tasks(store: TaskStore, notices: list[str] | None = None) -> TaskList:
    """
    Saved tasks, or an empty list when there is nothing usable on disk.

    A malformed save file is moved aside (and reported through `notices`) before
    starting empty, so the first save of the session can't overwrite it. If it can't
    be moved, the StorageError propagates.
    """
    try:
        return TaskList(store.load())
    except NotFoundError:
        logger.info("No save file at %s, starting empty.", store.path)
    except MalformedRecordError as e:
        logger.error("Save file %s is malformed: %s", store.path, e)
        backup = store.move_aside()
        store.ensure_file()
        if notices is not None:
            notices.append(f"Dude, your save file was broken. I moved it to: {backup.resolve()}")
    except StorageError:
        logger.exception("Failed to load tasks from %s, starting empty.", store.path)
    return TaskList()


def create_initial_state(*, settings=None) -> tuple[AppState, list[str]]:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). Also returns the storage notices.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    notices = prepare_storage(store)

    state = AppState(settings=settings, store=store, tasks=load_tasks(store, notices))
    return state, notices
