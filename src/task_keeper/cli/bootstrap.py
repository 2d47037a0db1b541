# src/task_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the slot store, task store, guarded collection, scheduler and view
  into one AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore, Notifier
from ..core.state import AppState
from ..tasks.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.task_collection import GuardedTaskList
from ..tasks.task_scheduler import DeferredScheduler
from ..tasks.task_store import TaskStore
from ..view.task_view import TaskListView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_db_path.parent.mkdir(parents=True, exist_ok=True)


def build_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "store_backend", "sqlite")).lower()
    if backend == "memory":
        logger.info("Using in-memory slot store (nothing survives exit).")
        return MemoryKeyValueStore()
    if backend != "sqlite":
        logger.warning("Unknown store backend %r; falling back to sqlite.", backend)
    return SqliteKeyValueStore(settings.store_db_path)


def create_initial_state(
    *,
    notifier: Notifier,
    settings=None,
    kv: KeyValueStore | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the slot store) injectable makes the app easier to
    test and avoids hidden global config reads. If settings is None, falls
    back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = build_kv_store(settings)

    store = TaskStore(
        kv,
        key=settings.storage_key,
        save_delay=settings.save_delay,
        load_delay=settings.load_delay,
    )

    tasks = GuardedTaskList(
        store.load(),
        on_duplicate=lambda err: notifier.alert(str(err)),
    )
    logger.info("Loaded %d task(s) from slot %r", len(tasks), settings.storage_key)

    return AppState(
        settings=settings,
        store=store,
        tasks=tasks,
        notifier=notifier,
        scheduler=DeferredScheduler(),
        view=TaskListView(store, tasks, notifier),
    )
