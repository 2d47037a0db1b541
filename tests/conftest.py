# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_keeper.cli.bootstrap import create_initial_state
from task_keeper.core.state import AppState
from task_keeper.tasks.kv_store import MemoryKeyValueStore

from .fakes import FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic (all delays are zero).
    """
    return SimpleNamespace(
        app_name="task-keeper-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path,
        store_backend="memory",
        store_db_path=tmp_path / "storage.sqlite3",
        storage_key="tasks",
        save_delay=0.0,
        load_delay=0.0,
        deferred_add_delay=0.0,
    )


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, kv: MemoryKeyValueStore, notifier: FakeNotifier) -> AppState:
    """AppState wired with an in-memory slot store and a recording notifier."""
    return create_initial_state(settings=settings, kv=kv, notifier=notifier)
