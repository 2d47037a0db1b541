# src/task_keeper/tasks/task_store.py

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable

from ..core.errors import LoadError, SaveError
from ..core.ports import KeyValueStore
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Task list persistence over a single key-value slot.

    The slot holds a JSON array of {"name", "isComplete"} records. An absent
    slot is the same as an empty list.

    fetch_tasks/save_tasks suspend for a fixed delay before touching the slot
    to emulate an asynchronous backend; the slot access itself is synchronous.
    Tests pass zero delays.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = "tasks",
        save_delay: float = 1.0,
        load_delay: float = 1.0,
    ) -> None:
        self._kv = kv
        self._key = key
        self._save_delay = max(0.0, float(save_delay))
        self._load_delay = max(0.0, float(load_delay))
        self._write_lock = asyncio.Lock()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        try:
            raw = self._kv.get_item(self._key)
        except Exception as e:
            logger.exception("Slot read failed key=%s", self._key)
            raise LoadError("Error fetching tasks") from e

        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except ValueError as e:
            raise LoadError("Error fetching tasks") from e

        if not records:
            return []
        if not isinstance(records, list):
            raise LoadError("Error fetching tasks")

        tasks: list[Task] = []
        for r in records:
            # Name is the key: a record without one cannot be addressed.
            if not isinstance(r, dict) or not str(r.get("name") or "").strip():
                logger.warning("Skipping stored record without a name key=%s: %r", self._key, r)
                continue
            tasks.append(Task.from_record(r))
        return tasks

    async def fetch_tasks(self) -> list[Task]:
        await asyncio.sleep(self._load_delay)
        tasks = self.load()
        logger.debug("Fetched %d task(s) key=%s", len(tasks), self._key)
        return tasks

    async def save_tasks(self, tasks: Iterable[Task]) -> str:
        """
        Persist the given tasks and return a confirmation message.

        The payload is built after the delay, so a live collection is
        captured as it is at write time. Raises SaveError on backend failure.
        """
        async with self._write_lock:
            await asyncio.sleep(self._save_delay)
            payload = [t.to_record() for t in tasks]
            try:
                self._kv.set_item(self._key, json.dumps(payload, ensure_ascii=False))
            except Exception as e:
                logger.exception("Slot write failed key=%s", self._key)
                raise SaveError("Error saving tasks") from e

        logger.debug("Saved %d task(s) key=%s", len(payload), self._key)
        return "Tasks saved successfully"

    def clear(self) -> None:
        try:
            self._kv.remove_item(self._key)
        except Exception as e:
            logger.exception("Slot removal failed key=%s", self._key)
            raise SaveError("Error clearing tasks") from e
        logger.info("Task slot cleared key=%s", self._key)
