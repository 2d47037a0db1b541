# src/task_keeper/tasks/task_collection.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import overload

from ..core.errors import DuplicateNameError
from .task_models import Task

logger = logging.getLogger(__name__)

DuplicateHandler = Callable[[DuplicateNameError], None]


class GuardedTaskList(Sequence[Task]):
    """
    Ordered in-memory task list that keeps names unique.

    Every insertion goes through append(), which checks the name first.
    A duplicate is not an error for the caller: the insertion is dropped,
    the DuplicateNameError goes to on_duplicate (the notice channel) and
    append() returns False.

    Reads and removal by position pass straight through to the list.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        on_duplicate: DuplicateHandler | None = None,
    ) -> None:
        self._items: list[Task] = []
        self._version = 0
        self.on_duplicate = on_duplicate
        # Seeded like a reload: stored duplicates are logged, not reported.
        self.reset(tasks)

    # ---- reads ----

    @overload
    def __getitem__(self, index: int) -> Task: ...
    @overload
    def __getitem__(self, index: slice) -> list[Task]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"GuardedTaskList({self._items!r})"

    def get(self, index: int) -> Task | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def index_of(self, name: str) -> int:
        for i, task in enumerate(self._items):
            if task.name == name:
                return i
        return -1

    def find(self, name: str) -> Task | None:
        i = self.index_of(name)
        return self._items[i] if i >= 0 else None

    def snapshot(self) -> list[Task]:
        return list(self._items)

    # ---- mutations ----

    @property
    def version(self) -> int:
        """Bumped on every structural change (insert, removal, clear, reset)."""
        return self._version

    def append(self, task: Task) -> bool:
        if self.index_of(task.name) >= 0:
            err = DuplicateNameError(task.name)
            logger.info("Duplicate task suppressed name=%s", task.name)
            if self.on_duplicate is not None:
                self.on_duplicate(err)
            return False

        self._items.append(task)
        self._version += 1
        logger.debug("Task appended name=%s size=%d", task.name, len(self._items))
        return True

    def remove_at(self, index: int) -> Task:
        task = self._items.pop(index)
        self._version += 1
        return task

    def clear(self) -> None:
        self._items.clear()
        self._version += 1

    def reset(self, tasks: Iterable[Task]) -> None:
        """
        Replace the contents with a snapshot loaded from the store.

        The same name guard applies: a repeated name keeps its first
        occurrence. Stored duplicates are logged, not reported to the user.
        """
        items: list[Task] = []
        seen: set[str] = set()
        for task in tasks:
            if task.name in seen:
                logger.warning("Duplicate task in loaded snapshot dropped name=%s", task.name)
                continue
            seen.add(task.name)
            items.append(task)
        self._items = items
        self._version += 1
