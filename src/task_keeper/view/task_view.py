# src/task_keeper/view/task_view.py

from __future__ import annotations

"""
Task list view.

Keeps the rendered rows in step with the in-memory collection:
- one row per task, each remembering the task's position and a checkbox state
- checkbox changes write straight into the in-memory task (not persisted)
- the first display triggers exactly one load from the store
"""

import logging
from dataclasses import dataclass

from ..core.errors import NotFoundError, StoreError
from ..core.ports import Notifier, TaskRepo
from ..tasks.task_collection import GuardedTaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskRow:
    index: int
    name: str
    checked: bool

    @property
    def label(self) -> str:
        return f"{self.name} - {'Complete' if self.checked else 'Incomplete'}"


class TaskListView:
    def __init__(self, store: TaskRepo, tasks: GuardedTaskList, notifier: Notifier) -> None:
        self._store = store
        self._tasks = tasks
        self._notifier = notifier
        self._opened = False
        self.rows: list[TaskRow] = []

    @property
    def opened(self) -> bool:
        return self._opened

    async def open(self) -> bool:
        """
        Initial display hook. Loads once; later or re-entrant calls are no-ops.
        Returns True only for the call that triggered the load.
        """
        if self._opened:
            return False
        # Set before the first await so a re-entrant call sees it.
        self._opened = True
        logger.info("Fetching tasks...")
        await self.view_tasks()
        return True

    async def view_tasks(self) -> list[TaskRow]:
        """
        Reload from the store and render one row per in-memory task.

        The snapshot replaces the in-memory list only if nothing changed it
        while the fetch was suspended; otherwise the newer in-memory list is
        kept (its pending save will bring the slot up to date).
        """
        self.rows = []
        version = self._tasks.version
        try:
            loaded = await self._store.fetch_tasks()
        except StoreError as e:
            logger.warning("View load failed: %s", e)
            self._notifier.alert(f"Error fetching tasks: {e}")
            return self.rows

        if self._tasks.version == version:
            self._tasks.reset(loaded)
        else:
            logger.info("Task list changed during load; keeping %d in-memory task(s)", len(self._tasks))

        self.rows = [
            TaskRow(index=i, name=t.name, checked=t.is_complete) for i, t in enumerate(self._tasks)
        ]

        if self.rows:
            self._notifier.alert("Tasks fetched")
        else:
            self._notifier.alert("No tasks available")
        return self.rows

    def task_for(self, row: TaskRow) -> Task | None:
        """The in-memory task behind a row: by position, falling back to its name."""
        task = self._tasks.get(row.index)
        if task is not None and task.name == row.name:
            return task
        return self._tasks.find(row.name)

    def set_checked(self, index: int, checked: bool) -> TaskRow:
        """Checkbox change: update the row and the in-memory task it shows."""
        row = self._row_for(index)
        task = self.task_for(row)
        if task is None:
            raise NotFoundError(f'Task "{row.name}" is no longer in the list')
        row.checked = bool(checked)
        task.is_complete = row.checked
        return row

    def remove_row(self, index: int) -> None:
        """Drop the row for a task removed at `index`; later rows move up one."""
        rows: list[TaskRow] = []
        for row in self.rows:
            if row.index == index:
                continue
            if row.index > index:
                row.index -= 1
            rows.append(row)
        self.rows = rows

    def _row_for(self, index: int) -> TaskRow:
        for row in self.rows:
            if row.index == index:
                return row
        raise NotFoundError(f"No rendered task at position {index}")

    def render(self) -> list[str]:
        return [f"{row.index + 1}. [{'x' if row.checked else ' '}] {row.label}" for row in self.rows]

    def clear(self) -> None:
        self.rows = []
