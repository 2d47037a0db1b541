# src/task_keeper/core/errors.py

"""
Error taxonomy.

Every error is terminal for the action that triggered it (no retries).
Task operations catch these at their boundary and surface `str(err)` as a
user notice; DuplicateNameError never leaves the guarded collection.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for user-reportable task list failures."""


class ValidationError(TaskListError):
    """Required input missing or invalid; raised before any mutation."""


class DuplicateNameError(TaskListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Task "{name}" already exists. Cannot add it again.')
        self.name = name


class NotFoundError(TaskListError):
    """No task matches the requested name or row."""


class StoreError(TaskListError):
    """Durable slot read/write failure."""


class LoadError(StoreError):
    pass


class SaveError(StoreError):
    pass
