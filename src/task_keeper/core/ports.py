# src/task_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and the user-facing surface swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """
    Opaque string slot store (localStorage-like).

    get_item returns None when the key is absent.
    Implementations raise on backend failure (e.g. disk full); callers wrap it.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class Notifier(Protocol):
    """
    User-facing notice channel.

    alert() shows a blocking notice (success/failure/validation).
    confirm() asks a yes/no question; awaiting it must not stall the event loop.
    """

    def alert(self, text: str) -> None: ...
    async def confirm(self, text: str) -> bool: ...


class TaskRepo(Protocol):
    def load(self) -> list[Any]: ...
    async def fetch_tasks(self) -> list[Any]: ...
    async def save_tasks(self, tasks: Iterable[Any]) -> str: ...
    def clear(self) -> None: ...
