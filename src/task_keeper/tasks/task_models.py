# src/task_keeper/tasks/task_models.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Task:
    """
    A named unit of work with a completion flag.

    The name is the identity: there is no separate id.
    """

    name: str
    is_complete: bool = False

    @property
    def status_label(self) -> str:
        return "Complete" if self.is_complete else "Incomplete"

    def mark_complete(self) -> None:
        self.is_complete = True

    def mark_incomplete(self) -> None:
        self.is_complete = False

    def delete_task(self) -> None:
        """Delete side effect: a diagnostic line only, removal is the caller's job."""
        logger.info("Deleting task: %s", self.name)

    def to_record(self) -> dict[str, Any]:
        # Stored shape is fixed: {name, isComplete}, nothing else.
        return {"name": self.name, "isComplete": bool(self.is_complete)}

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Task:
        return cls(
            name=str(raw.get("name") or ""),
            is_complete=bool(raw.get("isComplete", False)),
        )
