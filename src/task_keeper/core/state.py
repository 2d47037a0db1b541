# src/task_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .ports import Notifier

if TYPE_CHECKING:
    from ..tasks.task_collection import GuardedTaskList
    from ..tasks.task_scheduler import DeferredScheduler
    from ..tasks.task_store import TaskStore
    from ..view.task_view import TaskListView


@dataclass
class AppState:
    """
    The single application context.

    Built once by the composition root (cli/bootstrap.py) and passed
    explicitly to every task operation; nothing reads the task list from
    module globals.
    """

    settings: Any
    store: TaskStore
    tasks: GuardedTaskList
    notifier: Notifier
    scheduler: DeferredScheduler
    view: TaskListView
