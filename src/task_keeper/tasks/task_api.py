# src/task_keeper/tasks/task_api.py

"""
Task operations.

Each operation composes the guarded collection (state.tasks) with the task
store (state.store) and reports its outcome to the user through
state.notifier. Errors are caught here, at the operation boundary, and
turned into notices; the boolean return value tells the caller whether the
action went through.

There is no transaction around "mutate then persist": when a save fails the
in-memory change is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import NotFoundError, StoreError, TaskListError, ValidationError
from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)

IMMEDIATE = "immediate"
DELAYED = "delayed"
ADD_MODES = (IMMEDIATE, DELAYED)


def _required(value: str | None, message: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(message)
    return text


async def _append_and_persist(
    state: AppState, task: Task, on_success: Callable[[], None] | None
) -> bool:
    # A duplicate is dropped by the collection itself (with its own notice);
    # the add flow carries on regardless.
    state.tasks.append(task)
    try:
        await state.store.save_tasks(state.tasks)
    except StoreError as e:
        state.notifier.alert(f"Error: {e}")
        return False

    state.notifier.alert("Task Added")
    if on_success is not None:
        on_success()
    return True


async def add_task(
    state: AppState,
    name: str | None,
    mode: str = IMMEDIATE,
    *,
    on_success: Callable[[], None] | None = None,
) -> bool:
    """
    Add a task.

    mode="immediate" appends and saves now; mode="delayed" schedules the same
    append+save after settings.deferred_add_delay seconds and returns True as
    soon as it is scheduled. on_success runs after a successful save (clears
    the input on interactive front ends).
    """
    try:
        task_name = _required(name, "Please enter a task!")
        if mode not in ADD_MODES:
            raise ValidationError(f"Unknown add mode: {mode!r} (use immediate or delayed)")
    except ValidationError as e:
        logger.debug("add_task rejected: %s", e)
        state.notifier.alert(str(e))
        return False

    task = Task(task_name)

    if mode == DELAYED:
        delay = float(getattr(state.settings, "deferred_add_delay", 2.0))
        state.scheduler.schedule(
            delay,
            lambda: _append_and_persist(state, task, on_success),
            label=f"add:{task_name}",
        )
        logger.info("Task add deferred name=%s delay=%.2fs", task_name, delay)
        return True

    return await _append_and_persist(state, task, on_success)


async def delete_task(state: AppState, name: str | None) -> bool:
    """
    Delete a task by exact name (first match).

    An incomplete task needs confirmation; declining leaves everything as is.
    """
    try:
        target = _required(name, "Please enter a task to delete!")
        index = state.tasks.index_of(target)
        if index < 0:
            raise NotFoundError("Task not found!")
    except TaskListError as e:
        logger.debug("delete_task rejected: %s", e)
        state.notifier.alert(str(e))
        return False

    task = state.tasks[index]
    if not task.is_complete and not await state.notifier.confirm(
        f'The task "{task.name}" is incomplete. Do you want to delete it?'
    ):
        logger.debug("delete_task declined name=%s", task.name)
        return False

    # The list may have moved while the prompt was open.
    index = state.tasks.index_of(task.name)
    if index < 0:
        state.notifier.alert("Task not found!")
        return False

    task.delete_task()
    state.tasks.remove_at(index)
    state.view.remove_row(index)

    try:
        await state.store.save_tasks(state.tasks)
    except StoreError as e:
        state.notifier.alert(f"Error: {e}")
        return False

    state.notifier.alert("Task Deleted")
    return True


def toggle_complete(state: AppState, index: int, checked: bool) -> Task:
    """
    Set the completion flag of the in-memory task at `index` (checkbox change).
    Nothing is persisted until bulk_save().
    """
    if any(row.index == index for row in state.view.rows):
        row = state.view.set_checked(index, checked)
        task = state.view.task_for(row)
    else:
        task = state.tasks.get(index)
    if task is None:
        raise NotFoundError(f"No task at position {index}")
    task.is_complete = bool(checked)
    return task


async def bulk_save(state: AppState) -> bool:
    """
    Copy every rendered row's checkbox state into its in-memory task and
    save exactly those tasks.

    Only rendered rows make up the payload: tasks that are in memory but not
    on screen are left out of the slot.
    """
    updated: list[Task] = []
    for row in state.view.rows:
        task = state.view.task_for(row)
        if task is None:
            logger.warning("Rendered row %r has no task in memory; skipped", row.name)
            continue
        task.is_complete = row.checked
        updated.append(task)

    try:
        message = await state.store.save_tasks(updated)
    except StoreError as e:
        state.notifier.alert(f"Error saving tasks: {e}")
        return False

    logger.info("Bulk save persisted %d task(s)", len(updated))
    state.notifier.alert(message)
    return True


async def clear_all(state: AppState) -> bool:
    if not await state.notifier.confirm("Are you sure you want to clear all tasks?"):
        return False

    try:
        state.store.clear()
    except StoreError as e:
        state.notifier.alert(f"Error: {e}")
        return False

    state.tasks.clear()
    state.view.clear()
    state.notifier.alert("All tasks have been cleared.")
    return True
