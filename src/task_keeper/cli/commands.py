# src/task_keeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from ..core.errors import NotFoundError
from ..core.state import AppState
from ..tasks import task_api

# Handlers return a reply string, or a coroutine resolving to one.
CommandHandler = Callable[[AppState, list[str]], Any]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, "" when the command only raised notices,
        or None if the line is not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        result = handler(state, args)
        if inspect.isawaitable(result):
            result = await result
        return result or ""

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_position(args: list[str]) -> int | None:
    """Rows are shown 1-based; positions are 0-based."""
    if not args:
        return None
    try:
        pos = int(args[0])
    except ValueError:
        return None
    return pos - 1 if pos >= 1 else None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    done = sum(1 for t in state.tasks if t.is_complete)
    return (
        "Status:\n"
        f"  Tasks in memory: {len(state.tasks)} ({done} complete)\n"
        f"  Rendered rows: {len(state.view.rows)}\n"
        f"  Deferred adds pending: {state.scheduler.pending}\n"
        f"  Storage key: {getattr(settings, 'storage_key', 'tasks')}"
    )


async def cmd_add(state: AppState, args: list[str]) -> str:
    await task_api.add_task(state, " ".join(args), task_api.IMMEDIATE)
    return ""


async def cmd_later(state: AppState, args: list[str]) -> str:
    if await task_api.add_task(state, " ".join(args), task_api.DELAYED):
        delay = float(getattr(state.settings, "deferred_add_delay", 2.0))
        return f"Will add in {delay:g}s."
    return ""


async def cmd_delete(state: AppState, args: list[str]) -> str:
    await task_api.delete_task(state, " ".join(args))
    return ""


async def cmd_view(state: AppState, args: list[str]) -> str:
    await state.view.view_tasks()
    return "\n".join(state.view.render())


def _set_checked(state: AppState, args: list[str], checked: bool) -> str:
    index = _parse_position(args)
    if index is None:
        return "Usage: /check <row number> or /uncheck <row number>."
    try:
        task = task_api.toggle_complete(state, index, checked)
    except NotFoundError as e:
        return str(e)
    logger.debug("Checkbox changed index=%s checked=%s", index, checked)
    return f"{task.name}: {'checked' if checked else 'unchecked'} (use /save to persist)."


def cmd_check(state: AppState, args: list[str]) -> str:
    return _set_checked(state, args, True)


def cmd_uncheck(state: AppState, args: list[str]) -> str:
    return _set_checked(state, args, False)


async def cmd_save(state: AppState, args: list[str]) -> str:
    await task_api.bulk_save(state)
    return "\n".join(state.view.render())


async def cmd_clear(state: AppState, args: list[str]) -> str:
    await task_api.clear_all(state)
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and pending deferred adds.")
registry.register("add", cmd_add, help_text="Add a task now: /add <name>.")
registry.register("later", cmd_later, help_text="Add a task after a delay: /later <name>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <name>.", aliases=["del"])
registry.register("view", cmd_view, help_text="Reload and show the task list.", aliases=["ls"])
registry.register("check", cmd_check, help_text="Mark row complete (unsaved): /check <n>.")
registry.register("uncheck", cmd_uncheck, help_text="Mark row incomplete (unsaved): /uncheck <n>.")
registry.register("save", cmd_save, help_text="Save checkbox changes of the shown rows.")
registry.register("clear", cmd_clear, help_text="Clear all tasks (asks for confirmation).")
