# src/task_keeper/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = {"/exit", "/quit", "exit", "quit"}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleNotifier:
    """Notifier for the terminal: notices are printed, confirmations read y/N."""

    def alert(self, text: str) -> None:
        _print_ts(f"[NOTICE] {text}")

    async def confirm(self, text: str) -> bool:
        try:
            # Off the loop, like the REPL prompt, so deferred adds keep firing.
            answer = await asyncio.to_thread(input, f"{text} [y/N]: ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    await state.view.open()
    for line in state.view.render():
        print(line)

    while True:
        try:
            # input() blocks; run it off the loop so deferred adds keep firing.
            user_input = (await asyncio.to_thread(input, ">>> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not user_input:
            continue
        if user_input.lower() in EXIT_WORDS:
            break

        try:
            reply = await command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command failed: %s", user_input)
            _print_ts("[ERROR] Command failed; see log for details.")
            continue

        if reply is None:
            _print_ts("Commands start with '/'. Use /help to list them.")
        elif reply:
            print(reply)

    logger.info("Console connector stopped.")
