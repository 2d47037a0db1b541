# src/task_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL on one
asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(state: AppState) -> None:
    try:
        if state.settings.console_enabled:
            await run_console_loop(state)
        else:
            logger.info("Console disabled; loading the task view once and exiting.")
            await state.view.open()
    finally:
        if state.scheduler.pending:
            logger.info("Waiting for %d deferred add(s)...", state.scheduler.pending)
            try:
                await asyncio.wait_for(state.scheduler.drain(), timeout=10.0)
            except asyncio.TimeoutError:
                await state.scheduler.shutdown()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/task_keeper")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "task-keeper"))

    state = create_initial_state(settings=settings, notifier=ConsoleNotifier())

    try:
        asyncio.run(_run(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
