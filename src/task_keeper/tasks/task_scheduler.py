# src/task_keeper/tasks/task_scheduler.py

from __future__ import annotations

"""
Deferred callback scheduler.

Timer layer for "delayed" submissions: each scheduled callback is an
independent asyncio task that sleeps for its delay, then runs.

- no cancellation handle is handed back to callers
- no coalescing: two callbacks with the same delay both run
- completion order depends only on elapsed delay, not on issue order

Failures inside a callback are logged and do not propagate.
"""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

CallbackFactory = Callable[[], Awaitable[object]]


class DeferredScheduler:
    def __init__(self) -> None:
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def schedule(self, delay: float, factory: CallbackFactory, *, label: str = "deferred") -> None:
        """Run factory() after `delay` seconds. Must be called from a running loop."""
        delay_s = max(0.0, float(delay))
        task = asyncio.get_running_loop().create_task(self._run(delay_s, factory, label))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.debug("Scheduled %s in %.2fs (pending=%d)", label, delay_s, len(self._pending))

    async def _run(self, delay: float, factory: CallbackFactory, label: str) -> None:
        await asyncio.sleep(delay)
        try:
            await factory()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Deferred callback failed label=%s", label)

    async def drain(self) -> None:
        """Wait until every scheduled callback (including ones scheduled meanwhile) finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def shutdown(self) -> None:
        """Cancel whatever is still waiting (process exit)."""
        pending = list(self._pending)
        if pending:
            logger.info("Cancelling %d pending deferred callback(s)", len(pending))
        for task in pending:
            task.cancel()
        for task in pending:
            with contextlib.suppress(asyncio.CancelledError):
                await task
