# tests/test_task_scheduler.py

from __future__ import annotations

import asyncio
import logging

import pytest

from task_keeper.tasks.task_scheduler import DeferredScheduler


@pytest.mark.asyncio
async def test_callbacks_complete_in_delay_order() -> None:
    scheduler = DeferredScheduler()
    order: list[str] = []

    async def record(label: str) -> None:
        order.append(label)

    scheduler.schedule(0.05, lambda: record("slow"), label="slow")
    scheduler.schedule(0.0, lambda: record("fast"), label="fast")
    assert scheduler.pending == 2

    await scheduler.drain()

    assert order == ["fast", "slow"]
    assert scheduler.pending == 0


@pytest.mark.asyncio
async def test_failing_callback_is_logged_not_raised(caplog) -> None:
    scheduler = DeferredScheduler()

    async def boom() -> None:
        raise RuntimeError("nope")

    with caplog.at_level(logging.ERROR, logger="task_keeper.tasks.task_scheduler"):
        scheduler.schedule(0.0, boom, label="boom")
        await scheduler.drain()

    assert "Deferred callback failed label=boom" in caplog.text


@pytest.mark.asyncio
async def test_shutdown_cancels_pending() -> None:
    scheduler = DeferredScheduler()
    ran: list[int] = []

    async def mark() -> None:
        ran.append(1)

    scheduler.schedule(10.0, mark)
    await asyncio.sleep(0)
    await scheduler.shutdown()
    await asyncio.sleep(0)

    assert ran == []
    assert scheduler.pending == 0
