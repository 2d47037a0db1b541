# tests/test_commands.py

from __future__ import annotations

import pytest

from task_keeper.cli.commands import CommandRegistry, registry


@pytest.mark.asyncio
async def test_command_registry_routes_sync_and_async_handlers(state) -> None:
    reg = CommandRegistry()
    called = {"sync": 0, "async": 0}

    def h_sync(state, args):
        called["sync"] += 1
        return "sync:" + ",".join(args)

    async def h_async(state, args):
        called["async"] += 1
        return "async"

    reg.register("a", h_sync, "a", aliases=["aa"])
    reg.register("b", h_async, "b")

    assert await reg.handle(state, "/a x y") == "sync:x,y"
    assert await reg.handle(state, "/AA") == "sync:"
    assert await reg.handle(state, "/b") == "async"
    assert called == {"sync": 2, "async": 1}


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_console_commands_drive_task_operations(state, notifier) -> None:
    await registry.handle(state, "/add Buy milk")
    await registry.handle(state, "/add Walk dog")

    listing = await registry.handle(state, "/view")
    assert listing == "1. [ ] Buy milk - Incomplete\n2. [ ] Walk dog - Incomplete"

    reply = await registry.handle(state, "/check 2")
    assert reply == "Walk dog: checked (use /save to persist)."

    saved = await registry.handle(state, "/save")
    assert "2. [x] Walk dog - Complete" in (saved or "")
    assert [(t.name, t.is_complete) for t in state.store.load()] == [
        ("Buy milk", False),
        ("Walk dog", True),
    ]

    await registry.handle(state, "/delete Walk dog")
    assert [t.name for t in state.tasks] == ["Buy milk"]

    status = await registry.handle(state, "/status")
    assert "Tasks in memory: 1 (0 complete)" in (status or "")


@pytest.mark.asyncio
async def test_check_usage_and_bad_rows(state) -> None:
    assert "Usage" in (await registry.handle(state, "/check") or "")
    assert "Usage" in (await registry.handle(state, "/check zero") or "")
    assert "No task at position" in (await registry.handle(state, "/check 9") or "")


@pytest.mark.asyncio
async def test_later_command_schedules_add(state) -> None:
    reply = await registry.handle(state, "/later Call mom")
    assert reply == "Will add in 0s."

    await state.scheduler.drain()
    assert [t.name for t in state.store.load()] == ["Call mom"]
