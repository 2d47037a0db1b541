# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from task_keeper.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("task_keeper.tasks.task_api", logging.DEBUG, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("asyncio", logging.WARNING, False),
        ("asyncio", logging.CRITICAL, True),
    ],
)
def test_console_filter(name, level, shown) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown
