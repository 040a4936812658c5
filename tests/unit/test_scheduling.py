"""Periodic loop used by the lifespan sweeps."""

import asyncio

import pytest

from podium.infrastructure.scheduling import run_periodically


async def test_failing_run_is_logged_and_loop_continues(
    caplog: pytest.LogCaptureFixture,
) -> None:
    calls = 0
    second_run = asyncio.Event()

    async def job() -> None:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("database unavailable")
        second_run.set()

    task = asyncio.create_task(run_periodically("test sweep", 0, job))
    await asyncio.wait_for(second_run.wait(), timeout=1)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert calls >= 2
    assert "Periodic test sweep run failed" in caplog.text
