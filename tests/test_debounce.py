import asyncio

import pytest

from geodash.debounce import Debouncer


@pytest.mark.asyncio
async def test_only_the_last_submission_runs():
    calls: list[int] = []
    debouncer = Debouncer(0.01)

    async def work(n: int) -> int:
        calls.append(n)
        return n

    first = debouncer.submit(lambda: work(1))
    second = debouncer.submit(lambda: work(2))
    third = debouncer.submit(lambda: work(3))

    assert await third == 3
    assert first.cancelled()
    assert second.cancelled()
    assert calls == [3]


@pytest.mark.asyncio
async def test_pending_slot():
    debouncer = Debouncer(0.01)

    async def work() -> str:
        return "done"

    assert not debouncer.pending
    future = debouncer.submit(work)
    assert debouncer.pending
    await future
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_started_work_is_not_cancelled():
    debouncer = Debouncer(0)
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow() -> str:
        started.set()
        await release.wait()
        return "slow"

    async def quick() -> str:
        return "quick"

    first = debouncer.submit(slow)
    await started.wait()
    second = debouncer.submit(quick)
    release.set()

    assert await first == "slow"
    assert await second == "quick"


@pytest.mark.asyncio
async def test_cancel_drops_the_pending_submission():
    calls: list[str] = []
    debouncer = Debouncer(0.01)

    async def work() -> None:
        calls.append("ran")

    future = debouncer.submit(work)
    debouncer.cancel()
    await asyncio.sleep(0.03)

    assert future.cancelled()
    assert not debouncer.pending
    assert calls == []


@pytest.mark.asyncio
async def test_errors_reach_the_caller():
    debouncer = Debouncer(0)

    async def broken() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await debouncer.submit(broken)


def test_submit_needs_a_running_loop():
    async def work() -> None:
        return None

    with pytest.raises(RuntimeError):
        Debouncer(0.01).submit(work)
