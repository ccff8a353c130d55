"""Cancel-and-replace scheduling on the asyncio event loop."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, TypeVar

T = TypeVar("T")


def _relay(target: "asyncio.Future[Any]", task: "asyncio.Future[Any]") -> None:
    if target.done():
        return
    if task.cancelled():
        target.cancel()
    elif task.exception() is not None:
        target.set_exception(task.exception())  # type: ignore[arg-type]
    else:
        target.set_result(task.result())


class Debouncer:
    """A single pending-task slot.

    ``submit`` replaces whatever is waiting in the slot: the old timer is
    cancelled and its future is cancelled with it, so only the most recent
    submission runs once input goes quiet for ``delay`` seconds. Work whose
    timer already fired is left alone.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._future: asyncio.Future[Any] | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, fn: Callable[[], Awaitable[T]]) -> "asyncio.Future[T]":
        """Schedule ``fn`` after ``delay``; must be called from a running loop."""
        loop = asyncio.get_running_loop()
        self.cancel()
        future: asyncio.Future[T] = loop.create_future()
        self._future = future
        self._handle = loop.call_later(self.delay, self._fire, fn, future)
        return future

    def cancel(self) -> None:
        """Drop the pending submission, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._future is not None and not self._future.done():
            self._future.cancel()
        self._future = None

    def _fire(self, fn: Callable[[], Awaitable[Any]], future: "asyncio.Future[Any]") -> None:
        self._handle = None
        self._future = None
        task = asyncio.ensure_future(fn())
        task.add_done_callback(partial(_relay, future))
