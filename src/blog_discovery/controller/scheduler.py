"""Cancellable deferred callbacks used for debouncing."""

import asyncio
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it runs."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Interface for arming deferred callbacks."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds unless cancelled.

        Args:
            delay: Delay in seconds.
            callback: Zero-argument callable.

        Returns:
            Handle whose ``cancel()`` prevents the callback from running.
        """
        ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    The loop is looked up when a callback is armed, so the scheduler can be
    created before the loop starts.

    Args:
        loop: Event loop to use. Defaults to the running loop at call time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay, callback)
