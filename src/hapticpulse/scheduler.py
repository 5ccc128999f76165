"""
Delayed-callback schedulers used by HapticPulse.

A scheduler runs a callback after a delay and can cancel it before it fires.
AsyncioScheduler uses the running event loop; VirtualScheduler keeps its own
clock that is advanced by hand, for simulations and tests.

Usage:
    scheduler = VirtualScheduler()
    handle = scheduler.call_later(1.0, lambda: print("fired"))
    scheduler.advance(0.5)  # nothing yet
    scheduler.advance(0.5)  # prints "fired"
"""

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

logger = logging.getLogger("hapticpulse.scheduler")


class Scheduler(ABC):
    """Abstract base class for delayed callback execution.

    Implementations must:
    - Fire each callback at most once
    - Return False from cancel() when the call already fired or was cancelled
    """

    @abstractmethod
    def now(self) -> float:
        """Current scheduler clock in seconds."""
        ...

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], Any]) -> Any:
        """Run callback after delay seconds. Returns a cancellable handle."""
        ...

    @abstractmethod
    def cancel(self, handle: Any) -> bool:
        """Cancel a pending call. Returns True if it was still pending."""
        ...


class AsyncioScheduler(Scheduler):
    """Schedules callbacks on the running asyncio event loop.

    The loop is looked up on every call, so one scheduler can be shared by
    controllers created before the loop starts.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> "LoopCall":
        call = LoopCall(callback)
        call.timer = self.loop.call_later(delay, call.run)
        return call

    def cancel(self, handle: "LoopCall") -> bool:
        if not handle.pending:
            return False
        handle.cancelled = True
        if handle.timer is not None:
            handle.timer.cancel()
        return True


class LoopCall:
    """A callback registered with an AsyncioScheduler.

    asyncio.TimerHandle does not record whether it ran, so the fired flag
    is kept here.
    """

    __slots__ = ("callback", "timer", "cancelled", "fired")

    def __init__(self, callback: Callable[[], Any]):
        self.callback = callback
        self.timer: Optional[asyncio.TimerHandle] = None
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def run(self) -> None:
        if not self.pending:
            return
        self.fired = True
        self.callback()


class ScheduledCall:
    """A callback registered with a VirtualScheduler."""

    __slots__ = ("when", "callback", "cancelled", "fired")

    def __init__(self, when: float, callback: Callable[[], Any]):
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def __repr__(self) -> str:
        state = "pending" if self.pending else ("fired" if self.fired else "cancelled")
        return f"<ScheduledCall(when={self.when}, {state})>"


class VirtualScheduler(Scheduler):
    """
    Scheduler with a manually advanced clock.

    Nothing fires until advance() is called. Calls due at the same time fire
    in the order they were scheduled, and calls scheduled by a callback fire
    within the same advance() if they fall inside the window.

    Attributes:
        start: Initial clock value in seconds (default: 0.0)
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: list[tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ScheduledCall:
        call = ScheduledCall(self._now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (call.when, next(self._counter), call))
        return call

    def cancel(self, handle: ScheduledCall) -> bool:
        if not handle.pending:
            return False
        handle.cancelled = True
        return True

    def pending(self) -> int:
        """Number of calls that have neither fired nor been cancelled."""
        return sum(1 for _, _, call in self._queue if call.pending)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every call that becomes due.

        Args:
            seconds: How far to advance the clock (must be >= 0)

        Returns:
            Number of callbacks fired

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance clock backwards: {seconds}")

        target = self._now + seconds
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            when, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now = when
            call.fired = True
            fired += 1
            call.callback()

        self._now = target
        if fired:
            logger.debug(f"Advanced to t={target:.3f}s, fired {fired} call(s)")
        return fired
