"""Cancellable deferred callbacks for the update scheduler.

A backend exposes `call_later(delay, callback)` and returns a handle
with `cancel()`. Three backends are provided:

- ThreadingTimerBackend: one daemon `threading.Timer` per call
- AsyncioTimerBackend: `loop.call_later` on a host event loop
- ManualClock: simulated time, advanced explicitly (tests, replays)
"""

from typing import Callable, List, Optional, Protocol
import asyncio
import heapq
import itertools
import threading


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class TimerBackend(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class ThreadingTimerBackend:
    """Runs each callback on its own daemon timer thread."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class AsyncioTimerBackend:
    """Schedules callbacks on an asyncio event loop.

    Callbacks run on the loop's thread, so this backend must be used
    from within that loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class _ManualTimer:
    def __init__(self, due: float, seq: int, callback: Callable[[], None]):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __lt__(self, other: "_ManualTimer") -> bool:
        return (self.due, self.seq) < (other.due, other.seq)


class ManualClock:
    """Simulated clock: nothing fires until `advance()` moves time forward.

    Due callbacks run in due-time order; ties run in scheduling order.
    A callback may schedule further timers, which fire within the same
    `advance()` if they fall due before its end.
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[_ManualTimer] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualTimer:
        timer = _ManualTimer(self.now + delay, next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self._queue if not t.cancelled)

    def advance(self, seconds: float) -> int:
        """Move time forward, running every callback that falls due.

        Returns the number of callbacks run.
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = timer.due
            timer.callback()
            fired += 1
        self.now = target
        return fired
