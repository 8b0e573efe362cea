"""Bounded retry loops with a fixed interval and an overall deadline."""
import asyncio
import time
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

T = TypeVar('T')

class Deadline:
    """Tracks the remaining time of a polling loop."""

    def __init__(self, timeout_ms: int, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.timeout_ms = timeout_ms
        self._expires_at = clock() + timeout_ms / 1000

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self._expires_at - self._clock())

    def expired(self) -> bool:
        return self.remaining() <= 0

    def next_sleep(self, interval_ms: int) -> float:
        """Sleep for one interval, without overshooting the deadline."""
        return min(interval_ms / 1000, self.remaining())

def _give_up(last_exception: BaseException, timeout_error: Optional[BaseException]):
    if timeout_error is not None:
        raise timeout_error from last_exception
    raise last_exception

async def poll(operation: Callable[[], Awaitable[T]], interval_ms: int, timeout_ms: int,
               retry_on: Tuple[Type[BaseException], ...] = (Exception,),
               timeout_error: Optional[BaseException] = None) -> T:
    """Await ``operation`` until it succeeds or ``timeout_ms`` elapses.

    Exceptions listed in ``retry_on`` mean "not ready yet"; anything else
    propagates immediately. At the deadline ``timeout_error`` is raised
    (chained to the last failure) or, when not given, the last failure
    itself.
    """
    deadline = Deadline(timeout_ms)

    while True:
        try:
            return await operation()
        except retry_on as e:
            last_exception = e

        if deadline.expired():
            _give_up(last_exception, timeout_error)
        await asyncio.sleep(deadline.next_sleep(interval_ms))

def poll_sync(operation: Callable[[], T], interval_ms: int, timeout_ms: int,
              retry_on: Tuple[Type[BaseException], ...] = (Exception,),
              timeout_error: Optional[BaseException] = None) -> T:
    """Blocking counterpart of :func:`poll` for synchronous callers."""
    deadline = Deadline(timeout_ms)

    while True:
        try:
            return operation()
        except retry_on as e:
            last_exception = e

        if deadline.expired():
            _give_up(last_exception, timeout_error)
        time.sleep(deadline.next_sleep(interval_ms))
