"""Bounded waits and delays on top of the running asyncio event loop.

All durations are in milliseconds. The delays are scheduled eagerly: the
timer starts when the function is called, not when the result is awaited.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from timely.util import SECOND

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeoutExceededError(TimeoutError):
    """Raised when a bounded wait elapses before its operation settles."""

    def __init__(self, message: str, duration: float):
        super().__init__(message)
        self.duration: float = duration


def time_after_with_cancel(
    ms: float,
) -> tuple["asyncio.Future[None]", Callable[[], None]]:
    """
    Return a delay future together with a function that cancels it.

    Args:
        ms: Delay in milliseconds

    Returns:
        (delay, cancel) where delay resolves to None after ``ms`` and cancel
        stops the timer so the delay never resolves. Calling cancel after the
        delay fired is a no-op.

    Example:
        >>> delay, cancel = time_after_with_cancel(100)
        >>> cancel()  # delay stays pending forever
    """
    loop = asyncio.get_running_loop()
    delay: asyncio.Future[None] = loop.create_future()

    def fire() -> None:
        if not delay.done():
            delay.set_result(None)

    handle = loop.call_later(ms / SECOND, fire)

    def cancel() -> None:
        handle.cancel()

    return delay, cancel


def time_after(ms: float) -> "asyncio.Future[None]":
    """Return a future that resolves to None after ``ms`` milliseconds."""
    delay, _ = time_after_with_cancel(ms)
    return delay


def _format_ms(duration: float) -> str:
    # Integral floats print without a trailing ".0"
    if isinstance(duration, float) and duration.is_integer():
        return str(int(duration))
    return str(duration)


def _discard(task: "asyncio.Future[object]") -> None:
    # Retrieve the outcome of an operation nobody awaits any more
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug("Discarded failure from abandoned operation: %r", error)


async def resolve_with_timeout(
    operation: Awaitable[T], duration: float, message: str | None = None
) -> T:
    """
    Await ``operation``, failing if ``duration`` elapses first.

    The first side to settle wins. If the operation settles first its result
    is returned or its exception propagates unchanged. If the delay settles
    first, TimeoutExceededError is raised and the operation keeps running,
    its eventual outcome discarded. The delay timer is released on every
    exit path.

    Args:
        operation: Any awaitable (coroutine, task or future)
        duration: Timeout in milliseconds
        message: Optional message for the TimeoutExceededError

    Raises:
        TimeoutExceededError: If the timeout is reached first
    """
    task = asyncio.ensure_future(operation)
    delay, cancel = time_after_with_cancel(duration)
    try:
        await asyncio.wait({task, delay}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        cancel()
        if not task.done():
            task.add_done_callback(_discard)

    if task.done():
        return task.result()

    logger.debug("Timeout of %sms exceeded; discarding pending operation", duration)
    default = f"timeout exceeded ({_format_ms(duration)}ms)"
    raise TimeoutExceededError(message or default, duration)
