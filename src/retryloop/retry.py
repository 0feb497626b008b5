"""Simple retry helper for fallible operations."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
import logging
import time

from retryloop.errors import Recovered

DEFAULT_PERIOD = 5.0

logger = logging.getLogger(__name__)

Operation = Callable[[], object]
OnError = Callable[[object], None]


def try_call(fn: Operation) -> object | None:
    """Run ``fn`` and return its failure, converting a raised exception into ``Recovered``.

    ``None`` means success; any other return value is handed back unchanged.
    """
    try:
        return fn()
    except Exception as exc:  # intentionally broad: every fault becomes a failure value
        logger.debug("Recovered from %r raised by %r", exc, fn)
        return Recovered(exc)


def _period_seconds(period: float | timedelta | None) -> float:
    if isinstance(period, timedelta):
        period = period.total_seconds()
    if period is None or period <= 0:
        return DEFAULT_PERIOD
    return float(period)


def retry(
    fn: Operation,
    attempts: int,
    on_error: OnError | None = None,
    period: float | timedelta | None = None,
) -> None:
    """Call ``fn`` until it succeeds, at most ``attempts`` times.

    A negative ``attempts`` retries forever and ``0`` never calls ``fn``.
    Every failure is passed to ``on_error`` before sleeping ``period`` seconds
    (default 5s); there is no sleep after the last attempt.
    """
    if not callable(fn):
        raise TypeError(f"fn must be callable, got {type(fn).__name__}")
    if on_error is not None and not callable(on_error):
        raise TypeError(f"on_error must be callable or None, got {type(on_error).__name__}")
    if isinstance(attempts, bool) or not isinstance(attempts, int):
        raise TypeError(f"attempts must be an int, got {type(attempts).__name__}")

    delay = _period_seconds(period)
    remaining = attempts
    attempt = 0
    while remaining != 0:
        if remaining > 0:
            remaining -= 1
        attempt += 1

        err = try_call(fn)
        if err is None:
            logger.debug("Attempt %d succeeded", attempt)
            break

        if on_error is not None:
            on_error(err)
        if remaining != 0:
            logger.debug("Attempt %d failed, sleeping %.3fs", attempt, delay)
            time.sleep(delay)
