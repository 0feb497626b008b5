"""Ready-made ``on_error`` callbacks for ``retry``."""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

from retryloop.errors import Recovered


def unwrap(err: object) -> object:
    if isinstance(err, Recovered):
        return err.caused_by()
    return err


def log_failure(
    logger: logging.Logger | logging.LoggerAdapter,
    level: int = logging.WARNING,
) -> Callable[[object], None]:
    """Log every failure, showing the original fault instead of the ``Recovered`` message."""

    def _on_error(err: object) -> None:
        if isinstance(err, Recovered):
            logger.log(level, "Attempt raised: %r", err.caused_by())
        else:
            logger.log(level, "Attempt failed: %s", err)

    return _on_error


def ignore(*sentinels: object, then: Callable[[object], None] | None = None) -> Callable[[object], None]:
    """Drop failures that are one of ``sentinels``; forward the rest to ``then``.

    An operation that always returns a sentinel turns ``retry`` into a
    fixed-interval scheduler that runs exactly ``attempts`` times.
    """

    def _on_error(err: object) -> None:
        if any(err is sentinel for sentinel in sentinels):
            return
        if then is not None:
            then(err)

    return _on_error


def cancel_when(
    event: threading.Event,
    predicate: Callable[[object], bool] | None = None,
) -> Callable[[object], None]:
    """Set ``event`` on failure (or when ``predicate`` matches) so the operation can stop the loop."""

    def _on_error(err: object) -> None:
        if predicate is None or predicate(err):
            event.set()

    return _on_error
