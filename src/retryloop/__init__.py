"""Retry a fallible function a fixed number of times, or forever."""

from retryloop.errors import Recovered
from retryloop.retry import DEFAULT_PERIOD, retry, try_call

__all__ = ["DEFAULT_PERIOD", "Recovered", "retry", "try_call"]
