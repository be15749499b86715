"""Bounded retry with exponential backoff."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")

BackoffFn = Callable[[int], float]
FailureCallback = Callable[[int, int, Exception, float | None], None]


class RetryError(Exception):
    """Raised when every attempt of a retried call has failed."""

    def __init__(self, attempts: int, last_error: Exception) -> None:
        super().__init__(f"Gave up after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


def exponential_backoff(attempt: int, base: float = 1.0) -> float:
    """Delay in seconds to wait after the given (1-based) failed attempt."""
    return base * 2 ** (attempt - 1)


def retry_call(
    func: Callable[[], T],
    max_attempts: int = 3,
    backoff: BackoffFn = exponential_backoff,
    sleep: Callable[[float], None] = time.sleep,
    on_failure: FailureCallback | None = None,
) -> T:
    """Call ``func`` until it succeeds or ``max_attempts`` is reached.

    Args:
        func: Zero-argument callable to invoke
        max_attempts: Total number of attempts, including the first
        backoff: Maps the failed attempt number to a delay in seconds
        sleep: Function used to wait between attempts
        on_failure: Called as ``(attempt, max_attempts, error, delay)`` after
            each failure; ``delay`` is None when no retry follows

    Returns:
        Whatever ``func`` returns on its first successful attempt

    Raises:
        RetryError: If every attempt raised
        ValueError: If max_attempts is less than 1
    """
    last_error: Exception | None = None
    for attempt in range(1, max_attempts + 1):
        try:
            return func()
        except Exception as e:
            last_error = e
            delay = backoff(attempt) if attempt < max_attempts else None
            if on_failure:
                on_failure(attempt, max_attempts, e, delay)
            if delay is not None:
                sleep(delay)

    if last_error is None:
        raise ValueError("max_attempts must be at least 1")
    raise RetryError(max_attempts, last_error)
