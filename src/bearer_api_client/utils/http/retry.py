"""Retry policy for async HTTP operations.

This module provides a bounded retry policy with exponential backoff that
wraps a single send attempt. A response is retried when its status is
outside the 2xx range (503 included), and an attempt is retried when it
raises a transport-level ``httpx.RequestError``. After the last retry the
final response is returned, or the final exception re-raised.

Note that every non-2xx status is retried, including permanent client
errors such as 400 or 404.
"""

import asyncio
import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RETRY_COUNT = 3
DEFAULT_BASE_DELAY = 2.0
RETRY_STATUS_CODES: Tuple[int, ...] = (503,)


def is_transient_response(response: httpx.Response) -> bool:
    """Return whether ``response`` should be retried.

    :param response: Response of one attempt
    :type response: httpx.Response
    :return: True for any non-2xx status
    :rtype: bool
    """
    return (
        not response.is_success
        or response.status_code in RETRY_STATUS_CODES
    )


class RetryPolicy:
    """Bounded retry with exponential backoff.

    With the defaults an action runs at most four times (one attempt plus
    three retries), waiting 2s, 4s and 8s before the retries.

    :param retry_count: Number of retries after the initial attempt
    :type retry_count: int
    :param base_delay: Base of the exponential delay; retry ``n`` waits
                       ``base_delay ** n`` seconds
    :type base_delay: float
    :param exceptions: Exception types that trigger a retry
    :type exceptions: Tuple[Type[Exception], ...]
    :param retry_on: Predicate on a result that triggers a retry; None never
                     retries a returned result
    :type retry_on: Optional[Callable[[Any], bool]]
    :param sleep: Coroutine used to wait between attempts; defaults to
                  ``asyncio.sleep``
    :type sleep: Optional[Callable[[float], Awaitable[None]]]
    """

    def __init__(
        self,
        retry_count: int = DEFAULT_RETRY_COUNT,
        base_delay: float = DEFAULT_BASE_DELAY,
        exceptions: Tuple[Type[Exception], ...] = (httpx.RequestError,),
        retry_on: Optional[Callable[[Any], bool]] = is_transient_response,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        if retry_count < 0:
            raise ValueError("retry_count must be >= 0")
        self.retry_count = retry_count
        self.base_delay = base_delay
        self.exceptions = exceptions
        self.retry_on = retry_on
        self._sleep = sleep

    def delay_for(self, retry: int) -> float:
        """Return the wait, in seconds, before retry number ``retry`` (1-based)."""
        return self.base_delay ** retry

    async def execute(self, action: Callable[[], Awaitable[T]]) -> T:
        """Run ``action`` under the retry policy.

        :param action: Zero-argument coroutine function performing one attempt
        :type action: Callable[[], Awaitable[T]]
        :return: Result of the first non-retryable attempt, or of the last attempt
        :rtype: T
        :raises Exception: The last exception when retries are exhausted, or any
                           exception not listed in ``exceptions``
        """
        for attempt in range(self.retry_count + 1):
            is_last = attempt == self.retry_count
            try:
                result = await action()
            except self.exceptions as e:
                if is_last:
                    logger.warning(
                        f"Giving up after {attempt + 1} attempt(s): {type(e).__name__}: {e}"
                    )
                    raise
                reason = f"{type(e).__name__}: {e}"
            else:
                if self.retry_on is None or not self.retry_on(result):
                    if attempt > 0:
                        logger.info(f"Succeeded after {attempt + 1} attempts")
                    return result
                if is_last:
                    logger.warning(f"Giving up after {attempt + 1} attempt(s)")
                    return result
                reason = f"status {getattr(result, 'status_code', result)}"

            delay = self.delay_for(attempt + 1)
            logger.warning(
                f"Attempt {attempt + 1} failed ({reason}); retrying in {delay:.1f}s"
            )
            await (self._sleep or asyncio.sleep)(delay)

        raise AssertionError("unreachable")


def async_retry(
    retry_count: int = DEFAULT_RETRY_COUNT,
    base_delay: float = DEFAULT_BASE_DELAY,
    exceptions: Tuple[Type[Exception], ...] = (httpx.RequestError,),
    retry_on: Optional[Callable[[Any], bool]] = is_transient_response,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Create a retry decorator for async functions.

    The decorated function is run through a :class:`RetryPolicy` built
    from the given arguments.

    :param retry_count: Number of retries after the initial attempt
    :type retry_count: int
    :param base_delay: Base of the exponential delay in seconds
    :type base_delay: float
    :param exceptions: Exception types that trigger a retry
    :type exceptions: Tuple[Type[Exception], ...]
    :param retry_on: Predicate on the result that triggers a retry
    :type retry_on: Optional[Callable[[Any], bool]]
    :return: Decorator function that can be applied to async functions
    """
    policy = RetryPolicy(
        retry_count=retry_count,
        base_delay=base_delay,
        exceptions=exceptions,
        retry_on=retry_on,
    )

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await policy.execute(lambda: func(*args, **kwargs))

        return wrapper

    return decorator
