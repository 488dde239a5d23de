"""Retry utilities for remote store calls with exponential backoff."""
import logging
import re
from typing import Any, Awaitable, Callable, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from application.exceptions import RemoteUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RATE_LIMIT_STATUS = re.compile(r"\b429\b")
_SERVER_ERROR_STATUS = re.compile(r"\b50[0234]\b")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 0.5
DEFAULT_MAX_WAIT_SECONDS = 5.0


def is_transient_error(exception: BaseException) -> bool:
    """
    Determine if a remote failure is transient (worth retrying).

    Uses both exception type checking and string matching, since the
    Supabase client surfaces some transport failures as generic errors.

    Transient errors include:
    - Connection errors and timeouts
    - Server errors (5xx)
    - Rate limiting (429)

    Everything else (auth, permissions, bad requests) is permanent.
    """
    if isinstance(exception, (httpx.TimeoutException, httpx.TransportError)):
        return True
    if isinstance(exception, (ConnectionError, TimeoutError)):
        return True

    error_str = str(exception).lower()

    if _RATE_LIMIT_STATUS.search(error_str) or ("rate" in error_str and "limit" in error_str):
        return True
    if _SERVER_ERROR_STATUS.search(error_str):
        return True
    if "timeout" in error_str or "timed out" in error_str:
        return True
    if "temporary failure in name resolution" in error_str:
        return True

    return False


def _validate_retry_params(
    max_attempts: int,
    min_wait_seconds: float,
    max_wait_seconds: float,
) -> None:
    """
    Validate retry parameters.

    Raises:
        ValueError: If any parameter is invalid
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    if min_wait_seconds <= 0:
        raise ValueError(f"min_wait_seconds must be positive, got {min_wait_seconds}")
    if max_wait_seconds <= 0:
        raise ValueError(f"max_wait_seconds must be positive, got {max_wait_seconds}")
    if min_wait_seconds > max_wait_seconds:
        raise ValueError(
            f"min_wait_seconds ({min_wait_seconds}) cannot exceed "
            f"max_wait_seconds ({max_wait_seconds})"
        )


async def retry_unavailable(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """
    Await `func`, retrying while it raises RemoteUnavailable.

    Permanent failures (RemoteOperationFailed or anything else) are
    raised immediately. After the last attempt the final error is
    re-raised unchanged.

    Raises:
        ValueError: If parameters are invalid
    """
    _validate_retry_params(max_attempts, min_wait_seconds, max_wait_seconds)

    async for attempt in AsyncRetrying(
        retry=retry_if_exception_type(RemoteUnavailable),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait_seconds, max=max_wait_seconds),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            return await func(*args, **kwargs)

    raise RuntimeError("Unexpected state: no result and no exception")
