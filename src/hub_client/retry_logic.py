"""Retry handling for content hub API rate limits.

Calls answered with HTTP 429 are retried with exponential backoff (1s, 2s, 4s);
every other error is raised on the first attempt.
"""

import logging
import time
from typing import Callable, Optional, TypeVar

from .errors import APIAccessError

logger = logging.getLogger(__name__)

T = TypeVar('T')

MAX_RETRIES = 3
RATE_LIMIT_STATUS = 429


def retry_on_rate_limit(func: Callable[..., T], *args, **kwargs) -> T:
    """Call ``func``, retrying while the hub answers with a rate limit.

    Raises:
        APIAccessError: If the rate limit persists after MAX_RETRIES retries
        Other exceptions: Passed through immediately without retry

    Example:
        >>> response = retry_on_rate_limit(session.get, url, timeout=30)
    """
    attempt = 0
    while True:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if not _is_rate_limit_error(e):
                raise
            if attempt == MAX_RETRIES:
                logger.error(f"Rate limit persisted after {MAX_RETRIES} retries, giving up")
                raise APIAccessError(
                    f"Content hub API failure (after {MAX_RETRIES} retries)"
                ) from e

        wait_time = 2 ** attempt
        attempt += 1
        logger.info(f"Rate limited, retrying in {wait_time}s ({attempt}/{MAX_RETRIES})")
        time.sleep(wait_time)


def _status_code(exception: Exception) -> Optional[int]:
    status = getattr(exception, 'status_code', None)
    if status is not None:
        return status
    response = getattr(exception, 'response', None)
    return getattr(response, 'status_code', None) if response is not None else None


def _is_rate_limit_error(exception: Exception) -> bool:
    """True only for errors carrying an HTTP 429 status; message text is ignored."""
    return _status_code(exception) == RATE_LIMIT_STATUS
