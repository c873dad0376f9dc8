"""Retry decorator for handling GitHub API rate limits.

Release notes generation issues a burst of label existence checks at once, which
can trip GitHub's secondary rate limits. Calls wrapped with this decorator wait
for the period GitHub asks for and try again; every other error is raised as-is.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Callable, Mapping, TypeVar

import structlog
from github import GithubException, RateLimitExceededException

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _get_header(headers: Mapping[str, Any] | None, name: str) -> Any:
    """Case-insensitive header lookup."""
    for key, value in (headers or {}).items():
        if key.lower() == name:
            return value
    return None


def is_rate_limit_error(exc: GithubException) -> bool:
    """Check if a GitHub error is a (primary or secondary) rate limit error."""
    if isinstance(exc, RateLimitExceededException):
        return True
    if exc.status == 429:
        return True
    return exc.status == 403 and "rate limit" in str(exc).lower()


def wait_time_from_headers(headers: Mapping[str, Any] | None, default: float, function_name: str) -> float:
    """Determine how long to wait based on the retry-after and x-ratelimit-reset headers."""
    retry_after = _get_header(headers, "retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after, function=function_name)
            return default

    rate_limit_reset = _get_header(headers, "x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset, function=function_name)
            return default
        current_timestamp = int(time.time())
        if reset_timestamp > current_timestamp:
            return float(reset_timestamp - current_timestamp + 1)

    return default


def retry_on_rate_limit(
    max_retries: int = 10,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls that hit a rate limit.

    Args:
        max_retries: Maximum number of retry attempts (default: 10)
        initial_delay: Delay in seconds used when GitHub gives no hint (default: 10.0)
        max_delay: Upper bound in seconds for any single wait (default: 300.0)
        exponential_base: Backoff multiplier applied after every attempt (default: 2.0)

    Returns:
        Decorated function with retry logic

    Example:
        @retry_on_rate_limit()
        async def label_exists(self, name: str) -> bool:
            ...
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except GithubException as e:
                    if not is_rate_limit_error(e):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=e.status,
                        )
                        raise
                    wait_time = min(wait_time_from_headers(e.headers, delay, func.__name__), max_delay)

                logger.warning(
                    f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
