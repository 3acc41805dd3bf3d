"""Provider error taxonomy and call timeouts."""

import asyncio
import functools
from typing import Any, Callable, Optional, TypeVar

from cta_rewriter.utils.logger import get_logger

logger = get_logger()

T = TypeVar("T")


class ProviderError(Exception):
    """Raised when an upstream completion call fails.

    Attributes:
        provider: Name of the provider that failed.
        message: The provider's error text (may be empty).
    """

    def __init__(self, provider: str, message: str = ""):
        super().__init__(message)
        self.provider = provider
        self.message = message


class ProviderTimeoutError(ProviderError):
    """Raised when a completion call exceeds its time budget."""

    def __init__(self, provider: str, timeout: float):
        super().__init__(provider, f"{provider} request timed out after {timeout:g}s")
        self.timeout = timeout


def with_timeout(
    timeout: Optional[float],
    provider: str,
) -> Callable:
    """Decorator bounding an async provider call and normalizing its errors.

    The call is attempted exactly once. A timeout becomes
    ProviderTimeoutError, any other exception becomes ProviderError.

    Args:
        timeout: Seconds to wait, or None for no bound.
        provider: Provider name attached to raised errors.

    Returns:
        Decorated coroutine function.

    Example:
        @with_timeout(30.0, provider="openai")
        async def call_api():
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await asyncio.wait_for(func(*args, **kwargs), timeout=timeout)
            except ProviderError:
                raise
            except asyncio.TimeoutError as e:
                logger.error(f"{provider} call {func.__name__} timed out after {timeout}s")
                raise ProviderTimeoutError(provider, timeout) from e
            except Exception as e:
                logger.error(f"{provider} call {func.__name__} failed: {e}")
                raise ProviderError(provider, str(e)) from e

        return async_wrapper

    return decorator
