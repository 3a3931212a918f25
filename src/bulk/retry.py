"""
Retry Wrapper

Runs one generation call with a per-attempt timeout and exponential
backoff between attempts. Total attempts = retry_attempts + 1.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Tuple

from .config import BulkProcessingConfig
from .errors import ItemTimeoutError, TransientItemError

logger = logging.getLogger(__name__)

GenerateFn = Callable[[Any], Awaitable[Any]]


def backoff_delay_ms(config: BulkProcessingConfig, retry_number: int) -> float:
    """
    Delay before the given retry (1-based).

    retry_delay_ms * 2^(retry_number - 1): 1000, 2000, 4000, ...
    """
    return config.retry_delay_ms * (2 ** (retry_number - 1))


def describe_error(error: Optional[BaseException]) -> str:
    """Error message, falling back to the exception class name."""
    if error is None:
        return "Max retry attempts exceeded"
    return str(error) or type(error).__name__


async def run_with_retry(
    generate: GenerateFn,
    request: Any,
    config: BulkProcessingConfig,
    item_index: Optional[int] = None,
) -> Tuple[Any, int]:
    """
    Call generate(request) until it succeeds or attempts run out.

    Args:
        generate: Async generation function
        request: The generation request
        config: Retry/timeout configuration
        item_index: Item position, for logging

    Returns:
        (result, attempts used)

    Raises:
        TransientItemError: All attempts failed or timed out
    """
    max_attempts = config.retry_attempts + 1
    timeout_seconds = config.timeout_ms / 1000
    last_error: Optional[BaseException] = None

    for attempt in range(1, max_attempts + 1):
        try:
            result = await asyncio.wait_for(generate(request), timeout=timeout_seconds)
            logger.debug(f"Item {item_index} succeeded on attempt {attempt}")
            return result, attempt

        except asyncio.TimeoutError:
            last_error = ItemTimeoutError(config.timeout_ms)

        except Exception as e:
            last_error = e

        if attempt < max_attempts:
            delay_ms = backoff_delay_ms(config, attempt)
            logger.warning(
                f"Item {item_index} failed (attempt {attempt}/{max_attempts}): "
                f"{describe_error(last_error)}. Retrying in {delay_ms}ms..."
            )
            await asyncio.sleep(delay_ms / 1000)

    raise TransientItemError(
        describe_error(last_error),
        attempts=max_attempts,
        cause=last_error,
    )
