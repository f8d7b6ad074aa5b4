import time
import functools
from typing import Any, Awaitable, Callable, TypeVar, cast

from exam_results.utils.logger import logger

F = TypeVar('F', bound=Callable[..., Awaitable[Any]])


def async_timing_decorator(func: F) -> F:
    """
    Decorator that logs the execution time of a coroutine function.

    The elapsed time is logged even when the coroutine raises.

    Args:
        func: The coroutine function to time

    Returns:
        The wrapped coroutine function
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            execution_time = time.perf_counter() - start_time
            logger.info(f"{func.__name__} completed in {execution_time:.4f} seconds")

    return cast(F, wrapper)
