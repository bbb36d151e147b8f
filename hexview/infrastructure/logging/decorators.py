"""Timing decorator for resolver and enumerator entry points."""

import functools
import logging
import time
from typing import Callable, Optional

from .structured_logger import get_logger


def log_operation(operation_name: Optional[str] = None, level: int = logging.DEBUG):
    """
    Log the duration of each call; failures are logged with their traceback
    and re-raised.
    
    Example:
        @log_operation('enumerate_multi_resolution')
        def enumerate_many(self, bounds, resolutions):
            ...
    """
    def decorator(func: Callable) -> Callable:
        name = operation_name or func.__name__
        logger = get_logger(func.__module__)
        
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - started
                logger.error(
                    f"{name} failed after {elapsed * 1000:.2f}ms: {e}",
                    exc_info=True,
                    extra={
                        'context': {'operation': name},
                        'performance': {'duration_seconds': round(elapsed, 6),
                                        'error_type': type(e).__name__}
                    }
                )
                raise
            logger.log_performance(name, time.perf_counter() - started, level=level)
            return result
        
        return wrapper
    return decorator
