"""
Centralized logging and error handling decorators for service operations.
Wraps service calls so every operation logs its start and completion, and
failures are logged with context before they propagate.
"""
import functools
import inspect
import logging
import traceback
from typing import Any, Callable, Optional, Tuple, Type


logger = logging.getLogger(__name__)


def log_operation(
    operation: str,
    level: str = "debug"
) -> Callable:
    """
    Decorator to log service operations with context.

    Args:
        operation: Description of the operation
        level: Logging level ('debug', 'info', 'warning', 'error')

    Returns:
        Decorated function with operation logging
    """
    def decorator(func: Callable) -> Callable:
        is_async = inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(getattr(func, '__wrapped__', None))

        if not is_async:
            @functools.wraps(func)
            def sync_wrapper(*args, **kwargs) -> Any:
                logger_method = getattr(logger, level)
                func_name = getattr(func, '__name__', 'unknown')
                logger_method(f"Starting {operation} via {func_name}")

                try:
                    result = func(*args, **kwargs)
                    logger_method(f"Completed {operation} via {func_name}")
                    return result
                except Exception as exc:
                    logger_method(f"Failed {operation} via {func_name}: {str(exc)}")
                    raise

            return sync_wrapper

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            logger_method = getattr(logger, level)
            func_name = getattr(func, '__name__', 'unknown')
            logger_method(f"Starting {operation} via {func_name}")

            try:
                result = await func(*args, **kwargs)
                logger_method(f"Completed {operation} via {func_name}")
                return result
            except Exception as exc:
                logger_method(f"Failed {operation} via {func_name}: {str(exc)}")
                raise

        return async_wrapper

    return decorator


def handle_operation_exceptions(
    operation_name: Optional[str] = None,
    expected: Tuple[Type[Exception], ...] = (),
) -> Callable:
    """
    Decorator that logs failures of a synchronous service operation and re-raises.

    Exceptions listed in ``expected`` are business outcomes (e.g. a missing
    record) and are logged at warning level without a traceback. Anything
    else is logged at error level with the traceback.

    Args:
        operation_name: Name of the operation for logging (defaults to function name)
        expected: Exception types that are part of the normal contract

    Returns:
        Decorated function with error logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            operation = operation_name or getattr(func, '__name__', 'unknown')
            try:
                return func(*args, **kwargs)
            except expected as exc:
                logger.warning(f"{operation} rejected: {type(exc).__name__}: {str(exc)}")
                raise
            except Exception as exc:
                error_msg = f"Unexpected error in {operation}: {type(exc).__name__}: {str(exc)}"
                logger.error(f"{error_msg}\nTraceback: {traceback.format_exc()}")
                raise

        return wrapper

    return decorator
