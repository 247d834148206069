"""Error handling decorators for standardized exception handling."""

import asyncio
import inspect
import logging
from functools import wraps
from typing import Any, Callable

from websockets.exceptions import WebSocketException

from ...domain.exceptions import TetherError


def handle_transport_errors(
    operation_name: str,
    logger: logging.Logger = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """Decorator for standardized transport and callback error handling.

    Wraps both coroutine functions and plain functions. Expected failures
    (timeouts, tether errors, websocket errors) are logged without a stack
    trace; anything else is logged with one.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to re-raise exception after logging
        default_return: Value to return on error if not re-raising

    Example:
        @handle_transport_errors("Handshake confirmation", reraise=False, default_return=False)
        async def confirm(self) -> bool:
            return await self._on_connected()
    """

    def decorator(func: Callable):
        def _log_failure(log: logging.Logger, err: Exception, timeout_val: Any) -> None:
            if isinstance(err, asyncio.TimeoutError):
                log.warning(
                    "%s timed out after %ss: %s",
                    operation_name,
                    timeout_val,
                    err,
                )
            elif isinstance(err, TetherError):
                log.error("%s failed: %s", operation_name, err)
            elif isinstance(err, WebSocketException):
                log.error("%s websocket error: %s", operation_name, err)
            else:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except Exception as err:
                _log_failure(log, err, kwargs.get("timeout", "unknown"))
                if reraise:
                    raise
                return default_return

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except Exception as err:
                _log_failure(log, err, kwargs.get("timeout", "unknown"))
                if reraise:
                    raise
                return default_return

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
