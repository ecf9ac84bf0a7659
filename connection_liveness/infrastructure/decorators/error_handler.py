"""Error handling decorator for calls into collaborators."""

import logging
from functools import wraps
from typing import Any, Callable, Optional


def handle_collaborator_errors(
    operation_name: str,
    logger: Optional[logging.Logger] = None,
    reraise: bool = False,
    default_return: Any = None,
):
    """Decorator for standardized collaborator error handling.

    The monitor treats a failing transport or log sink as the
    collaborator's problem: the failure is logged and the monitor carries
    on with its next scheduled check. Collaborator calls are synchronous.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to re-raise exception after logging
        default_return: Value to return on error if not re-raising

    Example:
        @handle_collaborator_errors("Connection reopen")
        def _reopen(self) -> None:
            self._connection.reopen()
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except Exception as err:
                log.error(
                    "%s failed: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise
                return default_return

        return wrapper

    return decorator
