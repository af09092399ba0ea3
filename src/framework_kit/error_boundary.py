"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from framework_kit.errors import FrameworkKitError, UserCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    obj = ctx.find_root().obj
    return isinstance(obj, dict) and bool(obj.get("debug"))


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - UserCancelledError: Reported as a cancellation, not as an error
        - FrameworkKitError: Catalog, conflict, not-found and not-installed errors
        - OSError: Storage failures (missing files, permission denied, ...)
        - ValueError: Invalid input or configuration

    With --debug the exception is re-raised so the full stack trace is shown.
    All other exceptions bubble up normally.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UserCancelledError as e:
            click.echo(f"Cancelled: {e}", err=True)
            raise SystemExit(1) from None
        except (FrameworkKitError, OSError, ValueError) as e:
            if _debug_enabled():
                raise
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
