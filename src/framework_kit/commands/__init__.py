"""CLI commands. Each command drives the FrameworkManager stored on the click context."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from framework_kit.manager import FrameworkManager


def get_manager(ctx: click.Context) -> FrameworkManager:
    return ctx.find_root().obj["manager"]


T = TypeVar("T")


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a manager coroutine to completion from a synchronous command."""
    return asyncio.run(coro)
