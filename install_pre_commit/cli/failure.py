"""Diagnostic output for parse, validation and handler failures."""

import logging
import traceback
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from ..console import ScriptLogger

logger = logging.getLogger(__name__)

FailureCallback: TypeAlias = Callable[[ScriptLogger, str, BaseException | None], Awaitable[None] | None]

FATAL_HEADER = "Fatal error while running script!"


def format_stack_trace(error: BaseException | None) -> str | None:
    """Return the formatted traceback of ``error``, or None when it has none."""
    if error is None or error.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(error)).rstrip("\n")


def _report(console: ScriptLogger, message: str) -> None:
    console.error(FATAL_HEADER)
    console.error(f'Error message: "{message}"')


def on_failure(
    console: ScriptLogger, message: str, error: BaseException | None = None
) -> None:
    """Log a failure without raising or exiting."""
    logger.debug(f"Reporting failure: {message}")
    _report(console, message)
    stack_trace = format_stack_trace(error)
    if stack_trace:
        console.error("Stack trace:")
        console.sink.write_line(stack_trace)
    else:
        console.error("No stack trace available!")


async def on_failure_async(
    console: ScriptLogger, message: str, error: BaseException | None = None
) -> None:
    """Awaitable form of :func:`on_failure`."""
    logger.debug(f"Reporting failure: {message}")
    _report(console, message)
    stack_trace = format_stack_trace(error)
    if stack_trace:
        console.error("Stack trace:")
        await console.sink.write_line_async(stack_trace)
    else:
        console.error("No stack trace available!")
