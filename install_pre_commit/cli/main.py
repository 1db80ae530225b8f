"""Process entry point for install-pre-commit."""

import asyncio
import logging
import sys
from collections.abc import Sequence

from ..config import DispatcherSettings
from ..output import OutputSink
from ..utils import setup_logging
from .default_command import default_command
from .dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


def build_dispatcher(
    settings: DispatcherSettings | None = None, sink: OutputSink | None = None
) -> CommandDispatcher:
    return CommandDispatcher(default=default_command, settings=settings, sink=sink)


def run(
    argv: Sequence[str] | None = None,
    sink: OutputSink | None = None,
    settings: DispatcherSettings | None = None,
) -> int:
    """
    Run one invocation and return the exit code, without exiting.

    Args:
        argv: Arguments excluding the program name, ``sys.argv[1:]`` by default
        sink: Output destination, stdout by default
        settings: Dispatcher settings, defaults to ``DispatcherSettings()``

    Returns:
        Exit code for the process
    """
    setup_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    dispatcher = build_dispatcher(settings, sink)

    instruction = dispatcher.completion_instruction()
    if instruction:
        logger.debug(f"Serving shell completion request: {instruction}")
        return dispatcher.complete(instruction)

    outcome = asyncio.run(dispatcher.dispatch(args))
    logger.debug(f"Invocation finished: {outcome}")
    return outcome.exit_code


def main() -> None:
    """Console script entry point."""
    sys.exit(run())
