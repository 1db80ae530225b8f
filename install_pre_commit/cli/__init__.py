"""Command-line interface for install-pre-commit."""

from .default_command import default_command
from .dispatcher import CommandDispatcher, GlobalOptions, Invocation, Outcome, OutcomeKind
from .failure import on_failure, on_failure_async
from .main import run

__all__ = [
    "CommandDispatcher",
    "GlobalOptions",
    "Invocation",
    "Outcome",
    "OutcomeKind",
    "default_command",
    "on_failure",
    "on_failure_async",
    "run",
]
