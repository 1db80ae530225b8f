"""Leveled, optionally colorized status output for the script user."""

import logging
import os
from enum import Enum
from typing import Any

import click

from .output import OutputSink

logger = logging.getLogger(__name__)


class Level(Enum):
    """Output levels with their fixed label and 256-colour code."""

    ERROR = ("ERROR", 196)
    WARNING = ("WARN", 208)
    INFO = ("INFO", 111)
    VERBOSE = ("VERBOSE", 141)

    def __init__(self, label: str, color: int):
        self.label = label
        self.color = color


def color_disabled_by_env() -> bool:
    """Whether the environment asks for uncoloured output (https://no-color.org)."""
    return bool(os.environ.get("NO_COLOR"))


def _stringify(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


class ScriptLogger:
    """Formats leveled messages and writes them through an output sink.

    Each invocation builds its own instance; verbosity is fixed at construction.
    """

    def __init__(
        self,
        sink: OutputSink | None = None,
        verbose: bool = False,
        color: bool | None = None,
    ):
        """
        Args:
            sink: Destination for formatted lines, stdout by default
            verbose: Whether verbose-level messages are emitted
            color: Force colour on or off; ``None`` colours only terminal
                output and honours ``NO_COLOR``
        """
        self.sink = sink or OutputSink()
        self.verbose_enabled = verbose
        self._color = color

    @property
    def color_enabled(self) -> bool:
        if self._color is not None:
            return self._color
        return not color_disabled_by_env() and self.sink.isatty()

    def format(self, level: Level, *values: Any) -> str:
        """Render a single line for ``level`` without the trailing newline."""
        message = " ".join(_stringify(value) for value in values)
        try:
            label = f"[{level.label}]"
            if self.color_enabled:
                label = click.style(label, fg=level.color)
            return f"{label} {message}"
        except Exception as e:
            logger.debug(f"Falling back to raw output after formatting failure: {e}")
            return message

    def log(self, level: Level, *values: Any) -> None:
        if level is Level.VERBOSE and not self.verbose_enabled:
            return
        self.sink.write_line(self.format(level, *values))

    def error(self, *values: Any) -> None:
        self.log(Level.ERROR, *values)

    def warning(self, *values: Any) -> None:
        self.log(Level.WARNING, *values)

    def info(self, *values: Any) -> None:
        self.log(Level.INFO, *values)

    def verbose(self, *values: Any) -> None:
        self.log(Level.VERBOSE, *values)
