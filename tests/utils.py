"""Shared test utilities for building dispatchers with captured output."""

import io

from install_pre_commit.cli.dispatcher import CommandDispatcher, Invocation, Outcome, OutcomeKind
from install_pre_commit.config import DispatcherSettings
from install_pre_commit.output import OutputSink

TEST_TERMINAL_WIDTH = 200


class TtyBytesIO(io.BytesIO):
    def isatty(self) -> bool:
        return True


def captured_sink(tty: bool = False) -> OutputSink:
    return OutputSink(TtyBytesIO() if tty else io.BytesIO())


def output_of(sink: OutputSink) -> str:
    return sink.stream.getvalue().decode("utf-8")


def make_settings(**overrides) -> DispatcherSettings:
    return DispatcherSettings(terminal_width=TEST_TERMINAL_WIDTH, **overrides)


def make_dispatcher(sink: OutputSink | None = None, **kwargs) -> CommandDispatcher:
    kwargs.setdefault("settings", make_settings())
    kwargs.setdefault("color", False)
    return CommandDispatcher(sink=sink or captured_sink(), **kwargs)


def recording_handler(kind: OutcomeKind = OutcomeKind.GREETING):
    """Build an async handler that records every invocation it receives."""
    calls: list[Invocation] = []

    async def handler(invocation: Invocation) -> Outcome:
        calls.append(invocation)
        return Outcome(kind)

    handler.calls = calls
    return handler
