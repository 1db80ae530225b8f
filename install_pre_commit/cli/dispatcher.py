"""Argument parsing and command dispatch on top of click."""

import inspect
import logging
import os
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, TypeAlias

import click
from click.shell_completion import get_completion_class, shell_complete

from ..config import DispatcherSettings
from ..console import ScriptLogger
from ..options import OPTION_SCHEMA, OptionDescriptor, build_click_option
from ..output import OutputSink
from .failure import FailureCallback, on_failure_async

logger = logging.getLogger(__name__)

COMMANDS_PARAM = "commands"
COMMAND_META_KEY = "install_pre_commit.command"
DEFAULT_OPTIONS_GROUP = "Options"
DEFAULT_SHELL = "bash"

MISSING_COMMAND_MESSAGE = "A command is required!"
TOO_MANY_COMMANDS_MESSAGE = "At most one command can be used!"

HANDLER_FAILURE_EXIT_CODE = 1


@dataclass(frozen=True)
class GlobalOptions:
    """Resolved values of the global flags for one invocation."""

    verbose: bool = False
    help: bool = False
    version: bool = False
    completion_script: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "GlobalOptions":
        return cls(**{f.name: bool(params.get(f.name, f.default)) for f in fields(cls)})


class OutcomeKind(Enum):
    HELP = "help"
    VERSION = "version"
    COMPLETION = "completion"
    GREETING = "greeting"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """What an invocation produced and the exit code the process should use."""

    kind: OutcomeKind
    exit_code: int = 0


@dataclass
class Invocation:
    """Everything a command handler needs for one run."""

    options: GlobalOptions
    console: ScriptLogger
    dispatcher: "CommandDispatcher"
    command: str | None = None

    @property
    def settings(self) -> DispatcherSettings:
        return self.dispatcher.settings

    def get_help(self) -> str:
        return self.dispatcher.get_help()

    def get_completion_script(self) -> str:
        return self.dispatcher.get_completion_script()


Handler: TypeAlias = Callable[[Invocation], Awaitable[Outcome]]


def _split_unknown_options(raw: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Separate unknown options from command names among leftover arguments.

    A bare word directly after an unknown option without an inline value is
    that option's value, not a command name.

    Returns:
        Unknown options and command names, in order
    """
    unknown: list[str] = []
    names: list[str] = []
    takes_value = False
    for arg in raw:
        if arg.startswith("-"):
            unknown.append(arg)
            takes_value = "=" not in arg
        elif takes_value:
            logger.debug(f"Treating {arg!r} as the value of {unknown[-1]}")
            takes_value = False
        else:
            names.append(arg)
    return unknown, names


def _format_unknown_arguments(unknown: list[str]) -> str:
    noun = "argument" if len(unknown) == 1 else "arguments"
    return f"Unknown {noun}: {', '.join(unknown)}"


class ScriptCommand(click.Command):
    """Click command that enforces exactly one command and groups options in help."""

    def __init__(
        self,
        name: str,
        schema: Sequence[OptionDescriptor],
        settings: DispatcherSettings,
        command_names: Sequence[str] = (),
        has_default: bool = True,
    ):
        params: list[click.Parameter] = [
            build_click_option(descriptor, settings.env_option_prefix) for descriptor in schema
        ]
        params.append(click.Argument([COMMANDS_PARAM], nargs=-1, required=False))

        super().__init__(
            name,
            params=params,
            epilog=settings.copyright,
            add_help_option=False,
            context_settings={"ignore_unknown_options": True, "help_option_names": []},
        )
        self.schema = tuple(schema)
        self.settings = settings
        self.command_names = tuple(command_names)
        self.has_default = has_default

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        rest = super().parse_args(ctx, args)
        raw = ctx.params.pop(COMMANDS_PARAM, ()) or ()
        if ctx.resilient_parsing:
            return rest

        unknown, names = _split_unknown_options(raw)

        if unknown:
            if self.settings.strict_options:
                raise click.UsageError(_format_unknown_arguments(unknown), ctx)
            logger.debug(f"Ignoring unknown options: {unknown}")

        if not names and self.has_default:
            ctx.meta[COMMAND_META_KEY] = None
            return rest

        if not names:
            raise click.UsageError(MISSING_COMMAND_MESSAGE, ctx)
        if len(names) > 1:
            raise click.UsageError(TOO_MANY_COMMANDS_MESSAGE, ctx)

        name = names[0]
        if name not in self.command_names:
            if self.settings.strict_commands or not self.has_default:
                raise click.UsageError(f"Unknown command: {name}", ctx)
            logger.debug(f"Ignoring unknown command {name!r}, using the default command")
            name = None

        ctx.meta[COMMAND_META_KEY] = name
        return rest

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        pieces = [self.options_metavar] if self.options_metavar else []
        if self.command_names:
            pieces.append("[COMMAND]" if self.has_default else "COMMAND")
        return pieces

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        groups: dict[str, list[tuple[str, str]]] = {}
        descriptors = {descriptor.field_name: descriptor for descriptor in self.schema}

        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            descriptor = descriptors.get(param.name or "")
            group = descriptor.group if descriptor and descriptor.group else DEFAULT_OPTIONS_GROUP
            groups.setdefault(group, []).append(record)

        for group, rows in groups.items():
            with formatter.section(group):
                formatter.write_dl(rows)

        if self.command_names:
            with formatter.section("Commands"):
                formatter.write_dl([(name, "") for name in self.command_names])


class CommandDispatcher:
    """Binds the option schema to commands and runs exactly one handler per invocation."""

    def __init__(
        self,
        default: Handler | None = None,
        commands: Mapping[str, Handler] | None = None,
        schema: Sequence[OptionDescriptor] = OPTION_SCHEMA,
        settings: DispatcherSettings | None = None,
        sink: OutputSink | None = None,
        fail: FailureCallback = on_failure_async,
        color: bool | None = None,
    ):
        """
        Args:
            default: Handler run when no command name is given
            commands: Named command handlers
            schema: Global option descriptors
            settings: Parsing behaviour, defaults to ``DispatcherSettings()``
            sink: Destination for all output, stdout by default
            fail: Failure callback, synchronous or asynchronous
            color: Force colour on or off, see ``ScriptLogger``
        """
        self.default = default
        self.commands = dict(commands or {})
        self.settings = settings or DispatcherSettings()
        self.sink = sink or OutputSink()
        self.fail = fail
        self.color = color
        self.command = ScriptCommand(
            self.settings.script_name,
            schema,
            self.settings,
            command_names=list(self.commands),
            has_default=default is not None,
        )

    def _context_settings(self) -> dict[str, Any]:
        width = self.settings.resolve_terminal_width()
        return {"terminal_width": width, "max_content_width": width}

    def make_context(self, args: Sequence[str]) -> click.Context:
        """Parse ``args``; raises ``click.UsageError`` on validation failure."""
        return self.command.make_context(
            self.settings.script_name, list(args), **self._context_settings()
        )

    def parse(self, args: Sequence[str]) -> GlobalOptions:
        """Resolve ``args`` into global options without running a handler."""
        with self.make_context(args) as ctx:
            return GlobalOptions.from_params(ctx.params)

    def console(self, verbose: bool = False) -> ScriptLogger:
        return ScriptLogger(self.sink, verbose=verbose, color=self.color)

    def get_help(self) -> str:
        with click.Context(
            self.command, info_name=self.settings.script_name, **self._context_settings()
        ) as ctx:
            return self.command.get_help(ctx)

    def get_completion_script(self, shell: str | None = None) -> str:
        """Return the shell-completion script for ``shell`` or the user's login shell."""
        shell = shell or os.path.basename(os.environ.get("SHELL", "")) or DEFAULT_SHELL
        completion_class = get_completion_class(shell)
        if completion_class is None:
            logger.debug(f"No completion support for shell {shell!r}, using {DEFAULT_SHELL}")
            completion_class = get_completion_class(DEFAULT_SHELL)
        completion = completion_class(
            self.command, {}, self.settings.script_name, self.settings.complete_var
        )
        return completion.source()

    def completion_instruction(self) -> str | None:
        """Return the pending completion instruction when invoked by a completion script."""
        return os.environ.get(self.settings.complete_var) or None

    def complete(self, instruction: str) -> int:
        """Serve a completion request from a sourced completion script."""
        return shell_complete(
            self.command,
            {},
            self.settings.script_name,
            self.settings.complete_var,
            instruction,
        )

    async def _report_failure(
        self, console: ScriptLogger, message: str, error: BaseException | None
    ) -> None:
        result = self.fail(console, message, error)
        if inspect.isawaitable(result):
            await result

    async def dispatch(self, args: Sequence[str]) -> Outcome:
        """Parse ``args``, run the selected handler and return its outcome.

        Never exits the process; failures are reported through the failure
        callback and returned as ``OutcomeKind.FAILURE``.
        """
        try:
            ctx = self.make_context(args)
        except click.ClickException as e:
            logger.debug(f"Argument validation failed: {e.format_message()}")
            await self._report_failure(self.console(), e.format_message(), None)
            return Outcome(OutcomeKind.FAILURE, e.exit_code)

        with ctx:
            options = GlobalOptions.from_params(ctx.params)
            name = ctx.meta.get(COMMAND_META_KEY)
            handler = self.commands[name] if name is not None else self.default
            console = self.console(verbose=options.verbose)
            logger.debug(f"Dispatching to {name or 'default'} command with {options}")

            try:
                return await handler(Invocation(options, console, self, name))
            except Exception as e:
                logger.debug(f"Command handler failed: {e}", exc_info=True)
                await self._report_failure(console, str(e), e)
                return Outcome(OutcomeKind.FAILURE, HANDLER_FAILURE_EXIT_CODE)
