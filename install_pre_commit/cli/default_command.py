"""Default command: help, version, completion script or a greeting."""

from .dispatcher import Invocation, Outcome, OutcomeKind

GREETING = "Hello, world!"
VERBOSE_GREETING = "Hello, world, verbosely!"


async def default_command(invocation: Invocation) -> Outcome:
    """Run the command bound to an invocation without an explicit command name."""
    options = invocation.options
    console = invocation.console
    sink = console.sink

    if options.help:
        await sink.write_line_async(invocation.get_help())
        return Outcome(OutcomeKind.HELP)

    if options.version:
        settings = invocation.settings
        await sink.write_line_async(f"{settings.script_name} {settings.script_version}")
        await sink.write_line_async(settings.copyright)
        return Outcome(OutcomeKind.VERSION)

    if options.completion_script:
        await sink.write_line_async(invocation.get_completion_script())
        return Outcome(OutcomeKind.COMPLETION)

    console.info(GREETING)
    console.verbose(VERBOSE_GREETING)
    return Outcome(OutcomeKind.GREETING)
