"""Declarative schema of the global command-line options."""

import re
from typing import Literal

import click
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_KEY_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")

NEGATION_PREFIX = "no-"


class OptionDescriptor(BaseModel):
    """Metadata for a single recognized flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    alias: str | None = None
    type: Literal["boolean"] = "boolean"
    default: bool = False
    description: str
    group: str | None = None
    global_: bool = Field(default=True, alias="global")
    requires_arg: bool = False

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys are dashed lower-case long names without leading dashes."""
        if not _KEY_PATTERN.match(v):
            raise ValueError(f"Option key must be a dashed lower-case name, got: {v!r}")
        if v.startswith(NEGATION_PREFIX):
            raise ValueError(f"Option key cannot start with '{NEGATION_PREFIX}': {v!r}")
        return v

    @field_validator("alias")
    @classmethod
    def validate_alias(cls, v: str | None) -> str | None:
        """Aliases are a single alphanumeric character."""
        if v is not None and (len(v) != 1 or not v.isalnum()):
            raise ValueError(f"Option alias must be a single character, got: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_flag_takes_no_argument(self) -> "OptionDescriptor":
        """Boolean flags never require an explicit value."""
        if self.requires_arg:
            raise ValueError(f"Boolean option '{self.key}' cannot require an argument")
        return self

    @property
    def field_name(self) -> str:
        return normalize_option_name(self.key)


OPTION_SCHEMA: tuple[OptionDescriptor, ...] = (
    OptionDescriptor(
        key="verbose",
        alias="v",
        description="Whether to enabled verbose logging.",
        group="Logging",
    ),
    OptionDescriptor(
        key="help",
        alias="h",
        description="Output the help information and exit.",
        group="Misc.",
    ),
    OptionDescriptor(
        key="version",
        description="Output the version information and exit.",
        group="Misc.",
    ),
    OptionDescriptor(
        key="completion-script",
        description="Generate a completion script.",
        group="Misc.",
    ),
)


def normalize_option_name(name: str) -> str:
    """
    Map a flag name to the field it populates in the parsed options.

    Leading dashes are stripped, the name is lower-cased and every remaining
    dash becomes an underscore, so ``--completion-script`` and
    ``completion-script`` both map to ``completion_script``.

    Args:
        name: Flag name with or without leading dashes

    Returns:
        The parsed field name
    """
    return name.lstrip("-").lower().replace("-", "_")


def negated_flag(key: str) -> str:
    """Return the long flag that resets ``key`` to false."""
    return f"--{NEGATION_PREFIX}{key}"


def envvar_name(key: str, prefix: str = "") -> str:
    """Return the environment variable that overrides ``key``, e.g. ``COMPLETION_SCRIPT``."""
    name = normalize_option_name(key)
    if prefix:
        name = f"{prefix}_{name}"
    return name.upper()


def descriptor_for(
    field_name: str, schema: tuple[OptionDescriptor, ...] = OPTION_SCHEMA
) -> OptionDescriptor | None:
    """Find the descriptor that populates ``field_name``."""
    for descriptor in schema:
        if descriptor.field_name == field_name:
            return descriptor
    return None


def build_click_option(descriptor: OptionDescriptor, env_prefix: str | None) -> click.Option:
    """
    Build the click option for a descriptor.

    Args:
        descriptor: Option metadata
        env_prefix: Prefix for the overriding environment variable, empty for
            the bare option name, or None to disable environment overrides

    Returns:
        A negatable boolean click option
    """
    decls = [descriptor.field_name, f"--{descriptor.key}/{negated_flag(descriptor.key)}"]
    if descriptor.alias:
        decls.append(f"-{descriptor.alias}")

    envvar = envvar_name(descriptor.key, env_prefix) if env_prefix is not None else None

    return click.Option(
        decls,
        default=descriptor.default,
        help=descriptor.description,
        envvar=envvar,
        show_envvar=envvar is not None,
    )
