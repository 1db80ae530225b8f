"""Dispatcher configuration."""

import shutil

from pydantic import BaseModel, ConfigDict, field_validator

from . import SCRIPT_COPYRIGHT, SCRIPT_NAME, SCRIPT_VERSION


class DispatcherSettings(BaseModel):
    """Behaviour switches for parsing and dispatching the command line."""

    model_config = ConfigDict(frozen=True)

    script_name: str = SCRIPT_NAME
    script_version: str = SCRIPT_VERSION
    copyright: str = SCRIPT_COPYRIGHT
    strict_options: bool = False
    strict_commands: bool = True
    enable_env: bool = True
    env_prefix: str = ""
    terminal_width: int | None = None

    @field_validator("terminal_width")
    @classmethod
    def validate_terminal_width(cls, v: int | None) -> int | None:
        """Validate terminal width is positive."""
        if v is not None and v <= 0:
            raise ValueError("Terminal width must be positive")
        return v

    @property
    def complete_var(self) -> str:
        """Environment variable click's shell completion protocol reads."""
        return f"_{self.script_name}_COMPLETE".replace("-", "_").upper()

    @property
    def env_option_prefix(self) -> str | None:
        return self.env_prefix if self.enable_env else None

    def resolve_terminal_width(self) -> int:
        if self.terminal_width is not None:
            return self.terminal_width
        return shutil.get_terminal_size().columns
