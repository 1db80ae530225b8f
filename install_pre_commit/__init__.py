"""install-pre-commit - command-line scaffold for installing pre-commit hooks."""

SCRIPT_NAME = "install-pre-commit"
SCRIPT_VERSION = "v0.1.0"
SCRIPT_COPYRIGHT = "Copyright (c) 2026 G'lek Tarssza, all rights reserved"

__version__ = SCRIPT_VERSION.removeprefix("v")
