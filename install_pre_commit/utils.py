"""Shared helpers."""

import logging
import os
import sys

LOG_LEVEL_ENV = "INSTALL_PRE_COMMIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE_LOGGER = "install_pre_commit"


def setup_logging(level: str | None = None) -> None:
    """
    Configure internal diagnostic logging for the package.

    Diagnostics go to stderr and only when a level is configured, either via
    ``level`` or the ``INSTALL_PRE_COMMIT_LOG_LEVEL`` environment variable.
    Standard output is reserved for the script's own messages.

    Args:
        level: Logging level name such as "DEBUG"; overrides the environment
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    level = level or os.getenv(LOG_LEVEL_ENV)
    if not level:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = False
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False
