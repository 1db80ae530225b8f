"""Tests for logging setup."""

import logging
import os
from unittest.mock import patch

from install_pre_commit.utils import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        setup_logging()

    def test_silent_by_default(self):
        setup_logging()

        handlers = logging.getLogger("install_pre_commit").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_explicit_level(self):
        setup_logging("debug")

        package_logger = logging.getLogger("install_pre_commit")
        assert package_logger.level == logging.DEBUG
        assert isinstance(package_logger.handlers[0], logging.StreamHandler)

    @patch.dict(os.environ, {"INSTALL_PRE_COMMIT_LOG_LEVEL": "warning"})
    def test_level_from_environment(self):
        setup_logging()

        assert logging.getLogger("install_pre_commit").level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("info")
        setup_logging("info")

        assert len(logging.getLogger("install_pre_commit").handlers) == 1
