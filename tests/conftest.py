"""Pytest configuration and shared fixtures."""

import os

import pytest

from install_pre_commit.cli.default_command import default_command
from install_pre_commit.options import OPTION_SCHEMA, envvar_name
from tests.utils import captured_sink, make_dispatcher

OPTION_ENVVARS = [envvar_name(descriptor.key) for descriptor in OPTION_SCHEMA]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from option overrides and colour settings of the caller."""
    for name in list(os.environ):
        if name.startswith("INSTALL_PRE_COMMIT") or name.startswith("_INSTALL_PRE_COMMIT"):
            monkeypatch.delenv(name)
    for name in OPTION_ENVVARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("SHELL", "/bin/zsh")


@pytest.fixture
def sink():
    return captured_sink()


@pytest.fixture
def dispatcher(sink):
    return make_dispatcher(sink, default=default_command)
