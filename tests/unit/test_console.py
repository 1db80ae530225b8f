"""Tests for leveled console output."""

from unittest.mock import patch

import pytest

from install_pre_commit.console import Level, ScriptLogger
from tests.utils import captured_sink, output_of


class Unprintable:
    def __str__(self):
        raise RuntimeError("cannot render")


class TestScriptLogger:
    def setup_method(self):
        self.sink = captured_sink()

    @pytest.mark.parametrize(
        "method,label",
        [
            ("error", "[ERROR]"),
            ("warning", "[WARN]"),
            ("info", "[INFO]"),
            ("verbose", "[VERBOSE]"),
        ],
    )
    def test_levels_use_fixed_labels(self, method, label):
        console = ScriptLogger(self.sink, verbose=True, color=False)

        getattr(console, method)("message")

        assert output_of(self.sink) == f"{label} message\n"

    def test_values_are_joined_with_single_spaces(self):
        console = ScriptLogger(self.sink, color=False)

        console.info("a", 1, None, "b")

        assert output_of(self.sink) == "[INFO] a 1 None b\n"

    def test_verbose_is_noop_when_disabled(self):
        console = ScriptLogger(self.sink, verbose=False, color=False)

        console.verbose("hidden")
        console.verbose("still hidden")

        assert output_of(self.sink) == ""

    @pytest.mark.parametrize(
        "level,code",
        [(Level.ERROR, 196), (Level.WARNING, 208), (Level.INFO, 111), (Level.VERBOSE, 141)],
    )
    def test_colored_label(self, level, code):
        console = ScriptLogger(self.sink, verbose=True, color=True)

        console.log(level, "message")

        assert output_of(self.sink) == (
            f"\x1b[38;5;{code}m[{level.label}]\x1b[0m message\n"
        )

    def test_color_defaults_to_terminal_detection(self):
        tty_sink = captured_sink(tty=True)

        assert ScriptLogger(tty_sink).color_enabled
        assert not ScriptLogger(self.sink).color_enabled

    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        tty_sink = captured_sink(tty=True)
        console = ScriptLogger(tty_sink)

        console.info("plain")

        assert output_of(tty_sink) == "[INFO] plain\n"

    def test_unprintable_value_does_not_raise(self):
        console = ScriptLogger(self.sink, color=False)

        console.info("value:", Unprintable())

        output = output_of(self.sink)
        assert output.startswith("[INFO] value: <")
        assert "Unprintable object" in output
        assert output.endswith("\n")

    def test_styling_failure_degrades_to_raw_text(self):
        console = ScriptLogger(self.sink, color=True)

        with patch("install_pre_commit.console.click.style", side_effect=RuntimeError("boom")):
            console.warning("raw", "text")

        assert output_of(self.sink) == "raw text\n"
