"""Tests for chksum.color: mode parsing and the colourise decision."""

import io

import pytest

from chksum.color import ColorMode, should_colorize


class FakeTTY(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestParse:
    @pytest.mark.parametrize("raw, mode", [
        ("auto", ColorMode.AUTO),
        ("ALWAYS", ColorMode.ALWAYS),
        (" never ", ColorMode.NEVER),
    ])
    def test_valid(self, raw, mode):
        assert ColorMode.parse(raw) is mode

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid color mode"):
            ColorMode.parse("sometimes")

    def test_str(self):
        assert str(ColorMode.ALWAYS) == "always"


class TestShouldColorize:
    def test_always(self):
        assert should_colorize(ColorMode.ALWAYS, io.StringIO(), environ={"NO_COLOR": "1"})

    def test_never(self):
        assert not should_colorize(ColorMode.NEVER, FakeTTY(), environ={"FORCE_COLOR": "1"})

    def test_auto_tty(self):
        assert should_colorize(ColorMode.AUTO, FakeTTY(), environ={})

    def test_auto_not_tty(self):
        assert not should_colorize(ColorMode.AUTO, io.StringIO(), environ={})

    def test_auto_no_color_wins(self):
        env = {"NO_COLOR": "1", "FORCE_COLOR": "1"}
        assert not should_colorize(ColorMode.AUTO, FakeTTY(), environ=env)

    def test_auto_empty_no_color_ignored(self):
        assert should_colorize(ColorMode.AUTO, FakeTTY(), environ={"NO_COLOR": ""})

    def test_auto_force_color(self):
        assert should_colorize(ColorMode.AUTO, io.StringIO(), environ={"FORCE_COLOR": "1"})

    def test_auto_stream_without_isatty(self):
        class Bare:
            def write(self, s):
                return len(s)

        assert not should_colorize(ColorMode.AUTO, Bare(), environ={})

    def test_auto_reads_process_env(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert should_colorize(ColorMode.AUTO, io.StringIO())
