"""Tests for terminal text helpers."""

import io

import pytest
from rich.text import Text

from ni_utils.text import ELLIPSIS, dim, limit_text


@pytest.fixture
def color_terminal(monkeypatch):
    """Make rich treat stdout as a colour-capable terminal."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


@pytest.fixture
def piped_stdout(monkeypatch):
    """Stdout redirected to a non-terminal stream, no colour overrides."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr("sys.stdout", io.StringIO())


class TestDim:
    def test_wraps_in_ansi_dim_on_terminal(self, color_terminal):
        assert dim("x") == "\x1b[2mx\x1b[0m"

    def test_plain_when_stdout_is_not_a_terminal(self, piped_stdout):
        assert dim("x") == "x"

    def test_plain_on_dumb_terminal(self, color_terminal, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        assert dim("x") == "x"

    def test_no_color_returns_plain(self, color_terminal, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert dim("x") == "x"


class TestLimitText:
    def test_short_text_unchanged(self):
        assert limit_text("hello", 10) == "hello"

    def test_exact_width_unchanged(self):
        assert limit_text("hello", 5) == "hello"

    def test_truncates_with_dimmed_ellipsis(self, color_terminal):
        result = limit_text("hello world", 5)
        assert result == f"hello\x1b[2m{ELLIPSIS}\x1b[0m"
        assert Text.from_ansi(result).plain == "hello…"

    def test_truncates_plain_when_piped(self, piped_stdout):
        assert limit_text("hello world", 5) == "hello…"

    def test_truncates_plain_on_dumb_terminal(self, color_terminal, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        assert limit_text("hello world", 5) == "hello…"

    def test_zero_width(self, piped_stdout):
        assert limit_text("abc", 0) == "…"
