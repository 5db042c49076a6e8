"""Tests for painting styled lines through rich."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tuimark import from_str
from tuimark.errors import RenderError
from tuimark.paint import paint, to_ansi


class _Unwritable(io.StringIO):
    def write(self, s: str) -> int:
        raise OSError("disk full")


class TestToAnsi:
    def test_plain(self) -> None:
        assert to_ansi(from_str("**hi**"), color_system=None) == "hi\n"

    def test_blank_lines_kept(self) -> None:
        assert to_ansi(from_str("a\n\nb"), color_system=None) == "a\n\nb\n"

    def test_escape_codes(self) -> None:
        out = to_ansi(from_str("**hi**"))
        assert "\x1b[" in out
        assert "hi" in out

    def test_long_lines_not_wrapped(self) -> None:
        word = "x" * 300
        assert to_ansi(from_str(word), color_system=None) == word + "\n"


class TestPaint:
    def test_writes_every_line(self) -> None:
        buffer = io.StringIO()
        paint(from_str("# T\n\n- a"), Console(file=buffer, color_system=None))
        assert buffer.getvalue().splitlines() == ["# T", "", "- a"]

    def test_write_failure(self) -> None:
        console = Console(file=_Unwritable(), color_system=None)
        with pytest.raises(RenderError, match="disk full"):
            paint(from_str("x"), console)
