"""Shared fixtures for tuimark tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from rich.style import Style

from tuimark.config import reset_render_config
from tuimark.styled import Line, Span


class UpperHighlighter:
    """Highlighter for the made-up "shout" language: upper-cases each line."""

    STYLE = Style(color="red")

    def supports_language(self, language: str) -> bool:
        return language == "shout"

    def highlight_line(self, language: str, line: str) -> Line | None:
        return Line([Span(line.upper(), self.STYLE)])


class DecliningHighlighter:
    """Highlighter that claims every language and then declines every line."""

    def supports_language(self, language: str) -> bool:
        return True

    def highlight_line(self, language: str, line: str) -> Line | None:
        return None


class BrokenHighlighter:
    """Highlighter whose highlight_line always raises."""

    def supports_language(self, language: str) -> bool:
        return True

    def highlight_line(self, language: str, line: str) -> Line | None:
        raise RuntimeError("lexer exploded")


@pytest.fixture
def upper_highlighter() -> UpperHighlighter:
    return UpperHighlighter()


@pytest.fixture
def declining_highlighter() -> DecliningHighlighter:
    return DecliningHighlighter()


@pytest.fixture
def broken_highlighter() -> BrokenHighlighter:
    return BrokenHighlighter()


@pytest.fixture(autouse=True)
def _clean_render_config() -> Iterator[None]:
    """Make sure no test leaks a context config into the next one."""
    yield
    reset_render_config()
