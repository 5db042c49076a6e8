"""Syntax highlighting protocol and injection for tuimark.

Provides optional syntax highlighting for fenced code blocks.
When tuimark[syntax] is installed, Pygments is used automatically by the
high-level API (``RenderConfig(highlight=True)``).

A highlighter styles one line of code at a time. It may decline a line by
returning None; the writer then falls back to the style sheet's flat code
style for that line.

Usage:
    # Automatic with tuimark[syntax]
    from tuimark import Markdown, RenderConfig
    md = Markdown(RenderConfig(highlight=True))

    # Manual injection
    from tuimark.renderers.terminal import TerminalRenderer

    class Shouty:
        def supports_language(self, language: str) -> bool:
            return language == "text"

        def highlight_line(self, language: str, line: str) -> Line | None:
            return Line([Span(line.upper())])

    renderer = TerminalRenderer(highlighter=Shouty())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tuimark.styled import Line, Span
from tuimark.utils.logger import get_logger

if TYPE_CHECKING:
    from pygments.lexer import Lexer

logger = get_logger(__name__)

DEFAULT_THEME = "monokai"


class Highlighter(Protocol):
    """Protocol for line-by-line syntax highlighters.

    Thread Safety:
        Implementations must be thread-safe. A renderer shared between
        threads calls the same highlighter concurrently.
    """

    def supports_language(self, language: str) -> bool:
        """Check if the highlighter can style the given language.

        Args:
            language: Language identifier or alias (e.g., "python", "py")

        Returns:
            True if highlight_line() is expected to style this language

        Contract:
            - MUST NOT raise exceptions
        """
        ...

    def highlight_line(self, language: str, line: str) -> Line | None:
        """Style one line of code.

        Args:
            language: Language identifier from the code fence
            line: One line of code, without its line ending

        Returns:
            A styled Line, or None to fall back to the flat code style
        """
        ...


class PygmentsHighlighter:
    """Pygments-based highlighter implementing the Highlighter protocol.

    Token colours come from a Pygments style mapped through rich's
    ``PygmentsSyntaxTheme``; the theme background becomes the line style.

    Lines are lexed independently, so constructs spanning several lines
    (block comments, multi-line strings) are only coloured per line.

    Raises:
        ImportError: If Pygments is not installed
    """

    __slots__ = ("_lexers", "_theme")

    def __init__(self, theme: str = DEFAULT_THEME) -> None:
        from rich.syntax import PygmentsSyntaxTheme

        self._theme = PygmentsSyntaxTheme(theme)
        self._lexers: dict[str, Lexer | None] = {}

    def _get_lexer(self, language: str) -> Lexer | None:
        if language not in self._lexers:
            from pygments.lexers import get_lexer_by_name
            from pygments.util import ClassNotFound

            try:
                self._lexers[language] = get_lexer_by_name(language)
            except ClassNotFound:
                self._lexers[language] = None
        return self._lexers[language]

    def supports_language(self, language: str) -> bool:
        if not language:
            return False
        try:
            return self._get_lexer(language) is not None
        except Exception:
            return False

    def highlight_line(self, language: str, line: str) -> Line | None:
        lexer = self._get_lexer(language)
        if lexer is None:
            return None
        spans: list[Span] = []
        for token_type, value in lexer.get_tokens(line):
            value = value.replace("\n", "")
            if value:
                spans.append(Span(value, self._theme.get_style_for_token(token_type)))
        return Line(spans, style=self._theme.get_background_style())


_default_highlighter: Highlighter | None = None
_tried_pygments: bool = False


def get_default_highlighter() -> Highlighter | None:
    """Get the shared Pygments highlighter.

    Returns:
        A PygmentsHighlighter with the default theme, or None if Pygments
        is not installed.
    """
    global _default_highlighter, _tried_pygments

    if _tried_pygments:
        return _default_highlighter

    _tried_pygments = True
    try:
        _default_highlighter = PygmentsHighlighter()
    except ImportError:
        logger.debug("Pygments not installed, code blocks use the flat code style")
        _default_highlighter = None
    return _default_highlighter


def has_highlighter() -> bool:
    """Check if a default syntax highlighter is available."""
    return get_default_highlighter() is not None


def highlight_or_none(highlighter: Highlighter, language: str, line: str) -> Line | None:
    """Call ``highlighter.highlight_line`` and treat failures as a decline.

    Unexpected highlighter errors are logged at debug level so that a
    misbehaving highlighter degrades to the flat style instead of aborting
    the render.
    """
    try:
        return highlighter.highlight_line(language, line)
    except Exception:
        logger.debug("Syntax highlighting failed for language %r", language, exc_info=True)
        return None


__all__ = [
    "DEFAULT_THEME",
    "Highlighter",
    "PygmentsHighlighter",
    "get_default_highlighter",
    "has_highlighter",
    "highlight_or_none",
]
