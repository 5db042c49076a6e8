"""Style sheet protocol and built-in themes.

The writer never picks colours itself: every colour decision goes through a
StyleSheet. Emphasis, strong and strikethrough are attributes rather than
colours, so the writer builds those directly.

Usage:
    # Default palette
    from tuimark import from_str
    text = from_str("# Hello")

    # Theme from rich style strings
    from tuimark.style_sheet import ThemeStyleSheet
    sheet = ThemeStyleSheet({"heading1": "bold magenta", "code": "yellow"})

    # Theme from a TOML file
    sheet = load_theme("theme.toml")
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from rich.errors import StyleSyntaxError
from rich.style import Style

from tuimark.errors import StyleSheetError

THEME_KEYS = (
    "heading1",
    "heading2",
    "heading3",
    "heading4",
    "heading5",
    "heading6",
    "code",
    "link",
    "blockquote",
    "list_marker",
)


class StyleSheet(Protocol):
    """Styles consumed by the terminal renderer.

    Implementations must be pure: the same call always returns the same
    style, and calls have no side effects.
    """

    def heading(self, level: int) -> Style:
        """Style for a heading; ``level`` is one-based (1 for ``# H1``)."""
        ...

    def code(self) -> Style:
        """Style for inline code and for code blocks without highlighting."""
        ...

    def link(self) -> Style:
        """Style for the destination printed after link text."""
        ...

    def blockquote(self) -> Style:
        """Line style of block quotes (prefix and body)."""
        ...

    def list_marker(self) -> Style:
        """Style for the number of an ordered list item."""
        ...


class DefaultStyleSheet:
    """The built-in palette.

    Styles are:
    - H1: bold, underlined, on cyan
    - H2: cyan, bold
    - H3: cyan, bold, italic
    - H4-H6: bright cyan, italic
    - code: white on black
    - link: blue, underlined
    - blockquote: green
    - list marker: bright blue
    """

    __slots__ = ()

    def heading(self, level: int) -> Style:
        match level:
            case 1:
                return Style(bgcolor="cyan", bold=True, underline=True)
            case 2:
                return Style(color="cyan", bold=True)
            case 3:
                return Style(color="cyan", bold=True, italic=True)
            case _:
                return Style(color="bright_cyan", italic=True)

    def code(self) -> Style:
        return Style(color="white", bgcolor="black")

    def link(self) -> Style:
        return Style(color="blue", underline=True)

    def blockquote(self) -> Style:
        return Style(color="green")

    def list_marker(self) -> Style:
        return Style(color="bright_blue")

    def __eq__(self, other: object) -> bool:
        return type(other) is DefaultStyleSheet

    def __hash__(self) -> int:
        return hash(DefaultStyleSheet)

    def __repr__(self) -> str:
        return "DefaultStyleSheet()"


class ThemeStyleSheet:
    """Style sheet built from rich style definitions.

    Keys missing from the theme fall back to ``base`` (the default palette
    unless given). Headings deeper than six use the ``heading6`` entry.

    Args:
        theme: Mapping of theme key to rich style string or Style
        base: Style sheet consulted for keys the theme does not define

    Raises:
        StyleSheetError: On an unknown key or an unparsable style string
    """

    __slots__ = ("_base", "_styles")

    def __init__(
        self,
        theme: Mapping[str, str | Style],
        *,
        base: StyleSheet | None = None,
    ) -> None:
        self._base: StyleSheet = base or DefaultStyleSheet()
        self._styles: dict[str, Style] = {}
        for key, value in theme.items():
            if key not in THEME_KEYS:
                raise StyleSheetError(key, f"unknown key, expected one of {', '.join(THEME_KEYS)}")
            self._styles[key] = _parse_style(key, value)

    def heading(self, level: int) -> Style:
        key = f"heading{min(max(level, 1), 6)}"
        style = self._styles.get(key)
        return style if style is not None else self._base.heading(level)

    def code(self) -> Style:
        style = self._styles.get("code")
        return style if style is not None else self._base.code()

    def link(self) -> Style:
        style = self._styles.get("link")
        return style if style is not None else self._base.link()

    def blockquote(self) -> Style:
        style = self._styles.get("blockquote")
        return style if style is not None else self._base.blockquote()

    def list_marker(self) -> Style:
        style = self._styles.get("list_marker")
        return style if style is not None else self._base.list_marker()

    def __repr__(self) -> str:
        return f"ThemeStyleSheet({sorted(self._styles)!r})"


def _parse_style(key: str, value: str | Style) -> Style:
    if isinstance(value, Style):
        return value
    if not isinstance(value, str):
        raise StyleSheetError(key, f"expected a style string, got {type(value).__name__}")
    try:
        return Style.parse(value)
    except StyleSyntaxError as e:
        raise StyleSheetError(key, str(e)) from e


def load_theme(path: str | Path, *, base: StyleSheet | None = None) -> ThemeStyleSheet:
    """Load a theme from a TOML file.

    The file holds theme keys at the top level or under a ``[theme]`` table:

        [theme]
        heading1 = "bold white on magenta"
        code = "yellow on grey11"

    Args:
        path: Path to the TOML file
        base: Fallback style sheet for missing keys

    Returns:
        ThemeStyleSheet for the file's entries

    Raises:
        StyleSheetError: If the file is not valid TOML or holds bad entries
        OSError: If the file cannot be read
    """
    with Path(path).open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise StyleSheetError("theme", f"invalid TOML in {path}: {e}") from e
    table = data.get("theme", data)
    if not isinstance(table, dict):
        raise StyleSheetError("theme", "expected a table of style entries")
    return ThemeStyleSheet(table, base=base)


__all__ = [
    "THEME_KEYS",
    "DefaultStyleSheet",
    "StyleSheet",
    "ThemeStyleSheet",
    "load_theme",
]
