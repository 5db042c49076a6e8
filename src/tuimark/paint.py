"""Hand styled lines to a rich console.

The renderer never writes to the screen itself; these helpers are the seam
between a StyledText and an output surface. Lines are printed with soft
wrapping so the console never re-flows them.

Example:
    >>> from tuimark import from_str
    >>> from tuimark.paint import to_ansi
    >>> to_ansi(from_str("**hi**"), color_system=None)
    'hi\\n'
"""

from __future__ import annotations

import io
from typing import Literal

from rich.console import Console

from tuimark.errors import RenderError
from tuimark.styled import StyledText

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def paint(text: StyledText, console: Console | None = None) -> None:
    """Print every line of ``text`` to ``console`` (stdout if None).

    Raises:
        RenderError: If the console's file cannot be written
    """
    console = console or Console()
    try:
        for line in text:
            console.print(line.to_text(), soft_wrap=True)
    except OSError as e:
        raise RenderError(f"could not write to the console: {e}") from e


def to_ansi(text: StyledText, *, color_system: ColorSystem | None = "truecolor") -> str:
    """Render ``text`` to a string with ANSI escape codes.

    Args:
        text: Lines to render
        color_system: rich colour system, or None for plain text

    Returns:
        The lines joined with newlines, each terminated by one
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=color_system is not None,
        color_system=color_system,
        legacy_windows=False,
    )
    paint(text, console)
    return buffer.getvalue()


__all__ = ["paint", "to_ansi"]
