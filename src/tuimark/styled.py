"""Styled text model produced by the terminal renderer.

Span -> Line -> StyledText, styled with ``rich.style.Style``.

A Span is immutable. A Line is mutable only while it is the writer's open
line; once the next line is pushed it is never touched again. StyledText is
the ordered output buffer plus the diagnostics recorded during the run.

Style composition uses rich's ``+`` operator: ``base + overlay`` keeps every
attribute of ``base`` that ``overlay`` leaves unset. The effective style of
a span is ``line.style + span.style``.

Example:
    >>> from rich.style import Style
    >>> line = Line([Span("# "), Span("Title")], style=Style(bold=True))
    >>> line.plain
    '# Title'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text


@dataclass(frozen=True, slots=True)
class Span:
    """Run of text with a single style."""

    content: str
    style: Style = field(default_factory=Style.null)

    @property
    def width(self) -> int:
        """Cell width of the content in a fixed-width grid."""
        return cell_len(self.content)


@dataclass(slots=True)
class Line:
    """One row of output.

    ``style`` applies to the whole line beneath the span styles; the writer
    uses it for headings, code blocks and block quotes.
    """

    spans: list[Span] = field(default_factory=list)
    style: Style = field(default_factory=Style.null)

    @classmethod
    def raw(cls, content: str) -> Line:
        """Create an unstyled single-span line ("" gives an empty line)."""
        return cls([Span(content)] if content else [])

    @classmethod
    def styled(cls, content: str, style: Style) -> Line:
        """Create a single-span line whose line style is ``style``."""
        return cls([Span(content)], style=style)

    @property
    def plain(self) -> str:
        return "".join(span.content for span in self.spans)

    @property
    def width(self) -> int:
        return sum(span.width for span in self.spans)

    def push_span(self, span: Span) -> None:
        self.spans.append(span)

    def patch_style(self, style: Style) -> None:
        """Overlay ``style`` onto the line style."""
        self.style = self.style + style

    def effective_style(self, index: int) -> Style:
        """Style a renderer would paint the span at ``index`` with."""
        return self.style + self.spans[index].style

    def to_text(self) -> Text:
        """Convert to a ``rich.text.Text`` for painting."""
        text = Text(style=self.style, end="")
        for span in self.spans:
            text.append(span.content, span.style)
        return text


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Record of an event the writer recognised but did not render.

    Attributes:
        kind: Short name of the construct (e.g. "table", "html_block")
        message: Human-readable description
    """

    kind: str
    message: str


@dataclass(slots=True)
class StyledText:
    """Ordered output buffer of a render run."""

    lines: list[Line] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def height(self) -> int:
        """Number of rows the text occupies."""
        return len(self.lines)

    @property
    def width(self) -> int:
        """Width of the widest line."""
        return max((line.width for line in self.lines), default=0)

    def plain_lines(self) -> list[str]:
        """Text of every line without styles."""
        return [line.plain for line in self.lines]

    def to_text(self) -> Text:
        """Join all lines into one ``rich.text.Text`` separated by newlines."""
        return Text("\n", end="").join(line.to_text() for line in self.lines)


__all__ = ["Diagnostic", "Line", "Span", "StyledText"]
