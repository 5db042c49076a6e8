"""Terminal renderer: markup events to styled lines.

TextWriter consumes an event stream in a single pass and appends
``tuimark.styled.Line`` objects to its output buffer. It tracks nested
contexts on explicit stacks, each private to one writer:

- inline styles: emphasis/strong/strikethrough, each entry already merged
  with the one below it
- line styles: block quote and code block styles applied to new lines
- line prefixes: one ``>`` span per open block quote
- list indices: None for bullet lists, the next number for ordered lists
- links: destinations of open links, printed when each one closes

plus the pending-blank-line flag: a closed block owes one blank line, paid
only when the next block starts so documents never end with a blank line.

Thread Safety:
TerminalRenderer holds only immutable collaborators and creates a fresh
TextWriter for each render() call. Multiple threads can share one
TerminalRenderer instance.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from rich.style import Style

from tuimark.errors import NestingError, ScopeKind
from tuimark.events import (
    BlockQuote,
    Code,
    CodeBlock,
    DefinitionList,
    DefinitionListDefinition,
    DefinitionListTitle,
    DisplayMath,
    Emphasis,
    End,
    Event,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Heading,
    Html,
    HtmlBlock,
    Image,
    InlineHtml,
    InlineMath,
    Item,
    Link,
    List,
    MetadataBlock,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    TaskListMarker,
    Text,
)
from tuimark.highlighting import Highlighter, highlight_or_none
from tuimark.style_sheet import DefaultStyleSheet, StyleSheet
from tuimark.styled import Diagnostic, Line, Span, StyledText
from tuimark.utils.logger import get_logger

logger = get_logger(__name__)

_UNSUPPORTED_TAGS: dict[type, str] = {
    Image: "image",
    HtmlBlock: "html_block",
    Table: "table",
    TableHead: "table",
    TableRow: "table",
    TableCell: "table",
    FootnoteDefinition: "footnote",
    MetadataBlock: "metadata_block",
    DefinitionList: "definition_list",
    DefinitionListTitle: "definition_list",
    DefinitionListDefinition: "definition_list",
}

_LINE_BREAK = re.compile(r"\r?\n")

_EMPHASIS = Style(italic=True)
_STRONG = Style(bold=True)
_STRIKETHROUGH = Style(strike=True)


def _split_lines(text: str) -> list[str]:
    """Split on LF and CRLF line breaks only; a trailing break adds no segment."""
    segments = _LINE_BREAK.split(text)
    if segments[-1] == "":
        segments.pop()
    return segments


class TextWriter:
    """Single-use event-to-lines transducer.

    Usage:
        >>> writer = TextWriter(DefaultStyleSheet())
        >>> text = writer.run(events)

    A writer holds the state of exactly one run. Create a new writer (or
    use TerminalRenderer.render()) for every event stream.
    """

    __slots__ = (
        "_styles",
        "_highlighter",
        "_text",
        "_inline_styles",
        "_line_styles",
        "_line_prefixes",
        "_list_indices",
        "_links",
        "_code_language",
        "_in_code_block",
        "_item_marker_open",
        "_needs_newline",
    )

    def __init__(
        self,
        style_sheet: StyleSheet | None = None,
        *,
        highlighter: Highlighter | None = None,
    ) -> None:
        """Initialize writer.

        Args:
            style_sheet: Style policy (default palette if None)
            highlighter: Optional line highlighter for fenced code blocks
        """
        self._styles: StyleSheet = style_sheet or DefaultStyleSheet()
        self._highlighter = highlighter
        self._text = StyledText()
        self._inline_styles: list[Style] = []
        self._line_styles: list[Style] = []
        self._line_prefixes: list[Span] = []
        self._list_indices: list[int | None] = []
        self._links: list[str] = []
        # Language of the code block being highlighted, None when flat-styled
        self._code_language: str | None = None
        self._in_code_block = False
        # The open line holds only a list item marker
        self._item_marker_open = False
        self._needs_newline = False

    @property
    def text(self) -> StyledText:
        """Output buffer written so far."""
        return self._text

    def run(self, events: Iterable[Event]) -> StyledText:
        """Consume ``events`` and return the output buffer.

        Raises:
            NestingError: If an event closes a scope that is not open
        """
        logger.debug("Running text writer")
        for event in events:
            self.handle_event(event)
        return self._text

    def handle_event(self, event: Event) -> None:
        """Apply a single event to the output buffer."""
        logger.debug("Event: %r", event)
        match event:
            case Start(tag=tag):
                self._start_tag(event, tag)
            case End(tag=tag):
                self._end_tag(event, tag)
            case Text(text=text):
                self._text_run(text)
            case Code(code=code):
                self._code(code)
            case SoftBreak() | HardBreak():
                self._push_line(Line())
            case TaskListMarker(checked=checked):
                self._amend_item_marker("[x]" if checked else "[ ]")
            case Html():
                self._unsupported("html_block", event)
            case InlineHtml():
                self._unsupported("inline_html", event)
            case Rule():
                self._unsupported("rule", event)
            case FootnoteReference():
                self._unsupported("footnote", event)
            case InlineMath() | DisplayMath():
                self._unsupported("math", event)
            case _:
                self._unsupported(type(event).__name__, event)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _start_tag(self, event: Start, tag: Tag) -> None:
        match tag:
            case Paragraph():
                self._start_paragraph()
            case Heading(level=level):
                self._start_heading(level)
            case BlockQuote():
                self._start_blockquote()
            case CodeBlock():
                self._start_codeblock(tag)
            case List(start=start):
                self._start_list(start)
            case Item():
                self._start_item(event)
            case Emphasis():
                self._push_inline_style(_EMPHASIS)
            case Strong():
                self._push_inline_style(_STRONG)
            case Strikethrough():
                self._push_inline_style(_STRIKETHROUGH)
            case Link(dest_url=dest_url):
                self._links.append(dest_url)
            case _:
                self._unsupported(_UNSUPPORTED_TAGS.get(type(tag), type(tag).__name__), event)

    def _end_tag(self, event: End, tag: Tag) -> None:
        match tag:
            case Paragraph() | Heading():
                self._needs_newline = True
            case BlockQuote():
                self._end_blockquote(event)
            case CodeBlock():
                self._end_codeblock(event)
            case List():
                self._end_list(event)
            case Item():
                self._item_marker_open = False
            case Emphasis() | Strong() | Strikethrough():
                self._pop_inline_style(event)
            case Link():
                self._end_link(event)
            case _:
                logger.debug("Ignoring end of unsupported %r", tag)

    def _unsupported(self, kind: str, event: object) -> None:
        logger.warning("%s not yet supported, ignoring %r", kind, event)
        self._text.diagnostics.append(Diagnostic(kind, f"{kind} is not supported: {event!r}"))

    # =========================================================================
    # Blocks
    # =========================================================================

    def _start_paragraph(self) -> None:
        # In a loose list item the paragraph continues the marker line, which
        # stays open for a task checkbox until content is written
        if not self._item_marker_open:
            if self._needs_newline:
                self._push_line(Line())
            self._push_line(Line())
        self._needs_newline = False

    def _start_heading(self, level: int) -> None:
        if self._needs_newline:
            self._push_line(Line())
        style = self._styles.heading(level)
        self._push_line(Line.styled("#" * level + " ", style))
        self._needs_newline = False

    def _start_blockquote(self) -> None:
        if self._needs_newline:
            self._push_line(Line())
            self._needs_newline = False
        self._line_prefixes.append(Span(">"))
        self._line_styles.append(self._styles.blockquote())

    def _end_blockquote(self, event: End) -> None:
        if not self._line_prefixes:
            raise NestingError(ScopeKind.LINE_PREFIX, event)
        self._line_prefixes.pop()
        self._pop_line_style(event)
        self._needs_newline = True

    def _start_codeblock(self, block: CodeBlock) -> None:
        if self._text.lines:
            self._push_line(Line())
        language = block.language if block.fenced else ""
        highlighter = self._highlighter
        if highlighter is not None and language and highlighter.supports_language(language):
            self._code_language = language
        else:
            self._line_styles.append(self._styles.code())
        self._in_code_block = True
        self._push_line(Line.raw(f"```{block.info if block.fenced else ''}"))
        self._needs_newline = True

    def _end_codeblock(self, event: End) -> None:
        if not self._in_code_block:
            raise NestingError(ScopeKind.LINE_STYLE, event)
        self._push_line(Line.raw("```"))
        self._needs_newline = True
        if self._code_language is not None:
            self._code_language = None
        else:
            self._pop_line_style(event)
        self._in_code_block = False

    def _start_list(self, start: int | None) -> None:
        if not self._list_indices and self._needs_newline:
            self._push_line(Line())
            self._needs_newline = False
        self._list_indices.append(start)

    def _end_list(self, event: End) -> None:
        if not self._list_indices:
            raise NestingError(ScopeKind.LIST, event)
        self._list_indices.pop()
        self._item_marker_open = False
        if not self._list_indices:
            self._needs_newline = True

    def _start_item(self, event: Start) -> None:
        if not self._list_indices:
            raise NestingError(ScopeKind.LIST, event)
        self._push_line(Line())
        width = len(self._list_indices) * 4 - 3
        index = self._list_indices[-1]
        if index is None:
            span = Span(" " * (width - 1) + "- ")
        else:
            span = Span(f"{index:>{width}}. ", self._styles.list_marker())
            self._list_indices[-1] = index + 1
        self._push_span(span)
        self._item_marker_open = True
        self._needs_newline = False

    def _amend_item_marker(self, glyph: str) -> None:
        """Splice a task checkbox into the open line's item marker.

        The marker is the first span after the block quote prefixes. A bullet
        marker is rewritten in place ("- " -> "- [x] "); any other marker
        (an ordered number) gets the glyph as a new span right after it.
        Without an open marker the glyph is written as a plain span.
        """
        if not self._item_marker_open or not self._text.lines:
            self._push_span(Span(glyph + " "))
            return
        self._item_marker_open = False
        line = self._text.lines[-1]
        index = len(self._line_prefixes) + 1 if self._line_prefixes else 0
        if index >= len(line.spans):
            line.push_span(Span(glyph + " "))
            return
        marker = line.spans[index]
        if marker.content.endswith("- "):
            line.spans[index] = Span(f"{marker.content[:-2]}- {glyph} ", marker.style)
        else:
            line.spans.insert(index + 1, Span(glyph + " "))

    # =========================================================================
    # Inline content
    # =========================================================================

    def _text_run(self, text: str) -> None:
        if self._in_code_block:
            for segment in _split_lines(text):
                self._push_line(self._code_line(segment))
            self._needs_newline = False
            return

        style = self._inline_style()
        for position, segment in enumerate(_split_lines(text)):
            self._pay_blank_line()
            if position > 0:
                self._push_line(Line())
            if segment:
                self._push_span(Span(segment, style))
        self._needs_newline = False

    def _code_line(self, segment: str) -> Line:
        if self._code_language is None:
            return Line.raw(segment)
        line = highlight_or_none(self._highlighter, self._code_language, segment)
        if line is None:
            return Line.styled(segment, self._styles.code())
        return line

    def _code(self, code: str) -> None:
        self._pay_blank_line()
        self._push_span(Span(code, self._styles.code()))

    def _end_link(self, event: End) -> None:
        if not self._links:
            raise NestingError(ScopeKind.LINK, event)
        dest_url = self._links.pop()
        self._pay_blank_line()
        self._push_span(Span(" ("))
        self._push_span(Span(dest_url, self._styles.link()))
        self._push_span(Span(")"))

    # =========================================================================
    # Stacks and output
    # =========================================================================

    def _inline_style(self) -> Style:
        return self._inline_styles[-1] if self._inline_styles else Style.null()

    def _push_inline_style(self, style: Style) -> None:
        self._inline_styles.append(self._inline_style() + style)

    def _pop_inline_style(self, event: End) -> None:
        if not self._inline_styles:
            raise NestingError(ScopeKind.INLINE_STYLE, event)
        self._inline_styles.pop()

    def _pay_blank_line(self) -> None:
        """Push the blank line owed by a closed block, if any."""
        if self._needs_newline:
            self._push_line(Line())
            self._needs_newline = False

    def _pop_line_style(self, event: End) -> None:
        if not self._line_styles:
            raise NestingError(ScopeKind.LINE_STYLE, event)
        self._line_styles.pop()

    def _push_line(self, line: Line) -> None:
        """Append ``line`` with the current line style and prefixes applied."""
        if self._line_styles:
            line.patch_style(self._line_styles[-1])
        if self._line_prefixes:
            line.spans[0:0] = [*self._line_prefixes, Span(" ")]
        self._text.lines.append(line)
        self._item_marker_open = False

    def _push_span(self, span: Span) -> None:
        """Append ``span`` to the open line, starting one if there is none."""
        if self._text.lines:
            self._text.lines[-1].push_span(span)
        else:
            self._push_line(Line([span]))
        self._item_marker_open = False


class TerminalRenderer:
    """Render event streams to styled lines.

    Usage:
        >>> from tuimark.parser import parse_events
        >>> renderer = TerminalRenderer()
        >>> text = renderer.render(parse_events("# Hello **World**"))
        >>> text.plain_lines()
        ['# Hello World']

    Thread Safety:
        Multiple threads can safely share a single TerminalRenderer instance.
        Each render() call creates an independent TextWriter.
    """

    __slots__ = ("_highlighter", "_style_sheet")

    def __init__(
        self,
        style_sheet: StyleSheet | None = None,
        *,
        highlighter: Highlighter | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            style_sheet: Style policy (default palette if None)
            highlighter: Optional line highlighter for fenced code blocks
        """
        self._style_sheet: StyleSheet = style_sheet or DefaultStyleSheet()
        self._highlighter = highlighter

    @property
    def style_sheet(self) -> StyleSheet:
        return self._style_sheet

    @property
    def highlighter(self) -> Highlighter | None:
        return self._highlighter

    def render(self, events: Iterable[Event]) -> StyledText:
        """Render an event stream.

        Args:
            events: Well-nested event stream

        Returns:
            StyledText with the rendered lines and any diagnostics

        Raises:
            NestingError: If the stream closes a scope it never opened
        """
        writer = TextWriter(self._style_sheet, highlighter=self._highlighter)
        return writer.run(events)


__all__ = ["TerminalRenderer", "TextWriter"]
