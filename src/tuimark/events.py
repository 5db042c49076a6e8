"""Typed markup events for tuimark.

An event stream is a flat, well-nested sequence describing a markdown
document: container elements arrive as a ``Start(tag)`` / ``End(tag)`` pair
with their content in between, leaf content arrives as single events.

All events and tags are frozen dataclasses with slots, so they are safe to
share across threads and work naturally with ``match`` statements.

Event Hierarchy:
Event
├── Start(tag) / End(tag)
├── Text, Code
├── SoftBreak, HardBreak
├── TaskListMarker
└── Html, InlineHtml, Rule, FootnoteReference, InlineMath, DisplayMath
    (recognised but not rendered)

Tag Hierarchy:
Tag
├── Block tags: Paragraph, Heading, BlockQuote, CodeBlock, List, Item
├── Inline tags: Emphasis, Strong, Strikethrough, Link
└── Unsupported: Image, HtmlBlock, Table, TableHead, TableRow, TableCell,
    FootnoteDefinition, MetadataBlock, DefinitionList,
    DefinitionListTitle, DefinitionListDefinition

Example:
    >>> from tuimark.events import End, Heading, Start, Text
    >>> events = [Start(Heading(level=1)), Text("Title"), End(Heading(level=1))]
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Block Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Paragraph of inline content."""


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX or setext heading.

    Markdown: # Title
    Level is one-based (1 for ``#``, 6 for ``######``).

    """

    level: int


@dataclass(frozen=True, slots=True)
class BlockQuote:
    """Block quote.

    Markdown: > quoted text

    """


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced or indented code block.

    Markdown:
        ```python
        print("hi")
        ```

    ``info`` is the full info string of a fence; indented blocks have none.

    """

    fenced: bool = True
    info: str = ""

    @property
    def language(self) -> str:
        """First word of the info string, or "" when there is none."""
        words = self.info.split()
        return words[0] if words else ""


@dataclass(frozen=True, slots=True)
class List:
    """Ordered or unordered list.

    ``start`` is the first number of an ordered list, or None for a
    bullet list.

    """

    start: int | None = None

    @property
    def ordered(self) -> bool:
        return self.start is not None


@dataclass(frozen=True, slots=True)
class Item:
    """List item."""


# =============================================================================
# Inline Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Emphasized (italic) text. Markdown: *text*"""


@dataclass(frozen=True, slots=True)
class Strong:
    """Strong (bold) text. Markdown: **text**"""


@dataclass(frozen=True, slots=True)
class Strikethrough:
    """Struck-out text. Markdown: ~~text~~"""


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink.

    Markdown: [text](url "title")

    """

    dest_url: str
    title: str = ""


# =============================================================================
# Unsupported Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Image:
    """Image. Its alt text arrives as Text events between Start and End."""

    dest_url: str
    title: str = ""


@dataclass(frozen=True, slots=True)
class HtmlBlock:
    """Raw HTML block container."""


@dataclass(frozen=True, slots=True)
class Table:
    """GFM table."""


@dataclass(frozen=True, slots=True)
class TableHead:
    """Header row group of a table."""


@dataclass(frozen=True, slots=True)
class TableRow:
    """Table row."""


@dataclass(frozen=True, slots=True)
class TableCell:
    """Table cell."""


@dataclass(frozen=True, slots=True)
class FootnoteDefinition:
    """Footnote definition. Markdown: [^label]: text"""

    label: str


@dataclass(frozen=True, slots=True)
class MetadataBlock:
    """Front matter block."""


@dataclass(frozen=True, slots=True)
class DefinitionList:
    """Definition list."""


@dataclass(frozen=True, slots=True)
class DefinitionListTitle:
    """Term of a definition list."""


@dataclass(frozen=True, slots=True)
class DefinitionListDefinition:
    """Definition of a definition list term."""


type Tag = (
    Paragraph
    | Heading
    | BlockQuote
    | CodeBlock
    | List
    | Item
    | Emphasis
    | Strong
    | Strikethrough
    | Link
    | Image
    | HtmlBlock
    | Table
    | TableHead
    | TableRow
    | TableCell
    | FootnoteDefinition
    | MetadataBlock
    | DefinitionList
    | DefinitionListTitle
    | DefinitionListDefinition
)


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True, slots=True)
class Start:
    """Opening of a container element."""

    tag: Tag


@dataclass(frozen=True, slots=True)
class End:
    """Closing of a container element.

    Carries the same tag as the matching Start.

    """

    tag: Tag


@dataclass(frozen=True, slots=True)
class Text:
    """Run of literal text.

    May contain embedded line breaks (code block contents always do).

    """

    text: str


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code. Markdown: `code`"""

    code: str


@dataclass(frozen=True, slots=True)
class SoftBreak:
    """Line ending inside a paragraph."""


@dataclass(frozen=True, slots=True)
class HardBreak:
    """Forced line break. Markdown: two trailing spaces or a backslash."""


@dataclass(frozen=True, slots=True)
class TaskListMarker:
    """Checkbox of a task list item. Markdown: - [x] done"""

    checked: bool


@dataclass(frozen=True, slots=True)
class Html:
    """Raw HTML block content."""

    html: str


@dataclass(frozen=True, slots=True)
class InlineHtml:
    """Raw inline HTML."""

    html: str


@dataclass(frozen=True, slots=True)
class Rule:
    """Thematic break. Markdown: ---"""


@dataclass(frozen=True, slots=True)
class FootnoteReference:
    """Footnote reference. Markdown: [^label]"""

    label: str


@dataclass(frozen=True, slots=True)
class InlineMath:
    """Inline math. Markdown: $x$"""

    text: str


@dataclass(frozen=True, slots=True)
class DisplayMath:
    """Display math. Markdown: $$x$$"""

    text: str


type Event = (
    Start
    | End
    | Text
    | Code
    | SoftBreak
    | HardBreak
    | TaskListMarker
    | Html
    | InlineHtml
    | Rule
    | FootnoteReference
    | InlineMath
    | DisplayMath
)


__all__ = [  # noqa: RUF022 — grouped by category
    # Block tags
    "Paragraph",
    "Heading",
    "BlockQuote",
    "CodeBlock",
    "List",
    "Item",
    # Inline tags
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Link",
    # Unsupported tags
    "Image",
    "HtmlBlock",
    "Table",
    "TableHead",
    "TableRow",
    "TableCell",
    "FootnoteDefinition",
    "MetadataBlock",
    "DefinitionList",
    "DefinitionListTitle",
    "DefinitionListDefinition",
    "Tag",
    # Events
    "Start",
    "End",
    "Text",
    "Code",
    "SoftBreak",
    "HardBreak",
    "TaskListMarker",
    "Html",
    "InlineHtml",
    "Rule",
    "FootnoteReference",
    "InlineMath",
    "DisplayMath",
    "Event",
]
