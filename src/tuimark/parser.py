"""Markdown event source built on markdown-it-py.

markdown-it produces a flat token stream with ``*_open`` / ``*_close`` pairs
for containers and ``inline`` tokens whose children hold the inline markup.
EventParser walks that stream and yields tuimark events:

- block open/close tokens become Start/End pairs (tight-list paragraphs are
  hidden and produce no events)
- ``fence`` and ``code_block`` become Start(CodeBlock), one Text, End
- ``html_block`` becomes a single Html event
- inline children become Text, Code, SoftBreak, HardBreak and the inline
  Start/End pairs; adjacent text tokens are joined into one Text
- a list item whose first text starts with ``[ ]``, ``[x]`` or ``[X]``
  yields a TaskListMarker and loses the checkbox from its text

Example:
    >>> from tuimark.parser import parse_events
    >>> list(parse_events("*hi*"))
    [Start(tag=Paragraph()), Start(tag=Emphasis()), Text(text='hi'), ...]
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from tuimark.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
    HardBreak,
    Heading,
    Html,
    Image,
    InlineHtml,
    Item,
    Link,
    List,
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
from tuimark.utils.logger import get_logger

logger = get_logger(__name__)

_TASK_MARKER = re.compile(r"\[([ xX])\](?:[ \t]+|$)")


def _block_tag(token: Token) -> Tag | None:
    """Tag for a block-level ``*_open`` token, or None if it has none."""
    match token.type:
        case "paragraph_open":
            return Paragraph()
        case "heading_open":
            return Heading(level=int(token.tag[1:]))
        case "blockquote_open":
            return BlockQuote()
        case "bullet_list_open":
            return List(start=None)
        case "ordered_list_open":
            start = token.attrGet("start")
            return List(start=int(start) if start is not None else 1)
        case "list_item_open":
            return Item()
        case "table_open":
            return Table()
        case "thead_open":
            return TableHead()
        case "tr_open":
            return TableRow()
        case "th_open" | "td_open":
            return TableCell()
        case _:
            return None


def _inline_tag(token: Token) -> Tag | None:
    """Tag for an inline ``*_open`` token, or None if it has none."""
    match token.type:
        case "em_open":
            return Emphasis()
        case "strong_open":
            return Strong()
        case "s_open":
            return Strikethrough()
        case "link_open":
            return Link(
                dest_url=str(token.attrGet("href") or ""),
                title=str(token.attrGet("title") or ""),
            )
        case _:
            return None


class EventParser:
    """Parse markdown source into a tuimark event stream.

    Usage:
        >>> parser = EventParser()
        >>> events = list(parser.parse("# Title"))

    Thread Safety:
        The markdown-it instance is configured once and only read while
        parsing; all per-parse state is local to parse().
    """

    __slots__ = ("_md", "_task_lists")

    def __init__(self, *, strikethrough: bool = True, task_lists: bool = True) -> None:
        """Initialize parser.

        Args:
            strikethrough: Enable ~~strikethrough~~ syntax
            task_lists: Emit TaskListMarker events for [ ] / [x] list items
        """
        self._md = MarkdownIt("commonmark")
        if strikethrough:
            self._md.enable("strikethrough")
        self._task_lists = task_lists

    def __call__(self, source: str) -> Iterator[Event]:
        return self.parse(source)

    def parse(self, source: str) -> Iterator[Event]:
        """Yield events for ``source`` in document order."""
        tokens = self._md.parse(source)
        logger.debug("Parsed %d block tokens", len(tokens))

        open_tags: list[Tag | None] = []
        task_candidate = False

        for token in tokens:
            if token.nesting == 1:
                if token.type == "list_item_open":
                    task_candidate = self._task_lists
                elif token.type != "paragraph_open":
                    task_candidate = False
                tag = None if token.hidden else _block_tag(token)
                open_tags.append(tag)
                if tag is not None:
                    yield Start(tag)
                elif not token.hidden:
                    logger.debug("Skipping unknown block token %r", token.type)
            elif token.nesting == -1:
                tag = open_tags.pop() if open_tags else None
                if tag is not None:
                    yield End(tag)
            elif token.type == "inline":
                yield from self._inline(token.children or [], task_candidate)
                task_candidate = False
            else:
                task_candidate = False
                yield from self._leaf(token)

    def _leaf(self, token: Token) -> Iterator[Event]:
        match token.type:
            case "fence":
                tag = CodeBlock(fenced=True, info=token.info.strip())
                yield Start(tag)
                if token.content:
                    yield Text(token.content)
                yield End(tag)
            case "code_block":
                tag = CodeBlock(fenced=False)
                yield Start(tag)
                if token.content:
                    yield Text(token.content)
                yield End(tag)
            case "html_block":
                yield Html(token.content)
            case "hr":
                yield Rule()
            case _:
                logger.debug("Skipping unknown leaf token %r", token.type)

    def _inline(self, children: Sequence[Token], task_candidate: bool) -> Iterator[Event]:
        open_tags: list[Tag | None] = []
        pending_text: list[str] = []

        def flush() -> Iterator[Event]:
            nonlocal task_candidate
            if not pending_text:
                return
            text = "".join(pending_text)
            pending_text.clear()
            if task_candidate:
                task_candidate = False
                match = _TASK_MARKER.match(text)
                if match is not None:
                    yield TaskListMarker(checked=match.group(1) != " ")
                    text = text[match.end() :]
            if text:
                yield Text(text)

        for child in children:
            if child.type in ("text", "text_special"):
                pending_text.append(child.content)
                continue
            yield from flush()
            task_candidate = False

            if child.nesting == 1:
                tag = _inline_tag(child)
                open_tags.append(tag)
                if tag is not None:
                    yield Start(tag)
                continue
            if child.nesting == -1:
                tag = open_tags.pop() if open_tags else None
                if tag is not None:
                    yield End(tag)
                continue

            match child.type:
                case "code_inline":
                    yield Code(child.content)
                case "softbreak":
                    yield SoftBreak()
                case "hardbreak":
                    yield HardBreak()
                case "html_inline":
                    yield InlineHtml(child.content)
                case "image":
                    tag = Image(
                        dest_url=str(child.attrGet("src") or ""),
                        title=str(child.attrGet("title") or ""),
                    )
                    yield Start(tag)
                    yield from self._inline(child.children or [], False)
                    yield End(tag)
                case _:
                    logger.debug("Skipping unknown inline token %r", child.type)

        yield from flush()


_default_parser: EventParser | None = None


def parse_events(
    source: str,
    *,
    strikethrough: bool = True,
    task_lists: bool = True,
) -> Iterator[Event]:
    """Parse markdown source into events.

    Args:
        source: Markdown source text
        strikethrough: Enable ~~strikethrough~~ syntax
        task_lists: Emit TaskListMarker events for task list items

    Returns:
        Iterator over the document's events
    """
    global _default_parser
    if strikethrough and task_lists:
        if _default_parser is None:
            _default_parser = EventParser()
        return _default_parser.parse(source)
    return EventParser(strikethrough=strikethrough, task_lists=task_lists).parse(source)


__all__ = ["EventParser", "parse_events"]
