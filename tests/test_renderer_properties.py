"""Property-based tests for the terminal renderer using Hypothesis.

These tests verify invariants that hold for any input:
1. Plain text renders to one unstyled line
2. Rendering is deterministic and keeps no state between runs
3. Nesting depth drives list indentation and quote prefixes
4. Parsing and rendering never crash on arbitrary source
"""

from hypothesis import given, settings
from hypothesis import strategies as st
from rich.style import Style

from tuimark import from_str, render_events
from tuimark.events import BlockQuote, End, Item, List, Paragraph, Start, Text
from tuimark.parser import parse_events
from tuimark.renderers import TerminalRenderer

# Text without LF or CR
single_line_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\n"),
    min_size=1,
)
words = st.from_regex(r"[A-Za-z][A-Za-z0-9]*( [A-Za-z0-9]+)*", fullmatch=True)
depths = st.integers(min_value=1, max_value=8)


class TestPlainTextProperties:
    @given(text=single_line_text)
    def test_paragraph_is_one_default_line(self, text: str) -> None:
        result = render_events([Start(Paragraph()), Text(text), End(Paragraph())])
        assert result.plain_lines() == [text]
        assert result.lines[0].effective_style(0) == Style.null()

    @given(text=words)
    def test_source_words_render_verbatim(self, text: str) -> None:
        assert from_str(text).plain_lines() == [text]

    @given(first=words, second=words)
    def test_one_blank_between_paragraphs(self, first: str, second: str) -> None:
        assert from_str(f"{first}\n\n{second}").plain_lines() == [first, "", second]


class TestNestingProperties:
    @given(depth=depths)
    def test_bullet_indent(self, depth: int) -> None:
        events = [Start(List(None)), Start(Item())] * depth + [Text("x")]
        lines = render_events(events).plain_lines()
        for level, line in enumerate(lines, start=1):
            assert line.startswith(" " * (4 * level - 4) + "- ")

    @given(depth=depths, count=st.integers(min_value=1, max_value=12))
    def test_ordered_numbers_increment(self, depth: int, count: int) -> None:
        events = [Start(List(1)), Start(Item()), End(Item())] * (depth - 1) + [Start(List(1))]
        events += [Start(Item()), Text("x"), End(Item())] * count
        lines = render_events(events).plain_lines()[depth - 1 :]
        width = 4 * depth - 3
        assert lines == [f"{n:>{width}}. x" for n in range(1, count + 1)]

    @given(depth=depths, text=words)
    def test_quote_prefixes(self, depth: int, text: str) -> None:
        events = [Start(BlockQuote())] * depth + [Start(Paragraph()), Text(text), End(Paragraph())]
        line = render_events(events).lines[0]
        contents = [span.content for span in line.spans]
        assert contents[:depth] == [">"] * depth
        assert contents[depth] == " "
        assert line.plain == ">" * depth + " " + text


class TestDeterminism:
    @given(source=st.text(max_size=200))
    @settings(max_examples=100)
    def test_never_crashes_and_is_repeatable(self, source: str) -> None:
        renderer = TerminalRenderer()
        events = list(parse_events(source))
        first = renderer.render(events)
        second = renderer.render(events)
        assert first == second
