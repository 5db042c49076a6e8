"""Shared renderers produce the same output from many threads."""

from concurrent.futures import ThreadPoolExecutor

from tuimark import Markdown
from tuimark.parser import parse_events
from tuimark.renderers import TerminalRenderer

DOCS = [
    f"# Doc {i}\n\n> quote *{i}*\n\n1. [x] one\n2. two\n   - nested\n\n```\ncode {i}\n```"
    for i in range(50)
]


class TestSharedInstances:
    def test_terminal_renderer(self) -> None:
        renderer = TerminalRenderer()
        event_lists = [list(parse_events(doc)) for doc in DOCS]
        expected = [renderer.render(events) for events in event_lists]

        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(renderer.render, event_lists))

        assert results == expected

    def test_markdown_render_many(self) -> None:
        md = Markdown()
        expected = md.render_many(DOCS)
        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(md, DOCS))
        assert results == expected
        assert results[3].plain_lines()[0] == "# Doc 3"
