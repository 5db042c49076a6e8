"""Tests for the event and tag types."""

from __future__ import annotations

import dataclasses

import pytest

from tuimark.events import (
    CodeBlock,
    End,
    Heading,
    Link,
    List,
    Start,
    TaskListMarker,
    Text,
)


class TestTags:
    """Tag value semantics."""

    def test_code_block_language_is_first_word_of_info(self) -> None:
        assert CodeBlock(info="python title=demo.py").language == "python"

    def test_code_block_without_info_has_no_language(self) -> None:
        assert CodeBlock().language == ""
        assert CodeBlock(fenced=False).language == ""

    def test_list_ordered(self) -> None:
        assert List(start=1).ordered is True
        assert List(start=0).ordered is True
        assert List().ordered is False

    def test_link_title_defaults_to_empty(self) -> None:
        assert Link("https://example.com").title == ""

    def test_tags_are_frozen(self) -> None:
        heading = Heading(level=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            heading.level = 3  # type: ignore[misc]


class TestEvents:
    """Event value semantics."""

    def test_start_and_end_carry_equal_tags(self) -> None:
        assert Start(Heading(1)).tag == End(Heading(1)).tag

    def test_events_are_hashable(self) -> None:
        events = {Text("a"), Text("a"), TaskListMarker(checked=True)}
        assert len(events) == 2

    def test_events_work_with_match(self) -> None:
        match Start(Heading(level=3)):
            case Start(tag=Heading(level=level)):
                assert level == 3
            case _:
                pytest.fail("Start(Heading) did not match")
