"""Tests for ContextVar-based render configuration.

Validates thread isolation, context manager behavior, and how the
module-level helpers pick the context config up.
"""

from threading import Thread

import pytest

from tuimark import (
    Markdown,
    RenderConfig,
    from_str,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tuimark.highlighting import PygmentsHighlighter
from tuimark.style_sheet import DefaultStyleSheet, ThemeStyleSheet


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config uses the built-in palette without highlighting."""
        config = RenderConfig()
        assert config.style_sheet == DefaultStyleSheet()
        assert config.highlight is False
        assert config.highlighter is None
        assert config.strikethrough_enabled is True
        assert config.task_lists_enabled is True

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.highlight = True  # type: ignore[misc]

    def test_custom_values(self) -> None:
        config = RenderConfig(highlight=True, task_lists_enabled=False)
        assert config.highlight is True
        assert config.task_lists_enabled is False
        assert config.strikethrough_enabled is True  # Still default


class TestResolveHighlighter:
    """Test how a config picks its highlighter."""

    def test_disabled(self) -> None:
        assert RenderConfig().resolve_highlighter() is None

    def test_injected_wins(self, upper_highlighter) -> None:
        config = RenderConfig(highlighter=upper_highlighter, highlight=False)
        assert config.resolve_highlighter() is upper_highlighter

    def test_default_pygments(self) -> None:
        pytest.importorskip("pygments")
        assert isinstance(RenderConfig(highlight=True).resolve_highlighter(), PygmentsHighlighter)


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_get(self) -> None:
        custom = RenderConfig(task_lists_enabled=False)
        set_render_config(custom)
        assert get_render_config() is custom

    def test_reset(self) -> None:
        set_render_config(RenderConfig(highlight=True))
        reset_render_config()
        assert get_render_config().highlight is False

    def test_module_helpers_read_context(self) -> None:
        """from_str() without a config uses the context config."""
        set_render_config(RenderConfig(task_lists_enabled=False))
        assert from_str("- [x] done").plain_lines() == ["- [x] done"]
        reset_render_config()
        assert from_str("- [x] done").plain_lines() == ["- [x] done"]
        # With task lists on the checkbox is a marker span, not text
        assert len(from_str("- [x] done").lines[0].spans) == 2


class TestContextManager:
    """Test render_config_context."""

    def test_restores_previous(self) -> None:
        outer = RenderConfig(highlight=True)
        set_render_config(outer)
        with render_config_context(RenderConfig(strikethrough_enabled=False)):
            assert get_render_config().strikethrough_enabled is False
        assert get_render_config() is outer

    def test_restores_on_exception(self) -> None:
        with pytest.raises(ValueError), render_config_context(RenderConfig(highlight=True)):
            raise ValueError("boom")
        assert get_render_config().highlight is False

    def test_strikethrough_toggle(self) -> None:
        with render_config_context(RenderConfig(strikethrough_enabled=False)):
            assert from_str("~~x~~").plain_lines() == ["~~x~~"]
        assert from_str("~~x~~").plain_lines() == ["x"]


class TestThreadIsolation:
    """ContextVar config is per thread."""

    def test_threads_do_not_see_each_others_config(self) -> None:
        results: dict[str, bool] = {}

        def worker(name: str, enabled: bool) -> None:
            set_render_config(RenderConfig(highlight=enabled))
            results[name] = get_render_config().highlight

        threads = [Thread(target=worker, args=(f"t{i}", i % 2 == 0)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {f"t{i}": i % 2 == 0 for i in range(8)}
        assert get_render_config().highlight is False


class TestMarkdownConfig:
    """Markdown instances capture their config at construction."""

    def test_captures_context_config(self) -> None:
        with render_config_context(RenderConfig(task_lists_enabled=False)):
            md = Markdown()
        assert md.config.task_lists_enabled is False
        assert md("- [ ] x").plain_lines() == ["- [ ] x"]

    def test_explicit_style_sheet(self) -> None:
        sheet = ThemeStyleSheet({"heading1": "red"})
        md = Markdown(RenderConfig(style_sheet=sheet))
        assert md("# T").lines[0].style == sheet.heading(1)
