"""ContextVar-based render configuration for tuimark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance, or read from the context by the
module-level helpers when no config is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In Markdown class
    md = Markdown(RenderConfig(highlight=True))
    text = md("# Hello")

    # Module-level helpers read the context
    from tuimark.config import set_render_config, reset_render_config, RenderConfig

    set_render_config(RenderConfig(task_lists_enabled=False))
    try:
        text = from_str(source)
    finally:
        reset_render_config()

    # Or use the context manager
    with render_config_context(RenderConfig(highlight=True)):
        text = from_str(source)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from tuimark.highlighting import Highlighter, get_default_highlighter
from tuimark.style_sheet import DefaultStyleSheet, StyleSheet, ThemeStyleSheet


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        style_sheet: Style policy consulted for every colour decision
        highlight: Use the default Pygments highlighter when none is injected
        highlighter: Explicit highlighter for fenced code blocks
        strikethrough_enabled: Parse ~~strikethrough~~ syntax
        task_lists_enabled: Turn leading [ ] / [x] in list items into task markers

    """

    style_sheet: StyleSheet = field(default_factory=DefaultStyleSheet)
    highlight: bool = False
    highlighter: Highlighter | None = None
    strikethrough_enabled: bool = True
    task_lists_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Useful when configuration comes from external sources (TOML files,
        application settings). A ``theme`` entry holding a mapping of theme
        keys to rich style strings becomes a ThemeStyleSheet.

        Only includes keys that are valid RenderConfig fields (plus
        ``theme``); unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New RenderConfig instance with values from dict.

        Raises:
            StyleSheetError: If the theme holds invalid entries

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "highlight": True,
            ...     "theme": {"heading1": "bold magenta"},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.highlight
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        theme = config_dict.get("theme")
        if theme is not None and "style_sheet" not in filtered:
            filtered["style_sheet"] = ThemeStyleSheet(theme)
        return cls(**filtered)

    def resolve_highlighter(self) -> Highlighter | None:
        """Highlighter to use: the injected one, else the default if enabled."""
        if self.highlighter is not None:
            return self.highlighter
        if self.highlight:
            return get_default_highlighter()
        return None


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

# Thread-local configuration via ContextVar
_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(highlight=True)):
        ...     text = from_str("```python\\nx = 1\\n```")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
