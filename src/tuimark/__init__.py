"""
tuimark — Markdown to styled terminal lines

Turns a stream of markdown events into lines of styled spans for a
fixed-width character grid. Parsing is delegated to markdown-it-py, styles
are rich styles, and colours come from a swappable style sheet.

Quick Start:
    >>> from tuimark import from_str
    >>> text = from_str("# Hello\\n\\nWorld")
    >>> text.plain_lines()
    ['# Hello', '', 'World']

    >>> # Or use the high-level Markdown class
    >>> from tuimark import Markdown, RenderConfig
    >>> md = Markdown(RenderConfig(highlight=True))
    >>> text = md("```python\\nprint('hi')\\n```")

Custom Styles:
    >>> from tuimark import RenderConfig, ThemeStyleSheet
    >>> sheet = ThemeStyleSheet({"heading1": "bold magenta", "link": "yellow"})
    >>> text = from_str("# Themed", config=RenderConfig(style_sheet=sheet))

Installation:
    pip install tuimark              # Core renderer
    pip install tuimark[syntax]      # + Syntax highlighting via Pygments
"""

from collections.abc import Iterable, Iterator

from tuimark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tuimark.errors import NestingError, RenderError, ScopeKind, StyleSheetError, TuimarkError
from tuimark.events import Event
from tuimark.highlighting import Highlighter, PygmentsHighlighter, get_default_highlighter
from tuimark.paint import paint, to_ansi
from tuimark.parser import EventParser, parse_events
from tuimark.renderers.protocol import EventRenderer
from tuimark.renderers.terminal import TerminalRenderer, TextWriter
from tuimark.style_sheet import DefaultStyleSheet, StyleSheet, ThemeStyleSheet, load_theme
from tuimark.styled import Diagnostic, Line, Span, StyledText

__version__ = "0.1.0"


def _renderer_for(config: RenderConfig) -> TerminalRenderer:
    return TerminalRenderer(config.style_sheet, highlighter=config.resolve_highlighter())


def render_events(events: Iterable[Event], *, config: RenderConfig | None = None) -> StyledText:
    """Render an event stream to styled lines.

    Args:
        events: Well-nested event stream (any iterable, consumed once)
        config: Render configuration (uses the context config if None)

    Returns:
        StyledText with the rendered lines and diagnostics

    Example:
        >>> from tuimark.events import End, Heading, Start, Text
        >>> text = render_events([Start(Heading(1)), Text("Hi"), End(Heading(1))])
        >>> text.plain_lines()
        ['# Hi']
    """
    config = config or get_render_config()
    return _renderer_for(config).render(events)


def from_str(source: str, *, config: RenderConfig | None = None) -> StyledText:
    """Parse markdown source and render it to styled lines.

    Args:
        source: Markdown source text
        config: Render configuration (uses the context config if None)

    Returns:
        StyledText with the rendered lines and diagnostics

    Example:
        >>> from_str("> Quote").plain_lines()
        ['> Quote']
    """
    config = config or get_render_config()
    events = parse_events(
        source,
        strikethrough=config.strikethrough_enabled,
        task_lists=config.task_lists_enabled,
    )
    return _renderer_for(config).render(events)


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> text = md("# Hello **World**")
        >>> text.plain_lines()
        ['# Hello World']

        >>> # Inspect the events
        >>> events = list(md.events("*hi*"))

    Thread Safety:
        Parser and renderer are configured once and hold no per-call state.
        Safe to use one Markdown instance concurrently from several threads.

    """

    __slots__ = ("_config", "_parser", "_renderer")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        renderer: EventRenderer | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Render configuration (uses the context config if None)
            renderer: Custom renderer (a TerminalRenderer built from config if None)
        """
        self._config = config or get_render_config()
        self._parser = EventParser(
            strikethrough=self._config.strikethrough_enabled,
            task_lists=self._config.task_lists_enabled,
        )
        self._renderer: EventRenderer = renderer or _renderer_for(self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> StyledText:
        """Parse and render Markdown in one call."""
        return self._renderer.render(self._parser.parse(source))

    def events(self, source: str) -> Iterator[Event]:
        """Parse Markdown source into events."""
        return self._parser.parse(source)

    def render(self, events: Iterable[Event]) -> StyledText:
        """Render an event stream."""
        return self._renderer.render(events)

    def render_many(self, sources: Iterable[str]) -> list[StyledText]:
        """Parse and render several documents, each with fresh state."""
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "from_str",
    "render_events",
    "parse_events",
    "Markdown",
    # Output model
    "Diagnostic",
    "Line",
    "Span",
    "StyledText",
    # Parser and renderers
    "EventParser",
    "EventRenderer",
    "TerminalRenderer",
    "TextWriter",
    # Styles
    "DefaultStyleSheet",
    "StyleSheet",
    "ThemeStyleSheet",
    "load_theme",
    # Highlighting
    "Highlighter",
    "PygmentsHighlighter",
    "get_default_highlighter",
    # Painting
    "paint",
    "to_ansi",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "TuimarkError",
    "NestingError",
    "ScopeKind",
    "StyleSheetError",
    "RenderError",
]
