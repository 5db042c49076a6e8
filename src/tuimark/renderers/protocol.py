"""EventRenderer protocol: stable interface for event stream renderers.

Any renderer that implements ``render(events) -> StyledText`` conforms to this
protocol. The built-in ``TerminalRenderer`` is the reference implementation.

Example:
    from tuimark.renderers.protocol import EventRenderer

    def render_page(renderer: EventRenderer, source: str) -> StyledText:
        return renderer.render(parse_events(source))

"""

from collections.abc import Iterable
from typing import Protocol

from tuimark.events import Event
from tuimark.styled import StyledText


class EventRenderer(Protocol):
    """Protocol for event stream renderers.

    Implementations must accept any iterable of events, consume it once, and
    return the rendered lines. The built-in ``TerminalRenderer`` conforms to
    this protocol.

    """

    def render(self, events: Iterable[Event]) -> StyledText:
        """Render an event stream to styled lines.

        Args:
            events: Well-nested event stream.

        Returns:
            Rendered lines and diagnostics.

        """
        ...
