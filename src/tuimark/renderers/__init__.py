"""tuimark renderers.

Renderers convert markup event streams into styled lines.

Available Renderers:
- TerminalRenderer: Renders events to lines for a fixed-width character grid

Thread Safety:
All renderers create their per-run state inside render().
Safe for concurrent use from multiple threads.

"""

from tuimark.renderers.protocol import EventRenderer
from tuimark.renderers.terminal import TerminalRenderer, TextWriter

__all__ = ["EventRenderer", "TerminalRenderer", "TextWriter"]
