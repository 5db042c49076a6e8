"""Drive the renderer with your own event stream: no parser needed."""

from tuimark import TerminalRenderer, paint
from tuimark.events import BlockQuote, End, Heading, Item, List, Paragraph, Start, Strong, Text

events = [
    Start(Heading(level=2)),
    Text("Status"),
    End(Heading(level=2)),
    Start(List(start=1)),
    Start(Item()),
    Text("parser "),
    Start(Strong()),
    Text("ok"),
    End(Strong()),
    End(Item()),
    End(List(start=1)),
    Start(BlockQuote()),
    Start(Paragraph()),
    Text("events can come from anywhere"),
    End(Paragraph()),
    End(BlockQuote()),
]

text = TerminalRenderer().render(events)
paint(text)
print(f"{text.height} lines, {text.width} columns wide")
