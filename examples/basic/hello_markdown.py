"""Render Markdown to the terminal in 3 lines: default palette, zero config."""

from tuimark import from_str, paint

text = from_str("# Hello **World**\n\n> Rendered by tuimark\n\n- [x] styled\n- [ ] wrapped")
paint(text)
