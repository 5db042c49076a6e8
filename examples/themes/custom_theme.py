"""Swap the palette without touching the renderer."""

from pathlib import Path

from tuimark import Markdown, RenderConfig, load_theme, paint

sheet = load_theme(Path(__file__).with_name("solarized.toml"))
md = Markdown(RenderConfig(style_sheet=sheet, highlight=True))

paint(md("## Themed\n\n1. first\n2. second\n\n```python\nprint('hi')\n```"))
