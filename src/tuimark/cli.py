"""
Renders a markdown file as styled lines on the terminal.
With no path, renders README.md from the current directory; use "-" for stdin.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from tuimark import __version__, from_str
from tuimark.config import RenderConfig
from tuimark.errors import StyleSheetError, TuimarkError
from tuimark.paint import paint
from tuimark.style_sheet import StyleSheet, load_theme
from tuimark.utils.logger import get_logger

__all__ = ["cli"]

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _read_source(path: str) -> str:
    if path == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise click.ClickException(f"could not read {path}: {error}") from error


@click.command()
@click.version_option(version=__version__, prog_name="tuimark")
@click.option(
    "--theme",
    type=click.Path(exists=True, dir_okay=False),
    help="TOML file with style overrides",
)
@click.option("--no-highlight", is_flag=True, help="Disable syntax highlighting in code blocks")
@click.option("--no-color", is_flag=True, help="Print plain text without colours")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Level of messages written to stderr",
)
@click.argument(
    "path",
    default="README.md",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
def cli(
    path: str,
    theme: str | None = None,
    no_highlight: bool = False,
    no_color: bool = False,
    log_level: str = "WARNING",
):
    """
    Entry point for rendering a markdown file to the terminal.

    Args:
        path: Markdown file to render, or "-" to read stdin.
        theme: Optional TOML theme file overriding the default palette.
        no_highlight: Render code blocks with the flat code style.
        no_color: Emit plain text without escape codes.
        log_level: Threshold for log messages on stderr.

    Raises:
        click.BadParameter: If the theme file holds invalid entries.
        click.ClickException: If the input cannot be read or rendered.

    Examples:
        tuimark README.md --theme solarized.toml
        cat notes.md | tuimark - --no-color
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )

    style_sheet: StyleSheet | None = None
    if theme is not None:
        try:
            style_sheet = load_theme(theme)
        except (StyleSheetError, OSError) as error:
            raise click.BadParameter(str(error), param_hint="--theme") from error

    config = RenderConfig(highlight=not no_highlight)
    if style_sheet is not None:
        config = RenderConfig(style_sheet=style_sheet, highlight=config.highlight)

    source = _read_source(path)
    logger.info("Rendering %s (%d characters)", path, len(source))

    try:
        text = from_str(source, config=config)
        console = Console(color_system=None if no_color else "auto", highlight=False)
        paint(text, console)
    except TuimarkError as error:
        raise click.ClickException(str(error)) from error

    if text.diagnostics:
        logger.info("Skipped %d unsupported construct(s)", len(text.diagnostics))


if __name__ == "__main__":
    cli()
