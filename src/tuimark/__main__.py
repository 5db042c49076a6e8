"""Allow ``python -m tuimark``."""

from tuimark.cli import cli

if __name__ == "__main__":
    cli()
