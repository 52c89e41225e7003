"""Nanban CLI - Command-line tools for two-way sign language conversation.

Usage:
    nanban <command> [options]

Commands:
    glosses     Translate text to sign glosses
    timeline    Show when each sign would be presented
    play        Present the signs for some text in real time
    listen      Recognize speech and translate it
    recognize   Recognize a sign and speak it
    phrases     Manage the phrasebook (list, add, delete, favorite, export)
"""

import logging
from typing import Optional

import typer

from packages.core import ConfigurationError, LogLevel, configure_logging

from . import __version__
from .commands import glosses, listen, phrases_app, play, recognize, timeline
from .utils.config import get_settings
from .utils.display import console

logger = logging.getLogger(__name__)

# Create the main app
app = typer.Typer(
    name="nanban",
    help="Nanban CLI - Two-way sign language conversation tools",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"Nanban CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-L", help="DEBUG, INFO, WARNING or ERROR (default: NANBAN_LOG_LEVEL)"
    ),
) -> None:
    """Nanban CLI - Command-line tools for two-way sign language conversation."""
    try:
        config = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/] {e.message}")
        raise typer.Exit(2)

    level = config.log_level
    if log_level:
        try:
            level = LogLevel(log_level.upper())
        except ValueError:
            console.print(f"[red]Error:[/] Invalid log level '{log_level}'")
            raise typer.Exit(2)
    configure_logging(level)
    logger.debug("Environment: %s", config.env.value)


# Register commands
app.command("glosses")(glosses)
app.command("timeline")(timeline)
app.command("play")(play)
app.command("listen")(listen)
app.command("recognize")(recognize)
app.add_typer(phrases_app, name="phrases")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
