"""Translate text to glosses and show the playback schedule."""

import logging

import typer

from packages.playback import PlaybackTiming, build_timeline

from ..utils.config import get_phrasebook, get_translator
from ..utils.display import console, print_timeline, print_translation

logger = logging.getLogger(__name__)


def glosses(
    text: str = typer.Argument(..., help="Text to translate"),
    details: bool = typer.Option(
        False, "--details", "-d", help="Show which dictionary step matched"
    ),
    phrases: bool = typer.Option(
        False, "--phrases", "-p", help="Also match saved phrasebook entries"
    ),
) -> None:
    """Translate text to sign glosses.

    Example:
        nanban glosses "What is your name?"
        # Output: WHAT YOUR NAME
        nanban glosses "see you tomorrow" --details
    """
    translator = get_translator()
    if phrases:
        added = get_phrasebook().seed_translator(translator)
        logger.debug("Added %d phrasebook mappings", added)

    result = translator.translate(text)
    if not result.glosses:
        console.print("[yellow]Nothing to translate[/]")
        raise typer.Exit(1)

    print_translation(result, details=details)


def timeline(
    text: str = typer.Argument(..., help="Text to translate"),
    speed: float = typer.Option(
        1.0, "--speed", "-s", min=0.25, max=4.0, help="Playback speed multiplier"
    ),
) -> None:
    """Show when each sign would be presented.

    Example:
        nanban timeline "how are you"
        nanban timeline "thank you" --speed 2
    """
    tokens = get_translator().convert(text)
    if not tokens:
        console.print("[yellow]Nothing to translate[/]")
        raise typer.Exit(1)

    steps = build_timeline(tokens, PlaybackTiming().at_speed(speed))
    print_timeline(steps, total=len(tokens), title=" ".join(tokens))
