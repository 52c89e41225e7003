"""Present a gloss sequence in real time."""

import asyncio
from typing import Iterable

import typer

from packages.playback import PlaybackPhase, PlaybackScheduler, PlaybackState, PlaybackTiming

from ..utils.config import get_translator
from ..utils.display import console, print_playback_state


async def run_playback(scheduler: PlaybackScheduler, tokens: Iterable[str]) -> bool:
    """Play tokens on the scheduler and wait until it is idle again.

    Returns:
        False if there was nothing to play
    """
    finished = asyncio.Event()

    def on_state(state: PlaybackState) -> None:
        if state.phase is PlaybackPhase.ATTACK:
            print_playback_state(state)
        elif state.phase is PlaybackPhase.IDLE:
            finished.set()

    unsubscribe = scheduler.subscribe(on_state)
    try:
        if not scheduler.play(tokens):
            return False
        await finished.wait()
        return True
    finally:
        unsubscribe()


def play(
    text: str = typer.Argument(..., help="Text to translate and present"),
    speed: float = typer.Option(
        1.0, "--speed", "-s", min=0.25, max=4.0, help="Playback speed multiplier"
    ),
) -> None:
    """Translate text and present the signs one at a time.

    Example:
        nanban play "nice to meet you"
        nanban play "thank you" --speed 2
    """
    tokens = get_translator().convert(text)
    if not tokens:
        console.print("[yellow]Nothing to play[/]")
        raise typer.Exit(1)

    scheduler = PlaybackScheduler(timing=PlaybackTiming().at_speed(speed))
    asyncio.run(run_playback(scheduler, tokens))
    console.print("[green]Done[/]")
