"""Run the speech and sign recognizers from the terminal."""

import asyncio
import time
from pathlib import Path
from typing import Optional

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from packages.core import InvalidKeypointsError, format_duration, safe_json_load
from packages.recognition import KeypointFrame

from ..utils.config import get_controller, get_settings
from ..utils.display import console, print_candidates, print_entry
from .playback import run_playback


def _run_with_spinner(description: str, coro):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description, total=None)
        return asyncio.run(coro)


def listen(
    play: bool = typer.Option(
        False, "--play", help="Present the glosses after recognition"
    ),
) -> None:
    """Listen for speech and translate it to glosses.

    Example:
        nanban listen
        nanban listen --play
    """
    controller = get_controller()
    entry = _run_with_spinner("Listening...", controller.listen())

    if entry is None:
        console.print("[red]No speech recognized[/]")
        raise typer.Exit(1)

    print_entry(entry)

    if play:
        asyncio.run(run_playback(controller.scheduler, entry.gloss or ()))


def _load_keypoints(path: Path) -> KeypointFrame:
    data = safe_json_load(path)
    if not isinstance(data, dict):
        console.print(f"[red]Error:[/] {path} is not a keypoints JSON object")
        raise typer.Exit(1)
    try:
        return KeypointFrame.from_dict(data)
    except InvalidKeypointsError as e:
        console.print(f"[red]Error:[/] {e.message}")
        raise typer.Exit(1)


def recognize(
    keypoints: Optional[Path] = typer.Option(
        None, "--keypoints", "-k", exists=True, dir_okay=False,
        help="JSON file with hand, pose and face keypoints"
    ),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", min=0.0, max=1.0,
        help="Dim candidates below this confidence (default: NANBAN_CONFIDENCE_THRESHOLD)"
    ),
) -> None:
    """Recognize a sign and speak the best candidate.

    Without --keypoints a frame is taken from the perception source.

    Example:
        nanban recognize
        nanban recognize --keypoints frame.json --threshold 0.8
    """
    if threshold is None:
        threshold = get_settings().confidence_threshold

    frame = _load_keypoints(keypoints) if keypoints else None

    controller = get_controller()
    started = time.perf_counter()
    entry = _run_with_spinner("Watching...", controller.recognize_sign(frame))
    elapsed_ms = (time.perf_counter() - started) * 1000

    if entry is None:
        console.print("[red]No sign recognized[/]")
        raise typer.Exit(1)

    print_entry(entry)
    print_candidates(entry.candidates or (), threshold)
    console.print(f"[dim]Recognized in[/] {format_duration(elapsed_ms)}")
