"""Rich display utilities for CLI output."""

from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from packages.conversation import ConversationEntry
from packages.core import EntryKind, RecognitionResult, format_duration, parse_iso
from packages.phrasebook import Phrase
from packages.playback import PlaybackPhase, PlaybackState, TimelineStep
from packages.translation import GlossTranslation

console = Console()


def phase_color(phase: PlaybackPhase) -> str:
    """Get color for a playback phase."""
    colors = {
        PlaybackPhase.ATTACK: "green",
        PlaybackPhase.RELEASE: "yellow",
        PlaybackPhase.GAP: "dim",
        PlaybackPhase.DONE: "blue",
        PlaybackPhase.IDLE: "white",
    }
    return colors.get(phase, "white")


def confidence_style(result: RecognitionResult, threshold: float) -> str:
    """Style a candidate by whether it clears the confidence threshold."""
    if result.confidence < threshold:
        return "dim"
    return "green" if result.confidence >= 0.9 else "yellow"


def format_date(iso_str: str) -> str:
    """Show a stored ISO timestamp as a date, or "-" if it can't be parsed."""
    try:
        return parse_iso(iso_str).strftime("%Y-%m-%d")
    except (TypeError, ValueError):
        return "-"


def print_translation(result: GlossTranslation, details: bool = False) -> None:
    """Print glosses, optionally with how they were found."""
    # Output just the glosses for scripting
    console.print(result.to_string(), highlight=False)

    if not details:
        return

    match = result.match.value
    if result.matched_phrase:
        match = f"{match} ('{result.matched_phrase}')"
    console.print(f"[dim]Match:[/] {match}", highlight=False)
    if result.fingerspelled:
        console.print(
            f"[dim]Fingerspelled:[/] [yellow]{', '.join(result.fingerspelled)}[/]",
            highlight=False,
        )


def print_timeline(steps: list[TimelineStep], total: int, title: str = "Playback Timeline") -> None:
    """Print a table of playback steps and the total duration."""
    if not steps:
        console.print("[dim]Nothing to play[/]")
        return

    table = Table(title=title)
    table.add_column("At", justify="right")
    table.add_column("Phase")
    table.add_column("Sign", style="bold")
    table.add_column("Position", justify="right")

    for step in steps:
        position = f"{step.cursor + 1} / {total}" if step.token is not None else "-"
        table.add_row(
            format_duration(step.offset_ms),
            Text(step.phase.value, style=phase_color(step.phase)),
            step.token or "-",
            position,
        )

    console.print(table)
    console.print(f"[dim]Duration:[/] {format_duration(steps[-1].offset_ms)}")


def print_playback_state(state: PlaybackState) -> None:
    """Print the sign now being presented."""
    console.print(
        f"[bold]{state.current_token}[/] [dim]{state.progress}[/]",
        highlight=False,
    )


def print_candidates(
    candidates: Iterable[RecognitionResult],
    threshold: float,
    title: str = "Sign Candidates",
) -> None:
    """Print ranked candidates, dimming those below the threshold."""
    candidates = list(candidates)
    if not candidates:
        console.print("[dim]No candidates[/]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Sign", style="bold")
    table.add_column("Confidence", justify="right")

    for rank, result in enumerate(candidates, start=1):
        style = confidence_style(result, threshold)
        label = result.label if result.confidence >= threshold else f"{result.label} (low)"
        table.add_row(str(rank), Text(label, style=style), Text(f"{result.percent}%", style=style))

    console.print(table)


def print_entry(entry: ConversationEntry) -> None:
    """Print one conversation entry."""
    if entry.kind is EntryKind.SPEECH:
        title = "[bold cyan]Heard[/]"
        lines = [
            f"[dim]Text:[/] {entry.text}",
            f"[dim]Glosses:[/] [bold]{' '.join(entry.gloss or ())}[/]",
        ]
    else:
        title = "[bold magenta]Signed[/]"
        lines = [f"[dim]Sign:[/] [bold]{entry.text}[/]"]

    lines.append(f"[dim]At:[/] {entry.timestamp:%H:%M:%S}")
    console.print(Panel("\n".join(lines), title=title, expand=False))


def print_phrase_table(phrases: list[Phrase], title: str = "Phrases") -> None:
    """Print a table of phrases."""
    if not phrases:
        console.print(f"[dim]No {title.lower()} found[/]")
        return

    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Text", style="bold")
    table.add_column("Glosses")
    table.add_column("Category")
    table.add_column("Fav", justify="center")
    table.add_column("Added")

    for phrase in phrases:
        table.add_row(
            phrase.id,
            phrase.text,
            " ".join(phrase.gloss),
            phrase.category,
            "[yellow]*[/]" if phrase.is_favorite else "",
            format_date(phrase.created_at),
        )

    console.print(table)


def print_phrase(phrase: Phrase, action: Optional[str] = None) -> None:
    """Print a single phrase with details."""
    title = f"[bold]{phrase.text}[/bold]"
    if action:
        title = f"{title} ({action})"

    lines = [
        f"[dim]ID:[/] {phrase.id}",
        f"[dim]Glosses:[/] {' '.join(phrase.gloss) or '-'}",
        f"[dim]Category:[/] {phrase.category}",
        f"[dim]Favorite:[/] {'yes' if phrase.is_favorite else 'no'}",
    ]
    console.print(Panel("\n".join(lines), title=title, expand=False))
