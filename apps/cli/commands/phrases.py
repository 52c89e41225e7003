"""Manage the phrasebook."""

from pathlib import Path
from typing import Optional

import typer

from packages.core import PhraseNotFoundError, safe_json_save
from packages.phrasebook import ALL_CATEGORIES, CATEGORIES

from ..utils.config import get_phrasebook
from ..utils.display import console, print_phrase, print_phrase_table

app = typer.Typer(
    name="phrases",
    help="Save, search and favorite frequently used phrases",
    no_args_is_help=True,
)


def _not_found(phrase_id: str) -> None:
    console.print(f"[red]Phrase '{phrase_id}' not found[/]")
    raise typer.Exit(1)


@app.command("list")
def list_phrases(
    query: str = typer.Argument("", help="Search text or gloss"),
    category: str = typer.Option(
        ALL_CATEGORIES, "--category", "-c",
        help=f"Filter by category: {', '.join(CATEGORIES)}"
    ),
    favorites: bool = typer.Option(
        False, "--favorites", "-f", help="Only show favorites"
    ),
) -> None:
    """List saved phrases.

    Example:
        nanban phrases list
        nanban phrases list help --category Emergency
        nanban phrases list --favorites
    """
    phrasebook = get_phrasebook()
    results = phrasebook.search(query, category)
    if favorites:
        results = [p for p in results if p.is_favorite]

    print_phrase_table(results, title="Favorites" if favorites else "Phrases")


@app.command("add")
def add(
    text: str = typer.Argument(..., help="Phrase text"),
    category: str = typer.Option(
        "Custom", "--category", "-c", help="Category (anything except All)"
    ),
    gloss: Optional[str] = typer.Option(
        None, "--gloss", "-g", help="Space-separated glosses (default: one per word)"
    ),
) -> None:
    """Add a phrase to the phrasebook.

    Example:
        nanban phrases add "Where is the bathroom?" --category Questions
        nanban phrases add "Good morning" --gloss "MORNING GOOD"
    """
    phrasebook = get_phrasebook()
    try:
        phrase = phrasebook.add(
            text,
            category=category,
            gloss=gloss.split() if gloss is not None else None,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    print_phrase(phrase, action="added")


@app.command("delete")
def delete(
    phrase_id: str = typer.Argument(..., help="Phrase ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a phrase.

    Example:
        nanban phrases delete 5
        nanban phrases delete 5 --force
    """
    phrasebook = get_phrasebook()
    try:
        phrase = phrasebook.get(phrase_id)
    except PhraseNotFoundError:
        _not_found(phrase_id)

    if not force:
        print_phrase(phrase)
        if not typer.confirm(f"Delete phrase {phrase_id}?"):
            raise typer.Exit(0)

    phrasebook.delete(phrase_id)
    console.print(f"[green]Deleted phrase {phrase_id}[/]")


@app.command("favorite")
def favorite(
    phrase_id: str = typer.Argument(..., help="Phrase ID"),
) -> None:
    """Toggle a phrase's favorite flag.

    Example:
        nanban phrases favorite 2
    """
    try:
        phrase = get_phrasebook().toggle_favorite(phrase_id)
    except PhraseNotFoundError:
        _not_found(phrase_id)

    state = "[yellow]favorited[/]" if phrase.is_favorite else "unfavorited"
    console.print(f"{phrase.text}: {state}")


@app.command("export")
def export_cmd(
    output: Path = typer.Option(..., "--output", "-o", help="Output file path"),
    favorites: bool = typer.Option(
        False, "--favorites", "-f", help="Only export favorites"
    ),
) -> None:
    """Export phrases as JSON.

    Example:
        nanban phrases export -o phrases.json
    """
    phrasebook = get_phrasebook()
    phrases = phrasebook.favorites() if favorites else phrasebook.phrases

    if not phrases:
        console.print("[yellow]No phrases to export[/]")
        return

    if not safe_json_save(output, [p.to_dict() for p in phrases]):
        console.print(f"[red]Could not write {output}[/]")
        raise typer.Exit(1)

    console.print(f"[green]Exported {len(phrases)} phrases to {output}[/]")
