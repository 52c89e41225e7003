"""Phrase service - phrasebook CRUD for the API."""

from typing import Optional

from packages.phrasebook import CATEGORIES, Phrase, Phrasebook


def _to_response(phrase: Phrase) -> dict:
    return {
        "id": phrase.id,
        "text": phrase.text,
        "gloss": list(phrase.gloss),
        "category": phrase.category,
        "is_favorite": phrase.is_favorite,
        "created_at": phrase.created_at,
    }


class PhraseService:
    """Handles phrasebook operations."""

    def __init__(self, phrasebook: Phrasebook):
        self.phrasebook = phrasebook

    def list_phrases(
        self,
        query: str = "",
        category: str = "All",
        favorites_only: bool = False,
    ) -> dict:
        """Search phrases by text/gloss and category."""
        phrases = self.phrasebook.search(query, category)
        if favorites_only:
            phrases = [p for p in phrases if p.is_favorite]
        return {
            "phrases": [_to_response(p) for p in phrases],
            "total": len(phrases),
        }

    def add_phrase(self, text: str, category: str = "Custom", gloss: Optional[list[str]] = None) -> dict:
        """
        Add a phrase.

        Raises:
            ValueError: If text is blank or category is invalid
        """
        return _to_response(self.phrasebook.add(text, category=category, gloss=gloss))

    def delete_phrase(self, phrase_id: str) -> dict:
        """
        Delete a phrase.

        Raises:
            PhraseNotFoundError: If the phrase does not exist
        """
        return _to_response(self.phrasebook.delete(phrase_id))

    def toggle_favorite(self, phrase_id: str) -> dict:
        """
        Flip a phrase's favorite flag.

        Raises:
            PhraseNotFoundError: If the phrase does not exist
        """
        return _to_response(self.phrasebook.toggle_favorite(phrase_id))

    def categories(self) -> list[str]:
        return list(CATEGORIES)
