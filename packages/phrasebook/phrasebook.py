"""Phrasebook of saved phrases.

Phrases are persisted as one JSON array under a fixed key in a
KeyValueStore. The first load of an empty store seeds and saves the
default phrase set; unreadable or corrupt storage falls back to the
defaults without raising.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from packages.core.errors import PersistenceUnavailable, PhraseNotFoundError
from packages.core.protocols import KeyValueStore
from packages.core.utils import normalize_gloss, split_words

from .models import Phrase
from .store import MemoryStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "@SignLanguageNanban:phrases"

ALL_CATEGORIES = "All"
CATEGORIES = (ALL_CATEGORIES, "Greetings", "Courtesy", "Questions", "Emergency", "Custom")

DEFAULT_PHRASES = (
    ("1", "Hello, how are you?", ("HELLO", "HOW", "YOU"), "Greetings", False),
    ("2", "Thank you very much", ("THANK-YOU", "VERY", "MUCH"), "Courtesy", True),
    ("3", "What is your name?", ("WHAT", "YOUR", "NAME"), "Questions", False),
    ("4", "I need help", ("I", "NEED", "HELP"), "Emergency", True),
)


def default_phrases() -> list[Phrase]:
    """Fresh copies of the default phrase set."""
    return [
        Phrase(id=id_, text=text, gloss=list(gloss), category=category, is_favorite=favorite)
        for id_, text, gloss, category, favorite in DEFAULT_PHRASES
    ]


def phrase_gloss(text: str) -> list[str]:
    """Word-per-token gloss: upper-cased words with punctuation removed."""
    return [word.upper() for word in split_words(text)]


class Phrasebook:
    """User-saved phrases with category, favorite flag and gloss."""

    def __init__(self, store: Optional[KeyValueStore] = None, key: str = STORAGE_KEY):
        self.store = store if store is not None else MemoryStore()
        self.key = key
        self._phrases: Optional[list[Phrase]] = None
        self._last_id = 0

    # ============ Persistence ============

    def load(self) -> list[Phrase]:
        """Load phrases from the store.

        Missing data seeds and persists the defaults. Unreadable or corrupt
        data is logged and replaced by the defaults in memory only.
        """
        try:
            raw = self.store.get(self.key)
        except PersistenceUnavailable as e:
            logger.warning("Phrase storage unavailable, using defaults: %s", e.message)
            self._set(default_phrases())
            return self.phrases

        if raw is None:
            logger.info("No saved phrases, seeding %d defaults", len(DEFAULT_PHRASES))
            self._set(default_phrases())
            self.save()
            return self.phrases

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError("expected a JSON array")
            phrases = [Phrase.from_dict(record) for record in records]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Saved phrases are corrupt, using defaults: %s", e)
            phrases = default_phrases()

        self._set(phrases)
        return self.phrases

    def save(self) -> bool:
        """Write all phrases to the store. Returns False on failure."""
        payload = json.dumps([p.to_dict() for p in self._all()], ensure_ascii=False)
        try:
            self.store.set(self.key, payload)
        except PersistenceUnavailable as e:
            logger.warning("Could not save phrases: %s", e.message)
            return False
        return True

    def _set(self, phrases: list[Phrase]) -> None:
        self._phrases = phrases
        numeric = [int(p.id) for p in phrases if p.id.isdecimal()]
        self._last_id = max(numeric + [self._last_id])

    def _all(self) -> list[Phrase]:
        if self._phrases is None:
            self.load()
        return self._phrases

    def _next_id(self) -> str:
        self._last_id += 1
        return str(self._last_id)

    # ============ Queries ============

    @property
    def phrases(self) -> list[Phrase]:
        """All phrases in insertion order."""
        return list(self._all())

    def get(self, phrase_id: str) -> Phrase:
        """Get a phrase by id.

        Raises:
            PhraseNotFoundError: If no phrase has that id
        """
        for phrase in self._all():
            if phrase.id == phrase_id:
                return phrase
        raise PhraseNotFoundError(phrase_id)

    def search(self, query: str = "", category: str = ALL_CATEGORIES) -> list[Phrase]:
        """Filter by category, then by text or gloss substring.

        Args:
            query: Case-insensitive substring; blank matches everything
            category: Category name, or "All"
        """
        results = self._all()
        if category and category != ALL_CATEGORIES:
            results = [p for p in results if p.category == category]
        query = query.strip()
        if query:
            results = [p for p in results if p.matches(query)]
        return list(results)

    def favorites(self) -> list[Phrase]:
        return [p for p in self._all() if p.is_favorite]

    # ============ Mutations ============

    def add(
        self,
        text: str,
        category: str = "Custom",
        gloss: Optional[Iterable[str]] = None,
    ) -> Phrase:
        """Add a phrase and save.

        Args:
            text: Phrase text (trimmed)
            category: Any category except "All"
            gloss: Tokens; derived from the text word by word if omitted

        Raises:
            ValueError: If text is blank or category is "All"
        """
        text = text.strip()
        if not text:
            raise ValueError("Phrase text must not be empty")
        if not category or category == ALL_CATEGORIES:
            raise ValueError(f"Invalid phrase category: {category!r}")

        tokens = [normalize_gloss(t) for t in gloss if t.strip()] if gloss is not None else phrase_gloss(text)
        phrase = Phrase(id=self._next_id(), text=text, gloss=tokens, category=category)
        self._all().append(phrase)
        self.save()
        logger.debug("Added phrase %s: %r", phrase.id, text)
        return phrase

    def delete(self, phrase_id: str) -> Phrase:
        """Remove a phrase and save.

        Raises:
            PhraseNotFoundError: If no phrase has that id
        """
        phrase = self.get(phrase_id)
        self._all().remove(phrase)
        self.save()
        return phrase

    def toggle_favorite(self, phrase_id: str) -> Phrase:
        """Flip a phrase's favorite flag and save.

        Raises:
            PhraseNotFoundError: If no phrase has that id
        """
        phrase = self.get(phrase_id)
        phrase.is_favorite = not phrase.is_favorite
        self.save()
        return phrase

    def seed_translator(self, translator) -> int:
        """Register every phrase as a translator mapping.

        Returns:
            Number of mappings added
        """
        return sum(1 for p in self._all() if translator.add_mapping(p.text, p.gloss))

    def __len__(self) -> int:
        return len(self._all())
