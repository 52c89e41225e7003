# Phrasebook package - saved phrases with gloss and category
"""
Store, search and favorite frequently used phrases.

Example usage:
    from packages.phrasebook import JsonFileStore, Phrasebook

    book = Phrasebook(JsonFileStore("data/phrases.json"))
    book.load()
    book.add("Where is the bathroom?", category="Questions")
    for phrase in book.search("help"):
        print(phrase.text, phrase.gloss)
"""

from .models import Phrase
from .phrasebook import (
    ALL_CATEGORIES,
    CATEGORIES,
    DEFAULT_PHRASES,
    STORAGE_KEY,
    Phrasebook,
    default_phrases,
    phrase_gloss,
)
from .store import JsonFileStore, MemoryStore

__all__ = [
    "Phrasebook",
    "Phrase",
    "JsonFileStore",
    "MemoryStore",
    "STORAGE_KEY",
    "CATEGORIES",
    "ALL_CATEGORIES",
    "DEFAULT_PHRASES",
    "default_phrases",
    "phrase_gloss",
]
