"""Ordered phrase-to-gloss dictionary.

Keys are normalized phrases (lowercase, trimmed). Enumeration order is
insertion order and is part of the public behavior: the translator's
substring scan returns the first key, in this order, found inside the
input. Overwriting an existing key keeps its original position.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from packages.core.utils import normalize_phrase

# Seeded at startup. Short keys such as "hi" and "no" come early, so they
# win the substring scan over longer phrases listed after them.
DEFAULT_MAPPINGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("hello", ("HELLO",)),
    ("hi", ("HELLO",)),
    ("goodbye", ("GOODBYE",)),
    ("bye", ("GOODBYE",)),
    ("thank you", ("THANK-YOU",)),
    ("thanks", ("THANK-YOU",)),
    ("please", ("PLEASE",)),
    ("help", ("HELP",)),
    ("yes", ("YES",)),
    ("no", ("NO",)),
    ("good", ("GOOD",)),
    ("bad", ("BAD",)),
    ("how are you", ("HOW", "YOU")),
    ("what is your name", ("WHAT", "YOUR", "NAME")),
    ("my name is", ("MY", "NAME")),
    ("i need help", ("I", "NEED", "HELP")),
    ("excuse me", ("EXCUSE-ME",)),
    ("sorry", ("SORRY",)),
    ("welcome", ("WELCOME",)),
    ("nice to meet you", ("NICE", "MEET", "YOU")),
    ("see you later", ("SEE-YOU-LATER",)),
    ("have a good day", ("HAVE", "GOOD", "DAY")),
    ("i love you", ("I", "LOVE", "YOU")),
    ("family", ("FAMILY",)),
    ("friend", ("FRIEND",)),
    ("work", ("WORK",)),
    ("home", ("HOME",)),
    ("school", ("SCHOOL",)),
    ("happy", ("HAPPY",)),
    ("sad", ("SAD",)),
    ("tired", ("TIRED",)),
    ("hungry", ("HUNGRY",)),
    ("thirsty", ("THIRSTY",)),
    ("eat", ("EAT",)),
    ("drink", ("DRINK",)),
    ("sleep", ("SLEEP",)),
    ("today", ("TODAY",)),
    ("yesterday", ("YESTERDAY",)),
    ("tomorrow", ("TOMORROW",)),
    ("morning", ("MORNING",)),
    ("afternoon", ("AFTERNOON",)),
    ("evening", ("EVENING",)),
    ("night", ("NIGHT",)),
)


def _clean_tokens(tokens: Iterable[str]) -> tuple[str, ...]:
    """Drop empty/whitespace-only tokens and surrounding whitespace."""
    return tuple(t.strip() for t in tokens if isinstance(t, str) and t.strip())


class GlossDictionary:
    """Insertion-ordered mapping of normalized phrase -> gloss tokens.

    None of the methods raise: invalid input is rejected with a False
    return value and absence is reported as None/False.
    """

    def __init__(self, mappings: Optional[Iterable[tuple[str, Iterable[str]]]] = None):
        """Initialize the dictionary.

        Args:
            mappings: (phrase, tokens) pairs in enumeration order.
                Defaults to DEFAULT_MAPPINGS; pass [] for an empty dictionary.
        """
        self._entries: dict[str, tuple[str, ...]] = {}
        for phrase, tokens in DEFAULT_MAPPINGS if mappings is None else mappings:
            self.add(phrase, tokens)

    def add(self, phrase: str, tokens: Iterable[str]) -> bool:
        """Add or overwrite a mapping.

        Returns:
            False if the phrase is blank or no non-empty token remains
        """
        key = normalize_phrase(phrase) if isinstance(phrase, str) else ""
        cleaned = _clean_tokens(tokens)
        if not key or not cleaned:
            return False
        self._entries[key] = cleaned
        return True

    def remove(self, phrase: str) -> bool:
        """Remove a mapping. Returns True if a key was removed."""
        return self._entries.pop(normalize_phrase(phrase), None) is not None

    def get(self, phrase: str) -> Optional[tuple[str, ...]]:
        """Look up the tokens for a phrase (normalized before lookup)."""
        return self._entries.get(normalize_phrase(phrase))

    def lookup(self, key: str) -> Optional[tuple[str, ...]]:
        """Look up an already-normalized key."""
        return self._entries.get(key)

    def phrases(self) -> list[str]:
        """All keys in enumeration order."""
        return list(self._entries)

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """(key, tokens) pairs in enumeration order."""
        return iter(list(self._entries.items()))

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and normalize_phrase(phrase) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.phrases())
