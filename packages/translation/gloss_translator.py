"""Text-to-gloss translation.

Maps free text to an ordered sequence of gloss tokens using a phrase
dictionary, in priority order:

1. Exact match of the normalized text against a dictionary key.
2. Substring match: the first key (in dictionary order) contained in the text.
3. Word-by-word: each word maps through the dictionary or is fingerspelled
   (emitted upper-cased as a literal token).
4. Literal: if no words survive punctuation stripping, the upper-cased input.

The translator never raises and only returns an empty sequence for input
that is empty after trimming.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from packages.core.utils import normalize_phrase, split_words

from .dictionary import GlossDictionary

logger = logging.getLogger(__name__)


class MatchKind(Enum):
    """Which step of the algorithm produced the glosses."""
    EMPTY = "empty"          # Blank input
    EXACT = "exact"          # Whole text is a dictionary key
    SUBSTRING = "substring"  # A dictionary key occurs inside the text
    WORDS = "words"          # Word-by-word lookup with fingerspelling
    LITERAL = "literal"      # Nothing usable, upper-cased input returned


class MatchPolicy(Enum):
    """Tie-break for the substring step."""
    FIRST = "first"      # First key in dictionary order (default)
    LONGEST = "longest"  # Longest key; dictionary order among equal lengths


@dataclass
class GlossTranslation:
    """Result of translating text to glosses."""
    glosses: list[str] = field(default_factory=list)
    original_text: str = ""
    match: MatchKind = MatchKind.EMPTY
    matched_phrase: Optional[str] = None
    fingerspelled: list[str] = field(default_factory=list)  # Words with no mapping

    def to_string(self, separator: str = " ") -> str:
        """Convert gloss sequence to string.

        Args:
            separator: String to join glosses with

        Returns:
            Gloss string (e.g., "WHAT YOUR NAME")
        """
        return separator.join(self.glosses)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "glosses": self.glosses,
            "gloss_string": self.to_string(),
            "original_text": self.original_text,
            "match": self.match.value,
            "matched_phrase": self.matched_phrase,
            "fingerspelled": self.fingerspelled,
        }


class GlossTranslator:
    """Converts text to gloss sequences backed by a GlossDictionary."""

    def __init__(
        self,
        dictionary: Optional[GlossDictionary] = None,
        policy: MatchPolicy = MatchPolicy.FIRST,
    ):
        """Initialize the translator.

        Args:
            dictionary: Phrase dictionary (defaults to the built-in mappings)
            policy: Tie-break for substring matches
        """
        self.dictionary = dictionary if dictionary is not None else GlossDictionary()
        self.policy = policy

    def translate(self, text: str) -> GlossTranslation:
        """Translate text to a gloss sequence with match details.

        Args:
            text: Spoken or typed text

        Returns:
            GlossTranslation; glosses are empty only for blank input. Text
            with no words (only punctuation or symbols) becomes a single
            literal token: the input with surrounding whitespace stripped,
            upper-cased.
        """
        if not isinstance(text, str):
            text = "" if text is None else str(text)
        normalized = normalize_phrase(text)
        if not normalized:
            return GlossTranslation(original_text=text)

        exact = self.dictionary.lookup(normalized)
        if exact is not None:
            return GlossTranslation(
                glosses=list(exact),
                original_text=text,
                match=MatchKind.EXACT,
                matched_phrase=normalized,
            )

        hit = self._find_substring(normalized)
        if hit is not None:
            phrase, tokens = hit
            logger.debug("Substring match %r in %r", phrase, normalized)
            return GlossTranslation(
                glosses=list(tokens),
                original_text=text,
                match=MatchKind.SUBSTRING,
                matched_phrase=phrase,
            )

        glosses: list[str] = []
        fingerspelled: list[str] = []
        for word in split_words(normalized):
            tokens = self.dictionary.lookup(word)
            if tokens is not None:
                glosses.extend(tokens)
            else:
                glosses.append(word.upper())
                fingerspelled.append(word.upper())

        if glosses:
            return GlossTranslation(
                glosses=glosses,
                original_text=text,
                match=MatchKind.WORDS,
                fingerspelled=fingerspelled,
            )

        return GlossTranslation(
            glosses=[normalized.upper()],
            original_text=text,
            match=MatchKind.LITERAL,
        )

    def convert(self, text: str) -> list[str]:
        """Translate text and return only the gloss tokens.

        Examples:
            >>> GlossTranslator().convert("  ?!  ")
            ['?!']
        """
        return self.translate(text).glosses

    def translate_batch(self, sentences: Iterable[str]) -> list[GlossTranslation]:
        """Translate multiple sentences."""
        return [self.translate(s) for s in sentences]

    # ============ Dictionary management ============

    def add_mapping(self, phrase: str, tokens: Iterable[str]) -> bool:
        """Add or overwrite a phrase mapping.

        Returns:
            False if the phrase is blank or has no usable tokens
        """
        added = self.dictionary.add(phrase, tokens)
        if not added:
            logger.debug("Ignored invalid mapping for %r", phrase)
        return added

    def remove_mapping(self, phrase: str) -> bool:
        """Remove a phrase mapping. Returns True if one was removed."""
        return self.dictionary.remove(phrase)

    def has_mapping(self, phrase: str) -> bool:
        """Check whether a phrase has its own mapping."""
        return phrase in self.dictionary

    def get_mapping(self, phrase: str) -> Optional[list[str]]:
        """Get the tokens mapped to a phrase, or None."""
        tokens = self.dictionary.get(phrase)
        return list(tokens) if tokens is not None else None

    def list_phrases(self) -> list[str]:
        """All mapped phrases in dictionary order."""
        return self.dictionary.phrases()

    def _find_substring(self, normalized: str) -> Optional[tuple[str, tuple[str, ...]]]:
        """Find the dictionary entry whose key occurs in the text."""
        if self.policy is MatchPolicy.FIRST:
            for phrase, tokens in self.dictionary.items():
                if phrase in normalized:
                    return phrase, tokens
            return None

        best: Optional[tuple[str, tuple[str, ...]]] = None
        for phrase, tokens in self.dictionary.items():
            if phrase in normalized and (best is None or len(phrase) > len(best[0])):
                best = (phrase, tokens)
        return best


def translate(text: str, dictionary: Optional[GlossDictionary] = None) -> GlossTranslation:
    """Convenience function for quick translation.

    Args:
        text: Text to translate
        dictionary: Optional dictionary (defaults to the built-in mappings)

    Returns:
        GlossTranslation result
    """
    return GlossTranslator(dictionary).translate(text)
