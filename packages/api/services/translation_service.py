"""Translation service - text to gloss, dictionary management and playback timelines."""

from typing import Optional

from packages.playback import PlaybackTiming, build_timeline
from packages.translation import GlossTranslation, GlossTranslator


class TranslationService:
    """Handles translation requests against a shared GlossTranslator."""

    def __init__(self, translator: GlossTranslator):
        self.translator = translator

    def translate_text(self, text: str) -> dict:
        """
        Translate text to glosses.

        Args:
            text: Spoken or typed text

        Returns:
            Dictionary with glosses, match kind and fingerspelled words
        """
        result: GlossTranslation = self.translator.translate(text)
        return result.to_dict()

    def list_mappings(self) -> dict:
        """All phrase mappings in dictionary order."""
        mappings = [
            {"phrase": phrase, "tokens": list(tokens)}
            for phrase, tokens in self.translator.dictionary.items()
        ]
        return {"mappings": mappings, "total": len(mappings)}

    def get_mapping(self, phrase: str) -> Optional[dict]:
        """Get one mapping, or None if the phrase has no entry."""
        tokens = self.translator.get_mapping(phrase)
        if tokens is None:
            return None
        return {"phrase": phrase.lower().strip(), "tokens": tokens}

    def add_mapping(self, phrase: str, tokens: list[str]) -> Optional[dict]:
        """Add or overwrite a mapping. Returns None if it was rejected."""
        if not self.translator.add_mapping(phrase, tokens):
            return None
        return self.get_mapping(phrase)

    def remove_mapping(self, phrase: str) -> bool:
        return self.translator.remove_mapping(phrase)

    def timeline(self, tokens: list[str], speed: float = 1.0) -> dict:
        """
        Compute the playback schedule for a gloss sequence.

        Returns:
            Dictionary with steps and total duration in milliseconds
        """
        steps = build_timeline(tokens, PlaybackTiming().at_speed(speed))
        return {
            "steps": [step.to_dict() for step in steps],
            "duration_ms": steps[-1].offset_ms if steps else 0.0,
        }
