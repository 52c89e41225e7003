"""Placeholder recognition models.

Stand-ins for real speech-to-text and sign classifiers. Both satisfy the
RecognitionModel protocol and draw all randomness from an injected
numpy Generator, so a seeded generator gives a reproducible run.
"""

from typing import Any, Optional

import numpy as np

from packages.core.types import RecognitionResult

SPEECH_CANDIDATES = (
    "Hello, how are you today?",
    "Thank you for your help",
    "What time is the meeting?",
    "I need assistance with this",
    "Good morning everyone",
    "Please repeat that sign",
    "Can you show me how to sign this?",
)

SIGN_LABELS = (
    "HELLO", "THANK-YOU", "PLEASE", "HELP", "YES", "NO",
    "GOOD", "BAD", "HOW", "WHAT", "WHERE", "WHEN", "WHO",
    "I", "YOU", "ME", "WE", "THEY", "NAME", "WORK", "HOME",
    "FAMILY", "FRIEND", "LOVE", "HAPPY", "SAD", "SORRY",
    "EXCUSE-ME", "WELCOME", "GOODBYE", "SEE-YOU-LATER",
)

# Confidence range for generated sign candidates, [low, high)
MIN_CONFIDENCE = 0.6
MAX_CONFIDENCE = 1.0
MAX_CANDIDATES = 3


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


class PlaceholderSpeechModel:
    """Returns one sentence picked uniformly from a fixed pool."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        sentences: tuple[str, ...] = SPEECH_CANDIDATES,
    ):
        if not sentences:
            raise ValueError("sentences must not be empty")
        self.rng = _default_rng(rng)
        self.sentences = tuple(sentences)

    def recognize(self, sample: Any = None) -> str:
        return self.sentences[int(self.rng.integers(len(self.sentences)))]


class PlaceholderSignModel:
    """Returns 1-3 distinct labels with confidences in [0.6, 1.0).

    Output is in draw order; the sign session sorts it.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        labels: tuple[str, ...] = SIGN_LABELS,
        max_candidates: int = MAX_CANDIDATES,
    ):
        if not labels:
            raise ValueError("labels must not be empty")
        self.rng = _default_rng(rng)
        self.labels = tuple(labels)
        self.max_candidates = max(1, min(max_candidates, len(self.labels)))

    def recognize(self, sample: Any = None) -> list[RecognitionResult]:
        count = int(self.rng.integers(1, self.max_candidates + 1))
        picks = self.rng.choice(len(self.labels), size=count, replace=False)
        confidences = self.rng.uniform(MIN_CONFIDENCE, MAX_CONFIDENCE, size=count)
        return [
            RecognitionResult(self.labels[int(i)], float(c))
            for i, c in zip(picks, confidences)
        ]


def uniform_delay(
    low_ms: float,
    high_ms: float,
    rng: Optional[np.random.Generator] = None,
):
    """Build a delay callable drawing uniformly from [low_ms, high_ms)."""
    generator = _default_rng(rng)
    if high_ms <= low_ms:
        return lambda: float(low_ms)
    return lambda: float(generator.uniform(low_ms, high_ms))
