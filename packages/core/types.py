"""Shared type definitions for Nanban.

Contains canonical type definitions used across packages.
Domain-specific types should remain in their respective packages.

Core Types (shared across packages):
- EntryKind: Which direction a conversation entry came from
- RecognitionResult: One confidence-scored sign candidate
- SpeechOptions: Voice parameters handed to the audio output

Domain-Specific Types (remain in packages):
- translation.GlossTranslation: Translator output with match details
- recognition.KeypointFrame: Hand/pose/face landmark arrays
- conversation.ConversationEntry: One line of the conversation timeline
- playback.PlaybackState: Snapshot of the gloss presenter
- phrasebook.Phrase: A saved phrase record
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ============ Enums ============


class EntryKind(Enum):
    """Direction of a conversation entry.

    SPEECH entries come from the speech session or typed text and carry a
    gloss. SIGN entries come from the sign session and carry candidates.
    """

    SPEECH = "speech"
    SIGN = "sign"


# ============ Dataclasses ============


@dataclass(frozen=True)
class RecognitionResult:
    """A labeled, confidence-scored recognition hypothesis.

    Confidence is clamped to [0, 1] on construction.
    """

    label: str
    confidence: float

    def __post_init__(self) -> None:
        # frozen dataclass, so go through object.__setattr__
        object.__setattr__(self, "confidence", min(1.0, max(0.0, float(self.confidence))))

    @property
    def percent(self) -> int:
        """Confidence as a rounded percentage."""
        return round(self.confidence * 100)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"label": self.label, "confidence": self.confidence}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecognitionResult":
        """Create from dictionary."""
        return cls(
            label=data.get("label", ""),
            confidence=data.get("confidence", 0.0),
        )


@dataclass(frozen=True)
class SpeechOptions:
    """Voice parameters for the audio output."""

    language: str = "en-US"
    pitch: float = 1.0
    rate: float = 0.8

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"language": self.language, "pitch": self.pitch, "rate": self.rate}
