"""Data models for the phrasebook."""

from dataclasses import dataclass, field

from packages.core.utils import now_iso


@dataclass
class Phrase:
    """A saved phrase with its gloss."""
    id: str
    text: str
    gloss: list[str] = field(default_factory=list)
    category: str = "Custom"
    is_favorite: bool = False
    created_at: str = field(default_factory=now_iso)

    def to_dict(self) -> dict:
        """Convert to the camelCase record used in storage."""
        return {
            "id": self.id,
            "text": self.text,
            "gloss": list(self.gloss),
            "category": self.category,
            "isFavorite": self.is_favorite,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Phrase":
        """Create Phrase from a stored record.

        Raises:
            KeyError: If id or text is missing
            TypeError: If text or a gloss token is not a string
        """
        text = data["text"]
        gloss = list(data.get("gloss", []))
        if not isinstance(text, str) or not all(isinstance(t, str) for t in gloss):
            raise TypeError("phrase text and gloss tokens must be strings")
        return cls(
            id=str(data["id"]),
            text=text,
            gloss=gloss,
            category=data.get("category", "Custom"),
            is_favorite=bool(data.get("isFavorite", False)),
            created_at=data.get("createdAt") or now_iso(),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on text or any gloss token."""
        needle = query.lower()
        return needle in self.text.lower() or any(needle in token.lower() for token in self.gloss)
