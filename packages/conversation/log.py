"""Conversation log.

One timeline for both directions of a conversation: speech entries carry
the gloss they were translated to, sign entries carry the ranked
candidates they were recognized from.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Iterator, Optional

from packages.core.types import EntryKind, RecognitionResult
from packages.core.utils import now_utc


@dataclass(frozen=True)
class ConversationEntry:
    """One line of the conversation."""
    id: int
    kind: EntryKind
    text: str
    gloss: Optional[tuple[str, ...]] = None
    candidates: Optional[tuple[RecognitionResult, ...]] = None
    timestamp: datetime = None

    def __post_init__(self) -> None:
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", now_utc())
        if self.gloss is not None:
            object.__setattr__(self, "gloss", tuple(self.gloss))
        if self.candidates is not None:
            object.__setattr__(self, "candidates", tuple(self.candidates))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "text": self.text,
            "gloss": list(self.gloss) if self.gloss is not None else None,
            "candidates": [c.to_dict() for c in self.candidates] if self.candidates is not None else None,
            "timestamp": self.timestamp.isoformat(),
        }


class ConversationLog:
    """Append-only list of entries with ids from a monotonic counter.

    Ids keep counting after clear() so an id never refers to two entries.
    """

    def __init__(self, now: Callable[[], datetime] = now_utc):
        self._entries: list[ConversationEntry] = []
        self._ids = itertools.count(1)
        self._now = now

    def next_id(self) -> int:
        """Reserve the next entry id."""
        return next(self._ids)

    def append(self, entry: ConversationEntry) -> None:
        self._entries.append(entry)

    def record(
        self,
        kind: EntryKind,
        text: str,
        gloss: Optional[Iterable[str]] = None,
        candidates: Optional[Iterable[RecognitionResult]] = None,
    ) -> ConversationEntry:
        """Create an entry with the next id and current time, and append it."""
        entry = ConversationEntry(
            id=self.next_id(),
            kind=kind,
            text=text,
            gloss=tuple(gloss) if gloss is not None else None,
            candidates=tuple(candidates) if candidates is not None else None,
            timestamp=self._now(),
        )
        self.append(entry)
        return entry

    def get(self, entry_id: int) -> Optional[ConversationEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def clear(self) -> None:
        self._entries.clear()

    def all(self) -> list[ConversationEntry]:
        """Entries oldest first."""
        return list(self._entries)

    def recent(self, limit: Optional[int] = None) -> list[ConversationEntry]:
        """Entries newest first, optionally only the latest `limit`."""
        entries = self._entries[::-1]
        return entries if limit is None else entries[:max(0, limit)]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversationEntry]:
        return iter(list(self._entries))
