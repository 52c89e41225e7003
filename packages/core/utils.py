"""Common utility functions for Nanban.

Provides helper functions used across multiple packages.
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


# ============ String Utilities ============


def normalize_phrase(phrase: str) -> str:
    """Normalize a phrase to its dictionary key form.

    Lowercases and strips leading/trailing whitespace. Internal
    whitespace and punctuation are kept.

    Examples:
        >>> normalize_phrase("  Thank You ")
        'thank you'
    """
    return phrase.lower().strip()


def normalize_gloss(gloss: str) -> str:
    """Normalize a gloss to canonical form.

    - Converts to uppercase
    - Removes leading/trailing whitespace
    - Replaces internal whitespace with hyphens

    Examples:
        >>> normalize_gloss("hello")
        'HELLO'
        >>> normalize_gloss("thank you")
        'THANK-YOU'
    """
    gloss = gloss.strip().upper()
    gloss = re.sub(r"\s+", "-", gloss)
    return gloss


def strip_punctuation(text: str) -> str:
    """Remove every character that is neither a word character nor whitespace.

    Examples:
        >>> strip_punctuation("what's up?!")
        'whats up'
    """
    return _PUNCTUATION_RE.sub("", text)


def split_words(text: str) -> list[str]:
    """Strip punctuation and split on whitespace, dropping empty words."""
    return [word for word in strip_punctuation(text).split() if word]


# ============ Time Utilities ============


def now_utc() -> datetime:
    """Get the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Get current time in ISO format (UTC).

    Returns:
        ISO formatted datetime string with Z suffix
    """
    return now_utc().strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_iso(iso_str: str) -> datetime:
    """Parse ISO format datetime string.

    Returns:
        datetime object (timezone-aware if Z suffix present)
    """
    if iso_str.endswith("Z"):
        iso_str = iso_str[:-1] + "+00:00"
    return datetime.fromisoformat(iso_str)


def format_duration(ms: float) -> str:
    """Format milliseconds as human-readable duration.

    Returns:
        Formatted string (e.g., "1.5s", "2m 30s")
    """
    seconds = ms / 1000
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    remaining_seconds = seconds % 60
    return f"{minutes}m {remaining_seconds:.0f}s"


# ============ File Utilities ============


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, creating if necessary.

    Returns:
        The path (for chaining)
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_json_load(path: Path, default: T | None = None) -> Any:
    """Safely load JSON file, returning default on error.

    Args:
        path: Path to JSON file
        default: Value to return if file doesn't exist or is invalid

    Returns:
        Parsed JSON or default value
    """
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return default


def safe_json_save(path: Path, data: Any, indent: int = 2) -> bool:
    """Safely save data as JSON.

    Creates parent directories if needed.

    Returns:
        True if successful, False otherwise
    """
    try:
        ensure_dir(path.parent)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
        return True
    except (OSError, TypeError):
        return False
