"""CLI utilities."""

from .config import get_controller, get_phrasebook, get_settings, get_translator
from .display import (
    console,
    print_candidates,
    print_entry,
    print_phrase,
    print_phrase_table,
    print_playback_state,
    print_timeline,
    print_translation,
)

__all__ = [
    "get_settings",
    "get_translator",
    "get_phrasebook",
    "get_controller",
    "console",
    "print_translation",
    "print_timeline",
    "print_playback_state",
    "print_candidates",
    "print_entry",
    "print_phrase",
    "print_phrase_table",
]
