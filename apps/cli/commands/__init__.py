"""CLI commands."""

from .phrases import app as phrases_app
from .playback import play, run_playback
from .recognize import listen, recognize
from .translate import glosses, timeline

__all__ = [
    "glosses",
    "timeline",
    "play",
    "run_playback",
    "listen",
    "recognize",
    "phrases_app",
]
