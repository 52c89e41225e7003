# Playback package - timed presentation of gloss sequences
"""
Turn a gloss sequence into a timed ATTACK / RELEASE / GAP schedule.

Example usage:
    from packages.playback import PlaybackScheduler, build_timeline

    for step in build_timeline(["HELLO", "YOU"]):
        print(step.offset_ms, step.phase.value, step.token)
"""

from .scheduler import (
    PlaybackPhase,
    PlaybackScheduler,
    PlaybackState,
    PlaybackTiming,
    TimelineStep,
    build_timeline,
)

__all__ = [
    "PlaybackScheduler",
    "PlaybackState",
    "PlaybackPhase",
    "PlaybackTiming",
    "TimelineStep",
    "build_timeline",
]
