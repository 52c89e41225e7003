"""Gloss playback scheduling.

Presents a gloss sequence one token at a time. Each token goes through
three timed phases before the next one starts:

    ATTACK (300ms) -> RELEASE (200ms) -> GAP (500ms)

After the last token's GAP the scheduler reports DONE and immediately
returns to IDLE. Listeners receive every state snapshot in order, so a
renderer (avatar, terminal, web client) only has to draw what it is told.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional

from packages.core.clock import AsyncioClock
from packages.core.protocols import Clock, TimerHandle

logger = logging.getLogger(__name__)


class PlaybackPhase(Enum):
    """Phase of the token currently presented."""
    IDLE = "idle"
    ATTACK = "attack"    # Sign moving in
    RELEASE = "release"  # Sign moving out
    GAP = "gap"          # Pause before the next sign
    DONE = "done"        # Sequence finished


@dataclass(frozen=True)
class PlaybackState:
    """Immutable snapshot of the scheduler."""
    tokens: tuple[str, ...] = ()
    cursor: int = 0
    phase: PlaybackPhase = PlaybackPhase.IDLE

    @property
    def is_playing(self) -> bool:
        return self.phase not in (PlaybackPhase.IDLE, PlaybackPhase.DONE)

    @property
    def current_token(self) -> Optional[str]:
        """Token being presented, or None when not playing."""
        if not self.is_playing:
            return None
        return self.tokens[self.cursor]

    @property
    def progress(self) -> str:
        """Human readable position, e.g. "2 / 3"."""
        if not self.is_playing:
            return "Ready to play"
        return f"{self.cursor + 1} / {len(self.tokens)}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "tokens": list(self.tokens),
            "cursor": self.cursor,
            "phase": self.phase.value,
            "current_token": self.current_token,
        }


@dataclass(frozen=True)
class PlaybackTiming:
    """Phase durations in milliseconds."""
    attack_ms: float = 300.0
    release_ms: float = 200.0
    gap_ms: float = 500.0

    @property
    def token_ms(self) -> float:
        """Time spent on one token."""
        return self.attack_ms + self.release_ms + self.gap_ms

    def at_speed(self, speed: float) -> "PlaybackTiming":
        """Scale every phase; speed 2.0 plays twice as fast.

        Raises:
            ValueError: If speed is not positive
        """
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        return PlaybackTiming(
            attack_ms=self.attack_ms / speed,
            release_ms=self.release_ms / speed,
            gap_ms=self.gap_ms / speed,
        )

    def duration(self, phase: PlaybackPhase) -> float:
        """Duration of a timed phase (0 for IDLE and DONE)."""
        return {
            PlaybackPhase.ATTACK: self.attack_ms,
            PlaybackPhase.RELEASE: self.release_ms,
            PlaybackPhase.GAP: self.gap_ms,
        }.get(phase, 0.0)


@dataclass(frozen=True)
class TimelineStep:
    """One state change in a precomputed schedule."""
    offset_ms: float
    phase: PlaybackPhase
    cursor: int
    token: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "offset_ms": self.offset_ms,
            "phase": self.phase.value,
            "cursor": self.cursor,
            "token": self.token,
        }


def build_timeline(
    tokens: Iterable[str],
    timing: Optional[PlaybackTiming] = None,
) -> list[TimelineStep]:
    """Compute the full schedule a scheduler would emit for tokens.

    Args:
        tokens: Gloss sequence
        timing: Phase durations (defaults to 300/200/500ms)

    Returns:
        Steps in emission order; empty for an empty sequence
    """
    timing = timing or PlaybackTiming()
    tokens = list(tokens)
    if not tokens:
        return []

    steps = []
    offset = 0.0
    for cursor, token in enumerate(tokens):
        for phase in (PlaybackPhase.ATTACK, PlaybackPhase.RELEASE, PlaybackPhase.GAP):
            steps.append(TimelineStep(offset, phase, cursor, token))
            offset += timing.duration(phase)

    steps.append(TimelineStep(offset, PlaybackPhase.DONE, len(tokens) - 1))
    steps.append(TimelineStep(offset, PlaybackPhase.IDLE, 0))
    return steps


Listener = Callable[[PlaybackState], None]


class PlaybackScheduler:
    """Drives PlaybackState through the phases of a gloss sequence.

    Example:
        scheduler = PlaybackScheduler(clock=ManualClock())
        scheduler.subscribe(lambda state: print(state.phase, state.current_token))
        scheduler.play(["HELLO", "HOW", "YOU"])
    """

    def __init__(self, clock: Optional[Clock] = None, timing: Optional[PlaybackTiming] = None):
        self.clock = clock if clock is not None else AsyncioClock()
        self.timing = timing or PlaybackTiming()
        self._state = PlaybackState()
        self._timer: Optional[TimerHandle] = None
        self._listeners: list[Listener] = []

    @property
    def state(self) -> PlaybackState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state snapshots.

        Returns:
            Function that unsubscribes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def play(self, tokens: Iterable[str]) -> bool:
        """Start presenting tokens, superseding any current run.

        Returns:
            False if tokens is empty (nothing happens)
        """
        tokens = tuple(tokens)
        if not tokens:
            return False
        self._cancel_timer()
        logger.debug("Playing %d tokens", len(tokens))
        self._enter(PlaybackState(tokens, 0, PlaybackPhase.ATTACK))
        return True

    def stop(self) -> None:
        """Cancel the current run and return to IDLE."""
        self._cancel_timer()
        if self._state.phase is not PlaybackPhase.IDLE:
            self._enter(PlaybackState())

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _enter(self, state: PlaybackState) -> None:
        self._state = state
        self._emit(state)
        if self._state is not state:
            # a listener started or stopped playback
            return

        if state.phase is PlaybackPhase.DONE:
            self._enter(PlaybackState())
        elif state.is_playing:
            self._timer = self.clock.call_later(self.timing.duration(state.phase), self._advance)

    def _advance(self) -> None:
        self._timer = None
        state = self._state
        if state.phase is PlaybackPhase.ATTACK:
            self._enter(replace(state, phase=PlaybackPhase.RELEASE))
        elif state.phase is PlaybackPhase.RELEASE:
            self._enter(replace(state, phase=PlaybackPhase.GAP))
        elif state.phase is PlaybackPhase.GAP:
            if state.cursor + 1 < len(state.tokens):
                self._enter(replace(state, cursor=state.cursor + 1, phase=PlaybackPhase.ATTACK))
            else:
                self._enter(replace(state, phase=PlaybackPhase.DONE))

    def _emit(self, state: PlaybackState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Playback listener failed")
