"""Recognition sessions.

A session owns at most one recognition attempt at a time:

    session = SignRecognitionSession(rng=np.random.default_rng(7))
    results = await session.start(frame)   # list[RecognitionResult] or None

start() waits a recognition delay on the injected clock, then runs the
model. It returns None when the session is already busy, when stop() is
called during the attempt, or when the model fails. It never raises.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, Generic, Optional, TypeVar, Union

import numpy as np

from packages.core.clock import AsyncioClock
from packages.core.protocols import Clock, PerceptionSource, RecognitionModel, TimerHandle
from packages.core.types import RecognitionResult

from .keypoints import KeypointFrame, PlaceholderPerception
from .models import PlaceholderSignModel, PlaceholderSpeechModel, uniform_delay

logger = logging.getLogger(__name__)

T = TypeVar("T")

Delay = Union[float, Callable[[], float]]

SPEECH_DELAY_MS = 2000.0
SIGN_DELAY_MIN_MS = 500.0
SIGN_DELAY_MAX_MS = 2000.0


class RecognitionSession(Generic[T]):
    """Single-flight wrapper around a recognition model.

    Args:
        model: Object with recognize(sample), sync or async
        clock: Timer source (defaults to the running asyncio loop)
        delay_ms: Fixed delay or a callable returning one per attempt
    """

    modality = "recognition"

    def __init__(
        self,
        model: RecognitionModel[T],
        clock: Optional[Clock] = None,
        delay_ms: Delay = 0.0,
    ):
        self.model = model
        self.clock = clock if clock is not None else AsyncioClock()
        self._delay = delay_ms
        self._active = False
        self._attempt = 0
        self._timer: Optional[TimerHandle] = None
        self._waiter: Optional[asyncio.Future] = None

    def is_active(self) -> bool:
        """True while an attempt is outstanding."""
        return self._active

    async def start(self, sample: Any = None) -> Optional[T]:
        """Run one recognition attempt.

        Returns:
            The model result, or None if busy, stopped or failed
        """
        if self._active:
            logger.debug("%s session busy, ignoring start", self.modality)
            return None

        self._active = True
        self._attempt += 1
        attempt = self._attempt
        try:
            if not await self._wait(self._next_delay()):
                return None

            result = self.model.recognize(sample)
            if inspect.isawaitable(result):
                result = await result

            if attempt != self._attempt:
                logger.debug("%s attempt %d stopped, discarding result", self.modality, attempt)
                return None
            return self._finish(result)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.warning("%s recognition failed", self.modality.capitalize(), exc_info=True)
            return None
        finally:
            if attempt == self._attempt:
                self._reset()

    def stop(self) -> None:
        """Abandon the current attempt. Its start() returns None."""
        if not self._active:
            return
        self._attempt += 1
        waiter = self._waiter
        self._reset()
        if waiter is not None and not waiter.done():
            waiter.set_result(False)
        logger.debug("%s session stopped", self.modality)

    def _next_delay(self) -> float:
        delay = self._delay() if callable(self._delay) else self._delay
        return max(0.0, float(delay))

    async def _wait(self, delay_ms: float) -> bool:
        """Wait on the clock. Resolves False if stop() intervenes."""
        waiter = asyncio.get_running_loop().create_future()

        def _elapsed() -> None:
            if not waiter.done():
                waiter.set_result(True)

        self._waiter = waiter
        self._timer = self.clock.call_later(delay_ms, _elapsed)
        return await waiter

    def _reset(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._waiter = None
        self._active = False

    def _finish(self, result: Any) -> Optional[T]:
        return result


class SpeechRecognitionSession(RecognitionSession[str]):
    """Speech-to-text session. Returns the recognized sentence."""

    modality = "speech"

    def __init__(
        self,
        model: Optional[RecognitionModel[str]] = None,
        clock: Optional[Clock] = None,
        delay_ms: Delay = SPEECH_DELAY_MS,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(model or PlaceholderSpeechModel(rng), clock, delay_ms)

    def _finish(self, result: Any) -> Optional[str]:
        if result is None:
            return None
        return str(result)


class SignRecognitionSession(RecognitionSession[list[RecognitionResult]]):
    """Sign classification session.

    Returns candidates sorted by descending confidence; ties keep model order.
    """

    modality = "sign"

    def __init__(
        self,
        model: Optional[RecognitionModel[list[RecognitionResult]]] = None,
        clock: Optional[Clock] = None,
        delay_ms: Optional[Delay] = None,
        rng: Optional[np.random.Generator] = None,
        perception: Optional[PerceptionSource] = None,
    ):
        rng = rng if rng is not None else np.random.default_rng()
        if delay_ms is None:
            delay_ms = uniform_delay(SIGN_DELAY_MIN_MS, SIGN_DELAY_MAX_MS, rng)
        super().__init__(model or PlaceholderSignModel(rng), clock, delay_ms)
        self.perception = perception or PlaceholderPerception(rng)

    def extract_keypoints(self, frame: Any = None) -> KeypointFrame:
        """Extract landmarks from a camera frame via the perception source."""
        return self.perception.extract(frame)

    def _finish(self, result: Any) -> Optional[list[RecognitionResult]]:
        if result is None:
            return None
        return sorted(result, key=lambda r: r.confidence, reverse=True)
