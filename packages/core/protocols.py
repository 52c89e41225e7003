"""Protocol definitions for Nanban interfaces.

Protocols define interfaces for duck typing, allowing packages to
depend on behaviors rather than concrete implementations. The external
collaborators of the core (perception, audio output, haptics, phrase
persistence, recognition models, timers) are all described here.

Usage:
    from packages.core import RecognitionModel

    class MyClassifier:
        def recognize(self, sample):
            return [RecognitionResult("HELLO", 0.93)]

    session = SignRecognitionSession(model=MyClassifier())
"""

from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar, Union, runtime_checkable

from .types import SpeechOptions

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...

    def cancelled(self) -> bool:
        """True if cancel() was called."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Time source and timer factory.

    Injected into recognition sessions and the playback scheduler so that
    tests can drive time explicitly instead of waiting on the wall clock.
    All durations are in milliseconds.
    """

    def now_ms(self) -> float:
        """Current time in milliseconds (monotonic, arbitrary origin)."""
        ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule callback to run once after delay_ms.

        Returns:
            Handle that cancels the callback
        """
        ...


@runtime_checkable
class RecognitionModel(Protocol[T_co]):
    """A recognizer that turns an input sample into a result.

    The speech variant returns ``Optional[str]``; the sign variant returns
    a list of RecognitionResult. Implementations may be synchronous or
    return an awaitable. Raising RecognitionFailure (or any exception)
    signals a transient failure.
    """

    def recognize(self, sample: Any) -> Union[T_co, Awaitable[T_co]]:
        """Recognize a sample (audio features or a KeypointFrame)."""
        ...


@runtime_checkable
class PerceptionSource(Protocol):
    """Turns a captured camera frame into landmark keypoints."""

    def extract(self, frame: Any) -> Any:
        """Extract keypoints from a frame.

        Returns:
            KeypointFrame with hand, pose and face landmarks
        """
        ...


@runtime_checkable
class SpeechOutput(Protocol):
    """Text-to-speech output. Fire-and-forget."""

    def speak(self, text: str, options: SpeechOptions) -> None:
        """Read text aloud."""
        ...


@runtime_checkable
class FeedbackSignal(Protocol):
    """Haptic/UI feedback trigger. Fire-and-forget."""

    def trigger(self, event: str) -> None:
        """Emit feedback for a user action (e.g. "listen", "recognize")."""
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value storage used for phrase persistence."""

    def get(self, key: str) -> Optional[str]:
        """Read a value.

        Returns:
            Stored string or None if the key is absent

        Raises:
            PersistenceUnavailable: If the storage cannot be read
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Write a value.

        Raises:
            PersistenceUnavailable: If the storage cannot be written
        """
        ...

