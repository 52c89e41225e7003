"""Audio and haptic output adapters."""

from collections import deque
from typing import Optional

from rich.console import Console

from packages.core.types import SpeechOptions

# Recorded utterances and events kept by the null adapters
DEFAULT_HISTORY = 100


class NullSpeechOutput:
    """Records the most recent utterances instead of speaking them."""

    def __init__(self, history: int = DEFAULT_HISTORY):
        self.spoken: deque[tuple[str, SpeechOptions]] = deque(maxlen=history)

    def speak(self, text: str, options: SpeechOptions) -> None:
        self.spoken.append((text, options))


class ConsoleSpeechOutput:
    """Prints utterances to a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def speak(self, text: str, options: SpeechOptions) -> None:
        self.console.print(f"[cyan]Speaking:[/] {text} [dim]({options.language}, rate {options.rate})[/]")


class NullFeedback:
    """Records the most recent feedback events."""

    def __init__(self, history: int = DEFAULT_HISTORY):
        self.events: deque[str] = deque(maxlen=history)

    def trigger(self, event: str) -> None:
        self.events.append(event)
