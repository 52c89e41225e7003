"""Core package - shared utilities, types, and configuration.

This package provides common functionality used across all Nanban packages:
- Configuration management
- Shared type definitions
- Protocol interfaces for external collaborators
- Clocks and cancellable timers
- Custom exceptions
- Logging setup and utility functions

Example usage:
    from packages.core import get_config, ManualClock, RecognitionResult

    config = get_config()
    print(f"Phrases file: {config.phrases_file}")
"""

# Configuration
from .config import (
    Environment,
    LogLevel,
    NanbanConfig,
    clear_config_cache,
    get_config,
)

# Types
from .types import (
    EntryKind,
    RecognitionResult,
    SpeechOptions,
)

# Protocols
from .protocols import (
    Clock,
    FeedbackSignal,
    KeyValueStore,
    PerceptionSource,
    RecognitionModel,
    SpeechOutput,
    TimerHandle,
)

# Clocks
from .clock import (
    AsyncioClock,
    ManualClock,
    ManualTimer,
)

# Errors
from .errors import (
    ConfigurationError,
    InvalidKeypointsError,
    KeypointError,
    NanbanError,
    PersistenceUnavailable,
    PhrasebookError,
    PhraseNotFoundError,
    RecognitionError,
    RecognitionFailure,
)

# Logging
from .logs import configure_logging

# Utilities
from .utils import (
    ensure_dir,
    format_duration,
    normalize_gloss,
    normalize_phrase,
    now_iso,
    now_utc,
    parse_iso,
    safe_json_load,
    safe_json_save,
    split_words,
    strip_punctuation,
)

__all__ = [
    # Config
    "Environment",
    "LogLevel",
    "NanbanConfig",
    "get_config",
    "clear_config_cache",
    # Types
    "EntryKind",
    "RecognitionResult",
    "SpeechOptions",
    # Protocols
    "Clock",
    "TimerHandle",
    "RecognitionModel",
    "PerceptionSource",
    "SpeechOutput",
    "FeedbackSignal",
    "KeyValueStore",
    # Clocks
    "AsyncioClock",
    "ManualClock",
    "ManualTimer",
    # Errors
    "NanbanError",
    "ConfigurationError",
    "RecognitionError",
    "RecognitionFailure",
    "KeypointError",
    "InvalidKeypointsError",
    "PhrasebookError",
    "PhraseNotFoundError",
    "PersistenceUnavailable",
    # Logging
    "configure_logging",
    # Utils
    "normalize_phrase",
    "normalize_gloss",
    "strip_punctuation",
    "split_words",
    "now_utc",
    "now_iso",
    "parse_iso",
    "format_duration",
    "ensure_dir",
    "safe_json_load",
    "safe_json_save",
]
