"""Environment and path configuration for Nanban.

Provides centralized configuration with sensible defaults.
All configuration is loaded from environment variables.

Usage:
    from packages.core import get_config

    config = get_config()
    print(f"Phrases file: {config.phrases_file}")
    print(f"Environment: {config.env}")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class NanbanConfig:
    """Application configuration.

    Immutable configuration object created from environment variables.

    Attributes:
        data_dir: Base data directory
        phrases_file: JSON file backing the phrasebook store
        env: Current environment (development/production/testing)
        log_level: Logging level
        debug: Debug mode enabled
        speech_language: Language tag passed to the audio output
        speech_pitch: Pitch multiplier for the audio output
        speech_rate: Rate multiplier for the audio output
        confidence_threshold: Candidates below this are shown as uncertain
        speech_delay_ms: Listening window of the placeholder speech model
        sign_delay_min_ms: Lower bound of the placeholder sign processing time
        sign_delay_max_ms: Upper bound of the placeholder sign processing time
        seed: Seed for the placeholder models (None = nondeterministic)
        api_host: API server host
        api_port: API server port
        cors_origins: Allowed CORS origins
    """

    # Paths
    data_dir: Path
    phrases_file: Path

    # Environment
    env: Environment
    log_level: LogLevel
    debug: bool

    # Audio output
    speech_language: str
    speech_pitch: float
    speech_rate: float

    # Recognition
    confidence_threshold: float
    speech_delay_ms: float
    sign_delay_min_ms: float
    sign_delay_max_ms: float
    seed: Optional[int]

    # API settings
    api_host: str
    api_port: int
    cors_origins: tuple[str, ...]

    def __post_init__(self) -> None:
        """Ensure the data directory exists in non-testing environments."""
        if self.env != Environment.TESTING:
            self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.env == Environment.TESTING


def _find_project_root() -> Path:
    """Find project root by looking for packages/ directory.

    Walks up from the current file's location to find the project root.
    Falls back to current working directory if not found.
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "packages").exists():
            return parent
    return Path.cwd()


def _get_env_path(var: str, default: Path) -> Path:
    """Get path from environment variable or use default.

    Relative paths are resolved against the project root.
    """
    value = os.environ.get(var)
    if value:
        path = Path(value)
        if not path.is_absolute():
            path = _find_project_root() / path
        return path
    return default


def _get_env_float(var: str, default: float) -> float:
    """Get a float from the environment, raising ConfigurationError if unparsable."""
    value = os.environ.get(var)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(var, value, "a number") from None


def _get_env_int(var: str, default: Optional[int]) -> Optional[int]:
    """Get an int from the environment, raising ConfigurationError if unparsable."""
    value = os.environ.get(var)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(var, value, "an integer") from None


@lru_cache(maxsize=1)
def get_config() -> NanbanConfig:
    """Get the application configuration (singleton).

    Configuration is loaded from environment variables:
    - NANBAN_DATA_DIR: Base data directory
    - NANBAN_PHRASES_FILE: Phrasebook storage file
    - NANBAN_ENV: Environment (development/production/testing)
    - NANBAN_LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)
    - NANBAN_DEBUG: Enable debug mode (1/true/yes)
    - NANBAN_SPEECH_LANGUAGE / NANBAN_SPEECH_PITCH / NANBAN_SPEECH_RATE
    - NANBAN_CONFIDENCE_THRESHOLD: Candidate confidence threshold (default: 0.7)
    - NANBAN_SPEECH_DELAY_MS: Placeholder listening window (default: 2000)
    - NANBAN_SIGN_DELAY_MIN_MS / NANBAN_SIGN_DELAY_MAX_MS (default: 500 / 2000)
    - NANBAN_SEED: Seed for placeholder recognizers
    - API_HOST: API server host (default: 0.0.0.0)
    - API_PORT: API server port (default: 8000)
    - API_CORS_ORIGINS: Comma-separated CORS origins (default: *)

    Returns:
        Immutable NanbanConfig instance

    Raises:
        ConfigurationError: If a numeric variable cannot be parsed
    """
    project_root = _find_project_root()

    env_str = os.environ.get("NANBAN_ENV", "development").lower()
    try:
        env = Environment(env_str)
    except ValueError:
        env = Environment.DEVELOPMENT

    log_str = os.environ.get("NANBAN_LOG_LEVEL", "INFO").upper()
    try:
        log_level = LogLevel(log_str)
    except ValueError:
        log_level = LogLevel.INFO

    debug_str = os.environ.get("NANBAN_DEBUG", "").lower()
    debug = debug_str in ("1", "true", "yes") or env == Environment.DEVELOPMENT

    data_dir = _get_env_path("NANBAN_DATA_DIR", project_root / "data")
    phrases_file = _get_env_path("NANBAN_PHRASES_FILE", data_dir / "phrases.json")

    sign_delay_min_ms = _get_env_float("NANBAN_SIGN_DELAY_MIN_MS", 500.0)
    sign_delay_max_ms = _get_env_float("NANBAN_SIGN_DELAY_MAX_MS", 2000.0)
    if sign_delay_max_ms < sign_delay_min_ms:
        raise ConfigurationError(
            "NANBAN_SIGN_DELAY_MAX_MS",
            str(sign_delay_max_ms),
            f">= NANBAN_SIGN_DELAY_MIN_MS ({sign_delay_min_ms})",
        )

    api_host = os.environ.get("API_HOST", "0.0.0.0")
    api_port = _get_env_int("API_PORT", 8000)
    cors_str = os.environ.get("API_CORS_ORIGINS", "*")
    cors_origins = tuple(s.strip() for s in cors_str.split(",") if s.strip())

    return NanbanConfig(
        data_dir=data_dir,
        phrases_file=phrases_file,
        env=env,
        log_level=log_level,
        debug=debug,
        speech_language=os.environ.get("NANBAN_SPEECH_LANGUAGE", "en-US"),
        speech_pitch=_get_env_float("NANBAN_SPEECH_PITCH", 1.0),
        speech_rate=_get_env_float("NANBAN_SPEECH_RATE", 0.8),
        confidence_threshold=_get_env_float("NANBAN_CONFIDENCE_THRESHOLD", 0.7),
        speech_delay_ms=_get_env_float("NANBAN_SPEECH_DELAY_MS", 2000.0),
        sign_delay_min_ms=sign_delay_min_ms,
        sign_delay_max_ms=sign_delay_max_ms,
        seed=_get_env_int("NANBAN_SEED", None),
        api_host=api_host,
        api_port=api_port,
        cors_origins=cors_origins,
    )


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing when environment variables change
    between test cases.
    """
    get_config.cache_clear()
