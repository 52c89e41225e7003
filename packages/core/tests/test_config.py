"""Tests for configuration management."""

import tempfile
from pathlib import Path

import pytest

from packages.core.config import (
    Environment,
    LogLevel,
    NanbanConfig,
    clear_config_cache,
    get_config,
)
from packages.core.errors import ConfigurationError


ENV_VARS = [
    "NANBAN_DATA_DIR",
    "NANBAN_PHRASES_FILE",
    "NANBAN_ENV",
    "NANBAN_LOG_LEVEL",
    "NANBAN_DEBUG",
    "NANBAN_SPEECH_LANGUAGE",
    "NANBAN_SPEECH_PITCH",
    "NANBAN_SPEECH_RATE",
    "NANBAN_CONFIDENCE_THRESHOLD",
    "NANBAN_SPEECH_DELAY_MS",
    "NANBAN_SIGN_DELAY_MIN_MS",
    "NANBAN_SIGN_DELAY_MAX_MS",
    "NANBAN_SEED",
    "API_HOST",
    "API_PORT",
    "API_CORS_ORIGINS",
]


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear config cache before and after each test."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Nanban env vars and point the data dir at a temp directory."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("NANBAN_DATA_DIR", str(tmp_path / "data"))
    return monkeypatch


def make_config(tmpdir: str, **overrides) -> NanbanConfig:
    """Build a config with test defaults."""
    args = dict(
        data_dir=Path(tmpdir) / "data",
        phrases_file=Path(tmpdir) / "data" / "phrases.json",
        env=Environment.TESTING,
        log_level=LogLevel.INFO,
        debug=False,
        speech_language="en-US",
        speech_pitch=1.0,
        speech_rate=0.8,
        confidence_threshold=0.7,
        speech_delay_ms=2000.0,
        sign_delay_min_ms=500.0,
        sign_delay_max_ms=2000.0,
        seed=None,
        api_host="localhost",
        api_port=8080,
        cors_origins=("http://localhost:3000",),
    )
    args.update(overrides)
    return NanbanConfig(**args)


class TestEnvironment:
    """Tests for Environment enum."""

    def test_values(self):
        """Test enum values."""
        assert Environment.DEVELOPMENT.value == "development"
        assert Environment.PRODUCTION.value == "production"
        assert Environment.TESTING.value == "testing"

    def test_from_string(self):
        """Test creating from string."""
        assert Environment("development") == Environment.DEVELOPMENT
        assert Environment("production") == Environment.PRODUCTION


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_values(self):
        """Test enum values."""
        assert LogLevel.DEBUG.value == "DEBUG"
        assert LogLevel.INFO.value == "INFO"
        assert LogLevel.WARNING.value == "WARNING"
        assert LogLevel.ERROR.value == "ERROR"


class TestNanbanConfig:
    """Tests for NanbanConfig dataclass."""

    def test_create_config(self):
        """Test creating a config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = make_config(tmpdir)

            assert config.data_dir == Path(tmpdir) / "data"
            assert config.env == Environment.TESTING
            assert config.api_port == 8080
            assert config.speech_rate == 0.8

    def test_testing_env_does_not_create_dirs(self):
        """Test that the testing environment leaves the filesystem alone."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = make_config(tmpdir)

            assert not config.data_dir.exists()

    def test_non_testing_env_creates_data_dir(self):
        """Test that other environments create the data directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = make_config(tmpdir, env=Environment.PRODUCTION)

            assert config.data_dir.is_dir()

    def test_config_is_frozen(self):
        """Test that config is immutable."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = make_config(tmpdir)

            with pytest.raises(Exception):  # FrozenInstanceError
                config.api_port = 9000

    def test_environment_properties(self):
        """Test environment check properties."""
        with tempfile.TemporaryDirectory() as tmpdir:
            dev_config = make_config(tmpdir, env=Environment.DEVELOPMENT)
            prod_config = make_config(tmpdir, env=Environment.PRODUCTION)
            test_config = make_config(tmpdir, env=Environment.TESTING)

            assert dev_config.is_development is True
            assert dev_config.is_production is False
            assert dev_config.is_testing is False

            assert prod_config.is_development is False
            assert prod_config.is_production is True

            assert test_config.is_testing is True


class TestGetConfig:
    """Tests for get_config function."""

    def test_get_config_default(self, clean_env):
        """Test get_config with defaults."""
        config = get_config()

        assert config.env == Environment.DEVELOPMENT
        assert config.log_level == LogLevel.INFO
        assert config.debug is True  # Default in development
        assert config.speech_language == "en-US"
        assert config.speech_pitch == 1.0
        assert config.speech_rate == 0.8
        assert config.confidence_threshold == 0.7
        assert config.speech_delay_ms == 2000.0
        assert config.sign_delay_min_ms == 500.0
        assert config.sign_delay_max_ms == 2000.0
        assert config.seed is None
        assert config.api_host == "0.0.0.0"
        assert config.api_port == 8000
        assert config.cors_origins == ("*",)

    def test_phrases_file_defaults_under_data_dir(self, clean_env):
        """Test that the phrases file lives in the data directory."""
        config = get_config()

        assert config.phrases_file == config.data_dir / "phrases.json"

    def test_get_config_singleton(self, clean_env):
        """Test that get_config returns same instance."""
        config1 = get_config()
        config2 = get_config()

        assert config1 is config2

    def test_clear_config_cache(self, clean_env):
        """Test clearing the config cache."""
        config1 = get_config()
        clear_config_cache()
        config2 = get_config()

        assert config1 is not config2
        assert config1.env == config2.env

    def test_env_override(self, clean_env):
        """Test environment variable override."""
        clean_env.setenv("NANBAN_ENV", "production")

        config = get_config()

        assert config.env == Environment.PRODUCTION
        assert config.debug is False

    def test_log_level_override(self, clean_env):
        """Test log level override."""
        clean_env.setenv("NANBAN_LOG_LEVEL", "debug")

        config = get_config()

        assert config.log_level == LogLevel.DEBUG

    def test_debug_override(self, clean_env):
        """Test debug mode override."""
        clean_env.setenv("NANBAN_ENV", "production")
        clean_env.setenv("NANBAN_DEBUG", "yes")

        config = get_config()

        assert config.debug is True

    def test_recognition_overrides(self, clean_env):
        """Test recognition timing and seed overrides."""
        clean_env.setenv("NANBAN_SPEECH_DELAY_MS", "0")
        clean_env.setenv("NANBAN_SIGN_DELAY_MIN_MS", "10")
        clean_env.setenv("NANBAN_SIGN_DELAY_MAX_MS", "20")
        clean_env.setenv("NANBAN_SEED", "42")
        clean_env.setenv("NANBAN_CONFIDENCE_THRESHOLD", "0.85")

        config = get_config()

        assert config.speech_delay_ms == 0.0
        assert config.sign_delay_min_ms == 10.0
        assert config.sign_delay_max_ms == 20.0
        assert config.seed == 42
        assert config.confidence_threshold == 0.85

    def test_api_settings_override(self, clean_env):
        """Test API settings override."""
        clean_env.setenv("API_HOST", "127.0.0.1")
        clean_env.setenv("API_PORT", "9000")
        clean_env.setenv("API_CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

        config = get_config()

        assert config.api_host == "127.0.0.1"
        assert config.api_port == 9000
        assert config.cors_origins == ("http://localhost:3000", "http://localhost:3001")

    def test_path_override(self, clean_env, tmp_path):
        """Test path override with env vars."""
        phrases = tmp_path / "custom" / "saved.json"
        clean_env.setenv("NANBAN_PHRASES_FILE", str(phrases))

        config = get_config()

        assert config.phrases_file == phrases

    def test_invalid_env_fallback(self, clean_env):
        """Test invalid environment falls back to development."""
        clean_env.setenv("NANBAN_ENV", "invalid_env")

        config = get_config()

        assert config.env == Environment.DEVELOPMENT

    def test_invalid_log_level_fallback(self, clean_env):
        """Test invalid log level falls back to INFO."""
        clean_env.setenv("NANBAN_LOG_LEVEL", "INVALID")

        config = get_config()

        assert config.log_level == LogLevel.INFO

    def test_invalid_number_raises(self, clean_env):
        """Test unparsable numbers raise ConfigurationError."""
        clean_env.setenv("API_PORT", "eighty")

        with pytest.raises(ConfigurationError) as exc_info:
            get_config()

        assert exc_info.value.config_key == "API_PORT"

    def test_inverted_sign_delay_range_raises(self, clean_env):
        """Test max sign delay below min raises ConfigurationError."""
        clean_env.setenv("NANBAN_SIGN_DELAY_MIN_MS", "900")
        clean_env.setenv("NANBAN_SIGN_DELAY_MAX_MS", "100")

        with pytest.raises(ConfigurationError):
            get_config()
