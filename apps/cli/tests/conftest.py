"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from packages.conversation import ConsoleSpeechOutput, ConversationController
from packages.core import RecognitionResult, clear_config_cache
from packages.phrasebook import MemoryStore, Phrasebook
from packages.recognition import SignRecognitionSession, SpeechRecognitionSession
from packages.translation import GlossTranslator

from apps.cli.utils import config as cli_config
from apps.cli.utils.display import console


class FixedModel:
    """Recognizer that always returns the same result."""

    def __init__(self, result):
        self.result = result
        self.samples = []

    def recognize(self, sample):
        self.samples.append(sample)
        return self.result


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep configuration and cached objects out of the real data directory."""
    monkeypatch.setenv("NANBAN_ENV", "testing")
    monkeypatch.setenv("NANBAN_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("NANBAN_PHRASES_FILE", str(tmp_path / "phrases.json"))
    # tables wrap at the default 80 columns
    monkeypatch.setattr(console, "width", 200)
    clear_config_cache()
    cli_config.get_translator.cache_clear()
    cli_config.get_phrasebook.cache_clear()
    yield tmp_path
    clear_config_cache()
    cli_config.get_translator.cache_clear()
    cli_config.get_phrasebook.cache_clear()


@pytest.fixture
def cli_runner():
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def translator():
    """Create a translator with the built-in dictionary."""
    return GlossTranslator()


@pytest.fixture
def phrasebook():
    """Create an in-memory phrasebook seeded with the default phrases."""
    book = Phrasebook(MemoryStore())
    book.load()
    return book


@pytest.fixture
def sign_model():
    """Create a sign model with one confident and one weak candidate."""
    return FixedModel([
        RecognitionResult("HELP", 0.65),
        RecognitionResult("HELLO", 0.93),
    ])


@pytest.fixture
def controller(translator, sign_model):
    """Create a controller with fixed models and no recognition delay."""
    return ConversationController(
        translator=translator,
        speech_session=SpeechRecognitionSession(model=FixedModel("thank you"), delay_ms=0),
        sign_session=SignRecognitionSession(model=sign_model, delay_ms=0),
        speech_output=ConsoleSpeechOutput(console),
    )
