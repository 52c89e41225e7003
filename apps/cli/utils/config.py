"""Configuration and shared objects for CLI commands."""

from functools import lru_cache

from packages.conversation import ConsoleSpeechOutput, ConversationController
from packages.core import NanbanConfig, get_config
from packages.phrasebook import JsonFileStore, Phrasebook
from packages.translation import GlossTranslator

from .display import console


def get_settings() -> NanbanConfig:
    """Get configuration from environment variables."""
    return get_config()


@lru_cache
def get_translator() -> GlossTranslator:
    """Get a GlossTranslator instance."""
    return GlossTranslator()


@lru_cache
def get_phrasebook() -> Phrasebook:
    """Get the phrasebook stored at NANBAN_PHRASES_FILE."""
    phrasebook = Phrasebook(JsonFileStore(get_settings().phrases_file))
    phrasebook.load()
    return phrasebook


def get_controller() -> ConversationController:
    """Build a conversation controller that speaks to the console."""
    return ConversationController.from_config(
        get_settings(),
        translator=get_translator(),
        speech_output=ConsoleSpeechOutput(console),
    )
