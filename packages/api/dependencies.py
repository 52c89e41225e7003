"""FastAPI dependency injection for services."""

from functools import lru_cache

from packages.conversation import ConversationController
from packages.core import NanbanConfig
from packages.core import get_config as load_config
from packages.phrasebook import JsonFileStore, Phrasebook
from packages.translation import GlossTranslator

from .services import ConversationService, PhraseService, TranslationService


def get_config() -> NanbanConfig:
    """Get configuration from environment variables."""
    return load_config()


@lru_cache()
def get_translator() -> GlossTranslator:
    """Get or create the translator singleton."""
    return GlossTranslator()


@lru_cache()
def get_phrasebook() -> Phrasebook:
    """Get or create the phrasebook singleton, loaded from disk."""
    config = get_config()
    phrasebook = Phrasebook(JsonFileStore(config.phrases_file))
    phrasebook.load()
    return phrasebook


@lru_cache()
def get_controller() -> ConversationController:
    """Get or create the conversation controller singleton."""
    return ConversationController.from_config(get_config(), translator=get_translator())


@lru_cache()
def get_translation_service() -> TranslationService:
    """Get or create the translation service singleton."""
    return TranslationService(translator=get_translator())


@lru_cache()
def get_conversation_service() -> ConversationService:
    """Get or create the conversation service singleton."""
    return ConversationService(controller=get_controller())


@lru_cache()
def get_phrase_service() -> PhraseService:
    """Get or create the phrase service singleton."""
    return PhraseService(phrasebook=get_phrasebook())
