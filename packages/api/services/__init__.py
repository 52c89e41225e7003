"""Business logic services for the API."""

from .conversation_service import ConversationService
from .phrase_service import PhraseService
from .translation_service import TranslationService

__all__ = ["TranslationService", "ConversationService", "PhraseService"]
