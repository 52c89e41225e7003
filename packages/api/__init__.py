"""Nanban API package - REST endpoints for translation, recognition and the phrasebook."""

from .main import app
from .schemas import (
    ConversationEntryResponse,
    ErrorResponse,
    HealthResponse,
    PhraseResponse,
    TranslateRequest,
    TranslateResponse,
)
from .services import ConversationService, PhraseService, TranslationService

__all__ = [
    "app",
    "TranslateRequest",
    "TranslateResponse",
    "ConversationEntryResponse",
    "PhraseResponse",
    "ErrorResponse",
    "HealthResponse",
    "TranslationService",
    "ConversationService",
    "PhraseService",
]
