"""
Shared fixtures for API package tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_entry_dict():
    """Create sample speech entry dictionary."""
    return {
        "id": 1,
        "kind": "speech",
        "text": "What is your name?",
        "gloss": ["WHAT", "YOUR", "NAME"],
        "candidates": None,
        "timestamp": "2024-05-01T12:30:00+00:00",
    }


@pytest.fixture
def sample_sign_entry_dict():
    """Create sample sign entry dictionary."""
    return {
        "id": 2,
        "kind": "sign",
        "text": "HELLO",
        "gloss": None,
        "candidates": [
            {"label": "HELLO", "confidence": 0.93},
            {"label": "HELP", "confidence": 0.71},
        ],
        "timestamp": "2024-05-01T12:31:00+00:00",
    }


@pytest.fixture
def sample_phrase_dict():
    """Create sample phrase response dictionary."""
    return {
        "id": "4",
        "text": "I need help",
        "gloss": ["I", "NEED", "HELP"],
        "category": "Emergency",
        "is_favorite": True,
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def mock_translation_service():
    """Create mock TranslationService."""
    service = MagicMock()

    # Default return values
    service.translate_text.return_value = {
        "glosses": ["HELLO"],
        "gloss_string": "HELLO",
        "original_text": "hello",
        "match": "exact",
        "matched_phrase": "hello",
        "fingerspelled": [],
    }
    service.list_mappings.return_value = {"mappings": [], "total": 0}
    service.get_mapping.return_value = None
    service.add_mapping.return_value = None
    service.remove_mapping.return_value = False
    service.timeline.return_value = {"steps": [], "duration_ms": 0.0}

    return service


@pytest.fixture
def mock_conversation_service(sample_entry_dict):
    """Create mock ConversationService."""
    service = MagicMock()

    # Default return values
    service.is_busy.return_value = False
    service.recognize_speech = AsyncMock(return_value=sample_entry_dict)
    service.recognize_sign = AsyncMock(return_value=None)
    service.stop.return_value = False
    service.history.return_value = {"entries": [], "total": 0}
    service.clear.return_value = 0

    return service


@pytest.fixture
def mock_phrase_service(sample_phrase_dict):
    """Create mock PhraseService."""
    service = MagicMock()

    # Default return values
    service.list_phrases.return_value = {"phrases": [sample_phrase_dict], "total": 1}
    service.add_phrase.return_value = sample_phrase_dict
    service.delete_phrase.return_value = sample_phrase_dict
    service.toggle_favorite.return_value = sample_phrase_dict
    service.categories.return_value = ["All", "Greetings", "Courtesy", "Questions", "Emergency", "Custom"]

    return service
