"""API route modules."""

from .conversation import router as conversation_router
from .phrases import router as phrases_router
from .recognize import router as recognize_router
from .translate import router as translate_router

__all__ = ["translate_router", "recognize_router", "conversation_router", "phrases_router"]
