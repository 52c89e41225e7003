"""Conversation log and playback endpoint routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..schemas import (
    ClearResponse,
    ConversationResponse,
    TimelineRequest,
    TimelineResponse,
)
from ..dependencies import get_conversation_service, get_translation_service
from ..services import ConversationService, TranslationService


router = APIRouter(prefix="/api", tags=["conversation"])


@router.get(
    "/conversation",
    response_model=ConversationResponse,
)
async def get_conversation(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum entries"),
    service: ConversationService = Depends(get_conversation_service),
):
    """Get conversation entries, newest first."""
    return ConversationResponse(**service.history(limit))


@router.delete(
    "/conversation",
    response_model=ClearResponse,
)
async def clear_conversation(
    service: ConversationService = Depends(get_conversation_service),
):
    """Clear the conversation log."""
    return ClearResponse(cleared=service.clear())


@router.post(
    "/playback/timeline",
    response_model=TimelineResponse,
    tags=["playback"],
)
async def playback_timeline(
    request: TimelineRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Compute the presentation schedule for a gloss sequence.

    Each token runs ATTACK (300ms), RELEASE (200ms) and GAP (500ms) at
    speed 1.0; the schedule ends with DONE followed by IDLE.
    """
    return TimelineResponse(**translation_service.timeline(request.tokens, request.speed))
