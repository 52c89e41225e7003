"""Speech and sign recognition endpoint routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from packages.core import InvalidKeypointsError, RecognitionFailure

from ..schemas import (
    ConversationEntryResponse,
    ErrorResponse,
    RecognitionKind,
    SignRecognizeRequest,
    StopResponse,
)
from ..dependencies import get_conversation_service
from ..services import ConversationService


router = APIRouter(prefix="/api/recognize", tags=["recognition"])

_RESPONSES = {
    409: {"model": ErrorResponse, "description": "Session busy"},
    503: {"model": ErrorResponse, "description": "Nothing recognized"},
}


def _busy(kind: RecognitionKind) -> HTTPException:
    return HTTPException(
        status_code=409,
        detail={
            "error": "session_busy",
            "message": f"{kind.value.capitalize()} recognition is already in progress",
            "details": {"kind": kind.value},
        },
    )


def _no_result(kind: RecognitionKind) -> HTTPException:
    failure = RecognitionFailure(kind.value, "no result")
    return HTTPException(status_code=503, detail=failure.to_dict())


@router.post(
    "/speech",
    response_model=ConversationEntryResponse,
    responses=_RESPONSES,
)
async def recognize_speech(
    service: ConversationService = Depends(get_conversation_service),
):
    """
    Listen once, translate the recognized text and log it.

    Returns the new conversation entry with its gloss.
    """
    if service.is_busy(RecognitionKind.SPEECH.value):
        raise _busy(RecognitionKind.SPEECH)

    entry = await service.recognize_speech()
    if entry is None:
        raise _no_result(RecognitionKind.SPEECH)
    return ConversationEntryResponse(**entry)


@router.post(
    "/sign",
    response_model=ConversationEntryResponse,
    responses={
        **_RESPONSES,
        422: {"model": ErrorResponse, "description": "Invalid keypoints"},
    },
)
async def recognize_sign(
    request: Optional[SignRecognizeRequest] = None,
    service: ConversationService = Depends(get_conversation_service),
):
    """
    Recognize one sign and log the ranked candidates.

    - **keypoints**: Optional landmarks; the server's perception source
      is used when omitted
    """
    if service.is_busy(RecognitionKind.SIGN.value):
        raise _busy(RecognitionKind.SIGN)

    try:
        entry = await service.recognize_sign(request.keypoints if request else None)
    except InvalidKeypointsError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    if entry is None:
        raise _no_result(RecognitionKind.SIGN)
    return ConversationEntryResponse(**entry)


@router.post(
    "/{kind}/stop",
    response_model=StopResponse,
)
async def stop_recognition(
    kind: RecognitionKind,
    service: ConversationService = Depends(get_conversation_service),
):
    """Stop an in-progress recognition attempt."""
    return StopResponse(kind=kind, stopped=service.stop(kind.value))
