"""Translation and dictionary endpoint routes."""

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import (
    DictionaryResponse,
    ErrorResponse,
    MappingRequest,
    MappingResponse,
    TranslateRequest,
    TranslateResponse,
)
from ..dependencies import get_translation_service
from ..services import TranslationService


router = APIRouter(prefix="/api", tags=["translation"])


def _mapping_not_found(phrase: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error": "mapping_not_found",
            "message": f"No mapping for phrase '{phrase}'",
            "details": {"phrase": phrase},
        },
    )


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        422: {"description": "Invalid request"},
    },
)
async def translate_text(
    request: TranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Translate text to a gloss sequence.

    - **text**: Spoken or typed text (blank text yields no glosses)

    Known phrases map through the dictionary; unknown words are
    fingerspelled as upper-cased literal tokens.
    """
    return TranslateResponse(**translation_service.translate_text(request.text))


@router.get(
    "/dictionary",
    response_model=DictionaryResponse,
    tags=["dictionary"],
)
async def list_dictionary(
    translation_service: TranslationService = Depends(get_translation_service),
):
    """List all phrase mappings in the order they are matched."""
    return DictionaryResponse(**translation_service.list_mappings())


@router.post(
    "/dictionary",
    response_model=MappingResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Phrase or tokens are blank"},
    },
    tags=["dictionary"],
)
async def add_mapping(
    request: MappingRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """Add a phrase mapping, overwriting any existing one."""
    mapping = translation_service.add_mapping(request.phrase, request.tokens)
    if mapping is None:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "invalid_mapping",
                "message": "Phrase and at least one token must be non-blank",
            },
        )
    return MappingResponse(**mapping)


@router.get(
    "/dictionary/{phrase}",
    response_model=MappingResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Phrase not mapped"},
    },
    tags=["dictionary"],
)
async def get_mapping(
    phrase: str,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """Get the tokens mapped to a phrase."""
    mapping = translation_service.get_mapping(phrase)
    if mapping is None:
        raise _mapping_not_found(phrase)
    return MappingResponse(**mapping)


@router.delete(
    "/dictionary/{phrase}",
    status_code=204,
    responses={
        404: {"model": ErrorResponse, "description": "Phrase not mapped"},
    },
    tags=["dictionary"],
)
async def delete_mapping(
    phrase: str,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """Remove a phrase mapping."""
    if not translation_service.remove_mapping(phrase):
        raise _mapping_not_found(phrase)
