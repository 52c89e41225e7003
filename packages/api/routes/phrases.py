"""Phrasebook endpoint routes."""

from fastapi import APIRouter, Depends, HTTPException, Query

from packages.core import PhraseNotFoundError

from ..schemas import (
    CategoriesResponse,
    ErrorResponse,
    PhraseCreateRequest,
    PhraseListResponse,
    PhraseResponse,
)
from ..dependencies import get_phrase_service
from ..services import PhraseService


router = APIRouter(prefix="/api/phrases", tags=["phrases"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Phrase not found"}}


@router.get(
    "",
    response_model=PhraseListResponse,
    summary="List phrases",
)
async def list_phrases(
    q: str = Query("", description="Search text and gloss"),
    category: str = Query("All", description="Filter by category"),
    favorites: bool = Query(False, description="Only favorites"),
    phrase_service: PhraseService = Depends(get_phrase_service),
):
    """List saved phrases, optionally filtered by search text and category."""
    return PhraseListResponse(**phrase_service.list_phrases(q, category, favorites))


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    summary="List categories",
)
async def list_categories(
    phrase_service: PhraseService = Depends(get_phrase_service),
):
    """List phrase categories. "All" is a filter, not a category to save under."""
    return CategoriesResponse(categories=phrase_service.categories())


@router.post(
    "",
    response_model=PhraseResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse, "description": "Invalid phrase"}},
    summary="Add a phrase",
)
async def add_phrase(
    request: PhraseCreateRequest,
    phrase_service: PhraseService = Depends(get_phrase_service),
):
    """
    Add a phrase to the phrasebook.

    - **text**: Phrase text
    - **category**: Category (default: Custom)
    - **gloss**: Optional tokens; derived word by word from the text if omitted
    """
    try:
        return PhraseResponse(**phrase_service.add_phrase(request.text, request.category, request.gloss))
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "invalid_phrase",
                "message": str(e),
            },
        )


@router.delete(
    "/{phrase_id}",
    response_model=PhraseResponse,
    responses=_NOT_FOUND,
    summary="Delete a phrase",
)
async def delete_phrase(
    phrase_id: str,
    phrase_service: PhraseService = Depends(get_phrase_service),
):
    """Delete a phrase and return it."""
    try:
        return PhraseResponse(**phrase_service.delete_phrase(phrase_id))
    except PhraseNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())


@router.post(
    "/{phrase_id}/favorite",
    response_model=PhraseResponse,
    responses=_NOT_FOUND,
    summary="Toggle favorite",
)
async def toggle_favorite(
    phrase_id: str,
    phrase_service: PhraseService = Depends(get_phrase_service),
):
    """Flip a phrase's favorite flag."""
    try:
        return PhraseResponse(**phrase_service.toggle_favorite(phrase_id))
    except PhraseNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())
