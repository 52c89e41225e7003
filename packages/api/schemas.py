"""Pydantic schemas for API request/response models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MatchType(str, Enum):
    """Which translation step produced the glosses."""
    EMPTY = "empty"
    EXACT = "exact"
    SUBSTRING = "substring"
    WORDS = "words"
    LITERAL = "literal"


class RecognitionKind(str, Enum):
    """Recognition session selector."""
    SPEECH = "speech"
    SIGN = "sign"


class PlaybackPhase(str, Enum):
    """Playback phase names."""
    IDLE = "idle"
    ATTACK = "attack"
    RELEASE = "release"
    GAP = "gap"
    DONE = "done"


# ============ Translation Schemas ============

class TranslateRequest(BaseModel):
    """Request body for translation endpoint."""
    text: str = Field(..., max_length=1000, description="Spoken or typed text to translate")


class TranslateResponse(BaseModel):
    """Response from translation endpoint."""
    glosses: list[str] = Field(..., description="Gloss tokens in presentation order")
    gloss_string: str = Field(..., description="Glosses joined with spaces")
    original_text: str
    match: MatchType = Field(..., description="Translation step that produced the glosses")
    matched_phrase: Optional[str] = Field(None, description="Dictionary phrase that matched")
    fingerspelled: list[str] = Field(default_factory=list, description="Words emitted literally")


# ============ Dictionary Schemas ============

class MappingRequest(BaseModel):
    """Request to add or overwrite a phrase mapping."""
    phrase: str = Field(..., min_length=1, max_length=200)
    tokens: list[str] = Field(..., min_length=1)


class MappingResponse(BaseModel):
    """A single phrase mapping."""
    phrase: str
    tokens: list[str]


class DictionaryResponse(BaseModel):
    """All phrase mappings in dictionary order."""
    mappings: list[MappingResponse]
    total: int


# ============ Recognition / Conversation Schemas ============

class RecognitionResultResponse(BaseModel):
    """One sign candidate."""
    label: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class ConversationEntryResponse(BaseModel):
    """One conversation log entry."""
    id: int
    kind: RecognitionKind
    text: str
    gloss: Optional[list[str]] = None
    candidates: Optional[list[RecognitionResultResponse]] = None
    timestamp: str


class ConversationResponse(BaseModel):
    """Conversation entries, newest first."""
    entries: list[ConversationEntryResponse]
    total: int


class ClearResponse(BaseModel):
    """Result of clearing the conversation."""
    cleared: int


class SignRecognizeRequest(BaseModel):
    """Optional keypoints for sign recognition.

    Layout: {"hands": {"left": [...21], "right": [...21]}, "pose": [...33],
    "face": [...468]}, each point {"x", "y", "z"} (pose adds "visibility").
    Without keypoints the server's perception source is used.
    """
    keypoints: Optional[dict] = None


class StopResponse(BaseModel):
    """Result of stopping a recognition session."""
    kind: RecognitionKind
    stopped: bool = Field(..., description="True if an attempt was in progress")


# ============ Playback Schemas ============

class TimelineRequest(BaseModel):
    """Request to compute a playback schedule."""
    tokens: list[str] = Field(default_factory=list)
    speed: float = Field(1.0, gt=0.0, le=4.0, description="Playback speed multiplier")


class TimelineStepResponse(BaseModel):
    """One state change of the schedule."""
    offset_ms: float
    phase: PlaybackPhase
    cursor: int
    token: Optional[str] = None


class TimelineResponse(BaseModel):
    """Full playback schedule."""
    steps: list[TimelineStepResponse]
    duration_ms: float


# ============ Phrasebook Schemas ============

class PhraseResponse(BaseModel):
    """A saved phrase."""
    id: str
    text: str
    gloss: list[str]
    category: str
    is_favorite: bool
    created_at: str


class PhraseListResponse(BaseModel):
    """Response for listing phrases."""
    phrases: list[PhraseResponse]
    total: int


class PhraseCreateRequest(BaseModel):
    """Request to add a phrase."""
    text: str = Field(..., min_length=1, max_length=500)
    category: str = "Custom"
    gloss: Optional[list[str]] = Field(None, description="Tokens; derived from the text if omitted")


class CategoriesResponse(BaseModel):
    """Phrase categories, "All" first."""
    categories: list[str]


# ============ Error Schemas ============

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = None


# ============ Health Schemas ============

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    services: dict[str, str] = Field(default_factory=dict)
