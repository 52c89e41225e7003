"""Custom exception classes for Nanban.

Exception Hierarchy:
    NanbanError (base)
    ├── ConfigurationError
    ├── RecognitionError
    │   └── RecognitionFailure
    ├── KeypointError
    │   └── InvalidKeypointsError
    └── PhrasebookError
        ├── PhraseNotFoundError
        └── PersistenceUnavailable

The translator, recognition sessions, conversation log and playback
scheduler never let these escape their public methods: failures there
degrade to empty or ``None`` results. The exceptions are raised by
collaborators (models, stores, config loading) and caught at those seams.
"""

from typing import Any, Optional


class NanbanError(Exception):
    """Base exception for all Nanban errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ============ Configuration Errors ============


class ConfigurationError(NanbanError):
    """Invalid value in application configuration."""

    def __init__(self, config_key: str, value: str, expected: str):
        super().__init__(
            message=f"Invalid value for {config_key}: {value!r} (expected {expected})",
            code="invalid_config",
            details={"config_key": config_key, "value": value, "expected": expected},
        )
        self.config_key = config_key


# ============ Recognition Errors ============


class RecognitionError(NanbanError):
    """Base class for recognition-related errors."""

    pass


class RecognitionFailure(RecognitionError):
    """A recognition step failed and produced no result.

    Raised by recognition models; sessions log it and return ``None``.
    """

    def __init__(self, modality: str, reason: str):
        super().__init__(
            message=f"{modality.capitalize()} recognition failed: {reason}",
            code="recognition_failure",
            details={"modality": modality, "reason": reason},
        )
        self.modality = modality
        self.reason = reason


# ============ Keypoint Errors ============


class KeypointError(NanbanError):
    """Base class for keypoint data errors."""

    pass


class InvalidKeypointsError(KeypointError):
    """Keypoint data is malformed or an array has the wrong shape.

    Pass actual for a shape mismatch, or reason when the points could not
    be read at all.
    """

    def __init__(
        self,
        part: str,
        expected: tuple[int, ...],
        actual: Optional[tuple[int, ...]] = None,
        reason: Optional[str] = None,
    ):
        if reason is None:
            reason = f"must have shape {expected}, got {actual}"
        details = {"part": part, "expected": list(expected), "reason": reason}
        if actual is not None:
            details["actual"] = list(actual)
        super().__init__(
            message=f"Keypoints for '{part}' {reason}",
            code="invalid_keypoints",
            details=details,
        )
        self.part = part


# ============ Phrasebook Errors ============


class PhrasebookError(NanbanError):
    """Base class for phrasebook errors."""

    pass


class PhraseNotFoundError(PhrasebookError):
    """Phrase does not exist in the phrasebook."""

    def __init__(self, phrase_id: str):
        super().__init__(
            message=f"Phrase '{phrase_id}' not found",
            code="phrase_not_found",
            details={"phrase_id": phrase_id},
        )
        self.phrase_id = phrase_id


class PersistenceUnavailable(PhrasebookError):
    """Phrase storage could not be read or written."""

    def __init__(self, operation: str, key: str, reason: str):
        super().__init__(
            message=f"Storage {operation} failed for '{key}': {reason}",
            code="persistence_unavailable",
            details={"operation": operation, "key": key, "reason": reason},
        )
        self.operation = operation
        self.key = key
