"""Conversation service - recognition sessions and the conversation log."""

import logging
from typing import Optional

from packages.conversation import ConversationController
from packages.recognition import KeypointFrame
from packages.recognition.session import RecognitionSession

logger = logging.getLogger(__name__)


class ConversationService:
    """Wraps a ConversationController for the HTTP layer."""

    def __init__(self, controller: ConversationController):
        self.controller = controller

    def _session(self, kind: str) -> RecognitionSession:
        if kind == "speech":
            return self.controller.speech_session
        if kind == "sign":
            return self.controller.sign_session
        raise ValueError(f"Unknown recognition kind: {kind}")

    def is_busy(self, kind: str) -> bool:
        """True if the session for kind has an attempt in progress."""
        return self._session(kind).is_active()

    async def recognize_speech(self) -> Optional[dict]:
        """
        Listen once and log the translated result.

        Returns:
            The new conversation entry, or None if nothing was recognized
        """
        entry = await self.controller.listen()
        return entry.to_dict() if entry else None

    async def recognize_sign(self, keypoints: Optional[dict] = None) -> Optional[dict]:
        """
        Recognize one sign and log the top candidate.

        Args:
            keypoints: Landmarks in KeypointFrame.to_dict() layout; the
                server's perception source is used if omitted

        Returns:
            The new conversation entry, or None if nothing was recognized

        Raises:
            InvalidKeypointsError: If keypoints have the wrong shape
        """
        frame = KeypointFrame.from_dict(keypoints) if keypoints is not None else None
        entry = await self.controller.recognize_sign(frame)
        return entry.to_dict() if entry else None

    def stop(self, kind: str) -> bool:
        """Stop a session. Returns True if an attempt was in progress."""
        session = self._session(kind)
        was_active = session.is_active()
        session.stop()
        if was_active:
            logger.info("Stopped %s recognition", kind)
        return was_active

    def history(self, limit: Optional[int] = None) -> dict:
        """Conversation entries, newest first."""
        entries = self.controller.log.recent(limit)
        return {
            "entries": [e.to_dict() for e in entries],
            "total": len(self.controller.log),
        }

    def clear(self) -> int:
        """Clear the conversation. Returns the number of entries removed."""
        count = len(self.controller.log)
        self.controller.clear()
        return count
