"""Conversation control flow.

Ties the recognizers, translator, log, audio output and playback together:

    speech -> text -> glosses -> log entry -> spoken aloud
    camera frame -> keypoints -> ranked signs -> log entry -> top label spoken

The controller holds the "current" text, gloss and candidates that a
front end displays, and replays the current gloss through the scheduler.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from packages.core.config import NanbanConfig
from packages.core.protocols import Clock, FeedbackSignal, SpeechOutput
from packages.core.types import EntryKind, RecognitionResult, SpeechOptions
from packages.playback.scheduler import PlaybackScheduler
from packages.recognition.keypoints import KeypointFrame
from packages.recognition.models import uniform_delay
from packages.recognition.session import SignRecognitionSession, SpeechRecognitionSession
from packages.translation.gloss_translator import GlossTranslator

from .log import ConversationEntry, ConversationLog
from .outputs import NullFeedback, NullSpeechOutput

logger = logging.getLogger(__name__)


class ConversationController:
    """Runs both directions of a conversation.

    Every collaborator is injectable; defaults are the placeholder models,
    silent outputs and an asyncio-backed clock.
    """

    def __init__(
        self,
        translator: Optional[GlossTranslator] = None,
        speech_session: Optional[SpeechRecognitionSession] = None,
        sign_session: Optional[SignRecognitionSession] = None,
        log: Optional[ConversationLog] = None,
        scheduler: Optional[PlaybackScheduler] = None,
        speech_output: Optional[SpeechOutput] = None,
        feedback: Optional[FeedbackSignal] = None,
        speech_options: Optional[SpeechOptions] = None,
    ):
        self.translator = translator or GlossTranslator()
        self.speech_session = speech_session or SpeechRecognitionSession()
        self.sign_session = sign_session or SignRecognitionSession()
        self.log = log if log is not None else ConversationLog()
        self.scheduler = scheduler or PlaybackScheduler()
        self.speech_output = speech_output or NullSpeechOutput()
        self.feedback = feedback or NullFeedback()
        self.speech_options = speech_options or SpeechOptions()

        self.current_text = ""
        self.current_gloss: list[str] = []
        self.current_candidates: list[RecognitionResult] = []

    @classmethod
    def from_config(
        cls,
        config: NanbanConfig,
        translator: Optional[GlossTranslator] = None,
        speech_output: Optional[SpeechOutput] = None,
        clock: Optional[Clock] = None,
    ) -> "ConversationController":
        """Build a controller with delays, seed and voice taken from config."""
        rng = np.random.default_rng(config.seed)
        return cls(
            translator=translator,
            speech_session=SpeechRecognitionSession(
                clock=clock, delay_ms=config.speech_delay_ms, rng=rng,
            ),
            sign_session=SignRecognitionSession(
                clock=clock,
                delay_ms=uniform_delay(config.sign_delay_min_ms, config.sign_delay_max_ms, rng),
                rng=rng,
            ),
            scheduler=PlaybackScheduler(clock=clock),
            speech_output=speech_output,
            speech_options=SpeechOptions(
                language=config.speech_language,
                pitch=config.speech_pitch,
                rate=config.speech_rate,
            ),
        )

    async def listen(self) -> Optional[ConversationEntry]:
        """Recognize speech, translate it and log it.

        Returns:
            The new entry, or None if the session was busy, stopped or failed
        """
        self.feedback.trigger("listen")
        text = await self.speech_session.start()
        if not text:
            return None
        return self.submit_text(text)

    def submit_text(self, text: str) -> Optional[ConversationEntry]:
        """Translate typed or recognized text and log it as speech."""
        glosses = self.translator.convert(text)
        if not glosses:
            return None

        entry = self.log.record(EntryKind.SPEECH, text, gloss=glosses)
        self.current_text = text
        self.current_gloss = glosses
        logger.info("Speech entry %d: %r -> %s", entry.id, text, " ".join(glosses))
        self.speech_output.speak(text, self.speech_options)
        return entry

    async def recognize_sign(self, frame: Any = None) -> Optional[ConversationEntry]:
        """Recognize a sign from a camera frame (or ready-made keypoints).

        Returns:
            The new entry, or None if busy, stopped, failed or nothing was recognized
        """
        self.feedback.trigger("recognize")
        if self.sign_session.is_active():
            return None

        keypoints = frame if isinstance(frame, KeypointFrame) else self.sign_session.extract_keypoints(frame)
        results = await self.sign_session.start(keypoints)
        if not results:
            return None

        top = results[0].label
        entry = self.log.record(EntryKind.SIGN, top, candidates=results)
        self.current_text = top
        self.current_candidates = list(results)
        logger.info("Sign entry %d: %s (%d%%)", entry.id, top, results[0].percent)
        self.speech_output.speak(top, self.speech_options)
        return entry

    def play_current(self) -> bool:
        """Present the current gloss. Returns False if there is none."""
        return self.scheduler.play(self.current_gloss)

    def replay(self, entry_id: int) -> bool:
        """Speak a logged entry's text again."""
        entry = self.log.get(entry_id)
        if entry is None:
            return False
        self.speech_output.speak(entry.text, self.speech_options)
        return True

    def stop(self) -> None:
        """Stop both recognizers and any playback."""
        self.speech_session.stop()
        self.sign_session.stop()
        self.scheduler.stop()

    def clear(self) -> None:
        """Clear the log and the current display state."""
        self.log.clear()
        self.current_text = ""
        self.current_gloss = []
        self.current_candidates = []
