"""Tests for API services against real domain objects."""

import asyncio

import pytest

from packages.api.services import ConversationService, PhraseService, TranslationService
from packages.core import InvalidKeypointsError, ManualClock, PhraseNotFoundError, RecognitionResult
from packages.conversation import ConversationController, NullSpeechOutput
from packages.phrasebook import MemoryStore, Phrasebook
from packages.playback import PlaybackScheduler
from packages.recognition import KeypointFrame, SignRecognitionSession, SpeechRecognitionSession
from packages.translation import GlossDictionary, GlossTranslator


class FixedModel:
    def __init__(self, result):
        self.result = result

    def recognize(self, sample):
        return self.result


class TestTranslationService:

    @pytest.fixture
    def service(self):
        return TranslationService(GlossTranslator(GlossDictionary([("hello", ["HELLO"]), ("thanks", ["THANK-YOU"])])))

    def test_translate_text(self, service):
        result = service.translate_text("Hello")

        assert result["glosses"] == ["HELLO"]
        assert result["match"] == "exact"

    def test_list_mappings(self, service):
        result = service.list_mappings()

        assert result["total"] == 2
        assert result["mappings"][1] == {"phrase": "thanks", "tokens": ["THANK-YOU"]}

    def test_add_and_get(self, service):
        assert service.add_mapping("Good Night", ["GOOD", "NIGHT"]) == {
            "phrase": "good night",
            "tokens": ["GOOD", "NIGHT"],
        }
        assert service.get_mapping("good night")["tokens"] == ["GOOD", "NIGHT"]

    def test_add_rejected(self, service):
        assert service.add_mapping("  ", ["X"]) is None

    def test_remove(self, service):
        assert service.remove_mapping("hello") is True
        assert service.get_mapping("hello") is None

    def test_timeline(self, service):
        result = service.timeline(["A", "B"])

        assert result["duration_ms"] == 2000
        assert result["steps"][0] == {"offset_ms": 0, "phase": "attack", "cursor": 0, "token": "A"}

    def test_timeline_speed_and_empty(self, service):
        assert service.timeline(["A"], speed=2.0)["duration_ms"] == 500
        assert service.timeline([]) == {"steps": [], "duration_ms": 0.0}


class TestConversationService:

    @pytest.fixture
    def clock(self):
        return ManualClock()

    @pytest.fixture
    def service(self, clock):
        controller = ConversationController(
            speech_session=SpeechRecognitionSession(model=FixedModel("thank you"), clock=clock),
            sign_session=SignRecognitionSession(
                model=FixedModel([RecognitionResult("YES", 0.8)]), clock=clock, delay_ms=500,
            ),
            scheduler=PlaybackScheduler(clock=clock),
            speech_output=NullSpeechOutput(),
        )
        return ConversationService(controller)

    def run(self, clock, coro):
        async def scenario():
            task = asyncio.create_task(coro)
            await asyncio.sleep(0)
            clock.run_until_idle()
            return await task

        return asyncio.run(scenario())

    def test_recognize_speech(self, service, clock):
        entry = self.run(clock, service.recognize_speech())

        assert entry["kind"] == "speech"
        assert entry["gloss"] == ["THANK-YOU"]

    def test_recognize_sign_with_keypoints(self, service, clock):
        entry = self.run(clock, service.recognize_sign(KeypointFrame.empty().to_dict()))

        assert entry["text"] == "YES"
        assert entry["candidates"] == [{"label": "YES", "confidence": 0.8}]

    def test_recognize_sign_invalid_keypoints(self, service):
        with pytest.raises(InvalidKeypointsError):
            asyncio.run(service.recognize_sign({"pose": []}))

    @pytest.mark.parametrize("keypoints", [
        {"pose": [1, 2, 3]},
        {"hands": {"left": [{"x": "a"}]}},
        {"hands": "left"},
    ])
    def test_recognize_sign_malformed_keypoints(self, service, keypoints):
        with pytest.raises(InvalidKeypointsError):
            asyncio.run(service.recognize_sign(keypoints))

        assert service.history()["total"] == 0

    def test_busy_and_stop(self, service, clock):
        async def scenario():
            task = asyncio.create_task(service.recognize_speech())
            await asyncio.sleep(0)
            busy = service.is_busy("speech")
            stopped = service.stop("speech")
            return busy, stopped, await task

        busy, stopped, entry = asyncio.run(scenario())

        assert busy is True
        assert stopped is True
        assert entry is None
        assert service.stop("speech") is False

    def test_unknown_kind(self, service):
        with pytest.raises(ValueError):
            service.is_busy("gesture")

    def test_history_and_clear(self, service):
        service.controller.submit_text("hello")
        service.controller.submit_text("thanks")

        history = service.history()
        assert [e["text"] for e in history["entries"]] == ["thanks", "hello"]
        assert service.history(1)["total"] == 2

        assert service.clear() == 2
        assert service.history()["entries"] == []


class TestPhraseService:

    @pytest.fixture
    def service(self):
        phrasebook = Phrasebook(MemoryStore())
        phrasebook.load()
        return PhraseService(phrasebook)

    def test_list(self, service):
        assert service.list_phrases()["total"] == 4
        assert service.list_phrases(favorites_only=True)["total"] == 2
        assert service.list_phrases("name")["phrases"][0]["id"] == "3"

    def test_add_snake_case(self, service):
        phrase = service.add_phrase("See you soon", "Greetings")

        assert phrase["gloss"] == ["SEE", "YOU", "SOON"]
        assert phrase["is_favorite"] is False
        assert "created_at" in phrase

    def test_delete_and_missing(self, service):
        assert service.delete_phrase("1")["id"] == "1"

        with pytest.raises(PhraseNotFoundError):
            service.delete_phrase("1")

    def test_toggle(self, service):
        assert service.toggle_favorite("1")["is_favorite"] is True

    def test_categories(self, service):
        assert service.categories()[0] == "All"
