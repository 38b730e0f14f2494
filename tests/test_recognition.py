"""Tests for core.recognition — mock voice recognition."""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core.errors import MissingInputError
from core.recognition.service import (
    SAMPLE_TRANSCRIPTIONS,
    SUGGEST_CLEARER,
    SUGGEST_LOUDER,
    SUGGEST_QUIETER,
    SUGGEST_REPHRASE,
    RecognitionService,
    build_suggestions,
)
from core.types import AudioQuality


class TestTextRecognition:
    """Direct text passes through with perfect scores."""

    def test_thank_you(self, recognizer: RecognitionService) -> None:
        result = recognizer.recognize(text="Thank you")
        assert result.transcribed_text == "Thank you"
        assert result.confidence == 1.0
        assert result.audio_quality == AudioQuality(volume=1.0, clarity=1.0, background_noise=0.0)
        assert result.suggestions is None

    def test_text_wins_over_audio(self, recognizer: RecognitionService) -> None:
        result = recognizer.recognize(text="Hi there", audio_data="AAAA")
        assert result.transcribed_text == "Hi there"
        assert result.confidence == 1.0

    def test_language_carried(self, recognizer: RecognitionService) -> None:
        assert recognizer.recognize(text="Hola", language="es-ES").language == "es-ES"


class TestAudioRecognition:
    """Audio input yields a canned transcription and random quality."""

    def test_sample_transcription(self, recognizer: RecognitionService) -> None:
        result = recognizer.recognize(audio_data="UklGRiQAAABXQVZF")
        assert result.transcribed_text in SAMPLE_TRANSCRIPTIONS
        assert 0.7 <= result.confidence <= 1.0

    def test_accepts_bytes(self, recognizer: RecognitionService) -> None:
        result = recognizer.recognize(audio_data=b"\x00\x01\x02")
        assert result.transcribed_text in SAMPLE_TRANSCRIPTIONS

    def test_seeded_is_deterministic(self) -> None:
        a = RecognitionService(seed=11, latency_ms=0).recognize(audio_data="x")
        b = RecognitionService(seed=11, latency_ms=0).recognize(audio_data="x")
        assert a == b

    def test_suggestions_match_quality(self, recognizer: RecognitionService) -> None:
        for _ in range(20):
            result = recognizer.recognize(audio_data="x")
            assert result.suggestions == build_suggestions(result.audio_quality, result.confidence)

    @given(seed=st.integers(0, 2**32 - 1))
    @settings(max_examples=60)
    def test_ranges(self, seed: int) -> None:
        result = RecognitionService(seed=seed, latency_ms=0).recognize(audio_data="x")
        q = result.audio_quality
        assert 0.7 <= result.confidence <= 1.0
        assert 0.6 <= q.volume <= 1.0
        assert 0.7 <= q.clarity <= 1.0
        assert 0.0 <= q.background_noise <= 0.3
        assert result.suggestions is None or len(result.suggestions) > 0


class TestMissingInput:
    @pytest.mark.parametrize(("text", "audio"), [(None, None), ("", None), (None, ""), ("", b"")])
    def test_raises(self, recognizer: RecognitionService, text: str | None, audio: str | None) -> None:
        with pytest.raises(MissingInputError, match="audioData or text"):
            recognizer.recognize(text=text, audio_data=audio)


class TestSuggestions:
    def test_all_hints(self) -> None:
        quality = AudioQuality(volume=0.65, clarity=0.75, background_noise=0.25)
        assert build_suggestions(quality, 0.75) == (
            SUGGEST_LOUDER,
            SUGGEST_CLEARER,
            SUGGEST_QUIETER,
            SUGGEST_REPHRASE,
        )

    def test_none_when_clean(self) -> None:
        assert build_suggestions(AudioQuality(0.9, 0.9, 0.1), 0.95) is None

    def test_thresholds_are_strict(self) -> None:
        quality = AudioQuality(volume=0.7, clarity=0.8, background_noise=0.2)
        assert build_suggestions(quality, 0.8) is None

    def test_single_hint(self) -> None:
        assert build_suggestions(AudioQuality(0.9, 0.9, 0.29), 0.9) == (SUGGEST_QUIETER,)


class TestAsyncProcessing:
    def test_process(self, recognizer: RecognitionService) -> None:
        result = asyncio.run(recognizer.process(text="Nice to meet you"))
        assert result.transcribed_text == "Nice to meet you"

    def test_process_missing_raises(self, recognizer: RecognitionService) -> None:
        with pytest.raises(MissingInputError):
            asyncio.run(recognizer.process())


class TestVoiceSettings:
    def test_defaults(self, recognizer: RecognitionService) -> None:
        data = recognizer.voice_settings().to_dict()
        assert data["default_language"] == "en-US"
        assert [lang["code"] for lang in data["supported_languages"]] == [
            "en-US", "en-GB", "es-ES", "fr-FR", "de-DE",
        ]
        assert data["quality_thresholds"] == {
            "min_volume": 0.3,
            "min_clarity": 0.6,
            "max_background_noise": 0.4,
        }
        assert all(data["enhancement_features"].values())
