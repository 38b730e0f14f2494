"""Mock voice recognition.

Direct text passes straight through with perfect scores. Audio input is
never decoded: a canned transcription is picked at random and quality
metrics are sampled from fixed demo ranges.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from loguru import logger

from core.errors import MissingInputError
from core.types import AUDIO_CONFIDENCE_RANGE, AudioQuality, RecognitionResult

SAMPLE_TRANSCRIPTIONS: tuple[str, ...] = (
    "Hello, how are you today?",
    "Thank you for your help.",
    "I need assistance with something.",
    "Have a wonderful day!",
    "Nice to meet you.",
    "What time is it?",
    "Can you help me please?",
    "I understand now.",
)

VOICE_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("en-US", "English (US)"),
    ("en-GB", "English (UK)"),
    ("es-ES", "Spanish"),
    ("fr-FR", "French"),
    ("de-DE", "German"),
)

DEFAULT_VOICE_LANGUAGE = "en-US"

SUGGEST_LOUDER = "Try speaking louder or moving closer to the microphone"
SUGGEST_CLEARER = "Speak more clearly and at a steady pace"
SUGGEST_QUIETER = "Try to reduce background noise for better recognition"
SUGGEST_REPHRASE = "Consider rephrasing or speaking more slowly"


@dataclass(frozen=True, slots=True)
class QualityRanges:
    """Sampling ranges for audio-derived metrics."""

    confidence: tuple[float, float] = AUDIO_CONFIDENCE_RANGE
    volume: tuple[float, float] = (0.6, 1.0)
    clarity: tuple[float, float] = (0.7, 1.0)
    background_noise: tuple[float, float] = (0.0, 0.3)


@dataclass(frozen=True, slots=True)
class SuggestionThresholds:
    """Quality levels below (or above, for noise) which a hint is added."""

    min_volume: float = 0.7
    min_clarity: float = 0.8
    max_background_noise: float = 0.2
    min_confidence: float = 0.8


@dataclass(slots=True)
class VoiceSettings:
    """Voice capture settings advertised to clients."""

    default_language: str = DEFAULT_VOICE_LANGUAGE
    noise_reduction: bool = True
    auto_gain_control: bool = True
    echo_cancellation: bool = True
    min_volume: float = 0.3
    min_clarity: float = 0.6
    max_background_noise: float = 0.4
    supported_languages: list[tuple[str, str]] = field(
        default_factory=lambda: list(VOICE_LANGUAGES)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "supported_languages": [
                {"code": code, "name": name} for code, name in self.supported_languages
            ],
            "default_language": self.default_language,
            "enhancement_features": {
                "noise_reduction": self.noise_reduction,
                "auto_gain_control": self.auto_gain_control,
                "echo_cancellation": self.echo_cancellation,
            },
            "quality_thresholds": {
                "min_volume": self.min_volume,
                "min_clarity": self.min_clarity,
                "max_background_noise": self.max_background_noise,
            },
        }


def build_suggestions(
    quality: AudioQuality,
    confidence: float,
    thresholds: SuggestionThresholds | None = None,
) -> tuple[str, ...] | None:
    """Improvement hints for a recognition; None when there are none."""
    t = thresholds or SuggestionThresholds()
    hints: list[str] = []
    if quality.volume < t.min_volume:
        hints.append(SUGGEST_LOUDER)
    if quality.clarity < t.min_clarity:
        hints.append(SUGGEST_CLEARER)
    if quality.background_noise > t.max_background_noise:
        hints.append(SUGGEST_QUIETER)
    if confidence < t.min_confidence:
        hints.append(SUGGEST_REPHRASE)
    return tuple(hints) if hints else None


class RecognitionService:
    """Simulated speech recognition.

    Usage:
        >>> service = RecognitionService(seed=3, latency_ms=0)
        >>> service.recognize(text="Thank you").confidence
        1.0
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        latency_ms: float = 800.0,
        ranges: QualityRanges | None = None,
        thresholds: SuggestionThresholds | None = None,
        voice_settings: VoiceSettings | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._latency_ms = latency_ms
        self._ranges = ranges or QualityRanges()
        self._thresholds = thresholds or SuggestionThresholds()
        self._voice_settings = voice_settings or VoiceSettings()

    @property
    def latency_ms(self) -> float:
        return self._latency_ms

    def recognize(
        self,
        text: str | None = None,
        audio_data: str | bytes | None = None,
        language: str = DEFAULT_VOICE_LANGUAGE,
        enhance_audio: bool = False,
    ) -> RecognitionResult:
        """Produce a recognition result from text or opaque audio.

        Text takes precedence when both are supplied.

        Raises:
            MissingInputError: If neither text nor audio is supplied.
        """
        if text:
            quality = AudioQuality(volume=1.0, clarity=1.0, background_noise=0.0)
            return RecognitionResult(
                transcribed_text=text,
                confidence=1.0,
                audio_quality=quality,
                suggestions=build_suggestions(quality, 1.0, self._thresholds),
                language=language,
            )

        if not audio_data:
            raise MissingInputError("Either audioData or text is required")

        r = self._ranges
        transcript = SAMPLE_TRANSCRIPTIONS[int(self._rng.integers(len(SAMPLE_TRANSCRIPTIONS)))]
        confidence = float(self._rng.uniform(*r.confidence))
        quality = AudioQuality(
            volume=float(self._rng.uniform(*r.volume)),
            clarity=float(self._rng.uniform(*r.clarity)),
            background_noise=float(self._rng.uniform(*r.background_noise)),
        )
        logger.debug(
            "Mock transcription | bytes={} enhance={} confidence={:.3f}",
            len(audio_data),
            enhance_audio,
            confidence,
        )
        return RecognitionResult(
            transcribed_text=transcript,
            confidence=confidence,
            audio_quality=quality,
            suggestions=build_suggestions(quality, confidence, self._thresholds),
            language=language,
        )

    async def process(
        self,
        text: str | None = None,
        audio_data: str | bytes | None = None,
        language: str = DEFAULT_VOICE_LANGUAGE,
        enhance_audio: bool = False,
    ) -> RecognitionResult:
        """:meth:`recognize` after the simulated processing delay."""
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)
        return self.recognize(
            text=text,
            audio_data=audio_data,
            language=language,
            enhance_audio=enhance_audio,
        )

    def voice_settings(self) -> VoiceSettings:
        return self._voice_settings
