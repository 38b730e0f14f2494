# ============================================================
#  SignBridge — Dependency Injection
# ============================================================
"""
FastAPI dependency providers for settings and the mock services.
Ensures single service instances across the application lifetime.
"""
from __future__ import annotations

from functools import lru_cache

from backend.config import Settings, settings
from core.recognition.service import RecognitionService, VoiceSettings
from core.sequencing.sequencer import GestureSequencer
from core.sequencing.translator import TranslationService
from core.visuals.context import ContextualVisualGenerator
from core.visuals.video import MockVideoGenerator


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    return settings


@lru_cache(maxsize=1)
def get_translator() -> TranslationService:
    cfg = get_settings()
    return TranslationService(
        GestureSequencer(seed=cfg.random_seed),
        latency_ms=cfg.translation_latency_ms,
    )


@lru_cache(maxsize=1)
def get_recognizer() -> RecognitionService:
    cfg = get_settings()
    return RecognitionService(
        seed=cfg.random_seed,
        latency_ms=cfg.recognition_latency_ms,
        voice_settings=VoiceSettings(
            default_language=cfg.default_voice_language,
            min_volume=cfg.min_volume,
            min_clarity=cfg.min_clarity,
            max_background_noise=cfg.max_background_noise,
        ),
    )


@lru_cache(maxsize=1)
def get_visual_generator() -> ContextualVisualGenerator:
    cfg = get_settings()
    return ContextualVisualGenerator(
        media_base=cfg.media_base_url,
        latency_ms=cfg.visuals_latency_ms,
    )


@lru_cache(maxsize=1)
def get_video_generator() -> MockVideoGenerator:
    cfg = get_settings()
    return MockVideoGenerator(
        seed=cfg.random_seed,
        media_base=cfg.media_base_url,
        poll_interval_ms=cfg.video_poll_interval_ms,
        max_jobs=cfg.video_max_jobs,
    )
