"""Shared test fixtures for SignBridge."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.apps.api.dependencies import (
    get_recognizer,
    get_translator,
    get_video_generator,
    get_visual_generator,
)
from backend.apps.api.main import create_app
from core.playback.clock import PlaybackClock
from core.recognition.service import RecognitionService
from core.sequencing.sequencer import GestureSequencer
from core.sequencing.translator import TranslationService
from core.types import GestureSequence
from core.visuals.context import ContextualVisualGenerator
from core.visuals.video import MockVideoGenerator


@pytest.fixture
def sequencer() -> GestureSequencer:
    """Seeded gesture sequencer."""
    return GestureSequencer(seed=42)


@pytest.fixture
def hello_world(sequencer: GestureSequencer) -> GestureSequence:
    """Two-gesture sequence, 1000 ms per gesture."""
    return sequencer.sequence("Hello world", speed="normal")


@pytest.fixture
def completions() -> list[int]:
    """Collects one entry per completion callback."""
    return []


@pytest.fixture
def clock(hello_world: GestureSequence, completions: list[int]) -> PlaybackClock:
    return PlaybackClock(hello_world, on_complete=lambda: completions.append(1))


@pytest.fixture
def recognizer() -> RecognitionService:
    """Seeded recognizer with no artificial delay."""
    return RecognitionService(seed=42, latency_ms=0)


@pytest.fixture
def video_generator() -> MockVideoGenerator:
    return MockVideoGenerator(seed=42, poll_interval_ms=0)


@pytest.fixture
def client(recognizer: RecognitionService, video_generator: MockVideoGenerator) -> TestClient:
    """API client wired to seeded, zero-latency services."""
    app = create_app()
    translator = TranslationService(GestureSequencer(seed=42), latency_ms=0)
    visuals = ContextualVisualGenerator(latency_ms=0)

    app.dependency_overrides[get_translator] = lambda: translator
    app.dependency_overrides[get_recognizer] = lambda: recognizer
    app.dependency_overrides[get_visual_generator] = lambda: visuals
    app.dependency_overrides[get_video_generator] = lambda: video_generator
    return TestClient(app)
