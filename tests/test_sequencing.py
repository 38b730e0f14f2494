"""Tests for core.sequencing — GestureSequencer and TranslationService."""

from __future__ import annotations

import asyncio
import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core.errors import InvalidInputError
from core.sequencing.sequencer import GestureSequencer, tokenize
from core.sequencing.translator import TranslationService
from core.types import FacialExpression, GestureSequence, Speed

_words = st.lists(
    st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=12),
    min_size=1,
    max_size=25,
)
_separators = st.sampled_from([" ", "  ", "\t", "\n", " \t "])


class TestGestureSequencer:
    """Tests for text → gesture sequence mapping."""

    def test_hello_world_normal(self, hello_world: GestureSequence) -> None:
        assert len(hello_world) == 2
        assert [g.duration_ms for g in hello_world] == [1000, 1000]
        assert hello_world.duration_ms == 2000
        assert [g.name for g in hello_world] == ["hello", "world"]
        assert [g.gesture_id for g in hello_world] == ["gesture_0", "gesture_1"]

    @pytest.mark.parametrize(
        ("speed", "expected"),
        [("slow", 1500), ("normal", 1000), ("fast", 500), (Speed.FAST, 500), ("SLOW", 1500)],
    )
    def test_speed_durations(self, sequencer: GestureSequencer, speed: str, expected: int) -> None:
        seq = sequencer.sequence("one two three", speed=speed)
        assert all(g.duration_ms == expected for g in seq)
        assert seq.duration_ms == 3 * expected

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty_text_raises(self, sequencer: GestureSequencer, text: str) -> None:
        with pytest.raises(InvalidInputError, match="Text is required"):
            sequencer.sequence(text)

    def test_unknown_speed_raises(self, sequencer: GestureSequencer) -> None:
        with pytest.raises(InvalidInputError, match="Unknown speed"):
            sequencer.sequence("hi", speed="warp")

    def test_expression_cycle(self, sequencer: GestureSequencer) -> None:
        seq = sequencer.sequence("a b c d e")
        assert [g.facial_expression for g in seq] == [
            FacialExpression.SMILE,
            FacialExpression.NEUTRAL,
            FacialExpression.CONCERN,
            FacialExpression.SMILE,
            FacialExpression.NEUTRAL,
        ]

    def test_seeded_is_deterministic(self) -> None:
        a = GestureSequencer(seed=7).sequence("thank you very much")
        b = GestureSequencer(seed=7).sequence("thank you very much")
        assert a == b

    def test_different_seeds_differ(self) -> None:
        a = GestureSequencer(seed=1).sequence("thank you")
        b = GestureSequencer(seed=2).sequence("thank you")
        assert a.gestures[0].hand_position != b.gestures[0].hand_position

    def test_tokenize_lowercases(self) -> None:
        assert tokenize("  Hello   WORLD\tAgain ") == ["hello", "world", "again"]

    def test_keeps_original_text(self, sequencer: GestureSequencer) -> None:
        seq = sequencer.sequence("Good Morning", language="bsl")
        assert seq.text == "Good Morning"
        assert seq.language == "bsl"
        assert seq.speed == Speed.NORMAL

    @given(words=_words, sep=_separators, speed=st.sampled_from(["slow", "normal", "fast"]))
    @settings(max_examples=60)
    def test_one_gesture_per_token(self, words: list[str], sep: str, speed: str) -> None:
        text = sep.join(words)
        seq = GestureSequencer(seed=0).sequence(text, speed=speed)
        assert len(seq) == len(words)
        assert seq.duration_ms == sum(g.duration_ms for g in seq)
        assert all(g.duration_ms > 0 for g in seq)

    @given(words=_words, seed=st.integers(0, 2**32 - 1))
    @settings(max_examples=60)
    def test_values_within_bounds(self, words: list[str], seed: int) -> None:
        sequencer = GestureSequencer(seed=seed)
        seq = sequencer.sequence(" ".join(words))
        b = sequencer.bounds

        assert 0.8 <= seq.confidence <= 1.0
        for g in seq:
            left, right = g.hand_position.left, g.hand_position.right
            assert b.left_x[0] <= left.x <= b.left_x[1]
            assert b.right_x[0] <= right.x <= b.right_x[1]
            for hand in (left, right):
                assert 0.5 <= hand.y <= 1.0
                assert 0.0 <= hand.z <= 0.2
            assert -0.1 <= g.body_position.rotation <= 0.1
            assert 0.0 <= g.body_position.lean <= 0.1


class TestTranslationService:
    """Tests for the async translation wrapper."""

    def test_translate(self, sequencer: GestureSequencer) -> None:
        service = TranslationService(sequencer, latency_ms=0)
        seq = asyncio.run(service.translate("see you later", language="isl", speed="fast"))
        assert len(seq) == 3
        assert seq.duration_ms == 1500
        assert seq.language == "isl"

    def test_translate_empty_raises(self, sequencer: GestureSequencer) -> None:
        service = TranslationService(sequencer, latency_ms=0)
        with pytest.raises(InvalidInputError):
            asyncio.run(service.translate(""))

    @pytest.mark.parametrize(("text", "speed"), [("", "normal"), ("   ", "normal"), ("hello", "warp")])
    def test_rejects_before_delay(
        self, sequencer: GestureSequencer, monkeypatch: pytest.MonkeyPatch, text: str, speed: str
    ) -> None:
        sleeps: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            sleeps.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        service = TranslationService(sequencer, latency_ms=10_000)
        with pytest.raises(InvalidInputError):
            asyncio.run(service.translate(text, speed=speed))
        assert sleeps == []

    def test_latency_applied(self, sequencer: GestureSequencer) -> None:
        import time

        service = TranslationService(sequencer, latency_ms=50)
        t0 = time.perf_counter()
        asyncio.run(service.translate("hi"))
        assert time.perf_counter() - t0 >= 0.045

    def test_status(self) -> None:
        status = TranslationService(latency_ms=0).status()
        assert status["status"] == "online"
        assert status["supported_languages"] == ["asl", "bsl", "isl"]
        assert status["accuracy"] == 0.94
