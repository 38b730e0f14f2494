"""Tests for the signbridge command-line interface."""

from __future__ import annotations

import json

import pytest

import signbridge
from backend.config import settings


class TestTranslateCommand:
    def test_prints_sequence_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        signbridge.main(["--seed", "42", "translate", "Hello world", "--speed", "fast"])
        payload = json.loads(capsys.readouterr().out)

        assert payload["text"] == "Hello world"
        assert payload["speed"] == "fast"
        assert payload["language"] == "asl"
        assert payload["duration_ms"] == 1000
        assert [g["name"] for g in payload["gestures"]] == ["hello", "world"]
        assert [g["facial_expression"] for g in payload["gestures"]] == ["smile", "neutral"]
        assert set(payload["gestures"][0]["hand_position"]) == {"left", "right"}

    def test_seed_is_reproducible(self, capsys: pytest.CaptureFixture[str]) -> None:
        signbridge.main(["--seed", "7", "translate", "thank you"])
        first = capsys.readouterr().out
        signbridge.main(["--seed", "7", "translate", "thank you"])
        assert capsys.readouterr().out == first

    def test_blank_text_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            signbridge.main(["translate", "   "])
        assert exc_info.value.code == 1


class TestRecognizeCommand:
    def test_text_passthrough(self, capsys: pytest.CaptureFixture[str]) -> None:
        signbridge.main(["recognize", "--text", "Thank you"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["transcribed_text"] == "Thank you"
        assert payload["confidence"] == 1.0
        assert payload["suggestions"] is None


class TestPlayCommand:
    def test_plays_sequence_to_completion(self, capsys: pytest.CaptureFixture[str]) -> None:
        signbridge.main(["--seed", "1", "play", "good morning", "--speed", "fast", "--fps", "10"])
        lines = capsys.readouterr().out.splitlines()

        # two 500 ms gestures at 100 ms per tick; the completion frame has no gesture
        assert len(lines) == 9
        assert "[0] good" in lines[0]
        assert "[1] morning" in lines[-1]

    def test_idle_cycle_uses_configured_fallback(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "playback_fallback_ms", 1000.0)
        signbridge.main(["play", "--fps", "10"])
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 10
        assert lines[-1].split() == ["1000", "ms", "Rest", "position"]

    def test_rejects_non_positive_fps(self) -> None:
        with pytest.raises(SystemExit):
            signbridge.main(["play", "hello", "--fps", "0"])
