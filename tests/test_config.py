"""Tests for backend.config and backend.logging_config."""

from __future__ import annotations

import pytest
from loguru import logger

from backend import logging_config
from backend.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.app_name == "SignBridge"
        assert s.translation_latency_ms == 1000.0
        assert s.recognition_latency_ms == 800.0
        assert s.playback_fallback_ms == 5000.0
        assert s.random_seed is None
        assert not s.is_production

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSLATION_LATENCY_MS", "0")
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings(_env_file=None)
        assert s.translation_latency_ms == 0.0
        assert s.random_seed == 42
        assert s.is_production

    def test_cors_from_json_string(self) -> None:
        s = Settings(_env_file=None, cors_origins='["http://localhost:5173"]')
        assert s.cors_origins == ["http://localhost:5173"]


class TestLogging:
    def test_setup_without_file_sink(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(logging_config.settings, "log_dir", "")
        logging_config.setup_logging()
        logger.info("logging configured for test")

    def test_setup_with_file_sink(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # noqa: ANN001
        monkeypatch.setattr(logging_config.settings, "log_dir", str(tmp_path))
        logging_config.setup_logging()
        logger.info("hello file sink")
        logger.complete()
        logger.remove()
        assert any(p.name.startswith("signbridge_") for p in tmp_path.iterdir())
