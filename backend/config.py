"""SignBridge — Centralised Settings (Pydantic v2).

Single source of truth for all configuration.
Loads from .env, environment variables, or defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────
    app_name: str = "SignBridge"
    app_version: str = "0.1.0"
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_dir: str = "logs"

    # ── Server ───────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    cors_origins: list[str] = ["*"]

    # ── Translation ──────────────────────────────────────────
    default_sign_language: str = "asl"
    default_speed: str = "normal"
    translation_latency_ms: float = 1000.0

    # ── Voice ────────────────────────────────────────────────
    default_voice_language: str = "en-US"
    recognition_latency_ms: float = 800.0
    min_volume: float = 0.3
    min_clarity: float = 0.6
    max_background_noise: float = 0.4

    # ── Visuals / video ──────────────────────────────────────
    visuals_latency_ms: float = 2000.0
    video_poll_interval_ms: float = 800.0
    video_max_jobs: int = 1000
    media_base_url: str = "https://example.com"
    placeholder_service_url: str = "https://via.placeholder.com"

    # ── Playback ─────────────────────────────────────────────
    playback_fallback_ms: float = 5000.0

    # ── Randomness ───────────────────────────────────────────
    random_seed: int | None = None

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return json.loads(v)
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent


settings = Settings()
