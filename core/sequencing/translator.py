"""Async translation front-end over the gesture sequencer."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from core.sequencing.sequencer import GestureSequencer
from core.types import DEFAULT_SIGN_LANGUAGE, SIGN_LANGUAGES, GestureSequence, Speed


class TranslationService:
    """Simulated text → sign translation with artificial latency.

    Usage:
        >>> service = TranslationService(GestureSequencer(seed=1), latency_ms=0)
        >>> seq = await service.translate("thank you")
    """

    MODEL_VERSION = "1.2.3"

    def __init__(
        self,
        sequencer: GestureSequencer | None = None,
        latency_ms: float = 1000.0,
    ) -> None:
        self._sequencer = sequencer or GestureSequencer()
        self._latency_ms = latency_ms

    @property
    def latency_ms(self) -> float:
        return self._latency_ms

    async def translate(
        self,
        text: str | None,
        language: str = DEFAULT_SIGN_LANGUAGE,
        speed: Speed | str = Speed.NORMAL,
    ) -> GestureSequence:
        """Translate text into a gesture sequence after the simulated delay.

        Bad input is rejected before the delay.
        """
        self._sequencer.validate(text, speed)
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)
        sequence = self._sequencer.sequence(text, speed=speed, language=language)
        logger.info(
            "Translated {} words → {} ms of signing ({})",
            len(sequence),
            sequence.duration_ms,
            language,
        )
        return sequence

    def status(self) -> dict[str, Any]:
        """Static capability descriptor."""
        return {
            "status": "online",
            "model_version": self.MODEL_VERSION,
            "supported_languages": list(SIGN_LANGUAGES),
            "accuracy": 0.94,
            "uptime": "99.9%",
        }
