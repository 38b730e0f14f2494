"""Text to gesture sequence mapping.

Each whitespace-delimited token becomes one mock gesture with a
speed-dependent duration and a pseudo-random pose. There is no sign
language linguistics here: the poses only have to look plausible
on the avatar.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from loguru import logger

from core.errors import InvalidInputError
from core.types import (
    DEFAULT_SIGN_LANGUAGE,
    SEQUENCE_CONFIDENCE_RANGE,
    BodyPosition,
    FacialExpression,
    GestureDescriptor,
    GestureSequence,
    HandPosition,
    Speed,
    Vector3,
)

_EXPRESSION_CYCLE = (
    FacialExpression.SMILE,
    FacialExpression.NEUTRAL,
    FacialExpression.CONCERN,
)


@dataclass(frozen=True, slots=True)
class PoseBounds:
    """Sampling ranges for generated poses.

    Attributes:
        left_x: Left hand x range.
        right_x: Right hand x range.
        hand_y: Hand height range (both hands).
        hand_z: Hand depth range (both hands).
        rotation: Body rotation range.
        lean: Body lean range.
    """

    left_x: tuple[float, float] = (-0.25, 0.25)
    right_x: tuple[float, float] = (0.25, 0.75)
    hand_y: tuple[float, float] = (0.5, 1.0)
    hand_z: tuple[float, float] = (0.0, 0.2)
    rotation: tuple[float, float] = (-0.1, 0.1)
    lean: tuple[float, float] = (0.0, 0.1)


def parse_speed(speed: Speed | str) -> Speed:
    """Coerce a speed name to :class:`Speed`."""
    if isinstance(speed, Speed):
        return speed
    try:
        return Speed(str(speed).lower())
    except ValueError:
        valid = ", ".join(s.value for s in Speed)
        raise InvalidInputError(f"Unknown speed '{speed}', expected one of: {valid}") from None


def tokenize(text: str) -> list[str]:
    """Lower-case and split text on whitespace."""
    return text.lower().split()


class GestureSequencer:
    """Generate mock gesture sequences from text.

    Randomness comes from an injected numpy Generator so sequences are
    reproducible under a fixed seed.

    Usage:
        >>> sequencer = GestureSequencer(seed=7)
        >>> seq = sequencer.sequence("Hello world", speed="normal")
        >>> seq.duration_ms
        2000
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        bounds: PoseBounds | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._bounds = bounds or PoseBounds()

    @property
    def bounds(self) -> PoseBounds:
        return self._bounds

    @staticmethod
    def validate(text: str | None, speed: Speed | str = Speed.NORMAL) -> Speed:
        """Check the request without drawing any randomness.

        Raises:
            InvalidInputError: If text is empty or speed is unknown.
        """
        if text is None or not text.strip():
            raise InvalidInputError("Text is required for translation")
        return parse_speed(speed)

    def sequence(
        self,
        text: str,
        speed: Speed | str = Speed.NORMAL,
        language: str = DEFAULT_SIGN_LANGUAGE,
    ) -> GestureSequence:
        """Build a gesture sequence for ``text``.

        Args:
            text: Input text; tokens are split on whitespace.
            speed: ``slow``, ``normal`` or ``fast``.
            language: Target sign language code (informational only).

        Returns:
            A GestureSequence with one descriptor per token.

        Raises:
            InvalidInputError: If text is empty or speed is unknown.
        """
        speed = self.validate(text, speed)
        tokens = tokenize(text)
        gestures = tuple(
            self._make_gesture(index, token, speed.duration_ms)
            for index, token in enumerate(tokens)
        )
        confidence = float(self._rng.uniform(*SEQUENCE_CONFIDENCE_RANGE))

        logger.debug(
            "Sequenced {} tokens | speed={} language={} confidence={:.3f}",
            len(gestures),
            speed.value,
            language,
            confidence,
        )
        return GestureSequence(
            text=text,
            gestures=gestures,
            confidence=confidence,
            language=language,
            speed=speed,
        )

    def _make_gesture(self, index: int, token: str, duration_ms: int) -> GestureDescriptor:
        b = self._bounds
        return GestureDescriptor(
            gesture_id=f"gesture_{index}",
            name=token,
            duration_ms=duration_ms,
            hand_position=HandPosition(
                left=Vector3(
                    x=self._uniform(b.left_x),
                    y=self._uniform(b.hand_y),
                    z=self._uniform(b.hand_z),
                ),
                right=Vector3(
                    x=self._uniform(b.right_x),
                    y=self._uniform(b.hand_y),
                    z=self._uniform(b.hand_z),
                ),
            ),
            body_position=BodyPosition(
                rotation=self._uniform(b.rotation),
                lean=self._uniform(b.lean),
            ),
            facial_expression=_EXPRESSION_CYCLE[index % len(_EXPRESSION_CYCLE)],
        )

    def _uniform(self, bounds: tuple[float, float]) -> float:
        return float(self._rng.uniform(*bounds))
