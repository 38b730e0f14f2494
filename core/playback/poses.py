"""Idle keyframe poses cycled when the avatar has no sequence to sign."""

from __future__ import annotations

import math

from core.types import KeyframePose

KEYFRAME_POSES: tuple[KeyframePose, ...] = (
    KeyframePose(description="Rest position"),
    KeyframePose(
        description="Hello gesture",
        left_arm=(0.2, 0.0, 0.3),
        right_arm=(0.2, 0.0, -0.3),
        left_hand=(0.0, 0.0, 0.2),
        right_hand=(0.0, 0.0, -0.2),
    ),
    KeyframePose(
        description="Thank you",
        left_arm=(1.2, 0.0, 0.8),
        right_arm=(1.2, 0.0, -0.8),
        left_hand=(0.3, 0.0, 0.0),
        right_hand=(0.3, 0.0, 0.0),
    ),
    KeyframePose(
        description="Help gesture",
        left_arm=(0.8, 0.0, 0.6),
        right_arm=(0.6, 0.0, -0.4),
        left_hand=(0.1, 0.0, 0.1),
        right_hand=(0.1, 0.0, -0.1),
    ),
)

POSES_PER_SECOND = 0.7


def keyframe_at(elapsed_s: float) -> KeyframePose:
    """Keyframe shown at ``elapsed_s`` seconds into idle animation."""
    index = math.floor(elapsed_s * POSES_PER_SECOND) % len(KEYFRAME_POSES)
    return KEYFRAME_POSES[index]


def body_sway(elapsed_s: float) -> float:
    """Subtle Y rotation of the whole body."""
    return math.sin(elapsed_s * 0.3) * 0.05


def body_bob(elapsed_s: float) -> float:
    """Breathing-like vertical offset around the base height of -1."""
    return math.sin(elapsed_s * 2) * 0.02 - 1
