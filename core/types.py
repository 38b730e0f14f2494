"""Shared types, protocols, and constants for SignBridge core."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from itertools import accumulate
from typing import Protocol


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SPEED_DURATIONS_MS: dict[str, int] = {
    "slow": 1500,
    "normal": 1000,
    "fast": 500,
}
DEFAULT_SPEED = "normal"
DEFAULT_SIGN_LANGUAGE = "asl"
SIGN_LANGUAGES: tuple[str, ...] = ("asl", "bsl", "isl")

SEQUENCE_CONFIDENCE_RANGE = (0.8, 1.0)
AUDIO_CONFIDENCE_RANGE = (0.7, 1.0)

PLAYBACK_FALLBACK_MS = 5000


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Speed(Enum):
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"

    @property
    def duration_ms(self) -> int:
        return SPEED_DURATIONS_MS[self.value]


class FacialExpression(Enum):
    """Expression tag cycled across the gestures of a sequence."""
    SMILE = "smile"
    NEUTRAL = "neutral"
    CONCERN = "concern"


class PlaybackStatus(Enum):
    """Lifecycle of avatar playback."""
    IDLE = auto()
    PLAYING = auto()
    PAUSED = auto()


class VideoQuality(Enum):
    HD = "720p"
    FULL_HD = "1080p"
    UHD = "4K"


class VideoLength(Enum):
    SHORT = "5s"
    MEDIUM = "10s"
    LONG = "30s"


class JobStatus(Enum):
    QUEUED = "queued"
    GENERATING = "generating"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# Gesture Data Structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class HandPosition:
    """Target positions of both hands in avatar space."""
    left: Vector3 = field(default_factory=Vector3)
    right: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True, slots=True)
class BodyPosition:
    rotation: float = 0.0
    lean: float = 0.0


@dataclass(frozen=True, slots=True)
class GestureDescriptor:
    """One timed pose unit, produced for a single input token.

    Attributes:
        gesture_id: Stable identifier, ``gesture_<index>``.
        name: Lower-cased token the gesture stands for.
        duration_ms: Time the avatar holds this gesture (always > 0).
        hand_position: Left/right hand coordinates.
        body_position: Torso rotation and lean.
        facial_expression: Optional expression tag.
    """
    gesture_id: str
    name: str
    duration_ms: int
    hand_position: HandPosition = field(default_factory=HandPosition)
    body_position: BodyPosition = field(default_factory=BodyPosition)
    facial_expression: FacialExpression | None = None

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError(f"Gesture duration must be positive, got {self.duration_ms}")


@dataclass(frozen=True, slots=True)
class GestureSequence:
    """Ordered gestures for one translated utterance.

    Attributes:
        text: Source text the sequence was generated from.
        gestures: Ordered gesture descriptors.
        confidence: Overall translation confidence [0, 1].
        language: Target sign language code.
        speed: Speed setting used to time the gestures.
    """
    text: str
    gestures: tuple[GestureDescriptor, ...]
    confidence: float
    language: str = DEFAULT_SIGN_LANGUAGE
    speed: Speed = Speed.NORMAL

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must lie in [0, 1], got {self.confidence}")

    @property
    def duration_ms(self) -> int:
        return sum(g.duration_ms for g in self.gestures)

    @property
    def boundaries(self) -> list[int]:
        """Cumulative end time of each gesture, in milliseconds."""
        return list(accumulate(g.duration_ms for g in self.gestures))

    def index_at(self, elapsed_ms: float) -> int | None:
        """Index of the gesture whose window contains ``elapsed_ms``.

        Returns None before the start or at/after the total duration.
        """
        if elapsed_ms < 0 or elapsed_ms >= self.duration_ms:
            return None
        return bisect_right(self.boundaries, elapsed_ms)

    def __len__(self) -> int:
        return len(self.gestures)

    def __iter__(self) -> Iterator[GestureDescriptor]:
        return iter(self.gestures)


# ---------------------------------------------------------------------------
# Playback Data Structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyframePose:
    """Euler rotations (x, y, z) of the avatar limbs for an idle keyframe."""
    description: str
    left_arm: tuple[float, float, float] = (0.0, 0.0, 0.0)
    right_arm: tuple[float, float, float] = (0.0, 0.0, 0.0)
    left_hand: tuple[float, float, float] = (0.0, 0.0, 0.0)
    right_hand: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass(slots=True)
class PlaybackState:
    """Mutable playback state owned by a PlaybackClock."""
    sequence: GestureSequence | None = None
    elapsed_ms: float = 0.0
    status: PlaybackStatus = PlaybackStatus.IDLE

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    @property
    def active_index(self) -> int | None:
        if self.sequence is None:
            return None
        return self.sequence.index_at(self.elapsed_ms)


@dataclass(frozen=True, slots=True)
class PoseFrame:
    """Everything a renderer needs to draw the avatar for one tick.

    Attributes:
        status: Playback status after this tick.
        elapsed_ms: Elapsed playback time.
        index: Active gesture index, if any.
        gesture: Active gesture descriptor, if any.
        progress: Fraction [0, 1] of the active gesture already played.
        keyframe: Idle keyframe pose when no sequence is loaded.
        body_sway: Body Y rotation offset.
        body_bob: Body Y position offset.
        completed: True only on the tick that finished playback.
    """
    status: PlaybackStatus
    elapsed_ms: float
    index: int | None = None
    gesture: GestureDescriptor | None = None
    progress: float = 0.0
    keyframe: KeyframePose | None = None
    body_sway: float = 0.0
    body_bob: float = -1.0
    completed: bool = False


# ---------------------------------------------------------------------------
# Recognition Data Structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AudioQuality:
    volume: float = 1.0
    clarity: float = 1.0
    background_noise: float = 0.0


@dataclass(frozen=True, slots=True)
class RecognitionResult:
    """Output of the mock voice recognition path.

    ``suggestions`` is None rather than empty when there is nothing to suggest.
    """
    transcribed_text: str
    confidence: float
    audio_quality: AudioQuality = field(default_factory=AudioQuality)
    suggestions: tuple[str, ...] | None = None
    language: str = "en-US"

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must lie in [0, 1], got {self.confidence}")


# ---------------------------------------------------------------------------
# Visual Data Structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Visual:
    id: str
    type: str  # image | icon | diagram
    url: str
    description: str
    relevance: float
    category: str


@dataclass(frozen=True, slots=True)
class VideoContent:
    id: str
    type: str  # veo3 | dalle | contextual
    url: str
    thumbnail: str
    description: str
    duration: str
    relevance: float
    category: str


@dataclass(slots=True)
class VideoJob:
    """A video generation job tracked by a VideoGenerator."""
    job_id: str
    prompt: str
    quality: VideoQuality = VideoQuality.FULL_HD
    length: VideoLength = VideoLength.MEDIUM
    status: JobStatus = JobStatus.QUEUED
    progress: float = 0.0
    url: str | None = None

    @property
    def is_done(self) -> bool:
        return self.status is JobStatus.COMPLETED


# ---------------------------------------------------------------------------
# Protocols (Interfaces)
# ---------------------------------------------------------------------------

class VideoGenerator(Protocol):
    """Protocol for external video generation providers."""

    def submit(
        self,
        prompt: str,
        quality: VideoQuality = VideoQuality.FULL_HD,
        length: VideoLength = VideoLength.MEDIUM,
    ) -> VideoJob:
        """Queue a generation job."""
        ...

    def poll(self, job_id: str) -> VideoJob:
        """Refresh and return the job's current state."""
        ...

    async def await_completion(self, job_id: str) -> VideoJob:
        """Poll until the job completes and return it."""
        ...
