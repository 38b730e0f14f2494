# ============================================================
#  SignBridge — Pydantic API Schemas
# ============================================================
"""SignBridge — Pydantic API Schemas.

Wire format is camelCase; each response schema converts from the
matching core.types structure.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.recognition.service import VoiceSettings
from core.types import (
    GestureDescriptor,
    GestureSequence,
    JobStatus,
    RecognitionResult,
    VideoContent,
    VideoJob,
    VideoLength,
    VideoQuality,
    Visual,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


# ── Translation ──────────────────────────────────────────────


class Vector3Schema(CamelModel):
    x: float
    y: float
    z: float


class HandPositionSchema(CamelModel):
    left: Vector3Schema
    right: Vector3Schema


class BodyPositionSchema(CamelModel):
    rotation: float
    lean: float


class SignGesture(CamelModel):
    id: str
    name: str
    duration: int = Field(..., gt=0, description="Gesture duration in ms")
    hand_position: HandPositionSchema
    body_position: BodyPositionSchema
    facial_expression: str | None = None

    @classmethod
    def from_descriptor(cls, g: GestureDescriptor) -> SignGesture:
        left, right = g.hand_position.left, g.hand_position.right
        return cls(
            id=g.gesture_id,
            name=g.name,
            duration=g.duration_ms,
            hand_position=HandPositionSchema(
                left=Vector3Schema(x=left.x, y=left.y, z=left.z),
                right=Vector3Schema(x=right.x, y=right.y, z=right.z),
            ),
            body_position=BodyPositionSchema(
                rotation=g.body_position.rotation,
                lean=g.body_position.lean,
            ),
            facial_expression=g.facial_expression.value if g.facial_expression else None,
        )


class TranslationRequest(CamelModel):
    text: str | None = Field(None, description="Text to sign; null counts as empty")
    language: str | None = None
    speed: str | None = Field(None, description="slow | normal | fast")


class TranslationResponse(CamelModel):
    success: bool = True
    translated_text: str
    sign_sequence: list[SignGesture] = Field(default_factory=list)
    duration: int = Field(..., ge=0, description="Total duration in ms")
    confidence: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_sequence(cls, seq: GestureSequence) -> TranslationResponse:
        return cls(
            translated_text=seq.text,
            sign_sequence=[SignGesture.from_descriptor(g) for g in seq.gestures],
            duration=seq.duration_ms,
            confidence=seq.confidence,
        )


class TranslationStatus(CamelModel):
    status: str
    model_version: str
    supported_languages: list[str]
    accuracy: float
    uptime: str


# ── Voice ────────────────────────────────────────────────────


class VoiceProcessingRequest(CamelModel):
    audio_data: str | None = Field(None, description="Base64 encoded audio")
    text: str | None = None
    language: str | None = None
    enhance_audio: bool = False


class AudioQualitySchema(CamelModel):
    volume: float = Field(..., ge=0.0, le=1.0)
    clarity: float = Field(..., ge=0.0, le=1.0)
    background_noise: float = Field(..., ge=0.0, le=1.0)


class VoiceProcessingResponse(CamelModel):
    success: bool = True
    transcribed_text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    audio_quality: AudioQualitySchema
    suggestions: list[str] | None = None

    @classmethod
    def from_result(cls, r: RecognitionResult) -> VoiceProcessingResponse:
        q = r.audio_quality
        return cls(
            transcribed_text=r.transcribed_text,
            confidence=r.confidence,
            audio_quality=AudioQualitySchema(
                volume=q.volume,
                clarity=q.clarity,
                background_noise=q.background_noise,
            ),
            suggestions=list(r.suggestions) if r.suggestions else None,
        )


class VoiceLanguage(CamelModel):
    code: str
    name: str


class EnhancementFeatures(CamelModel):
    noise_reduction: bool
    auto_gain_control: bool
    echo_cancellation: bool


class QualityThresholds(CamelModel):
    min_volume: float
    min_clarity: float
    max_background_noise: float


class VoiceSettingsResponse(CamelModel):
    supported_languages: list[VoiceLanguage]
    default_language: str
    enhancement_features: EnhancementFeatures
    quality_thresholds: QualityThresholds

    @classmethod
    def from_settings(cls, s: VoiceSettings) -> VoiceSettingsResponse:
        return cls.model_validate(s.to_dict())


class VoiceSettingsUpdateResponse(CamelModel):
    success: bool = True
    message: str = "Voice settings updated successfully"
    settings: dict[str, Any] = Field(default_factory=dict)


# ── Visuals ──────────────────────────────────────────────────


class VisualsRequest(CamelModel):
    text: str = ""


class VisualSchema(CamelModel):
    id: str
    type: str
    url: str
    description: str
    relevance: float = Field(..., ge=0.0, le=1.0)
    category: str

    @classmethod
    def from_visual(cls, v: Visual) -> VisualSchema:
        return cls(
            id=v.id,
            type=v.type,
            url=v.url,
            description=v.description,
            relevance=v.relevance,
            category=v.category,
        )


class VideoContentSchema(VisualSchema):
    thumbnail: str
    duration: str

    @classmethod
    def from_video(cls, v: VideoContent) -> VideoContentSchema:
        return cls(
            id=v.id,
            type=v.type,
            url=v.url,
            thumbnail=v.thumbnail,
            description=v.description,
            duration=v.duration,
            relevance=v.relevance,
            category=v.category,
        )


class VisualsResponse(CamelModel):
    success: bool = True
    visuals: list[VisualSchema] = Field(default_factory=list)
    videos: list[VideoContentSchema] = Field(default_factory=list)


class VideoJobRequest(CamelModel):
    prompt: str
    quality: VideoQuality = VideoQuality.FULL_HD
    length: VideoLength = VideoLength.MEDIUM


class VideoJobResponse(CamelModel):
    job_id: str
    prompt: str
    quality: VideoQuality
    length: VideoLength
    status: JobStatus
    progress: float = Field(..., ge=0.0, le=100.0)
    url: str | None = None

    @classmethod
    def from_job(cls, job: VideoJob) -> VideoJobResponse:
        return cls(
            job_id=job.job_id,
            prompt=job.prompt,
            quality=job.quality,
            length=job.length,
            status=job.status,
            progress=round(job.progress, 2),
            url=job.url,
        )


# ── System ───────────────────────────────────────────────────


class ErrorResponse(CamelModel):
    success: bool = False
    error: str


class PingResponse(CamelModel):
    message: str


class HealthResponse(CamelModel):
    status: str = "healthy"
    version: str
    uptime_seconds: float
