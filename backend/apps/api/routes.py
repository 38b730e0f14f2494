"""SignBridge — API Routes.

REST endpoints for translation, voice processing and contextual visuals.
All processing uses the core/ service modules.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import RedirectResponse
from loguru import logger

from backend.apps.api.dependencies import (
    get_recognizer,
    get_settings,
    get_translator,
    get_video_generator,
    get_visual_generator,
)
from backend.apps.api.schemas import (
    ErrorResponse,
    HealthResponse,
    PingResponse,
    TranslationRequest,
    TranslationResponse,
    TranslationStatus,
    VideoContentSchema,
    VideoJobRequest,
    VideoJobResponse,
    VisualSchema,
    VisualsRequest,
    VisualsResponse,
    VoiceProcessingRequest,
    VoiceProcessingResponse,
    VoiceSettingsResponse,
    VoiceSettingsUpdateResponse,
)
from backend.config import Settings
from core.errors import InternalFailureError, SignBridgeError
from core.recognition.service import RecognitionService
from core.sequencing.translator import TranslationService
from core.visuals.context import ContextualVisualGenerator
from core.visuals.video import MockVideoGenerator

router = APIRouter()

_ERRORS: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


# ── Health ───────────────────────────────────────────────────


@router.get("/ping", response_model=PingResponse, tags=["System"])
async def ping() -> PingResponse:
    return PingResponse(message="SignBridge API is running!")


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Liveness / readiness probe."""
    from backend.apps.api.main import get_uptime

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=round(get_uptime(), 2),
    )


# ── Translation ──────────────────────────────────────────────


@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses=_ERRORS,
    tags=["Translation"],
)
async def translate(
    request: TranslationRequest,
    translator: TranslationService = Depends(get_translator),
    settings: Settings = Depends(get_settings),
) -> TranslationResponse:
    """Translate text into a mock sign gesture sequence."""
    try:
        sequence = await translator.translate(
            request.text,
            language=request.language or settings.default_sign_language,
            speed=request.speed or settings.default_speed,
        )
    except SignBridgeError:
        raise
    except Exception as e:
        logger.error("Translation failed: {}", e)
        raise InternalFailureError("Internal server error during translation") from None

    return TranslationResponse.from_sequence(sequence)


@router.get("/translation-status", response_model=TranslationStatus, tags=["Translation"])
async def translation_status(
    translator: TranslationService = Depends(get_translator),
) -> TranslationStatus:
    return TranslationStatus(**translator.status())


# ── Voice ────────────────────────────────────────────────────


@router.post(
    "/voice/process",
    response_model=VoiceProcessingResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
    tags=["Voice"],
)
async def process_voice(
    request: VoiceProcessingRequest,
    recognizer: RecognitionService = Depends(get_recognizer),
    settings: Settings = Depends(get_settings),
) -> VoiceProcessingResponse:
    """Transcribe text or audio (mock) and score its quality."""
    try:
        result = await recognizer.process(
            text=request.text,
            audio_data=request.audio_data,
            language=request.language or settings.default_voice_language,
            enhance_audio=request.enhance_audio,
        )
    except SignBridgeError:
        raise
    except Exception as e:
        logger.error("Voice processing failed: {}", e)
        raise InternalFailureError("Internal server error during voice processing") from None

    return VoiceProcessingResponse.from_result(result)


@router.get("/voice/settings", response_model=VoiceSettingsResponse, tags=["Voice"])
async def get_voice_settings(
    recognizer: RecognitionService = Depends(get_recognizer),
) -> VoiceSettingsResponse:
    return VoiceSettingsResponse.from_settings(recognizer.voice_settings())


@router.post("/voice/settings", response_model=VoiceSettingsUpdateResponse, tags=["Voice"])
async def update_voice_settings(
    update: dict[str, Any] = Body(...),
) -> VoiceSettingsUpdateResponse:
    """Acknowledge a settings update. Nothing is stored."""
    logger.info("Updating voice settings: {}", update)
    return VoiceSettingsUpdateResponse(settings=update)


# ── Visuals ──────────────────────────────────────────────────


@router.post("/visuals", response_model=VisualsResponse, responses=_ERRORS, tags=["Visuals"])
async def contextual_visuals(
    request: VisualsRequest,
    generator: ContextualVisualGenerator = Depends(get_visual_generator),
) -> VisualsResponse:
    """Suggest images and videos for the concepts in a text."""
    try:
        visuals, videos = await generator.suggest(request.text)
    except SignBridgeError:
        raise
    except Exception as e:
        logger.error("Visual suggestion failed: {}", e)
        raise InternalFailureError("Internal server error during visual suggestion") from None

    return VisualsResponse(
        visuals=[VisualSchema.from_visual(v) for v in visuals],
        videos=[VideoContentSchema.from_video(v) for v in videos],
    )


@router.post(
    "/videos",
    response_model=VideoJobResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses=_ERRORS,
    tags=["Visuals"],
)
async def submit_video(
    request: VideoJobRequest,
    generator: MockVideoGenerator = Depends(get_video_generator),
) -> VideoJobResponse:
    """Queue a (simulated) video generation job."""
    try:
        job = generator.submit(request.prompt, quality=request.quality, length=request.length)
    except SignBridgeError:
        raise
    except Exception as e:
        logger.error("Video submission failed: {}", e)
        raise InternalFailureError("Internal server error during video generation") from None
    return VideoJobResponse.from_job(job)


@router.get(
    "/videos/{job_id}",
    response_model=VideoJobResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    tags=["Visuals"],
)
async def poll_video(
    job_id: str,
    generator: MockVideoGenerator = Depends(get_video_generator),
) -> VideoJobResponse:
    """Advance a job by one step and return its state."""
    try:
        job = generator.poll(job_id)
    except SignBridgeError:
        raise
    except Exception as e:
        logger.error("Video poll failed for {}: {}", job_id, e)
        raise InternalFailureError("Internal server error during video generation") from None
    return VideoJobResponse.from_job(job)


# ── Placeholder media ────────────────────────────────────────


@router.get("/placeholder/{width}/{height}", tags=["Visuals"], include_in_schema=False)
async def placeholder(
    width: int,
    height: int,
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    return RedirectResponse(
        f"{settings.placeholder_service_url}/{width}x{height}/E5E5E5/666666?text=Visual+Context"
    )
