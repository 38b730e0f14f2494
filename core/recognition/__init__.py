"""Recognition module — mock voice transcription."""

from core.recognition.service import RecognitionService

__all__ = ["RecognitionService"]
