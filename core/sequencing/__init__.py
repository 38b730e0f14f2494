"""Sequencing module — text to timed mock gesture sequences."""

from core.sequencing.sequencer import GestureSequencer
from core.sequencing.translator import TranslationService

__all__ = ["GestureSequencer", "TranslationService"]
