"""Playback module — frame-driven clock over gesture sequences."""

from core.playback.clock import PlaybackClock
from core.playback.poses import KEYFRAME_POSES

__all__ = ["KEYFRAME_POSES", "PlaybackClock"]
