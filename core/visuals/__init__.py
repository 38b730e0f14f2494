"""Visuals module — contextual media suggestions and video generation."""

from core.visuals.context import ContextualVisualGenerator
from core.visuals.video import MockVideoGenerator

__all__ = ["ContextualVisualGenerator", "MockVideoGenerator"]
