"""Keyword-driven contextual visuals shown next to the avatar."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from loguru import logger

from core.types import VideoContent, Visual

MIN_TEXT_LENGTH = 4


@dataclass(frozen=True, slots=True)
class Concept:
    """A keyword group and the media it contributes."""

    keywords: frozenset[str]
    visual: Visual
    video: VideoContent


def _placeholder(base: str, width: int, height: int) -> str:
    return f"{base}/{width}/{height}"


class ContextualVisualGenerator:
    """Suggest images and videos related to the concepts in a text.

    Usage:
        >>> gen = ContextualVisualGenerator()
        >>> visuals, videos = gen.generate("hello, I am hungry")
    """

    def __init__(
        self,
        placeholder_base: str = "/api/placeholder",
        media_base: str = "https://example.com",
        latency_ms: float = 2000.0,
    ) -> None:
        self._placeholder_base = placeholder_base
        self._media_base = media_base
        self._latency_ms = latency_ms
        self._concepts = self._build_concepts()

    @property
    def concepts(self) -> tuple[Concept, ...]:
        return self._concepts

    def generate(self, text: str) -> tuple[list[Visual], list[VideoContent]]:
        """Return (visuals, videos) for ``text``.

        Texts of three characters or fewer produce no media.
        """
        if not text or len(text) < MIN_TEXT_LENGTH:
            return [], []

        words = set(text.lower().split())
        visuals: list[Visual] = []
        videos: list[VideoContent] = []
        for concept in self._concepts:
            if words & concept.keywords:
                visuals.append(concept.visual)
                videos.append(concept.video)

        visuals.extend(self._general_visuals())
        videos.extend(self._general_videos())
        logger.debug("Contextual media | visuals={} videos={}", len(visuals), len(videos))
        return visuals, videos

    async def suggest(self, text: str) -> tuple[list[Visual], list[VideoContent]]:
        """:meth:`generate` after the simulated analysis delay."""
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)
        return self.generate(text)

    # ----- Tables -----

    def _image(self) -> str:
        return _placeholder(self._placeholder_base, 200, 200)

    def _thumb(self) -> str:
        return _placeholder(self._placeholder_base, 300, 200)

    def _media(self, name: str) -> str:
        return f"{self._media_base}/{name}.mp4"

    def _build_concepts(self) -> tuple[Concept, ...]:
        return (
            Concept(
                keywords=frozenset({"hello", "hi", "greet"}),
                visual=Visual("greeting-img", "icon", self._image(),
                              "Greeting gesture visualization", 0.9, "Social"),
                video=VideoContent("greeting-video", "veo3", self._media("greeting-sign"),
                                   self._thumb(), "Sign language greeting demonstration",
                                   "0:08", 0.95, "Social"),
            ),
            Concept(
                keywords=frozenset({"eat", "food", "hungry"}),
                visual=Visual("food-img", "image", self._image(),
                              "Food and eating context", 0.85, "Daily Life"),
                video=VideoContent("food-video", "contextual", self._media("food-context"),
                                   self._thumb(), "Food-related sign language gestures",
                                   "0:12", 0.88, "Daily Life"),
            ),
            Concept(
                keywords=frozenset({"help", "assist", "support"}),
                visual=Visual("help-img", "diagram", self._image(),
                              "Help and assistance concept", 0.8, "Support"),
                video=VideoContent("help-video", "veo3", self._media("help-sign"),
                                   self._thumb(), "Help request in sign language",
                                   "0:10", 0.92, "Support"),
            ),
        )

    def _general_visuals(self) -> list[Visual]:
        return [
            Visual("general1", "icon", self._image(), "Main concept visualization", 0.75, "General"),
            Visual("general2", "image", self._image(), "Supporting context image", 0.7, "Context"),
        ]

    def _general_videos(self) -> list[VideoContent]:
        return [
            VideoContent("general-video1", "veo3", self._media("general-sign"), self._thumb(),
                         "General sign language interpretation", "0:15", 0.8, "General"),
            VideoContent("context-video1", "dalle", self._media("context-visual"), self._thumb(),
                         "Contextual visual explanation", "0:08", 0.75, "Context"),
        ]
