"""Simulated video generation provider.

Implements the :class:`core.types.VideoGenerator` protocol
(submit → poll → artifact URL) with random progress steps, so a real
provider can replace it without changing callers.
"""

from __future__ import annotations

import asyncio
import uuid
from collections import OrderedDict
from threading import Lock

import numpy as np
from loguru import logger

from core.errors import InvalidInputError, JobNotFoundError
from core.types import JobStatus, VideoJob, VideoLength, VideoQuality

MIN_PROMPT_LENGTH = 4
DEFAULT_MAX_JOBS = 1000


class MockVideoGenerator:
    """In-memory video job table with random progress.

    Each :meth:`poll` advances a job by a uniform step in ``[0, max_step)``
    percent; at 100 % the job completes with a URL under ``media_base``.
    Jobs live only as long as the process. The table holds at most
    ``max_jobs`` entries; the oldest completed jobs go first, then the
    oldest unfinished ones.

    Usage:
        >>> gen = MockVideoGenerator(seed=0, poll_interval_ms=0)
        >>> job = gen.submit("hello there")
        >>> job = await gen.await_completion(job.job_id)
        >>> job.url
        'https://example.com/veo3-video-....mp4'
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        media_base: str = "https://example.com",
        poll_interval_ms: float = 800.0,
        max_step: float = 15.0,
        max_jobs: int = DEFAULT_MAX_JOBS,
    ) -> None:
        if max_jobs <= 0:
            raise ValueError(f"max_jobs must be positive, got {max_jobs}")
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._media_base = media_base
        self._poll_interval_ms = poll_interval_ms
        self._max_step = max_step
        self._max_jobs = max_jobs
        self._jobs: OrderedDict[str, VideoJob] = OrderedDict()
        self._lock = Lock()

    def submit(
        self,
        prompt: str,
        quality: VideoQuality = VideoQuality.FULL_HD,
        length: VideoLength = VideoLength.MEDIUM,
    ) -> VideoJob:
        """Queue a job for ``prompt``.

        Raises:
            InvalidInputError: If the prompt is too short to illustrate.
        """
        if not prompt or len(prompt.strip()) < MIN_PROMPT_LENGTH:
            raise InvalidInputError(
                f"Prompt must be at least {MIN_PROMPT_LENGTH} characters"
            )
        job = VideoJob(
            job_id=uuid.uuid4().hex,
            prompt=prompt,
            quality=quality,
            length=length,
        )
        with self._lock:
            self._evict(room_for=1)
            self._jobs[job.job_id] = job
        logger.info("Video job queued | id={} quality={} length={}", job.job_id,
                    quality.value, length.value)
        return job

    def get(self, job_id: str) -> VideoJob:
        """Return a job without advancing it."""
        with self._lock:
            try:
                return self._jobs[job_id]
            except KeyError:
                raise JobNotFoundError(f"Video job not found: {job_id}") from None

    def poll(self, job_id: str) -> VideoJob:
        """Advance the job by one progress step and return it."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(f"Video job not found: {job_id}")
            if job.is_done:
                return job

            job.status = JobStatus.GENERATING
            job.progress += float(self._rng.uniform(0.0, self._max_step))
            if job.progress >= 100.0:
                job.progress = 100.0
                job.status = JobStatus.COMPLETED
                job.url = f"{self._media_base}/veo3-video-{job.job_id}.mp4"
                logger.info("Video job complete | id={} url={}", job.job_id, job.url)
            return job

    async def await_completion(self, job_id: str) -> VideoJob:
        """Poll every ``poll_interval_ms`` until the job completes."""
        job = self.poll(job_id)
        while not job.is_done:
            if self._poll_interval_ms > 0:
                await asyncio.sleep(self._poll_interval_ms / 1000.0)
            job = self.poll(job_id)
        return job

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    @property
    def max_jobs(self) -> int:
        return self._max_jobs

    def _evict(self, room_for: int) -> None:
        # Caller holds the lock.
        excess = len(self._jobs) + room_for - self._max_jobs
        if excess <= 0:
            return
        done = [job_id for job_id, job in self._jobs.items() if job.is_done]
        victims = done[:excess]
        if len(victims) < excess:
            pending = [job_id for job_id in self._jobs if job_id not in victims]
            victims += pending[: excess - len(victims)]
        for job_id in victims:
            del self._jobs[job_id]
        logger.debug("Evicted {} video job(s) | remaining={}", len(victims), len(self._jobs))
