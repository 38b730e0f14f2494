"""Frame-driven playback clock for the signing avatar.

The clock owns a PlaybackState and is advanced by an external render loop
through :meth:`PlaybackClock.tick`. Each tick returns a PoseFrame describing
what to draw, so renderers never mutate playback state themselves.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from core.playback.poses import KEYFRAME_POSES, body_bob, body_sway, keyframe_at
from core.types import (
    PLAYBACK_FALLBACK_MS,
    GestureSequence,
    PlaybackState,
    PlaybackStatus,
    PoseFrame,
)


class PlaybackClock:
    """Idle → Playing ⇄ Paused → Idle state machine over a gesture sequence.

    Completion fires ``on_complete`` exactly once per ``start()``; a
    ``reset()`` cancels it. Without a sequence the clock plays the idle
    keyframe cycle for ``fallback_duration_ms``.

    Usage:
        >>> clock = PlaybackClock(sequence, on_complete=lambda: print("done"))
        >>> clock.start()
        >>> # In your render loop:
        >>> frame = clock.tick(delta_ms)
        >>> if frame.gesture:
        ...     draw(frame.gesture.hand_position)
    """

    def __init__(
        self,
        sequence: GestureSequence | None = None,
        on_complete: Callable[[], None] | None = None,
        fallback_duration_ms: float = PLAYBACK_FALLBACK_MS,
    ) -> None:
        if fallback_duration_ms <= 0:
            raise ValueError("fallback_duration_ms must be positive")
        self._state = PlaybackState(sequence=sequence)
        self._on_complete = on_complete
        self._fallback_ms = float(fallback_duration_ms)
        self._completion_pending = False

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def status(self) -> PlaybackStatus:
        return self._state.status

    @property
    def elapsed_ms(self) -> float:
        return self._state.elapsed_ms

    @property
    def sequence(self) -> GestureSequence | None:
        return self._state.sequence

    @property
    def total_duration_ms(self) -> float:
        """Sequence duration, or the fallback when no sequence is loaded."""
        seq = self._state.sequence
        if seq is None or seq.duration_ms <= 0:
            return self._fallback_ms
        return float(seq.duration_ms)

    # ----- Transitions -----

    def load(self, sequence: GestureSequence | None) -> None:
        """Replace the sequence; playback returns to Idle."""
        self.reset()
        self._state.sequence = sequence

    def start(self) -> None:
        """Begin playback from the start, from any state."""
        self._state.elapsed_ms = 0.0
        self._state.status = PlaybackStatus.PLAYING
        self._completion_pending = True
        logger.debug("Playback started | duration={} ms", self.total_duration_ms)

    def pause(self) -> bool:
        """Freeze elapsed time. Returns False unless currently Playing."""
        if self._state.status is not PlaybackStatus.PLAYING:
            return False
        self._state.status = PlaybackStatus.PAUSED
        return True

    def resume(self) -> bool:
        """Continue after a pause. Returns False unless currently Paused."""
        if self._state.status is not PlaybackStatus.PAUSED:
            return False
        self._state.status = PlaybackStatus.PLAYING
        return True

    def toggle(self) -> PlaybackStatus:
        """Play/pause button: start from Idle, otherwise flip Playing/Paused."""
        if self._state.status is PlaybackStatus.IDLE:
            self.start()
        elif self._state.status is PlaybackStatus.PLAYING:
            self.pause()
        else:
            self.resume()
        return self._state.status

    def reset(self) -> None:
        """Return to Idle at elapsed=0 and cancel any pending completion."""
        self._state.elapsed_ms = 0.0
        self._state.status = PlaybackStatus.IDLE
        self._completion_pending = False

    # ----- Per-frame -----

    def tick(self, delta_ms: float) -> PoseFrame:
        """Advance by ``delta_ms`` (only while Playing) and return the pose.

        Raises:
            ValueError: If ``delta_ms`` is negative.
        """
        if delta_ms < 0:
            raise ValueError(f"delta_ms must be non-negative, got {delta_ms}")

        if self._state.status is not PlaybackStatus.PLAYING:
            return self.frame()

        total = self.total_duration_ms
        self._state.elapsed_ms = min(self._state.elapsed_ms + delta_ms, total)
        if self._state.elapsed_ms < total:
            return self.frame()

        self._state.status = PlaybackStatus.IDLE
        fired = self._completion_pending
        self._completion_pending = False
        if fired:
            logger.debug("Playback complete | elapsed={} ms", self._state.elapsed_ms)
            if self._on_complete is not None:
                self._on_complete()
        return self.frame(completed=fired)

    def frame(self, completed: bool = False) -> PoseFrame:
        """Pose for the current state without advancing."""
        state = self._state
        elapsed_s = state.elapsed_ms / 1000.0
        active = state.status is not PlaybackStatus.IDLE
        sway = body_sway(elapsed_s) if active else 0.0
        bob = body_bob(elapsed_s) if active else -1.0

        seq = state.sequence
        if seq is None or len(seq) == 0:
            return PoseFrame(
                status=state.status,
                elapsed_ms=state.elapsed_ms,
                keyframe=keyframe_at(elapsed_s) if active else KEYFRAME_POSES[0],
                body_sway=sway,
                body_bob=bob,
                completed=completed,
            )

        index = state.active_index
        if index is None:
            return PoseFrame(
                status=state.status,
                elapsed_ms=state.elapsed_ms,
                body_sway=sway,
                body_bob=bob,
                completed=completed,
            )

        gesture = seq.gestures[index]
        window_start = seq.boundaries[index - 1] if index > 0 else 0
        progress = (state.elapsed_ms - window_start) / gesture.duration_ms
        return PoseFrame(
            status=state.status,
            elapsed_ms=state.elapsed_ms,
            index=index,
            gesture=gesture,
            progress=progress,
            body_sway=sway,
            body_bob=bob,
            completed=completed,
        )
