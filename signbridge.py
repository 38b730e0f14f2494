"""SignBridge CLI — command-line interface for translation, recognition, playback, and serving.

Usage:
    python signbridge.py translate "Hello world" --speed fast
    python signbridge.py recognize --text "Thank you"
    python signbridge.py recognize --audio recording.webm
    python signbridge.py play "Nice to meet you" --fps 10
    python signbridge.py serve --port 8000
    python signbridge.py info
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from loguru import logger


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="signbridge",
        description="SignBridge — speech and text to sign language CLI",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- translate ----
    translate_parser = subparsers.add_parser("translate", help="Translate text into a gesture sequence")
    translate_parser.add_argument("text", type=str, help="Text to translate")
    translate_parser.add_argument("--speed", type=str, choices=["slow", "normal", "fast"], default="normal")
    translate_parser.add_argument("--language", type=str, default="asl", help="Sign language code")

    # ---- recognize ----
    recognize_parser = subparsers.add_parser("recognize", help="Run mock voice recognition")
    source = recognize_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="Direct text input")
    source.add_argument("--audio", type=str, help="Path to an audio file (contents are not decoded)")
    recognize_parser.add_argument("--language", type=str, default="en-US", help="Voice language")

    # ---- play ----
    play_parser = subparsers.add_parser("play", help="Simulate avatar playback in the terminal")
    play_parser.add_argument("text", type=str, nargs="?", default="", help="Text to sign (idle cycle if empty)")
    play_parser.add_argument("--speed", type=str, choices=["slow", "normal", "fast"], default="normal")
    play_parser.add_argument("--fps", type=float, default=10.0, help="Ticks per second")
    play_parser.add_argument("--realtime", action="store_true", help="Sleep between ticks")

    # ---- serve ----
    serve_parser = subparsers.add_parser("serve", help="Start the FastAPI API server")
    serve_parser.add_argument("--host", type=str, default="0.0.0.0", help="Host")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")
    serve_parser.add_argument("--workers", type=int, default=1, help="Number of workers")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # ---- info ----
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args(argv)

    if args.command == "translate":
        cmd_translate(args)
    elif args.command == "recognize":
        cmd_recognize(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    elif args.command == "info":
        cmd_info()


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Not JSON serializable: {type(obj).__name__}")


def cmd_translate(args: argparse.Namespace) -> None:
    """Print a gesture sequence as JSON."""
    from core.errors import InvalidInputError
    from core.sequencing.sequencer import GestureSequencer

    try:
        seq = GestureSequencer(seed=args.seed).sequence(args.text, speed=args.speed, language=args.language)
    except InvalidInputError as e:
        logger.error(str(e))
        sys.exit(1)

    payload = asdict(seq)
    payload["duration_ms"] = seq.duration_ms
    print(json.dumps(payload, indent=2, default=_jsonable))


def cmd_recognize(args: argparse.Namespace) -> None:
    """Print a mock recognition result as JSON."""
    from core.errors import MissingInputError
    from core.recognition.service import RecognitionService

    audio: bytes | None = None
    if args.audio:
        path = Path(args.audio)
        if not path.exists():
            logger.error(f"Audio file not found: {path}")
            sys.exit(1)
        audio = path.read_bytes()

    service = RecognitionService(seed=args.seed, latency_ms=0)
    try:
        result = service.recognize(text=args.text, audio_data=audio, language=args.language)
    except MissingInputError as e:
        logger.error(str(e))
        sys.exit(1)
    print(json.dumps(asdict(result), indent=2, default=_jsonable))


def cmd_play(args: argparse.Namespace) -> None:
    """Drive a PlaybackClock at a fixed tick rate and print each pose."""
    import time

    from backend.config import settings
    from core.playback.clock import PlaybackClock
    from core.sequencing.sequencer import GestureSequencer

    if args.fps <= 0:
        logger.error("--fps must be positive")
        sys.exit(1)

    sequence = None
    if args.text.strip():
        sequence = GestureSequencer(seed=args.seed).sequence(args.text, speed=args.speed)

    clock = PlaybackClock(
        sequence,
        on_complete=lambda: logger.info("Signing complete"),
        fallback_duration_ms=settings.playback_fallback_ms,
    )
    clock.start()
    delta_ms = 1000.0 / args.fps

    while True:
        frame = clock.tick(delta_ms)
        if frame.gesture is not None:
            hands = frame.gesture.hand_position
            expr = frame.gesture.facial_expression.value if frame.gesture.facial_expression else "-"
            print(
                f"{frame.elapsed_ms:8.0f} ms  [{frame.index}] {frame.gesture.name:<12} "
                f"{frame.progress:4.0%}  L=({hands.left.x:+.2f},{hands.left.y:.2f}) "
                f"R=({hands.right.x:+.2f},{hands.right.y:.2f})  {expr}"
            )
        elif frame.keyframe is not None:
            print(f"{frame.elapsed_ms:8.0f} ms  {frame.keyframe.description}")
        if frame.completed:
            break
        if args.realtime:
            time.sleep(delta_ms / 1000.0)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI API server."""
    import uvicorn

    logger.info("Starting SignBridge API server...")
    uvicorn.run(
        "backend.apps.api.main:app",
        host=args.host,
        port=args.port,
        workers=args.workers,
        reload=args.reload,
        log_level="info",
    )


def cmd_info() -> None:
    """Show system information."""
    import platform

    import fastapi
    import numpy as np

    from backend.config import settings
    from core.types import SIGN_LANGUAGES, SPEED_DURATIONS_MS

    speeds = ", ".join(f"{k}={v}ms" for k, v in SPEED_DURATIONS_MS.items())
    print(f"""
🤟 SignBridge — {settings.app_name} v{settings.app_version}
══════════════════════════════════════════════
  Python:       {platform.python_version()}
  Platform:     {platform.system()} {platform.machine()}
  FastAPI:      {fastapi.__version__}
  NumPy:        {np.__version__}
  Languages:    {", ".join(SIGN_LANGUAGES)}
  Speeds:       {speeds}
  Seed:         {settings.random_seed}
""")


if __name__ == "__main__":
    main()
