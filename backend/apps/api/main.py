# ============================================================
#  SignBridge — FastAPI Application Factory
# ============================================================
"""
FastAPI application with:
  • REST endpoints for translation, voice processing and visuals
  • Structured {success: false, error} responses for domain, validation
    and unexpected errors
  • CORS, security headers, request ID middleware
  • Structured logging integration
  • Graceful startup / shutdown lifecycle
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from loguru import logger

from backend.apps.api.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from backend.apps.api.routes import router as api_router
from backend.config import settings
from backend.logging_config import setup_logging
from core.errors import (
    InvalidInputError,
    JobNotFoundError,
    MissingInputError,
    SignBridgeError,
)

_start_time: float = time.time()

_STATUS_BY_ERROR: dict[type[SignBridgeError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    MissingInputError: status.HTTP_400_BAD_REQUEST,
    JobNotFoundError: status.HTTP_404_NOT_FOUND,
}


def get_uptime() -> float:
    return time.time() - _start_time


def status_for(exc: SignBridgeError) -> int:
    """HTTP status for a domain error; unknown kinds are internal failures."""
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def signbridge_error_handler(request: Request, exc: SignBridgeError) -> ORJSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc)
    else:
        logger.warning("{} {} rejected: {}", request.method, request.url.path, exc)
    return ORJSONResponse(status_code=code, content={"success": False, "error": str(exc)})


def describe_validation_error(exc: RequestValidationError) -> str:
    """One-line summary of the first request validation failure."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if first.get("type") == "json_invalid" or not field:
        return f"Invalid request: {first.get('msg', 'malformed body')}"
    return f"Invalid request: {field}: {first.get('msg')}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    message = describe_validation_error(exc)
    logger.warning("{} {} rejected: {}", request.method, request.url.path, message)
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    logger.exception("{} {} crashed: {}", request.method, request.url.path, exc)
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ANN001
    """Startup / shutdown lifecycle."""
    global _start_time
    _start_time = time.time()
    setup_logging()
    logger.info(
        "🤟 {} v{} starting  |  env={}  debug={}",
        settings.app_name,
        settings.app_version,
        settings.app_env,
        settings.debug,
    )
    yield
    logger.info("SignBridge shutting down gracefully")


def create_app() -> FastAPI:
    """Application factory."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "🤟 **SignBridge** — speech and text to animated sign language.\n\n"
            "Translation, recognition and video generation are simulated."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # ── Middleware ────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    # ── Errors ───────────────────────────────────────────────
    app.add_exception_handler(SignBridgeError, signbridge_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ── Routes ───────────────────────────────────────────────
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
