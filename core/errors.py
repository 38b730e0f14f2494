"""Error kinds raised by SignBridge core services."""

from __future__ import annotations


class SignBridgeError(Exception):
    """Base class for all SignBridge domain errors."""


class InvalidInputError(SignBridgeError, ValueError):
    """Input was present but unusable (e.g. empty text, unknown speed)."""


class MissingInputError(SignBridgeError, ValueError):
    """Neither text nor audio was supplied."""


class JobNotFoundError(SignBridgeError, LookupError):
    """No video job with the requested id."""


class InternalFailureError(SignBridgeError, RuntimeError):
    """Unexpected failure during mock processing."""
