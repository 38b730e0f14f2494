"""SignBridge — FastAPI backend (server mode).

This package exposes the translation, voice and visuals services over
REST. The domain logic lives in the root `core/` package and runs
without this server.
"""
