"""Configuration module exports (env names and defaults only)."""

from .websocket import DEFAULT_WS_ENDPOINT_PATH

__all__ = [
    "DEFAULT_WS_ENDPOINT_PATH",
]
