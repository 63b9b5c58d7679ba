"""WebSocket protocol configuration and constants."""

from __future__ import annotations

ENV_WS_ENDPOINT_PATH = "WS_ENDPOINT_PATH"
ENV_HOST = "HOST"
ENV_PORT = "PORT"

DEFAULT_WS_ENDPOINT_PATH = "/api/genai-audio"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5050

HEALTH_TEXT = "GenAI Audio Streaming Backend is running."

# Outbound message keys
WS_KEY_TYPE = "type"
WS_KEY_MESSAGE = "message"
WS_KEY_DATA = "data"
WS_KEY_TURN_ID = "turnId"
WS_KEY_TIMESTAMP = "timestamp"

# Outbound message types
WS_TYPE_STATUS = "status"
WS_TYPE_AUDIO = "audio"
WS_TYPE_INTERRUPT = "interrupt"
WS_TYPE_GENERATION_START = "generation_start"
WS_TYPE_ERROR = "error"

WS_MESSAGE_TYPES = frozenset(
    {WS_TYPE_STATUS, WS_TYPE_AUDIO, WS_TYPE_INTERRUPT, WS_TYPE_GENERATION_START, WS_TYPE_ERROR}
)

WS_STATUS_SESSION_OPENED = "Session opened"
WS_STATUS_SESSION_CLOSED_PREFIX = "Session closed: "

# Close codes
WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE = 1011

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_WS_ENDPOINT_PATH",
    "ENV_HOST",
    "ENV_PORT",
    "ENV_WS_ENDPOINT_PATH",
    "HEALTH_TEXT",
    "WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE",
    "WS_KEY_DATA",
    "WS_KEY_MESSAGE",
    "WS_KEY_TIMESTAMP",
    "WS_KEY_TURN_ID",
    "WS_KEY_TYPE",
    "WS_MESSAGE_TYPES",
    "WS_STATUS_SESSION_CLOSED_PREFIX",
    "WS_STATUS_SESSION_OPENED",
    "WS_TYPE_AUDIO",
    "WS_TYPE_ERROR",
    "WS_TYPE_GENERATION_START",
    "WS_TYPE_INTERRUPT",
    "WS_TYPE_STATUS",
]
