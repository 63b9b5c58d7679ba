"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    api_key: str


@dataclass(frozen=True, slots=True)
class ModelSettings:
    model_id: str
    system_prompt: str


@dataclass(frozen=True, slots=True)
class ActivitySettings:
    start_sensitivity: str
    end_sensitivity: str
    prefix_padding_ms: int
    silence_duration_ms: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    endpoint_path: str
    audio_mime_type: str


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    model: ModelSettings
    activity: ActivitySettings
    websocket: WebSocketSettings
    server: ServerSettings


__all__ = [
    "ActivitySettings",
    "AppSettings",
    "AuthSettings",
    "ModelSettings",
    "ServerSettings",
    "WebSocketSettings",
]
