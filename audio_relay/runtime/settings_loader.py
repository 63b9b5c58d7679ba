"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from audio_relay.config.secrets import get_gemini_api_key
from audio_relay.state.settings import (
    AppSettings,
    AuthSettings,
    ModelSettings,
    ServerSettings,
    ActivitySettings,
    WebSocketSettings,
)
from audio_relay.config.websocket import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_WS_ENDPOINT_PATH,
    DEFAULT_WS_ENDPOINT_PATH,
)
from audio_relay.config.models import (
    ENV_GEMINI_LIVE_MODEL,
    ENV_GEMINI_SYSTEM_PROMPT,
    DEFAULT_GEMINI_LIVE_MODEL,
    DEFAULT_GEMINI_SYSTEM_PROMPT,
)
from audio_relay.config.live import (
    END_SENSITIVITY_VALUES,
    START_SENSITIVITY_VALUES,
    ENV_AUDIO_INPUT_MIME_TYPE,
    ENV_GEMINI_END_SENSITIVITY,
    ENV_GEMINI_PREFIX_PADDING_MS,
    ENV_GEMINI_START_SENSITIVITY,
    DEFAULT_AUDIO_INPUT_MIME_TYPE,
    ENV_GEMINI_SILENCE_DURATION_MS,
    DEFAULT_GEMINI_END_SENSITIVITY,
    DEFAULT_GEMINI_PREFIX_PADDING_MS,
    DEFAULT_GEMINI_START_SENSITIVITY,
    DEFAULT_GEMINI_SILENCE_DURATION_MS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _validate_choice(name: str, value: str, allowed: frozenset[str]) -> str:
    normalized = value.strip().upper()
    if normalized not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(sorted(allowed))}; got {value!r}")
    return normalized


def _validate_non_negative_ms(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0; got {value}")
    return value


def _validate_endpoint_path(path: str) -> str:
    if not path.startswith("/"):
        raise ValueError(f"{ENV_WS_ENDPOINT_PATH} must start with '/'; got {path!r}")
    return path


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(api_key=get_gemini_api_key())


def _load_model_settings() -> ModelSettings:
    return ModelSettings(
        model_id=_str_env(ENV_GEMINI_LIVE_MODEL, DEFAULT_GEMINI_LIVE_MODEL),
        system_prompt=_str_env(ENV_GEMINI_SYSTEM_PROMPT, DEFAULT_GEMINI_SYSTEM_PROMPT),
    )


def _load_activity_settings() -> ActivitySettings:
    start = _str_env(ENV_GEMINI_START_SENSITIVITY, DEFAULT_GEMINI_START_SENSITIVITY)
    end = _str_env(ENV_GEMINI_END_SENSITIVITY, DEFAULT_GEMINI_END_SENSITIVITY)
    prefix_padding_ms = _int_env(ENV_GEMINI_PREFIX_PADDING_MS, DEFAULT_GEMINI_PREFIX_PADDING_MS)
    silence_duration_ms = _int_env(ENV_GEMINI_SILENCE_DURATION_MS, DEFAULT_GEMINI_SILENCE_DURATION_MS)

    return ActivitySettings(
        start_sensitivity=_validate_choice(ENV_GEMINI_START_SENSITIVITY, start, START_SENSITIVITY_VALUES),
        end_sensitivity=_validate_choice(ENV_GEMINI_END_SENSITIVITY, end, END_SENSITIVITY_VALUES),
        prefix_padding_ms=_validate_non_negative_ms(ENV_GEMINI_PREFIX_PADDING_MS, prefix_padding_ms),
        silence_duration_ms=_validate_non_negative_ms(ENV_GEMINI_SILENCE_DURATION_MS, silence_duration_ms),
    )


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        endpoint_path=_validate_endpoint_path(_str_env(ENV_WS_ENDPOINT_PATH, DEFAULT_WS_ENDPOINT_PATH)),
        audio_mime_type=_str_env(ENV_AUDIO_INPUT_MIME_TYPE, DEFAULT_AUDIO_INPUT_MIME_TYPE),
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT
    return ServerSettings(host=_str_env(ENV_HOST, DEFAULT_HOST), port=port)


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        model=_load_model_settings(),
        activity=_load_activity_settings(),
        websocket=_load_websocket_settings(),
        server=_load_server_settings(),
    )


__all__ = ["load_settings"]
