from __future__ import annotations

import pytest

from audio_relay.runtime.settings_loader import load_settings
from audio_relay.config.models import DEFAULT_GEMINI_LIVE_MODEL

_ENV_NAMES = (
    "GEMINI_API_KEY",
    "GEMINI_LIVE_MODEL",
    "GEMINI_SYSTEM_PROMPT",
    "GEMINI_START_SENSITIVITY",
    "GEMINI_END_SENSITIVITY",
    "GEMINI_PREFIX_PADDING_MS",
    "GEMINI_SILENCE_DURATION_MS",
    "AUDIO_INPUT_MIME_TYPE",
    "WS_ENDPOINT_PATH",
    "HOST",
    "PORT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.auth.api_key == ""
    assert settings.model.model_id == DEFAULT_GEMINI_LIVE_MODEL
    assert "Revolt Motors" in settings.model.system_prompt
    assert settings.activity.start_sensitivity == "START_SENSITIVITY_MEDIUM"
    assert settings.activity.end_sensitivity == "END_SENSITIVITY_MEDIUM"
    assert settings.activity.prefix_padding_ms == 20
    assert settings.activity.silence_duration_ms == 100
    assert settings.websocket.endpoint_path == "/api/genai-audio"
    assert settings.websocket.audio_mime_type == "audio/pcm;rate=16000"
    assert settings.server.port == 5050


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "  key-123 ")
    monkeypatch.setenv("GEMINI_LIVE_MODEL", "gemini-live-2.5-flash-preview")
    monkeypatch.setenv("GEMINI_START_SENSITIVITY", "start_sensitivity_high")
    monkeypatch.setenv("GEMINI_SILENCE_DURATION_MS", "250")
    monkeypatch.setenv("WS_ENDPOINT_PATH", "/ws")
    monkeypatch.setenv("PORT", "8080")

    settings = load_settings()
    assert settings.auth.api_key == "key-123"
    assert settings.model.model_id == "gemini-live-2.5-flash-preview"
    assert settings.activity.start_sensitivity == "START_SENSITIVITY_HIGH"
    assert settings.activity.silence_duration_ms == 250
    assert settings.websocket.endpoint_path == "/ws"
    assert settings.server.port == 8080


def test_unparseable_or_out_of_range_port_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    assert load_settings().server.port == 5050
    monkeypatch.setenv("PORT", "70000")
    assert load_settings().server.port == 5050


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("GEMINI_START_SENSITIVITY", "LOUD"),
        ("GEMINI_END_SENSITIVITY", "START_SENSITIVITY_LOW"),
        ("GEMINI_PREFIX_PADDING_MS", "-5"),
        ("GEMINI_SILENCE_DURATION_MS", "-1"),
        ("WS_ENDPOINT_PATH", "api/genai-audio"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()
