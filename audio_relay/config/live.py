"""Live session audio and activity-detection settings (env names and defaults only)."""

from __future__ import annotations

ENV_GEMINI_START_SENSITIVITY = "GEMINI_START_SENSITIVITY"
ENV_GEMINI_END_SENSITIVITY = "GEMINI_END_SENSITIVITY"
ENV_GEMINI_PREFIX_PADDING_MS = "GEMINI_PREFIX_PADDING_MS"
ENV_GEMINI_SILENCE_DURATION_MS = "GEMINI_SILENCE_DURATION_MS"
ENV_AUDIO_INPUT_MIME_TYPE = "AUDIO_INPUT_MIME_TYPE"

START_SENSITIVITY_VALUES = frozenset({"START_SENSITIVITY_LOW", "START_SENSITIVITY_HIGH", "START_SENSITIVITY_MEDIUM"})
END_SENSITIVITY_VALUES = frozenset({"END_SENSITIVITY_LOW", "END_SENSITIVITY_HIGH", "END_SENSITIVITY_MEDIUM"})

DEFAULT_GEMINI_START_SENSITIVITY = "START_SENSITIVITY_MEDIUM"
DEFAULT_GEMINI_END_SENSITIVITY = "END_SENSITIVITY_MEDIUM"
DEFAULT_GEMINI_PREFIX_PADDING_MS = 20
DEFAULT_GEMINI_SILENCE_DURATION_MS = 100

# Browser clients stream PCM16 mono at 16kHz; the relay never looks inside the frames.
DEFAULT_AUDIO_INPUT_MIME_TYPE = "audio/pcm;rate=16000"

__all__ = [
    "DEFAULT_AUDIO_INPUT_MIME_TYPE",
    "DEFAULT_GEMINI_END_SENSITIVITY",
    "DEFAULT_GEMINI_PREFIX_PADDING_MS",
    "DEFAULT_GEMINI_SILENCE_DURATION_MS",
    "DEFAULT_GEMINI_START_SENSITIVITY",
    "END_SENSITIVITY_VALUES",
    "ENV_AUDIO_INPUT_MIME_TYPE",
    "ENV_GEMINI_END_SENSITIVITY",
    "ENV_GEMINI_PREFIX_PADDING_MS",
    "ENV_GEMINI_SILENCE_DURATION_MS",
    "ENV_GEMINI_START_SENSITIVITY",
    "START_SENSITIVITY_VALUES",
]
