"""Gemini Live model configuration (env names and defaults only)."""

from __future__ import annotations

ENV_GEMINI_LIVE_MODEL = "GEMINI_LIVE_MODEL"
ENV_GEMINI_SYSTEM_PROMPT = "GEMINI_SYSTEM_PROMPT"

DEFAULT_GEMINI_LIVE_MODEL = "gemini-2.5-flash-preview-native-audio-dialog"

DEFAULT_GEMINI_SYSTEM_PROMPT = (
    "You are Rev, the helpful voice assistant for Revolt Motors. "
    "Only talk about Revolt Motors, its electric motorcycles, bookings, test rides, "
    "dealerships and service. Keep answers short and conversational, and reply in the "
    "language the user speaks. If asked about anything unrelated, politely steer the "
    "conversation back to Revolt Motors."
)

__all__ = [
    "DEFAULT_GEMINI_LIVE_MODEL",
    "DEFAULT_GEMINI_SYSTEM_PROMPT",
    "ENV_GEMINI_LIVE_MODEL",
    "ENV_GEMINI_SYSTEM_PROMPT",
]
