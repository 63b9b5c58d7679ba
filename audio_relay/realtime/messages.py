"""Builders for the JSON messages sent down to the browser client."""

from __future__ import annotations

from typing import Any

from audio_relay.config.websocket import (
    WS_KEY_DATA,
    WS_KEY_TYPE,
    WS_TYPE_AUDIO,
    WS_TYPE_ERROR,
    WS_KEY_MESSAGE,
    WS_KEY_TURN_ID,
    WS_TYPE_STATUS,
    WS_KEY_TIMESTAMP,
    WS_TYPE_INTERRUPT,
    WS_TYPE_GENERATION_START,
)

ClientMessage = dict[str, Any]


def status_message(message: str) -> ClientMessage:
    return {WS_KEY_TYPE: WS_TYPE_STATUS, WS_KEY_MESSAGE: message}


def audio_message(data: str) -> ClientMessage:
    return {WS_KEY_TYPE: WS_TYPE_AUDIO, WS_KEY_DATA: data}


def interrupt_message(turn_id: str | None, timestamp_ms: int) -> ClientMessage:
    return {WS_KEY_TYPE: WS_TYPE_INTERRUPT, WS_KEY_TURN_ID: turn_id, WS_KEY_TIMESTAMP: timestamp_ms}


def generation_start_message(turn_id: str) -> ClientMessage:
    return {WS_KEY_TYPE: WS_TYPE_GENERATION_START, WS_KEY_TURN_ID: turn_id}


def error_message(message: str) -> ClientMessage:
    return {WS_KEY_TYPE: WS_TYPE_ERROR, WS_KEY_MESSAGE: message or "error"}


__all__ = [
    "ClientMessage",
    "audio_message",
    "error_message",
    "generation_start_message",
    "interrupt_message",
    "status_message",
]
