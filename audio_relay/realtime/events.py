"""Projection of Gemini Live server messages into relay events."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from audio_relay.errors import UpstreamProtocolError

from .codec import decode_audio


@dataclass(frozen=True, slots=True)
class UpstreamEvent:
    """The fields of one upstream message the relay acts on."""

    audio: bytes | None = None
    interrupted: bool = False
    model_turn_started: bool = False
    generation_complete: bool = False
    turn_complete: bool = False
    raw: Any = field(default=None, compare=False, repr=False)


def _flag(server_content: Any, name: str) -> bool:
    value = getattr(server_content, name, None)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise UpstreamProtocolError(f"server_content.{name} must be a bool, got {type(value).__name__}")
    return value


def _audio_from_model_turn(model_turn: Any) -> bytes | None:
    parts = getattr(model_turn, "parts", None) or []
    chunks: list[bytes] = []
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is None:
            continue
        data = getattr(inline_data, "data", None)
        if data is None:
            continue
        if isinstance(data, (bytes, bytearray)):
            chunks.append(bytes(data))
        elif isinstance(data, str):
            chunks.append(decode_audio(data))
        else:
            raise UpstreamProtocolError(f"inline_data.data must be bytes or base64 text, got {type(data).__name__}")
    if not chunks:
        return None
    return b"".join(chunks)


def project_event(message: Any) -> UpstreamEvent:
    """Project a `LiveServerMessage` onto an `UpstreamEvent`.

    Messages without `server_content` (setup acks, usage metadata, go-away
    notices) become flagless events; they still travel through the turn queue.
    """
    if message is None:
        raise UpstreamProtocolError("upstream message is empty")

    server_content = getattr(message, "server_content", None)
    if server_content is None:
        return UpstreamEvent(raw=message)

    model_turn = getattr(server_content, "model_turn", None)
    return UpstreamEvent(
        audio=_audio_from_model_turn(model_turn) if model_turn is not None else None,
        interrupted=_flag(server_content, "interrupted"),
        model_turn_started=model_turn is not None,
        generation_complete=_flag(server_content, "generation_complete"),
        turn_complete=_flag(server_content, "turn_complete"),
        raw=message,
    )


__all__ = ["UpstreamEvent", "project_event"]
