"""Base64 helpers for relayed audio payloads."""

from __future__ import annotations

import base64
import binascii

from audio_relay.errors import UpstreamProtocolError


def encode_audio(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_audio(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise UpstreamProtocolError(f"invalid base64 audio payload: {exc}") from exc


__all__ = ["decode_audio", "encode_audio"]
