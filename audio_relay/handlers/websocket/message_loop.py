"""WebSocket receive loop: every inbound frame is raw audio for the live session."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

from .session import ConnectionSession

logger = logging.getLogger(__name__)


def frame_bytes(message: dict[str, Any]) -> bytes:
    data = message.get("bytes")
    if data is not None:
        return bytes(data)
    text = message.get("text")
    if text is not None:
        return text.encode("utf-8")
    return b""


async def run_message_loop(ws: WebSocket, session: ConnectionSession) -> None:
    while True:
        message = await ws.receive()
        if message.get("type") == "websocket.disconnect":
            logger.debug("session_id=%s client sent close code=%s", session.session_id, message.get("code"))
            return
        await session.relay_frame(frame_bytes(message))


__all__ = ["frame_bytes", "run_message_loop"]
