"""Guarded send helpers for the client WebSocket."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from audio_relay.realtime.messages import error_message

logger = logging.getLogger(__name__)


def is_open(ws: WebSocket) -> bool:
    return ws.client_state == WebSocketState.CONNECTED and ws.application_state == WebSocketState.CONNECTED


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    if not is_open(ws):
        return False
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, message: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(message).decode("utf-8"))


async def send_error(ws: WebSocket, message: str) -> bool:
    return await safe_send_json(ws, error_message(message))


async def close_quietly(ws: WebSocket, *, code: int, reason: str = "") -> None:
    if not is_open(ws):
        return
    try:
        await ws.close(code=code, reason=reason)
    except Exception:
        logger.debug("WebSocket close failed", exc_info=True)


__all__ = [
    "close_quietly",
    "is_open",
    "safe_send_json",
    "safe_send_text",
    "send_error",
]
