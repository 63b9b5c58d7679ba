"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from audio_relay.state import RuntimeDeps
from audio_relay.errors import UpstreamConnectionError
from audio_relay.config.websocket import WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE

from .session import ConnectionSession
from .errors import send_error, close_quietly
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    await ws.accept()
    session = ConnectionSession(
        ws,
        bridge=runtime_deps.live_bridge,
        audio_mime_type=runtime_deps.settings.websocket.audio_mime_type,
    )
    logger.info("WebSocket client connected session_id=%s", session.session_id)

    try:
        try:
            await session.start()
        except UpstreamConnectionError as exc:
            logger.warning("session_id=%s live session failed to open: %s", session.session_id, exc)
            await send_error(ws, str(exc))
            await close_quietly(ws, code=WS_CLOSE_UPSTREAM_UNAVAILABLE_CODE, reason="live session unavailable")
            return

        await run_message_loop(ws, session)
    except WebSocketDisconnect:
        logger.debug("session_id=%s client disconnected mid-receive", session.session_id)
    finally:
        await session.close()
        logger.info(
            "WebSocket client disconnected session_id=%s turns=%d",
            session.session_id,
            session.turns_completed,
        )


__all__ = ["handle_websocket_connection"]
