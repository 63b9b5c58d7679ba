"""Adapter around one Gemini Live session.

The SDK's async session is exposed as a single ordered channel of
`UpstreamSignal`s (open, message, error, close) plus `send` and `close`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import AsyncIterator

from google import genai
from google.genai import types, errors as genai_errors

from audio_relay.errors import SendError, UpstreamProtocolError, UpstreamConnectionError

from .codec import decode_audio
from .events import project_event
from .signals import SignalKind, UpstreamSignal

logger = logging.getLogger(__name__)

_STREAM_ENDED_REASON = "upstream stream ended"
_RELAY_CLOSED_REASON = "closed by relay"
_CLOSE_NORMAL_CODE = 1000


def _close_reason(exc: genai_errors.APIError) -> str:
    # The SDK raises websocket closes as APIError(close_code, close_reason).
    if isinstance(exc.details, str) and exc.details:
        return exc.details
    if exc.message:
        return str(exc.message)
    return f"code {exc.code}" if exc.code is not None else _STREAM_ENDED_REASON


class LiveSessionAdapter:
    def __init__(
        self,
        *,
        client: genai.Client,
        model_id: str,
        config: types.LiveConnectConfig,
    ) -> None:
        self._client = client
        self._model_id = model_id
        self._config = config

        self._ctxmgr: Any = None
        self._session: Any = None
        self._receive_task: asyncio.Task | None = None
        self._signals: asyncio.Queue[UpstreamSignal] = asyncio.Queue()

        self._closed = False
        self._close_published = False
        self.messages_received = 0
        self.chunks_sent = 0

    @property
    def closed(self) -> bool:
        return self._closed

    async def open(self) -> None:
        ctxmgr = self._client.aio.live.connect(model=self._model_id, config=self._config)
        try:
            session = await ctxmgr.__aenter__()
        except Exception as exc:
            raise UpstreamConnectionError(f"failed to open live session: {exc}") from exc

        self._ctxmgr = ctxmgr
        self._session = session
        self._publish(UpstreamSignal.opened())
        self._receive_task = asyncio.create_task(self._receive_loop(), name=f"live_recv:{id(self):x}")
        logger.info("live session opened model=%s", self._model_id)

    async def send(self, audio_b64: str, mime_type: str) -> None:
        session = self._session
        if self._closed or session is None:
            raise SendError("live session is closed")
        try:
            await session.send_realtime_input(audio=types.Blob(data=decode_audio(audio_b64), mime_type=mime_type))
        except Exception as exc:
            raise SendError(f"failed to send audio upstream: {exc}") from exc
        self.chunks_sent += 1

    async def signals(self) -> AsyncIterator[UpstreamSignal]:
        while True:
            signal = await self._signals.get()
            yield signal
            if signal.kind is SignalKind.CLOSE:
                return

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        task = self._receive_task
        self._receive_task = None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.debug("live receive task ended with error during close", exc_info=True)

        ctxmgr = self._ctxmgr
        self._ctxmgr = None
        self._session = None
        if ctxmgr is not None:
            try:
                await ctxmgr.__aexit__(None, None, None)
            except Exception:
                logger.debug("live session close failed", exc_info=True)

        self._publish_close(_RELAY_CLOSED_REASON)
        logger.info(
            "live session closed: sent=%d audio chunks, received=%d messages",
            self.chunks_sent,
            self.messages_received,
        )

    def _publish(self, signal: UpstreamSignal) -> None:
        self._signals.put_nowait(signal)

    def _publish_close(self, reason: str) -> None:
        if self._close_published:
            return
        self._close_published = True
        self._publish(UpstreamSignal.closed(reason))

    def _dispatch(self, message: Any) -> None:
        self.messages_received += 1
        try:
            event = project_event(message)
        except UpstreamProtocolError as exc:
            logger.warning("dropping malformed upstream message: %s", exc)
            return
        self._publish(UpstreamSignal.message(event))

    async def _receive_loop(self) -> None:
        session = self._session
        reason = _STREAM_ENDED_REASON
        try:
            # receive() stops after each turn_complete; keep listening across turns.
            while not self._closed:
                received = 0
                async for message in session.receive():
                    received += 1
                    self._dispatch(message)
                if received == 0:
                    break
        except asyncio.CancelledError:
            raise
        except genai_errors.APIError as exc:
            reason = _close_reason(exc)
            if exc.code != _CLOSE_NORMAL_CODE:
                logger.warning("live connection lost code=%s reason=%s", exc.code, reason)
                self._publish(UpstreamSignal.failed(f"live connection lost: {reason}"))
        except Exception as exc:
            logger.exception("live receive loop failed")
            reason = str(exc) or type(exc).__name__
            self._publish(UpstreamSignal.failed(reason))
        self._publish_close(reason)


__all__ = ["LiveSessionAdapter"]
