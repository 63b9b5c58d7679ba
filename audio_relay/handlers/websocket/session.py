"""Per-connection session: one upstream live session per client WebSocket."""

from __future__ import annotations

import uuid
import asyncio
import logging
from typing import Protocol
from collections.abc import AsyncIterator

from fastapi import WebSocket

from audio_relay.errors import SendError
from audio_relay.state import GenerationState
from audio_relay.realtime.codec import encode_audio
from audio_relay.realtime.events import UpstreamEvent
from audio_relay.realtime.turns import TurnQueue, drain_turn
from audio_relay.realtime.machine import NowMsFn, apply_event
from audio_relay.realtime.signals import SignalKind, UpstreamSignal
from audio_relay.config.websocket import WS_STATUS_SESSION_OPENED, WS_STATUS_SESSION_CLOSED_PREFIX
from audio_relay.realtime.messages import ClientMessage, audio_message, error_message, status_message

from .errors import safe_send_json

logger = logging.getLogger(__name__)


class UpstreamSession(Protocol):
    async def send(self, audio_b64: str, mime_type: str) -> None: ...

    def signals(self) -> AsyncIterator[UpstreamSignal]: ...

    async def close(self) -> None: ...


class SessionOpener(Protocol):
    async def open_session(self) -> UpstreamSession: ...


class ConnectionSession:
    """Wires the upstream signals, the state machine and the drain loop to one client socket."""

    def __init__(
        self,
        ws: WebSocket,
        *,
        bridge: SessionOpener,
        audio_mime_type: str,
        now_ms: NowMsFn | None = None,
    ) -> None:
        self._ws = ws
        self._bridge = bridge
        self._audio_mime_type = audio_mime_type
        self._now_ms = now_ms

        self.session_id = uuid.uuid4().hex[:12]
        self.closed = False
        self.state = GenerationState()
        self.queue = TurnQueue()
        self.turns_completed = 0

        self._upstream: UpstreamSession | None = None
        self._pump_task: asyncio.Task | None = None
        self._drain_task: asyncio.Task | None = None

    async def start(self) -> None:
        """Open the upstream session. Raises `UpstreamConnectionError` on failure."""
        self._upstream = await self._bridge.open_session()
        self._pump_task = asyncio.create_task(self._pump_signals(), name=f"relay_pump:{self.session_id}")
        self._drain_task = asyncio.create_task(self._drain_loop(), name=f"relay_drain:{self.session_id}")

    async def send_json(self, message: ClientMessage) -> bool:
        if self.closed:
            return False
        return await safe_send_json(self._ws, message)

    async def relay_frame(self, frame: bytes) -> bool:
        audio_b64 = encode_audio(frame)
        logger.debug(
            "session_id=%s relaying %d bytes (b64 preview=%s)",
            self.session_id,
            len(frame),
            audio_b64[:30],
        )
        upstream = self._upstream
        try:
            if upstream is None:
                raise SendError("live session is not open")
            await upstream.send(audio_b64, self._audio_mime_type)
        except SendError as exc:
            logger.warning("session_id=%s audio relay failed: %s", self.session_id, exc)
            await self.send_json(error_message(str(exc)))
            return False
        return True

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True

        for task in (self._pump_task, self._drain_task):
            if task is None or task.done():
                continue
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.debug("session task ended with error during close", exc_info=True)
        self._pump_task = None
        self._drain_task = None

        upstream = self._upstream
        self._upstream = None
        if upstream is not None:
            await upstream.close()

    async def _on_upstream_event(self, event: UpstreamEvent) -> None:
        # Notifications go out before the event is queued so generation_start precedes its audio.
        for notice in apply_event(self.state, event, now_ms=self._now_ms):
            await self.send_json(notice)
        self.queue.enqueue(event)

    async def _pump_signals(self) -> None:
        upstream = self._upstream
        if upstream is None:
            return
        try:
            async for signal in upstream.signals():
                await self._handle_signal(signal)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("session_id=%s upstream signal pump failed", self.session_id)

    async def _handle_signal(self, signal: UpstreamSignal) -> None:
        if signal.kind is SignalKind.OPEN:
            await self.send_json(status_message(WS_STATUS_SESSION_OPENED))
        elif signal.kind is SignalKind.MESSAGE:
            if signal.event is not None:
                await self._on_upstream_event(signal.event)
        elif signal.kind is SignalKind.ERROR:
            await self.send_json(error_message(signal.error or "upstream error"))
        elif signal.kind is SignalKind.CLOSE:
            logger.info("session_id=%s upstream closed: %s", self.session_id, signal.reason)
            await self.send_json(status_message(f"{WS_STATUS_SESSION_CLOSED_PREFIX}{signal.reason or ''}"))

    async def _relay_audio(self, event: UpstreamEvent) -> None:
        if event.audio:
            await self.send_json(audio_message(encode_audio(event.audio)))

    async def _drain_loop(self) -> None:
        try:
            while not self.closed:
                turn = await drain_turn(self.queue, self._relay_audio)
                self.turns_completed += 1
                logger.info(
                    "session_id=%s turn %d complete: %d events, %d audio chunks",
                    self.session_id,
                    self.turns_completed,
                    len(turn),
                    _count_relayed(turn),
                )
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("session_id=%s drain loop failed", self.session_id)


def _count_relayed(turn: list[UpstreamEvent]) -> int:
    return sum(1 for event in turn if event.audio and not event.interrupted)


__all__ = ["ConnectionSession", "SessionOpener", "UpstreamSession"]
