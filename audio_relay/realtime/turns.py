"""Turn queue and drain loop for upstream events."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Awaitable

from .events import UpstreamEvent

RelayAudioFn = Callable[[UpstreamEvent], Awaitable[None]]


class TurnQueue:
    """Unbounded FIFO between upstream delivery and the drain loop."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[UpstreamEvent] = asyncio.Queue()

    def enqueue(self, event: UpstreamEvent) -> None:
        self._queue.put_nowait(event)

    async def wait_next(self) -> UpstreamEvent:
        return await self._queue.get()

    def pending(self) -> int:
        return self._queue.qsize()


async def drain_turn(queue: TurnQueue, relay_audio: RelayAudioFn) -> list[UpstreamEvent]:
    """Consume events up to and including the next `turn_complete`.

    Audio on non-interrupted events is relayed before the next event is pulled.
    """
    turn: list[UpstreamEvent] = []
    while True:
        event = await queue.wait_next()
        turn.append(event)

        if event.audio and not event.interrupted:
            await relay_audio(event)

        if event.turn_complete:
            return turn


__all__ = ["RelayAudioFn", "TurnQueue", "drain_turn"]
