"""Factory for per-connection Gemini Live sessions."""

from __future__ import annotations

import weakref
import logging

from google import genai
from google.genai import types

from audio_relay.errors import UpstreamConnectionError

from .adapter import LiveSessionAdapter

logger = logging.getLogger(__name__)


class LiveBridge:
    def __init__(self, *, api_key: str, model_id: str, config: types.LiveConnectConfig) -> None:
        self._client: genai.Client | None = genai.Client(api_key=api_key) if api_key else None
        self._model_id = model_id
        self._config = config
        self._sessions: weakref.WeakSet[LiveSessionAdapter] = weakref.WeakSet()

    async def open_session(self) -> LiveSessionAdapter:
        if self._client is None:
            raise UpstreamConnectionError("GEMINI_API_KEY is not configured")
        adapter = LiveSessionAdapter(client=self._client, model_id=self._model_id, config=self._config)
        await adapter.open()
        self._sessions.add(adapter)
        return adapter

    async def aclose(self) -> None:
        """Close any live session still open at shutdown."""
        for adapter in list(self._sessions):
            await adapter.close()
        self._sessions.clear()


__all__ = ["LiveBridge"]
