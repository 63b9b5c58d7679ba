"""Runtime dependency construction (Gemini Live bridge)."""

from __future__ import annotations

import logging

from audio_relay.state import RuntimeDeps
from audio_relay.state.settings import AppSettings
from audio_relay.realtime.bridge import LiveBridge
from audio_relay.realtime.live_config import build_live_config

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    if not settings.auth.api_key:
        # Misconfiguration: every session open will fail and be reported to the client.
        logger.warning("GEMINI_API_KEY is not set; live sessions cannot be opened")

    live_bridge = LiveBridge(
        api_key=settings.auth.api_key,
        model_id=settings.model.model_id,
        config=build_live_config(settings),
    )
    logger.info("runtime: live model=%s endpoint=%s", settings.model.model_id, settings.websocket.endpoint_path)

    return RuntimeDeps(live_bridge=live_bridge, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
