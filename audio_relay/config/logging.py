"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = (os.getenv("LOG_FORMAT") or "").strip() or "%(asctime)s %(levelname)s %(name)s: %(message)s"

# google-genai and websockets log every frame at DEBUG. Keep them tame unless asked.
ENV_SHOW_UPSTREAM_LOGS = "SHOW_UPSTREAM_LOGS"
UPSTREAM_LOGGERS: tuple[str, ...] = ("google_genai", "websockets", "httpx", "httpcore")

__all__ = ["ENV_SHOW_UPSTREAM_LOGS", "LOG_FORMAT", "LOG_LEVEL", "UPSTREAM_LOGGERS"]
