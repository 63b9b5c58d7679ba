"""Logging initialization."""

from __future__ import annotations

import os
import logging

from audio_relay.config.logging import LOG_LEVEL, LOG_FORMAT, UPSTREAM_LOGGERS, ENV_SHOW_UPSTREAM_LOGS


def configure_logging() -> None:
    if (os.getenv(ENV_SHOW_UPSTREAM_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        for name in UPSTREAM_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
