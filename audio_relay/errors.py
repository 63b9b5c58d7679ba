"""Shared error types for the audio relay."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class UpstreamConnectionError(Exception):
    """Raised when the upstream live session cannot be opened."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False, slots=True)
class SendError(Exception):
    """Raised when audio cannot be relayed to the upstream session."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False, slots=True)
class UpstreamProtocolError(Exception):
    """Raised when an upstream message has an unexpected shape."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = ["SendError", "UpstreamConnectionError", "UpstreamProtocolError"]
