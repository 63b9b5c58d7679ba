"""Tagged signals published by an upstream live session."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .events import UpstreamEvent


class SignalKind(enum.Enum):
    OPEN = "open"
    MESSAGE = "message"
    ERROR = "error"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class UpstreamSignal:
    kind: SignalKind
    event: UpstreamEvent | None = None
    error: str | None = None
    reason: str | None = None

    @classmethod
    def opened(cls) -> UpstreamSignal:
        return cls(kind=SignalKind.OPEN)

    @classmethod
    def message(cls, event: UpstreamEvent) -> UpstreamSignal:
        return cls(kind=SignalKind.MESSAGE, event=event)

    @classmethod
    def failed(cls, error: str) -> UpstreamSignal:
        return cls(kind=SignalKind.ERROR, error=error)

    @classmethod
    def closed(cls, reason: str) -> UpstreamSignal:
        return cls(kind=SignalKind.CLOSE, reason=reason)


__all__ = ["SignalKind", "UpstreamSignal"]
