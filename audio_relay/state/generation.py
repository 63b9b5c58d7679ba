"""Per-connection generation state driven by upstream events."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class GenerationState:
    """Whether the assistant is speaking and which turn it is speaking in.

    Only `realtime.machine.apply_event` mutates this. `turn_id` is set while
    generating; it also survives `generation_complete` until the turn closes.
    """

    is_generating: bool = False
    turn_id: str | None = None
    last_turn_ms: int = 0


__all__ = ["GenerationState"]
