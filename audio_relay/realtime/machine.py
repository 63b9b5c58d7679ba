"""Generation/interruption state machine.

`apply_event` is the only place a `GenerationState` changes. It runs once per
upstream event, in delivery order, and returns the client notifications that
the transition produced:

- `interrupted` sends `interrupt` with the turn id active at that moment, then
  clears the generation flag and the turn id.
- `model_turn_started` while idle mints a turn id and sends `generation_start`.
  While already generating it does nothing.
- `generation_complete` clears the generation flag but keeps the turn id until
  the turn closes, so a model turn that follows before `turn_complete` starts a
  new turn id.
- `turn_complete` clears both.
"""

from __future__ import annotations

import time
import logging
from collections.abc import Callable

from audio_relay.state.generation import GenerationState

from .events import UpstreamEvent
from .messages import ClientMessage, interrupt_message, generation_start_message

logger = logging.getLogger(__name__)

NowMsFn = Callable[[], int]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


def _mint_turn_id(state: GenerationState, now_ms: int) -> str:
    # Timestamp-derived, but strictly increasing per connection.
    ms = max(int(now_ms), state.last_turn_ms + 1)
    state.last_turn_ms = ms
    return str(ms)


def apply_event(
    state: GenerationState,
    event: UpstreamEvent,
    *,
    now_ms: NowMsFn | None = None,
) -> list[ClientMessage]:
    clock = now_ms or wall_clock_ms
    notices: list[ClientMessage] = []

    if event.interrupted:
        logger.info("interruption detected; stopping turn_id=%s", state.turn_id)
        notices.append(interrupt_message(state.turn_id, clock()))
        state.is_generating = False
        state.turn_id = None

    if event.model_turn_started and not state.is_generating:
        state.is_generating = True
        state.turn_id = _mint_turn_id(state, clock())
        notices.append(generation_start_message(state.turn_id))

    if event.generation_complete:
        state.is_generating = False

    if event.turn_complete:
        state.is_generating = False
        state.turn_id = None

    return notices


__all__ = ["NowMsFn", "apply_event", "wall_clock_ms"]
