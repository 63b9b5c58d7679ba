from audio_relay.state import GenerationState

from .bridge import LiveBridge
from .events import UpstreamEvent
from .adapter import LiveSessionAdapter
from .turns import TurnQueue, drain_turn
from .machine import apply_event
from .signals import SignalKind, UpstreamSignal

__all__ = [
    "GenerationState",
    "LiveBridge",
    "LiveSessionAdapter",
    "SignalKind",
    "TurnQueue",
    "UpstreamEvent",
    "UpstreamSignal",
    "apply_event",
    "drain_turn",
]
