from .clock import Clock, monotonic_clock, saturating_since
from .events import (
    CallbackEventPublisher,
    PhaseChangeEvent,
    PhaseEventPublisher,
    QueueEventPublisher,
)
from .service import (
    InvalidConfigError,
    Phase,
    PhaseKind,
    PhaseTimer,
    TimerConfig,
    TimerSnapshot,
)

__all__ = [
    "CallbackEventPublisher",
    "Clock",
    "InvalidConfigError",
    "Phase",
    "PhaseChangeEvent",
    "PhaseEventPublisher",
    "PhaseKind",
    "PhaseTimer",
    "QueueEventPublisher",
    "TimerConfig",
    "TimerSnapshot",
    "monotonic_clock",
    "saturating_since",
]
