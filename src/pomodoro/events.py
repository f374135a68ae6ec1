"""Phase change events and the publisher contracts that receive them."""

from __future__ import annotations

from dataclasses import dataclass
from queue import Queue
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from .service import PhaseKind


@dataclass(frozen=True)
class PhaseChangeEvent:
    """Event emitted once every time the timer moves to a new phase."""
    previous_kind: PhaseKind
    kind: PhaseKind
    session_index: int
    duration_seconds: int

    @property
    def title(self) -> str:
        return self.kind.title


class PhaseEventPublisher(Protocol):
    """Protocol for receivers of phase change events."""

    def publish(self, event: PhaseChangeEvent) -> None: ...


class CallbackEventPublisher:
    """Event publisher that hands every event to a plain callable."""

    def __init__(self, callback: Callable[[PhaseChangeEvent], None]):
        self._callback = callback

    def publish(self, event: PhaseChangeEvent) -> None:
        self._callback(event)


class QueueEventPublisher:
    """Event publisher that pushes events to a queue."""

    def __init__(self, queue: Queue):
        self._queue = queue

    def publish(self, event: PhaseChangeEvent) -> None:
        self._queue.put(event)
