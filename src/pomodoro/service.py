"""Phase timer state machine cycling focus, short break and long break."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .clock import Clock, monotonic_clock, saturating_since
from .constants import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    PHASE_FOCUS,
    PHASE_LONG_BREAK,
    PHASE_SHORT_BREAK,
    PHASE_TITLES,
    SECONDS_PER_MINUTE,
)
from .events import PhaseChangeEvent, PhaseEventPublisher


class InvalidConfigError(ValueError):
    """Raised when timer configuration values cannot drive the phase cycle."""


class PhaseKind(str, Enum):
    FOCUS = PHASE_FOCUS
    SHORT_BREAK = PHASE_SHORT_BREAK
    LONG_BREAK = PHASE_LONG_BREAK

    @property
    def title(self) -> str:
        return PHASE_TITLES[self.value]

    @property
    def is_break(self) -> bool:
        return self is not PhaseKind.FOCUS


@dataclass(frozen=True)
class TimerConfig:
    """Phase lengths in minutes and the long break cadence."""
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    short_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_minutes: int = DEFAULT_LONG_BREAK_MINUTES
    long_every: int = DEFAULT_LONG_BREAK_EVERY

    def __post_init__(self) -> None:
        for field in ("focus_minutes", "short_minutes", "long_minutes", "long_every"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(f"{field} must be an integer, got: {value!r}")
            if value < 1:
                raise InvalidConfigError(f"{field} must be at least 1, got: {value}")

    def duration_for(self, kind: PhaseKind) -> int:
        """Return the configured duration of `kind` in seconds."""
        if kind is PhaseKind.FOCUS:
            return self.focus_minutes * SECONDS_PER_MINUTE
        if kind is PhaseKind.SHORT_BREAK:
            return self.short_minutes * SECONDS_PER_MINUTE
        return self.long_minutes * SECONDS_PER_MINUTE


@dataclass(frozen=True)
class Phase:
    kind: PhaseKind
    duration_seconds: int


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable timer view handed to renderers once per frame."""
    kind: PhaseKind
    session_index: int
    duration_seconds: int
    elapsed_seconds: float
    remaining_seconds: float
    progress: float
    paused: bool

    @property
    def title(self) -> str:
        return self.kind.title


class PhaseTimer:
    """Pomodoro phase cycle with pause-aware elapsed time.

    Pausing records `paused_at`; resuming shifts `phase_started_at` forward by
    the paused span, so elapsed time is always `now - phase_started_at` while
    running.
    """

    def __init__(
        self,
        config: TimerConfig,
        *,
        clock: Clock = monotonic_clock,
        publisher: Optional[PhaseEventPublisher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not isinstance(config, TimerConfig):
            raise InvalidConfigError("config must be a TimerConfig")

        self._config = config
        self._clock = clock
        self._publisher = publisher
        self._logger = logger or logging.getLogger("pomodoro")

        self.session_index = 0
        self.current_phase = self._build_phase(PhaseKind.FOCUS)
        self.phase_started_at = self._clock()
        self.paused = False
        self.paused_at: Optional[float] = None

    def elapsed_in_phase(self, now: Optional[float] = None) -> float:
        if self.paused:
            if self.paused_at is None:
                return 0.0
            return saturating_since(self.paused_at, self.phase_started_at)

        now = self._now(now)
        return saturating_since(now, self.phase_started_at)

    def time_remaining(self, now: Optional[float] = None) -> float:
        elapsed = self.elapsed_in_phase(now)
        return saturating_since(float(self.current_phase.duration_seconds), elapsed)

    def progress(self, now: Optional[float] = None) -> float:
        elapsed = self.elapsed_in_phase(now)
        total = max(1.0, float(self.current_phase.duration_seconds))
        return min(1.0, max(0.0, elapsed / total))

    def snapshot(self, now: Optional[float] = None) -> TimerSnapshot:
        now = self._now(now)
        return TimerSnapshot(
            kind=self.current_phase.kind,
            session_index=self.session_index,
            duration_seconds=self.current_phase.duration_seconds,
            elapsed_seconds=self.elapsed_in_phase(now),
            remaining_seconds=self.time_remaining(now),
            progress=self.progress(now),
            paused=self.paused,
        )

    def toggle_pause(self) -> None:
        now = self._clock()
        if self.paused:
            if self.paused_at is not None:
                self.phase_started_at += saturating_since(now, self.paused_at)
            self.paused = False
            self.paused_at = None
            self._logger.info(
                "Phase resumed: phase=%s remaining=%.0fs",
                self.current_phase.kind.value,
                self.time_remaining(now),
            )
            return

        self.paused = True
        self.paused_at = now
        self._logger.info(
            "Phase paused: phase=%s remaining=%.0fs",
            self.current_phase.kind.value,
            self.time_remaining(now),
        )

    def reset_phase(self) -> None:
        self._restart_phase()
        self._logger.info("Phase reset: phase=%s", self.current_phase.kind.value)

    def skip(self) -> None:
        self._logger.info("Phase skipped: phase=%s", self.current_phase.kind.value)
        self.advance_phase()

    def advance_if_due(self, now: Optional[float] = None) -> bool:
        """Advance to the next phase when the running phase has no time left."""
        if self.paused:
            return False
        if self.time_remaining(now) > 0:
            return False
        self.advance_phase()
        return True

    def advance_phase(self) -> None:
        previous_kind = self.current_phase.kind
        if previous_kind is PhaseKind.FOCUS:
            self.session_index += 1
            if self.session_index % self._config.long_every == 0:
                next_kind = PhaseKind.LONG_BREAK
            else:
                next_kind = PhaseKind.SHORT_BREAK
        else:
            next_kind = PhaseKind.FOCUS

        self.current_phase = self._build_phase(next_kind)
        self._restart_phase()
        self._logger.info(
            "Phase changed: %s -> %s session=%d duration=%ss",
            previous_kind.value,
            next_kind.value,
            self.session_index,
            self.current_phase.duration_seconds,
        )
        self._publish(
            PhaseChangeEvent(
                previous_kind=previous_kind,
                kind=next_kind,
                session_index=self.session_index,
                duration_seconds=self.current_phase.duration_seconds,
            )
        )

    def _restart_phase(self) -> None:
        self.phase_started_at = self._clock()
        self.paused = False
        self.paused_at = None

    def _build_phase(self, kind: PhaseKind) -> Phase:
        return Phase(kind=kind, duration_seconds=self._config.duration_for(kind))

    def _publish(self, event: PhaseChangeEvent) -> None:
        if self._publisher is None:
            return
        try:
            self._publisher.publish(event)
        except Exception as error:
            self._logger.warning("Phase change publish failed: %s", error)

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now
