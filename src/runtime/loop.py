"""Single-threaded control loop: render, auto-advance, then poll one key."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ContextManager, Optional, Protocol

from rich.console import RenderableType

from pomodoro import Clock, PhaseTimer, monotonic_clock, saturating_since
from pomodoro.constants import DEFAULT_POLL_INTERVAL_MS
from tui import TimerRenderer

from .commands import apply_command, command_for_key


class ScreenLike(Protocol):
    def draw(self, renderable: RenderableType) -> None:
        ...


class KeySource(Protocol):
    def read_key(self, timeout: float) -> Optional[str]:
        ...


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    timer: PhaseTimer
    renderer: TimerRenderer
    open_screen: Callable[[], ContextManager[ScreenLike]]
    keys: KeySource
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_MS / 1000.0
    clock: Clock = monotonic_clock


class RuntimeEngine:
    """Owns the timer for the lifetime of the full-screen session."""

    def __init__(self, bootstrap: RuntimeBootstrap):
        if bootstrap.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be greater than zero")
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger

    def run(self) -> int:
        deps = self._bootstrap
        self._logger.info(
            "Starting pomodoro loop (poll interval %.0f ms)",
            deps.poll_interval_seconds * 1000,
        )
        with deps.open_screen() as screen:
            while self._tick(screen):
                pass
        self._logger.info(
            "Pomodoro loop stopped after %d focus session(s)",
            deps.timer.session_index,
        )
        return 0

    def _tick(self, screen: ScreenLike) -> bool:
        deps = self._bootstrap
        tick_started = deps.clock()

        screen.draw(deps.renderer.render(deps.timer.snapshot(tick_started)))
        deps.timer.advance_if_due(tick_started)

        elapsed = saturating_since(deps.clock(), tick_started)
        timeout = max(0.0, deps.poll_interval_seconds - elapsed)
        command = command_for_key(deps.keys.read_key(timeout))
        if command is None:
            return True

        self._logger.debug("Key command: %s", command.value)
        return apply_command(deps.timer, command)
