"""Keyboard bindings and the timer commands they trigger."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pomodoro import PhaseTimer
from tui import KEY_ESCAPE


class TimerCommand(str, Enum):
    TOGGLE_PAUSE = "toggle_pause"
    SKIP = "skip"
    RESET = "reset"
    QUIT = "quit"


KEY_BINDINGS: dict[str, TimerCommand] = {
    " ": TimerCommand.TOGGLE_PAUSE,
    "n": TimerCommand.SKIP,
    "r": TimerCommand.RESET,
    "q": TimerCommand.QUIT,
    KEY_ESCAPE: TimerCommand.QUIT,
}


def command_for_key(key: Optional[str]) -> Optional[TimerCommand]:
    """Map a key press to a command; unbound keys map to `None`."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def apply_command(timer: PhaseTimer, command: TimerCommand) -> bool:
    """Apply `command` to `timer` and return whether the loop keeps running."""
    if command is TimerCommand.QUIT:
        return False
    if command is TimerCommand.TOGGLE_PAUSE:
        timer.toggle_pause()
    elif command is TimerCommand.SKIP:
        timer.skip()
    elif command is TimerCommand.RESET:
        timer.reset_phase()
    return True
