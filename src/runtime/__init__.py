"""Runtime engine exports."""

from .commands import KEY_BINDINGS, TimerCommand, apply_command, command_for_key
from .loop import RuntimeBootstrap, RuntimeEngine

__all__ = [
    "KEY_BINDINGS",
    "RuntimeBootstrap",
    "RuntimeEngine",
    "TimerCommand",
    "apply_command",
    "command_for_key",
]
