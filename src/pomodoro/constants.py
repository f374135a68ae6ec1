"""Defaults and display constants used by the phase timer."""

from __future__ import annotations

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_EVERY = 4

DEFAULT_POLL_INTERVAL_MS = 200

SECONDS_PER_MINUTE = 60

PHASE_FOCUS = "focus"
PHASE_SHORT_BREAK = "short_break"
PHASE_LONG_BREAK = "long_break"

PHASE_TITLES: dict[str, str] = {
    PHASE_FOCUS: "Focus",
    PHASE_SHORT_BREAK: "Short Break",
    PHASE_LONG_BREAK: "Long Break",
}
