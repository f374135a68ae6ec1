"""Notification title and body text per phase."""

from __future__ import annotations

from pomodoro import PhaseKind

APP_NAME = "Pomodoro"

_PHASE_BODIES: dict[PhaseKind, str] = {
    PhaseKind.FOCUS: "Let's get to work.",
    PhaseKind.SHORT_BREAK: "Time for a quick breather.",
    PhaseKind.LONG_BREAK: "Enjoy a longer rest.",
}


def notification_title(kind: PhaseKind) -> str:
    return f"{APP_NAME} · {kind.title}"


def notification_body(kind: PhaseKind) -> str:
    return _PHASE_BODIES[kind]
