"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro.constants import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SHORT_BREAK_MINUTES,
)

DEFAULT_CONFIG_FILE = "pomodoro.toml"
CONFIG_FILE_ENV = "POMODORO_CONFIG_FILE"
DEFAULT_THEME = "dracula"
DEFAULT_NOTIFICATION_SECONDS = 10


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Phase lengths and loop cadence from `[timer]`."""
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    short_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_minutes: int = DEFAULT_LONG_BREAK_MINUTES
    long_every: int = DEFAULT_LONG_BREAK_EVERY
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS


@dataclass(frozen=True)
class NotificationSettings:
    """Desktop notification settings from `[notifications]`."""
    enabled: bool = True
    sound: str = ""
    timeout_seconds: int = DEFAULT_NOTIFICATION_SECONDS
    icon: str = ""
    macos_bundle_id: str = ""


@dataclass(frozen=True)
class UISettings:
    """Terminal UI settings from `[ui]`."""
    theme: str = DEFAULT_THEME


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `pomodoro.toml`."""
    timer: TimerSettings
    notifications: NotificationSettings
    ui: UISettings
    source_file: str = ""
