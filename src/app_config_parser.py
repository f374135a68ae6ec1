"""Typed parser for pomodoro.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    DEFAULT_NOTIFICATION_SECONDS,
    DEFAULT_THEME,
    AppConfig,
    AppConfigurationError,
    NotificationSettings,
    TimerSettings,
    UISettings,
)
from pomodoro.constants import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SHORT_BREAK_MINUTES,
)
from tui.theme import THEME_NAMES

_KNOWN_SECTIONS = ("timer", "notifications", "ui")


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    unknown = sorted(name for name in raw if name not in _KNOWN_SECTIONS)
    if unknown:
        raise AppConfigurationError(
            f"Unknown config section(s): {', '.join(unknown)}"
        )

    return AppConfig(
        timer=_parse_timer_settings(_section(raw, "timer")),
        notifications=_parse_notification_settings(
            _section(raw, "notifications"),
            base_dir=base_dir,
        ),
        ui=_parse_ui_settings(_section(raw, "ui")),
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    return TimerSettings(
        focus_minutes=_as_positive_int(
            section.get("focus_minutes", DEFAULT_FOCUS_MINUTES),
            "timer.focus_minutes",
        ),
        short_minutes=_as_positive_int(
            section.get("short_minutes", DEFAULT_SHORT_BREAK_MINUTES),
            "timer.short_minutes",
        ),
        long_minutes=_as_positive_int(
            section.get("long_minutes", DEFAULT_LONG_BREAK_MINUTES),
            "timer.long_minutes",
        ),
        long_every=_as_positive_int(
            section.get("long_every", DEFAULT_LONG_BREAK_EVERY),
            "timer.long_every",
        ),
        poll_interval_ms=_as_positive_int(
            section.get("poll_interval_ms", DEFAULT_POLL_INTERVAL_MS),
            "timer.poll_interval_ms",
        ),
    )


def _parse_notification_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> NotificationSettings:
    icon = _as_str(section.get("icon", ""), "notifications.icon")
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", True), "notifications.enabled"),
        sound=_as_str(section.get("sound", ""), "notifications.sound"),
        timeout_seconds=_as_non_negative_int(
            section.get("timeout_seconds", DEFAULT_NOTIFICATION_SECONDS),
            "notifications.timeout_seconds",
        ),
        icon=_resolve_path(base_dir, icon),
        macos_bundle_id=_as_str(
            section.get("macos_bundle_id", ""),
            "notifications.macos_bundle_id",
        ),
    )


def _parse_ui_settings(section: Mapping[str, Any]) -> UISettings:
    return UISettings(theme=parse_theme_name(section.get("theme", DEFAULT_THEME), "ui.theme"))


def parse_theme_name(value: Any, field: str = "theme") -> str:
    """Normalize a theme name and reject names without a colour table."""
    name = _as_str(value, field).lower().replace("_", "-")
    if name not in THEME_NAMES:
        allowed = ", ".join(THEME_NAMES)
        raise AppConfigurationError(f"{field} must be one of: {allowed}")
    return name


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_positive_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number < 1:
        raise AppConfigurationError(f"{field} must be at least 1, got: {number}")
    return number


def _as_non_negative_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number < 0:
        raise AppConfigurationError(f"{field} must be >= 0, got: {number}")
    return number


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
