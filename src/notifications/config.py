"""Configuration model for desktop notification dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SOUND_NAME = "default"


class NotificationConfigurationError(Exception):
    """Raised when notification configuration is invalid."""


@dataclass(frozen=True)
class NotificationConfig:
    """Validated notification configuration derived from app settings."""
    enabled: bool = True
    sound: str = DEFAULT_SOUND_NAME
    timeout_seconds: int = 10
    icon_path: str = ""
    macos_bundle_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.timeout_seconds < 0:
            raise NotificationConfigurationError(
                f"Notification timeout must be >= 0, got: {self.timeout_seconds}"
            )
        if not self.sound.strip():
            raise NotificationConfigurationError("Notification sound cannot be empty")

    @property
    def timeout_ms(self) -> int:
        return self.timeout_seconds * 1000

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        return cls(
            enabled=bool(settings.enabled),
            sound=settings.sound.strip() if settings.sound else DEFAULT_SOUND_NAME,
            timeout_seconds=int(settings.timeout_seconds),
            icon_path=settings.icon.strip() if settings.icon else "",
            macos_bundle_id=settings.macos_bundle_id.strip() or None,
        )
