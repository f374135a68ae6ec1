"""Best-effort desktop notifications for phase changes."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable, Optional

from pomodoro import PhaseChangeEvent, PhaseKind

from .config import NotificationConfig
from .messages import APP_NAME, notification_body, notification_title

_FREEDESKTOP_PLATFORMS = ("linux", "freebsd", "openbsd", "netbsd")


class NotificationError(Exception):
    """Raised when a notification backend cannot deliver a notification."""


def build_notify_send_command(
    title: str,
    body: str,
    config: NotificationConfig,
) -> list[str]:
    """Build the `notify-send` argv for a single notification."""
    command = [
        "notify-send",
        f"--app-name={APP_NAME}",
        f"--expire-time={config.timeout_ms}",
        f"--hint=string:sound-name:{config.sound}",
    ]
    if config.icon_path:
        command.append(f"--icon={config.icon_path}")
    command.extend([title, body])
    return command


class DesktopNotifier:
    """Phase event publisher that shows a desktop notification per transition.

    Dispatch never blocks on the notification daemon and never raises: every
    failure is logged and the timer carries on.
    """

    def __init__(
        self,
        config: NotificationConfig,
        *,
        logger: Optional[logging.Logger] = None,
        platform: Optional[str] = None,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("notifications")
        self._platform = platform or sys.platform
        self._popen = popen

    def publish(self, event: PhaseChangeEvent) -> None:
        self.notify(event.kind)

    def notify(self, kind: PhaseKind) -> bool:
        if not self._config.enabled:
            return False

        title = notification_title(kind)
        body = notification_body(kind)
        try:
            self._dispatch(title, body)
        except (ImportError, OSError, subprocess.SubprocessError, NotificationError) as error:
            self._logger.warning("Desktop notification failed: %s", error)
            return False

        self._logger.debug("Desktop notification sent: %s", title)
        return True

    def _dispatch(self, title: str, body: str) -> None:
        if self._platform == "darwin":
            self._notify_macos(title, body)
            return
        if self._platform.startswith(_FREEDESKTOP_PLATFORMS):
            self._notify_freedesktop(title, body)
            return
        raise NotificationError(
            f"Desktop notifications are not supported on {self._platform}"
        )

    def _notify_freedesktop(self, title: str, body: str) -> None:
        self._popen(
            build_notify_send_command(title, body, self._config),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    def _notify_macos(self, title: str, body: str) -> None:
        # terminal-notifier ignores expiry; macOS decides how long banners stay.
        import pync

        options: dict[str, str] = {"title": title, "sound": self._config.sound}
        if self._config.macos_bundle_id:
            options["sender"] = self._config.macos_bundle_id
        if self._config.icon_path:
            options["appIcon"] = self._config.icon_path
        pync.notify(body, **options)
