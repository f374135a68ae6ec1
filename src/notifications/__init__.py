"""Desktop notifications fired on pomodoro phase changes."""

from .config import NotificationConfig, NotificationConfigurationError
from .messages import notification_body, notification_title
from .service import DesktopNotifier, NotificationError, build_notify_send_command

__all__ = [
    "DesktopNotifier",
    "NotificationConfig",
    "NotificationConfigurationError",
    "NotificationError",
    "build_notify_send_command",
    "notification_body",
    "notification_title",
]
