"""Command line surface layered over the config file."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Optional, Sequence

from app_config import AppConfig, AppConfigurationError, parse_theme_name
from pomodoro.constants import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_LONG_BREAK_EVERY,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
)
from tui import THEME_NAMES

__version__ = "0.1.0"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomodoro-tui",
        description="Minimalist Pomodoro timer for the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    timer_group = parser.add_argument_group("timer")
    timer_group.add_argument(
        "-f", "--focus", type=int, default=None, metavar="MINUTES",
        help=f"Focus minutes (default: {DEFAULT_FOCUS_MINUTES})",
    )
    timer_group.add_argument(
        "-s", "--short", type=int, default=None, metavar="MINUTES",
        help=f"Short break minutes (default: {DEFAULT_SHORT_BREAK_MINUTES})",
    )
    timer_group.add_argument(
        "-l", "--long", type=int, default=None, metavar="MINUTES",
        help=f"Long break minutes (default: {DEFAULT_LONG_BREAK_MINUTES})",
    )
    timer_group.add_argument(
        "-n", "--long-every", type=int, default=None, metavar="SESSIONS",
        help=(
            "Number of focus sessions before a long break "
            f"(default: {DEFAULT_LONG_BREAK_EVERY})"
        ),
    )
    timer_group.add_argument(
        "--theme", choices=THEME_NAMES, default=None,
        help="Colour theme (default: dracula)",
    )

    notify_group = parser.add_argument_group("notifications")
    notify_group.add_argument(
        "--notifications", type=_parse_bool, default=None, metavar="{true,false}",
        help="Enable desktop notifications (default: true)",
    )
    notify_group.add_argument(
        "--notification-sound", default=None, metavar="NAME",
        help=(
            "Notification sound name (platform-dependent). "
            "Example macOS: Ping, Submarine. Linux: message-new-instant"
        ),
    )
    notify_group.add_argument(
        "--notification-seconds", type=int, default=None, metavar="SECONDS",
        help="Notification duration in seconds, if supported by the OS (default: 10)",
    )
    notify_group.add_argument(
        "--macos-bundle-id", default=None, metavar="BUNDLE_ID",
        help="macOS only: bundle identifier used as the notification sender",
    )

    runtime_group = parser.add_argument_group("runtime")
    runtime_group.add_argument(
        "--config", default=None, metavar="PATH",
        help="Config file (default: $POMODORO_CONFIG_FILE or ./pomodoro.toml)",
    )
    runtime_group.add_argument(
        "--log-file", default=None, metavar="PATH",
        help="Write logs to PATH instead of stderr",
    )
    runtime_group.add_argument(
        "--log-level", choices=_LOG_LEVELS, default=None,
        help="Log level (default: INFO with --log-file, WARNING otherwise)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return getattr(logging, args.log_level)
    return logging.INFO if args.log_file else logging.WARNING


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return `config` with every explicitly passed CLI option applied on top."""
    timer = config.timer
    timer_changes = {
        field: value
        for field, value in (
            ("focus_minutes", args.focus),
            ("short_minutes", args.short),
            ("long_minutes", args.long),
            ("long_every", args.long_every),
        )
        if value is not None
    }
    if timer_changes:
        timer = dataclasses.replace(timer, **timer_changes)

    notifications = config.notifications
    notify_changes: dict[str, object] = {}
    if args.notifications is not None:
        notify_changes["enabled"] = args.notifications
    if args.notification_sound is not None:
        notify_changes["sound"] = args.notification_sound.strip()
    if args.notification_seconds is not None:
        if args.notification_seconds < 0:
            raise AppConfigurationError("--notification-seconds must be >= 0.")
        notify_changes["timeout_seconds"] = args.notification_seconds
    if args.macos_bundle_id is not None:
        notify_changes["macos_bundle_id"] = args.macos_bundle_id.strip()
    if notify_changes:
        notifications = dataclasses.replace(notifications, **notify_changes)

    ui = config.ui
    if args.theme is not None:
        ui = dataclasses.replace(ui, theme=parse_theme_name(args.theme, "--theme"))

    return dataclasses.replace(config, timer=timer, notifications=notifications, ui=ui)
