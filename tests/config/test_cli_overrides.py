import logging
import unittest
from contextlib import redirect_stderr
from io import StringIO

from app_config import AppConfigurationError, default_app_config
from cli import apply_cli_overrides, parse_args, resolve_log_level


class CliOverrideTests(unittest.TestCase):
    def test_no_flags_keeps_config(self) -> None:
        config = default_app_config()
        self.assertEqual(config, apply_cli_overrides(config, parse_args([])))

    def test_timer_flags_override_config(self) -> None:
        args = parse_args(["-f", "50", "-s", "10", "-l", "20", "-n", "2"])
        config = apply_cli_overrides(default_app_config(), args)

        self.assertEqual(50, config.timer.focus_minutes)
        self.assertEqual(10, config.timer.short_minutes)
        self.assertEqual(20, config.timer.long_minutes)
        self.assertEqual(2, config.timer.long_every)
        self.assertEqual(200, config.timer.poll_interval_ms)

    def test_long_option_names(self) -> None:
        args = parse_args(["--focus", "30", "--long-every", "6"])
        config = apply_cli_overrides(default_app_config(), args)

        self.assertEqual(30, config.timer.focus_minutes)
        self.assertEqual(6, config.timer.long_every)

    def test_notification_flags(self) -> None:
        args = parse_args(
            [
                "--notifications", "false",
                "--notification-sound", "Submarine",
                "--notification-seconds", "3",
                "--macos-bundle-id", "com.example.pomo",
            ]
        )
        config = apply_cli_overrides(default_app_config(), args)

        self.assertFalse(config.notifications.enabled)
        self.assertEqual("Submarine", config.notifications.sound)
        self.assertEqual(3, config.notifications.timeout_seconds)
        self.assertEqual("com.example.pomo", config.notifications.macos_bundle_id)

    def test_notifications_flag_rejects_garbage(self) -> None:
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit):
                parse_args(["--notifications", "sometimes"])

    def test_negative_notification_seconds_rejected(self) -> None:
        args = parse_args(["--notification-seconds", "-1"])
        with self.assertRaises(AppConfigurationError):
            apply_cli_overrides(default_app_config(), args)

    def test_theme_flag(self) -> None:
        args = parse_args(["--theme", "solarized-dark"])
        config = apply_cli_overrides(default_app_config(), args)
        self.assertEqual("solarized-dark", config.ui.theme)

    def test_unknown_theme_rejected_by_parser(self) -> None:
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit):
                parse_args(["--theme", "neon"])

    def test_log_level_defaults(self) -> None:
        self.assertEqual(logging.WARNING, resolve_log_level(parse_args([])))
        self.assertEqual(
            logging.INFO,
            resolve_log_level(parse_args(["--log-file", "pomodoro.log"])),
        )
        self.assertEqual(
            logging.DEBUG,
            resolve_log_level(parse_args(["--log-level", "DEBUG"])),
        )


if __name__ == "__main__":
    unittest.main()
