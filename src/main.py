import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from app_config import AppConfig, AppConfigurationError, load_app_config
from cli import apply_cli_overrides, parse_args, resolve_log_level
from notifications import (
    DesktopNotifier,
    NotificationConfig,
    NotificationConfigurationError,
)
from pomodoro import InvalidConfigError, PhaseTimer, TimerConfig
from runtime import RuntimeBootstrap, RuntimeEngine
from tui import KeyReader, TerminalError, TerminalSession, Theme, TimerRenderer


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_log_handler(
    console: Console,
    log_file: Optional[str] = None,
) -> logging.Handler:
    """Build the root log handler: a log file, or the console the UI draws on."""
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        return handler

    # Printing through the live console keeps records off the full-screen frame.
    handler = RichHandler(
        console=console,
        show_path=False,
        log_time_format=f"[{LOG_DATE_FORMAT}]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        handlers=[build_log_handler(console or Console(), log_file)],
    )
    return logging.getLogger("pomodoro_app")


def build_timer_config(app_config: AppConfig) -> TimerConfig:
    timer = app_config.timer
    return TimerConfig(
        focus_minutes=timer.focus_minutes,
        short_minutes=timer.short_minutes,
        long_minutes=timer.long_minutes,
        long_every=timer.long_every,
    )


def build_engine(
    app_config: AppConfig,
    logger: logging.Logger,
    console: Optional[Console] = None,
) -> RuntimeEngine:
    """Wire the timer, notifier, renderer and terminal into a runtime engine."""
    notifier = DesktopNotifier(
        NotificationConfig.from_settings(app_config.notifications),
        logger=logging.getLogger("notifications"),
    )
    timer = PhaseTimer(
        build_timer_config(app_config),
        publisher=notifier,
        logger=logging.getLogger("pomodoro"),
    )
    renderer = TimerRenderer(Theme.from_name(app_config.ui.theme))
    return RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            timer=timer,
            renderer=renderer,
            open_screen=lambda: TerminalSession(
                console=console,
                logger=logging.getLogger("tui"),
            ),
            keys=KeyReader(),
            poll_interval_seconds=app_config.timer.poll_interval_ms / 1000.0,
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pomodoro timer until the user quits."""
    args = parse_args(argv)
    console = Console()
    logger = setup_logging(
        level=resolve_log_level(args),
        log_file=args.log_file,
        console=console,
    )

    try:
        app_config = apply_cli_overrides(load_app_config(args.config), args)
        if app_config.source_file:
            logger.info("Loaded config: %s", app_config.source_file)
    except AppConfigurationError as error:
        logger.error(f"App configuration error: {error}")
        return 1

    try:
        engine = build_engine(app_config, logger, console)
    except InvalidConfigError as error:
        logger.error(f"Invalid timer configuration: {error}")
        return 2
    except NotificationConfigurationError as error:
        logger.error(f"Notification configuration error: {error}")
        return 1

    try:
        return engine.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping...")
        return 0
    except (TerminalError, OSError) as error:
        logger.error(f"Terminal error: {error}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
