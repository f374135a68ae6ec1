from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import parse_app_config, parse_theme_name
from app_config_schema import (
    CONFIG_FILE_ENV,
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    NotificationSettings,
    TimerSettings,
    UISettings,
)

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "NotificationSettings",
    "TimerSettings",
    "UISettings",
    "default_app_config",
    "load_app_config",
    "parse_theme_name",
    "resolve_config_path",
]


def default_app_config() -> AppConfig:
    return AppConfig(
        timer=TimerSettings(),
        notifications=NotificationSettings(),
        ui=UISettings(),
    )


def resolve_config_path(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path:
    env = environ if environ is not None else os.environ
    raw = config_path or env.get(CONFIG_FILE_ENV, "").strip() or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


def load_app_config(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load `pomodoro.toml`, falling back to defaults when no file was requested.

    A path given explicitly (argument or environment variable) must exist; the
    implicit default file is optional.
    """
    env = environ if environ is not None else os.environ
    explicit = bool(config_path or env.get(CONFIG_FILE_ENV, "").strip())
    path = resolve_config_path(config_path, environ=env)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return default_app_config()
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    raw = _read_toml(path)
    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    if not isinstance(raw, Mapping):
        raise AppConfigurationError("Root config TOML object must be a table.")
    return raw
