from .render import TimerRenderer, format_mm_ss
from .terminal import KEY_ESCAPE, KeyReader, TerminalError, TerminalSession
from .theme import THEME_NAMES, Theme, ThemeColors

__all__ = [
    "KEY_ESCAPE",
    "KeyReader",
    "THEME_NAMES",
    "TerminalError",
    "TerminalSession",
    "Theme",
    "ThemeColors",
    "TimerRenderer",
    "format_mm_ss",
]
