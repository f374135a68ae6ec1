"""Rich renderables for the countdown screen."""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from pomodoro import TimerSnapshot

from .theme import Theme

APP_TITLE = "Pomodoro"
_MUTED = "grey70"
_BORDER = "grey37"
_KEY_HELP: tuple[tuple[str, str], ...] = (
    ("␣", "pause/resume"),
    ("n", "next"),
    ("r", "reset"),
    ("q", "quit"),
)


def format_mm_ss(seconds: float) -> str:
    """Format whole seconds as `MM:SS`; minutes are not wrapped at 60."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


class TimerRenderer:
    """Builds one frame of the countdown screen from a timer snapshot."""

    def __init__(self, theme: Theme = Theme.DRACULA):
        self._theme = theme

    def render(self, snapshot: TimerSnapshot) -> RenderableType:
        colors = self._theme.colors
        phase_color = colors.ok if snapshot.kind.is_break else colors.accent
        return Group(
            self._header(snapshot, phase_color),
            self._gauge(snapshot, phase_color),
            self._footer(colors.background),
        )

    def _header(self, snapshot: TimerSnapshot, phase_color: str) -> RenderableType:
        title = Text.assemble(
            (f"{APP_TITLE} · ", f"bold {_MUTED}"),
            (snapshot.title, f"bold {phase_color}"),
        )
        return Panel(
            Align.center(title),
            box=box.HORIZONTALS,
            border_style=_BORDER,
        )

    def _gauge(self, snapshot: TimerSnapshot, phase_color: str) -> RenderableType:
        label = Text(format_mm_ss(snapshot.remaining_seconds), style="bold white")
        if snapshot.paused:
            label.append("  paused", style=f"bold {_MUTED}")
        bar = ProgressBar(
            total=1.0,
            completed=snapshot.progress,
            complete_style=phase_color,
            finished_style=phase_color,
        )
        sessions = Text(f"Completed focus sessions: {snapshot.session_index}", style=_MUTED)
        return Panel(
            Group(Align.center(label), bar, Align.center(sessions)),
            title=Text("Session", style=_MUTED),
            border_style=_BORDER,
        )

    def _footer(self, background: str) -> RenderableType:
        help_text = Text()
        for index, (key, action) in enumerate(_KEY_HELP):
            if index:
                help_text.append("  ")
            help_text.append(f"{key} ", style=_MUTED)
            help_text.append(action, style="white")
        return Panel(
            Align.center(help_text),
            box=box.HORIZONTALS,
            border_style=_BORDER,
            style=f"on {background}",
        )
