"""Monotonic clock source and saturating interval helpers."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]

monotonic_clock: Clock = time.monotonic


def saturating_since(later: float, earlier: float) -> float:
    """Return `later - earlier` in seconds, never below zero."""
    return max(0.0, later - earlier)
