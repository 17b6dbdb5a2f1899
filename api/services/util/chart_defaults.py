"""Environment-driven defaults for chart windows and sizes."""

import os
from pathlib import Path
from typing import Optional, Tuple


DEF_SPAN = int(os.getenv("BIORHYTHM_SPAN_DAYS", "15"))
DEF_WIDTH = float(os.getenv("BIORHYTHM_CHART_WIDTH", "720"))
DEF_HEIGHT = float(os.getenv("BIORHYTHM_CHART_HEIGHT", "320"))
DEF_SETTINGS_PATH = os.getenv(
    "BIORHYTHM_SETTINGS_PATH",
    str(Path(os.getenv("HOME", "/opt/app")) / ".wh-biorhythms" / "settings.json"),
)

MAX_SPAN = 366


def clamp_span(days: Optional[int]) -> int:
    """Clamp a half-window to ``0..MAX_SPAN``; ``None`` falls back to the default."""

    if days is None:
        days = DEF_SPAN
    return max(0, min(int(days), MAX_SPAN))


def resolve_window(days_before: Optional[int], days_after: Optional[int]) -> Tuple[int, int]:
    return clamp_span(days_before), clamp_span(days_after)
