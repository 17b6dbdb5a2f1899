"""View state of the surrounding app shell, derived from the stored birth date."""

from __future__ import annotations

from datetime import date
from typing import Optional

from .constants import CYCLES

NO_BIRTH_DATE = "no_birth_date"
PICKER_OPEN = "picker_open"
CHART_DISPLAYED = "chart_displayed"

INFO_TITLE = "About biorhythms"
INFO_TEXT = (
    "Three sinusoidal cycles are counted from your birth date: "
    "physical (23 days), emotional (28 days) and intellectual (33 days). "
    "Values are shown as percentages from -100 to +100. "
    "The model is for reference and entertainment only and is not medical advice."
)


def view_state(birth: Optional[date], picker_requested: bool = False) -> str:
    if picker_requested:
        return PICKER_OPEN
    if birth is None:
        return NO_BIRTH_DATE
    return CHART_DISPLAYED


def info_payload() -> dict:
    return {
        "title": INFO_TITLE,
        "text": INFO_TEXT,
        "cycles": [{"name": c.name, "label": c.label, "period": c.period, "color": c.color} for c in CYCLES],
    }
