"""Daily biorhythm series generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import Optional, Tuple

from .biorhythm_math import elapsed_days, wave
from .constants import period_of
from .util.chart_defaults import clamp_span


@dataclass(frozen=True)
class SamplePoint:
    date: date
    physical: float
    emotional: float
    intellectual: float

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "physical": self.physical,
            "emotional": self.emotional,
            "intellectual": self.intellectual,
        }


Series = Tuple[SamplePoint, ...]

_PHYSICAL = period_of("physical")
_EMOTIONAL = period_of("emotional")
_INTELLECTUAL = period_of("intellectual")

_SPAN = clamp_span(None)


def sample_for(birth: date, day: date) -> SamplePoint:
    d = elapsed_days(birth, day)
    return SamplePoint(
        date=day,
        physical=wave(d, _PHYSICAL),
        emotional=wave(d, _EMOTIONAL),
        intellectual=wave(d, _INTELLECTUAL),
    )


@lru_cache(maxsize=256)
def generate_series(
    birth: date,
    center: date,
    days_before: int = _SPAN,
    days_after: int = _SPAN,
) -> Series:
    """Return one sample per calendar day in ``[center - before, center + after]``.

    The result is chronological and contiguous with
    ``days_before + days_after + 1`` entries. Results are cached per input, so
    the returned tuple must be treated as read-only (it is, being a tuple of
    frozen points).
    """

    start = center - timedelta(days=days_before)
    total = days_before + days_after
    return tuple(sample_for(birth, start + timedelta(days=i)) for i in range(total + 1))


def center_point(series: Series, days_before: int) -> Optional[SamplePoint]:
    """Return the sample at the center index, or ``None`` if the series is too short."""

    if 0 <= days_before < len(series):
        return series[days_before]
    return None


__all__ = ["SamplePoint", "Series", "center_point", "generate_series", "sample_for"]
