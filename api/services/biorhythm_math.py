"""Mathematical helpers for biorhythm cycles.

These utilities are free of any framework dependency so they can be
unit-tested on their own and reused by the series generator and the readout.
"""

from __future__ import annotations

import math
from datetime import date


def elapsed_days(birth: date, day: date) -> int:
    """Return the signed number of calendar days from ``birth`` to ``day``.

    The value is negative when ``day`` predates the birth date and zero on the
    birth date itself.
    """

    return (day - birth).days


def wave(elapsed: int, period: int) -> float:
    """Return the cycle value for ``elapsed`` days into a ``period``-day cycle.

    Python's ``%`` is a true mathematical modulo for a positive divisor, so the
    reduced phase stays in ``[0, period)`` even for dates before birth.
    """

    angle = 2.0 * math.pi * (elapsed % period) / period
    return math.sin(angle)


def to_pct(value: float) -> int:
    # truncates toward zero, -100..100
    return int(value * 100.0)


def format_pct(pct: int) -> str:
    return f"+{pct}" if pct > 0 else str(pct)


__all__ = ["elapsed_days", "format_pct", "to_pct", "wave"]
