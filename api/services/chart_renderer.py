"""Project a biorhythm series onto a drawing surface.

The renderer is a pure projection: it reads the series and issues a fixed,
ordered sequence of calls against a :class:`~api.services.surfaces.Surface`.
Later calls occlude earlier ones, so the order is

1. plot-area background,
2. horizontal grid at -1, -0.5, 0, 0.5 and 1,
3. one vertical line per day with the center day highlighted,
4. left, center and right date labels along the bottom axis,
5. one open polyline per cycle.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from .constants import CYCLES
from .series import SamplePoint
from .surfaces import Surface

logger = logging.getLogger(__name__)

MARGIN_LEFT = 16.0
MARGIN_RIGHT = 8.0
MARGIN_TOP = 8.0
MARGIN_BOTTOM = 28.0
LABEL_OFFSET = 24.0

GRID_VALUES = (-1.0, -0.5, 0.0, 0.5, 1.0)


@dataclass(frozen=True)
class ChartStyle:
    background: str = "#E7E0EC"
    background_opacity: float = 0.7
    grid_color: str = "#1C1B1F"
    grid_day_opacity: float = 0.10
    grid_half_opacity: float = 0.25
    zero_line_opacity: float = 0.9
    today_color: str = "#49454F"
    label_color: str = "#444444"
    label_size: float = 14.0
    grid_width: float = 1.0
    emphasis_width: float = 2.0
    curve_width: float = 4.0
    curve_cap: str = "round"


DEFAULT_STYLE = ChartStyle()


@dataclass(frozen=True)
class ChartFrame:
    """Margin-adjusted plotting rectangle inside a ``width`` x ``height`` surface."""

    width: float
    height: float

    @property
    def left(self) -> float:
        return MARGIN_LEFT

    @property
    def right(self) -> float:
        return self.width - MARGIN_RIGHT

    @property
    def top(self) -> float:
        return MARGIN_TOP

    @property
    def bottom(self) -> float:
        return self.height - MARGIN_BOTTOM

    def map_x(self, index: int, total: int) -> float:
        t = index / max(total, 1)
        return self.left + t * (self.right - self.left)

    def map_y(self, value: float) -> float:
        # screen y grows downward: +1 is the top edge
        t = (value + 1.0) / 2.0
        return self.bottom - t * (self.bottom - self.top)


def format_label(d: date) -> str:
    return f"{d.day} {calendar.month_abbr[d.month]}"


def chart_height(max_width: float, max_height: float, lo: float = 220.0, hi: float = 520.0) -> float:
    """Pick a chart height that suits the available area's orientation."""

    portrait_like = max_height >= max_width
    base = max_width * 0.45 if portrait_like else max_height * 0.60
    return max(lo, min(base, hi))


def _grid_opacity(value: float, style: ChartStyle) -> float:
    if value == 0.0:
        return style.zero_line_opacity
    if abs(value) == 0.5:
        return style.grid_half_opacity
    return style.grid_day_opacity


def render_chart(
    surface: Surface,
    series: Sequence[SamplePoint],
    width: float,
    height: float,
    left_days: int,
    right_days: int,
    center_date: date,
    style: Optional[ChartStyle] = None,
) -> ChartFrame:
    """Draw the chart for ``series`` and return the frame used for mapping."""

    style = style or DEFAULT_STYLE
    frame = ChartFrame(width, height)
    L, R, T, B = frame.left, frame.right, frame.top, frame.bottom
    total = len(series) - 1

    surface.draw_rect(L, T, R - L, B - T, style.background, style.background_opacity)

    for yv in GRID_VALUES:
        y = frame.map_y(yv)
        surface.draw_line(
            L,
            y,
            R,
            y,
            style.grid_color,
            style.emphasis_width if yv == 0.0 else style.grid_width,
            _grid_opacity(yv, style),
        )

    for i in range(total + 1):
        x = frame.map_x(i, total)
        if i == left_days:
            surface.draw_line(x, T, x, B, style.today_color, style.emphasis_width, 1.0)
        else:
            surface.draw_line(x, T, x, B, style.grid_color, style.grid_width, style.grid_day_opacity)

    if not series:
        logger.info("biorhythm_chart_empty_series", extra={"center_date": center_date.isoformat()})
        return frame

    size = style.label_size
    baseline = B + LABEL_OFFSET
    left_label = format_label(center_date - timedelta(days=left_days))
    center_label = format_label(center_date)
    right_label = format_label(center_date + timedelta(days=right_days))
    cx = frame.map_x(left_days, total)
    surface.draw_text(left_label, L, baseline, style.label_color, size)
    surface.draw_text(center_label, cx - surface.measure_text(center_label, size) / 2.0, baseline, style.label_color, size)
    surface.draw_text(right_label, R - surface.measure_text(right_label, size), baseline, style.label_color, size)

    for cycle in CYCLES:
        points = [(frame.map_x(i, total), frame.map_y(cycle.pick(p))) for i, p in enumerate(series)]
        surface.draw_path(points, cycle.color, style.curve_width, style.curve_cap)

    return frame


__all__ = [
    "ChartFrame",
    "ChartStyle",
    "DEFAULT_STYLE",
    "GRID_VALUES",
    "chart_height",
    "format_label",
    "render_chart",
]
