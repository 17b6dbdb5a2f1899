from typing import Any, Dict, List, Optional

from .biorhythm_math import format_pct, to_pct
from .constants import CYCLES
from .series import SamplePoint


def build_readout(point: Optional[SamplePoint]) -> Optional[Dict[str, Any]]:
    """Numeric summary for the center day: one entry per cycle, in cycle order."""

    if point is None:
        return None
    values: List[Dict[str, Any]] = []
    for c in CYCLES:
        raw = c.pick(point)
        pct = to_pct(raw)
        values.append(
            {
                "name": c.name,
                "label": c.label,
                "color": c.color,
                "value": raw,
                "pct": pct,
                "display": format_pct(pct),
            }
        )
    return {"date": point.date.isoformat(), "values": values}
