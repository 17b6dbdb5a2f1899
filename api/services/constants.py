from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable


@dataclass(frozen=True)
class Cycle:
    name: str
    label: str
    period: int
    color: str
    pick: Callable[[Any], float]


CYCLES = (
    Cycle("physical", "Physical", 23, "#EF5350", attrgetter("physical")),
    Cycle("emotional", "Emotional", 28, "#42A5F5", attrgetter("emotional")),
    Cycle("intellectual", "Intellectual", 33, "#66BB6A", attrgetter("intellectual")),
)

_BY_NAME = {c.name: c for c in CYCLES}


def cycle_by_name(name: str) -> Cycle:
    return _BY_NAME[name.lower()]


def period_of(name: str) -> int:
    return cycle_by_name(name).period
