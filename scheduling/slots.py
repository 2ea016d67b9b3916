"""
Slot generation.

A bookable day is the same for every date: slot start times from the opening
boundary, stepped by a fixed interval, keeping only slots that finish by the
closing boundary. Times are zero-padded 24h ``HH:MM``.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

DEFAULT_DAY_START = "09:00"
DEFAULT_DAY_END = "18:00"
DEFAULT_STEP_MINUTES = 40

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string. Raises ValueError otherwise."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError("Invalid date. Use YYYY-MM-DD")
    return date.fromisoformat(value)


def is_time_string(value: str) -> bool:
    return isinstance(value, str) and bool(_TIME_RE.match(value))


def _to_minutes(hhmm: str) -> int:
    if not is_time_string(hhmm):
        raise ValueError(f"Invalid time {hhmm!r}. Use HH:MM")
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def _format(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def generate_time_slots(
    start: str = DEFAULT_DAY_START,
    end: str = DEFAULT_DAY_END,
    step_minutes: int = DEFAULT_STEP_MINUTES,
) -> List[str]:
    """
    Returns the ordered slot template for a day.

    With the defaults: 09:00, 09:40, 10:20, ... 17:00 (13 slots). A slot
    that would run past closing (17:40 -> 18:20) is not offered.
    """
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")

    current = _to_minutes(start)
    stop = _to_minutes(end)

    slots = []
    while current + step_minutes <= stop:
        slots.append(_format(current))
        current += step_minutes
    return slots


@dataclass(frozen=True)
class TimeSlot:
    time: str
    available: bool

    @property
    def status(self) -> str:
        return "available" if self.available else "occupied"

    def to_dict(self) -> dict:
        return {"time": self.time, "available": self.available, "status": self.status}


def mark_occupancy(template: Iterable[str], occupied: Iterable[str]) -> List[TimeSlot]:
    taken = set(occupied)
    return [TimeSlot(time=t, available=(t not in taken)) for t in template]
