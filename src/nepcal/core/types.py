from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal

CalendarSystem = Literal["ad", "bs"]

_SYSTEM_ALIASES = {
    "ad": "ad",
    "en": "ad",
    "bs": "bs",
    "np": "bs",
    "ne": "bs",
}

def resolve_system(name: str) -> CalendarSystem:
    """Map 'ad'/'en' and 'bs'/'np'/'ne' to a calendar system tag."""
    key = name.lower()
    if key not in _SYSTEM_ALIASES:
        raise ValueError(f"Unknown calendar system '{name}'. Available: {sorted(_SYSTEM_ALIASES)}")
    return _SYSTEM_ALIASES[key]  # type: ignore[return-value]

@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    system: CalendarSystem

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def as_date(self) -> date:
        if self.system != "ad":
            raise TypeError("Only AD dates map onto datetime.date")
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day, "ad")

@dataclass(frozen=True)
class EpochAnchor:
    """A single known BS <-> AD correspondence."""
    bs: CalendarDate
    ad: CalendarDate

@dataclass(frozen=True)
class DateInfo:
    bs: str
    ad: str
    weekday: str
    total_days_in_year: int
    day_of_year: int
    diff_days_from_today: int

@dataclass(frozen=True)
class DateDiff:
    """Exact civil difference between two dates.

    years/months/days is the calendar breakdown; total_days, hours, minutes
    and seconds measure the whole span between the two midnights.
    """
    years: int
    months: int
    days: int
    total_days: int
    hours: int
    minutes: int
    seconds: int
    invert: bool = False
