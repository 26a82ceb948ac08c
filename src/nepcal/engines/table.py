"""
nepcal.engines.table
--------------------
Read-only view over the Bikram Sambat month-length table.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from nepcal.core.errors import YearOutOfRangeError


class CalendarTable:
    """
    Per-year BS month lengths plus the year total (13th entry).

    The table is checked once on construction: every row has twelve positive
    month lengths whose sum equals the stored total, and the years form one
    contiguous run. Lookups outside that run raise YearOutOfRangeError.
    """

    def __init__(self, rows: Mapping[int, Sequence[int]]):
        if not rows:
            raise ValueError("Calendar table is empty")

        years = sorted(rows)
        if years != list(range(years[0], years[-1] + 1)):
            raise ValueError(f"Calendar table years are not contiguous: {years[0]}..{years[-1]}")

        frozen = {}
        for y in years:
            row = tuple(int(v) for v in rows[y])
            if len(row) != 13:
                raise ValueError(f"Year {y}: expected 12 month lengths and a total, got {len(row)} values")
            if any(v <= 0 for v in row[:12]):
                raise ValueError(f"Year {y}: month lengths must be positive")
            if sum(row[:12]) != row[12]:
                raise ValueError(f"Year {y}: months sum to {sum(row[:12])}, total says {row[12]}")
            frozen[y] = row

        self._rows: Mapping[int, Tuple[int, ...]] = MappingProxyType(frozen)
        self.base_year = years[0]
        self.last_year = years[-1]

    def __contains__(self, year: object) -> bool:
        return year in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def years(self) -> range:
        return range(self.base_year, self.last_year + 1)

    def _row(self, year: int) -> Tuple[int, ...]:
        if year not in self._rows:
            raise YearOutOfRangeError(
                f"BS year {year} not in calendar table ({self.base_year}..{self.last_year})"
            )
        return self._rows[year]

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        return self._row(year)[:12]

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be in 1..12, got {month}")
        return self._row(year)[month - 1]

    def days_in_year(self, year: int) -> int:
        return self._row(year)[12]


def default_table() -> CalendarTable:
    from nepcal.engines.bs_data import BS_MONTH_LENGTHS
    return CalendarTable(BS_MONTH_LENGTHS)
