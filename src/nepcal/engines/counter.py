"""
nepcal.engines.counter
----------------------
Absolute day counts in either calendar, measured from one shared base.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

from nepcal.core.config import CalendarContext
from nepcal.core.errors import YearOutOfRangeError
from nepcal.core.time import jdn_to_ymd, ymd_to_jdn
from nepcal.core.types import CalendarSystem


class DayCounter:
    """
    Counts days since day one of the base year.

    For BS the base year is the context's start year and the count is built
    from the table. For AD the base year is the Gregorian year in which that
    BS base year begins, and the count comes from Julian Day Numbers.
    """

    def __init__(self, ctx: CalendarContext):
        self.ctx = ctx
        self.table = ctx.table
        self.base_year = ctx.start_year

        # Cumulative start of each BS year from the base, for the inverse.
        starts = [0]
        for y in range(self.base_year, self.table.last_year + 1):
            starts.append(starts[-1] + self.table.days_in_year(y))
        self._year_starts: Tuple[int, ...] = tuple(starts)

        anchor = ctx.anchor
        anchor_jdn = ymd_to_jdn(anchor.ad.year, anchor.ad.month, anchor.ad.day)
        base_jdn = anchor_jdn - self.absolute_days("bs", *anchor.bs.ymd())
        self.ad_base_year = jdn_to_ymd(base_jdn)[0]
        self._ad_base_jdn = ymd_to_jdn(self.ad_base_year, 1, 1)

    @property
    def total_days(self) -> int:
        """Number of BS days covered from the base year to the end of the table."""
        return self._year_starts[-1]

    def absolute_days(self, system: CalendarSystem, year: int, month: int, day: int) -> int:
        if system == "ad":
            return ymd_to_jdn(year, month, day) - self._ad_base_jdn
        return self._bs_days(year, month, day)

    def _bs_days(self, year: int, month: int, day: int) -> int:
        if year < self.base_year:
            raise YearOutOfRangeError(f"BS year {year} precedes the start year {self.base_year}")

        days = 0
        for Y in range(self.base_year, year):
            days += self.table.days_in_year(Y)
        for M in range(1, month):
            days += self.table.days_in_month(year, M)
        days += day - 1
        return days

    def bs_from_absolute(self, n: int) -> Tuple[int, int, int]:
        """Inverse of the BS count: bisection over year starts, then a month scan."""
        if n < 0 or n >= self.total_days:
            raise YearOutOfRangeError(
                f"Day count {n} falls outside BS {self.base_year}..{self.table.last_year}"
            )

        i = bisect_right(self._year_starts, n) - 1
        year = self.base_year + i
        rem = n - self._year_starts[i]

        month = 1
        for length in self.table.month_lengths(year):
            if rem < length:
                break
            rem -= length
            month += 1
        return year, month, rem + 1

    def ad_from_absolute(self, n: int) -> Tuple[int, int, int]:
        return jdn_to_ymd(self._ad_base_jdn + n)
