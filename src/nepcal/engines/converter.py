"""
nepcal.engines.converter
------------------------
The Orchestrator. Binds the calendar table, the day counter and the epoch
anchor together to convert, validate and describe dates in both calendars.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from nepcal.core.config import CalendarContext
from nepcal.core.errors import InvalidDateError, NepcalError, YearOutOfRangeError
from nepcal.core.time import days_in_month as ad_days_in_month
from nepcal.core.time import days_in_year as ad_days_in_year
from nepcal.core.time import is_valid_gregorian, ymd_to_jdn
from nepcal.core.time import weekday_index as jdn_weekday
from nepcal.core.types import CalendarDate, DateInfo, resolve_system
from nepcal.engines.counter import DayCounter
from nepcal.locales import weekday_name
from nepcal.parsing import normalize

_STRICT_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _split(s: str) -> tuple[int, int, int]:
    y, m, d = s.split("-")
    return int(y), int(m), int(d)


class Converter:
    """
    Converts between BS and AD through absolute day counts.

    Both directions share one base: a BS date is counted from the context's
    start year, shifted by the anchor offset and read back as AD, and the
    reverse path does the same through the anchor's AD side.
    """

    def __init__(self, ctx: CalendarContext):
        self.ctx = ctx
        self.table = ctx.table
        self.anchor = ctx.anchor
        self.counter = DayCounter(ctx)
        self._anchor_bs_days = self.counter.absolute_days("bs", *self.anchor.bs.ymd())
        self._anchor_ad_days = self.counter.absolute_days("ad", *self.anchor.ad.ymd())

    # ---------------------------------------------------------
    # Calendar facts
    # ---------------------------------------------------------

    def days_in_month(self, system: str, year: int, month: int) -> int:
        if resolve_system(system) == "ad":
            return ad_days_in_month(year, month)
        self._check_bs_year(year)
        return self.table.days_in_month(year, month)

    def days_in_year(self, system: str, year: int) -> int:
        if resolve_system(system) == "ad":
            return ad_days_in_year(year)
        self._check_bs_year(year)
        return self.table.days_in_year(year)

    def _check_bs_year(self, year: int) -> None:
        if year < self.ctx.start_year or year not in self.table:
            raise YearOutOfRangeError(
                f"BS year {year} outside the supported range {self.ctx.start_year}..{self.table.last_year}"
            )

    def check(self, d: CalendarDate) -> None:
        """Raise unless `d` exists in its own calendar and supported range."""
        if d.system == "bs":
            self._check_bs_year(d.year)
            if not 1 <= d.month <= 12:
                raise InvalidDateError(f"Invalid BS month in {d}")
            if not 1 <= d.day <= self.table.days_in_month(d.year, d.month):
                raise InvalidDateError(f"Invalid BS day in {d}")
        elif not is_valid_gregorian(d.year, d.month, d.day):
            raise InvalidDateError(f"Invalid AD date {d}")

    # ---------------------------------------------------------
    # Forward: BS to AD
    # ---------------------------------------------------------

    def to_ad(self, bs: CalendarDate) -> CalendarDate:
        if bs.system != "bs":
            raise TypeError(f"Expected a BS date, got {bs.system}")
        self.check(bs)
        offset = self.counter.absolute_days("bs", *bs.ymd()) - self._anchor_bs_days
        y, m, d = self.counter.ad_from_absolute(self._anchor_ad_days + offset)
        return CalendarDate(y, m, d, "ad")

    # ---------------------------------------------------------
    # Inverse: AD to BS
    # ---------------------------------------------------------

    def to_bs(self, ad: CalendarDate) -> CalendarDate:
        if ad.system != "ad":
            raise TypeError(f"Expected an AD date, got {ad.system}")
        self.check(ad)
        offset = self.counter.absolute_days("ad", *ad.ymd()) - self._anchor_ad_days
        y, m, d = self.counter.bs_from_absolute(self._anchor_bs_days + offset)
        return CalendarDate(y, m, d, "bs")

    def convert(self, d: CalendarDate) -> CalendarDate:
        return self.to_ad(d) if d.system == "bs" else self.to_bs(d)

    # ---------------------------------------------------------
    # String entry points
    # ---------------------------------------------------------

    def parse(self, s: str, system: str) -> CalendarDate:
        sys_ = resolve_system(system)
        y, m, d = _split(normalize(s, sys_))
        return CalendarDate(y, m, d, sys_)

    def bs_to_ad(self, bs: str) -> str:
        return str(self.to_ad(self.parse(bs, "bs")))

    def ad_to_bs(self, ad: str) -> str:
        return str(self.to_bs(self.parse(ad, "ad")))

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def is_valid_bs(self, s: str) -> bool:
        if not isinstance(s, str) or not _STRICT_RE.fullmatch(s):
            return False
        y, m, d = _split(s)
        try:
            self.check(CalendarDate(y, m, d, "bs"))
            return self.ad_to_bs(self.bs_to_ad(s)) == s
        except NepcalError:
            return False

    def is_valid_ad(self, s: str) -> bool:
        if not isinstance(s, str) or not _STRICT_RE.fullmatch(s):
            return False
        y, m, d = _split(s)
        if not is_valid_gregorian(y, m, d):
            return False
        try:
            return self.bs_to_ad(self.ad_to_bs(s)) == s
        except NepcalError:
            return False

    def is_valid(self, s: str, system: str) -> bool:
        return self.is_valid_bs(s) if resolve_system(system) == "bs" else self.is_valid_ad(s)

    # ---------------------------------------------------------
    # Weekdays and day records
    # ---------------------------------------------------------

    def weekday_index(self, d: CalendarDate) -> int:
        ad = self.to_ad(d) if d.system == "bs" else d
        return jdn_weekday(ymd_to_jdn(*ad.ymd()))

    def weekday_ad(self, ad: str, locale: str = "en") -> str:
        return weekday_name(self.weekday_index(self.parse(ad, "ad")), locale)

    def weekday_bs(self, bs: str, locale: str = "en") -> str:
        return weekday_name(self.weekday_index(self.parse(bs, "bs")), locale)

    def day_of_year(self, bs: CalendarDate) -> int:
        start = self.counter.absolute_days("bs", bs.year, 1, 1)
        return self.counter.absolute_days("bs", *bs.ymd()) - start + 1

    def _info(self, bs: CalendarDate, ad: CalendarDate, today: Optional[date]) -> DateInfo:
        today = today if today is not None else date.today()
        return DateInfo(
            bs=str(bs),
            ad=str(ad),
            weekday=weekday_name(self.weekday_index(ad)),
            total_days_in_year=self.table.days_in_year(bs.year),
            day_of_year=self.day_of_year(bs),
            diff_days_from_today=ymd_to_jdn(*ad.ymd()) - ymd_to_jdn(today.year, today.month, today.day),
        )

    def get_bs_info(self, bs: str, *, today: Optional[date] = None) -> Optional[DateInfo]:
        """Describe a BS date; None when it is not valid."""
        if not self.is_valid_bs(bs):
            return None
        d = self.parse(bs, "bs")
        return self._info(d, self.to_ad(d), today)

    def get_ad_info(self, ad: str, *, today: Optional[date] = None) -> Optional[DateInfo]:
        """Describe an AD date; None when it is not valid."""
        if not self.is_valid_ad(ad):
            return None
        d = self.parse(ad, "ad")
        return self._info(self.to_bs(d), d, today)
