"""
nepcal.diff
-----------
Differences between two dates given in the same calendar.

Two separate algorithms live here:

- `diff` is exact. Both dates are moved to AD and subtracted as proleptic
  civil dates (dateutil's relativedelta for the year/month/day breakdown).
- `human_diff` is an approximate summary built from the total day span with
  365-day years and 30-day months. It is meant for display only and will not
  agree with `diff` across month ends.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from .core.types import DateDiff, resolve_system
from .engines.converter import Converter
from .locales import resolve_locale, to_nepali_digits

UNITS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

_HUMAN_UNITS = (
    ("year", "वर्ष"),
    ("month", "महिना"),
    ("day", "दिन"),
)


def _as_ad(conv: Converter, s: str, system: str) -> date:
    d = conv.parse(s, system)
    if d.system == "bs":
        d = conv.to_ad(d)
    else:
        conv.check(d)
    return d.as_date()


def _span(conv: Converter, date1: str, date2: str, system: str) -> Tuple[date, date, bool]:
    sys_ = resolve_system(system)
    a = _as_ad(conv, date1, sys_)
    b = _as_ad(conv, date2, sys_)
    if b < a:
        return b, a, True
    return a, b, False


def diff(
    conv: Converter,
    date1: str,
    date2: str,
    system: str = "ad",
    unit: Optional[str] = None,
) -> Union[DateDiff, int]:
    lo, hi, invert = _span(conv, date1, date2, system)
    rd = relativedelta(hi, lo)
    total = (hi - lo).days

    out = DateDiff(
        years=rd.years,
        months=rd.months,
        days=rd.days,
        total_days=total,
        hours=total * 24,
        minutes=total * 24 * 60,
        seconds=total * 24 * 3600,
        invert=invert,
    )
    if unit is None:
        return out

    if unit not in UNITS:
        raise ValueError(f"Unknown unit '{unit}'. Available: {list(UNITS)}")
    if unit == "years":
        return out.years
    if unit == "months":
        return out.years * 12 + out.months
    if unit == "weeks":
        return total // 7
    if unit == "days":
        return total
    return getattr(out, unit)


def approx_units(total_days: int) -> Tuple[int, int, int]:
    """Split a day count into (years, months, days) with 365/30-day units."""
    years, rem = divmod(total_days, 365)
    months, days = divmod(rem, 30)
    return years, months, days


def human_diff(conv: Converter, date1: str, date2: str, system: str = "ad", locale: str = "en") -> str:
    loc = resolve_locale(locale)
    lo, hi, _ = _span(conv, date1, date2, system)
    counts = approx_units((hi - lo).days)

    parts = []
    for count, (en, np_) in zip(counts, _HUMAN_UNITS):
        if count:
            parts.append((count, en, np_))
    if not parts:
        parts.append((0, "day", "दिन"))

    if loc == "np":
        return ", ".join(f"{to_nepali_digits(str(c))} {np_}" for c, _, np_ in parts)
    return ", ".join(f"{c} {en}{'s' if c > 1 else ''}" for c, en, _ in parts)
