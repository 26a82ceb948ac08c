"""
nepcal.formatting
-----------------
Render dates through a template of single-letter tokens:

  Y  four-digit year      F  month name
  m  two-digit month      l  weekday name
  d  two-digit day

Every other character is copied as is. Replacement happens in one pass, so
a month or weekday name is never re-scanned for tokens.
"""

from __future__ import annotations

import re
from typing import Dict

from .core.errors import InvalidDateError
from .core.types import CalendarDate
from .engines.converter import Converter
from .locales import (
    BS_MONTHS_EN,
    ENGLISH_MONTHS,
    ENGLISH_WEEKDAYS,
    NEPALI_MONTHS,
    NEPALI_WEEKDAYS,
    resolve_locale,
    to_nepali_digits,
)

_TOKEN_RE = re.compile(r"[YmdFl]")


def _substitute(template: str, values: Dict[str, str]) -> str:
    return _TOKEN_RE.sub(lambda m: values[m.group(0)], template)


def format_date(conv: Converter, d: CalendarDate, template: str = "Y-m-d", locale: str = "en") -> str:
    """
    'en' keeps the date in its own calendar with ASCII digits. 'np' always
    shows the BS date, with Devanagari digits and Nepali names. The weekday
    comes from the AD side in both cases.
    """
    loc = resolve_locale(locale)
    if not conv.is_valid(str(d), d.system):
        raise InvalidDateError(f"Invalid {d.system.upper()} date: {d}")

    wd = conv.weekday_index(d)

    if loc == "np":
        bs = d if d.system == "bs" else conv.to_bs(d)
        return _substitute(template, {
            "Y": to_nepali_digits(f"{bs.year:04d}"),
            "m": to_nepali_digits(f"{bs.month:02d}"),
            "d": to_nepali_digits(f"{bs.day:02d}"),
            "F": NEPALI_MONTHS[bs.month - 1],
            "l": NEPALI_WEEKDAYS[wd],
        })

    months = BS_MONTHS_EN if d.system == "bs" else ENGLISH_MONTHS
    return _substitute(template, {
        "Y": f"{d.year:04d}",
        "m": f"{d.month:02d}",
        "d": f"{d.day:02d}",
        "F": months[d.month - 1],
        "l": ENGLISH_WEEKDAYS[wd],
    })


def formatted_nepali_date(conv: Converter, bs: str, template: str = "Y-m-d", locale: str = "en") -> str:
    return format_date(conv, conv.parse(bs, "bs"), template, locale)


def formatted_english_date(conv: Converter, ad: str, template: str = "Y-m-d", locale: str = "en") -> str:
    return format_date(conv, conv.parse(ad, "ad"), template, locale)


def nepali_numeric(d: CalendarDate) -> str:
    """'2062/01/01' style in Devanagari digits."""
    return to_nepali_digits(f"{d.year:04d}/{d.month:02d}/{d.day:02d}")


def nepali_human(conv: Converter, d: CalendarDate) -> str:
    """Year, month name, day and weekday, all in Nepali."""
    return format_date(conv, d, "Y F d, l", "np")
