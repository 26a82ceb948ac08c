"""
nepcal.parsing
--------------
Turns loosely typed digit strings into canonical YYYY-MM-DD dates.
"""

from __future__ import annotations

import re

from .core.errors import InvalidDateError, InvalidFormatError
from .core.time import is_valid_gregorian
from .core.types import CalendarDate, resolve_system
from .locales import from_nepali_digits

_NON_DIGIT = re.compile(r"[^0-9]")


def normalize(value: str, system: str = "ad") -> str:
    """
    Reduce `value` to its digits and rebuild it as YYYY-MM-DD.

    Eight digits are read as YYYYMMDD. With seven digits one of month or day
    was typed as a single digit: if the digit right after the year is greater
    than 1 the month is that one digit and the day takes the last two,
    otherwise the month takes two digits and the day the last one. So
    "2062115" is 2062-11-05 and "2062315" is 2062-03-15.

    AD results must be real Gregorian dates. BS results are only shaped here;
    the calendar table decides later whether the day exists.
    """
    sys_ = resolve_system(system)
    digits = _NON_DIGIT.sub("", from_nepali_digits(value))

    if len(digits) == 8:
        year, month, day = digits[:4], digits[4:6], digits[6:8]
    elif len(digits) == 7:
        year, rest = digits[:4], digits[4:]
        if int(rest[0]) > 1:
            month, day = rest[0], rest[1:3]
        else:
            month, day = rest[:2], rest[2]
    else:
        raise InvalidFormatError(f"Invalid date format: {value!r}")

    y, m, d = int(year), int(month), int(day)
    if sys_ == "ad" and not is_valid_gregorian(y, m, d):
        raise InvalidDateError(f"Invalid date: {y:04d}-{m:02d}-{d:02d}")
    return f"{y:04d}-{m:02d}-{d:02d}"


def parse_date(value: str, system: str = "ad") -> CalendarDate:
    sys_ = resolve_system(system)
    y, m, d = (int(p) for p in normalize(value, sys_).split("-"))
    return CalendarDate(y, m, d, sys_)


def format_input(value: str) -> str:
    """
    Input mask for partially typed dates: '2062011' -> '2062-01-1'.

    Non-digits are dropped, dashes are inserted after the year and month as
    soon as the next digit arrives, and anything past eight digits is cut.
    """
    digits = _NON_DIGIT.sub("", from_nepali_digits(value))[:8]
    out = digits[:4]
    if len(digits) > 4:
        out += "-" + digits[4:6]
    if len(digits) > 6:
        out += "-" + digits[6:8]
    return out
