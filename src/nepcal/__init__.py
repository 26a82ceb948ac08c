"""nepcal public API.

Bikram Sambat (BS) <-> Gregorian (AD) conversion, validation, formatting and
date differences. Most users only need the functions re-exported here.
"""

# Build the default converter on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    bs_to_ad,
    ad_to_bs,
    is_valid_bs,
    is_valid_ad,
    weekday_ad,
    weekday_bs,
    get_bs_info,
    get_ad_info,
    formatted_nepali_date,
    formatted_english_date,
    diff,
    human_diff,
    make_converter,
    set_default_converter,
    get_default_converter,
)
from .core.errors import NepcalError, InvalidFormatError, YearOutOfRangeError, InvalidDateError
from .core.types import CalendarDate, DateDiff, DateInfo
from .parsing import normalize, parse_date

__all__ = [
    "bs_to_ad",
    "ad_to_bs",
    "is_valid_bs",
    "is_valid_ad",
    "weekday_ad",
    "weekday_bs",
    "get_bs_info",
    "get_ad_info",
    "formatted_nepali_date",
    "formatted_english_date",
    "diff",
    "human_diff",
    "make_converter",
    "set_default_converter",
    "get_default_converter",
    "NepcalError",
    "InvalidFormatError",
    "YearOutOfRangeError",
    "InvalidDateError",
    "CalendarDate",
    "DateDiff",
    "DateInfo",
    "normalize",
    "parse_date",
]
