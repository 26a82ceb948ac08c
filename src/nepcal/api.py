from __future__ import annotations

from datetime import date
from typing import Optional, Union

from .core.types import DateDiff, DateInfo
from .engines.converter import Converter
from .bootstrap import build_converter
from . import diff as _diff
from . import formatting as _fmt

_converter: Optional[Converter] = None

def set_default_converter(conv: Converter) -> None:
    global _converter
    _converter = conv

def get_default_converter() -> Converter:
    if _converter is None:
        raise RuntimeError("Default converter not initialized")
    return _converter

def make_converter(start_year: Optional[int] = None) -> Converter:
    """A converter independent of the default one, e.g. with another start year."""
    return build_converter(start_year)

# ============================================================
# Conversion and validation
# ============================================================

def bs_to_ad(bs: str) -> str:
    return get_default_converter().bs_to_ad(bs)

def ad_to_bs(ad: str) -> str:
    return get_default_converter().ad_to_bs(ad)

def is_valid_bs(bs: str) -> bool:
    return get_default_converter().is_valid_bs(bs)

def is_valid_ad(ad: str) -> bool:
    return get_default_converter().is_valid_ad(ad)

def weekday_ad(ad: str, locale: str = "en") -> str:
    return get_default_converter().weekday_ad(ad, locale)

def weekday_bs(bs: str, locale: str = "en") -> str:
    return get_default_converter().weekday_bs(bs, locale)

def get_bs_info(bs: str, *, today: Optional[date] = None) -> Optional[DateInfo]:
    return get_default_converter().get_bs_info(bs, today=today)

def get_ad_info(ad: str, *, today: Optional[date] = None) -> Optional[DateInfo]:
    return get_default_converter().get_ad_info(ad, today=today)

# ============================================================
# Formatting and differences
# ============================================================

def formatted_nepali_date(bs: str, template: str = "Y-m-d", locale: str = "en") -> str:
    return _fmt.formatted_nepali_date(get_default_converter(), bs, template, locale)

def formatted_english_date(ad: str, template: str = "Y-m-d", locale: str = "en") -> str:
    return _fmt.formatted_english_date(get_default_converter(), ad, template, locale)

def diff(date1: str, date2: str, system: str = "ad", unit: Optional[str] = None) -> Union[DateDiff, int]:
    return _diff.diff(get_default_converter(), date1, date2, system, unit)

def human_diff(date1: str, date2: str, system: str = "ad", locale: str = "en") -> str:
    return _diff.human_diff(get_default_converter(), date1, date2, system, locale)
