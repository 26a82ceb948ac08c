"""Fixed name and digit tables for the 'en' and 'np' locales."""

from __future__ import annotations

from typing import Tuple

NEPALI_DIGITS: Tuple[str, ...] = ("०", "१", "२", "३", "४", "५", "६", "७", "८", "९")

NEPALI_MONTHS: Tuple[str, ...] = (
    "बैशाख", "जेठ", "असार", "साउन", "भदौ", "असोज",
    "कात्तिक", "मंसिर", "पुस", "माघ", "फागुन", "चैत",
)

# Romanised BS month names, used when a BS date is rendered in English.
BS_MONTHS_EN: Tuple[str, ...] = (
    "Baisakh", "Jestha", "Ashadh", "Shrawan", "Bhadra", "Ashwin",
    "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
)

# Index 0 = Sunday
NEPALI_WEEKDAYS: Tuple[str, ...] = (
    "आइतवार", "सोमवार", "मंगलवार", "बुधवार", "बिहीवार", "शुक्रवार", "शनिवार",
)

ENGLISH_WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

ENGLISH_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_TO_NEPALI = str.maketrans("0123456789", "".join(NEPALI_DIGITS))
_FROM_NEPALI = str.maketrans("".join(NEPALI_DIGITS), "0123456789")

_LOCALE_ALIASES = {"en": "en", "np": "np", "ne": "np"}


def resolve_locale(name: str) -> str:
    key = name.lower()
    if key not in _LOCALE_ALIASES:
        raise ValueError(f"Unknown locale '{name}'. Available: {sorted(_LOCALE_ALIASES)}")
    return _LOCALE_ALIASES[key]

def to_nepali_digits(s: str) -> str:
    return s.translate(_TO_NEPALI)

def from_nepali_digits(s: str) -> str:
    return s.translate(_FROM_NEPALI)

def weekday_name(index: int, locale: str = "en") -> str:
    names = NEPALI_WEEKDAYS if resolve_locale(locale) == "np" else ENGLISH_WEEKDAYS
    return names[index]
