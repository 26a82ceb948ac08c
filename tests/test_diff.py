# tests/test_diff.py

import pytest

import nepcal
from nepcal.core.errors import InvalidDateError
from nepcal.diff import approx_units


def test_one_leap_year():
    d = nepcal.diff("2000-01-01", "2001-01-01", "en")
    assert (d.years, d.months, d.days) == (1, 0, 0)
    assert d.total_days == 366
    assert d.hours == 366 * 24
    assert d.minutes == 366 * 24 * 60
    assert d.seconds == 366 * 86400
    assert d.invert is False

def test_one_common_year():
    d = nepcal.diff("2001-01-01", "2002-01-01", "ad")
    assert d.years == 1
    assert d.total_days == 365

def test_breakdown_is_calendar_aware():
    d = nepcal.diff("2000-01-15", "2001-03-20")
    assert (d.years, d.months, d.days) == (1, 2, 5)
    assert d.total_days == 430

def test_reversed_order_sets_invert():
    d = nepcal.diff("2001-01-01", "2000-01-01")
    assert d.years == 1
    assert d.total_days == 366
    assert d.invert is True

def test_bs_inputs_are_compared_as_ad():
    d = nepcal.diff("2062-01-01", "2063-01-01", "bs")
    assert d.years == 1
    assert d.total_days == 365

def test_same_day_is_zero():
    d = nepcal.diff("2062-01-01", "2062-01-01", "np")
    assert (d.years, d.months, d.days, d.total_days, d.seconds) == (0, 0, 0, 0, 0)

@pytest.mark.parametrize(
    "unit, expected",
    [
        ("years", 1),
        ("months", 14),
        ("weeks", 61),
        ("days", 430),
        ("hours", 430 * 24),
        ("minutes", 430 * 1440),
        ("seconds", 430 * 86400),
    ],
)
def test_single_unit(unit, expected):
    assert nepcal.diff("2000-01-15", "2001-03-20", "ad", unit) == expected

def test_unknown_unit():
    with pytest.raises(ValueError):
        nepcal.diff("2000-01-01", "2001-01-01", "ad", "fortnights")

def test_invalid_input_raises():
    with pytest.raises(InvalidDateError):
        nepcal.diff("2001-02-29", "2001-03-01")
    with pytest.raises(InvalidDateError):
        nepcal.diff("2056-04-32", "2062-01-01", "bs")


# ------------------------------------------------------------
# Approximate summary (365-day years, 30-day months)
# ------------------------------------------------------------

def test_approx_units():
    assert approx_units(0) == (0, 0, 0)
    assert approx_units(30) == (0, 1, 0)
    assert approx_units(365) == (1, 0, 0)
    assert approx_units(831) == (2, 3, 11)

def test_human_full():
    assert nepcal.human_diff("2000-01-01", "2002-04-11") == "2 years, 3 months, 11 days"

def test_human_omits_zero_units():
    assert nepcal.human_diff("2001-01-01", "2002-01-01") == "1 year"
    assert nepcal.human_diff("2000-01-01", "2000-01-31") == "1 month"
    assert nepcal.human_diff("2000-01-01", "2000-01-02") == "1 day"
    assert nepcal.human_diff("2000-01-01", "2000-01-06") == "5 days"

def test_human_skips_a_zero_middle_unit():
    # 371 days: one approximate year, no month, six days
    assert nepcal.human_diff("2001-01-01", "2002-01-07") == "1 year, 6 days"
    assert nepcal.human_diff("2001-01-01", "2002-01-07", "ad", "np") == "१ वर्ष, ६ दिन"

def test_human_zero_span_shows_days():
    assert nepcal.human_diff("2005-04-14", "2005-04-14") == "0 day"
    assert nepcal.human_diff("2062-01-01", "2062-01-01", "bs", "np") == "० दिन"

def test_human_is_approximate_not_calendar_exact():
    # a leap year is 366 days: one approximate year plus a day
    assert nepcal.human_diff("2000-01-01", "2001-01-01") == "1 year, 1 day"

def test_human_nepali():
    assert nepcal.human_diff("2000-01-01", "2002-04-11", "ad", "np") == "२ वर्ष, ३ महिना, ११ दिन"

def test_human_ignores_order():
    assert nepcal.human_diff("2002-04-11", "2000-01-01") == "2 years, 3 months, 11 days"
