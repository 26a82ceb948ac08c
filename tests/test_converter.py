# tests/test_converter.py

import random
from datetime import date, timedelta

import pytest

import nepcal
from nepcal.core.config import CalendarContext
from nepcal.core.errors import InvalidDateError, InvalidFormatError, YearOutOfRangeError
from nepcal.core.types import CalendarDate
from nepcal.engines.converter import Converter


@pytest.fixture(scope="module")
def conv():
    return Converter(CalendarContext.create())


def walk(table, start, offset):
    """Day-by-day BS walk from `start`, used as a reference for the bisection."""
    y, m, d = start
    while offset > 0:
        d += 1
        if d > table.days_in_month(y, m):
            d, m = 1, m + 1
            if m > 12:
                m, y = 1, y + 1
        offset -= 1
    while offset < 0:
        d -= 1
        if d < 1:
            m -= 1
            if m < 1:
                m, y = 12, y - 1
            d = table.days_in_month(y, m)
        offset += 1
    return y, m, d


def next_bs_day(table, y, m, d):
    if d < table.days_in_month(y, m):
        return y, m, d + 1
    if m < 12:
        return y, m + 1, 1
    return y + 1, 1, 1


def test_anchor_both_ways(conv):
    assert conv.bs_to_ad("2062-01-01") == "2005-04-14"
    assert conv.ad_to_bs("2005-04-14") == "2062-01-01"

@pytest.mark.parametrize(
    "bs, ad",
    [
        ("2000-01-01", "1943-04-14"),
        ("2000-09-17", "1944-01-01"),
        ("2000-12-31", "1944-04-12"),
        ("2001-01-01", "1944-04-13"),
        ("2044-03-32", "1987-07-16"),
        ("2056-04-13", "1999-07-29"),
        ("2062-02-01", "2005-05-14"),
        ("2081-12-30", "2025-04-13"),
        ("2082-01-01", "2025-04-14"),
        ("2090-12-30", "2034-04-13"),
    ],
)
def test_known_pairs(conv, bs, ad):
    assert conv.bs_to_ad(bs) == ad
    assert conv.ad_to_bs(ad) == bs

def test_structured_conversion_returns_tagged_dates(conv):
    ad = conv.to_ad(CalendarDate(2062, 1, 1, "bs"))
    assert ad == CalendarDate(2005, 4, 14, "ad")
    assert ad.as_date() == date(2005, 4, 14)
    assert conv.to_bs(ad) == CalendarDate(2062, 1, 1, "bs")
    assert conv.convert(ad).system == "bs"

def test_structured_conversion_rejects_wrong_system(conv):
    with pytest.raises(TypeError):
        conv.to_ad(CalendarDate(2005, 4, 14, "ad"))
    with pytest.raises(TypeError):
        conv.to_bs(CalendarDate(2062, 1, 1, "bs"))

def test_round_trip_every_bs_day_sampled(conv):
    random.seed(7)
    table = conv.table
    for _ in range(3000):
        y = random.randint(table.base_year, table.last_year)
        m = random.randint(1, 12)
        d = random.randint(1, table.days_in_month(y, m))
        bs = f"{y:04d}-{m:02d}-{d:02d}"
        assert conv.ad_to_bs(conv.bs_to_ad(bs)) == bs

def test_round_trip_ad(conv):
    random.seed(42)
    start = date(1943, 4, 14)
    span = (date(2034, 4, 13) - start).days
    for _ in range(3000):
        ad = (start + timedelta(days=random.randint(0, span))).isoformat()
        assert conv.bs_to_ad(conv.ad_to_bs(ad)) == ad

def test_consecutive_ad_days_are_consecutive_bs_days(conv):
    table = conv.table
    day = date(2003, 1, 1)
    prev = conv.to_bs(CalendarDate.from_date(day))
    for _ in range(2000):
        day += timedelta(days=1)
        cur = conv.to_bs(CalendarDate.from_date(day))
        assert cur.ymd() == next_bs_day(table, *prev.ymd())
        prev = cur

def test_bisection_matches_day_walk(conv):
    random.seed(3)
    anchor = date(2005, 4, 14)
    for offset in [0, 1, -1, 30, -30, 365, -365] + [random.randint(-22646, 10591) for _ in range(200)]:
        ad = CalendarDate.from_date(anchor + timedelta(days=offset))
        assert conv.to_bs(ad).ymd() == walk(conv.table, (2062, 1, 1), offset)

def test_loose_input_is_normalized(conv):
    assert conv.bs_to_ad("20620101") == "2005-04-14"
    assert conv.bs_to_ad("2062/01/01") == "2005-04-14"
    assert conv.ad_to_bs("2005414") == "2062-01-01"
    assert conv.bs_to_ad("२०६२-०१-०१") == "2005-04-14"

def test_invalid_bs_day_raises(conv):
    with pytest.raises(InvalidDateError):
        conv.bs_to_ad("2056-04-32")
    with pytest.raises(InvalidDateError):
        conv.bs_to_ad("2062-13-01")
    with pytest.raises(InvalidDateError):
        conv.bs_to_ad("2062-01-00")

def test_invalid_ad_day_raises(conv):
    with pytest.raises(InvalidDateError):
        conv.ad_to_bs("2001-02-29")

def test_out_of_range_raises(conv):
    with pytest.raises(YearOutOfRangeError):
        conv.bs_to_ad("1999-01-01")
    with pytest.raises(YearOutOfRangeError):
        conv.bs_to_ad("2091-01-01")
    with pytest.raises(YearOutOfRangeError):
        conv.ad_to_bs("1943-04-13")
    with pytest.raises(YearOutOfRangeError):
        conv.ad_to_bs("2034-04-14")

def test_malformed_input_raises(conv):
    with pytest.raises(InvalidFormatError):
        conv.bs_to_ad("2062-1-1")
    with pytest.raises(InvalidFormatError):
        conv.ad_to_bs("not a date")

def test_start_year_is_clamped_to_table():
    assert nepcal.make_converter(1970).ctx.start_year == 2000
    assert nepcal.make_converter().ctx.start_year == 2000
    assert nepcal.make_converter(2050).ctx.start_year == 2050

def test_start_year_after_anchor_is_rejected():
    with pytest.raises(ValueError):
        nepcal.make_converter(2070)

def test_later_start_year_limits_range_but_keeps_results():
    conv = nepcal.make_converter(2050)
    assert conv.bs_to_ad("2062-01-01") == "2005-04-14"
    assert conv.ad_to_bs("1999-07-29") == "2056-04-13"
    with pytest.raises(YearOutOfRangeError):
        conv.bs_to_ad("2049-12-30")
    with pytest.raises(YearOutOfRangeError):
        conv.ad_to_bs("1990-01-01")
    assert not conv.is_valid_bs("2049-01-01")

def test_days_in_month_and_year(conv):
    assert conv.days_in_month("bs", 2062, 1) == 30
    assert conv.days_in_month("ad", 2000, 2) == 29
    assert conv.days_in_month("ad", 1900, 2) == 28
    assert conv.days_in_year("bs", 2081) == 366
    assert conv.days_in_year("ad", 2001) == 365
    with pytest.raises(YearOutOfRangeError):
        conv.days_in_year("bs", 2095)

def test_weekdays(conv):
    assert conv.weekday_ad("2005-04-14") == "Thursday"
    assert conv.weekday_bs("2062-01-01") == "Thursday"
    assert conv.weekday_bs("2062-01-01", "np") == "बिहीवार"
    assert conv.weekday_ad("2025-04-14", "np") == "सोमवार"

def test_bs_info(conv):
    info = conv.get_bs_info("2062-02-01", today=date(2005, 4, 14))
    assert info.bs == "2062-02-01"
    assert info.ad == "2005-05-14"
    assert info.weekday == "Saturday"
    assert info.total_days_in_year == 365
    assert info.day_of_year == 31
    assert info.diff_days_from_today == 30

def test_ad_info(conv):
    info = conv.get_ad_info("2025-04-13", today=date(2025, 4, 14))
    assert info.bs == "2081-12-30"
    assert info.total_days_in_year == 366
    assert info.day_of_year == 366
    assert info.diff_days_from_today == -1

def test_info_for_invalid_input_is_none(conv):
    assert conv.get_bs_info("2056-04-32") is None
    assert conv.get_ad_info("2005-02-30") is None
    assert conv.get_ad_info("20050414") is None
