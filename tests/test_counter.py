# tests/test_counter.py

import pytest

from nepcal.core.config import CalendarContext
from nepcal.core.errors import YearOutOfRangeError
from nepcal.engines.counter import DayCounter


@pytest.fixture
def counter():
    return DayCounter(CalendarContext.create())

def test_bs_count_starts_at_zero(counter):
    assert counter.absolute_days("bs", 2000, 1, 1) == 0
    assert counter.absolute_days("bs", 2000, 1, 30) == 29
    assert counter.absolute_days("bs", 2000, 2, 1) == 30
    assert counter.absolute_days("bs", 2001, 1, 1) == 365

def test_anchor_count(counter):
    # 2000-01-01 BS = 1943-04-14 AD, 2062-01-01 BS = 2005-04-14 AD
    assert counter.absolute_days("bs", 2062, 1, 1) == 22646

def test_ad_base_is_year_of_bs_base(counter):
    assert counter.ad_base_year == 1943
    assert counter.absolute_days("ad", 1943, 1, 1) == 0
    assert counter.absolute_days("ad", 1943, 4, 14) == 103
    assert counter.absolute_days("ad", 1944, 1, 1) == 365

def test_year_before_base_raises(counter):
    with pytest.raises(YearOutOfRangeError):
        counter.absolute_days("bs", 1999, 12, 1)

def test_year_after_table_raises(counter):
    with pytest.raises(YearOutOfRangeError):
        counter.absolute_days("bs", 2092, 1, 1)

def test_total_days(counter):
    assert counter.total_days == 33238

@pytest.mark.parametrize(
    "ymd",
    [(2000, 1, 1), (2000, 12, 31), (2001, 1, 1), (2062, 1, 1), (2056, 4, 13), (2090, 12, 30)],
)
def test_bs_from_absolute_inverts_count(counter, ymd):
    assert counter.bs_from_absolute(counter.absolute_days("bs", *ymd)) == ymd

def test_bs_from_absolute_out_of_range(counter):
    with pytest.raises(YearOutOfRangeError):
        counter.bs_from_absolute(-1)
    with pytest.raises(YearOutOfRangeError):
        counter.bs_from_absolute(counter.total_days)

def test_start_year_moves_the_base():
    c = DayCounter(CalendarContext.create(start_year=2050))
    assert c.absolute_days("bs", 2050, 1, 1) == 0
    assert c.bs_from_absolute(0) == (2050, 1, 1)
    with pytest.raises(YearOutOfRangeError):
        c.absolute_days("bs", 2049, 12, 1)
