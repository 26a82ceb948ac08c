from __future__ import annotations

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(y: int) -> bool:
    """Gregorian rule: divisible by 4, not by 100 unless also by 400."""
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def days_in_year(y: int) -> int:
    return 366 if is_leap_year(y) else 365

def days_in_month(y: int, m: int) -> int:
    if m == 2 and is_leap_year(y):
        return 29
    return _MONTH_DAYS[m - 1]

def is_valid_gregorian(y: int, m: int, d: int) -> bool:
    return y >= 1 and 1 <= m <= 12 and 1 <= d <= days_in_month(y, m)


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian (y, m, d) to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_ymd(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def weekday_index(jdn: int) -> int:
    """Day of week for a JDN, 0 = Sunday .. 6 = Saturday."""
    return (jdn + 1) % 7
