"""Overflow-checked integer arithmetic and proleptic Gregorian helpers.

Python integers never overflow, so the ``*_exact`` functions check the
mathematical result against the signed 64-bit (or 32-bit) range instead.
"""

from __future__ import annotations

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def to_long_exact(value: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError("long overflow")
    return value


def add_exact(a: int, b: int) -> int:
    return to_long_exact(a + b)


def subtract_exact(a: int, b: int) -> int:
    return to_long_exact(a - b)


def multiply_exact(a: int, b: int) -> int:
    return to_long_exact(a * b)


def negate_exact(a: int) -> int:
    return to_long_exact(-a)


def to_int_exact(value: int) -> int:
    """Narrow to the signed 32-bit range"""
    if value < INT32_MIN or value > INT32_MAX:
        raise OverflowError("integer overflow")
    return value


def floor_div(a: int, b: int) -> int:
    return a // b


def floor_mod(a: int, b: int) -> int:
    return a % b


# Truncating division, i.e. rounding toward zero. Several calendrical
# "until" calculations count only whole units that have fully elapsed,
# in either direction.
def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    return a - b * trunc_div(a, b)


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# 1-indexed days before the start of each month (non-leap year)
_DAYS_BEFORE_MONTH = [0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def days_before_month(year: int, month: int) -> int:
    return _DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap(year))


# The era-based algorithms below work for any year, which the standard
# library's `date` cannot do (it stops at year 9999).
# Both count days relative to 1970-01-01.
def days_from_civil(year: int, month: int, day: int) -> int:
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365
        + year_of_era // 4
        - year_of_era // 100
        + day_of_year
    )
    return era * 146_097 + day_of_era - 719_468


def civil_from_days(epoch_day: int) -> tuple[int, int, int]:
    shifted = epoch_day + 719_468
    era = shifted // 146_097
    day_of_era = shifted - era * 146_097
    year_of_era = (
        day_of_era
        - day_of_era // 1_460
        + day_of_era // 36_524
        - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    month_index = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_index + 2) // 5 + 1
    month = month_index + 3 if month_index < 10 else month_index - 9
    return year_of_era + era * 400 + (month <= 2), month, day


def weekday_from_days(epoch_day: int) -> int:
    """ISO day-of-week (Monday=1) for the given epoch day"""
    # 1970-01-01 was a Thursday
    return (epoch_day + 3) % 7 + 1
