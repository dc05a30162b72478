"""Regular expressions and helpers for the ISO 8601 text forms.

The functions here only do the syntactic part: they split the text into
integer components (or return ``None`` if the text doesn't match).
Range validation is left to the value types themselves.
"""

from __future__ import annotations

import re
from typing import Optional

_DateParts = tuple[int, int, int]
_TimeParts = tuple[int, int, int, int]

# A plus sign is only allowed (and then required) for years beyond 9999
_YEAR = r"(-[0-9]{4,9}|\+[0-9]{5,9}|[0-9]{4})"
_DATE = _YEAR + r"-([0-9]{2})-([0-9]{2})"
_TIME = r"([0-9]{2}):([0-9]{2})(?::([0-9]{2})(?:[.,]([0-9]{1,9}))?)?"
_OFFSET = r"(Z|[-+][0-9]{2}:[0-9]{2}(?::[0-9]{2})?)"
_ZONE = r"\[([^\]\s]+)\]"

match_date = re.compile(_DATE, re.ASCII).fullmatch
match_time = re.compile(_TIME, re.ASCII).fullmatch
match_datetime = re.compile(_DATE + "T" + _TIME, re.ASCII).fullmatch
match_offset_datetime = re.compile(
    _DATE + "T" + _TIME + _OFFSET, re.ASCII
).fullmatch
match_zoned_datetime = re.compile(
    _DATE + "T" + _TIME + _OFFSET + f"(?:{_ZONE})?", re.ASCII
).fullmatch
match_year = re.compile(_YEAR, re.ASCII).fullmatch
match_offset_time = re.compile(_TIME + _OFFSET, re.ASCII).fullmatch
match_year_month = re.compile(_YEAR + r"-([0-9]{2})", re.ASCII).fullmatch
match_month_day = re.compile(r"--([0-9]{2})-([0-9]{2})", re.ASCII).fullmatch

# Durations: days, hours, minutes, seconds with an optional fraction
match_duration = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)D)?"
    r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?"
    r"(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
    re.ASCII | re.IGNORECASE,
).fullmatch

# Periods: years, months, weeks, days
match_period = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)Y)?(?:([-+]?[0-9]+)M)?"
    r"(?:([-+]?[0-9]+)W)?(?:([-+]?[0-9]+)D)?",
    re.ASCII | re.IGNORECASE,
).fullmatch


def fraction_to_nanos(digits: Optional[str]) -> int:
    """Right-pad a fraction to exactly 9 digits and read it as nanoseconds"""
    if not digits:
        return 0
    return int(digits[:9].ljust(9, "0"))


def _date_parts(groups: tuple[Optional[str], ...]) -> _DateParts:
    year, month, day = groups
    assert year and month and day
    return int(year), int(month), int(day)


def _time_parts(groups: tuple[Optional[str], ...]) -> _TimeParts:
    hour, minute, second, fraction = groups
    assert hour and minute
    return (
        int(hour),
        int(minute),
        int(second) if second else 0,
        fraction_to_nanos(fraction),
    )


def parse_date(s: str) -> Optional[_DateParts]:
    if (m := match_date(s)) is None:
        return None
    return _date_parts(m.groups())


def parse_time(s: str) -> Optional[_TimeParts]:
    if (m := match_time(s)) is None:
        return None
    return _time_parts(m.groups())


def parse_datetime(s: str) -> Optional[tuple[_DateParts, _TimeParts]]:
    if (m := match_datetime(s)) is None:
        return None
    groups = m.groups()
    return _date_parts(groups[:3]), _time_parts(groups[3:7])


def parse_offset_datetime(
    s: str,
) -> Optional[tuple[_DateParts, _TimeParts, str]]:
    if (m := match_offset_datetime(s)) is None:
        return None
    groups = m.groups()
    offset = groups[7]
    assert offset
    return _date_parts(groups[:3]), _time_parts(groups[3:7]), offset


def parse_zoned_datetime(
    s: str,
) -> Optional[tuple[_DateParts, _TimeParts, str, Optional[str]]]:
    if (m := match_zoned_datetime(s)) is None:
        return None
    groups = m.groups()
    offset = groups[7]
    assert offset
    return (
        _date_parts(groups[:3]),
        _time_parts(groups[3:7]),
        offset,
        groups[8],
    )


def parse_year_month(s: str) -> Optional[tuple[int, int]]:
    if (m := match_year_month(s)) is None:
        return None
    return int(m[1]), int(m[2])


def parse_month_day(s: str) -> Optional[tuple[int, int]]:
    if (m := match_month_day(s)) is None:
        return None
    return int(m[1]), int(m[2])


def parse_year(s: str) -> Optional[int]:
    if (m := match_year(s)) is None:
        return None
    return int(m[1])


def parse_offset_time(s: str) -> Optional[tuple[_TimeParts, str]]:
    if (m := match_offset_time(s)) is None:
        return None
    groups = m.groups()
    offset = groups[4]
    assert offset
    return _time_parts(groups[:4]), offset
