"""POSIX TZ strings (e.g. ``CET-1CEST,M3.5.0,M10.5.0/3``) as zone rules.

Transitions are computed per year from the rule, so these rules
extend to any year the value types support.
"""

from __future__ import annotations

from typing import Optional, Union

from .._math import (
    civil_from_days,
    days_from_civil,
    days_in_month,
    days_in_year,
    is_leap,
)
from .common import Ambiguity, Fold, Gap, Unambiguous

DEFAULT_DST = 3600
DEFAULT_RULE_TIME = 2 * 3600
MAX_OFFSET = 24 * 3600
Weekday = int  # POSIX numbering: Sunday=0, Saturday=6
EpochDay = int


def year_for_epoch(ts: int) -> int:
    return civil_from_days(ts // 86400)[0]


def _posix_weekday(epoch_day: EpochDay) -> Weekday:
    # 1970-01-01 was a Thursday
    return (epoch_day + 4) % 7


class LastWeekday:
    """``Mm.5.d``: the last given weekday of the month"""

    month: int
    weekday: Weekday

    __slots__ = ("month", "weekday")

    def __init__(self, month: int, weekday: Weekday):
        self.month = month
        self.weekday = weekday

    def apply(self, year: int) -> EpochDay:
        last = days_from_civil(
            year, self.month, days_in_month(year, self.month)
        )
        return last - (_posix_weekday(last) - self.weekday) % 7

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LastWeekday):
            return NotImplemented  # pragma: no cover
        return self.month == other.month and self.weekday == other.weekday

    def __repr__(self) -> str:
        return f"LastWeekday({self.month}, {self.weekday})"


class NthWeekday:
    """``Mm.n.d``: the n-th (1-4) given weekday of the month"""

    month: int
    nth: int
    weekday: Weekday

    __slots__ = ("month", "nth", "weekday")

    def __init__(self, month: int, nth: int, weekday: Weekday):
        self.month = month
        self.nth = nth
        self.weekday = weekday

    def apply(self, year: int) -> EpochDay:
        first = days_from_civil(year, self.month, 1)
        return (
            first
            + (self.weekday - _posix_weekday(first)) % 7
            + 7 * (self.nth - 1)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NthWeekday):
            return NotImplemented  # pragma: no cover
        return (
            self.month == other.month
            and self.nth == other.nth
            and self.weekday == other.weekday
        )

    def __repr__(self) -> str:
        return f"NthWeekday({self.month}, {self.nth}, {self.weekday})"


class DayOfYear:
    """``n``: one-based day of the year, counting February 29th"""

    nth: int  # 1-366

    __slots__ = ("nth",)

    def __init__(self, nth: int):
        self.nth = nth

    def apply(self, year: int) -> EpochDay:
        day = min(self.nth, days_in_year(year))
        return days_from_civil(year, 1, 1) + day - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayOfYear):
            return NotImplemented  # pragma: no cover
        return self.nth == other.nth

    def __repr__(self) -> str:
        return f"DayOfYear({self.nth})"


class JulianDayOfYear:
    """``Jn``: day of the year, never counting February 29th"""

    nth: int  # 1-365

    __slots__ = ("nth",)

    def __init__(self, nth: int):
        self.nth = nth

    def apply(self, year: int) -> EpochDay:
        day = self.nth + (self.nth > 59 and is_leap(year))
        return days_from_civil(year, 1, 1) + day - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JulianDayOfYear):
            return NotImplemented  # pragma: no cover
        return self.nth == other.nth

    def __repr__(self) -> str:
        return f"JulianDayOfYear({self.nth})"


Rule = Union[LastWeekday, NthWeekday, DayOfYear, JulianDayOfYear]


class Dst:
    offset: int
    start: tuple[Rule, int]
    end: tuple[Rule, int]

    __slots__ = ("offset", "start", "end")

    def __init__(
        self, offset: int, start: tuple[Rule, int], end: tuple[Rule, int]
    ):
        self.offset = offset
        self.start = start
        self.end = end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dst):
            return NotImplemented  # pragma: no cover
        return (
            self.offset == other.offset
            and self.start == other.start
            and self.end == other.end
        )

    def __repr__(self) -> str:
        return f"Dst(offset={self.offset}, start={self.start}, end={self.end})"

    def local_bounds(self, year: int) -> tuple[int, int]:
        """Local epoch seconds at which DST starts and ends in the given year.
        The start is in standard time, the end in daylight time."""
        start_rule, start_time = self.start
        end_rule, end_time = self.end
        return (
            start_rule.apply(year) * 86400 + start_time,
            end_rule.apply(year) * 86400 + end_time,
        )


class TzStr:
    std: int
    dst: Optional[Dst]

    __slots__ = ("std", "dst")

    def __init__(self, std: int, dst: Optional[Dst] = None):
        self.std = std
        self.dst = dst

    @property
    def is_fixed(self) -> bool:
        return self.dst is None

    def offset_for_instant(self, epoch: int) -> int:
        if self.dst is None:
            return self.std
        # The local year may in theory differ from the year of the
        # transition, but no real-world rule puts a transition there.
        start, end = self.dst.local_bounds(year_for_epoch(epoch + self.std))
        dst_offset = self.dst.offset
        start -= self.std
        end -= dst_offset

        # Southern hemisphere rules wrap around the new year
        if start < end:
            return dst_offset if start <= epoch < end else self.std
        else:
            return self.std if end <= epoch < start else dst_offset

    # NOTE: `epoch` is the datetime in seconds since the LOCAL epoch.
    def ambiguity_for_local(self, epoch: int) -> Ambiguity:
        if self.dst is None:
            return Unambiguous(self.std)
        start, end = self.dst.local_bounds(year_for_epoch(epoch))
        dst_offset = self.dst.offset

        # t1 and t2 are wall-clock times as read in off1 and off2 respectively
        if start < end:
            t1, t2 = start, end
            off1, off2 = self.std, dst_offset
        else:
            t1, t2 = end, start
            off1, off2 = dst_offset, self.std
        shift = off2 - off1

        if shift >= 0:
            if epoch < t1:
                return Unambiguous(off1)
            elif epoch < t1 + shift:
                return Gap(t1 - off1, off1, off2)
            elif epoch < t2 - shift:
                return Unambiguous(off2)
            elif epoch < t2:
                return Fold(t2 - off2, off2, off1)
            else:
                return Unambiguous(off1)
        else:
            if epoch < t1 + shift:
                return Unambiguous(off1)
            elif epoch < t1:
                return Fold(t1 - off1, off1, off2)
            elif epoch < t2:
                return Unambiguous(off2)
            elif epoch < t2 - shift:
                return Gap(t2 - off2, off2, off1)
            else:
                return Unambiguous(off1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TzStr):
            return NotImplemented  # pragma: no cover
        return self.std == other.std and self.dst == other.dst

    def __repr__(self) -> str:
        if self.dst is None:
            return f"TzStr(std={self.std})"
        return f"TzStr(std={self.std}, dst={self.dst})"

    @classmethod
    def parse(cls, s: str) -> TzStr:
        if not s.isascii():
            raise ValueError(
                "Invalid POSIX TZ string: non-ASCII characters found"
            )

        s = skip_tzname(s)
        std, s = parse_offset(s)

        # Nothing else means a fixed offset without DST
        if not s:
            return cls(std, dst=None)

        s = skip_tzname(s)

        if s[:1] == ",":
            # No DST offset given: the default is std + 1hr
            s = s[1:]
            dst = std + DEFAULT_DST
            if dst >= MAX_OFFSET:
                raise ValueError(
                    "Invalid POSIX TZ string: DST offset out of range"
                )
        else:
            dst, s = parse_offset(s)
            s = expect_char(s, ",")

        start, s = parse_rule(s)
        s = expect_char(s, ",")
        end, s = parse_rule(s)

        if s:
            raise ValueError(
                f"Invalid POSIX TZ string: unexpected trailing '{s}'"
            )
        return cls(std, Dst(dst, start, end))


def skip_tzname(s: str) -> str:
    """Skip the zone abbreviation, returning the rest of the string."""
    if s[:1] == "<":  # bracketed format, e.g. <+03>
        stop = s.find(">") + 1
        if stop < 3:
            raise ValueError("Invalid TZ string: missing or empty name")
    else:  # unbracketed format only allows letters
        for stop, char in enumerate(s):
            if not char.isalpha():
                break
        else:
            raise ValueError("Invalid TZ string: missing or empty name")

        if stop == 0:
            raise ValueError("Invalid TZ string: invalid name")

    return s[stop:]


def expect_char(s: str, char: str) -> str:
    if s[:1] != char:
        raise ValueError(f"Invalid TZ string: expected '{char}'")
    return s[1:]


def parse_offset(s: str) -> tuple[int, str]:
    delta, s = parse_hms(s)
    if abs(delta) >= MAX_OFFSET:
        raise ValueError("Invalid POSIX TZ string: offset out of range")
    # POSIX offsets count westward, so the sign is flipped
    return -delta, s


# h[hh[:mm[:ss]]] with an optional sign
def parse_hms(s: str) -> tuple[int, str]:
    sign = 1
    if s[:1] == "+":
        s = s[1:]
    elif s[:1] == "-":
        s = s[1:]
        sign = -1

    hour, s = parse_up_to_3_digits(s)
    total = hour * 3600
    if s[:1] == ":":
        minute, s = parse_00_to_59(s[1:])
        total += minute * 60
        if s[:1] == ":":
            second, s = parse_00_to_59(s[1:])
            total += second

    return sign * total, s


def parse_up_to_3_digits(s: str) -> tuple[int, str]:
    digits = 0
    while digits < 3 and s[digits : digits + 1].isdigit():
        digits += 1
    if digits == 0:
        raise ValueError(f"Invalid TZ string: expected digits, got '{s}'")
    return int(s[:digits]), s[digits:]


def parse_1_to_12(s: str) -> tuple[int, str]:
    digits = 2 if s[1:2].isdigit() else 1
    if not s[:digits].isdigit():
        raise ValueError(f"Invalid TZ string: expected 1-12, got '{s[:2]}'")
    value = int(s[:digits])
    if value < 1 or value > 12:
        raise ValueError(f"Invalid TZ string: expected 1-12, got '{s[:2]}'")
    return value, s[digits:]


def parse_00_to_59(s: str) -> tuple[int, str]:
    if len(s) < 2 or not s[:2].isdigit():
        raise ValueError(f"Invalid TZ string: expected 2 digits, got '{s}'")
    value = int(s[:2])
    if value > 59:
        raise ValueError(f"Invalid TZ string: expected 00-59, got '{s[:2]}'")
    return value, s[2:]


def parse_digit(s: str) -> tuple[int, str]:
    if not s[:1].isdigit():
        raise ValueError(f"Invalid TZ string: expected a digit, got '{s}'")
    return int(s[:1]), s[1:]


def parse_rule(s: str) -> tuple[tuple[Rule, int], str]:
    rule: Rule
    if s[:1] == "M":  # Mm.n.d
        m, s = parse_1_to_12(s[1:])
        s = expect_char(s, ".")
        n, s = parse_digit(s)
        s = expect_char(s, ".")
        d, s = parse_digit(s)

        if n < 1 or d > 6:
            raise ValueError("Invalid DST rule")

        if n < 5:
            rule = NthWeekday(m, n, d)
        elif n == 5:
            rule = LastWeekday(m, d)
        else:
            raise ValueError(f"Invalid week number: {n}")
    elif s[:1] == "J":  # Jn
        nth, s = parse_up_to_3_digits(s[1:])
        if nth < 1 or nth > 365:
            raise ValueError(f"Invalid Julian day of year: {nth}")
        rule = JulianDayOfYear(nth)
    else:  # n, zero-based
        nth, s = parse_up_to_3_digits(s)
        if nth > 365:
            raise ValueError(f"Invalid day of year: {nth}")
        rule = DayOfYear(nth + 1)

    if s[:1] == "/":
        time, s = parse_hms(s[1:])
    else:
        time = DEFAULT_RULE_TIME

    return (rule, time), s
