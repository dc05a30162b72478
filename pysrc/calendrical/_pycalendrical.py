# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why is everything in one file?
#   - The value types, fields, units and zones all refer to each other.
#     Keeping them together prevents circular imports.
#   - Flat is better than nested
# - Integers here are unbounded Python ints. The 64-bit (and 32-bit) limits
#   of the values are checked explicitly with the helpers in `_math`.
# - There is some code duplication in this file. This is intentional:
#   - It makes it easier to understand each class on its own
#   - It's sometimes necessary for the type checker
from __future__ import annotations

__version__ = "0.3.0"

import enum
import logging
import re
from abc import ABC, ABCMeta, abstractmethod
from functools import lru_cache
from struct import pack, unpack
from threading import Lock
from time import time_ns
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Mapping,
    Optional,
    Union,
    no_type_check,
    overload,
)

from . import _parse
from ._math import (
    INT64_MAX,
    INT64_MIN,
    add_exact,
    civil_from_days,
    days_from_civil,
    days_before_month,
    days_in_month,
    floor_div,
    floor_mod,
    is_leap,
    multiply_exact,
    subtract_exact,
    to_int_exact,
    to_long_exact,
    trunc_div,
    trunc_mod,
    weekday_from_days,
)
from ._tz import Fold, Gap, TimeZone, Unambiguous
from ._tz.store import (
    TimeZoneNotFoundError,
    available_keys,
    get_system_tz,
    get_tz,
)

__all__ = [
    # Exceptions
    "DateTimeError",
    "DateTimeParseError",
    "UnsupportedTemporalTypeError",
    "ZoneRulesError",
    # Field and unit framework
    "ValueRange",
    "TemporalAccessor",
    "Temporal",
    "TemporalAdjuster",
    "TemporalAmount",
    "TemporalField",
    "TemporalUnit",
    "ChronoField",
    "ChronoUnit",
    "TemporalQueries",
    "IsoFields",
    "JulianFields",
    "TemporalAdjusters",
    # Calendar values
    "DayOfWeek",
    "Month",
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "Year",
    "YearMonth",
    "MonthDay",
    "Instant",
    # Amounts
    "Duration",
    "Period",
    # Zones
    "ZoneId",
    "ZoneOffset",
    "ZoneRegion",
    "ZoneOffsetTransition",
    "ZoneRules",
    "ZoneRulesProvider",
    "SimpleZoneRulesProvider",
    # Zoned and offset values
    "OffsetTime",
    "OffsetDateTime",
    "ZonedDateTime",
    # Clocks
    "Clock",
]

logger = logging.getLogger("calendrical")

# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_UNSET: Any = object()

_MIN_YEAR = -999_999_999
_MAX_YEAR = 999_999_999
_HOURS_PER_DAY = 24
_MINUTES_PER_HOUR = 60
_MINUTES_PER_DAY = 1440
_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 3600
_SECONDS_PER_DAY = 86400
_MILLIS_PER_DAY = 86_400_000
_MICROS_PER_DAY = 86_400_000_000
_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MINUTE = 60 * _NANOS_PER_SECOND
_NANOS_PER_HOUR = 3600 * _NANOS_PER_SECOND
_NANOS_PER_DAY = 86400 * _NANOS_PER_SECOND


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


class _AbstractEnumMeta(enum.EnumMeta, ABCMeta):
    """Allows enums to implement the abstract temporal interfaces"""


# ----------------------------------------------------------------------------
# Exceptions
# ----------------------------------------------------------------------------


class DateTimeError(ValueError):
    """A date or time value is out of range, or a combination is invalid"""


class DateTimeParseError(DateTimeError):
    """Text could not be parsed into a date, time or amount"""

    parsed_string: str
    error_index: int

    def __init__(self, message: str, parsed_string: str, error_index: int = 0):
        super().__init__(message)
        self.parsed_string = parsed_string
        self.error_index = error_index

    @classmethod
    def _for_text(
        cls, text: str, cause: Optional[Exception] = None
    ) -> DateTimeParseError:
        if cause is None:
            return cls(f"Text {text!r} could not be parsed", text, 0)
        return cls(f"Text {text!r} could not be parsed: {cause}", text, 0)


class UnsupportedTemporalTypeError(DateTimeError):
    """A field or unit doesn't apply to this kind of value"""

    @classmethod
    def _for_field(cls, field: object) -> UnsupportedTemporalTypeError:
        return cls(f"Unsupported field: {field}")

    @classmethod
    def _for_unit(cls, unit: object) -> UnsupportedTemporalTypeError:
        return cls(f"Unsupported unit: {unit}")


class ZoneRulesError(DateTimeError):
    """A zone ID is well-formed, but no rules are available for it"""


def _unable_to_obtain(kind: str, temporal: object) -> DateTimeError:
    return DateTimeError(
        f"Unable to obtain {kind} from TemporalAccessor: "
        f"{temporal!r} of type {type(temporal).__name__}"
    )


# ----------------------------------------------------------------------------
# Value ranges
# ----------------------------------------------------------------------------


@final
class ValueRange(_ImmutableBase):
    """The range of valid values of a field.

    The minimum and maximum may vary by context, e.g. the day of the
    month is at most 28, 29, 30 or 31 depending on the month.

    Example
    -------
    >>> r = ValueRange.of(1, 28, 31)
    >>> str(r)
    '1 - 28/31'
    >>> r.is_valid_value(30)
    True
    """

    __slots__ = (
        "_min_smallest",
        "_min_largest",
        "_max_smallest",
        "_max_largest",
    )

    def __init__(
        self,
        min_smallest: int,
        min_largest: int,
        max_smallest: int,
        max_largest: int,
    ) -> None:
        if min_smallest > min_largest:
            raise ValueError(
                "Smallest minimum value must be less than "
                "largest minimum value"
            )
        if max_smallest > max_largest:
            raise ValueError(
                "Smallest maximum value must be less than "
                "largest maximum value"
            )
        if min_largest > max_largest:
            raise ValueError("Minimum value must be less than maximum value")
        if min_smallest > max_smallest:
            raise ValueError(
                "Minimum value must be less than maximum value"
            )
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @overload
    @classmethod
    def of(cls, min: int, max: int, /) -> ValueRange: ...

    @overload
    @classmethod
    def of(
        cls, min: int, max_smallest: int, max_largest: int, /
    ) -> ValueRange: ...

    @overload
    @classmethod
    def of(
        cls,
        min_smallest: int,
        min_largest: int,
        max_smallest: int,
        max_largest: int,
        /,
    ) -> ValueRange: ...

    @classmethod
    def of(cls, *args: int) -> ValueRange:
        """Create a range from two, three or four bounds

        With two: a fixed minimum and maximum.
        With three: a fixed minimum and a variable maximum.
        With four: a variable minimum and a variable maximum.
        """
        if len(args) == 2:
            return cls(args[0], args[0], args[1], args[1])
        elif len(args) == 3:
            return cls(args[0], args[0], args[1], args[2])
        elif len(args) == 4:
            return cls(*args)
        raise TypeError(f"Expected 2 to 4 bounds, got {len(args)}")

    def is_fixed(self) -> bool:
        """Whether the minimum and maximum never vary"""
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    @property
    def minimum(self) -> int:
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        return self._max_smallest

    @property
    def maximum(self) -> int:
        return self._max_largest

    def is_int_value(self) -> bool:
        """Whether all values in the range fit in a 32-bit integer"""
        return (
            self._min_smallest >= -(1 << 31)
            and self._max_largest < (1 << 31)
        )

    def is_valid_value(self, value: int) -> bool:
        return self._min_smallest <= value <= self._max_largest

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(
        self, value: int, field: Optional[TemporalField] = None
    ) -> int:
        """Return the value, or raise DateTimeError if it's out of range"""
        if not self.is_valid_value(value):
            raise DateTimeError(self._invalid_message(value, field))
        return value

    def check_valid_int_value(
        self, value: int, field: Optional[TemporalField] = None
    ) -> int:
        if not self.is_valid_int_value(value):
            if not self.is_int_value():
                raise DateTimeError(f"Invalid int value for {field}: {value}")
            raise DateTimeError(self._invalid_message(value, field))
        return value

    def _invalid_message(
        self, value: int, field: Optional[TemporalField]
    ) -> str:
        if field is None:
            return f"Invalid value (valid values {self}): {value}"
        return f"Invalid value for {field} (valid values {self}): {value}"

    def __str__(self) -> str:
        text = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            text += f"/{self._min_largest}"
        text += f" - {self._max_smallest}"
        if self._max_smallest != self._max_largest:
            text += f"/{self._max_largest}"
        return text

    def __repr__(self) -> str:
        return f"ValueRange({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._min_smallest == other._min_smallest
            and self._min_largest == other._min_largest
            and self._max_smallest == other._max_smallest
            and self._max_largest == other._max_largest
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._min_smallest,
                self._min_largest,
                self._max_smallest,
                self._max_largest,
            )
        )


# ----------------------------------------------------------------------------
# The temporal interfaces
# ----------------------------------------------------------------------------

TemporalQuery = Callable[["TemporalAccessor"], Any]
"""Any callable taking a temporal accessor, see :class:`TemporalQueries`"""


class TemporalField(ABC):
    """A field of date-time, such as month-of-year or minute-of-hour.

    :class:`ChronoField` holds the standard ISO fields. Other fields can
    be defined by subclassing; the value types then call back into the
    field's methods.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def base_unit(self) -> TemporalUnit: ...

    @property
    @abstractmethod
    def range_unit(self) -> TemporalUnit: ...

    @abstractmethod
    def range(self) -> ValueRange:
        """The range of valid values, without context"""

    @abstractmethod
    def is_date_based(self) -> bool: ...

    @abstractmethod
    def is_time_based(self) -> bool: ...

    @abstractmethod
    def is_supported_by(self, temporal: TemporalAccessor) -> bool: ...

    @abstractmethod
    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """The range of valid values given the context of ``temporal``"""

    @abstractmethod
    def get_from(self, temporal: TemporalAccessor) -> int: ...

    @abstractmethod
    def adjust_into(self, temporal: Any, new_value: int) -> Any: ...


class TemporalUnit(ABC):
    """A unit of time, such as days or minutes.

    :class:`ChronoUnit` holds the standard ISO units.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def duration(self) -> Duration:
        """The (possibly estimated) length of the unit"""

    @abstractmethod
    def is_duration_estimated(self) -> bool: ...

    @abstractmethod
    def is_date_based(self) -> bool: ...

    @abstractmethod
    def is_time_based(self) -> bool: ...

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(self)

    @abstractmethod
    def add_to(self, temporal: Any, amount: int) -> Any: ...

    @abstractmethod
    def between(
        self, temporal1_inclusive: Temporal, temporal2_exclusive: Temporal
    ) -> int: ...


class TemporalAccessor(ABC):
    """Read-only access to the fields of a date, time or offset"""

    __slots__ = ()

    @abstractmethod
    def is_supported(self, field: Any) -> bool:
        """Whether the field (or for :class:`Temporal`, the unit) applies"""

    def range(self, field: TemporalField) -> ValueRange:
        """The valid values of the field, refined by this value's context

        Example
        -------
        >>> LocalDate.of(2024, 2, 1).range(ChronoField.DAY_OF_MONTH)
        ValueRange(1 - 29)
        """
        if isinstance(field, ChronoField):
            if self.is_supported(field):
                return field.range()
            raise UnsupportedTemporalTypeError._for_field(field)
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """The value of a field that always fits in 32 bits.

        Use :meth:`get_long` for fields with larger values, such as
        :attr:`ChronoField.EPOCH_DAY`.
        """
        value_range = self.range(field)
        if not value_range.is_int_value():
            raise UnsupportedTemporalTypeError(
                f"Invalid field {field} for get() method, "
                "use get_long() instead"
            )
        value = self.get_long(field)
        if not value_range.is_valid_value(value):
            raise DateTimeError(
                f"Invalid value for {field} "
                f"(valid values {value_range}): {value}"
            )
        return value

    @abstractmethod
    def get_long(self, field: TemporalField) -> int: ...

    def query(self, query: TemporalQuery) -> Any:
        """Answer a query, see :class:`TemporalQueries`"""
        if (
            query is TemporalQueries.ZONE_ID
            or query is TemporalQueries.PRECISION
        ):
            return None
        return query(self)


class TemporalAdjuster(ABC):
    """Adjusts another temporal, e.g. to set it to this date"""

    __slots__ = ()

    @abstractmethod
    def adjust_into(self, temporal: Any) -> Any: ...


TemporalAdjusterLike = Union[TemporalAdjuster, Callable[[Any], Any]]


class TemporalAmount(ABC):
    """An amount of time, such as :class:`Duration` or :class:`Period`"""

    __slots__ = ()

    @abstractmethod
    def get(self, unit: TemporalUnit) -> int: ...

    @property
    @abstractmethod
    def units(self) -> list[TemporalUnit]: ...

    @abstractmethod
    def add_to(self, temporal: Any) -> Any: ...

    @abstractmethod
    def subtract_from(self, temporal: Any) -> Any: ...


class Temporal(TemporalAccessor):
    """A date, time or offset that can be adjusted and moved in time"""

    __slots__ = ()

    def with_(
        self,
        adjuster: Union[TemporalAdjusterLike, TemporalField],
        new_value: int = _UNSET,
    ) -> Any:
        """Return a copy adjusted by an adjuster, or with a field set.

        Example
        -------
        >>> d = LocalDate.of(2021, 1, 2)
        >>> d.with_(ChronoField.DAY_OF_MONTH, 20)
        LocalDate(2021-01-20)
        >>> d.with_(TemporalAdjusters.last_day_of_month())
        LocalDate(2021-01-31)
        """
        if new_value is not _UNSET:
            if isinstance(adjuster, ChronoField):
                return self._with_field(adjuster, new_value)
            elif isinstance(adjuster, TemporalField):
                return adjuster.adjust_into(self, new_value)
            raise TypeError(f"Expected a field, got {adjuster!r}")
        return self._adjust(adjuster)

    def _adjust(self, adjuster: Any) -> Any:
        if isinstance(adjuster, TemporalAdjuster):
            return adjuster.adjust_into(self)
        elif callable(adjuster) and not isinstance(adjuster, type):
            return adjuster(self)
        raise TypeError(f"Expected an adjuster, got {adjuster!r}")

    @abstractmethod
    def _with_field(self, field: ChronoField, new_value: int) -> Any: ...

    def plus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> Any:
        """Add an amount of time, or an amount of the given unit.

        Example
        -------
        >>> d = LocalDate.of(2021, 1, 31)
        >>> d.plus(1, ChronoUnit.MONTHS)
        LocalDate(2021-02-28)
        >>> d.plus(Period.of_days(3))
        LocalDate(2021-02-03)
        """
        if unit is None:
            if isinstance(amount, TemporalAmount):
                return amount.add_to(self)
            raise TypeError(f"Expected a temporal amount, got {amount!r}")
        elif isinstance(unit, ChronoUnit):
            return self._plus_unit(amount, unit)
        return unit.add_to(self, amount)

    @abstractmethod
    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Any: ...

    def minus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> Any:
        """Subtract an amount of time, or an amount of the given unit"""
        if unit is None:
            if isinstance(amount, TemporalAmount):
                return amount.subtract_from(self)
            raise TypeError(f"Expected a temporal amount, got {amount!r}")
        return self.plus(-amount, unit)

    @abstractmethod
    def until(self, end_exclusive: Any, unit: TemporalUnit) -> Any:
        """The amount of time until another temporal, in whole units"""

    def __add__(self, other: TemporalAmount) -> Any:
        if isinstance(other, TemporalAmount):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: TemporalAmount) -> Any:
        if isinstance(other, TemporalAmount):
            return self.minus(other)
        return NotImplemented


class _Comparable(_ImmutableBase):
    """Ordering operators in terms of ``compare_to``"""

    __slots__ = ()

    def compare_to(self, other: Any) -> int:
        raise NotImplementedError()

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) >= 0


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _is_supported(
    field_or_unit: Any,
    temporal: TemporalAccessor,
    field_check: Callable[[ChronoField], bool],
    unit_check: Optional[Callable[[ChronoUnit], bool]] = None,
) -> bool:
    # Shared implementation of `is_supported` for the value types
    if isinstance(field_or_unit, ChronoField):
        return field_check(field_or_unit)
    elif isinstance(field_or_unit, ChronoUnit):
        return unit_check is not None and unit_check(field_or_unit)
    elif isinstance(field_or_unit, TemporalField):
        return field_or_unit.is_supported_by(temporal)
    elif isinstance(field_or_unit, TemporalUnit) and unit_check is not None:
        assert isinstance(temporal, Temporal)
        return field_or_unit.is_supported_by(temporal)
    return False


# ----------------------------------------------------------------------------
# Standard units and fields
# ----------------------------------------------------------------------------


class ChronoUnit(TemporalUnit, enum.Enum, metaclass=_AbstractEnumMeta):
    """The standard units of time, from nanoseconds to eras.

    Units up to half-days are exact. Days and above are estimated,
    since their length varies with daylight saving time or the calendar.

    Example
    -------
    >>> ChronoUnit.HOURS.duration
    Duration(PT1H)
    >>> ChronoUnit.MONTHS.is_duration_estimated()
    True
    """

    # name, seconds, nanos
    NANOS = ("Nanos", 0, 1)
    MICROS = ("Micros", 0, 1000)
    MILLIS = ("Millis", 0, 1_000_000)
    SECONDS = ("Seconds", 1, 0)
    MINUTES = ("Minutes", 60, 0)
    HOURS = ("Hours", 3600, 0)
    HALF_DAYS = ("HalfDays", 43200, 0)
    DAYS = ("Days", 86400, 0)
    WEEKS = ("Weeks", 7 * 86400, 0)
    # A month and year average over the 400 year Gregorian cycle
    MONTHS = ("Months", 31556952 // 12, 0)
    YEARS = ("Years", 31556952, 0)
    DECADES = ("Decades", 31556952 * 10, 0)
    CENTURIES = ("Centuries", 31556952 * 100, 0)
    MILLENNIA = ("Millennia", 31556952 * 1000, 0)
    ERAS = ("Eras", 31556952 * 1_000_000_000, 0)
    FOREVER = ("Forever", INT64_MAX, 999_999_999)

    def __init__(self, display_name: str, seconds: int, nanos: int) -> None:
        self._display_name = display_name
        self._seconds = seconds
        self._nanos = nanos

    @property
    def duration(self) -> Duration:
        return Duration.of_seconds(self._seconds, self._nanos)

    def _index(self) -> int:
        return _UNIT_ORDER[self]

    def is_duration_estimated(self) -> bool:
        return self._index() >= _UNIT_ORDER[ChronoUnit.DAYS]

    def is_date_based(self) -> bool:
        return (
            self._index() >= _UNIT_ORDER[ChronoUnit.DAYS]
            and self is not ChronoUnit.FOREVER
        )

    def is_time_based(self) -> bool:
        return self._index() < _UNIT_ORDER[ChronoUnit.DAYS]

    def add_to(self, temporal: Any, amount: int) -> Any:
        return temporal.plus(amount, self)

    def between(
        self, temporal1_inclusive: Temporal, temporal2_exclusive: Temporal
    ) -> int:
        return temporal1_inclusive.until(temporal2_exclusive, self)

    def __str__(self) -> str:
        return self._display_name

    def __repr__(self) -> str:
        return f"ChronoUnit.{self.name}"


_UNIT_ORDER = {unit: i for i, unit in enumerate(ChronoUnit)}


class ChronoField(TemporalField, enum.Enum, metaclass=_AbstractEnumMeta):
    """The standard ISO fields of date and time.

    Example
    -------
    >>> ChronoField.DAY_OF_MONTH.range()
    ValueRange(1 - 28/31)
    >>> LocalDate.of(2021, 3, 4).get(ChronoField.DAY_OF_YEAR)
    63
    """

    # name, base unit, range unit, range
    NANO_OF_SECOND = (
        "NanoOfSecond",
        ChronoUnit.NANOS,
        ChronoUnit.SECONDS,
        ValueRange.of(0, 999_999_999),
    )
    NANO_OF_DAY = (
        "NanoOfDay",
        ChronoUnit.NANOS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 86400 * 1_000_000_000 - 1),
    )
    MICRO_OF_SECOND = (
        "MicroOfSecond",
        ChronoUnit.MICROS,
        ChronoUnit.SECONDS,
        ValueRange.of(0, 999_999),
    )
    MICRO_OF_DAY = (
        "MicroOfDay",
        ChronoUnit.MICROS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 86400 * 1_000_000 - 1),
    )
    MILLI_OF_SECOND = (
        "MilliOfSecond",
        ChronoUnit.MILLIS,
        ChronoUnit.SECONDS,
        ValueRange.of(0, 999),
    )
    MILLI_OF_DAY = (
        "MilliOfDay",
        ChronoUnit.MILLIS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 86400 * 1000 - 1),
    )
    SECOND_OF_MINUTE = (
        "SecondOfMinute",
        ChronoUnit.SECONDS,
        ChronoUnit.MINUTES,
        ValueRange.of(0, 59),
    )
    SECOND_OF_DAY = (
        "SecondOfDay",
        ChronoUnit.SECONDS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 86400 - 1),
    )
    MINUTE_OF_HOUR = (
        "MinuteOfHour",
        ChronoUnit.MINUTES,
        ChronoUnit.HOURS,
        ValueRange.of(0, 59),
    )
    MINUTE_OF_DAY = (
        "MinuteOfDay",
        ChronoUnit.MINUTES,
        ChronoUnit.DAYS,
        ValueRange.of(0, 24 * 60 - 1),
    )
    HOUR_OF_AMPM = (
        "HourOfAmPm",
        ChronoUnit.HOURS,
        ChronoUnit.HALF_DAYS,
        ValueRange.of(0, 11),
    )
    CLOCK_HOUR_OF_AMPM = (
        "ClockHourOfAmPm",
        ChronoUnit.HOURS,
        ChronoUnit.HALF_DAYS,
        ValueRange.of(1, 12),
    )
    HOUR_OF_DAY = (
        "HourOfDay",
        ChronoUnit.HOURS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 23),
    )
    CLOCK_HOUR_OF_DAY = (
        "ClockHourOfDay",
        ChronoUnit.HOURS,
        ChronoUnit.DAYS,
        ValueRange.of(1, 24),
    )
    AMPM_OF_DAY = (
        "AmPmOfDay",
        ChronoUnit.HALF_DAYS,
        ChronoUnit.DAYS,
        ValueRange.of(0, 1),
    )
    DAY_OF_WEEK = (
        "DayOfWeek",
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ValueRange.of(1, 7),
    )
    ALIGNED_DAY_OF_WEEK_IN_MONTH = (
        "AlignedDayOfWeekInMonth",
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ValueRange.of(1, 7),
    )
    ALIGNED_DAY_OF_WEEK_IN_YEAR = (
        "AlignedDayOfWeekInYear",
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ValueRange.of(1, 7),
    )
    DAY_OF_MONTH = (
        "DayOfMonth",
        ChronoUnit.DAYS,
        ChronoUnit.MONTHS,
        ValueRange.of(1, 28, 31),
    )
    DAY_OF_YEAR = (
        "DayOfYear",
        ChronoUnit.DAYS,
        ChronoUnit.YEARS,
        ValueRange.of(1, 365, 366),
    )
    EPOCH_DAY = (
        "EpochDay",
        ChronoUnit.DAYS,
        ChronoUnit.FOREVER,
        ValueRange.of(-365243219162, 365241780471),
    )
    ALIGNED_WEEK_OF_MONTH = (
        "AlignedWeekOfMonth",
        ChronoUnit.WEEKS,
        ChronoUnit.MONTHS,
        ValueRange.of(1, 4, 5),
    )
    ALIGNED_WEEK_OF_YEAR = (
        "AlignedWeekOfYear",
        ChronoUnit.WEEKS,
        ChronoUnit.YEARS,
        ValueRange.of(1, 53),
    )
    MONTH_OF_YEAR = (
        "MonthOfYear",
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ValueRange.of(1, 12),
    )
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        ChronoUnit.MONTHS,
        ChronoUnit.FOREVER,
        ValueRange.of(_MIN_YEAR * 12, _MAX_YEAR * 12 + 11),
    )
    YEAR_OF_ERA = (
        "YearOfEra",
        ChronoUnit.YEARS,
        ChronoUnit.FOREVER,
        ValueRange.of(1, _MAX_YEAR, _MAX_YEAR + 1),
    )
    YEAR = (
        "Year",
        ChronoUnit.YEARS,
        ChronoUnit.FOREVER,
        ValueRange.of(_MIN_YEAR, _MAX_YEAR),
    )
    ERA = (
        "Era",
        ChronoUnit.ERAS,
        ChronoUnit.FOREVER,
        ValueRange.of(0, 1),
    )
    INSTANT_SECONDS = (
        "InstantSeconds",
        ChronoUnit.SECONDS,
        ChronoUnit.FOREVER,
        ValueRange.of(INT64_MIN, INT64_MAX),
    )
    OFFSET_SECONDS = (
        "OffsetSeconds",
        ChronoUnit.SECONDS,
        ChronoUnit.FOREVER,
        ValueRange.of(-18 * 3600, 18 * 3600),
    )

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self._display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return (
            _FIELD_ORDER[ChronoField.DAY_OF_WEEK]
            <= _FIELD_ORDER[self]
            <= _FIELD_ORDER[ChronoField.ERA]
        )

    def is_time_based(self) -> bool:
        return _FIELD_ORDER[self] < _FIELD_ORDER[ChronoField.DAY_OF_WEEK]

    def check_valid_value(self, value: int) -> int:
        """Check the value against the outer range of the field"""
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        return temporal.with_(self, new_value)

    def __str__(self) -> str:
        return self._display_name

    def __repr__(self) -> str:
        return f"ChronoField.{self.name}"


_FIELD_ORDER = {field: i for i, field in enumerate(ChronoField)}

# Aliases to keep the dispatch tables below readable
_F = ChronoField
_U = ChronoUnit


# ----------------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------------


def _query_zone_id(temporal: TemporalAccessor) -> Optional[ZoneId]:
    return temporal.query(TemporalQueries.ZONE_ID)


def _query_zone(temporal: TemporalAccessor) -> Optional[ZoneId]:
    zone = temporal.query(TemporalQueries.ZONE_ID)
    return zone if zone is not None else temporal.query(TemporalQueries.OFFSET)


def _query_offset(temporal: TemporalAccessor) -> Optional[ZoneOffset]:
    if temporal.is_supported(_F.OFFSET_SECONDS):
        return ZoneOffset.of_total_seconds(temporal.get(_F.OFFSET_SECONDS))
    return None


def _query_local_date(temporal: TemporalAccessor) -> Optional[LocalDate]:
    if temporal.is_supported(_F.EPOCH_DAY):
        return LocalDate.of_epoch_day(temporal.get_long(_F.EPOCH_DAY))
    return None


def _query_local_time(temporal: TemporalAccessor) -> Optional[LocalTime]:
    if temporal.is_supported(_F.NANO_OF_DAY):
        return LocalTime.of_nano_of_day(temporal.get_long(_F.NANO_OF_DAY))
    return None


def _query_precision(temporal: TemporalAccessor) -> Optional[TemporalUnit]:
    return temporal.query(TemporalQueries.PRECISION)


@final
class TemporalQueries:
    """The standard queries, to pass to :meth:`TemporalAccessor.query`.

    A query is any callable that takes a temporal accessor. The value
    types answer these well-known ones themselves.

    Example
    -------
    >>> LocalDateTime.of(2021, 1, 2, 3, 4).query(TemporalQueries.LOCAL_DATE)
    LocalDate(2021-01-02)
    >>> LocalDate.of(2021, 1, 2).query(TemporalQueries.ZONE) is None
    True
    """

    ZONE_ID: ClassVar[TemporalQuery] = staticmethod(_query_zone_id)
    """The zone, strictly. Offset-only values give ``None``."""
    ZONE: ClassVar[TemporalQuery] = staticmethod(_query_zone)
    """The zone, falling back to the offset"""
    OFFSET: ClassVar[TemporalQuery] = staticmethod(_query_offset)
    LOCAL_DATE: ClassVar[TemporalQuery] = staticmethod(_query_local_date)
    LOCAL_TIME: ClassVar[TemporalQuery] = staticmethod(_query_local_time)
    PRECISION: ClassVar[TemporalQuery] = staticmethod(_query_precision)
    """The smallest supported unit"""


# ----------------------------------------------------------------------------
# Week-based year, quarter and Julian day fields
# ----------------------------------------------------------------------------


def _week_based_date(epoch_day: int) -> tuple[int, int]:
    # An ISO week belongs to the year that holds its Thursday
    thursday = epoch_day + 4 - weekday_from_days(epoch_day)
    year = civil_from_days(thursday)[0]
    return year, (thursday - days_from_civil(year, 1, 1)) // 7 + 1


def _weeks_in_week_based_year(year: int) -> int:
    jan_1st = weekday_from_days(days_from_civil(year, 1, 1))
    return 53 if jan_1st == 4 or (jan_1st == 3 and is_leap(year)) else 52


class _DerivedField(TemporalField, _ImmutableBase):
    """A date-based field computed from the chrono fields of a temporal.

    Instances are singletons, which pickle by their qualified name.
    """

    __slots__ = ("_display_name", "_qualname")

    def __init__(self, display_name: str, qualname: str) -> None:
        self._display_name = display_name
        self._qualname = qualname

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(_F.EPOCH_DAY)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._check_supported(temporal)
        return self.range()

    def _check_supported(self, temporal: TemporalAccessor) -> None:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError._for_field(self)

    def __str__(self) -> str:
        return self._display_name

    def __repr__(self) -> str:
        return self._qualname

    def __reduce__(self) -> str:
        return self._qualname


class _QuarterOfYear(_DerivedField):
    __slots__ = ()

    @property
    def base_unit(self) -> TemporalUnit:
        return IsoFields.QUARTER_YEARS

    @property
    def range_unit(self) -> TemporalUnit:
        return _U.YEARS

    def range(self) -> ValueRange:
        return _QUARTER_OF_YEAR_RANGE

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(_F.MONTH_OF_YEAR)

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return (temporal.get_long(_F.MONTH_OF_YEAR) + 2) // 3

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        current = self.get_from(temporal)
        self.range().check_valid_value(new_value, self)
        return temporal.with_(
            _F.MONTH_OF_YEAR,
            temporal.get_long(_F.MONTH_OF_YEAR) + (new_value - current) * 3,
        )


_QUARTER_OF_YEAR_RANGE = ValueRange.of(1, 4)
# Days before each quarter, in common years and then in leap years
_DAYS_BEFORE_QUARTER = (0, 90, 181, 273, 0, 91, 182, 274)


class _DayOfQuarter(_DerivedField):
    __slots__ = ()

    @property
    def base_unit(self) -> TemporalUnit:
        return _U.DAYS

    @property
    def range_unit(self) -> TemporalUnit:
        return IsoFields.QUARTER_YEARS

    def range(self) -> ValueRange:
        return _DAY_OF_QUARTER_RANGE

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return (
            temporal.is_supported(_F.DAY_OF_YEAR)
            and temporal.is_supported(_F.MONTH_OF_YEAR)
            and temporal.is_supported(_F.YEAR)
        )

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._check_supported(temporal)
        quarter = IsoFields.QUARTER_OF_YEAR.get_from(temporal)
        if quarter == 1:
            leap = is_leap(temporal.get_long(_F.YEAR))
            return ValueRange.of(1, 91 if leap else 90)
        return ValueRange.of(1, 91 if quarter == 2 else 92)

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        quarter_index = (temporal.get_long(_F.MONTH_OF_YEAR) - 1) // 3
        if is_leap(temporal.get_long(_F.YEAR)):
            quarter_index += 4
        return (
            temporal.get_long(_F.DAY_OF_YEAR)
            - _DAYS_BEFORE_QUARTER[quarter_index]
        )

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        current = self.get_from(temporal)
        self.range().check_valid_value(new_value, self)
        return temporal.with_(
            _F.DAY_OF_YEAR,
            temporal.get_long(_F.DAY_OF_YEAR) + (new_value - current),
        )


_DAY_OF_QUARTER_RANGE = ValueRange.of(1, 90, 92)


class _WeekOfWeekBasedYear(_DerivedField):
    __slots__ = ()

    @property
    def base_unit(self) -> TemporalUnit:
        return _U.WEEKS

    @property
    def range_unit(self) -> TemporalUnit:
        return IsoFields.WEEK_BASED_YEARS

    def range(self) -> ValueRange:
        return _WEEK_OF_WEEK_BASED_YEAR_RANGE

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._check_supported(temporal)
        year, _ = _week_based_date(temporal.get_long(_F.EPOCH_DAY))
        return ValueRange.of(1, _weeks_in_week_based_year(year))

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return _week_based_date(temporal.get_long(_F.EPOCH_DAY))[1]

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        current = self.get_from(temporal)
        self.range().check_valid_value(new_value, self)
        return temporal.plus(subtract_exact(new_value, current), _U.WEEKS)


_WEEK_OF_WEEK_BASED_YEAR_RANGE = ValueRange.of(1, 52, 53)


class _WeekBasedYear(_DerivedField):
    __slots__ = ()

    @property
    def base_unit(self) -> TemporalUnit:
        return IsoFields.WEEK_BASED_YEARS

    @property
    def range_unit(self) -> TemporalUnit:
        return _U.FOREVER

    def range(self) -> ValueRange:
        return _F.YEAR.range()

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return _week_based_date(temporal.get_long(_F.EPOCH_DAY))[0]

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        """Move to the same week and day of week in another week-based
        year. Week 53 becomes week 52 if the target year lacks it."""
        self._check_supported(temporal)
        new_year = self.range().check_valid_int_value(new_value, self)
        epoch_day = temporal.get_long(_F.EPOCH_DAY)
        week = _week_based_date(epoch_day)[1]
        if week == 53 and _weeks_in_week_based_year(new_year) == 52:
            week = 52
        # January 4th always falls in week 1
        jan_4th = days_from_civil(new_year, 1, 4)
        return temporal.with_(
            LocalDate.of_epoch_day(
                jan_4th
                + weekday_from_days(epoch_day)
                - weekday_from_days(jan_4th)
                + (week - 1) * 7
            )
        )


class _JulianField(_DerivedField):
    """A count of days, differing from the epoch day by a fixed offset"""

    __slots__ = ("_offset", "_range")

    def __init__(self, display_name: str, qualname: str, offset: int) -> None:
        super().__init__(display_name, qualname)
        self._offset = offset
        epoch_days = _F.EPOCH_DAY.range()
        self._range = ValueRange.of(
            epoch_days.minimum + offset, epoch_days.maximum + offset
        )

    @property
    def base_unit(self) -> TemporalUnit:
        return _U.DAYS

    @property
    def range_unit(self) -> TemporalUnit:
        return _U.FOREVER

    def range(self) -> ValueRange:
        return self._range

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return temporal.get_long(_F.EPOCH_DAY) + self._offset

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        self._check_supported(temporal)
        self._range.check_valid_value(new_value, self)
        return temporal.with_(
            _F.EPOCH_DAY, subtract_exact(new_value, self._offset)
        )


class _DerivedUnit(TemporalUnit, _ImmutableBase):
    """An estimated date-based unit, for dates with an epoch day"""

    __slots__ = ("_display_name", "_qualname", "_seconds")

    def __init__(
        self, display_name: str, qualname: str, seconds: int
    ) -> None:
        self._display_name = display_name
        self._qualname = qualname
        self._seconds = seconds

    @property
    def duration(self) -> Duration:
        return Duration.of_seconds(self._seconds)

    def is_duration_estimated(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(_F.EPOCH_DAY)

    def between(
        self, temporal1_inclusive: Temporal, temporal2_exclusive: Temporal
    ) -> int:
        if type(temporal1_inclusive) is not type(temporal2_exclusive):
            return temporal1_inclusive.until(temporal2_exclusive, self)
        return self._between(temporal1_inclusive, temporal2_exclusive)

    @abstractmethod
    def _between(self, start: Temporal, end: Temporal) -> int: ...

    def __str__(self) -> str:
        return self._display_name

    def __repr__(self) -> str:
        return self._qualname

    def __reduce__(self) -> str:
        return self._qualname


class _WeekBasedYears(_DerivedUnit):
    __slots__ = ()

    def add_to(self, temporal: Any, amount: int) -> Any:
        field = IsoFields.WEEK_BASED_YEAR
        return temporal.with_(
            field, add_exact(temporal.get_long(field), amount)
        )

    def _between(self, start: Temporal, end: Temporal) -> int:
        field = IsoFields.WEEK_BASED_YEAR
        return subtract_exact(end.get_long(field), start.get_long(field))


class _QuarterYears(_DerivedUnit):
    __slots__ = ()

    def add_to(self, temporal: Any, amount: int) -> Any:
        return temporal.plus(multiply_exact(amount, 3), _U.MONTHS)

    def _between(self, start: Temporal, end: Temporal) -> int:
        return trunc_div(start.until(end, _U.MONTHS), 3)


@final
class IsoFields:
    """Fields and units of quarters and the ISO week-based year.

    The week-based year starts on the Monday of the week holding
    January 4th, so it may begin in the last days of December or end
    in the first days of January. It has 52 or 53 weeks.

    Example
    -------
    >>> d = LocalDate.of(2021, 1, 3)
    >>> d.get(IsoFields.WEEK_BASED_YEAR)
    2020
    >>> d.get(IsoFields.WEEK_OF_WEEK_BASED_YEAR)
    53
    >>> d.get(IsoFields.QUARTER_OF_YEAR)
    1
    >>> d.plus(1, IsoFields.QUARTER_YEARS)
    LocalDate(2021-04-03)
    """

    DAY_OF_QUARTER: ClassVar[TemporalField] = _DayOfQuarter(
        "DayOfQuarter", "IsoFields.DAY_OF_QUARTER"
    )
    """The day within the quarter, from 1 to 90, 91 or 92"""
    QUARTER_OF_YEAR: ClassVar[TemporalField] = _QuarterOfYear(
        "QuarterOfYear", "IsoFields.QUARTER_OF_YEAR"
    )
    WEEK_OF_WEEK_BASED_YEAR: ClassVar[TemporalField] = _WeekOfWeekBasedYear(
        "WeekOfWeekBasedYear", "IsoFields.WEEK_OF_WEEK_BASED_YEAR"
    )
    WEEK_BASED_YEAR: ClassVar[TemporalField] = _WeekBasedYear(
        "WeekBasedYear", "IsoFields.WEEK_BASED_YEAR"
    )
    WEEK_BASED_YEARS: ClassVar[TemporalUnit] = _WeekBasedYears(
        "WeekBasedYears", "IsoFields.WEEK_BASED_YEARS", 31556952
    )
    QUARTER_YEARS: ClassVar[TemporalUnit] = _QuarterYears(
        "QuarterYears", "IsoFields.QUARTER_YEARS", 31556952 // 4
    )


@final
class JulianFields:
    """Day counts used in astronomy and other sciences.

    Each is the epoch day plus a fixed number of days. The days start
    at midnight, not noon as in astronomical usage.

    Example
    -------
    >>> LocalDate.of(1970, 1, 1).get_long(JulianFields.JULIAN_DAY)
    2440588
    >>> LocalDate.of(1858, 11, 17).get_long(JulianFields.MODIFIED_JULIAN_DAY)
    0
    """

    JULIAN_DAY: ClassVar[TemporalField] = _JulianField(
        "JulianDay", "JulianFields.JULIAN_DAY", 2440588
    )
    MODIFIED_JULIAN_DAY: ClassVar[TemporalField] = _JulianField(
        "ModifiedJulianDay", "JulianFields.MODIFIED_JULIAN_DAY", 40587
    )
    RATA_DIE: ClassVar[TemporalField] = _JulianField(
        "RataDie", "JulianFields.RATA_DIE", 719163
    )
    """Days since 0000-12-31, so that 0001-01-01 is day 1"""


# ----------------------------------------------------------------------------
# Days of the week and months
# ----------------------------------------------------------------------------


class DayOfWeek(
    TemporalAccessor,
    TemporalAdjuster,
    enum.Enum,
    metaclass=_AbstractEnumMeta,
):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Get the day from its ISO number (Monday=1, Sunday=7)"""
        if not 1 <= day_of_week <= 7:
            raise DateTimeError(f"Invalid value for DayOfWeek: {day_of_week}")
        return cls(day_of_week)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> DayOfWeek:
        if isinstance(temporal, DayOfWeek):
            return temporal
        try:
            return cls.of(temporal.get(_F.DAY_OF_WEEK))
        except DateTimeError as e:
            raise _unable_to_obtain("DayOfWeek", temporal) from e

    def plus(self, days: int) -> DayOfWeek:
        """The day of the week a number of days later, wrapping around

        Example
        -------
        >>> DayOfWeek.SATURDAY.plus(3)
        DayOfWeek.TUESDAY
        """
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-(days % 7))

    def is_supported(self, field: Any) -> bool:
        return _is_supported(field, self, lambda f: f is _F.DAY_OF_WEEK)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.DAY_OF_WEEK:
            return self.value
        elif isinstance(field, ChronoField):
            raise UnsupportedTemporalTypeError._for_field(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.PRECISION:
            return _U.DAYS
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.DAY_OF_WEEK, self.value)

    def __repr__(self) -> str:
        return f"DayOfWeek.{self.name}"


class Month(
    TemporalAccessor,
    TemporalAdjuster,
    enum.Enum,
    metaclass=_AbstractEnumMeta,
):
    """The months of the year; ``.value`` is the month number (1-12)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        if not 1 <= month <= 12:
            raise DateTimeError(f"Invalid value for MonthOfYear: {month}")
        return cls(month)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> Month:
        if isinstance(temporal, Month):
            return temporal
        try:
            return cls.of(temporal.get(_F.MONTH_OF_YEAR))
        except DateTimeError as e:
            raise _unable_to_obtain("Month", temporal) from e

    def plus(self, months: int) -> Month:
        """The month a number of months later, wrapping around

        Example
        -------
        >>> Month.NOVEMBER.plus(3)
        Month.FEBRUARY
        """
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        return self.plus(-(months % 12))

    def length(self, leap_year: bool) -> int:
        """The number of days in the month"""
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        return days_in_month(2001, self.value)

    def min_length(self) -> int:
        return self.length(False)

    def max_length(self) -> int:
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """The day-of-year of the first day of this month

        Example
        -------
        >>> Month.MARCH.first_day_of_year(leap_year=True)
        61
        """
        return days_before_month(2000 if leap_year else 2001, self.value) + 1

    def first_month_of_quarter(self) -> Month:
        return Month((self.value - 1) // 3 * 3 + 1)

    def is_supported(self, field: Any) -> bool:
        return _is_supported(field, self, lambda f: f is _F.MONTH_OF_YEAR)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.MONTH_OF_YEAR:
            return self.value
        elif isinstance(field, ChronoField):
            raise UnsupportedTemporalTypeError._for_field(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.PRECISION:
            return _U.MONTHS
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.MONTH_OF_YEAR, self.value)

    def __repr__(self) -> str:
        return f"Month.{self.name}"


def _month_value(month: Union[int, Month]) -> int:
    return month.value if isinstance(month, Month) else month


def _format_year(year: int) -> str:
    # Four digits at least; a sign for negative years and those beyond 9999
    if abs(year) < 1000:
        return f"-{-year:04d}" if year < 0 else f"{year:04d}"
    return f"+{year}" if year > 9999 else str(year)


# ----------------------------------------------------------------------------
# Calendar values
# ----------------------------------------------------------------------------

_DATE_FIELDS = frozenset(f for f in ChronoField if f.is_date_based())
_TIME_FIELDS = frozenset(f for f in ChronoField if f.is_time_based())


def _not_local(query: TemporalQuery) -> bool:
    return (
        query is TemporalQueries.ZONE_ID
        or query is TemporalQueries.ZONE
        or query is TemporalQueries.OFFSET
    )


@final
class LocalDate(Temporal, TemporalAdjuster, _Comparable):
    """A date in the proleptic ISO calendar, without a time or zone

    Example
    -------
    >>> d = LocalDate(2021, 1, 2)
    >>> d.year
    2021
    >>> d.plus_months(1)
    LocalDate(2021-02-02)

    Note
    ----
    Years from -999,999,999 to 999,999,999 are supported.
    Year 0 is 1 BCE.
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[LocalDate]
    """The earliest supported date, -999999999-01-01"""
    MAX: ClassVar[LocalDate]
    """The latest supported date, +999999999-12-31"""
    EPOCH: ClassVar[LocalDate]
    """The date 1970-01-01"""

    def __init__(self, year: int, month: int, day: int) -> None:
        _F.YEAR.check_valid_value(year)
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > 28 and day > days_in_month(year, month):
            if day == 29:
                raise DateTimeError(
                    f"Invalid date 'February 29' as '{year}' "
                    "is not a leap year"
                )
            raise DateTimeError(
                f"Invalid date '{Month(month).name} {day}'"
            )
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def of(cls, year: int, month: Union[int, Month], day: int) -> LocalDate:
        """Create a date from its year, month and day-of-month"""
        return cls(year, _month_value(month), day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a date from the year and day-of-year (1-366)

        Example
        -------
        >>> LocalDate.of_year_day(2021, 32)
        LocalDate(2021-02-01)
        """
        _F.YEAR.check_valid_value(year)
        _F.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year == 366 and not is_leap(year):
            raise DateTimeError(
                f"Invalid date 'DayOfYear 366' as '{year}' "
                "is not a leap year"
            )
        return _date_unchecked(
            *civil_from_days(days_from_civil(year, 1, 1) + day_of_year - 1)
        )

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a date from the number of days since 1970-01-01"""
        _F.EPOCH_DAY.check_valid_value(epoch_day)
        return _date_unchecked(*civil_from_days(epoch_day))

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> LocalDate:
        """Extract the date from another temporal, e.g. a date-time"""
        date = temporal.query(TemporalQueries.LOCAL_DATE)
        if date is None:
            raise _unable_to_obtain("LocalDate", temporal)
        return date

    @classmethod
    def parse(cls, text: str, /) -> LocalDate:
        """Parse from the ISO 8601 format ``YYYY-MM-DD``

        Example
        -------
        >>> LocalDate.parse("2021-01-02")
        LocalDate(2021-01-02)
        >>> LocalDate.parse("+10000-01-01").year
        10000
        """
        parts = _parse.parse_date(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        try:
            return cls(*parts)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> LocalDate:
        """The current date according to a clock or zone.

        The system clock in the system default zone is used by default.
        """
        clock = _clock_from(clock)
        instant = clock.instant()
        offset = clock.zone.rules.offset(instant)
        return cls.of_epoch_day(
            floor_div(instant.epoch_second + offset.total_seconds, 86400)
        )

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_year(self) -> int:
        return days_before_month(self._year, self._month) + self._day

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek(weekday_from_days(self.to_epoch_day()))

    def is_leap_year(self) -> bool:
        return is_leap(self._year)

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if is_leap(self._year) else 365

    def to_epoch_day(self) -> int:
        return days_from_civil(self._year, self._month, self._day)

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            _DATE_FIELDS.__contains__,
            ChronoUnit.is_date_based,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        elif field is _F.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        elif field is _F.ALIGNED_WEEK_OF_MONTH:
            short_feb = self._month == 2 and not is_leap(self._year)
            return ValueRange.of(1, 4 if short_feb else 5)
        elif field is _F.YEAR_OF_ERA:
            return ValueRange.of(
                1, _MAX_YEAR + 1 if self._year <= 0 else _MAX_YEAR
            )
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.DAY_OF_WEEK:
            return weekday_from_days(self.to_epoch_day())
        elif field is _F.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        elif field is _F.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        elif field is _F.DAY_OF_MONTH:
            return self._day
        elif field is _F.DAY_OF_YEAR:
            return self.day_of_year
        elif field is _F.EPOCH_DAY:
            return self.to_epoch_day()
        elif field is _F.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        elif field is _F.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        elif field is _F.MONTH_OF_YEAR:
            return self._month
        elif field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month()
        elif field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        elif field is _F.YEAR:
            return self._year
        elif field is _F.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedTemporalTypeError._for_field(field)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.LOCAL_DATE:
            return self
        elif query is TemporalQueries.PRECISION:
            return _U.DAYS
        elif _not_local(query) or query is TemporalQueries.LOCAL_TIME:
            return None
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.EPOCH_DAY, self.to_epoch_day())

    def _with_field(self, field: ChronoField, new_value: int) -> LocalDate:
        field.check_valid_value(new_value)
        if field is _F.DAY_OF_WEEK:
            return self.plus_days(
                new_value - weekday_from_days(self.to_epoch_day())
            )
        elif field in (
            _F.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            _F.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return self.plus_days(new_value - self.get_long(field))
        elif field is _F.DAY_OF_MONTH:
            return self.with_day_of_month(new_value)
        elif field is _F.DAY_OF_YEAR:
            return self.with_day_of_year(new_value)
        elif field is _F.EPOCH_DAY:
            return LocalDate.of_epoch_day(new_value)
        elif field in (_F.ALIGNED_WEEK_OF_MONTH, _F.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(new_value - self.get_long(field))
        elif field is _F.MONTH_OF_YEAR:
            return self.with_month(new_value)
        elif field is _F.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self._proleptic_month())
        elif field is _F.YEAR_OF_ERA:
            return self.with_year(
                new_value if self._year >= 1 else 1 - new_value
            )
        elif field is _F.YEAR:
            return self.with_year(new_value)
        elif field is _F.ERA:
            if self.get_long(_F.ERA) == new_value:
                return self
            return self.with_year(1 - self._year)
        raise UnsupportedTemporalTypeError._for_field(field)

    def with_year(self, year: int) -> LocalDate:
        """Change the year, clamping Feb 29 to Feb 28 if needed"""
        if year == self._year:
            return self
        _F.YEAR.check_valid_value(year)
        return _resolve_previous_valid(year, self._month, self._day)

    def with_month(self, month: Union[int, Month]) -> LocalDate:
        """Change the month, clamping the day to the end of the month"""
        month = _month_value(month)
        if month == self._month:
            return self
        _F.MONTH_OF_YEAR.check_valid_value(month)
        return _resolve_previous_valid(self._year, month, self._day)

    def with_day_of_month(self, day: int) -> LocalDate:
        if day == self._day:
            return self
        return LocalDate(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        if day_of_year == self.day_of_year:
            return self
        return LocalDate.of_year_day(self._year, day_of_year)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDate:
        if unit is _U.DAYS:
            return self.plus_days(amount)
        elif unit is _U.WEEKS:
            return self.plus_weeks(amount)
        elif unit is _U.MONTHS:
            return self.plus_months(amount)
        elif unit is _U.YEARS:
            return self.plus_years(amount)
        elif unit is _U.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        elif unit is _U.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        elif unit is _U.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1000))
        elif unit is _U.ERAS:
            return self.with_(
                _F.ERA, add_exact(self.get_long(_F.ERA), amount)
            )
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def plus_years(self, years: int) -> LocalDate:
        """Add years, clamping Feb 29 to Feb 28 if needed

        Example
        -------
        >>> LocalDate(2020, 2, 29).plus_years(1)
        LocalDate(2021-02-28)
        """
        if years == 0:
            return self
        year = _F.YEAR.check_valid_int_value(self._year + years)
        return _resolve_previous_valid(year, self._month, self._day)

    def plus_months(self, months: int) -> LocalDate:
        """Add months, clamping the day to the end of the month

        Example
        -------
        >>> LocalDate(2021, 1, 31).plus_months(1)
        LocalDate(2021-02-28)
        """
        if months == 0:
            return self
        total = add_exact(self._proleptic_month(), months)
        year = _F.YEAR.check_valid_int_value(floor_div(total, 12))
        return _resolve_previous_valid(
            year, floor_mod(total, 12) + 1, self._day
        )

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_days(self, days: int) -> LocalDate:
        if days == 0:
            return self
        return LocalDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    @overload
    def until(self, end_exclusive: TemporalAccessor) -> Period: ...

    @overload
    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int: ...

    def until(
        self,
        end_exclusive: TemporalAccessor,
        unit: Optional[TemporalUnit] = None,
    ) -> Union[Period, int]:
        """The amount of time until another date.

        Without a unit, the result is a :class:`Period`.
        With a unit, the number of complete units.

        Example
        -------
        >>> d = LocalDate(2021, 1, 15)
        >>> d.until(LocalDate(2022, 3, 14))
        Period(P1Y1M27D)
        >>> d.until(LocalDate(2021, 3, 14), ChronoUnit.MONTHS)
        1
        """
        end = LocalDate.from_(end_exclusive)
        if unit is None:
            return self._period_until(end)
        elif not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        elif unit is _U.DAYS:
            return end.to_epoch_day() - self.to_epoch_day()
        elif unit is _U.WEEKS:
            return trunc_div(end.to_epoch_day() - self.to_epoch_day(), 7)
        elif unit is _U.MONTHS:
            return self._months_until(end)
        elif unit is _U.YEARS:
            return trunc_div(self._months_until(end), 12)
        elif unit is _U.DECADES:
            return trunc_div(self._months_until(end), 120)
        elif unit is _U.CENTURIES:
            return trunc_div(self._months_until(end), 1200)
        elif unit is _U.MILLENNIA:
            return trunc_div(self._months_until(end), 12000)
        elif unit is _U.ERAS:
            return end.get_long(_F.ERA) - self.get_long(_F.ERA)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def _months_until(self, end: LocalDate) -> int:
        # Pack month and day so partial months count toward zero
        packed1 = self._proleptic_month() * 32 + self._day
        packed2 = end._proleptic_month() * 32 + end._day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: LocalDate) -> Period:
        total_months = end._proleptic_month() - self._proleptic_month()
        days = end._day - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = (
                end.to_epoch_day()
                - self.plus_months(total_months).to_epoch_day()
            )
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        return Period.of(
            to_int_exact(trunc_div(total_months, 12)),
            trunc_mod(total_months, 12),
            days,
        )

    def at_time(
        self,
        time_or_hour: Union[LocalTime, int],
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalDateTime:
        """Combine with a time to make a :class:`LocalDateTime`

        Example
        -------
        >>> LocalDate(2021, 1, 2).at_time(3, 30)
        LocalDateTime(2021-01-02T03:30)
        """
        if isinstance(time_or_hour, LocalTime):
            return _ldt_unchecked(self, time_or_hour)
        return _ldt_unchecked(
            self, LocalTime(time_or_hour, minute, second, nano)
        )

    @overload
    def at_start_of_day(self, zone: None = None) -> LocalDateTime: ...

    @overload
    def at_start_of_day(self, zone: ZoneId) -> ZonedDateTime: ...

    def at_start_of_day(
        self, zone: Optional[ZoneId] = None
    ) -> Union[LocalDateTime, ZonedDateTime]:
        """Midnight at the start of this date.

        With a zone, this is the earliest valid time of the date in that
        zone. If midnight falls in a gap, that is the end of the gap.
        """
        ldt = _ldt_unchecked(self, LocalTime.MIDNIGHT)
        if zone is None:
            return ldt
        if not isinstance(zone, ZoneOffset):
            trans = zone.rules.transition(ldt)
            if trans is not None and trans.is_gap():
                ldt = trans.date_time_after
        return ZonedDateTime.of(ldt, zone)

    def compare_to(self, other: LocalDate) -> int:
        return _cmp(
            (self._year, self._month, self._day),
            (other._year, other._month, other._day),
        )

    def is_after(self, other: LocalDate) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: LocalDate) -> bool:
        return self.compare_to(other) < 0

    def is_equal(self, other: LocalDate) -> bool:
        return self.compare_to(other) == 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not LocalDate:
            return NotImplemented
        return (self._year, self._month, self._day) == (
            other._year,
            other._month,
            other._day,
        )

    def __hash__(self) -> int:
        return hash((LocalDate, self._year, self._month, self._day))

    def __str__(self) -> str:
        return (
            f"{_format_year(self._year)}-{self._month:02d}-{self._day:02d}"
        )

    def __repr__(self) -> str:
        return f"LocalDate({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_date, (self._year, self._month, self._day)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_date(year: int, month: int, day: int) -> LocalDate:
    return LocalDate(year, month, day)


def _date_unchecked(year: int, month: int, day: int) -> LocalDate:
    self = _object_new(LocalDate)
    self._year = year
    self._month = month
    self._day = day
    return self


def _resolve_previous_valid(year: int, month: int, day: int) -> LocalDate:
    return _date_unchecked(year, month, min(day, days_in_month(year, month)))


LocalDate.MIN = _date_unchecked(_MIN_YEAR, 1, 1)
LocalDate.MAX = _date_unchecked(_MAX_YEAR, 12, 31)
LocalDate.EPOCH = _date_unchecked(1970, 1, 1)


@final
class LocalTime(Temporal, TemporalAdjuster, _Comparable):
    """A time of day with nanosecond precision, without a date or zone

    Example
    -------
    >>> t = LocalTime(12, 30, 0)
    >>> t.hour
    12
    >>> t.plus_hours(13)
    LocalTime(01:30)
    """

    __slots__ = ("_hour", "_minute", "_second", "_nano")

    MIN: ClassVar[LocalTime]
    """The earliest time of day, 00:00"""
    MAX: ClassVar[LocalTime]
    """The latest time of day, 23:59:59.999999999"""
    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nano: int = 0
    ) -> None:
        _F.HOUR_OF_DAY.check_valid_value(hour)
        _F.MINUTE_OF_HOUR.check_valid_value(minute)
        _F.SECOND_OF_MINUTE.check_valid_value(second)
        _F.NANO_OF_SECOND.check_valid_value(nano)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nano = nano

    @classmethod
    def of(
        cls, hour: int, minute: int, second: int = 0, nano: int = 0
    ) -> LocalTime:
        return cls(hour, minute, second, nano)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        _F.SECOND_OF_DAY.check_valid_value(second_of_day)
        hours, rest = divmod(second_of_day, 3600)
        return _time_unchecked(hours, *divmod(rest, 60), 0)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a time from the nanoseconds since midnight"""
        _F.NANO_OF_DAY.check_valid_value(nano_of_day)
        secs, nano = divmod(nano_of_day, _NANOS_PER_SECOND)
        hours, rest = divmod(secs, 3600)
        return _time_unchecked(hours, *divmod(rest, 60), nano)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> LocalTime:
        time = temporal.query(TemporalQueries.LOCAL_TIME)
        if time is None:
            raise _unable_to_obtain("LocalTime", temporal)
        return time

    @classmethod
    def parse(cls, text: str, /) -> LocalTime:
        """Parse from the ISO 8601 format ``HH:MM[:SS[.fffffffff]]``

        Example
        -------
        >>> LocalTime.parse("12:30:45.5")
        LocalTime(12:30:45.500)
        """
        parts = _parse.parse_time(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        try:
            return cls(*parts)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> LocalTime:
        clock = _clock_from(clock)
        instant = clock.instant()
        offset = clock.zone.rules.offset(instant)
        second_of_day = floor_mod(
            instant.epoch_second + offset.total_seconds, 86400
        )
        return cls.of_nano_of_day(
            second_of_day * _NANOS_PER_SECOND + instant.nano
        )

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nano(self) -> int:
        return self._nano

    def to_second_of_day(self) -> int:
        return self._hour * 3600 + self._minute * 60 + self._second

    def to_nano_of_day(self) -> int:
        return self.to_second_of_day() * _NANOS_PER_SECOND + self._nano

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            _TIME_FIELDS.__contains__,
            ChronoUnit.is_time_based,
        )

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.NANO_OF_SECOND:
            return self._nano
        elif field is _F.NANO_OF_DAY:
            return self.to_nano_of_day()
        elif field is _F.MICRO_OF_SECOND:
            return self._nano // _NANOS_PER_MICRO
        elif field is _F.MICRO_OF_DAY:
            return self.to_nano_of_day() // _NANOS_PER_MICRO
        elif field is _F.MILLI_OF_SECOND:
            return self._nano // _NANOS_PER_MILLI
        elif field is _F.MILLI_OF_DAY:
            return self.to_nano_of_day() // _NANOS_PER_MILLI
        elif field is _F.SECOND_OF_MINUTE:
            return self._second
        elif field is _F.SECOND_OF_DAY:
            return self.to_second_of_day()
        elif field is _F.MINUTE_OF_HOUR:
            return self._minute
        elif field is _F.MINUTE_OF_DAY:
            return self._hour * 60 + self._minute
        elif field is _F.HOUR_OF_AMPM:
            return self._hour % 12
        elif field is _F.CLOCK_HOUR_OF_AMPM:
            return self._hour % 12 or 12
        elif field is _F.HOUR_OF_DAY:
            return self._hour
        elif field is _F.CLOCK_HOUR_OF_DAY:
            return self._hour or 24
        elif field is _F.AMPM_OF_DAY:
            return self._hour // 12
        raise UnsupportedTemporalTypeError._for_field(field)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.LOCAL_TIME:
            return self
        elif query is TemporalQueries.PRECISION:
            return _U.NANOS
        elif _not_local(query) or query is TemporalQueries.LOCAL_DATE:
            return None
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.NANO_OF_DAY, self.to_nano_of_day())

    def _with_field(self, field: ChronoField, new_value: int) -> LocalTime:
        field.check_valid_value(new_value)
        if field is _F.NANO_OF_SECOND:
            return self.with_nano(new_value)
        elif field is _F.NANO_OF_DAY:
            return LocalTime.of_nano_of_day(new_value)
        elif field is _F.MICRO_OF_SECOND:
            return self.with_nano(new_value * _NANOS_PER_MICRO)
        elif field is _F.MICRO_OF_DAY:
            return LocalTime.of_nano_of_day(new_value * _NANOS_PER_MICRO)
        elif field is _F.MILLI_OF_SECOND:
            return self.with_nano(new_value * _NANOS_PER_MILLI)
        elif field is _F.MILLI_OF_DAY:
            return LocalTime.of_nano_of_day(new_value * _NANOS_PER_MILLI)
        elif field is _F.SECOND_OF_MINUTE:
            return self.with_second(new_value)
        elif field is _F.SECOND_OF_DAY:
            return self.plus_seconds(new_value - self.to_second_of_day())
        elif field is _F.MINUTE_OF_HOUR:
            return self.with_minute(new_value)
        elif field is _F.MINUTE_OF_DAY:
            return self.plus_minutes(
                new_value - (self._hour * 60 + self._minute)
            )
        elif field is _F.HOUR_OF_AMPM:
            return self.plus_hours(new_value - self._hour % 12)
        elif field is _F.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours(new_value % 12 - self._hour % 12)
        elif field is _F.HOUR_OF_DAY:
            return self.with_hour(new_value)
        elif field is _F.CLOCK_HOUR_OF_DAY:
            return self.with_hour(new_value % 24)
        elif field is _F.AMPM_OF_DAY:
            return self.plus_hours((new_value - self._hour // 12) * 12)
        raise UnsupportedTemporalTypeError._for_field(field)

    def with_hour(self, hour: int) -> LocalTime:
        if hour == self._hour:
            return self
        return LocalTime(hour, self._minute, self._second, self._nano)

    def with_minute(self, minute: int) -> LocalTime:
        if minute == self._minute:
            return self
        return LocalTime(self._hour, minute, self._second, self._nano)

    def with_second(self, second: int) -> LocalTime:
        if second == self._second:
            return self
        return LocalTime(self._hour, self._minute, second, self._nano)

    def with_nano(self, nano: int) -> LocalTime:
        if nano == self._nano:
            return self
        return LocalTime(self._hour, self._minute, self._second, nano)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalTime:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self.plus_nanos(
                (amount % _MICROS_PER_DAY) * _NANOS_PER_MICRO
            )
        elif unit is _U.MILLIS:
            return self.plus_nanos(
                (amount % _MILLIS_PER_DAY) * _NANOS_PER_MILLI
            )
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif unit is _U.MINUTES:
            return self.plus_minutes(amount)
        elif unit is _U.HOURS:
            return self.plus_hours(amount)
        elif unit is _U.HALF_DAYS:
            return self.plus_hours((amount % 2) * 12)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    # Time arithmetic wraps around midnight
    def plus_hours(self, hours: int) -> LocalTime:
        if hours == 0:
            return self
        return _time_unchecked(
            (self._hour + hours) % 24, self._minute, self._second, self._nano
        )

    def plus_minutes(self, minutes: int) -> LocalTime:
        if minutes == 0:
            return self
        minute_of_day = self._hour * 60 + self._minute
        new_minute_of_day = (minute_of_day + minutes) % _MINUTES_PER_DAY
        if new_minute_of_day == minute_of_day:
            return self
        return _time_unchecked(
            *divmod(new_minute_of_day, 60), self._second, self._nano
        )

    def plus_seconds(self, seconds: int) -> LocalTime:
        if seconds == 0:
            return self
        second_of_day = self.to_second_of_day()
        new_second_of_day = (second_of_day + seconds) % _SECONDS_PER_DAY
        if new_second_of_day == second_of_day:
            return self
        hours, rest = divmod(new_second_of_day, 3600)
        return _time_unchecked(hours, *divmod(rest, 60), self._nano)

    def plus_nanos(self, nanos: int) -> LocalTime:
        if nanos == 0:
            return self
        nano_of_day = self.to_nano_of_day()
        new_nano_of_day = (nano_of_day + nanos) % _NANOS_PER_DAY
        if new_nano_of_day == nano_of_day:
            return self
        return LocalTime.of_nano_of_day(new_nano_of_day)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-(hours % 24))

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-(minutes % _MINUTES_PER_DAY))

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-(seconds % _SECONDS_PER_DAY))

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-(nanos % _NANOS_PER_DAY))

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another time of day

        Example
        -------
        >>> LocalTime(10, 0).until(LocalTime(12, 59), ChronoUnit.HOURS)
        2
        """
        end = LocalTime.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        nanos_until = end.to_nano_of_day() - self.to_nano_of_day()
        if unit is _U.NANOS:
            return nanos_until
        elif unit is _U.MICROS:
            return trunc_div(nanos_until, _NANOS_PER_MICRO)
        elif unit is _U.MILLIS:
            return trunc_div(nanos_until, _NANOS_PER_MILLI)
        elif unit is _U.SECONDS:
            return trunc_div(nanos_until, _NANOS_PER_SECOND)
        elif unit is _U.MINUTES:
            return trunc_div(nanos_until, _NANOS_PER_MINUTE)
        elif unit is _U.HOURS:
            return trunc_div(nanos_until, _NANOS_PER_HOUR)
        elif unit is _U.HALF_DAYS:
            return trunc_div(nanos_until, 12 * _NANOS_PER_HOUR)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def truncated_to(self, unit: TemporalUnit) -> LocalTime:
        """Truncate to a unit that divides a day evenly

        Example
        -------
        >>> LocalTime(12, 34, 56).truncated_to(ChronoUnit.HOURS)
        LocalTime(12:00)
        """
        if unit is _U.NANOS:
            return self
        unit_nanos = _truncation_nanos(unit)
        nano_of_day = self.to_nano_of_day()
        return LocalTime.of_nano_of_day(
            nano_of_day - nano_of_day % unit_nanos
        )

    def at_date(self, date: LocalDate) -> LocalDateTime:
        return _ldt_unchecked(date, self)

    def at_offset(self, offset: ZoneOffset) -> OffsetTime:
        return _ot(self, offset)

    def compare_to(self, other: LocalTime) -> int:
        return _cmp(self.to_nano_of_day(), other.to_nano_of_day())

    def is_after(self, other: LocalTime) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: LocalTime) -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not LocalTime:
            return NotImplemented
        return self.to_nano_of_day() == other.to_nano_of_day()

    def __hash__(self) -> int:
        return hash((LocalTime, self.to_nano_of_day()))

    def __str__(self) -> str:
        text = f"{self._hour:02d}:{self._minute:02d}"
        if self._second or self._nano:
            text += f":{self._second:02d}"
            nano = self._nano
            if nano == 0:
                pass
            elif nano % _NANOS_PER_MILLI == 0:
                text += f".{nano // _NANOS_PER_MILLI:03d}"
            elif nano % _NANOS_PER_MICRO == 0:
                text += f".{nano // _NANOS_PER_MICRO:06d}"
            else:
                text += f".{nano:09d}"
        return text

    def __repr__(self) -> str:
        return f"LocalTime({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_time, (self.to_nano_of_day(),)


@no_type_check
def _unpkl_time(nano_of_day: int) -> LocalTime:
    return LocalTime.of_nano_of_day(nano_of_day)


def _time_unchecked(
    hour: int, minute: int, second: int, nano: int
) -> LocalTime:
    self = _object_new(LocalTime)
    self._hour = hour
    self._minute = minute
    self._second = second
    self._nano = nano
    return self


def _truncation_nanos(unit: TemporalUnit) -> int:
    duration = unit.duration
    if duration.seconds > _SECONDS_PER_DAY:
        raise UnsupportedTemporalTypeError(
            "Unit is too large to be used for truncation"
        )
    unit_nanos = duration.to_nanos()
    if _NANOS_PER_DAY % unit_nanos != 0:
        raise UnsupportedTemporalTypeError(
            "Unit must divide into a standard day without remainder"
        )
    return unit_nanos


LocalTime.MIN = LocalTime.MIDNIGHT = _time_unchecked(0, 0, 0, 0)
LocalTime.MAX = _time_unchecked(23, 59, 59, 999_999_999)
LocalTime.NOON = _time_unchecked(12, 0, 0, 0)


@final
class LocalDateTime(Temporal, TemporalAdjuster, _Comparable):
    """A date and time of day, without a zone or offset.

    This is a "wall clock" reading: it doesn't correspond to a moment
    in time until combined with an offset or zone.

    Example
    -------
    >>> dt = LocalDateTime(2021, 1, 2, 23, 30)
    >>> dt.plus_hours(2)
    LocalDateTime(2021-01-03T01:30)
    >>> dt.at_offset(ZoneOffset.of_hours(2))
    OffsetDateTime(2021-01-02T23:30+02:00)
    """

    __slots__ = ("_date", "_time")

    MIN: ClassVar[LocalDateTime]
    MAX: ClassVar[LocalDateTime]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> None:
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, nano)

    @overload
    @classmethod
    def of(cls, date: LocalDate, time: LocalTime, /) -> LocalDateTime: ...

    @overload
    @classmethod
    def of(
        cls,
        year: int,
        month: Union[int, Month],
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalDateTime: ...

    @classmethod
    def of(cls, *args: Any, **kwargs: Any) -> LocalDateTime:
        """Create from a date and time, or from the individual fields"""
        if args and isinstance(args[0], LocalDate):
            date, time = args
            if not isinstance(time, LocalTime):
                raise TypeError(f"Expected a LocalTime, got {time!r}")
            return _ldt_unchecked(date, time)
        year, month, day, *rest = args
        return cls(year, _month_value(month), day, *rest, **kwargs)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """The local date-time at an instant, seen with an offset

        Example
        -------
        >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(1))
        LocalDateTime(1970-01-01T01:00)
        """
        _F.NANO_OF_SECOND.check_valid_value(nano)
        local_second = epoch_second + offset.total_seconds
        return _ldt_unchecked(
            LocalDate.of_epoch_day(floor_div(local_second, 86400)),
            LocalTime.of_nano_of_day(
                floor_mod(local_second, 86400) * _NANOS_PER_SECOND + nano
            ),
        )

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> LocalDateTime:
        if isinstance(temporal, LocalDateTime):
            return temporal
        elif isinstance(temporal, (ZonedDateTime, OffsetDateTime)):
            return temporal.to_local_date_time()
        try:
            return _ldt_unchecked(
                LocalDate.from_(temporal), LocalTime.from_(temporal)
            )
        except DateTimeError as e:
            raise _unable_to_obtain("LocalDateTime", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> LocalDateTime:
        """Parse from the ISO 8601 format ``YYYY-MM-DDTHH:MM[:SS[.f]]``

        Example
        -------
        >>> LocalDateTime.parse("2021-01-02T03:04:05")
        LocalDateTime(2021-01-02T03:04:05)
        """
        parts = _parse.parse_datetime(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        try:
            return _ldt_unchecked(LocalDate(*parts[0]), LocalTime(*parts[1]))
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> LocalDateTime:
        clock = _clock_from(clock)
        instant = clock.instant()
        offset = clock.zone.rules.offset(instant)
        return cls.of_epoch_second(instant.epoch_second, instant.nano, offset)

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date._year

    @property
    def month_value(self) -> int:
        return self._date._month

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def day_of_month(self) -> int:
        return self._date._day

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def hour(self) -> int:
        return self._time._hour

    @property
    def minute(self) -> int:
        return self._time._minute

    @property
    def second(self) -> int:
        return self._time._second

    @property
    def nano(self) -> int:
        return self._time._nano

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Seconds since 1970-01-01T00:00Z, reading this with an offset"""
        return (
            self._date.to_epoch_day() * 86400
            + self._time.to_second_of_day()
            - offset.total_seconds
        )

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: f.is_date_based() or f.is_time_based(),
            lambda u: u is not _U.FOREVER,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if isinstance(field, ChronoField):
            if field.is_time_based():
                return self._time.range(field)
            return self._date.range(field)
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field.is_time_based():
                return self._time.get_long(field)
            return self._date.get_long(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.LOCAL_DATE:
            return self._date
        elif query is TemporalQueries.LOCAL_TIME:
            return self._time
        elif query is TemporalQueries.PRECISION:
            return _U.NANOS
        elif _not_local(query):
            return None
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.EPOCH_DAY, self._date.to_epoch_day()).with_(
            _F.NANO_OF_DAY, self._time.to_nano_of_day()
        )

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return _ldt_unchecked(date, time)

    def _with_field(
        self, field: ChronoField, new_value: int
    ) -> LocalDateTime:
        if field.is_time_based():
            return self._with(self._date, self._time.with_(field, new_value))
        return self._with(self._date.with_(field, new_value), self._time)

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: Union[int, Month]) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(
            self._date.with_day_of_year(day_of_year), self._time
        )

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nano: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nano(nano))

    def truncated_to(self, unit: TemporalUnit) -> LocalDateTime:
        return self._with(self._date, self._time.truncated_to(unit))

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDateTime:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self._plus_nanos_total(amount * _NANOS_PER_MICRO)
        elif unit is _U.MILLIS:
            return self._plus_nanos_total(amount * _NANOS_PER_MILLI)
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif unit is _U.MINUTES:
            return self.plus_minutes(amount)
        elif unit is _U.HOURS:
            return self.plus_hours(amount)
        elif unit is _U.HALF_DAYS:
            return self._plus_nanos_total(amount * 12 * _NANOS_PER_HOUR)
        return self._with(self._date.plus(amount, unit), self._time)

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.plus_years(years), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.plus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_nanos_total(hours * _NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_nanos_total(minutes * _NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_nanos_total(seconds * _NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_nanos_total(nanos)

    def minus_years(self, years: int) -> LocalDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self.plus_nanos(-nanos)

    def _plus_nanos_total(self, nanos: int) -> LocalDateTime:
        # Carry whole days into the date, keep the rest in the time
        if nanos == 0:
            return self
        nano_of_day = self._time.to_nano_of_day()
        days, new_nano_of_day = divmod(nano_of_day + nanos, _NANOS_PER_DAY)
        time = (
            self._time
            if new_nano_of_day == nano_of_day
            else LocalTime.of_nano_of_day(new_nano_of_day)
        )
        return self._with(self._date.plus_days(days), time)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another date-time

        Example
        -------
        >>> a = LocalDateTime(2021, 1, 1, 12)
        >>> a.until(LocalDateTime(2021, 1, 3, 11), ChronoUnit.DAYS)
        1
        >>> a.until(LocalDateTime(2021, 1, 3, 11), ChronoUnit.HOURS)
        47
        """
        end = LocalDateTime.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        elif unit.is_time_based():
            days = end._date.to_epoch_day() - self._date.to_epoch_day()
            if days == 0:
                return self._time.until(end._time, unit)
            time_nanos = (
                end._time.to_nano_of_day() - self._time.to_nano_of_day()
            )
            if days > 0:
                days -= 1
                time_nanos += _NANOS_PER_DAY
            else:
                days += 1
                time_nanos -= _NANOS_PER_DAY
            unit_nanos = unit.duration.to_nanos()
            return add_exact(
                multiply_exact(days, _NANOS_PER_DAY // unit_nanos),
                trunc_div(time_nanos, unit_nanos),
            )
        end_date = end._date
        if end_date.is_after(self._date) and end._time.is_before(self._time):
            end_date = end_date.minus_days(1)
        elif end_date.is_before(self._date) and end._time.is_after(
            self._time
        ):
            end_date = end_date.plus_days(1)
        return self._date.until(end_date, unit)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        return OffsetDateTime.of(self, offset)

    def at_zone(self, zone: ZoneId) -> ZonedDateTime:
        """Combine with a zone, resolving gaps and overlaps"""
        return ZonedDateTime.of(self, zone)

    def compare_to(self, other: LocalDateTime) -> int:
        return self._date.compare_to(other._date) or self._time.compare_to(
            other._time
        )

    def is_after(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) < 0

    def is_equal(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) == 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not LocalDateTime:
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __str__(self) -> str:
        return f"{self._date}T{self._time}"

    def __repr__(self) -> str:
        return f"LocalDateTime({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_ldt, (
            self._date.to_epoch_day(),
            self._time.to_nano_of_day(),
        )


@no_type_check
def _unpkl_ldt(epoch_day: int, nano_of_day: int) -> LocalDateTime:
    return _ldt_unchecked(
        LocalDate.of_epoch_day(epoch_day),
        LocalTime.of_nano_of_day(nano_of_day),
    )


def _ldt_unchecked(date: LocalDate, time: LocalTime) -> LocalDateTime:
    self = _object_new(LocalDateTime)
    self._date = date
    self._time = time
    return self


LocalDateTime.MIN = _ldt_unchecked(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = _ldt_unchecked(LocalDate.MAX, LocalTime.MAX)


@final
class YearMonth(Temporal, TemporalAdjuster, _Comparable):
    """A year and month, without a day.

    Example
    -------
    >>> ym = YearMonth(2024, 2)
    >>> ym.length_of_month()
    29
    >>> ym.at_end_of_month()
    LocalDate(2024-02-29)
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        _F.YEAR.check_valid_value(year)
        _F.MONTH_OF_YEAR.check_valid_value(month)
        self._year = year
        self._month = month

    @classmethod
    def of(cls, year: int, month: Union[int, Month]) -> YearMonth:
        return cls(year, _month_value(month))

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> YearMonth:
        if isinstance(temporal, YearMonth):
            return temporal
        try:
            return cls(
                temporal.get(_F.YEAR), temporal.get(_F.MONTH_OF_YEAR)
            )
        except DateTimeError as e:
            raise _unable_to_obtain("YearMonth", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> YearMonth:
        """Parse from the ISO 8601 format ``YYYY-MM``

        Example
        -------
        >>> YearMonth.parse("2021-01")
        YearMonth(2021-01)
        """
        parts = _parse.parse_year_month(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        try:
            return cls(*parts)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> YearMonth:
        return cls.from_(LocalDate.now(clock))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return Month(self._month)

    def is_leap_year(self) -> bool:
        return is_leap(self._year)

    def is_valid_day(self, day_of_month: int) -> bool:
        return 1 <= day_of_month <= self.length_of_month()

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if is_leap(self._year) else 365

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: f
            in (
                _F.YEAR,
                _F.MONTH_OF_YEAR,
                _F.PROLEPTIC_MONTH,
                _F.YEAR_OF_ERA,
                _F.ERA,
            ),
            lambda u: _U.MONTHS._index() <= u._index() <= _U.ERAS._index(),
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(
                1, _MAX_YEAR + 1 if self._year <= 0 else _MAX_YEAR
            )
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.MONTH_OF_YEAR:
            return self._month
        elif field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month()
        elif field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        elif field is _F.YEAR:
            return self._year
        elif field is _F.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedTemporalTypeError._for_field(field)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.PRECISION:
            return _U.MONTHS
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.PROLEPTIC_MONTH, self._proleptic_month())

    def _with_field(self, field: ChronoField, new_value: int) -> YearMonth:
        field.check_valid_value(new_value)
        if field is _F.MONTH_OF_YEAR:
            return self.with_month(new_value)
        elif field is _F.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self._proleptic_month())
        elif field is _F.YEAR_OF_ERA:
            return self.with_year(
                new_value if self._year >= 1 else 1 - new_value
            )
        elif field is _F.YEAR:
            return self.with_year(new_value)
        elif field is _F.ERA:
            if self.get_long(_F.ERA) == new_value:
                return self
            return self.with_year(1 - self._year)
        raise UnsupportedTemporalTypeError._for_field(field)

    def with_year(self, year: int) -> YearMonth:
        if year == self._year:
            return self
        return YearMonth(year, self._month)

    def with_month(self, month: Union[int, Month]) -> YearMonth:
        month = _month_value(month)
        if month == self._month:
            return self
        return YearMonth(self._year, month)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> YearMonth:
        if unit is _U.MONTHS:
            return self.plus_months(amount)
        elif unit is _U.YEARS:
            return self.plus_years(amount)
        elif unit is _U.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        elif unit is _U.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        elif unit is _U.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1000))
        elif unit is _U.ERAS:
            return self.with_(
                _F.ERA, add_exact(self.get_long(_F.ERA), amount)
            )
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def plus_years(self, years: int) -> YearMonth:
        if years == 0:
            return self
        year = _F.YEAR.check_valid_int_value(self._year + years)
        return _year_month_unchecked(year, self._month)

    def plus_months(self, months: int) -> YearMonth:
        if months == 0:
            return self
        total = add_exact(self._proleptic_month(), months)
        year = _F.YEAR.check_valid_int_value(floor_div(total, 12))
        return _year_month_unchecked(year, floor_mod(total, 12) + 1)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        end = YearMonth.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        months = end._proleptic_month() - self._proleptic_month()
        if unit is _U.MONTHS:
            return months
        elif unit is _U.YEARS:
            return trunc_div(months, 12)
        elif unit is _U.DECADES:
            return trunc_div(months, 120)
        elif unit is _U.CENTURIES:
            return trunc_div(months, 1200)
        elif unit is _U.MILLENNIA:
            return trunc_div(months, 12000)
        elif unit is _U.ERAS:
            return end.get_long(_F.ERA) - self.get_long(_F.ERA)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def at_day(self, day_of_month: int) -> LocalDate:
        return LocalDate(self._year, self._month, day_of_month)

    def at_end_of_month(self) -> LocalDate:
        return _date_unchecked(
            self._year, self._month, self.length_of_month()
        )

    def compare_to(self, other: YearMonth) -> int:
        return _cmp((self._year, self._month), (other._year, other._month))

    def is_after(self, other: YearMonth) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: YearMonth) -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not YearMonth:
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __hash__(self) -> int:
        return hash((YearMonth, self._year, self._month))

    def __str__(self) -> str:
        return f"{_format_year(self._year)}-{self._month:02d}"

    def __repr__(self) -> str:
        return f"YearMonth({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_ym, (self._year, self._month)


@no_type_check
def _unpkl_ym(year: int, month: int) -> YearMonth:
    return YearMonth(year, month)


def _year_month_unchecked(year: int, month: int) -> YearMonth:
    self = _object_new(YearMonth)
    self._year = year
    self._month = month
    return self


_YEAR_UNITS = (_U.YEARS, _U.DECADES, _U.CENTURIES, _U.MILLENNIA, _U.ERAS)


@final
class Year(Temporal, TemporalAdjuster, _Comparable):
    """A year in the proleptic ISO calendar.

    Year 0 is 1 BCE, year -1 is 2 BCE, and so on.

    Example
    -------
    >>> y = Year(2024)
    >>> y.is_leap()
    True
    >>> y.at_month(2).at_end_of_month()
    LocalDate(2024-02-29)
    >>> y.at_day(60)
    LocalDate(2024-02-29)
    """

    __slots__ = ("_year",)

    MIN_VALUE: ClassVar[int] = _MIN_YEAR
    MAX_VALUE: ClassVar[int] = _MAX_YEAR

    def __init__(self, year: int) -> None:
        _F.YEAR.check_valid_value(year)
        self._year = year

    @classmethod
    def of(cls, year: int) -> Year:
        return cls(year)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> Year:
        if isinstance(temporal, Year):
            return temporal
        try:
            return cls(temporal.get(_F.YEAR))
        except DateTimeError as e:
            raise _unable_to_obtain("Year", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> Year:
        """Parse from the ISO 8601 format ``YYYY``.

        Years beyond 9999 need a leading ``+``.

        Example
        -------
        >>> Year.parse("2021")
        Year(2021)
        >>> Year.parse("+12345")
        Year(+12345)
        """
        year = _parse.parse_year(text)
        if year is None:
            raise DateTimeParseError._for_text(text)
        try:
            return cls(year)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> Year:
        return cls.from_(LocalDate.now(clock))

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Whether the given year number is a leap year"""
        return is_leap(year)

    @property
    def value(self) -> int:
        return self._year

    def is_leap(self) -> bool:
        return is_leap(self._year)

    def length(self) -> int:
        """The number of days in this year"""
        return 366 if is_leap(self._year) else 365

    def is_valid_month_day(self, month_day: MonthDay) -> bool:
        return month_day.is_valid_year(self._year)

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: f in (_F.YEAR, _F.YEAR_OF_ERA, _F.ERA),
            _YEAR_UNITS.__contains__,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(
                1, _MAX_YEAR + 1 if self._year <= 0 else _MAX_YEAR
            )
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        elif field is _F.YEAR:
            return self._year
        elif field is _F.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedTemporalTypeError._for_field(field)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.PRECISION:
            return _U.YEARS
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.YEAR, self._year)

    def _with_field(self, field: ChronoField, new_value: int) -> Year:
        field.check_valid_value(new_value)
        if field is _F.YEAR_OF_ERA:
            return self._with_year(
                new_value if self._year >= 1 else 1 - new_value
            )
        elif field is _F.YEAR:
            return self._with_year(new_value)
        elif field is _F.ERA:
            if self.get_long(_F.ERA) == new_value:
                return self
            return Year(1 - self._year)
        raise UnsupportedTemporalTypeError._for_field(field)

    def _with_year(self, year: int) -> Year:
        return self if year == self._year else Year(year)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Year:
        if unit is _U.YEARS:
            return self.plus_years(amount)
        elif unit is _U.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        elif unit is _U.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        elif unit is _U.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1000))
        elif unit is _U.ERAS:
            return self.with_(
                _F.ERA, add_exact(self.get_long(_F.ERA), amount)
            )
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def plus_years(self, years: int) -> Year:
        if years == 0:
            return self
        return _year_unchecked(
            _F.YEAR.check_valid_int_value(self._year + years)
        )

    def minus_years(self, years: int) -> Year:
        return self.plus_years(-years)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another year

        Example
        -------
        >>> Year(2000).until(Year(2029), ChronoUnit.DECADES)
        2
        """
        end = Year.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        years = end._year - self._year
        if unit is _U.YEARS:
            return years
        elif unit is _U.DECADES:
            return trunc_div(years, 10)
        elif unit is _U.CENTURIES:
            return trunc_div(years, 100)
        elif unit is _U.MILLENNIA:
            return trunc_div(years, 1000)
        elif unit is _U.ERAS:
            return end.get_long(_F.ERA) - self.get_long(_F.ERA)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def at_day(self, day_of_year: int) -> LocalDate:
        return LocalDate.of_year_day(self._year, day_of_year)

    def at_month(self, month: Union[int, Month]) -> YearMonth:
        return YearMonth.of(self._year, month)

    def at_month_day(self, month_day: MonthDay) -> LocalDate:
        """Combine with a month-day. February 29 becomes February 28
        outside leap years."""
        return month_day.at_year(self._year)

    def compare_to(self, other: Year) -> int:
        return _cmp(self._year, other._year)

    def is_after(self, other: Year) -> bool:
        return self._year > other._year

    def is_before(self, other: Year) -> bool:
        return self._year < other._year

    def __eq__(self, other: object) -> bool:
        if type(other) is not Year:
            return NotImplemented
        return self._year == other._year

    def __hash__(self) -> int:
        return hash((Year, self._year))

    def __int__(self) -> int:
        return self._year

    def __str__(self) -> str:
        return _format_year(self._year)

    def __repr__(self) -> str:
        return f"Year({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_year, (self._year,)


@no_type_check
def _unpkl_year(year: int) -> Year:
    return Year(year)


def _year_unchecked(year: int) -> Year:
    self = _object_new(Year)
    self._year = year
    return self


@final
class MonthDay(TemporalAccessor, TemporalAdjuster, _Comparable):
    """A month and day, without a year.

    February 29 is allowed, even though it doesn't exist in every year.

    Example
    -------
    >>> md = MonthDay(2, 29)
    >>> md.is_valid_year(2023)
    False
    >>> md.at_year(2023)
    LocalDate(2023-02-28)
    """

    __slots__ = ("_month", "_day")

    def __init__(self, month: int, day: int) -> None:
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > Month(month).max_length():
            raise DateTimeError(
                f"Illegal value for DayOfMonth field, value {day} "
                f"is not valid for month {Month(month).name}"
            )
        self._month = month
        self._day = day

    @classmethod
    def of(cls, month: Union[int, Month], day: int) -> MonthDay:
        return cls(_month_value(month), day)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> MonthDay:
        if isinstance(temporal, MonthDay):
            return temporal
        try:
            return cls(
                temporal.get(_F.MONTH_OF_YEAR), temporal.get(_F.DAY_OF_MONTH)
            )
        except DateTimeError as e:
            raise _unable_to_obtain("MonthDay", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> MonthDay:
        """Parse from the ISO 8601 format ``--MM-DD``

        Example
        -------
        >>> MonthDay.parse("--12-25")
        MonthDay(--12-25)
        """
        parts = _parse.parse_month_day(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        try:
            return cls(*parts)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> MonthDay:
        return cls.from_(LocalDate.now(clock))

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def day_of_month(self) -> int:
        return self._day

    def is_valid_year(self, year: int) -> bool:
        """Whether this month-day exists in the given year"""
        return not (self._day == 29 and self._month == 2 and not is_leap(year))

    def is_supported(self, field: Any) -> bool:
        return _is_supported(
            field, self, lambda f: f in (_F.MONTH_OF_YEAR, _F.DAY_OF_MONTH)
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            month = Month(self._month)
            return ValueRange.of(1, month.min_length(), month.max_length())
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.DAY_OF_MONTH:
            return self._day
        elif field is _F.MONTH_OF_YEAR:
            return self._month
        raise UnsupportedTemporalTypeError._for_field(field)

    def with_month(self, month: Union[int, Month]) -> MonthDay:
        """Change the month, clamping the day to the month's maximum

        Example
        -------
        >>> MonthDay(3, 31).with_month(4)
        MonthDay(--04-30)
        """
        month = _month_value(month)
        if month == self._month:
            return self
        _F.MONTH_OF_YEAR.check_valid_value(month)
        return MonthDay(month, min(self._day, Month(month).max_length()))

    def with_day_of_month(self, day_of_month: int) -> MonthDay:
        if day_of_month == self._day:
            return self
        return MonthDay(self._month, day_of_month)

    def at_year(self, year: int) -> LocalDate:
        """Combine with a year. February 29 becomes February 28 if needed"""
        return LocalDate(
            year, self._month, self._day if self.is_valid_year(year) else 28
        )

    def adjust_into(self, temporal: Any) -> Any:
        temporal = temporal.with_(_F.MONTH_OF_YEAR, self._month)
        return temporal.with_(
            _F.DAY_OF_MONTH,
            min(temporal.range(_F.DAY_OF_MONTH).maximum, self._day),
        )

    def compare_to(self, other: MonthDay) -> int:
        return _cmp((self._month, self._day), (other._month, other._day))

    def is_after(self, other: MonthDay) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: MonthDay) -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not MonthDay:
            return NotImplemented
        return self._month == other._month and self._day == other._day

    def __hash__(self) -> int:
        return hash((MonthDay, self._month, self._day))

    def __str__(self) -> str:
        return f"--{self._month:02d}-{self._day:02d}"

    def __repr__(self) -> str:
        return f"MonthDay({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_md, (self._month, self._day)


@no_type_check
def _unpkl_md(month: int, day: int) -> MonthDay:
    return MonthDay(month, day)


@final
class Instant(Temporal, TemporalAdjuster, _Comparable):
    """A point on the time-line, independent of any calendar or zone.

    Stored as seconds since 1970-01-01T00:00Z plus nanoseconds.

    Example
    -------
    >>> i = Instant.of_epoch_second(1_600_000_000)
    >>> i
    Instant(2020-09-13T12:26:40Z)
    >>> i.plus_millis(1500)
    Instant(2020-09-13T12:26:41.500Z)
    """

    __slots__ = ("_seconds", "_nanos")

    EPOCH: ClassVar[Instant]
    MIN: ClassVar[Instant]
    """The instant -1000000000-01-01T00:00Z"""
    MAX: ClassVar[Instant]
    """The instant 1000000000-12-31T23:59:59.999999999Z"""

    MIN_SECOND: ClassVar[int] = -31557014167219200
    MAX_SECOND: ClassVar[int] = 31556889864403199

    def __init__(self) -> None:
        raise TypeError(
            "Instant instances cannot be created through the constructor. "
            "Use `Instant.of_epoch_second` or `Instant.now` instead."
        )

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano_adjustment: int = 0
    ) -> Instant:
        """Create from epoch seconds, with nanoseconds that may overflow

        Example
        -------
        >>> Instant.of_epoch_second(3, -1)
        Instant(1970-01-01T00:00:02.999999999Z)
        """
        secs = add_exact(
            epoch_second, floor_div(nano_adjustment, _NANOS_PER_SECOND)
        )
        return _instant(secs, floor_mod(nano_adjustment, _NANOS_PER_SECOND))

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        secs, millis = divmod(epoch_milli, 1000)
        return _instant(secs, millis * _NANOS_PER_MILLI)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> Instant:
        if isinstance(temporal, Instant):
            return temporal
        try:
            return cls.of_epoch_second(
                temporal.get_long(_F.INSTANT_SECONDS),
                temporal.get(_F.NANO_OF_SECOND),
            )
        except DateTimeError as e:
            raise _unable_to_obtain("Instant", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> Instant:
        """Parse an ISO 8601 date-time in UTC, or with an offset

        Example
        -------
        >>> Instant.parse("2020-09-13T12:26:40Z")
        Instant(2020-09-13T12:26:40Z)
        >>> Instant.parse("2020-09-13T14:26:40+02:00")
        Instant(2020-09-13T12:26:40Z)
        """
        parts = _parse.parse_offset_datetime(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        date_parts, time_parts, offset_text = parts
        try:
            date = LocalDate(*date_parts)
            time = LocalTime(*time_parts)
            offset = ZoneOffset.of(offset_text)
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e
        return cls.of_epoch_second(
            _ldt_unchecked(date, time).to_epoch_second(offset), time._nano
        )

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> Instant:
        """The current instant, from the system clock by default"""
        if clock is None:
            return cls.of_epoch_second(0, time_ns())
        return clock.instant()

    @property
    def epoch_second(self) -> int:
        return self._seconds

    @property
    def nano(self) -> int:
        return self._nanos

    def to_epoch_milli(self) -> int:
        """Milliseconds since the epoch, truncating any sub-millisecond part

        Raises
        ------
        OverflowError
            If the result doesn't fit in 64 bits
        """
        if self._seconds < 0 and self._nanos > 0:
            millis = multiply_exact(self._seconds + 1, 1000)
            return add_exact(
                millis, self._nanos // _NANOS_PER_MILLI - 1000
            )
        return add_exact(
            multiply_exact(self._seconds, 1000),
            self._nanos // _NANOS_PER_MILLI,
        )

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: f
            in (
                _F.INSTANT_SECONDS,
                _F.NANO_OF_SECOND,
                _F.MICRO_OF_SECOND,
                _F.MILLI_OF_SECOND,
            ),
            lambda u: u.is_time_based() or u is _U.DAYS,
        )

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        elif field is _F.NANO_OF_SECOND:
            return self._nanos
        elif field is _F.MICRO_OF_SECOND:
            return self._nanos // _NANOS_PER_MICRO
        elif field is _F.MILLI_OF_SECOND:
            return self._nanos // _NANOS_PER_MILLI
        elif field is _F.INSTANT_SECONDS:
            return self._seconds
        raise UnsupportedTemporalTypeError._for_field(field)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.PRECISION:
            return _U.NANOS
        elif _not_local(query):
            return None
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.INSTANT_SECONDS, self._seconds).with_(
            _F.NANO_OF_SECOND, self._nanos
        )

    def _with_field(self, field: ChronoField, new_value: int) -> Instant:
        field.check_valid_value(new_value)
        if field is _F.MILLI_OF_SECOND:
            nanos = new_value * _NANOS_PER_MILLI
        elif field is _F.MICRO_OF_SECOND:
            nanos = new_value * _NANOS_PER_MICRO
        elif field is _F.NANO_OF_SECOND:
            nanos = new_value
        elif field is _F.INSTANT_SECONDS:
            if new_value == self._seconds:
                return self
            return _instant(new_value, self._nanos)
        else:
            raise UnsupportedTemporalTypeError._for_field(field)
        if nanos == self._nanos:
            return self
        return _instant(self._seconds, nanos)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Instant:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self.plus_nanos(multiply_exact(amount, _NANOS_PER_MICRO))
        elif unit is _U.MILLIS:
            return self.plus_millis(amount)
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif unit is _U.MINUTES:
            return self.plus_seconds(multiply_exact(amount, 60))
        elif unit is _U.HOURS:
            return self.plus_seconds(multiply_exact(amount, 3600))
        elif unit is _U.HALF_DAYS:
            return self.plus_seconds(multiply_exact(amount, 43200))
        elif unit is _U.DAYS:
            return self.plus_seconds(multiply_exact(amount, 86400))
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def plus_seconds(self, seconds: int) -> Instant:
        return self._plus(seconds, 0)

    def plus_millis(self, millis: int) -> Instant:
        return self._plus(
            trunc_div(millis, 1000), trunc_mod(millis, 1000) * _NANOS_PER_MILLI
        )

    def plus_nanos(self, nanos: int) -> Instant:
        return self._plus(0, nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        return self._plus(-seconds, 0)

    def minus_millis(self, millis: int) -> Instant:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Instant:
        return self._plus(0, -nanos)

    def _plus(self, seconds: int, nanos: int) -> Instant:
        if seconds == 0 and nanos == 0:
            return self
        epoch_second = add_exact(self._seconds, seconds)
        epoch_second = add_exact(
            epoch_second, trunc_div(nanos, _NANOS_PER_SECOND)
        )
        return Instant.of_epoch_second(
            epoch_second, self._nanos + trunc_mod(nanos, _NANOS_PER_SECOND)
        )

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another instant"""
        end = Instant.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        elif unit is _U.NANOS:
            return self._nanos_until(end)
        elif unit is _U.MICROS:
            return trunc_div(self._nanos_until(end), _NANOS_PER_MICRO)
        elif unit is _U.MILLIS:
            return subtract_exact(end.to_epoch_milli(), self.to_epoch_milli())
        elif unit is _U.SECONDS:
            return self._seconds_until(end)
        elif unit is _U.MINUTES:
            return trunc_div(self._seconds_until(end), 60)
        elif unit is _U.HOURS:
            return trunc_div(self._seconds_until(end), 3600)
        elif unit is _U.HALF_DAYS:
            return trunc_div(self._seconds_until(end), 43200)
        elif unit is _U.DAYS:
            return trunc_div(self._seconds_until(end), 86400)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def _nanos_until(self, end: Instant) -> int:
        total = multiply_exact(
            subtract_exact(end._seconds, self._seconds), _NANOS_PER_SECOND
        )
        return add_exact(total, end._nanos - self._nanos)

    def _seconds_until(self, end: Instant) -> int:
        seconds = subtract_exact(end._seconds, self._seconds)
        nanos = end._nanos - self._nanos
        if seconds > 0 and nanos < 0:
            seconds -= 1
        elif seconds < 0 and nanos > 0:
            seconds += 1
        return seconds

    def truncated_to(self, unit: TemporalUnit) -> Instant:
        """Truncate to a unit that divides a day evenly, e.g. minutes"""
        if unit is _U.NANOS:
            return self
        unit_nanos = _truncation_nanos(unit)
        nano_of_day = (
            floor_mod(self._seconds, 86400) * _NANOS_PER_SECOND + self._nanos
        )
        return self.plus_nanos(-(nano_of_day % unit_nanos))

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        return OffsetDateTime.of_instant(self, offset)

    def at_zone(self, zone: ZoneId) -> ZonedDateTime:
        return ZonedDateTime.of_instant(self, zone)

    def compare_to(self, other: Instant) -> int:
        return _cmp(
            (self._seconds, self._nanos), (other._seconds, other._nanos)
        )

    def is_after(self, other: Instant) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: Instant) -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not Instant:
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash((Instant, self._seconds, self._nanos))

    def __str__(self) -> str:
        # Instant.MIN and MAX lie beyond LocalDate's range,
        # so the civil date is computed directly
        epoch_day, second_of_day = divmod(self._seconds, 86400)
        year, month, day = civil_from_days(epoch_day)
        hour, rest = divmod(second_of_day, 3600)
        minute, second = divmod(rest, 60)
        text = (
            f"{_format_year(year)}-{month:02d}-{day:02d}"
            f"T{hour:02d}:{minute:02d}:{second:02d}"
        )
        nano = self._nanos
        if nano == 0:
            pass
        elif nano % _NANOS_PER_MILLI == 0:
            text += f".{nano // _NANOS_PER_MILLI:03d}"
        elif nano % _NANOS_PER_MICRO == 0:
            text += f".{nano // _NANOS_PER_MICRO:06d}"
        else:
            text += f".{nano:09d}"
        return text + "Z"

    def __repr__(self) -> str:
        return f"Instant({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_inst, (pack("<qL", self._seconds, self._nanos),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_inst(data: bytes) -> Instant:
    return _instant(*unpack("<qL", data))


def _instant(seconds: int, nanos: int) -> Instant:
    if seconds == 0 and nanos == 0 and _EPOCH is not None:
        return _EPOCH
    if not Instant.MIN_SECOND <= seconds <= Instant.MAX_SECOND:
        raise DateTimeError("Instant exceeds minimum or maximum instant")
    self = _object_new(Instant)
    self._seconds = seconds
    self._nanos = nanos
    return self


_EPOCH: Optional[Instant] = None
Instant.EPOCH = _EPOCH = _instant(0, 0)
Instant.MIN = _instant(Instant.MIN_SECOND, 0)
Instant.MAX = _instant(Instant.MAX_SECOND, 999_999_999)


# ----------------------------------------------------------------------------
# Amounts of time
# ----------------------------------------------------------------------------


@final
class Duration(TemporalAmount, _Comparable):
    """An exact amount of time, stored as seconds and nanoseconds.

    The nanoseconds are always in the range 0-999,999,999. The sign is
    carried by the seconds: minus one nanosecond is -1 seconds
    plus 999,999,999 nanoseconds.

    Example
    -------
    >>> d = Duration.of_hours(1).plus_millis(1500)
    >>> d
    Duration(PT1H1.5S)
    >>> d.seconds, d.nano
    (3601, 500000000)
    >>> Duration.of_seconds(-1, 0).plus_nanos(1)
    Duration(PT-0.999999999S)
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: ClassVar[Duration]

    def __init__(self) -> None:
        raise TypeError(
            "Duration instances cannot be created through the constructor. "
            "Use `Duration.of_seconds` or one of the other factories instead."
        )

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """A duration of days of exactly 24 hours each"""
        return _duration(multiply_exact(days, _SECONDS_PER_DAY), 0)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        return _duration(multiply_exact(hours, _SECONDS_PER_HOUR), 0)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        return _duration(multiply_exact(minutes, _SECONDS_PER_MINUTE), 0)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create from seconds, adjusted by any number of nanoseconds

        Example
        -------
        >>> Duration.of_seconds(3, 1) == Duration.of_seconds(4, -999_999_999)
        True
        """
        secs = add_exact(
            seconds, floor_div(nano_adjustment, _NANOS_PER_SECOND)
        )
        return _duration(secs, floor_mod(nano_adjustment, _NANOS_PER_SECOND))

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        secs, rest = divmod(millis, 1000)
        return _duration(secs, rest * _NANOS_PER_MILLI)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        return _duration(*divmod(nanos, _NANOS_PER_SECOND))

    @classmethod
    def of(cls, amount: int, unit: TemporalUnit) -> Duration:
        """A duration of an amount of an exact unit (or days)

        Example
        -------
        >>> Duration.of(90, ChronoUnit.MINUTES)
        Duration(PT1H30M)
        """
        return Duration.ZERO.plus(amount, unit)

    @classmethod
    def from_(cls, amount: TemporalAmount) -> Duration:
        """Convert an amount in exact units (or days) to a duration"""
        if isinstance(amount, Duration):
            return amount
        result = Duration.ZERO
        for unit in amount.units:
            result = result.plus(amount.get(unit), unit)
        return result

    @classmethod
    def between(
        cls, start_inclusive: Temporal, end_exclusive: Temporal
    ) -> Duration:
        """The exact duration between two temporals, e.g. instants

        Example
        -------
        >>> Duration.between(LocalTime(10, 0), LocalTime(12, 30, 1))
        Duration(PT2H30M1S)
        """
        try:
            return cls.of_nanos(start_inclusive.until(end_exclusive, _U.NANOS))
        except (DateTimeError, ArithmeticError):
            # Too large for nanoseconds: count seconds, then correct
            seconds = start_inclusive.until(end_exclusive, _U.SECONDS)
            try:
                nanos = end_exclusive.get_long(
                    _F.NANO_OF_SECOND
                ) - start_inclusive.get_long(_F.NANO_OF_SECOND)
            except DateTimeError:
                nanos = 0
            else:
                if seconds > 0 and nanos < 0:
                    seconds += 1
                elif seconds < 0 and nanos > 0:
                    seconds -= 1
            return cls.of_seconds(seconds, nanos)

    @classmethod
    def parse(cls, text: str, /) -> Duration:
        """Parse the ISO 8601 format ``PnDTnHnMn.nS``

        Each component may be signed, as may the whole duration.

        Example
        -------
        >>> Duration.parse("P2DT3H4M")
        Duration(PT51H4M)
        >>> Duration.parse("PT-0.5S").seconds
        -1
        """
        match = _parse.match_duration(text)
        if (
            match is None
            or (match[3] or "").upper() == "T"
            or not any(match[i] is not None for i in (2, 4, 5, 6))
        ):
            raise DateTimeParseError(
                "Text cannot be parsed to a Duration", text, 0
            )
        sign, days, _, hours, minutes, seconds, fraction = match.groups()
        day_secs = _parse_duration_number(text, days, 86400, "days")
        hour_secs = _parse_duration_number(text, hours, 3600, "hours")
        minute_secs = _parse_duration_number(text, minutes, 60, "minutes")
        secs = _parse_duration_number(text, seconds, 1, "seconds")
        nanos = _parse.fraction_to_nanos(fraction)
        # The sign of the seconds text applies to the fraction,
        # even if the seconds are zero
        if seconds and seconds.startswith("-"):
            nanos = -nanos
        try:
            result = cls.of_seconds(
                add_exact(
                    day_secs,
                    add_exact(hour_secs, add_exact(minute_secs, secs)),
                ),
                nanos,
            )
            return result.negated() if sign == "-" else result
        except OverflowError as e:
            raise DateTimeParseError(
                "Text cannot be parsed to a Duration: overflow", text, 0
            ) from e

    @property
    def seconds(self) -> int:
        """The seconds part, which carries the sign of the duration"""
        return self._seconds

    @property
    def nano(self) -> int:
        """The nanoseconds part, always in the range 0-999,999,999"""
        return self._nanos

    def get(self, unit: TemporalUnit) -> int:
        if unit is _U.SECONDS:
            return self._seconds
        elif unit is _U.NANOS:
            return self._nanos
        raise UnsupportedTemporalTypeError._for_unit(unit)

    @property
    def units(self) -> list[TemporalUnit]:
        return [_U.SECONDS, _U.NANOS]

    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    def is_negative(self) -> bool:
        return self._seconds < 0

    def is_positive(self) -> bool:
        return not self.is_zero() and not self.is_negative()

    def with_seconds(self, seconds: int) -> Duration:
        return _duration(seconds, self._nanos)

    def with_nanos(self, nano_of_second: int) -> Duration:
        _F.NANO_OF_SECOND.check_valid_int_value(nano_of_second)
        return _duration(self._seconds, nano_of_second)

    @overload
    def plus(self, duration: Duration, /) -> Duration: ...

    @overload
    def plus(self, amount: int, unit: TemporalUnit, /) -> Duration: ...

    def plus(
        self,
        duration_or_amount: Union[Duration, int],
        unit: Optional[TemporalUnit] = None,
        /,
    ) -> Duration:
        """Add another duration, or an amount of an exact unit (or days)

        Raises
        ------
        UnsupportedTemporalTypeError
            If the unit's duration is estimated, e.g. months
        OverflowError
            If the result doesn't fit in 64-bit seconds
        """
        if unit is None:
            if not isinstance(duration_or_amount, Duration):
                raise TypeError(
                    f"Expected a Duration, got {duration_or_amount!r}"
                )
            return self._plus(
                duration_or_amount._seconds, duration_or_amount._nanos
            )
        if not isinstance(duration_or_amount, int):
            raise TypeError(
                f"Expected an integer amount, got {duration_or_amount!r}"
            )
        amount = duration_or_amount
        if unit is _U.DAYS:
            return self._plus(multiply_exact(amount, _SECONDS_PER_DAY), 0)
        elif unit.is_duration_estimated():
            raise UnsupportedTemporalTypeError(
                "Unit must not have an estimated duration"
            )
        elif amount == 0:
            return self
        elif unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self._plus(
                floor_div(amount, 1_000_000),
                floor_mod(amount, 1_000_000) * _NANOS_PER_MICRO,
            )
        elif unit is _U.MILLIS:
            return self.plus_millis(amount)
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif isinstance(unit, ChronoUnit):
            return self.plus_seconds(
                multiply_exact(unit.duration._seconds, amount)
            )
        duration = unit.duration.multiplied_by(amount)
        return self._plus(duration._seconds, duration._nanos)

    @overload
    def minus(self, duration: Duration, /) -> Duration: ...

    @overload
    def minus(self, amount: int, unit: TemporalUnit, /) -> Duration: ...

    def minus(
        self,
        duration_or_amount: Union[Duration, int],
        unit: Optional[TemporalUnit] = None,
        /,
    ) -> Duration:
        if unit is None:
            if not isinstance(duration_or_amount, Duration):
                raise TypeError(
                    f"Expected a Duration, got {duration_or_amount!r}"
                )
            return self._plus(
                -duration_or_amount._seconds, -duration_or_amount._nanos
            )
        if not isinstance(duration_or_amount, int):
            raise TypeError(
                f"Expected an integer amount, got {duration_or_amount!r}"
            )
        return self.plus(-duration_or_amount, unit)

    def plus_days(self, days: int) -> Duration:
        return self._plus(multiply_exact(days, _SECONDS_PER_DAY), 0)

    def plus_hours(self, hours: int) -> Duration:
        return self._plus(multiply_exact(hours, _SECONDS_PER_HOUR), 0)

    def plus_minutes(self, minutes: int) -> Duration:
        return self._plus(multiply_exact(minutes, _SECONDS_PER_MINUTE), 0)

    def plus_seconds(self, seconds: int) -> Duration:
        return self._plus(seconds, 0)

    def plus_millis(self, millis: int) -> Duration:
        return self._plus(
            trunc_div(millis, 1000), trunc_mod(millis, 1000) * _NANOS_PER_MILLI
        )

    def plus_nanos(self, nanos: int) -> Duration:
        return self._plus(0, nanos)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def _plus(self, seconds: int, nanos: int) -> Duration:
        if seconds == 0 and nanos == 0:
            return self
        total_seconds = add_exact(self._seconds, seconds)
        total_seconds = add_exact(
            total_seconds, trunc_div(nanos, _NANOS_PER_SECOND)
        )
        return Duration.of_seconds(
            total_seconds, self._nanos + trunc_mod(nanos, _NANOS_PER_SECOND)
        )

    def _total_nanos(self) -> int:
        # Unbounded, unlike to_nanos()
        return self._seconds * _NANOS_PER_SECOND + self._nanos

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Multiply by a whole number, exactly

        Raises
        ------
        OverflowError
            If the result doesn't fit in 64-bit seconds
        """
        if multiplicand == 0:
            return Duration.ZERO
        elif multiplicand == 1:
            return self
        return _duration_of_total_nanos(self._total_nanos() * multiplicand)

    @overload
    def divided_by(self, divisor: int) -> Duration: ...

    @overload
    def divided_by(self, divisor: Duration) -> int: ...

    def divided_by(
        self, divisor: Union[int, Duration]
    ) -> Union[Duration, int]:
        """Divide by a number, or by another duration.

        Dividing by a number truncates toward zero at nanosecond
        precision. Dividing by a duration gives the number of whole
        times the divisor fits, also truncated toward zero.

        Example
        -------
        >>> Duration.of_seconds(10).divided_by(4)
        Duration(PT2.5S)
        >>> Duration.of_hours(1).divided_by(Duration.of_minutes(7))
        8
        """
        if isinstance(divisor, Duration):
            divisor_nanos = divisor._total_nanos()
            if divisor_nanos == 0:
                raise ZeroDivisionError("Cannot divide by zero")
            return to_long_exact(
                trunc_div(self._total_nanos(), divisor_nanos)
            )
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        elif divisor == 1:
            return self
        return _duration_of_total_nanos(
            trunc_div(self._total_nanos(), divisor)
        )

    def negated(self) -> Duration:
        return self.multiplied_by(-1)

    def abs(self) -> Duration:
        return self.negated() if self.is_negative() else self

    def add_to(self, temporal: Any) -> Any:
        if self._seconds != 0:
            temporal = temporal.plus(self._seconds, _U.SECONDS)
        if self._nanos != 0:
            temporal = temporal.plus(self._nanos, _U.NANOS)
        return temporal

    def subtract_from(self, temporal: Any) -> Any:
        if self._seconds != 0:
            temporal = temporal.minus(self._seconds, _U.SECONDS)
        if self._nanos != 0:
            temporal = temporal.minus(self._nanos, _U.NANOS)
        return temporal

    def to_days(self) -> int:
        """The number of whole days of 24 hours, truncated toward zero"""
        return trunc_div(self._seconds, _SECONDS_PER_DAY)

    def to_hours(self) -> int:
        return trunc_div(self._seconds, _SECONDS_PER_HOUR)

    def to_minutes(self) -> int:
        return trunc_div(self._seconds, _SECONDS_PER_MINUTE)

    def to_seconds(self) -> int:
        return self._seconds

    def _whole_seconds_and_nanos(self) -> tuple[int, int]:
        # The same duration, but with nanos carrying the sign of seconds
        if self._seconds < 0:
            return self._seconds + 1, self._nanos - _NANOS_PER_SECOND
        return self._seconds, self._nanos

    def to_millis(self) -> int:
        """The total milliseconds, truncated toward zero

        Raises
        ------
        OverflowError
            If the result doesn't fit in 64 bits
        """
        seconds, nanos = self._whole_seconds_and_nanos()
        return add_exact(
            multiply_exact(seconds, 1000), trunc_div(nanos, _NANOS_PER_MILLI)
        )

    def to_nanos(self) -> int:
        """The total nanoseconds

        Raises
        ------
        OverflowError
            If the result doesn't fit in 64 bits
        """
        seconds, nanos = self._whole_seconds_and_nanos()
        return add_exact(multiply_exact(seconds, _NANOS_PER_SECOND), nanos)

    def to_days_part(self) -> int:
        return self.to_days()

    def to_hours_part(self) -> int:
        return trunc_mod(self.to_hours(), 24)

    def to_minutes_part(self) -> int:
        return trunc_mod(self.to_minutes(), 60)

    def to_seconds_part(self) -> int:
        return trunc_mod(self._seconds, 60)

    def to_millis_part(self) -> int:
        return self._nanos // _NANOS_PER_MILLI

    def to_nanos_part(self) -> int:
        return self._nanos

    def truncated_to(self, unit: TemporalUnit) -> Duration:
        """Truncate toward zero, to a unit that divides a day evenly

        Example
        -------
        >>> Duration.parse("PT1H2M3.5S").truncated_to(ChronoUnit.MINUTES)
        Duration(PT1H2M)
        """
        if unit is _U.SECONDS and (self._seconds >= 0 or self._nanos == 0):
            return _duration(self._seconds, 0)
        elif unit is _U.NANOS:
            return self
        unit_nanos = _truncation_nanos(unit)
        nano_of_day = (
            trunc_mod(self._seconds, _SECONDS_PER_DAY) * _NANOS_PER_SECOND
            + self._nanos
        )
        result = trunc_div(nano_of_day, unit_nanos) * unit_nanos
        return self.plus_nanos(result - nano_of_day)

    def compare_to(self, other: Duration) -> int:
        return _cmp(
            (self._seconds, self._nanos), (other._seconds, other._nanos)
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not Duration:
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash((Duration, self._seconds, self._nanos))

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: int) -> Duration:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.multiplied_by(other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.is_zero():
            return "PT0S"
        seconds, nanos = self._seconds, self._nanos
        # The whole seconds as shown, i.e. rounded toward zero
        effective = seconds + 1 if seconds < 0 and nanos > 0 else seconds
        hours = trunc_div(effective, _SECONDS_PER_HOUR)
        minutes = trunc_div(trunc_mod(effective, _SECONDS_PER_HOUR), 60)
        secs = trunc_mod(effective, 60)
        text = "PT"
        if hours:
            text += f"{hours}H"
        if minutes:
            text += f"{minutes}M"
        if secs == 0 and nanos == 0 and len(text) > 2:
            return text
        if seconds < 0 and nanos > 0 and secs == 0:
            text += "-0"
        else:
            text += str(secs)
        if nanos > 0:
            if seconds < 0:
                fraction = 2 * _NANOS_PER_SECOND - nanos
            else:
                fraction = _NANOS_PER_SECOND + nanos
            text += "." + str(fraction).rstrip("0")[1:]
        return text + "S"

    def __repr__(self) -> str:
        return f"Duration({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_dur, (pack("<qL", self._seconds, self._nanos),)


@no_type_check
def _unpkl_dur(data: bytes) -> Duration:
    return _duration(*unpack("<qL", data))


def _duration(seconds: int, nanos: int) -> Duration:
    if seconds == 0 and nanos == 0 and _ZERO is not None:
        return _ZERO
    self = _object_new(Duration)
    self._seconds = to_long_exact(seconds)
    self._nanos = nanos
    return self


def _duration_of_total_nanos(total: int) -> Duration:
    seconds, nanos = divmod(total, _NANOS_PER_SECOND)
    if not INT64_MIN <= seconds <= INT64_MAX:
        raise OverflowError(f"Exceeds capacity of Duration: {total}")
    return _duration(seconds, nanos)


def _parse_duration_number(
    text: str, parsed: Optional[str], multiplier: int, error_text: str
) -> int:
    if parsed is None:
        return 0
    try:
        return multiply_exact(to_long_exact(int(parsed)), multiplier)
    except OverflowError as e:
        raise DateTimeParseError(
            f"Text cannot be parsed to a Duration: {error_text}", text, 0
        ) from e


_ZERO: Optional[Duration] = None
Duration.ZERO = _ZERO = _duration(0, 0)


@final
class Period(TemporalAmount, _ImmutableBase):
    """A date-based amount of years, months and days.

    Unlike :class:`Duration`, a period isn't a fixed length of time:
    a month may have 28 to 31 days, and a day may last 23 or 25 hours
    across a daylight saving transition.

    Example
    -------
    >>> p = Period.of(1, 2, 3)
    >>> p
    Period(P1Y2M3D)
    >>> LocalDate(2021, 1, 31) + Period.of_months(1)
    LocalDate(2021-02-28)
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: ClassVar[Period]

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        self._years = to_int_exact(years)
        self._months = to_int_exact(months)
        self._days = to_int_exact(days)

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        return _period(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return _period(years, 0, 0)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return _period(0, months, 0)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return _period(0, 0, multiply_exact(weeks, 7))

    @classmethod
    def of_days(cls, days: int) -> Period:
        return _period(0, 0, days)

    @classmethod
    def from_(cls, amount: TemporalAmount) -> Period:
        """Convert an amount in years, months and days to a period"""
        if isinstance(amount, Period):
            return amount
        if not isinstance(amount, TemporalAmount):
            raise TypeError(f"Expected a temporal amount, got {amount!r}")
        years = months = days = 0
        for unit in amount.units:
            value = amount.get(unit)
            if unit is _U.YEARS:
                years = to_int_exact(years + value)
            elif unit is _U.MONTHS:
                months = to_int_exact(months + value)
            elif unit is _U.DAYS:
                days = to_int_exact(days + value)
            else:
                raise DateTimeError(
                    f"Unit must be Years, Months or Days, but was {unit}"
                )
        return _period(years, months, days)

    @classmethod
    def parse(cls, text: str, /) -> Period:
        """Parse the ISO 8601 format ``PnYnMnWnD``

        Weeks are converted to days.

        Example
        -------
        >>> Period.parse("P1Y2W")
        Period(P1Y14D)
        >>> Period.parse("-P1M-2D")
        Period(P-1M2D)
        """
        match = _parse.match_period(text)
        if match is None or all(
            match[i] is None for i in (2, 3, 4, 5)
        ):
            raise DateTimeParseError(
                "Text cannot be parsed to a Period", text, 0
            )
        negate = -1 if match[1] == "-" else 1
        try:
            years, months, weeks, days = (
                to_int_exact(to_int_exact(int(match[i])) * negate)
                if match[i] is not None
                else 0
                for i in (2, 3, 4, 5)
            )
            return _period(
                years, months, to_int_exact(days + multiply_exact(weeks, 7))
            )
        except OverflowError as e:
            raise DateTimeParseError(
                "Text cannot be parsed to a Period", text, 0
            ) from e

    @classmethod
    def between(
        cls, start_inclusive: LocalDate, end_exclusive: LocalDate
    ) -> Period:
        """The period between two dates

        Example
        -------
        >>> Period.between(LocalDate(2020, 2, 29), LocalDate(2021, 3, 1))
        Period(P1Y1D)
        """
        return start_inclusive.until(end_exclusive)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    def get(self, unit: TemporalUnit) -> int:
        if unit is _U.YEARS:
            return self._years
        elif unit is _U.MONTHS:
            return self._months
        elif unit is _U.DAYS:
            return self._days
        raise UnsupportedTemporalTypeError._for_unit(unit)

    @property
    def units(self) -> list[TemporalUnit]:
        return [_U.YEARS, _U.MONTHS, _U.DAYS]

    def is_zero(self) -> bool:
        return self._years == 0 and self._months == 0 and self._days == 0

    def is_negative(self) -> bool:
        return self._years < 0 or self._months < 0 or self._days < 0

    def with_years(self, years: int) -> Period:
        if years == self._years:
            return self
        return _period(years, self._months, self._days)

    def with_months(self, months: int) -> Period:
        if months == self._months:
            return self
        return _period(self._years, months, self._days)

    def with_days(self, days: int) -> Period:
        if days == self._days:
            return self
        return _period(self._years, self._months, days)

    def plus(self, amount: TemporalAmount) -> Period:
        """Add another amount, component by component

        Raises
        ------
        OverflowError
            If a component doesn't fit in 32 bits
        """
        other = Period.from_(amount)
        return _period(
            to_int_exact(self._years + other._years),
            to_int_exact(self._months + other._months),
            to_int_exact(self._days + other._days),
        )

    def minus(self, amount: TemporalAmount) -> Period:
        other = Period.from_(amount)
        return _period(
            to_int_exact(self._years - other._years),
            to_int_exact(self._months - other._months),
            to_int_exact(self._days - other._days),
        )

    def plus_years(self, years: int) -> Period:
        return self.with_years(to_int_exact(self._years + years))

    def plus_months(self, months: int) -> Period:
        return self.with_months(to_int_exact(self._months + months))

    def plus_days(self, days: int) -> Period:
        return self.with_days(to_int_exact(self._days + days))

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        if self.is_zero() or scalar == 1:
            return self
        return _period(
            to_int_exact(self._years * scalar),
            to_int_exact(self._months * scalar),
            to_int_exact(self._days * scalar),
        )

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Carry whole years out of the months. Days are left as-is.

        Example
        -------
        >>> Period.of(1, 15, 40).normalized()
        Period(P2Y3M40D)
        >>> Period.of(1, -15, 0).normalized()
        Period(P-3M)
        """
        total_months = self.to_total_months()
        years = trunc_div(total_months, 12)
        months = trunc_mod(total_months, 12)
        if years == self._years and months == self._months:
            return self
        return _period(to_int_exact(years), months, self._days)

    def to_total_months(self) -> int:
        return self._years * 12 + self._months

    def add_to(self, temporal: Any) -> Any:
        if self._years != 0 or self._months != 0:
            if self._months == 0:
                temporal = temporal.plus(self._years, _U.YEARS)
            else:
                temporal = temporal.plus(self.to_total_months(), _U.MONTHS)
        if self._days != 0:
            temporal = temporal.plus(self._days, _U.DAYS)
        return temporal

    def subtract_from(self, temporal: Any) -> Any:
        if self._years != 0 or self._months != 0:
            if self._months == 0:
                temporal = temporal.minus(self._years, _U.YEARS)
            else:
                temporal = temporal.minus(self.to_total_months(), _U.MONTHS)
        if self._days != 0:
            temporal = temporal.minus(self._days, _U.DAYS)
        return temporal

    def __eq__(self, other: object) -> bool:
        if type(other) is not Period:
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((Period, self._years, self._months, self._days))

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: Period) -> Period:
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Period) -> Period:
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: int) -> Period:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.multiplied_by(other)
        return NotImplemented

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        return (
            "P"
            + (f"{self._years}Y" if self._years else "")
            + (f"{self._months}M" if self._months else "")
            + (f"{self._days}D" if self._days else "")
        )

    def __repr__(self) -> str:
        return f"Period({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_period, (self._years, self._months, self._days)


@no_type_check
def _unpkl_period(years: int, months: int, days: int) -> Period:
    return _period(years, months, days)


def _period(years: int, months: int, days: int) -> Period:
    if years == 0 and months == 0 and days == 0 and _PERIOD_ZERO is not None:
        return _PERIOD_ZERO
    self = _object_new(Period)
    self._years = to_int_exact(years)
    self._months = to_int_exact(months)
    self._days = to_int_exact(days)
    return self


_PERIOD_ZERO: Optional[Period] = None
Period.ZERO = _PERIOD_ZERO = _period(0, 0, 0)


# ----------------------------------------------------------------------------
# Zones
# ----------------------------------------------------------------------------


class ZoneId(_ImmutableBase, ABC):
    """The identity of a time zone, such as ``Europe/Paris`` or ``+02:00``.

    A zone ID is either a fixed :class:`ZoneOffset`, or a
    :class:`ZoneRegion` whose offsets are looked up in its
    :class:`ZoneRules`.

    Example
    -------
    >>> ZoneId.of("+02:00")
    ZoneOffset(+02:00)
    >>> ZoneId.of("UTC")
    ZoneRegion(UTC)
    >>> ZoneId.of("Europe/Amsterdam").normalized()
    ZoneRegion(Europe/Amsterdam)
    """

    __slots__ = ()

    SHORT_IDS: ClassVar[Mapping[str, str]]
    """Common three-letter abbreviations, for use with :meth:`of`"""

    @classmethod
    def of(
        cls,
        zone_id: str,
        alias_map: Optional[Mapping[str, str]] = None,
        *,
        check_available: bool = True,
    ) -> ZoneId:
        """Obtain a zone from its ID.

        Parameters
        ----------
        zone_id
            ``Z``, ``+hh:mm`` and similar give a :class:`ZoneOffset`.
            ``UTC``, ``GMT`` or ``UT``, optionally followed by an offset,
            give a region with fixed rules. Anything else is a region ID
            whose rules come from :class:`ZoneRulesProvider`.
        alias_map
            Replacements for IDs, e.g. :attr:`ZoneId.SHORT_IDS`
        check_available
            Whether to fail if no rules exist for a region ID

        Raises
        ------
        DateTimeError
            If the ID is malformed
        ZoneRulesError
            If the ID is well-formed, but no rules exist for it
        """
        if alias_map is not None:
            zone_id = alias_map.get(zone_id, zone_id)
        if len(zone_id) <= 1 or zone_id[0] in "+-":
            return ZoneOffset.of(zone_id)
        elif zone_id.startswith(("UTC", "GMT")):
            return _zone_with_prefix(zone_id, 3, check_available)
        elif zone_id.startswith("UT"):
            return _zone_with_prefix(zone_id, 2, check_available)
        return _zone_region(zone_id, check_available)

    @classmethod
    def of_offset(cls, prefix: str, offset: ZoneOffset) -> ZoneId:
        """A fixed zone with a prefix, e.g. ``UTC+01:00``.

        An empty prefix gives the offset itself.
        """
        if not prefix:
            return offset
        elif prefix not in ("GMT", "UTC", "UT"):
            raise ValueError(
                f"prefix should be GMT, UTC or UT, is: {prefix}"
            )
        if offset.total_seconds != 0:
            prefix += offset.id
        return _region_unchecked(prefix, ZoneRules.of(offset))

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> ZoneId:
        zone = temporal.query(TemporalQueries.ZONE)
        if zone is None:
            raise _unable_to_obtain("ZoneId", temporal)
        return zone

    @classmethod
    def system_default(cls) -> ZoneId:
        """The zone of the system, see ``TZ`` and ``/etc/localtime``"""
        tz = get_system_tz()
        return _region_unchecked(tz.key or "SYSTEM", _TzZoneRules(tz))

    @staticmethod
    def available_zone_ids() -> set[str]:
        return ZoneRulesProvider.get_available_zone_ids()

    @property
    @abstractmethod
    def id(self) -> str: ...

    @property
    @abstractmethod
    def rules(self) -> ZoneRules:
        """The rules of this zone

        Raises
        ------
        ZoneRulesError
            If no rules are available
        """

    def normalized(self) -> ZoneId:
        """The :class:`ZoneOffset` if the rules are fixed, else ``self``

        Example
        -------
        >>> ZoneId.of("UTC+02:00").normalized()
        ZoneOffset(+02:00)
        """
        try:
            rules = self.rules
        except ZoneRulesError:
            return self
        if rules.is_fixed_offset():
            return rules.offset(Instant.EPOCH)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id})"


@final
class ZoneRegion(ZoneId):
    """A zone identified by a region ID, e.g. ``Europe/Paris``.

    Created through :meth:`ZoneId.of`. A region may exist without
    available rules, in which case :attr:`rules` raises
    :class:`ZoneRulesError`.
    """

    __slots__ = ("_id", "_rules")

    def __init__(self) -> None:
        raise TypeError(
            "ZoneRegion instances cannot be created through the "
            "constructor. Use `ZoneId.of` instead."
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def rules(self) -> ZoneRules:
        if self._rules is not None:
            return self._rules
        return ZoneRulesProvider.get_rules(self._id, False)

    @no_type_check
    def __reduce__(self):
        return _unpkl_region, (self._id,)


@no_type_check
def _unpkl_region(zone_id: str) -> ZoneId:
    return ZoneId.of(zone_id, check_available=False)


def _region_unchecked(zone_id: str, rules: Optional[ZoneRules]) -> ZoneRegion:
    self = _object_new(ZoneRegion)
    self._id = zone_id
    self._rules = rules
    return self


_match_region_id = re.compile(r"[A-Za-z][A-Za-z0-9~/._+-]+").fullmatch


def _zone_region(zone_id: str, check_available: bool) -> ZoneRegion:
    if _match_region_id(zone_id) is None:
        raise DateTimeError(
            f"Invalid ID for region-based ZoneId, invalid format: {zone_id}"
        )
    try:
        rules: Optional[ZoneRules] = ZoneRulesProvider.get_rules(
            zone_id, True
        )
    except ZoneRulesError:
        if check_available:
            raise
        rules = None
    return _region_unchecked(zone_id, rules)


def _zone_with_prefix(
    zone_id: str, prefix_length: int, check_available: bool
) -> ZoneId:
    prefix = zone_id[:prefix_length]
    if len(zone_id) == prefix_length:
        return ZoneId.of_offset(prefix, ZoneOffset.UTC)
    elif zone_id[prefix_length] not in "+-":
        return _zone_region(zone_id, check_available)
    try:
        offset = ZoneOffset.of(zone_id[prefix_length:])
    except DateTimeError as e:
        raise DateTimeError(
            f"Invalid ID for offset-based ZoneId: {zone_id}"
        ) from e
    return ZoneId.of_offset(prefix, offset)


@final
class ZoneOffset(ZoneId, TemporalAccessor, TemporalAdjuster, _Comparable):
    """A fixed offset from UTC, from -18:00 to +18:00.

    Offsets are ordered in descending order, which is the order of the
    instants they give for the same local date-time.

    Example
    -------
    >>> ZoneOffset.of("+01:30")
    ZoneOffset(+01:30)
    >>> ZoneOffset.of_hours(-5).total_seconds
    -18000
    >>> ZoneOffset.of_hours(2) < ZoneOffset.of_hours(1)
    True
    """

    __slots__ = ("_total_seconds", "_id")

    UTC: ClassVar[ZoneOffset]
    MIN: ClassVar[ZoneOffset]
    """The minimum offset, -18:00"""
    MAX: ClassVar[ZoneOffset]
    """The maximum offset, +18:00"""

    def __init__(self) -> None:
        raise TypeError(
            "ZoneOffset instances cannot be created through the "
            "constructor. Use `ZoneOffset.of` or one of the other "
            "factories instead."
        )

    @classmethod
    def of(cls, offset_id: str) -> ZoneOffset:
        """Parse an offset ID.

        Accepted formats are ``Z``, ``+h``, ``+hh``, ``+hh:mm``,
        ``+hhmm``, ``+hh:mm:ss`` and ``+hhmmss``, where ``+`` may also
        be ``-``.
        """
        if offset_id == "Z":
            return ZoneOffset.UTC
        length = len(offset_id)
        text = offset_id
        if length == 2:
            text = text[0] + "0" + text[1]
            length = 3
        if length == 3:
            hours = _parse_offset_number(offset_id, text, 1, False)
            minutes = seconds = 0
        elif length == 5:
            hours = _parse_offset_number(offset_id, text, 1, False)
            minutes = _parse_offset_number(offset_id, text, 3, False)
            seconds = 0
        elif length == 6:
            hours = _parse_offset_number(offset_id, text, 1, False)
            minutes = _parse_offset_number(offset_id, text, 4, True)
            seconds = 0
        elif length == 7:
            hours = _parse_offset_number(offset_id, text, 1, False)
            minutes = _parse_offset_number(offset_id, text, 3, False)
            seconds = _parse_offset_number(offset_id, text, 5, False)
        elif length == 9:
            hours = _parse_offset_number(offset_id, text, 1, False)
            minutes = _parse_offset_number(offset_id, text, 4, True)
            seconds = _parse_offset_number(offset_id, text, 7, True)
        else:
            raise DateTimeError(
                f"Invalid ID for ZoneOffset, invalid format: {offset_id}"
            )
        if text[0] == "-":
            return cls.of_hours_minutes_seconds(-hours, -minutes, -seconds)
        elif text[0] == "+":
            return cls.of_hours_minutes_seconds(hours, minutes, seconds)
        raise DateTimeError(
            "Invalid ID for ZoneOffset, plus/minus not found "
            f"when expected: {offset_id}"
        )

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int, seconds: int
    ) -> ZoneOffset:
        """Create from components, which must all have the same sign"""
        if not -18 <= hours <= 18:
            raise DateTimeError(
                f"Zone offset hours not in valid range: value {hours} "
                "is not in the range -18 to 18"
            )
        if hours > 0:
            if minutes < 0 or seconds < 0:
                raise DateTimeError(
                    "Zone offset minutes and seconds must be positive "
                    "because hours is positive"
                )
        elif hours < 0:
            if minutes > 0 or seconds > 0:
                raise DateTimeError(
                    "Zone offset minutes and seconds must be negative "
                    "because hours is negative"
                )
        elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
            raise DateTimeError(
                "Zone offset minutes and seconds must have the same sign"
            )
        if not -59 <= minutes <= 59:
            raise DateTimeError(
                f"Zone offset minutes not in valid range: value {minutes} "
                "is not in the range -59 to 59"
            )
        if not -59 <= seconds <= 59:
            raise DateTimeError(
                f"Zone offset seconds not in valid range: value {seconds} "
                "is not in the range -59 to 59"
            )
        if abs(hours) == 18 and (minutes or seconds):
            raise DateTimeError(
                "Zone offset not in valid range: -18:00 to +18:00"
            )
        return cls.of_total_seconds(hours * 3600 + minutes * 60 + seconds)

    @staticmethod
    @lru_cache(maxsize=512)
    def of_total_seconds(total_seconds: int) -> ZoneOffset:
        """Create from the offset in seconds. Instances are cached."""
        if not -64800 <= total_seconds <= 64800:
            raise DateTimeError(
                "Zone offset not in valid range: -18:00 to +18:00"
            )
        self = _object_new(ZoneOffset)
        self._total_seconds = total_seconds
        self._id = _offset_id(total_seconds)
        return self

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> ZoneOffset:
        offset = temporal.query(TemporalQueries.OFFSET)
        if offset is None:
            raise _unable_to_obtain("ZoneOffset", temporal)
        return offset

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def id(self) -> str:
        return self._id

    @property
    def rules(self) -> ZoneRules:
        return ZoneRules.of(self)

    def normalized(self) -> ZoneOffset:
        return self

    def is_supported(self, field: Any) -> bool:
        return _is_supported(field, self, lambda f: f is _F.OFFSET_SECONDS)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.OFFSET_SECONDS:
            return self._total_seconds
        elif isinstance(field, ChronoField):
            raise UnsupportedTemporalTypeError._for_field(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.OFFSET or query is TemporalQueries.ZONE:
            return self
        return super().query(query)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(_F.OFFSET_SECONDS, self._total_seconds)

    def compare_to(self, other: ZoneOffset) -> int:
        return _cmp(other._total_seconds, self._total_seconds)

    def __eq__(self, other: object) -> bool:
        if type(other) is ZoneOffset:
            return self._total_seconds == other._total_seconds
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._id)

    @no_type_check
    def __reduce__(self):
        return _unpkl_offset, (self._total_seconds,)


@no_type_check
def _unpkl_offset(total_seconds: int) -> ZoneOffset:
    return ZoneOffset.of_total_seconds(total_seconds)


def _offset_id(total_seconds: int) -> str:
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    hours, rest = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    return text + f":{seconds:02d}" if seconds else text


def _parse_offset_number(
    offset_id: str, text: str, pos: int, preceded_by_colon: bool
) -> int:
    if preceded_by_colon and text[pos - 1] != ":":
        raise DateTimeError(
            "Invalid ID for ZoneOffset, colon not found "
            f"when expected: {offset_id}"
        )
    digits = text[pos : pos + 2]
    if not (len(digits) == 2 and digits.isascii() and digits.isdigit()):
        raise DateTimeError(
            "Invalid ID for ZoneOffset, non numeric characters "
            f"found: {offset_id}"
        )
    return int(digits)


ZoneOffset.UTC = ZoneOffset.of_total_seconds(0)
ZoneOffset.MIN = ZoneOffset.of_total_seconds(-64800)
ZoneOffset.MAX = ZoneOffset.of_total_seconds(64800)
_UTC = ZoneOffset.UTC


@final
class ZoneOffsetTransition(_Comparable):
    """A change of offset in a zone, e.g. the start of summer time.

    A *gap* skips local times (clocks jump forward), an *overlap*
    repeats them (clocks jump back).

    Example
    -------
    >>> t = ZoneOffsetTransition.of(
    ...     LocalDateTime(2021, 3, 28, 2),
    ...     ZoneOffset.of_hours(1),
    ...     ZoneOffset.of_hours(2),
    ... )
    >>> t.is_gap()
    True
    >>> t.date_time_after
    LocalDateTime(2021-03-28T03:00)
    """

    __slots__ = ("_transition", "_offset_before", "_offset_after")

    def __init__(self) -> None:
        raise TypeError(
            "ZoneOffsetTransition instances cannot be created through "
            "the constructor. Use `ZoneOffsetTransition.of` instead."
        )

    @classmethod
    def of(
        cls,
        transition: LocalDateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> ZoneOffsetTransition:
        """Create from the local date-time of the transition
        (in the offset before it) and the offsets either side.
        """
        if offset_before == offset_after:
            raise ValueError("Offsets must not be equal")
        if transition.nano != 0:
            raise ValueError("Nano-of-second must be zero")
        self = _object_new(cls)
        self._transition = transition
        self._offset_before = offset_before
        self._offset_after = offset_after
        return self

    @property
    def instant(self) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second())

    def to_epoch_second(self) -> int:
        return self._transition.to_epoch_second(self._offset_before)

    @property
    def date_time_before(self) -> LocalDateTime:
        """The local date-time of the transition, in the offset before"""
        return self._transition

    @property
    def date_time_after(self) -> LocalDateTime:
        """The local date-time of the transition, in the offset after"""
        return self._transition.plus_seconds(self._duration_seconds())

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    def _duration_seconds(self) -> int:
        return (
            self._offset_after._total_seconds
            - self._offset_before._total_seconds
        )

    @property
    def duration(self) -> Duration:
        """The size of the gap (positive) or overlap (negative)"""
        return Duration.of_seconds(self._duration_seconds())

    def is_gap(self) -> bool:
        return self._duration_seconds() > 0

    def is_overlap(self) -> bool:
        return self._duration_seconds() < 0

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        """Whether the offset is valid during the transition"""
        if self.is_gap():
            return False
        return offset == self._offset_before or offset == self._offset_after

    def valid_offsets(self) -> list[ZoneOffset]:
        if self.is_gap():
            return []
        return [self._offset_before, self._offset_after]

    def compare_to(self, other: ZoneOffsetTransition) -> int:
        return _cmp(self.to_epoch_second(), other.to_epoch_second())

    def __eq__(self, other: object) -> bool:
        if type(other) is not ZoneOffsetTransition:
            return NotImplemented
        return (
            self._transition == other._transition
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __hash__(self) -> int:
        return hash(
            (self._transition, self._offset_before, self._offset_after)
        )

    def __str__(self) -> str:
        kind = "Gap" if self.is_gap() else "Overlap"
        return (
            f"Transition[{kind} at {self._transition}{self._offset_before}"
            f" to {self._offset_after}]"
        )

    def __repr__(self) -> str:
        return f"ZoneOffsetTransition({self})"


class ZoneRules(_ImmutableBase, ABC):
    """The offsets of a zone over time.

    Rules answer two questions: which offset applies at an instant,
    and which offset(s) are valid for a local date-time. The second
    question has zero answers in a gap, and two in an overlap.

    Example
    -------
    >>> rules = ZoneRules.from_posix("CET-1CEST,M3.5.0,M10.5.0/3")
    >>> rules.valid_offsets(LocalDateTime(2021, 3, 28, 2, 30))
    []
    >>> rules.valid_offsets(LocalDateTime(2021, 10, 31, 2, 30))
    [ZoneOffset(+02:00), ZoneOffset(+01:00)]
    """

    __slots__ = ()

    @staticmethod
    def of(offset: ZoneOffset) -> ZoneRules:
        """Rules that always give the same offset"""
        return _FixedZoneRules(offset)

    @staticmethod
    def from_posix(tz_string: str) -> ZoneRules:
        """Rules from a POSIX TZ string, e.g. ``EST5EDT,M3.2.0,M11.1.0``

        Raises
        ------
        ZoneRulesError
            If the string is not a valid POSIX TZ string
        """
        try:
            return _TzZoneRules(TimeZone.parse_posix(tz_string))
        except ValueError as e:
            raise ZoneRulesError(str(e)) from e

    @staticmethod
    def from_tzif(data: bytes) -> ZoneRules:
        """Rules from the contents of a TZif file

        Raises
        ------
        ZoneRulesError
            If the data is not valid TZif data
        """
        try:
            return _TzZoneRules(TimeZone.parse_tzif(data))
        except (ValueError, EOFError) as e:
            raise ZoneRulesError(f"Invalid TZif data: {e}") from e

    @abstractmethod
    def is_fixed_offset(self) -> bool: ...

    @abstractmethod
    def offset(self, instant: Instant) -> ZoneOffset:
        """The offset in effect at the instant"""

    @abstractmethod
    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        """The valid offsets for the local date-time.

        There is one in normal cases, none in a gap,
        and two in an overlap (the earlier offset first).
        """

    @abstractmethod
    def transition(
        self, local: LocalDateTime
    ) -> Optional[ZoneOffsetTransition]:
        """The transition at the local date-time, if it is in a gap
        or overlap."""

    def offset_for_local(self, local: LocalDateTime) -> ZoneOffset:
        """The best offset for the local date-time.

        In a gap or overlap, this is the offset before the transition.
        """
        offsets = self.valid_offsets(local)
        if len(offsets) == 1:
            return offsets[0]
        trans = self.transition(local)
        if trans is None:
            raise ZoneRulesError(
                f"{self!r} gives neither one offset nor a transition "
                f"for {local}"
            )
        return trans.offset_before

    def is_valid_offset(
        self, local: LocalDateTime, offset: ZoneOffset
    ) -> bool:
        return offset in self.valid_offsets(local)


@final
class _FixedZoneRules(ZoneRules):
    __slots__ = ("_offset",)

    def __init__(self, offset: ZoneOffset) -> None:
        self._offset = offset

    def is_fixed_offset(self) -> bool:
        return True

    def offset(self, instant: Instant) -> ZoneOffset:
        return self._offset

    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        return [self._offset]

    def transition(
        self, local: LocalDateTime
    ) -> Optional[ZoneOffsetTransition]:
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not _FixedZoneRules:
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"ZoneRules(fixed {self._offset})"


@final
class _TzZoneRules(ZoneRules):
    """Rules backed by TZif data or a POSIX TZ string"""

    __slots__ = ("_tz",)

    def __init__(self, tz: TimeZone) -> None:
        self._tz = tz

    def is_fixed_offset(self) -> bool:
        return self._tz.is_fixed

    def offset(self, instant: Instant) -> ZoneOffset:
        return ZoneOffset.of_total_seconds(
            self._tz.offset_for_instant(instant.epoch_second)
        )

    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        ambiguity = self._tz.ambiguity_for_local(
            local.to_epoch_second(_UTC)
        )
        if isinstance(ambiguity, Unambiguous):
            return [ZoneOffset.of_total_seconds(ambiguity.offset)]
        elif isinstance(ambiguity, Gap):
            return []
        return [
            ZoneOffset.of_total_seconds(ambiguity.before),
            ZoneOffset.of_total_seconds(ambiguity.after),
        ]

    def transition(
        self, local: LocalDateTime
    ) -> Optional[ZoneOffsetTransition]:
        ambiguity = self._tz.ambiguity_for_local(
            local.to_epoch_second(_UTC)
        )
        if isinstance(ambiguity, (Gap, Fold)):
            before = ZoneOffset.of_total_seconds(ambiguity.before)
            return ZoneOffsetTransition.of(
                LocalDateTime.of_epoch_second(ambiguity.transition, 0, before),
                before,
                ZoneOffset.of_total_seconds(ambiguity.after),
            )
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not _TzZoneRules:
            return NotImplemented
        return self._tz == other._tz

    def __hash__(self) -> int:
        return hash(self._tz)

    def __repr__(self) -> str:
        return f"ZoneRules({self._tz.key or 'custom'})"


class ZoneRulesProvider(ABC):
    """A source of zone rules, looked up by zone ID.

    Providers are registered globally. IDs not served by any registered
    provider are looked up in the TZif database: the directories in
    ``TZPATH``, then the ``tzdata`` package.

    Example
    -------
    >>> provider = SimpleZoneRulesProvider(
    ...     {"Custom/Zone": ZoneRules.from_posix("XST-3")}
    ... )
    >>> ZoneRulesProvider.register_provider(provider)
    >>> ZoneId.of("Custom/Zone").rules.is_fixed_offset()
    True
    """

    __slots__ = ()

    _zones: ClassVar[dict[str, ZoneRulesProvider]] = {}
    _lock: ClassVar[Lock] = Lock()

    @abstractmethod
    def provide_zone_ids(self) -> set[str]: ...

    @abstractmethod
    def provide_rules(self, zone_id: str, for_caching: bool) -> ZoneRules:
        """The rules for an ID this provider serves.

        ``for_caching`` is true if the rules will be held on to,
        e.g. by a :class:`ZoneRegion`.
        """

    @staticmethod
    def register_provider(provider: ZoneRulesProvider) -> None:
        """Register a provider for all the IDs it serves

        Raises
        ------
        ZoneRulesError
            If another registered provider already serves one of the IDs
        """
        zone_ids = provider.provide_zone_ids()
        with ZoneRulesProvider._lock:
            zones = ZoneRulesProvider._zones
            for zone_id in zone_ids:
                if zone_id in zones:
                    raise ZoneRulesError(
                        "Unable to register zone as one already registered "
                        f"with that ID: {zone_id}, currently loading from "
                        f"provider: {provider!r}"
                    )
            zones.update(dict.fromkeys(zone_ids, provider))
        logger.debug(
            "Registered %d zone IDs from %r", len(zone_ids), provider
        )

    @staticmethod
    def deregister_provider(provider: ZoneRulesProvider) -> None:
        with ZoneRulesProvider._lock:
            zones = ZoneRulesProvider._zones
            for zone_id in [k for k, p in zones.items() if p is provider]:
                del zones[zone_id]
        logger.debug("Deregistered provider %r", provider)

    @staticmethod
    def get_available_zone_ids() -> set[str]:
        """All IDs from registered providers and the TZif database"""
        return set(ZoneRulesProvider._zones).union(available_keys())

    @staticmethod
    def get_rules(zone_id: str, for_caching: bool = False) -> ZoneRules:
        """The rules for a zone ID

        Raises
        ------
        ZoneRulesError
            If no rules exist for the ID
        """
        provider = ZoneRulesProvider._zones.get(zone_id)
        if provider is not None:
            return provider.provide_rules(zone_id, for_caching)
        try:
            return _TzZoneRules(get_tz(zone_id))
        except TimeZoneNotFoundError as e:
            raise ZoneRulesError(str(e)) from e


@final
class SimpleZoneRulesProvider(ZoneRulesProvider):
    """Serves a fixed mapping of zone IDs to rules"""

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, ZoneRules]) -> None:
        self._rules = dict(rules)

    def provide_zone_ids(self) -> set[str]:
        return set(self._rules)

    def provide_rules(self, zone_id: str, for_caching: bool) -> ZoneRules:
        try:
            return self._rules[zone_id]
        except KeyError:
            raise ZoneRulesError(f"Unknown time-zone ID: {zone_id}") from None

    def __repr__(self) -> str:
        return f"SimpleZoneRulesProvider({sorted(self._rules)!r})"


# ----------------------------------------------------------------------------
# Offset and zoned date-times
# ----------------------------------------------------------------------------


@final
class OffsetTime(Temporal, TemporalAdjuster, _Comparable):
    """A time of day with a fixed offset from UTC, without a date.

    Equality compares the local time and offset. Use :meth:`is_equal`
    to compare only the point on a shared UTC day.

    Example
    -------
    >>> t = OffsetTime(10, 15, 30, offset=ZoneOffset.of_hours(1))
    >>> t
    OffsetTime(10:15:30+01:00)
    >>> t.with_offset_same_instant(ZoneOffset.UTC)
    OffsetTime(09:15:30Z)
    """

    __slots__ = ("_time", "_offset")

    MIN: ClassVar[OffsetTime]
    MAX: ClassVar[OffsetTime]

    def __init__(
        self,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
        *,
        offset: ZoneOffset,
    ) -> None:
        if not isinstance(offset, ZoneOffset):
            raise TypeError(f"Expected a ZoneOffset, got {offset!r}")
        self._time = LocalTime(hour, minute, second, nano)
        self._offset = offset

    @classmethod
    def of(cls, time: LocalTime, offset: ZoneOffset, /) -> OffsetTime:
        if not isinstance(time, LocalTime):
            raise TypeError(f"Expected a LocalTime, got {time!r}")
        return _ot(time, offset)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetTime:
        """The time of day at an instant, with the offset of the zone then

        Example
        -------
        >>> OffsetTime.of_instant(Instant.EPOCH, ZoneOffset.of_hours(-2))
        OffsetTime(22:00-02:00)
        """
        offset = zone.rules.offset(instant)
        second_of_day = floor_mod(
            instant.epoch_second + offset.total_seconds, _SECONDS_PER_DAY
        )
        return _ot(
            LocalTime.of_nano_of_day(
                second_of_day * _NANOS_PER_SECOND + instant.nano
            ),
            offset,
        )

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> OffsetTime:
        if isinstance(temporal, OffsetTime):
            return temporal
        try:
            return _ot(LocalTime.from_(temporal), ZoneOffset.from_(temporal))
        except DateTimeError as e:
            raise _unable_to_obtain("OffsetTime", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> OffsetTime:
        """Parse the ISO 8601 format, e.g. ``10:15:30+01:00``

        Example
        -------
        >>> OffsetTime.parse("10:15Z")
        OffsetTime(10:15Z)
        """
        parts = _parse.parse_offset_time(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        time_parts, offset_text = parts
        try:
            return _ot(LocalTime(*time_parts), ZoneOffset.of(offset_text))
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> OffsetTime:
        clock = _clock_from(clock)
        return cls.of_instant(clock.instant(), clock.zone)

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nano(self) -> int:
        return self._time.nano

    def to_local_time(self) -> LocalTime:
        return self._time

    def _epoch_nano(self) -> int:
        # Nanoseconds from midnight UTC, which may fall outside a day
        return (
            self._time.to_nano_of_day()
            - self._offset.total_seconds * _NANOS_PER_SECOND
        )

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetTime:
        """Change the offset, keeping the local time"""
        return self._with(self._time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetTime:
        """Change the offset, adjusting the local time
        so that the point on the UTC day stays the same."""
        if offset == self._offset:
            return self
        return _ot(
            self._time.plus_seconds(
                offset.total_seconds - self._offset.total_seconds
            ),
            offset,
        )

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: f.is_time_based() or f is _F.OFFSET_SECONDS,
            ChronoUnit.is_time_based,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.OFFSET_SECONDS:
            return field.range()
        elif isinstance(field, ChronoField):
            return self._time.range(field)
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.OFFSET_SECONDS:
            return self._offset.total_seconds
        elif isinstance(field, ChronoField):
            return self._time.get_long(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.OFFSET or query is TemporalQueries.ZONE:
            return self._offset
        elif (
            query is TemporalQueries.ZONE_ID
            or query is TemporalQueries.LOCAL_DATE
        ):
            return None
        elif query is TemporalQueries.LOCAL_TIME:
            return self._time
        elif query is TemporalQueries.PRECISION:
            return _U.NANOS
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_(
            _F.NANO_OF_DAY, self._time.to_nano_of_day()
        ).with_(_F.OFFSET_SECONDS, self._offset.total_seconds)

    def _with(self, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        if time is self._time and offset == self._offset:
            return self
        return _ot(time, offset)

    def _adjust(self, adjuster: Any) -> Any:
        if isinstance(adjuster, LocalTime):
            return self._with(adjuster, self._offset)
        elif isinstance(adjuster, ZoneOffset):
            return self._with(self._time, adjuster)
        elif isinstance(adjuster, OffsetTime):
            return adjuster
        return super()._adjust(adjuster)

    def _with_field(self, field: ChronoField, new_value: int) -> OffsetTime:
        if field is _F.OFFSET_SECONDS:
            return self._with(
                self._time,
                ZoneOffset.of_total_seconds(
                    field.check_valid_int_value(new_value)
                ),
            )
        return self._with(self._time.with_(field, new_value), self._offset)

    def with_hour(self, hour: int) -> OffsetTime:
        return self._with(self._time.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetTime:
        return self._with(self._time.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetTime:
        return self._with(self._time.with_second(second), self._offset)

    def with_nano(self, nano: int) -> OffsetTime:
        return self._with(self._time.with_nano(nano), self._offset)

    def truncated_to(self, unit: TemporalUnit) -> OffsetTime:
        return self._with(self._time.truncated_to(unit), self._offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetTime:
        return self._with(self._time.plus(amount, unit), self._offset)

    def plus_hours(self, hours: int) -> OffsetTime:
        return self._with(self._time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetTime:
        return self._with(self._time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetTime:
        return self._with(self._time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.plus_nanos(nanos), self._offset)

    def minus_hours(self, hours: int) -> OffsetTime:
        return self._with(self._time.minus_hours(hours), self._offset)

    def minus_minutes(self, minutes: int) -> OffsetTime:
        return self._with(self._time.minus_minutes(minutes), self._offset)

    def minus_seconds(self, seconds: int) -> OffsetTime:
        return self._with(self._time.minus_seconds(seconds), self._offset)

    def minus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.minus_nanos(nanos), self._offset)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another offset time.

        Both are compared on the UTC day, so the offsets are
        taken into account.

        Example
        -------
        >>> a = OffsetTime(10, 0, offset=ZoneOffset.of_hours(1))
        >>> a.until(OffsetTime(10, 0, offset=ZoneOffset.UTC), ChronoUnit.HOURS)
        1
        """
        end = OffsetTime.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        nanos_until = end._epoch_nano() - self._epoch_nano()
        if unit is _U.NANOS:
            return nanos_until
        elif unit is _U.MICROS:
            return trunc_div(nanos_until, _NANOS_PER_MICRO)
        elif unit is _U.MILLIS:
            return trunc_div(nanos_until, _NANOS_PER_MILLI)
        elif unit is _U.SECONDS:
            return trunc_div(nanos_until, _NANOS_PER_SECOND)
        elif unit is _U.MINUTES:
            return trunc_div(nanos_until, _NANOS_PER_MINUTE)
        elif unit is _U.HOURS:
            return trunc_div(nanos_until, _NANOS_PER_HOUR)
        elif unit is _U.HALF_DAYS:
            return trunc_div(nanos_until, 12 * _NANOS_PER_HOUR)
        raise UnsupportedTemporalTypeError._for_unit(unit)

    def at_date(self, date: LocalDate) -> OffsetDateTime:
        return _odt(_ldt_unchecked(date, self._time), self._offset)

    def compare_to(self, other: OffsetTime) -> int:
        """Compare on the UTC day, then by local time"""
        if self._offset == other._offset:
            return self._time.compare_to(other._time)
        return _cmp(self._epoch_nano(), other._epoch_nano()) or (
            self._time.compare_to(other._time)
        )

    def is_after(self, other: OffsetTime) -> bool:
        return self._epoch_nano() > other._epoch_nano()

    def is_before(self, other: OffsetTime) -> bool:
        return self._epoch_nano() < other._epoch_nano()

    def is_equal(self, other: OffsetTime) -> bool:
        return self._epoch_nano() == other._epoch_nano()

    def __eq__(self, other: object) -> bool:
        if type(other) is not OffsetTime:
            return NotImplemented
        return self._time == other._time and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._time, self._offset))

    def __str__(self) -> str:
        return f"{self._time}{self._offset}"

    def __repr__(self) -> str:
        return f"OffsetTime({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_offset_time, (
            self._time.to_nano_of_day(),
            self._offset.total_seconds,
        )


@no_type_check
def _unpkl_offset_time(nano_of_day: int, offset_secs: int) -> OffsetTime:
    return _ot(
        LocalTime.of_nano_of_day(nano_of_day),
        ZoneOffset.of_total_seconds(offset_secs),
    )


def _ot(time: LocalTime, offset: ZoneOffset) -> OffsetTime:
    if not isinstance(offset, ZoneOffset):
        raise TypeError(f"Expected a ZoneOffset, got {offset!r}")
    self = _object_new(OffsetTime)
    self._time = time
    self._offset = offset
    return self


OffsetTime.MIN = _ot(LocalTime.MIN, ZoneOffset.MAX)
OffsetTime.MAX = _ot(LocalTime.MAX, ZoneOffset.MIN)


@final
class OffsetDateTime(Temporal, TemporalAdjuster, _Comparable):
    """A local date-time with a fixed offset from UTC.

    Any offset may be combined with any local date-time: there are no
    zone rules involved. Equality compares the local date-time and
    offset. Use :meth:`is_equal` or :meth:`timeline_key` to compare
    only the instant.

    Example
    -------
    >>> dt = OffsetDateTime(2021, 1, 2, 3, 4, offset=ZoneOffset.of_hours(2))
    >>> dt.to_instant()
    Instant(2021-01-02T01:04:00Z)
    >>> dt.with_offset_same_instant(ZoneOffset.UTC)
    OffsetDateTime(2021-01-02T01:04Z)
    """

    __slots__ = ("_local", "_offset")

    MIN: ClassVar[OffsetDateTime]
    MAX: ClassVar[OffsetDateTime]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
        *,
        offset: ZoneOffset,
    ) -> None:
        if not isinstance(offset, ZoneOffset):
            raise TypeError(f"Expected a ZoneOffset, got {offset!r}")
        self._local = LocalDateTime(
            year, month, day, hour, minute, second, nano
        )
        self._offset = offset

    @overload
    @classmethod
    def of(
        cls, local: LocalDateTime, offset: ZoneOffset, /
    ) -> OffsetDateTime: ...

    @overload
    @classmethod
    def of(
        cls, date: LocalDate, time: LocalTime, offset: ZoneOffset, /
    ) -> OffsetDateTime: ...

    @classmethod
    def of(cls, *args: Any) -> OffsetDateTime:
        """Create from a local date-time, or a date and time,
        and an offset."""
        if len(args) == 3:
            date, time, offset = args
            return _odt(LocalDateTime.of(date, time), offset)
        local, offset = args
        if not isinstance(local, LocalDateTime):
            raise TypeError(f"Expected a LocalDateTime, got {local!r}")
        return _odt(local, offset)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetDateTime:
        """The date-time at an instant, with the offset of the zone then"""
        offset = zone.rules.offset(instant)
        return _odt(
            LocalDateTime.of_epoch_second(
                instant.epoch_second, instant.nano, offset
            ),
            offset,
        )

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> OffsetDateTime:
        if isinstance(temporal, OffsetDateTime):
            return temporal
        try:
            offset = ZoneOffset.from_(temporal)
            date = temporal.query(TemporalQueries.LOCAL_DATE)
            time = temporal.query(TemporalQueries.LOCAL_TIME)
            if date is not None and time is not None:
                return _odt(_ldt_unchecked(date, time), offset)
            return cls.of_instant(Instant.from_(temporal), offset)
        except DateTimeError as e:
            raise _unable_to_obtain("OffsetDateTime", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> OffsetDateTime:
        """Parse the ISO 8601 format, e.g. ``2021-01-02T03:04:05+02:00``

        Example
        -------
        >>> OffsetDateTime.parse("2021-01-02T03:04:05.1Z")
        OffsetDateTime(2021-01-02T03:04:05.100Z)
        """
        parts = _parse.parse_offset_datetime(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        date_parts, time_parts, offset_text = parts
        try:
            return _odt(
                _ldt_unchecked(LocalDate(*date_parts), LocalTime(*time_parts)),
                ZoneOffset.of(offset_text),
            )
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(
        cls, clock: Union[Clock, ZoneId, None] = None
    ) -> OffsetDateTime:
        clock = _clock_from(clock)
        return cls.of_instant(clock.instant(), clock.zone)

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def year(self) -> int:
        return self._local.year

    @property
    def month_value(self) -> int:
        return self._local.month_value

    @property
    def month(self) -> Month:
        return self._local.month

    @property
    def day_of_month(self) -> int:
        return self._local.day_of_month

    @property
    def day_of_year(self) -> int:
        return self._local.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._local.day_of_week

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def nano(self) -> int:
        return self._local.nano

    def to_local_date_time(self) -> LocalDateTime:
        return self._local

    def to_local_date(self) -> LocalDate:
        return self._local._date

    def to_local_time(self) -> LocalTime:
        return self._local._time

    def to_offset_time(self) -> OffsetTime:
        return _ot(self._local._time, self._offset)

    def to_epoch_second(self) -> int:
        return self._local.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second(), self.nano)

    def to_zoned_date_time(self) -> ZonedDateTime:
        """A zoned date-time whose zone is this offset"""
        return ZonedDateTime.of(self._local, self._offset)

    def timeline_key(self) -> tuple[int, int]:
        """A sort key ordering by instant only

        Example
        -------
        >>> sorted(values, key=OffsetDateTime.timeline_key)  # doctest: +SKIP
        """
        return (self.to_epoch_second(), self.nano)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Change the offset, keeping the local date-time"""
        return self._with(self._local, offset)

    def with_offset_same_instant(
        self, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Change the offset, adjusting the local date-time
        so that the instant stays the same."""
        if offset == self._offset:
            return self
        return _odt(
            self._local.plus_seconds(
                offset.total_seconds - self._offset.total_seconds
            ),
            offset,
        )

    def at_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        return _zdt_from_epoch(self.to_epoch_second(), self.nano, zone)

    def at_zone_similar_local(self, zone: ZoneId) -> ZonedDateTime:
        """Combine the local date-time with a zone,
        preferring this offset in an overlap."""
        return ZonedDateTime.of_local(self._local, zone, self._offset)

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: True,
            lambda u: u is not _U.FOREVER,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.INSTANT_SECONDS or field is _F.OFFSET_SECONDS:
            return field.range()
        elif isinstance(field, ChronoField):
            return self._local.range(field)
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.INSTANT_SECONDS:
            return self.to_epoch_second()
        elif field is _F.OFFSET_SECONDS:
            return self._offset.total_seconds
        elif isinstance(field, ChronoField):
            return self._local.get_long(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.OFFSET or query is TemporalQueries.ZONE:
            return self._offset
        elif query is TemporalQueries.ZONE_ID:
            return None
        elif query is TemporalQueries.LOCAL_DATE:
            return self._local._date
        elif query is TemporalQueries.LOCAL_TIME:
            return self._local._time
        elif query is TemporalQueries.PRECISION:
            return _U.NANOS
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        return (
            temporal.with_(_F.EPOCH_DAY, self._local._date.to_epoch_day())
            .with_(_F.NANO_OF_DAY, self._local._time.to_nano_of_day())
            .with_(_F.OFFSET_SECONDS, self._offset.total_seconds)
        )

    def _with(
        self, local: LocalDateTime, offset: ZoneOffset
    ) -> OffsetDateTime:
        if local is self._local and offset == self._offset:
            return self
        return _odt(local, offset)

    def _adjust(self, adjuster: Any) -> Any:
        if isinstance(adjuster, (LocalDate, LocalTime, LocalDateTime)):
            return self._with(self._local.with_(adjuster), self._offset)
        elif isinstance(adjuster, Instant):
            return OffsetDateTime.of_instant(adjuster, self._offset)
        elif isinstance(adjuster, ZoneOffset):
            return self._with(self._local, adjuster)
        elif isinstance(adjuster, OffsetDateTime):
            return adjuster
        return super()._adjust(adjuster)

    def _with_field(
        self, field: ChronoField, new_value: int
    ) -> OffsetDateTime:
        if field is _F.INSTANT_SECONDS:
            return OffsetDateTime.of_instant(
                Instant.of_epoch_second(new_value, self.nano), self._offset
            )
        elif field is _F.OFFSET_SECONDS:
            return self._with(
                self._local,
                ZoneOffset.of_total_seconds(
                    field.check_valid_int_value(new_value)
                ),
            )
        return self._with(self._local.with_(field, new_value), self._offset)

    def with_year(self, year: int) -> OffsetDateTime:
        return self._with(self._local.with_year(year), self._offset)

    def with_month(self, month: Union[int, Month]) -> OffsetDateTime:
        return self._with(self._local.with_month(month), self._offset)

    def with_day_of_month(self, day: int) -> OffsetDateTime:
        return self._with(self._local.with_day_of_month(day), self._offset)

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTime:
        return self._with(
            self._local.with_day_of_year(day_of_year), self._offset
        )

    def with_hour(self, hour: int) -> OffsetDateTime:
        return self._with(self._local.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetDateTime:
        return self._with(self._local.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetDateTime:
        return self._with(self._local.with_second(second), self._offset)

    def with_nano(self, nano: int) -> OffsetDateTime:
        return self._with(self._local.with_nano(nano), self._offset)

    def truncated_to(self, unit: TemporalUnit) -> OffsetDateTime:
        return self._with(self._local.truncated_to(unit), self._offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetDateTime:
        return self._with(self._local.plus(amount, unit), self._offset)

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._local.plus_years(years), self._offset)

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._local.plus_months(months), self._offset)

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._local.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._local.plus_days(days), self._offset)

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._local.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._local.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._local.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._local.plus_nanos(nanos), self._offset)

    def minus_years(self, years: int) -> OffsetDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> OffsetDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> OffsetDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self.plus_nanos(-nanos)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another date-time.

        The end is first converted to this offset.
        """
        end = OffsetDateTime.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        end = end.with_offset_same_instant(self._offset)
        return self._local.until(end._local, unit)

    def compare_to(self, other: OffsetDateTime) -> int:
        """Compare by instant, then by local date-time.

        The second step keeps the ordering consistent with equality.
        """
        if self._offset == other._offset:
            return self._local.compare_to(other._local)
        return _cmp(self.timeline_key(), other.timeline_key()) or (
            self._local.compare_to(other._local)
        )

    def is_after(self, other: OffsetDateTime) -> bool:
        return self.timeline_key() > other.timeline_key()

    def is_before(self, other: OffsetDateTime) -> bool:
        return self.timeline_key() < other.timeline_key()

    def is_equal(self, other: OffsetDateTime) -> bool:
        """Whether both represent the same instant"""
        return self.timeline_key() == other.timeline_key()

    def __eq__(self, other: object) -> bool:
        if type(other) is not OffsetDateTime:
            return NotImplemented
        return self._local == other._local and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._local, self._offset))

    def __str__(self) -> str:
        return f"{self._local}{self._offset}"

    def __repr__(self) -> str:
        return f"OffsetDateTime({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_odt, (self._local, self._offset.total_seconds)


@no_type_check
def _unpkl_odt(local: LocalDateTime, offset_secs: int) -> OffsetDateTime:
    return _odt(local, ZoneOffset.of_total_seconds(offset_secs))


def _odt(local: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
    if not isinstance(offset, ZoneOffset):
        raise TypeError(f"Expected a ZoneOffset, got {offset!r}")
    self = _object_new(OffsetDateTime)
    self._local = local
    self._offset = offset
    return self


OffsetDateTime.MIN = _odt(LocalDateTime.MIN, ZoneOffset.MAX)
OffsetDateTime.MAX = _odt(LocalDateTime.MAX, ZoneOffset.MIN)


@final
class ZonedDateTime(Temporal, _Comparable):
    """A local date-time in a zone, with the offset the zone gives it.

    The offset is always one of the valid offsets the zone's rules give
    for the local date-time. Where the local date-time is ambiguous, it
    is resolved as follows:

    - In a gap (e.g. clocks jump forward from 2:00 to 3:00), the local
      date-time moves forward by the length of the gap, and the offset
      after the transition applies.
    - In an overlap (e.g. clocks jump back from 3:00 to 2:00), the
      earlier offset is used, unless another valid offset is preferred.

    Date-based arithmetic (days and larger) works on the local
    time-line, time-based arithmetic (hours and smaller) on the
    instant time-line.

    Example
    -------
    >>> paris = ZoneId.of("Europe/Paris")
    >>> d = ZonedDateTime.of(LocalDateTime(2021, 3, 28, 2, 30), paris)
    >>> d
    ZonedDateTime(2021-03-28T03:30+02:00[Europe/Paris])
    >>> d.minus_hours(1)
    ZonedDateTime(2021-03-28T01:30+01:00[Europe/Paris])
    """

    __slots__ = ("_local", "_offset", "_zone")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
        *,
        zone: Union[ZoneId, str],
    ) -> None:
        if isinstance(zone, str):
            zone = ZoneId.of(zone)
        resolved = ZonedDateTime.of_local(
            LocalDateTime(year, month, day, hour, minute, second, nano), zone
        )
        self._local = resolved._local
        self._offset = resolved._offset
        self._zone = zone

    @overload
    @classmethod
    def of(cls, local: LocalDateTime, zone: ZoneId, /) -> ZonedDateTime: ...

    @overload
    @classmethod
    def of(
        cls, date: LocalDate, time: LocalTime, zone: ZoneId, /
    ) -> ZonedDateTime: ...

    @classmethod
    def of(cls, *args: Any) -> ZonedDateTime:
        """Combine a local date-time (or date and time) with a zone,
        resolving gaps and overlaps."""
        if len(args) == 3:
            date, time, zone = args
            return cls.of_local(LocalDateTime.of(date, time), zone)
        local, zone = args
        return cls.of_local(local, zone)

    @classmethod
    def of_local(
        cls,
        local: LocalDateTime,
        zone: ZoneId,
        preferred_offset: Optional[ZoneOffset] = None,
    ) -> ZonedDateTime:
        """Combine a local date-time with a zone.

        In an overlap, the preferred offset is used if it is one of the
        valid offsets. Otherwise, the earlier offset is used.
        In a gap, the local date-time is moved forward by the length
        of the gap.
        """
        if not isinstance(local, LocalDateTime):
            raise TypeError(f"Expected a LocalDateTime, got {local!r}")
        if isinstance(zone, ZoneOffset):
            return _zdt(local, zone, zone)
        rules = zone.rules
        valid = rules.valid_offsets(local)
        if len(valid) == 1:
            offset = valid[0]
        elif not valid:
            trans = rules.transition(local)
            if trans is None:
                raise ZoneRulesError(
                    f"Rules of {zone} give neither an offset nor a "
                    f"transition for {local}"
                )
            local = local.plus_seconds(trans.duration.seconds)
            offset = trans.offset_after
        elif preferred_offset is not None and preferred_offset in valid:
            offset = preferred_offset
        else:
            offset = valid[0]
        return _zdt(local, offset, zone)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> ZonedDateTime:
        """The date-time in the zone at an instant. Never ambiguous."""
        return _zdt_from_epoch(instant.epoch_second, instant.nano, zone)

    @classmethod
    def of_instant_with_offset(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        """Keep the offset if it is valid for the local date-time.
        Otherwise, use the instant the local date-time and offset give.
        """
        if zone.rules.is_valid_offset(local, offset):
            return _zdt(local, offset, zone)
        return _zdt_from_epoch(local.to_epoch_second(offset), local.nano, zone)

    @classmethod
    def of_strict(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        """Combine the values as-is, if the offset is valid

        Raises
        ------
        DateTimeError
            If the offset isn't valid for the local date-time in the zone
        """
        rules = zone.rules
        if not rules.is_valid_offset(local, offset):
            trans = rules.transition(local)
            if trans is not None and trans.is_gap():
                raise DateTimeError(
                    f"LocalDateTime '{local}' does not exist in zone "
                    f"'{zone}' due to a gap in the local time-line, "
                    "typically caused by daylight savings"
                )
            raise DateTimeError(
                f"ZoneOffset '{offset}' is not valid for LocalDateTime "
                f"'{local}' in zone '{zone}'"
            )
        return _zdt(local, offset, zone)

    @classmethod
    def of_lenient(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        """Combine the values as-is, without consulting the zone rules.

        This allows values that are no longer valid, e.g. because the
        rules of a zone changed since they were stored.
        """
        if isinstance(zone, ZoneOffset) and offset != zone:
            raise ValueError("ZoneId must match ZoneOffset")
        return _zdt(local, offset, zone)

    @classmethod
    def from_(cls, temporal: TemporalAccessor) -> ZonedDateTime:
        if isinstance(temporal, ZonedDateTime):
            return temporal
        try:
            zone = ZoneId.from_(temporal)
            if temporal.is_supported(
                _F.INSTANT_SECONDS
            ) and temporal.is_supported(_F.NANO_OF_SECOND):
                return _zdt_from_epoch(
                    temporal.get_long(_F.INSTANT_SECONDS),
                    temporal.get(_F.NANO_OF_SECOND),
                    zone,
                )
            return cls.of_local(LocalDateTime.from_(temporal), zone)
        except DateTimeError as e:
            raise _unable_to_obtain("ZonedDateTime", temporal) from e

    @classmethod
    def parse(cls, text: str, /) -> ZonedDateTime:
        """Parse the ISO 8601 format with an optional zone ID suffix,
        e.g. ``2021-03-28T03:30+02:00[Europe/Paris]``.

        The instant the text gives is kept. If the offset in the text
        is not the one the zone gives at that instant, the local
        date-time is adjusted.
        """
        parts = _parse.parse_zoned_datetime(text)
        if parts is None:
            raise DateTimeParseError._for_text(text)
        date_parts, time_parts, offset_text, zone_id = parts
        try:
            local = _ldt_unchecked(
                LocalDate(*date_parts), LocalTime(*time_parts)
            )
            offset = ZoneOffset.of(offset_text)
            zone = offset if zone_id is None else ZoneId.of(zone_id)
            return _zdt_from_epoch(
                local.to_epoch_second(offset), local.nano, zone
            )
        except DateTimeError as e:
            raise DateTimeParseError._for_text(text, e) from e

    @classmethod
    def now(cls, clock: Union[Clock, ZoneId, None] = None) -> ZonedDateTime:
        clock = _clock_from(clock)
        return cls.of_instant(clock.instant(), clock.zone)

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def zone(self) -> ZoneId:
        return self._zone

    @property
    def year(self) -> int:
        return self._local.year

    @property
    def month_value(self) -> int:
        return self._local.month_value

    @property
    def month(self) -> Month:
        return self._local.month

    @property
    def day_of_month(self) -> int:
        return self._local.day_of_month

    @property
    def day_of_year(self) -> int:
        return self._local.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._local.day_of_week

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def nano(self) -> int:
        return self._local.nano

    def to_local_date_time(self) -> LocalDateTime:
        return self._local

    def to_local_date(self) -> LocalDate:
        return self._local._date

    def to_local_time(self) -> LocalTime:
        return self._local._time

    def to_epoch_second(self) -> int:
        return self._local.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second(), self.nano)

    def to_offset_date_time(self) -> OffsetDateTime:
        return _odt(self._local, self._offset)

    def _resolve_local(self, local: LocalDateTime) -> ZonedDateTime:
        return ZonedDateTime.of_local(local, self._zone, self._offset)

    def _resolve_instant(self, local: LocalDateTime) -> ZonedDateTime:
        return ZonedDateTime.of_instant_with_offset(
            local, self._offset, self._zone
        )

    def _resolve_offset(self, offset: ZoneOffset) -> ZonedDateTime:
        # The offset can only change to another valid one, i.e. in an overlap
        if offset != self._offset and self._zone.rules.is_valid_offset(
            self._local, offset
        ):
            return _zdt(self._local, offset, self._zone)
        return self

    def with_earlier_offset_at_overlap(self) -> ZonedDateTime:
        """In an overlap, switch to the earlier of the two offsets

        Example
        -------
        >>> d = ZonedDateTime.of_local(
        ...     LocalDateTime(2021, 10, 31, 2, 30),
        ...     ZoneId.of("Europe/Paris"),
        ...     ZoneOffset.of_hours(1),
        ... )
        >>> d.with_earlier_offset_at_overlap()
        ZonedDateTime(2021-10-31T02:30+02:00[Europe/Paris])
        """
        trans = self._zone.rules.transition(self._local)
        if trans is not None and trans.is_overlap():
            return self._with_offset_if_changed(trans.offset_before)
        return self

    def with_later_offset_at_overlap(self) -> ZonedDateTime:
        """In an overlap, switch to the later of the two offsets"""
        trans = self._zone.rules.transition(self._local)
        if trans is not None and trans.is_overlap():
            return self._with_offset_if_changed(trans.offset_after)
        return self

    def _with_offset_if_changed(self, offset: ZoneOffset) -> ZonedDateTime:
        if offset == self._offset:
            return self
        return _zdt(self._local, offset, self._zone)

    def with_zone_same_local(self, zone: ZoneId) -> ZonedDateTime:
        """Change the zone, keeping the local date-time where possible"""
        if zone == self._zone:
            return self
        return ZonedDateTime.of_local(self._local, zone, self._offset)

    def with_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """Change the zone, keeping the instant"""
        if zone == self._zone:
            return self
        return _zdt_from_epoch(self.to_epoch_second(), self.nano, zone)

    def with_fixed_offset_zone(self) -> ZonedDateTime:
        """Use the offset as the zone"""
        if self._zone == self._offset:
            return self
        return _zdt(self._local, self._offset, self._offset)

    def is_supported(self, field_or_unit: Any) -> bool:
        return _is_supported(
            field_or_unit,
            self,
            lambda f: True,
            lambda u: u is not _U.FOREVER,
        )

    def range(self, field: TemporalField) -> ValueRange:
        if field is _F.INSTANT_SECONDS or field is _F.OFFSET_SECONDS:
            return field.range()
        elif isinstance(field, ChronoField):
            return self._local.range(field)
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if field is _F.INSTANT_SECONDS:
            return self.to_epoch_second()
        elif field is _F.OFFSET_SECONDS:
            return self._offset.total_seconds
        elif isinstance(field, ChronoField):
            return self._local.get_long(field)
        return field.get_from(self)

    def query(self, query: TemporalQuery) -> Any:
        if query is TemporalQueries.ZONE_ID or query is TemporalQueries.ZONE:
            return self._zone
        elif query is TemporalQueries.OFFSET:
            return self._offset
        elif query is TemporalQueries.LOCAL_DATE:
            return self._local._date
        elif query is TemporalQueries.LOCAL_TIME:
            return self._local._time
        elif query is TemporalQueries.PRECISION:
            return _U.NANOS
        return query(self)

    def _adjust(self, adjuster: Any) -> Any:
        if isinstance(adjuster, LocalDate):
            return self._resolve_local(
                _ldt_unchecked(adjuster, self._local._time)
            )
        elif isinstance(adjuster, LocalTime):
            return self._resolve_local(
                _ldt_unchecked(self._local._date, adjuster)
            )
        elif isinstance(adjuster, LocalDateTime):
            return self._resolve_local(adjuster)
        elif isinstance(adjuster, OffsetDateTime):
            return ZonedDateTime.of_local(
                adjuster._local, self._zone, adjuster._offset
            )
        elif isinstance(adjuster, Instant):
            return _zdt_from_epoch(
                adjuster.epoch_second, adjuster.nano, self._zone
            )
        elif isinstance(adjuster, ZoneOffset):
            return self._resolve_offset(adjuster)
        return super()._adjust(adjuster)

    def _with_field(self, field: ChronoField, new_value: int) -> ZonedDateTime:
        if field is _F.INSTANT_SECONDS:
            return _zdt_from_epoch(new_value, self.nano, self._zone)
        elif field is _F.OFFSET_SECONDS:
            return self._resolve_offset(
                ZoneOffset.of_total_seconds(
                    field.check_valid_int_value(new_value)
                )
            )
        return self._resolve_local(self._local.with_(field, new_value))

    def with_year(self, year: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_year(year))

    def with_month(self, month: Union[int, Month]) -> ZonedDateTime:
        return self._resolve_local(self._local.with_month(month))

    def with_day_of_month(self, day: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_day_of_year(day_of_year))

    def with_hour(self, hour: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_hour(hour))

    def with_minute(self, minute: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_minute(minute))

    def with_second(self, second: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_second(second))

    def with_nano(self, nano: int) -> ZonedDateTime:
        return self._resolve_local(self._local.with_nano(nano))

    def truncated_to(self, unit: TemporalUnit) -> ZonedDateTime:
        return self._resolve_local(self._local.truncated_to(unit))

    def plus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> Any:
        if unit is None and isinstance(amount, Period):
            return self._resolve_local(self._local.plus(amount))
        return super().plus(amount, unit)

    def minus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> Any:
        if unit is None and isinstance(amount, Period):
            return self._resolve_local(self._local.minus(amount))
        return super().minus(amount, unit)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> ZonedDateTime:
        if unit.is_date_based():
            return self._resolve_local(self._local.plus(amount, unit))
        return self._resolve_instant(self._local.plus(amount, unit))

    def plus_years(self, years: int) -> ZonedDateTime:
        return self._resolve_local(self._local.plus_years(years))

    def plus_months(self, months: int) -> ZonedDateTime:
        return self._resolve_local(self._local.plus_months(months))

    def plus_weeks(self, weeks: int) -> ZonedDateTime:
        return self._resolve_local(self._local.plus_weeks(weeks))

    def plus_days(self, days: int) -> ZonedDateTime:
        """Add days on the local time-line, keeping the wall-clock time

        Example
        -------
        >>> d = ZonedDateTime.of(
        ...     LocalDateTime(2021, 3, 27, 12), ZoneId.of("Europe/Paris")
        ... )
        >>> d.plus_days(1)
        ZonedDateTime(2021-03-28T12:00+02:00[Europe/Paris])
        >>> d.plus_hours(24)
        ZonedDateTime(2021-03-28T13:00+02:00[Europe/Paris])
        """
        return self._resolve_local(self._local.plus_days(days))

    def plus_hours(self, hours: int) -> ZonedDateTime:
        return self._resolve_instant(self._local.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> ZonedDateTime:
        return self._resolve_instant(self._local.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> ZonedDateTime:
        return self._resolve_instant(self._local.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> ZonedDateTime:
        return self._resolve_instant(self._local.plus_nanos(nanos))

    def minus_years(self, years: int) -> ZonedDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> ZonedDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> ZonedDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> ZonedDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> ZonedDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> ZonedDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> ZonedDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> ZonedDateTime:
        return self.plus_nanos(-nanos)

    def until(
        self, end_exclusive: TemporalAccessor, unit: TemporalUnit
    ) -> int:
        """The number of complete units until another date-time.

        The end is first converted to this zone. Date-based units are
        then counted on the local time-line, time-based units on the
        instant time-line.
        """
        end = ZonedDateTime.from_(end_exclusive)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        end = end.with_zone_same_instant(self._zone)
        if unit.is_date_based():
            return self._local.until(end._local, unit)
        return self.to_offset_date_time().until(
            end.to_offset_date_time(), unit
        )

    def compare_to(self, other: ZonedDateTime) -> int:
        """Compare by instant, then local date-time, then zone ID"""
        return (
            _cmp(
                (self.to_epoch_second(), self.nano),
                (other.to_epoch_second(), other.nano),
            )
            or self._local.compare_to(other._local)
            or _cmp(self._zone.id, other._zone.id)
        )

    def is_after(self, other: ZonedDateTime) -> bool:
        return (self.to_epoch_second(), self.nano) > (
            other.to_epoch_second(),
            other.nano,
        )

    def is_before(self, other: ZonedDateTime) -> bool:
        return (self.to_epoch_second(), self.nano) < (
            other.to_epoch_second(),
            other.nano,
        )

    def is_equal(self, other: ZonedDateTime) -> bool:
        """Whether both represent the same instant"""
        return (self.to_epoch_second(), self.nano) == (
            other.to_epoch_second(),
            other.nano,
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not ZonedDateTime:
            return NotImplemented
        return (
            self._local == other._local
            and self._offset == other._offset
            and self._zone == other._zone
        )

    def __hash__(self) -> int:
        return hash((self._local, self._offset, self._zone))

    def __str__(self) -> str:
        text = f"{self._local}{self._offset}"
        if self._zone != self._offset:
            text += f"[{self._zone}]"
        return text

    def __repr__(self) -> str:
        return f"ZonedDateTime({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_zdt, (
            self._local,
            self._offset.total_seconds,
            self._zone.id,
        )


@no_type_check
def _unpkl_zdt(
    local: LocalDateTime, offset_secs: int, zone_id: str
) -> ZonedDateTime:
    return _zdt(
        local,
        ZoneOffset.of_total_seconds(offset_secs),
        ZoneId.of(zone_id, check_available=False),
    )


def _zdt(
    local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
) -> ZonedDateTime:
    self = _object_new(ZonedDateTime)
    self._local = local
    self._offset = offset
    self._zone = zone
    return self


def _zdt_from_epoch(
    epoch_second: int, nano: int, zone: ZoneId
) -> ZonedDateTime:
    offset = zone.rules.offset(Instant.of_epoch_second(epoch_second, nano))
    return _zdt(
        LocalDateTime.of_epoch_second(epoch_second, nano, offset),
        offset,
        zone,
    )


# ----------------------------------------------------------------------------
# Adjusters
# ----------------------------------------------------------------------------


class TemporalAdjusters:
    """Common adjusters, for use with :meth:`Temporal.with_`.

    Each factory returns a callable taking a temporal and returning
    the adjusted copy.

    Example
    -------
    >>> d = LocalDate.of(2021, 2, 10)
    >>> d.with_(TemporalAdjusters.last_day_of_month())
    LocalDate(2021-02-28)
    >>> d.with_(TemporalAdjusters.next(DayOfWeek.MONDAY))
    LocalDate(2021-02-15)
    """

    def __init__(self) -> None:
        raise TypeError("TemporalAdjusters is a namespace of factories")

    @staticmethod
    def of_date_adjuster(
        func: Callable[[LocalDate], LocalDate],
    ) -> Callable[[Any], Any]:
        """Wrap a function on dates, so it applies to any temporal
        with a date."""

        def adjust(temporal: Any) -> Any:
            return temporal.with_(func(LocalDate.from_(temporal)))

        return adjust

    @staticmethod
    def first_day_of_month() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(_F.DAY_OF_MONTH, 1)

        return adjust

    @staticmethod
    def last_day_of_month() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(
                _F.DAY_OF_MONTH, temporal.range(_F.DAY_OF_MONTH).maximum
            )

        return adjust

    @staticmethod
    def first_day_of_next_month() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(_F.DAY_OF_MONTH, 1).plus(1, _U.MONTHS)

        return adjust

    @staticmethod
    def first_day_of_year() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(_F.DAY_OF_YEAR, 1)

        return adjust

    @staticmethod
    def last_day_of_year() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(
                _F.DAY_OF_YEAR, temporal.range(_F.DAY_OF_YEAR).maximum
            )

        return adjust

    @staticmethod
    def first_day_of_next_year() -> Callable[[Any], Any]:
        def adjust(temporal: Any) -> Any:
            return temporal.with_(_F.DAY_OF_YEAR, 1).plus(1, _U.YEARS)

        return adjust

    @staticmethod
    def first_in_month(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        return TemporalAdjusters.day_of_week_in_month(1, day_of_week)

    @staticmethod
    def last_in_month(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        return TemporalAdjusters.day_of_week_in_month(-1, day_of_week)

    @staticmethod
    def day_of_week_in_month(
        ordinal: int, day_of_week: DayOfWeek
    ) -> Callable[[Any], Any]:
        """The n-th day-of-week in the month.

        Positive ordinals count from the start of the month, negative
        ones from the end. Zero gives the last matching day of the
        previous month. Large ordinals continue into later months.

        Example
        -------
        >>> second_tuesday = TemporalAdjusters.day_of_week_in_month(
        ...     2, DayOfWeek.TUESDAY
        ... )
        >>> LocalDate.of(2021, 3, 20).with_(second_tuesday)
        LocalDate(2021-03-09)
        """
        target = day_of_week.value

        if ordinal >= 0:

            def adjust(temporal: Any) -> Any:
                first = temporal.with_(_F.DAY_OF_MONTH, 1)
                diff = (target - first.get(_F.DAY_OF_WEEK)) % 7
                return first.plus(diff + (ordinal - 1) * 7, _U.DAYS)

        else:

            def adjust(temporal: Any) -> Any:
                last = temporal.with_(
                    _F.DAY_OF_MONTH, temporal.range(_F.DAY_OF_MONTH).maximum
                )
                diff = target - last.get(_F.DAY_OF_WEEK)
                if diff > 0:
                    diff -= 7
                return last.plus(diff - (-ordinal - 1) * 7, _U.DAYS)

        return adjust

    @staticmethod
    def next(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        """The next occurrence of the day-of-week, strictly after"""
        target = day_of_week.value

        def adjust(temporal: Any) -> Any:
            diff = temporal.get(_F.DAY_OF_WEEK) - target
            return temporal.plus(7 - diff if diff >= 0 else -diff, _U.DAYS)

        return adjust

    @staticmethod
    def next_or_same(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        target = day_of_week.value

        def adjust(temporal: Any) -> Any:
            current = temporal.get(_F.DAY_OF_WEEK)
            if current == target:
                return temporal
            diff = current - target
            return temporal.plus(7 - diff if diff >= 0 else -diff, _U.DAYS)

        return adjust

    @staticmethod
    def previous(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        """The previous occurrence of the day-of-week, strictly before"""
        target = day_of_week.value

        def adjust(temporal: Any) -> Any:
            diff = target - temporal.get(_F.DAY_OF_WEEK)
            return temporal.minus(7 - diff if diff >= 0 else -diff, _U.DAYS)

        return adjust

    @staticmethod
    def previous_or_same(day_of_week: DayOfWeek) -> Callable[[Any], Any]:
        target = day_of_week.value

        def adjust(temporal: Any) -> Any:
            current = temporal.get(_F.DAY_OF_WEEK)
            if current == target:
                return temporal
            diff = target - current
            return temporal.minus(7 - diff if diff >= 0 else -diff, _U.DAYS)

        return adjust


# ----------------------------------------------------------------------------
# Clocks
# ----------------------------------------------------------------------------


class Clock(ABC):
    """A source of the current instant, combined with a zone.

    Pass a clock to the ``now()`` methods to make code that depends on
    the current time testable.

    Example
    -------
    >>> clock = Clock.fixed(Instant.EPOCH, ZoneOffset.UTC)
    >>> LocalDate.now(clock)
    LocalDate(1970-01-01)
    """

    __slots__ = ()

    @staticmethod
    def system_utc() -> Clock:
        """The system clock, in UTC"""
        return _SystemClock(ZoneOffset.UTC)

    @staticmethod
    def system_default_zone() -> Clock:
        """The system clock, in the system's zone"""
        return _SystemClock(ZoneId.system_default())

    @staticmethod
    def system(zone: ZoneId) -> Clock:
        return _SystemClock(zone)

    @staticmethod
    def fixed(instant: Instant, zone: ZoneId) -> Clock:
        """A clock that always returns the same instant"""
        return _FixedClock(instant, zone)

    @staticmethod
    def offset(base: Clock, offset: Duration) -> Clock:
        """A clock running at a fixed offset from another"""
        if offset.is_zero():
            return base
        return _OffsetClock(base, offset)

    @staticmethod
    def tick(base: Clock, tick_duration: Duration) -> Clock:
        """A clock that truncates another to a multiple of the duration

        Raises
        ------
        ValueError
            If the duration is negative, or doesn't evenly divide a
            second and isn't a whole number of milliseconds
        """
        if tick_duration.is_negative():
            raise ValueError("Tick duration must not be negative")
        tick_nanos = tick_duration.to_nanos()
        if (
            tick_nanos % _NANOS_PER_MILLI != 0
            and _NANOS_PER_SECOND % tick_nanos != 0
        ):
            raise ValueError("Invalid tick duration")
        if tick_nanos <= 1:
            return base
        return _TickClock(base, tick_nanos)

    @staticmethod
    def tick_seconds(zone: ZoneId) -> Clock:
        return _TickClock(_SystemClock(zone), _NANOS_PER_SECOND)

    @staticmethod
    def tick_minutes(zone: ZoneId) -> Clock:
        return _TickClock(_SystemClock(zone), _NANOS_PER_MINUTE)

    @property
    @abstractmethod
    def zone(self) -> ZoneId: ...

    @abstractmethod
    def with_zone(self, zone: ZoneId) -> Clock: ...

    @abstractmethod
    def instant(self) -> Instant: ...

    def millis(self) -> int:
        """The current milliseconds since the epoch"""
        return self.instant().to_epoch_milli()


@final
class _SystemClock(Clock):
    __slots__ = ("_zone",)

    def __init__(self, zone: ZoneId) -> None:
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._zone:
            return self
        return _SystemClock(zone)

    def instant(self) -> Instant:
        return Instant.of_epoch_second(0, time_ns())

    def millis(self) -> int:
        return time_ns() // _NANOS_PER_MILLI

    def __eq__(self, other: object) -> bool:
        if type(other) is not _SystemClock:
            return NotImplemented
        return self._zone == other._zone

    def __hash__(self) -> int:
        return hash(self._zone) + 1

    def __repr__(self) -> str:
        return f"SystemClock[{self._zone}]"


@final
class _FixedClock(Clock):
    __slots__ = ("_instant", "_zone")

    def __init__(self, instant: Instant, zone: ZoneId) -> None:
        self._instant = instant
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._zone:
            return self
        return _FixedClock(self._instant, zone)

    def instant(self) -> Instant:
        return self._instant

    def __eq__(self, other: object) -> bool:
        if type(other) is not _FixedClock:
            return NotImplemented
        return self._instant == other._instant and self._zone == other._zone

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"FixedClock[{self._instant},{self._zone}]"


@final
class _OffsetClock(Clock):
    __slots__ = ("_base", "_offset")

    def __init__(self, base: Clock, offset: Duration) -> None:
        self._base = base
        self._offset = offset

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return _OffsetClock(self._base.with_zone(zone), self._offset)

    def instant(self) -> Instant:
        return self._base.instant().plus(self._offset)

    def __eq__(self, other: object) -> bool:
        if type(other) is not _OffsetClock:
            return NotImplemented
        return self._base == other._base and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._base, self._offset))

    def __repr__(self) -> str:
        return f"OffsetClock[{self._base!r},{self._offset}]"


@final
class _TickClock(Clock):
    __slots__ = ("_base", "_tick_nanos")

    def __init__(self, base: Clock, tick_nanos: int) -> None:
        self._base = base
        self._tick_nanos = tick_nanos

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return _TickClock(self._base.with_zone(zone), self._tick_nanos)

    def instant(self) -> Instant:
        if self._tick_nanos % _NANOS_PER_MILLI == 0:
            return Instant.of_epoch_milli(self.millis())
        instant = self._base.instant()
        return instant.minus_nanos(instant.nano % self._tick_nanos)

    def millis(self) -> int:
        millis = self._base.millis()
        return millis - millis % (self._tick_nanos // _NANOS_PER_MILLI or 1)

    def __eq__(self, other: object) -> bool:
        if type(other) is not _TickClock:
            return NotImplemented
        return (
            self._base == other._base
            and self._tick_nanos == other._tick_nanos
        )

    def __hash__(self) -> int:
        return hash((self._base, self._tick_nanos))

    def __repr__(self) -> str:
        return (
            f"TickClock[{self._base!r},"
            f"{Duration.of_nanos(self._tick_nanos)}]"
        )


def _clock_from(clock: Union[Clock, ZoneId, None]) -> Clock:
    if clock is None:
        return Clock.system_default_zone()
    elif isinstance(clock, ZoneId):
        return _SystemClock(clock)
    elif isinstance(clock, Clock):
        return clock
    raise TypeError(f"Expected a Clock or ZoneId, got {clock!r}")


ZoneId.SHORT_IDS = MappingProxyType(
    {
        "ACT": "Australia/Darwin",
        "AET": "Australia/Sydney",
        "AGT": "America/Argentina/Buenos_Aires",
        "ART": "Africa/Cairo",
        "AST": "America/Anchorage",
        "BET": "America/Sao_Paulo",
        "BST": "Asia/Dhaka",
        "CAT": "Africa/Harare",
        "CNT": "America/St_Johns",
        "CST": "America/Chicago",
        "CTT": "Asia/Shanghai",
        "EAT": "Africa/Addis_Ababa",
        "ECT": "Europe/Paris",
        "IET": "America/Indiana/Indianapolis",
        "IST": "Asia/Kolkata",
        "JST": "Asia/Tokyo",
        "MIT": "Pacific/Apia",
        "NET": "Asia/Yerevan",
        "NST": "Pacific/Auckland",
        "PLT": "Asia/Karachi",
        "PNT": "America/Phoenix",
        "PRT": "America/Puerto_Rico",
        "PST": "America/Los_Angeles",
        "SST": "Pacific/Guadalcanal",
        "VST": "Asia/Ho_Chi_Minh",
        "EST": "-05:00",
        "MST": "-07:00",
        "HST": "-10:00",
    }
)


# The public members are exposed in the root of the package.
# The "_pycalendrical" part is an implementation detail.
for name in __all__:
    member = locals()[name]
    if getattr(member, "__module__", None) == __name__:  # pragma: no branch
        member.__module__ = "calendrical"

# clear up loop variables so they don't leak into the namespace
del name
del member

for _unpkl in (
    _unpkl_date,
    _unpkl_time,
    _unpkl_ldt,
    _unpkl_ym,
    _unpkl_md,
    _unpkl_inst,
    _unpkl_dur,
    _unpkl_period,
    _unpkl_region,
    _unpkl_offset,
    _unpkl_odt,
    _unpkl_zdt,
):
    _unpkl.__module__ = "calendrical"

