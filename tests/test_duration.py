import pickle
from copy import copy, deepcopy

import pytest
from hypothesis import given
from hypothesis.strategies import integers

from calendrical import (
    ChronoUnit,
    DateTimeError,
    DateTimeParseError,
    Duration,
    Instant,
    LocalDateTime,
    LocalTime,
    Period,
    UnsupportedTemporalTypeError,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual

INT64_MAX = 2**63 - 1


def test_no_constructor():
    with pytest.raises(TypeError, match="constructor"):
        Duration()  # type: ignore[call-arg]


class TestFactories:

    def test_units(self):
        assert Duration.of_days(2).seconds == 172_800
        assert Duration.of_hours(-1).seconds == -3600
        assert Duration.of_minutes(3).seconds == 180
        assert Duration.of_millis(-1500) == Duration.of_seconds(
            -2, 500_000_000
        )
        assert Duration.of_nanos(-1) == Duration.of_seconds(-1, 999_999_999)

    @pytest.mark.parametrize(
        "secs, adjustment, expect_secs, expect_nano",
        [
            (3, 1, 3, 1),
            (4, -999_999_999, 3, 1),
            (0, -1, -1, 999_999_999),
            (2, 3_000_000_001, 5, 1),
            (-1, -2_000_000_000, -3, 0),
        ],
    )
    def test_of_seconds(self, secs, adjustment, expect_secs, expect_nano):
        d = Duration.of_seconds(secs, adjustment)
        assert d.seconds == expect_secs
        assert d.nano == expect_nano

    def test_zero_is_singleton(self):
        assert Duration.of_seconds(0) is Duration.ZERO
        assert Duration.of_nanos(0) is Duration.ZERO
        assert Duration.ZERO.is_zero()

    def test_too_large(self):
        with pytest.raises(OverflowError):
            Duration.of_seconds(INT64_MAX, 1_000_000_000)
        with pytest.raises(OverflowError):
            Duration.of_days(INT64_MAX // 86400 + 1)

    @pytest.mark.parametrize(
        "amount, unit, expect",
        [
            (90, ChronoUnit.MINUTES, Duration.of_seconds(5400)),
            (1, ChronoUnit.HALF_DAYS, Duration.of_hours(12)),
            (1, ChronoUnit.DAYS, Duration.of_hours(24)),
            (-3, ChronoUnit.MICROS, Duration.of_nanos(-3000)),
            (1500, ChronoUnit.MILLIS, Duration.of_seconds(1, 500_000_000)),
        ],
    )
    def test_of_unit(self, amount, unit, expect):
        assert Duration.of(amount, unit) == expect

    @pytest.mark.parametrize(
        "unit", [ChronoUnit.WEEKS, ChronoUnit.MONTHS, ChronoUnit.FOREVER]
    )
    def test_of_estimated_unit(self, unit):
        with pytest.raises(UnsupportedTemporalTypeError, match="estimated"):
            Duration.of(1, unit)

    def test_from(self):
        d = Duration.of_hours(1)
        assert Duration.from_(d) is d
        with pytest.raises(UnsupportedTemporalTypeError):
            Duration.from_(Period.of_days(1))

    @pytest.mark.parametrize(
        "start, end, expect",
        [
            (
                LocalTime(10, 0),
                LocalTime(12, 30, 1),
                Duration.of_seconds(9001),
            ),
            (
                LocalTime(12, 30, 1),
                LocalTime(10, 0),
                Duration.of_seconds(-9001),
            ),
            (
                Instant.of_epoch_second(0, 500_000_000),
                Instant.of_epoch_second(10),
                Duration.of_seconds(9, 500_000_000),
            ),
            (
                LocalDateTime(2020, 1, 1),
                LocalDateTime(2020, 1, 2, 0, 0, 0, 1),
                Duration.of_seconds(86400, 1),
            ),
        ],
    )
    def test_between(self, start, end, expect):
        assert Duration.between(start, end) == expect

    def test_between_beyond_nanos(self):
        d = Duration.between(Instant.MIN, Instant.MAX)
        assert d.seconds == (
            Instant.MAX.epoch_second - Instant.MIN.epoch_second
        )
        assert d.nano == 999_999_999


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("PT0S", Duration.ZERO),
            ("P2DT3H4M", Duration.of_seconds(183_840)),
            ("PT1.5S", Duration.of_millis(1500)),
            ("PT1,5S", Duration.of_millis(1500)),
            ("pt1s", Duration.of_seconds(1)),
            ("PT0.000000001S", Duration.of_nanos(1)),
            ("PT-0.5S", Duration.of_millis(-500)),
            ("-PT6H3M", Duration.of_minutes(-363)),
            ("PT-6H+3M", Duration.of_minutes(-357)),
            ("-PT-6H+3M", Duration.of_minutes(357)),
            ("+P1D", Duration.of_days(1)),
            ("P-1DT24H", Duration.ZERO),
        ],
    )
    def test_valid(self, s, expect):
        assert Duration.parse(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "",
            "P",
            "PT",
            "P1Y",
            "P1W",
            "P1DT",
            "PT1.1234567891S",
            "PT1S1",
            "1S",
            "PT1H2H",
            "PT1M2H",
            "P1.5D",
            "PT 1S",
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(
            DateTimeParseError, match="Text cannot be parsed to a Duration"
        ) as exc:
            Duration.parse(s)
        assert exc.value.parsed_string == s

    def test_overflow(self):
        with pytest.raises(DateTimeParseError, match="seconds"):
            Duration.parse("PT9223372036854775808S")
        with pytest.raises(DateTimeParseError, match="hours"):
            Duration.parse("PT9223372036854775807H")


class TestFormat:

    @pytest.mark.parametrize(
        "d, expect",
        [
            (Duration.ZERO, "PT0S"),
            (Duration.of_hours(1).plus_millis(1500), "PT1H1.5S"),
            (Duration.of_days(2), "PT48H"),
            (Duration.of_minutes(-90), "PT-1H-30M"),
            (Duration.of_seconds(-1, 1), "PT-0.999999999S"),
            (Duration.of_millis(-500), "PT-0.5S"),
            (Duration.of_millis(-1500), "PT-1.5S"),
            (Duration.of_nanos(10), "PT0.00000001S"),
            (Duration.of_seconds(61, 120_000_000), "PT1M1.12S"),
        ],
    )
    def test_str(self, d, expect):
        assert str(d) == expect
        assert repr(d) == f"Duration({expect})"
        assert Duration.parse(expect) == d


class TestArithmetic:

    def test_plus(self):
        d = Duration.of_seconds(10)
        assert d.plus(Duration.of_millis(500)) == Duration.of_millis(10_500)
        assert d.plus(2, ChronoUnit.MINUTES) == Duration.of_seconds(130)
        assert d.plus(0, ChronoUnit.HOURS) is d
        assert d + Duration.of_seconds(1) == Duration.of_seconds(11)
        with pytest.raises(TypeError):
            d.plus(5)  # type: ignore[call-overload]
        with pytest.raises(UnsupportedTemporalTypeError):
            d.plus(1, ChronoUnit.YEARS)

    def test_minus(self):
        d = Duration.of_seconds(10)
        assert d.minus(Duration.of_seconds(11)) == Duration.of_seconds(-1)
        assert d.minus(1, ChronoUnit.DAYS) == Duration.of_seconds(-86390)
        assert d - Duration.of_nanos(1) == Duration.of_seconds(9, 999_999_999)

    @pytest.mark.parametrize("amount", [1.5, "1", None, Duration.ZERO])
    @pytest.mark.parametrize(
        "unit", [ChronoUnit.SECONDS, ChronoUnit.DAYS, ChronoUnit.NANOS]
    )
    def test_amount_must_be_integer(self, amount, unit):
        with pytest.raises(TypeError, match="integer amount"):
            Duration.ZERO.plus(amount, unit)
        with pytest.raises(TypeError, match="integer amount"):
            Duration.ZERO.minus(amount, unit)

    def test_unit_methods(self):
        d = Duration.ZERO
        assert d.plus_days(1).minus_hours(1) == Duration.of_hours(23)
        assert d.plus_minutes(1).minus_seconds(61) == Duration.of_seconds(-1)
        assert d.plus_millis(-1500) == Duration.of_seconds(-2, 500_000_000)
        assert d.minus_millis(1) == Duration.of_nanos(-1_000_000)
        assert d.plus_nanos(1).minus_nanos(2) == Duration.of_nanos(-1)
        assert d.minus_days(1).minus_minutes(1) == Duration.of_seconds(-86460)

    def test_overflow(self):
        big = Duration.of_seconds(INT64_MAX)
        with pytest.raises(OverflowError):
            big.plus_seconds(1)
        with pytest.raises(OverflowError):
            big.multiplied_by(2)
        with pytest.raises(OverflowError):
            big.plus_days(1)

    def test_multiplied_by(self):
        d = Duration.of_seconds(1, 500_000_000)
        assert d.multiplied_by(3) == Duration.of_millis(4500)
        assert d.multiplied_by(-2) == Duration.of_seconds(-3)
        assert d.multiplied_by(1) is d
        assert d.multiplied_by(0) is Duration.ZERO
        assert d * 2 == 2 * d == Duration.of_seconds(3)
        with pytest.raises(TypeError):
            d * True  # type: ignore[operator]
        with pytest.raises(TypeError):
            d * 1.5  # type: ignore[operator]

    def test_divided_by(self):
        assert Duration.of_seconds(10).divided_by(4) == Duration.of_millis(
            2500
        )
        assert Duration.of_nanos(-7).divided_by(2) == Duration.of_nanos(-3)
        assert Duration.of_hours(1).divided_by(Duration.of_minutes(7)) == 8
        assert Duration.of_hours(-1).divided_by(Duration.of_minutes(7)) == -8
        with pytest.raises(ZeroDivisionError):
            Duration.of_hours(1).divided_by(0)
        with pytest.raises(ZeroDivisionError):
            Duration.of_hours(1).divided_by(Duration.ZERO)

    def test_negation_and_abs(self):
        d = Duration.of_seconds(-1, 1)
        assert -d == Duration.of_nanos(999_999_999)
        assert d.negated() == -d
        assert abs(d) == -d
        assert d.abs() == -d
        assert +d is d
        assert abs(-d) == -d

    def test_sign(self):
        assert Duration.of_nanos(-1).is_negative()
        assert not Duration.of_nanos(-1).is_positive()
        assert Duration.of_nanos(1).is_positive()
        assert not Duration.ZERO.is_positive()
        assert not Duration.ZERO.is_negative()
        assert not Duration.ZERO
        assert Duration.of_nanos(1)

    def test_add_to_temporal(self):
        assert LocalTime(10) + Duration.of_minutes(90) == LocalTime(11, 30)
        assert LocalTime(0) + Duration.of_millis(-500) == LocalTime(
            23, 59, 59, 500_000_000
        )
        assert LocalTime(0) - Duration.of_millis(500) == LocalTime(
            23, 59, 59, 500_000_000
        )
        assert LocalDateTime(2020, 1, 1).plus(
            Duration.of_days(1)
        ) == LocalDateTime(2020, 1, 2)


class TestAccessors:

    def test_get(self):
        d = Duration.of_seconds(3, 4)
        assert d.units == [ChronoUnit.SECONDS, ChronoUnit.NANOS]
        assert d.get(ChronoUnit.SECONDS) == 3
        assert d.get(ChronoUnit.NANOS) == 4
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported"):
            d.get(ChronoUnit.DAYS)

    def test_with(self):
        d = Duration.of_seconds(3, 4)
        assert d.with_seconds(-1) == Duration.of_seconds(-1, 4)
        assert d.with_nanos(0) == Duration.of_seconds(3)
        with pytest.raises(DateTimeError):
            d.with_nanos(1_000_000_000)

    def test_totals(self):
        d = Duration.parse("PT49H3M4.5S")
        assert d.to_days() == 2
        assert d.to_hours() == 49
        assert d.to_minutes() == 49 * 60 + 3
        assert d.to_seconds() == d.seconds
        assert d.to_millis() == d.seconds * 1000 + 500
        assert d.to_nanos() == d.seconds * 1_000_000_000 + 500_000_000

    def test_totals_negative(self):
        d = Duration.of_millis(-500)
        assert d.to_seconds() == -1
        assert d.to_millis() == -500
        assert d.to_nanos() == -500_000_000
        assert Duration.of_hours(-25).to_days() == -1

    def test_parts(self):
        d = Duration.parse("PT49H3M4.5S")
        assert d.to_days_part() == 2
        assert d.to_hours_part() == 1
        assert d.to_minutes_part() == 3
        assert d.to_seconds_part() == 4
        assert d.to_millis_part() == 500
        assert d.to_nanos_part() == 500_000_000

    def test_to_nanos_overflow(self):
        with pytest.raises(OverflowError):
            Duration.of_seconds(2**62).to_nanos()


class TestTruncate:

    @pytest.mark.parametrize(
        "d, unit, expect",
        [
            ("PT1H2M3.5S", ChronoUnit.MINUTES, "PT1H2M"),
            ("PT1H2M3.5S", ChronoUnit.SECONDS, "PT1H2M3S"),
            ("PT1H2M3.5S", ChronoUnit.HALF_DAYS, "PT0S"),
            ("PT-1.5S", ChronoUnit.SECONDS, "PT-1S"),
            ("PT-1H-2M", ChronoUnit.HOURS, "PT-1H"),
            ("PT25H", ChronoUnit.DAYS, "PT24H"),
            ("PT0.123456789S", ChronoUnit.MICROS, "PT0.123456S"),
            ("PT0.123456789S", ChronoUnit.NANOS, "PT0.123456789S"),
        ],
    )
    def test_valid(self, d, unit, expect):
        assert Duration.parse(d).truncated_to(unit) == Duration.parse(expect)

    def test_invalid_unit(self):
        with pytest.raises(UnsupportedTemporalTypeError, match="too large"):
            Duration.of_hours(1).truncated_to(ChronoUnit.WEEKS)


def test_equality():
    d = Duration.of_seconds(1, 2)
    same = Duration.of_nanos(1_000_000_002)
    assert d == same
    assert hash(d) == hash(same)
    assert d != Duration.of_seconds(1)
    assert d == AlwaysEqual()
    assert d != NeverEqual()
    assert not d == 1  # type: ignore[comparison-overlap]
    assert d != Period.ZERO


def test_comparison():
    d = Duration.of_seconds(-1, 999_999_999)
    assert d < Duration.ZERO
    assert d > Duration.of_seconds(-1)
    assert d <= d
    assert d >= d
    assert d.compare_to(Duration.ZERO) == -1
    assert d < AlwaysLarger()
    assert d > AlwaysSmaller()
    with pytest.raises(TypeError):
        d < 1  # type: ignore[operator]


def test_copy_and_pickle():
    d = Duration.of_seconds(-5, 3)
    assert copy(d) is d
    assert deepcopy(d) is d
    assert pickle.loads(pickle.dumps(d)) == d


@given(integers(-(10**27), 10**27))
def test_nanos_round_trip(nanos):
    d = Duration.of_nanos(nanos)
    assert d.seconds * 1_000_000_000 + d.nano == nanos
    assert 0 <= d.nano < 1_000_000_000
    assert Duration.parse(str(d)) == d
