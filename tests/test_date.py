import pickle
import re
from copy import copy, deepcopy

import pytest
from hypothesis import given
from hypothesis.strategies import text

from calendrical import (
    ChronoField,
    ChronoUnit,
    Clock,
    DateTimeError,
    DateTimeParseError,
    DayOfWeek,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Month,
    Period,
    UnsupportedTemporalTypeError,
    ValueRange,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual


class TestInit:

    def test_args(self):
        d = LocalDate(2021, 1, 2)
        assert d.year == 2021
        assert d.month_value == 1
        assert d.month is Month.JANUARY
        assert d.day_of_month == 2

    def test_of(self):
        assert LocalDate.of(2021, Month.MARCH, 4) == LocalDate(2021, 3, 4)
        assert LocalDate.of(2021, 3, 4) == LocalDate(2021, 3, 4)

    @pytest.mark.parametrize(
        "year, month, day",
        [
            (1_000_000_000, 1, 1),
            (-1_000_000_000, 1, 1),
            (2021, 0, 1),
            (2021, 13, 1),
            (2021, 1, 0),
            (2021, 1, 32),
        ],
    )
    def test_out_of_range(self, year, month, day):
        with pytest.raises(DateTimeError, match="Invalid value"):
            LocalDate(year, month, day)

    def test_no_leap_day(self):
        with pytest.raises(
            DateTimeError,
            match="Invalid date 'February 29' as '2021' is not a leap year",
        ):
            LocalDate(2021, 2, 29)

    def test_invalid_day_of_month(self):
        with pytest.raises(DateTimeError, match="Invalid date 'APRIL 31'"):
            LocalDate(2021, 4, 31)
        with pytest.raises(DateTimeError, match="FEBRUARY 30"):
            LocalDate(2024, 2, 30)

    def test_extreme_years(self):
        assert LocalDate(-999_999_999, 1, 1) == LocalDate.MIN
        assert LocalDate(999_999_999, 12, 31) == LocalDate.MAX
        assert LocalDate(0, 2, 29).is_leap_year()


class TestFactories:

    def test_of_year_day(self):
        assert LocalDate.of_year_day(2021, 32) == LocalDate(2021, 2, 1)
        assert LocalDate.of_year_day(2024, 366) == LocalDate(2024, 12, 31)
        assert LocalDate.of_year_day(2021, 365) == LocalDate(2021, 12, 31)
        with pytest.raises(DateTimeError, match="DayOfYear 366"):
            LocalDate.of_year_day(2021, 366)
        with pytest.raises(DateTimeError):
            LocalDate.of_year_day(2021, 0)

    @pytest.mark.parametrize(
        "epoch_day, date",
        [
            (0, LocalDate(1970, 1, 1)),
            (-1, LocalDate(1969, 12, 31)),
            (18628, LocalDate(2021, 1, 1)),
            (-365243219162, LocalDate.MIN),
            (365241780471, LocalDate.MAX),
        ],
    )
    def test_epoch_day(self, epoch_day, date):
        assert LocalDate.of_epoch_day(epoch_day) == date
        assert date.to_epoch_day() == epoch_day

    def test_epoch_day_out_of_range(self):
        with pytest.raises(DateTimeError):
            LocalDate.of_epoch_day(365241780472)

    def test_from(self):
        ldt = LocalDateTime(2021, 1, 2, 3, 4)
        assert LocalDate.from_(ldt) == LocalDate(2021, 1, 2)
        with pytest.raises(DateTimeError, match="Unable to obtain LocalDate"):
            LocalDate.from_(LocalTime(3))

    def test_now(self):
        clock = Clock.fixed(
            Instant.parse("2021-01-01T23:30:00Z"), ZoneOffset.of_hours(1)
        )
        assert LocalDate.now(clock) == LocalDate(2021, 1, 2)
        assert LocalDate.now(ZoneOffset.UTC) is not None
        assert LocalDate.now() is not None


class TestProperties:

    def test_day_of_year(self):
        assert LocalDate(2021, 3, 1).day_of_year == 60
        assert LocalDate(2024, 3, 1).day_of_year == 61

    @pytest.mark.parametrize(
        "d, dow",
        [
            (LocalDate(1970, 1, 1), DayOfWeek.THURSDAY),
            (LocalDate(2021, 1, 4), DayOfWeek.MONDAY),
            (LocalDate(2000, 2, 29), DayOfWeek.TUESDAY),
            (LocalDate(-1, 12, 31), DayOfWeek.FRIDAY),
        ],
    )
    def test_day_of_week(self, d, dow):
        assert d.day_of_week is dow

    def test_lengths(self):
        assert LocalDate(2024, 2, 3).length_of_month() == 29
        assert LocalDate(2023, 2, 3).length_of_month() == 28
        assert LocalDate(2024, 2, 3).length_of_year() == 366
        assert LocalDate(2100, 2, 3).length_of_year() == 365


class TestFields:

    @pytest.mark.parametrize(
        "field, value",
        [
            (ChronoField.DAY_OF_WEEK, 3),
            (ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH, 3),
            (ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR, 6),
            (ChronoField.DAY_OF_MONTH, 10),
            (ChronoField.DAY_OF_YEAR, 69),
            (ChronoField.ALIGNED_WEEK_OF_MONTH, 2),
            (ChronoField.ALIGNED_WEEK_OF_YEAR, 10),
            (ChronoField.MONTH_OF_YEAR, 3),
            (ChronoField.YEAR_OF_ERA, 2021),
            (ChronoField.YEAR, 2021),
            (ChronoField.ERA, 1),
        ],
    )
    def test_get(self, field, value):
        assert LocalDate(2021, 3, 10).get(field) == value

    def test_get_long(self):
        d = LocalDate(2021, 3, 10)
        assert d.get_long(ChronoField.EPOCH_DAY) == 18696
        assert d.get_long(ChronoField.PROLEPTIC_MONTH) == 2021 * 12 + 2

    def test_era(self):
        d = LocalDate(0, 6, 1)
        assert d.get(ChronoField.ERA) == 0
        assert d.get(ChronoField.YEAR_OF_ERA) == 1
        assert LocalDate(-5, 6, 1).get(ChronoField.YEAR_OF_ERA) == 6

    def test_supported(self):
        d = LocalDate(2021, 3, 10)
        assert d.is_supported(ChronoField.EPOCH_DAY)
        assert not d.is_supported(ChronoField.HOUR_OF_DAY)
        assert not d.is_supported(ChronoField.INSTANT_SECONDS)
        assert d.is_supported(ChronoUnit.DAYS)
        assert d.is_supported(ChronoUnit.ERAS)
        assert not d.is_supported(ChronoUnit.HOURS)
        assert not d.is_supported(ChronoUnit.FOREVER)
        assert not d.is_supported(None)

    @pytest.mark.parametrize(
        "d, field, expect",
        [
            (LocalDate(2023, 2, 1), ChronoField.DAY_OF_MONTH, (1, 28)),
            (LocalDate(2024, 2, 1), ChronoField.DAY_OF_MONTH, (1, 29)),
            (LocalDate(2024, 4, 1), ChronoField.DAY_OF_MONTH, (1, 30)),
            (LocalDate(2024, 4, 1), ChronoField.DAY_OF_YEAR, (1, 366)),
            (LocalDate(2023, 2, 1), ChronoField.ALIGNED_WEEK_OF_MONTH, (1, 4)),
            (LocalDate(2024, 2, 1), ChronoField.ALIGNED_WEEK_OF_MONTH, (1, 5)),
        ],
    )
    def test_range(self, d, field, expect):
        assert d.range(field) == ValueRange.of(*expect)

    @pytest.mark.parametrize(
        "field, value, expect",
        [
            (ChronoField.DAY_OF_WEEK, 1, LocalDate(2021, 3, 8)),
            (ChronoField.DAY_OF_MONTH, 31, LocalDate(2021, 3, 31)),
            (ChronoField.DAY_OF_YEAR, 1, LocalDate(2021, 1, 1)),
            (ChronoField.EPOCH_DAY, 0, LocalDate(1970, 1, 1)),
            (ChronoField.ALIGNED_WEEK_OF_MONTH, 1, LocalDate(2021, 3, 3)),
            (ChronoField.MONTH_OF_YEAR, 2, LocalDate(2021, 2, 10)),
            (ChronoField.PROLEPTIC_MONTH, 0, LocalDate(0, 1, 10)),
            (ChronoField.YEAR, 2020, LocalDate(2020, 3, 10)),
            (ChronoField.ERA, 0, LocalDate(-2020, 3, 10)),
        ],
    )
    def test_with_field(self, field, value, expect):
        assert LocalDate(2021, 3, 10).with_(field, value) == expect

    def test_with_field_out_of_range(self):
        d = LocalDate(2021, 3, 10)
        with pytest.raises(DateTimeError):
            d.with_(ChronoField.MONTH_OF_YEAR, 13)
        with pytest.raises(DateTimeError):
            LocalDate(2021, 2, 10).with_(ChronoField.DAY_OF_MONTH, 29)
        with pytest.raises(UnsupportedTemporalTypeError):
            d.with_(ChronoField.HOUR_OF_DAY, 3)


class TestWith:

    def test_with_year(self):
        assert LocalDate(2024, 2, 29).with_year(2023) == LocalDate(2023, 2, 28)
        d = LocalDate(2021, 1, 1)
        assert d.with_year(2021) is d

    def test_with_month(self):
        d = LocalDate(2021, 1, 31)
        assert d.with_month(2) == LocalDate(2021, 2, 28)
        assert d.with_month(Month.APRIL) == LocalDate(2021, 4, 30)
        with pytest.raises(DateTimeError):
            d.with_month(0)

    def test_with_day(self):
        d = LocalDate(2021, 1, 31)
        assert d.with_day_of_month(1) == LocalDate(2021, 1, 1)
        assert d.with_day_of_year(32) == LocalDate(2021, 2, 1)

    def test_with_adjuster(self):
        d = LocalDate(2021, 1, 31)
        assert d.with_(LocalDate(2000, 1, 1)) == LocalDate(2000, 1, 1)
        assert d.with_(lambda x: x.plus_days(1)) == LocalDate(2021, 2, 1)


class TestArithmetic:

    def test_plus_days(self):
        d = LocalDate(2021, 12, 31)
        assert d.plus_days(1) == LocalDate(2022, 1, 1)
        assert d.minus_days(365) == LocalDate(2020, 12, 31)
        assert d.plus_days(0) is d

    def test_plus_weeks(self):
        assert LocalDate(2021, 1, 1).plus_weeks(2) == LocalDate(2021, 1, 15)
        assert LocalDate(2021, 1, 1).minus_weeks(1) == LocalDate(
            2020, 12, 25
        )

    @pytest.mark.parametrize(
        "d, months, expect",
        [
            (LocalDate(2021, 1, 31), 1, LocalDate(2021, 2, 28)),
            (LocalDate(2024, 1, 31), 1, LocalDate(2024, 2, 29)),
            (LocalDate(2021, 3, 31), -1, LocalDate(2021, 2, 28)),
            (LocalDate(2021, 11, 15), 3, LocalDate(2022, 2, 15)),
            (LocalDate(2021, 1, 15), -13, LocalDate(2019, 12, 15)),
        ],
    )
    def test_plus_months(self, d, months, expect):
        assert d.plus_months(months) == expect
        assert d.minus_months(-months) == expect

    def test_plus_years(self):
        assert LocalDate(2020, 2, 29).plus_years(1) == LocalDate(2021, 2, 28)
        assert LocalDate(2020, 2, 29).plus_years(4) == LocalDate(2024, 2, 29)
        assert LocalDate(2020, 2, 29).minus_years(2020) == LocalDate(0, 2, 29)

    @pytest.mark.parametrize(
        "amount, unit, expect",
        [
            (3, ChronoUnit.DAYS, LocalDate(2021, 1, 18)),
            (2, ChronoUnit.WEEKS, LocalDate(2021, 1, 29)),
            (1, ChronoUnit.MONTHS, LocalDate(2021, 2, 15)),
            (1, ChronoUnit.YEARS, LocalDate(2022, 1, 15)),
            (1, ChronoUnit.DECADES, LocalDate(2031, 1, 15)),
            (1, ChronoUnit.CENTURIES, LocalDate(2121, 1, 15)),
            (-2, ChronoUnit.MILLENNIA, LocalDate(21, 1, 15)),
            (-1, ChronoUnit.ERAS, LocalDate(-2020, 1, 15)),
        ],
    )
    def test_plus_unit(self, amount, unit, expect):
        d = LocalDate(2021, 1, 15)
        assert d.plus(amount, unit) == expect
        assert expect.minus(amount, unit) == d

    def test_plus_unsupported_unit(self):
        with pytest.raises(UnsupportedTemporalTypeError):
            LocalDate(2021, 1, 15).plus(1, ChronoUnit.HALF_DAYS)

    def test_plus_period(self):
        d = LocalDate(2021, 1, 31)
        assert d + Period.of_months(1) == LocalDate(2021, 2, 28)
        assert d.plus(Period.of(1, 1, 1)) == LocalDate(2022, 3, 1)
        assert d - Period.of_days(31) == LocalDate(2020, 12, 31)

    def test_plus_out_of_range(self):
        with pytest.raises(DateTimeError):
            LocalDate.MAX.plus_days(1)
        with pytest.raises(DateTimeError):
            LocalDate.MIN.minus_months(1)
        with pytest.raises((DateTimeError, OverflowError)):
            LocalDate.MAX.plus_years(1 << 62)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            LocalDate(2021, 1, 1) + 1  # type: ignore[operator]


class TestUntil:

    @pytest.mark.parametrize(
        "start, end, period",
        [
            (LocalDate(2021, 1, 15), LocalDate(2022, 3, 14), "P1Y1M27D"),
            (LocalDate(2020, 2, 29), LocalDate(2021, 3, 1), "P1Y1D"),
            (LocalDate(2021, 1, 31), LocalDate(2021, 2, 28), "P28D"),
            (LocalDate(2021, 1, 31), LocalDate(2021, 3, 1), "P1M1D"),
            (LocalDate(2021, 3, 1), LocalDate(2021, 1, 31), "P-1M-1D"),
            (LocalDate(2021, 5, 5), LocalDate(2021, 5, 5), "P0D"),
            (LocalDate(2022, 3, 14), LocalDate(2021, 1, 15), "P-1Y-1M-30D"),
        ],
    )
    def test_period(self, start, end, period):
        assert start.until(end) == Period.parse(period)
        assert Period.between(start, end) == Period.parse(period)

    @pytest.mark.parametrize(
        "end, unit, expect",
        [
            (LocalDate(2021, 3, 14), ChronoUnit.DAYS, 58),
            (LocalDate(2021, 3, 14), ChronoUnit.WEEKS, 8),
            (LocalDate(2021, 3, 14), ChronoUnit.MONTHS, 1),
            (LocalDate(2021, 3, 15), ChronoUnit.MONTHS, 2),
            (LocalDate(2022, 1, 14), ChronoUnit.YEARS, 0),
            (LocalDate(2022, 1, 15), ChronoUnit.YEARS, 1),
            (LocalDate(2020, 11, 16), ChronoUnit.MONTHS, -1),
            (LocalDate(2020, 11, 15), ChronoUnit.MONTHS, -2),
            (LocalDate(1800, 1, 1), ChronoUnit.CENTURIES, -2),
            (LocalDate(-1, 1, 1), ChronoUnit.ERAS, -1),
        ],
    )
    def test_unit(self, end, unit, expect):
        assert LocalDate(2021, 1, 15).until(end, unit) == expect

    def test_accepts_other_temporals(self):
        d = LocalDate(2021, 1, 15)
        assert d.until(LocalDateTime(2021, 1, 20, 23), ChronoUnit.DAYS) == 5

    def test_unsupported_unit(self):
        with pytest.raises(UnsupportedTemporalTypeError):
            LocalDate(2021, 1, 15).until(
                LocalDate(2021, 1, 16), ChronoUnit.HOURS
            )


class TestCombine:

    def test_at_time(self):
        d = LocalDate(2021, 1, 2)
        assert d.at_time(LocalTime(3, 30)) == LocalDateTime(2021, 1, 2, 3, 30)
        assert d.at_time(3, 30, 1, 5) == LocalDateTime(2021, 1, 2, 3, 30, 1, 5)
        with pytest.raises(DateTimeError):
            d.at_time(24)

    def test_at_start_of_day(self):
        d = LocalDate(2021, 1, 2)
        assert d.at_start_of_day() == LocalDateTime(2021, 1, 2)

    def test_at_start_of_day_zone(self):
        zdt = LocalDate(2021, 1, 2).at_start_of_day(ZoneId.of("Europe/Paris"))
        assert isinstance(zdt, ZonedDateTime)
        assert zdt.to_local_date_time() == LocalDateTime(2021, 1, 2)

    def test_at_start_of_day_in_gap(self):
        # Midnight doesn't exist on this day in Sao Paulo (DST began)
        zdt = LocalDate(2018, 11, 4).at_start_of_day(
            ZoneId.of("America/Sao_Paulo")
        )
        assert zdt.to_local_date_time() == LocalDateTime(2018, 11, 4, 1)
        assert zdt.offset == ZoneOffset.of_hours(-2)


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("2021-01-02", LocalDate(2021, 1, 2)),
            ("0001-12-31", LocalDate(1, 12, 31)),
            ("0000-01-01", LocalDate(0, 1, 1)),
            ("-0001-01-01", LocalDate(-1, 1, 1)),
            ("+10000-01-01", LocalDate(10000, 1, 1)),
            ("+999999999-12-31", LocalDate.MAX),
            ("-999999999-01-01", LocalDate.MIN),
        ],
    )
    def test_valid(self, s, expect):
        assert LocalDate.parse(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "2021-1-02",
            "2021-01-2",
            "21-01-02",
            "10000-01-01",
            "+2021-01-02",
            "2021-01-02T00:00",
            "2021/01/02",
            " 2021-01-02",
            "2021-01-02 ",
            "2021-13-01",
            "2021-02-29",
            "2021-00-01",
            "2021-๐๑-02",
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(
            DateTimeParseError,
            match=re.escape(f"Text {s!r} could not be parsed"),
        ):
            LocalDate.parse(s)

    @given(text())
    def test_fuzzing(self, s: str):
        with pytest.raises(DateTimeParseError):
            LocalDate.parse(s)


@pytest.mark.parametrize(
    "d, expect",
    [
        (LocalDate(2021, 1, 2), "2021-01-02"),
        (LocalDate(1, 1, 1), "0001-01-01"),
        (LocalDate(0, 1, 1), "0000-01-01"),
        (LocalDate(-1, 1, 1), "-0001-01-01"),
        (LocalDate(-12345, 1, 1), "-12345-01-01"),
        (LocalDate(9999, 1, 1), "9999-01-01"),
        (LocalDate(10000, 1, 1), "+10000-01-01"),
        (LocalDate.MAX, "+999999999-12-31"),
    ],
)
def test_format(d, expect):
    assert str(d) == expect
    assert repr(d) == f"LocalDate({expect})"
    assert LocalDate.parse(expect) == d


def test_equality():
    d = LocalDate(2021, 1, 2)
    same = LocalDate(2021, 1, 2)
    different = LocalDate(2021, 1, 3)
    assert d == same
    assert d != different
    assert not d == different
    assert hash(d) == hash(same)
    assert d == AlwaysEqual()
    assert d != NeverEqual()
    assert not d == NeverEqual()
    assert d != LocalDateTime(2021, 1, 2)  # type: ignore[comparison-overlap]


def test_comparison():
    d = LocalDate(2021, 5, 10)
    later = LocalDate(2021, 5, 11)
    assert d < later
    assert d <= later
    assert later > d
    assert later >= d
    assert d <= d
    assert d.is_before(later)
    assert later.is_after(d)
    assert d.is_equal(LocalDate(2021, 5, 10))
    assert d.compare_to(later) == -1
    assert later.compare_to(d) == 1
    assert d.compare_to(d) == 0

    assert d < AlwaysLarger()
    assert d > AlwaysSmaller()

    with pytest.raises(TypeError):
        d < 42  # type: ignore[operator]
    with pytest.raises(TypeError):
        d < LocalDateTime(2021, 5, 10)  # type: ignore[operator]


def test_constants():
    assert LocalDate.EPOCH == LocalDate(1970, 1, 1)
    assert LocalDate.MIN < LocalDate.EPOCH < LocalDate.MAX


def test_copy():
    d = LocalDate(2021, 1, 2)
    assert copy(d) is d
    assert deepcopy(d) is d


def test_pickle():
    d = LocalDate(2021, 1, 2)
    assert pickle.loads(pickle.dumps(d)) == d


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(LocalDate):  # type: ignore[misc]
            pass
