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
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    Period,
    TemporalQueries,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)

from .common import AlwaysEqual, NeverEqual

AMS = ZoneId.of("Europe/Amsterdam")
NYC = ZoneId.of("America/New_York")
PLUS1 = ZoneOffset.of_hours(1)
PLUS2 = ZoneOffset.of_hours(2)
UTC = ZoneOffset.UTC


def ams(*args: int, offset: ZoneOffset) -> ZonedDateTime:
    return ZonedDateTime.of_lenient(LocalDateTime(*args), offset, AMS)


class TestInit:

    def test_unambiguous(self):
        d = ZonedDateTime(2021, 7, 1, 12, 30, zone=AMS)
        assert d.to_local_date_time() == LocalDateTime(2021, 7, 1, 12, 30)
        assert d.offset == PLUS2
        assert d.zone is AMS

    def test_zone_as_string(self):
        d = ZonedDateTime(2021, 1, 1, zone="Europe/Amsterdam")
        assert d.zone == AMS
        assert d.offset == PLUS1

    def test_gap(self):
        d = ZonedDateTime(2021, 3, 28, 2, 30, zone=AMS)
        assert d.to_local_date_time() == LocalDateTime(2021, 3, 28, 3, 30)
        assert d.offset == PLUS2

    def test_gap_at_midnight(self):
        d = ZonedDateTime(2018, 11, 4, zone="America/Sao_Paulo")
        assert d.to_local_date_time() == LocalDateTime(2018, 11, 4, 1)
        assert d.offset == ZoneOffset.of_hours(-2)

    def test_overlap_takes_earlier_offset(self):
        d = ZonedDateTime(2021, 10, 31, 2, 30, zone=AMS)
        assert d.offset == PLUS2

    def test_invalid(self):
        with pytest.raises(DateTimeError):
            ZonedDateTime(2021, 2, 29, zone=AMS)
        with pytest.raises(DateTimeError, match="Unknown time-zone"):
            ZonedDateTime(2021, 1, 1, zone="Europe/Nowhere")

    def test_of(self):
        expect = ZonedDateTime(2021, 7, 1, 9, zone=AMS)
        assert ZonedDateTime.of(LocalDateTime(2021, 7, 1, 9), AMS) == expect
        assert (
            ZonedDateTime.of(LocalDate(2021, 7, 1), LocalTime(9), AMS)
            == expect
        )

    def test_fixed_offset_zone(self):
        d = ZonedDateTime.of(LocalDateTime(2021, 3, 28, 2, 30), PLUS1)
        assert d.offset == PLUS1
        assert d.zone == PLUS1
        assert d.to_local_date_time() == LocalDateTime(2021, 3, 28, 2, 30)


class TestOfLocal:

    def test_preferred_offset_in_overlap(self):
        local = LocalDateTime(2021, 10, 31, 2, 30)
        assert ZonedDateTime.of_local(local, AMS, PLUS1).offset == PLUS1
        assert ZonedDateTime.of_local(local, AMS, PLUS2).offset == PLUS2
        assert ZonedDateTime.of_local(local, AMS).offset == PLUS2
        # an offset that isn't valid is ignored
        assert (
            ZonedDateTime.of_local(local, AMS, ZoneOffset.of_hours(5)).offset
            == PLUS2
        )

    def test_preferred_offset_ignored_elsewhere(self):
        local = LocalDateTime(2021, 3, 28, 2, 30)
        d = ZonedDateTime.of_local(local, AMS, PLUS1)
        assert d == ams(2021, 3, 28, 3, 30, offset=PLUS2)
        d = ZonedDateTime.of_local(LocalDateTime(2021, 1, 1), AMS, PLUS2)
        assert d.offset == PLUS1

    def test_not_a_local_datetime(self):
        with pytest.raises(TypeError):
            ZonedDateTime.of_local(LocalDate(2021, 1, 1), AMS)  # type: ignore

    def test_of_instant(self):
        instant = Instant.parse("2021-10-31T00:30:00Z")
        assert ZonedDateTime.of_instant(instant, AMS) == ams(
            2021, 10, 31, 2, 30, offset=PLUS2
        )
        instant = instant.plus_seconds(3600)
        assert ZonedDateTime.of_instant(instant, AMS) == ams(
            2021, 10, 31, 2, 30, offset=PLUS1
        )

    def test_of_instant_with_offset(self):
        local = LocalDateTime(2021, 10, 31, 2, 30)
        d = ZonedDateTime.of_instant_with_offset(local, PLUS1, AMS)
        assert d.offset == PLUS1
        assert d.to_local_date_time() == local
        # invalid offset: the instant is kept instead
        d = ZonedDateTime.of_instant_with_offset(
            LocalDateTime(2021, 7, 1, 12), PLUS1, AMS
        )
        assert d == ams(2021, 7, 1, 13, offset=PLUS2)


class TestStrictAndLenient:

    def test_strict_valid(self):
        local = LocalDateTime(2021, 10, 31, 2, 30)
        d = ZonedDateTime.of_strict(local, PLUS1, AMS)
        assert d.offset == PLUS1
        assert d.to_local_date_time() == local

    def test_strict_gap(self):
        with pytest.raises(DateTimeError, match="due to a gap"):
            ZonedDateTime.of_strict(
                LocalDateTime(2021, 3, 28, 2, 30), PLUS1, AMS
            )

    def test_strict_wrong_offset(self):
        with pytest.raises(
            DateTimeError,
            match=re.escape("ZoneOffset '+01:00' is not valid for"),
        ):
            ZonedDateTime.of_strict(LocalDateTime(2021, 7, 1), PLUS1, AMS)

    def test_lenient(self):
        local = LocalDateTime(2021, 7, 1)
        d = ZonedDateTime.of_lenient(local, PLUS1, AMS)
        assert d.offset == PLUS1
        assert d.to_local_date_time() == local
        assert ZonedDateTime.of_lenient(local, PLUS1, PLUS1).zone == PLUS1

    def test_lenient_offset_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            ZonedDateTime.of_lenient(LocalDateTime(2021, 7, 1), PLUS1, PLUS2)


class TestFrom:

    def test_same_type(self):
        d = ZonedDateTime(2021, 7, 1, zone=AMS)
        assert ZonedDateTime.from_(d) is d

    def test_offset_datetime(self):
        odt = OffsetDateTime(2021, 7, 1, 12, offset=PLUS1)
        d = ZonedDateTime.from_(odt)
        assert d.zone == PLUS1
        assert d.to_instant() == odt.to_instant()

    def test_unsupported(self):
        with pytest.raises(DateTimeError, match="ZonedDateTime"):
            ZonedDateTime.from_(LocalDateTime(2021, 7, 1))


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            (
                "2021-07-01T12:00+02:00[Europe/Amsterdam]",
                ams(2021, 7, 1, 12, offset=PLUS2),
            ),
            # the offset in the text picks the overlap side
            (
                "2021-10-31T02:30+01:00[Europe/Amsterdam]",
                ams(2021, 10, 31, 2, 30, offset=PLUS1),
            ),
            (
                "2021-10-31T02:30+02:00[Europe/Amsterdam]",
                ams(2021, 10, 31, 2, 30, offset=PLUS2),
            ),
            # the instant wins over the local date-time
            (
                "2021-07-01T12:00+01:00[Europe/Amsterdam]",
                ams(2021, 7, 1, 13, offset=PLUS2),
            ),
            (
                "2021-07-01T12:00:00.5Z",
                ZonedDateTime.of(
                    LocalDateTime(2021, 7, 1, 12, 0, 0, 500_000_000), UTC
                ),
            ),
        ],
    )
    def test_valid(self, s, expect):
        assert ZonedDateTime.parse(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "2021-07-01T12:00[Europe/Amsterdam]",
            "2021-07-01T12:00+02:00[Europe/Nowhere]",
            "2021-07-01T12:00+02:00[]",
            "2021-02-29T12:00+02:00[Europe/Amsterdam]",
            "2021-07-01 12:00+02:00",
            "",
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(
            DateTimeParseError,
            match=re.escape(f"Text {s!r} could not be parsed"),
        ):
            ZonedDateTime.parse(s)

    @given(text())
    def test_fuzzing(self, s: str):
        with pytest.raises(DateTimeParseError):
            ZonedDateTime.parse(s)


@pytest.mark.parametrize(
    "d, expect",
    [
        (
            ams(2021, 7, 1, 12, offset=PLUS2),
            "2021-07-01T12:00+02:00[Europe/Amsterdam]",
        ),
        (
            ams(2021, 10, 31, 2, 30, 15, offset=PLUS1),
            "2021-10-31T02:30:15+01:00[Europe/Amsterdam]",
        ),
        (
            ZonedDateTime.of(LocalDateTime(2021, 7, 1, 12), UTC),
            "2021-07-01T12:00Z",
        ),
    ],
)
def test_format(d, expect):
    assert str(d) == expect
    assert repr(d) == f"ZonedDateTime({expect})"
    assert ZonedDateTime.parse(expect) == d


class TestOverlapAndZones:

    def test_earlier_and_later_offset(self):
        earlier = ams(2021, 10, 31, 2, 30, offset=PLUS2)
        later = ams(2021, 10, 31, 2, 30, offset=PLUS1)
        assert earlier.with_later_offset_at_overlap() == later
        assert later.with_earlier_offset_at_overlap() == earlier
        assert earlier.with_earlier_offset_at_overlap() is earlier
        assert later.with_later_offset_at_overlap() is later

    def test_offset_unchanged_outside_overlap(self):
        d = ams(2021, 7, 1, offset=PLUS2)
        assert d.with_earlier_offset_at_overlap() is d
        assert d.with_later_offset_at_overlap() is d

    def test_with_zone_same_local(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        assert d.with_zone_same_local(AMS) is d
        moved = d.with_zone_same_local(NYC)
        assert moved.to_local_date_time() == d.to_local_date_time()
        assert moved.offset == ZoneOffset.of_hours(-4)

    def test_with_zone_same_local_keeps_offset_in_overlap(self):
        d = ZonedDateTime.of_local(
            LocalDateTime(2021, 10, 31, 2, 30), PLUS1, PLUS1
        )
        assert d.with_zone_same_local(AMS).offset == PLUS1

    def test_with_zone_same_instant(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        assert d.with_zone_same_instant(AMS) is d
        moved = d.with_zone_same_instant(NYC)
        assert moved.to_local_date_time() == LocalDateTime(2021, 7, 1, 6)
        assert moved.is_equal(d)

    def test_with_fixed_offset_zone(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        fixed = d.with_fixed_offset_zone()
        assert fixed.zone == PLUS2
        assert fixed.to_local_date_time() == d.to_local_date_time()
        assert fixed.with_fixed_offset_zone() is fixed


class TestFields:

    def test_accessors(self):
        d = ams(2021, 7, 1, 12, 30, 15, 9, offset=PLUS2)
        assert d.year == 2021
        assert d.month_value == 7
        assert d.day_of_month == 1
        assert d.day_of_year == 182
        assert d.hour == 12
        assert d.minute == 30
        assert d.second == 15
        assert d.nano == 9
        assert d.to_local_date() == LocalDate(2021, 7, 1)
        assert d.to_local_time() == LocalTime(12, 30, 15, 9)
        assert d.to_offset_date_time() == OffsetDateTime(
            2021, 7, 1, 12, 30, 15, 9, offset=PLUS2
        )

    def test_instant(self):
        d = ams(1970, 1, 1, 1, offset=PLUS1)
        assert d.to_epoch_second() == 0
        assert d.to_instant() == Instant.EPOCH
        assert d.get_long(ChronoField.INSTANT_SECONDS) == 0
        assert d.get(ChronoField.OFFSET_SECONDS) == 3600

    def test_supported(self):
        d = ams(2021, 7, 1, offset=PLUS2)
        assert d.is_supported(ChronoField.INSTANT_SECONDS)
        assert d.is_supported(ChronoUnit.DAYS)
        assert d.is_supported(ChronoUnit.NANOS)
        assert not d.is_supported(ChronoUnit.FOREVER)

    def test_queries(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        assert d.query(TemporalQueries.ZONE_ID) is AMS
        assert d.query(TemporalQueries.ZONE) is AMS
        assert d.query(TemporalQueries.OFFSET) == PLUS2
        assert d.query(TemporalQueries.LOCAL_DATE) == LocalDate(2021, 7, 1)
        assert d.query(TemporalQueries.LOCAL_TIME) == LocalTime(12)

    def test_with_local_parts(self):
        d = ams(2021, 3, 28, 1, 30, offset=PLUS1)
        assert d.with_(LocalTime(2, 30)) == ams(
            2021, 3, 28, 3, 30, offset=PLUS2
        )
        assert d.with_(LocalDate(2021, 7, 1)) == ams(
            2021, 7, 1, 1, 30, offset=PLUS2
        )
        assert d.with_hour(2) == ams(2021, 3, 28, 3, 30, offset=PLUS2)

    def test_with_keeps_offset_in_overlap(self):
        d = ams(2021, 10, 31, 2, 30, offset=PLUS1)
        assert d.with_minute(45) == ams(2021, 10, 31, 2, 45, offset=PLUS1)
        assert d.with_(ChronoField.SECOND_OF_MINUTE, 5) == ams(
            2021, 10, 31, 2, 30, 5, offset=PLUS1
        )

    def test_with_offset(self):
        d = ams(2021, 10, 31, 2, 30, offset=PLUS2)
        assert d.with_(PLUS1) == ams(2021, 10, 31, 2, 30, offset=PLUS1)
        assert d.with_(ZoneOffset.of_hours(5)) is d
        assert d.with_(ChronoField.OFFSET_SECONDS, 3600).offset == PLUS1
        summer = ams(2021, 7, 1, offset=PLUS2)
        assert summer.with_(PLUS1) is summer

    def test_with_instant(self):
        d = ams(2021, 7, 1, offset=PLUS2)
        assert d.with_(ChronoField.INSTANT_SECONDS, 0) == ams(
            1970, 1, 1, 1, offset=PLUS1
        )
        assert d.with_(Instant.EPOCH) == ams(1970, 1, 1, 1, offset=PLUS1)

    def test_with_offset_datetime(self):
        d = ams(2021, 7, 1, offset=PLUS2)
        odt = OffsetDateTime(2021, 10, 31, 2, 30, offset=PLUS1)
        assert d.with_(odt) == ams(2021, 10, 31, 2, 30, offset=PLUS1)

    def test_truncated_to(self):
        d = ams(2021, 7, 1, 12, 34, 56, 789, offset=PLUS2)
        assert d.truncated_to(ChronoUnit.HOURS) == ams(
            2021, 7, 1, 12, offset=PLUS2
        )
        assert d.truncated_to(ChronoUnit.DAYS) == ams(
            2021, 7, 1, offset=PLUS2
        )


class TestArithmetic:

    def test_date_units_use_local_time(self):
        d = ams(2021, 3, 27, 12, offset=PLUS1)
        assert d.plus_days(1) == ams(2021, 3, 28, 12, offset=PLUS2)
        assert d.plus(1, ChronoUnit.DAYS) == d.plus_days(1)
        assert d.plus(Period.of_days(1)) == d.plus_days(1)
        assert d.plus_weeks(1) == ams(2021, 4, 3, 12, offset=PLUS2)
        assert d.plus_months(1).minus_months(1) == d

    def test_time_units_use_instants(self):
        d = ams(2021, 3, 27, 12, offset=PLUS1)
        assert d.plus_hours(24) == ams(2021, 3, 28, 13, offset=PLUS2)
        assert d.plus(Duration.of_hours(24)) == d.plus_hours(24)
        assert d.plus_seconds(86400) == d.plus_hours(24)

    def test_across_gap(self):
        d = ams(2021, 3, 28, 1, 30, offset=PLUS1)
        assert d.plus_hours(1) == ams(2021, 3, 28, 3, 30, offset=PLUS2)
        assert d.plus_minutes(60).minus_minutes(60) == d
        assert ams(2021, 3, 27, 2, 30, offset=PLUS1).plus_days(1) == ams(
            2021, 3, 28, 3, 30, offset=PLUS2
        )

    def test_across_overlap(self):
        d = ams(2021, 10, 31, 2, 30, offset=PLUS2)
        later = d.plus_hours(1)
        assert later == ams(2021, 10, 31, 2, 30, offset=PLUS1)
        assert later.minus_hours(1) == d
        assert later.minus(Duration.of_minutes(30)) == ams(
            2021, 10, 31, 2, offset=PLUS1
        )

    def test_minus(self):
        d = ams(2021, 3, 28, 12, offset=PLUS2)
        assert d.minus_days(1) == ams(2021, 3, 27, 12, offset=PLUS1)
        assert d.minus(Period.of_days(1)) == d.minus_days(1)
        assert d.minus_hours(24) == ams(2021, 3, 27, 11, offset=PLUS1)
        assert d.minus_years(1) == ams(2020, 3, 28, 12, offset=PLUS1)
        assert d.minus_nanos(1).nano == 999_999_999

    def test_until(self):
        start = ams(2021, 3, 27, 12, offset=PLUS1)
        end = ams(2021, 3, 28, 12, offset=PLUS2)
        assert start.until(end, ChronoUnit.DAYS) == 1
        assert start.until(end, ChronoUnit.HOURS) == 23
        assert end.until(start, ChronoUnit.HOURS) == -23
        assert start.until(end, ChronoUnit.MONTHS) == 0

    def test_until_other_zone(self):
        start = ams(2021, 7, 1, 12, offset=PLUS2)
        end = ZonedDateTime.of(LocalDateTime(2021, 7, 2, 9, 59), UTC)
        # converted to Amsterdam, the end is 11:59 the next day
        assert start.until(end, ChronoUnit.DAYS) == 0
        assert start.until(end, ChronoUnit.HOURS) == 23
        assert start.until(end.to_offset_date_time(), ChronoUnit.HOURS) == 23


class TestComparison:

    def test_by_instant(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        same = d.with_zone_same_instant(NYC)
        later = d.plus_nanos(1)
        assert d.is_equal(same)
        assert not d.is_before(same)
        assert not d.is_after(same)
        assert d.is_before(later)
        assert later.is_after(d)

    def test_compare_to(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        same_instant = d.with_fixed_offset_zone()
        assert d.compare_to(d) == 0
        assert d.compare_to(d.plus_seconds(1)) < 0
        # same instant and local date-time, so the zone IDs decide
        assert d.compare_to(same_instant) > 0
        assert sorted([d.plus_hours(1), d, same_instant]) == [
            same_instant,
            d,
            d.plus_hours(1),
        ]
        # same instant, earlier local date-time
        assert d.with_zone_same_instant(NYC).compare_to(d) < 0

    def test_operators(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        later = d.plus_hours(1)
        assert d < later
        assert d <= later
        assert later > d
        assert later >= d
        with pytest.raises(TypeError):
            d < 5  # type: ignore[operator]

    def test_equality(self):
        d = ams(2021, 7, 1, 12, offset=PLUS2)
        assert d == ams(2021, 7, 1, 12, offset=PLUS2)
        assert hash(d) == hash(ams(2021, 7, 1, 12, offset=PLUS2))
        assert d != d.with_zone_same_instant(NYC)
        assert d != d.with_fixed_offset_zone()
        assert d != d.to_offset_date_time()
        assert d == AlwaysEqual()
        assert d != NeverEqual()


def test_now():
    instant = Instant.parse("2021-10-31T01:30:00Z")
    clock = Clock.fixed(instant, AMS)
    assert ZonedDateTime.now(clock) == ams(
        2021, 10, 31, 2, 30, offset=PLUS1
    )
    assert ZonedDateTime.now(AMS).zone is AMS


def test_copy_and_pickle():
    d = ams(2021, 10, 31, 2, 30, 0, 1, offset=PLUS1)
    assert copy(d) is d
    assert deepcopy(d) is d
    assert pickle.loads(pickle.dumps(d)) == d
    fixed = d.with_fixed_offset_zone()
    assert pickle.loads(pickle.dumps(fixed)) == fixed


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(ZonedDateTime):  # type: ignore[misc]
            pass
