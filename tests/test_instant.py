import pickle
import re
from copy import copy, deepcopy

import pytest
from hypothesis import given
from hypothesis.strategies import integers

from calendrical import (
    ChronoField,
    ChronoUnit,
    Clock,
    DateTimeError,
    DateTimeParseError,
    Duration,
    Instant,
    LocalDateTime,
    OffsetDateTime,
    TemporalQueries,
    UnsupportedTemporalTypeError,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual


def test_no_constructor():
    with pytest.raises(TypeError, match="constructor"):
        Instant()  # type: ignore[call-arg]


class TestFactories:

    @pytest.mark.parametrize(
        "secs, adjustment, expect_secs, expect_nano",
        [
            (0, 0, 0, 0),
            (3, -1, 2, 999_999_999),
            (3, 1_000_000_001, 4, 1),
            (-3, -2_000_000_000, -5, 0),
            (-1, 1, -1, 1),
        ],
    )
    def test_of_epoch_second(self, secs, adjustment, expect_secs, expect_nano):
        i = Instant.of_epoch_second(secs, adjustment)
        assert i.epoch_second == expect_secs
        assert i.nano == expect_nano

    def test_epoch_is_singleton(self):
        assert Instant.of_epoch_second(0) is Instant.EPOCH

    def test_out_of_range(self):
        with pytest.raises(
            DateTimeError, match="exceeds minimum or maximum instant"
        ):
            Instant.of_epoch_second(Instant.MAX_SECOND + 1)
        with pytest.raises(DateTimeError):
            Instant.of_epoch_second(Instant.MIN_SECOND, -1)

    @pytest.mark.parametrize(
        "millis, secs, nano",
        [(1500, 1, 500_000_000), (-1, -1, 999_000_000), (0, 0, 0)],
    )
    def test_of_epoch_milli(self, millis, secs, nano):
        i = Instant.of_epoch_milli(millis)
        assert (i.epoch_second, i.nano) == (secs, nano)
        assert i.to_epoch_milli() == millis

    def test_to_epoch_milli_truncates(self):
        assert Instant.of_epoch_second(0, 1_999_999).to_epoch_milli() == 1
        assert Instant.of_epoch_second(-1, 999_999).to_epoch_milli() == -1000

    def test_from(self):
        i = Instant.of_epoch_second(1_600_000_000, 5)
        assert Instant.from_(i) is i
        odt = OffsetDateTime.of_instant(i, ZoneOffset.of_hours(3))
        assert Instant.from_(odt) == i
        zdt = ZonedDateTime.of_instant(i, ZoneId.of("Europe/Paris"))
        assert Instant.from_(zdt) == i
        with pytest.raises(DateTimeError, match="Unable to obtain Instant"):
            Instant.from_(LocalDateTime(2020, 1, 1))

    def test_now(self):
        fixed = Instant.of_epoch_second(1_600_000_000)
        assert Instant.now(Clock.fixed(fixed, ZoneOffset.UTC)) is fixed
        assert Instant.now() > fixed


class TestFields:

    def test_get(self):
        i = Instant.of_epoch_second(1_600_000_000, 123_456_789)
        assert i.get(ChronoField.NANO_OF_SECOND) == 123_456_789
        assert i.get(ChronoField.MICRO_OF_SECOND) == 123_456
        assert i.get(ChronoField.MILLI_OF_SECOND) == 123
        assert i.get_long(ChronoField.INSTANT_SECONDS) == 1_600_000_000
        with pytest.raises(UnsupportedTemporalTypeError, match="get_long"):
            i.get(ChronoField.INSTANT_SECONDS)
        with pytest.raises(UnsupportedTemporalTypeError):
            i.get(ChronoField.HOUR_OF_DAY)

    def test_supported(self):
        i = Instant.EPOCH
        assert i.is_supported(ChronoField.INSTANT_SECONDS)
        assert not i.is_supported(ChronoField.EPOCH_DAY)
        assert i.is_supported(ChronoUnit.DAYS)
        assert i.is_supported(ChronoUnit.HALF_DAYS)
        assert not i.is_supported(ChronoUnit.WEEKS)

    def test_with_field(self):
        i = Instant.of_epoch_second(10, 123_456_789)
        assert i.with_(ChronoField.MILLI_OF_SECOND, 5) == (
            Instant.of_epoch_second(10, 5_000_000)
        )
        assert i.with_(ChronoField.MICRO_OF_SECOND, 5) == (
            Instant.of_epoch_second(10, 5000)
        )
        assert i.with_(ChronoField.NANO_OF_SECOND, 123_456_789) is i
        assert i.with_(ChronoField.INSTANT_SECONDS, 0) == (
            Instant.of_epoch_second(0, 123_456_789)
        )
        with pytest.raises(UnsupportedTemporalTypeError):
            i.with_(ChronoField.HOUR_OF_DAY, 1)

    def test_query(self):
        i = Instant.EPOCH
        assert i.query(TemporalQueries.PRECISION) is ChronoUnit.NANOS
        assert i.query(TemporalQueries.ZONE) is None
        assert i.query(TemporalQueries.LOCAL_DATE) is None

    def test_adjust_into(self):
        odt = OffsetDateTime(2020, 1, 1, offset=ZoneOffset.of_hours(1))
        adjusted = odt.with_(Instant.of_epoch_second(0, 5))
        assert adjusted == OffsetDateTime(
            1970, 1, 1, 1, 0, 0, 5, offset=ZoneOffset.of_hours(1)
        )


class TestArithmetic:

    def test_plus_methods(self):
        i = Instant.of_epoch_second(10)
        assert i.plus_seconds(5) == Instant.of_epoch_second(15)
        assert i.minus_seconds(15) == Instant.of_epoch_second(-5)
        assert i.plus_millis(1500) == Instant.of_epoch_second(11, 500_000_000)
        assert i.minus_millis(1) == Instant.of_epoch_second(9, 999_000_000)
        assert i.plus_nanos(-1) == Instant.of_epoch_second(9, 999_999_999)
        assert i.minus_nanos(-2_000_000_001) == Instant.of_epoch_second(12, 1)
        assert i.plus_seconds(0) is i

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, Instant.of_epoch_second(0, 2)),
            (ChronoUnit.MICROS, Instant.of_epoch_second(0, 2000)),
            (ChronoUnit.MILLIS, Instant.of_epoch_second(0, 2_000_000)),
            (ChronoUnit.SECONDS, Instant.of_epoch_second(2)),
            (ChronoUnit.MINUTES, Instant.of_epoch_second(120)),
            (ChronoUnit.HOURS, Instant.of_epoch_second(7200)),
            (ChronoUnit.HALF_DAYS, Instant.of_epoch_second(86400)),
            (ChronoUnit.DAYS, Instant.of_epoch_second(172800)),
        ],
    )
    def test_plus_unit(self, unit, expect):
        assert Instant.EPOCH.plus(2, unit) == expect
        assert expect.minus(2, unit) == Instant.EPOCH

    def test_date_units_unsupported(self):
        with pytest.raises(
            UnsupportedTemporalTypeError, match="Unsupported unit: Months"
        ):
            Instant.EPOCH.plus(1, ChronoUnit.MONTHS)

    def test_duration(self):
        i = Instant.EPOCH
        assert i + Duration.of_seconds(1, 5) == Instant.of_epoch_second(1, 5)
        assert i - Duration.of_hours(1) == Instant.of_epoch_second(-3600)

    def test_out_of_range(self):
        with pytest.raises(DateTimeError):
            Instant.MAX.plus_nanos(1)
        with pytest.raises(DateTimeError):
            Instant.MIN.minus_seconds(1)


class TestUntil:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, 90_061_000_000_001),
            (ChronoUnit.MICROS, 90_061_000_000),
            (ChronoUnit.MILLIS, 90_061_000),
            (ChronoUnit.SECONDS, 90_061),
            (ChronoUnit.MINUTES, 1501),
            (ChronoUnit.HOURS, 25),
            (ChronoUnit.HALF_DAYS, 2),
            (ChronoUnit.DAYS, 1),
        ],
    )
    def test_units(self, unit, expect):
        start = Instant.of_epoch_second(0)
        end = Instant.of_epoch_second(90_061, 1)
        assert start.until(end, unit) == expect
        assert end.until(start, unit) == -expect

    def test_partial_seconds(self):
        start = Instant.of_epoch_second(0, 600_000_000)
        end = Instant.of_epoch_second(2, 500_000_000)
        assert start.until(end, ChronoUnit.SECONDS) == 1
        assert end.until(start, ChronoUnit.SECONDS) == -1

    def test_other_temporal(self):
        end = OffsetDateTime(1970, 1, 1, 2, offset=ZoneOffset.of_hours(1))
        assert Instant.EPOCH.until(end, ChronoUnit.MINUTES) == 60

    def test_unsupported(self):
        with pytest.raises(UnsupportedTemporalTypeError):
            Instant.EPOCH.until(Instant.MAX, ChronoUnit.WEEKS)


class TestTruncatedTo:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, "2020-09-13T12:26:40.123456789Z"),
            (ChronoUnit.MILLIS, "2020-09-13T12:26:40.123Z"),
            (ChronoUnit.SECONDS, "2020-09-13T12:26:40Z"),
            (ChronoUnit.MINUTES, "2020-09-13T12:26:00Z"),
            (ChronoUnit.HOURS, "2020-09-13T12:00:00Z"),
            (ChronoUnit.DAYS, "2020-09-13T00:00:00Z"),
        ],
    )
    def test_valid(self, unit, expect):
        i = Instant.of_epoch_second(1_600_000_000, 123_456_789)
        assert i.truncated_to(unit) == Instant.parse(expect)

    def test_before_epoch(self):
        i = Instant.parse("1969-12-31T23:59:59.5Z")
        assert i.truncated_to(ChronoUnit.HOURS) == Instant.parse(
            "1969-12-31T23:00:00Z"
        )

    def test_invalid(self):
        with pytest.raises(UnsupportedTemporalTypeError):
            Instant.EPOCH.truncated_to(ChronoUnit.WEEKS)


class TestParse:

    @pytest.mark.parametrize(
        "s, secs, nano",
        [
            ("1970-01-01T00:00:00Z", 0, 0),
            ("1970-01-01T00:00Z", 0, 0),
            ("2020-09-13T12:26:40Z", 1_600_000_000, 0),
            ("2020-09-13T14:26:40+02:00", 1_600_000_000, 0),
            ("2020-09-13T12:26:40.5-00:30", 1_600_001_800, 500_000_000),
            ("1969-12-31T23:59:59.999999999Z", -1, 999_999_999),
        ],
    )
    def test_valid(self, s, secs, nano):
        i = Instant.parse(s)
        assert (i.epoch_second, i.nano) == (secs, nano)

    @pytest.mark.parametrize(
        "s",
        [
            "2020-09-13T12:26:40",
            "2020-09-13 12:26:40Z",
            "2020-09-13T12:26:40+19:00",
            "2020-02-30T12:26:40Z",
            "2020-09-13T12:26:40z",
            "2020-09-13",
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(
            DateTimeParseError,
            match=re.escape(f"Text {s!r} could not be parsed"),
        ):
            Instant.parse(s)


@pytest.mark.parametrize(
    "i, expect",
    [
        (Instant.EPOCH, "1970-01-01T00:00:00Z"),
        (Instant.of_epoch_second(1_600_000_000), "2020-09-13T12:26:40Z"),
        (Instant.of_epoch_second(-1, 500_000_000), "1969-12-31T23:59:59.500Z"),
        (Instant.of_epoch_second(0, 1000), "1970-01-01T00:00:00.000001Z"),
        (Instant.of_epoch_second(0, 1), "1970-01-01T00:00:00.000000001Z"),
        (Instant.MIN, "-1000000000-01-01T00:00:00Z"),
        (Instant.MAX, "+1000000000-12-31T23:59:59.999999999Z"),
    ],
)
def test_format(i, expect):
    assert str(i) == expect
    assert repr(i) == f"Instant({expect})"


@given(integers(-(10**16), 10**16))
def test_epoch_second_roundtrip(secs):
    i = Instant.of_epoch_second(secs)
    odt = i.at_offset(ZoneOffset.UTC)
    assert odt.to_instant() == i
    assert Instant.parse(str(i)) == i


def test_at_zone():
    i = Instant.of_epoch_second(1_600_000_000)
    zdt = i.at_zone(ZoneId.of("Asia/Tokyo"))
    assert zdt.to_local_date_time() == LocalDateTime(2020, 9, 13, 21, 26, 40)
    odt = i.at_offset(ZoneOffset.of_hours(-5))
    assert odt.to_local_date_time() == LocalDateTime(2020, 9, 13, 7, 26, 40)


def test_equality():
    i = Instant.of_epoch_second(5, 6)
    same = Instant.of_epoch_second(5, 6)
    assert i == same
    assert i != Instant.of_epoch_second(5, 7)
    assert hash(i) == hash(same)
    assert i == AlwaysEqual()
    assert i != NeverEqual()
    assert i != 5  # type: ignore[comparison-overlap]


def test_comparison():
    i = Instant.of_epoch_second(5, 6)
    later = Instant.of_epoch_second(5, 7)
    assert i < later
    assert later >= i
    assert i.is_before(later)
    assert later.is_after(i)
    assert Instant.MIN < i < Instant.MAX
    assert i < AlwaysLarger()
    assert i > AlwaysSmaller()
    with pytest.raises(TypeError):
        i < 5  # type: ignore[operator]


def test_copy_and_pickle():
    i = Instant.of_epoch_second(-5, 6)
    assert copy(i) is i
    assert deepcopy(i) is i
    assert pickle.loads(pickle.dumps(i)) == i
    assert pickle.loads(pickle.dumps(Instant.MAX)) == Instant.MAX
