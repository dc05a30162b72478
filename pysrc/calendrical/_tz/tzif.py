"""Reading of TZif (RFC 8536) zone files into offset lookup tables"""

from __future__ import annotations

import struct
from io import BytesIO
from typing import IO, Optional, Sequence, final

from .common import Ambiguity, Fold, Gap, Unambiguous
from .posix import TzStr

EpochSecs = int
Offset = int
OffsetDelta = int

# Transitions are clamped to years 1-9999; the POSIX footer covers the rest
EPOCH_SECS_MIN = -62135596800
EPOCH_SECS_MAX = 253402300799


@final
class TimeZone:
    """Complete offset data of one zone.

    Without transition tables this is just a POSIX TZ string.
    """

    __slots__ = (
        "__weakref__",
        "key",
        "_offsets_by_utc",
        "_offsets_by_local",
        "_end",
    )

    # The zone ID the data was loaded for, if any
    key: Optional[str]

    # Read (X, Y) as "FROM UTC epoch second X onwards the offset is Y"
    _offsets_by_utc: tuple[tuple[EpochSecs, Offset], ...]

    # Read (X, (Y, Z)) as "UNTIL local epoch second X the offset is Y,
    # after which it shifts by Z". X is the end of the ambiguous region.
    _offsets_by_local: tuple[tuple[EpochSecs, tuple[Offset, OffsetDelta]], ...]

    # Rules beyond the last transition
    _end: Optional[TzStr]

    def __init__(
        self,
        key: Optional[str],
        offsets_by_utc: tuple[tuple[EpochSecs, Offset], ...],
        end: Optional[TzStr] = None,
    ):
        if not (end or offsets_by_utc):
            raise ValueError("No transition data")
        self.key = key
        self._offsets_by_utc = offsets_by_utc
        self._offsets_by_local = _local_transitions(offsets_by_utc)
        self._end = end

    @property
    def is_fixed(self) -> bool:
        """Whether the offset never changes"""
        if self._end is not None:
            if not self._end.is_fixed:
                return False
            fixed = self._end.std
        else:
            fixed = self._offsets_by_utc[0][1]
        return all(off == fixed for _, off in self._offsets_by_utc)

    def offset_for_instant(self, t: EpochSecs) -> Offset:
        """The offset in effect at the given UTC epoch second"""
        idx = bisect(self._offsets_by_utc, t)
        if idx is not None:
            return self._offsets_by_utc[max(0, idx - 1)][1]
        elif self._end is not None:
            return self._end.offset_for_instant(t)
        # Without a POSIX footer, the last offset simply continues
        return self._offsets_by_utc[-1][1]

    def ambiguity_for_local(self, t: EpochSecs) -> Ambiguity:
        """The offset(s) for the given local time in epoch seconds"""
        idx = bisect(self._offsets_by_local, t)
        if idx is not None:
            region_end, (offset, change) = self._offsets_by_local[idx]
            if t < region_end - abs(change):
                return Unambiguous(offset)
            transition = region_end - max(offset, offset + change)
            if change < 0:
                return Fold(transition, offset, offset + change)
            return Gap(transition, offset, offset + change)
        elif self._end is not None:
            return self._end.ambiguity_for_local(t)
        return Unambiguous(self._offsets_by_utc[-1][1])

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        # Distinct instances may hold the same data after a cache clear
        elif type(other) is TimeZone:
            return (
                self.key == other.key
                and self._offsets_by_utc == other._offsets_by_utc
                and self._end == other._end
            )
        return NotImplemented  # pragma: no cover

    def __hash__(self) -> int:
        return hash((self.key, self._offsets_by_utc))

    def __repr__(self) -> str:
        return f"TimeZone({self.key!r})"

    @classmethod
    def parse_posix(cls, s: str, key: Optional[str] = None) -> TimeZone:
        """Create a TimeZone from a POSIX TZ string"""
        return cls(key, (), TzStr.parse(s))

    @classmethod
    def parse_tzif(cls, data: bytes, key: Optional[str] = None) -> TimeZone:
        """Create a TimeZone from TZif file data"""
        stream = BytesIO(data)
        return _parse_content(_parse_header(stream), stream, key)


def bisect(
    arr: Sequence[tuple[EpochSecs, object]], x: EpochSecs
) -> Optional[int]:
    """Index of the first entry starting after ``x``.
    None if ``x`` lies beyond the last entry."""
    left, right = 0, len(arr)
    while left < right:
        mid = (left + right) // 2
        if x >= arr[mid][0]:
            left = mid + 1
        else:
            right = mid
    return left if left != len(arr) else None


def clamp_epoch_secs(value: int) -> EpochSecs:
    return max(EPOCH_SECS_MIN, min(EPOCH_SECS_MAX, value))


class Header:
    """The counts in a TZif header"""

    __slots__ = (
        "version",
        "isutcnt",
        "isstdcnt",
        "leapcnt",
        "timecnt",
        "typecnt",
        "charcnt",
    )

    def __init__(
        self,
        version: int,
        isutcnt: int,
        isstdcnt: int,
        leapcnt: int,
        timecnt: int,
        typecnt: int,
        charcnt: int,
    ):
        self.version = version
        self.isutcnt = isutcnt
        self.isstdcnt = isstdcnt
        self.leapcnt = leapcnt
        self.timecnt = timecnt
        self.typecnt = typecnt
        self.charcnt = charcnt

    def data_size(self, time_size: int) -> int:
        """Size of the data block following the header"""
        return (
            self.timecnt * (time_size + 1)
            + self.typecnt * 6
            + self.charcnt
            + self.leapcnt * (time_size + 4)
            + self.isstdcnt
            + self.isutcnt
        )


def _parse_header(data: IO[bytes]) -> Header:
    if data.read(4) != b"TZif":
        raise ValueError("Invalid header value")

    version_byte = data.read(1)
    if version_byte == b"\x00":
        version = 1
    elif version_byte.isdigit():
        version = int(version_byte)
    else:
        raise ValueError("Invalid header value")

    data.read(15)  # reserved
    counts = data.read(24)
    if len(counts) != 24:
        raise ValueError("Truncated header")
    return Header(version, *struct.unpack(">6l", counts))


def _read_exact(data: IO[bytes], size: int) -> bytes:
    chunk = data.read(size)
    if len(chunk) != size:
        raise ValueError("Truncated TZif data")
    return chunk


def _parse_content(
    header: Header, data: IO[bytes], key: Optional[str]
) -> TimeZone:
    if header.version >= 2:
        # The v1 block is only there for old readers
        _read_exact(data, header.data_size(4))
        header = _parse_header(data)
        transition_times: Sequence[EpochSecs] = [
            clamp_epoch_secs(t)
            for t in struct.unpack(
                f">{header.timecnt}q", _read_exact(data, 8 * header.timecnt)
            )
        ]
    else:
        transition_times = struct.unpack(
            f">{header.timecnt}l", _read_exact(data, 4 * header.timecnt)
        )

    indices = _read_exact(data, header.timecnt)
    offsets = [
        utoff
        for utoff, *_ in struct.iter_unpack(
            ">lbB", _read_exact(data, 6 * header.typecnt)
        )
    ]
    if not offsets:
        raise ValueError("No local time types in file")
    data.read(header.charcnt)

    offsets_by_utc = (
        (EPOCH_SECS_MIN, offsets[0]),
        *((t, offsets[i]) for i, t in zip(indices, transition_times)),
    )

    end = None
    if header.version >= 2:
        # Skip leap seconds and indicators, up to the newline before the footer
        data.read(header.isutcnt + header.isstdcnt + header.leapcnt * 12 + 1)
        footer, *_ = data.read().split(b"\n", 1)
        if footer:
            end = TzStr.parse(footer.decode("ascii"))

    return TimeZone(key, offsets_by_utc, end)


def _local_transitions(
    transitions: Sequence[tuple[EpochSecs, Offset]],
) -> tuple[tuple[EpochSecs, tuple[Offset, OffsetDelta]], ...]:
    if not transitions:
        return ()
    result = []
    (_, offset_prev), *remaining = transitions
    for epoch, offset in remaining:
        # The ambiguous region ends at the later of the two wall-clock
        # readings of the transition
        region_end = clamp_epoch_secs(epoch + max(offset_prev, offset))
        result.append((region_end, (offset_prev, offset - offset_prev)))
        offset_prev = offset
    return tuple(result)
