import os
import struct
from contextlib import contextmanager
from typing import Optional, Sequence
from unittest.mock import patch

from calendrical import reset_system_tz

# The POSIX TZ strings for Amsterdam/Paris and New York
AMS_TZ_POSIX = "CET-1CEST,M3.5.0,M10.5.0/3"
NYC_TZ_POSIX = "EST5EDT,M3.2.0,M11.1.0"


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class AlwaysLarger:
    def __lt__(self, _):
        return False

    def __le__(self, _):
        return False

    def __gt__(self, _):
        return True

    def __ge__(self, _):
        return True


class AlwaysSmaller:
    def __lt__(self, _):
        return True

    def __le__(self, _):
        return True

    def __gt__(self, _):
        return False

    def __ge__(self, _):
        return False


@contextmanager
def system_tz(name):
    try:
        with patch.dict(os.environ, {"TZ": name}):
            reset_system_tz()
            yield
    finally:
        reset_system_tz()  # don't forget to reset the zone after the patch!


@contextmanager
def system_tz_ams():
    with system_tz("Europe/Amsterdam"):
        yield


def make_tzif(
    transitions: Sequence[tuple[int, int]],
    offsets: Sequence[int],
    footer: Optional[str] = None,
) -> bytes:
    """Build TZif data from (utc time, offset index) pairs.

    Without a footer, version 1 data is produced. With a footer
    (possibly empty), version 2 data.
    """
    types = b"".join(
        struct.pack(">lbB", off, i > 0, 0) for i, off in enumerate(offsets)
    )
    chars = b"ABC\x00"

    def block(version: bytes, time_format: str) -> bytes:
        header = (
            b"TZif"
            + version
            + b"\x00" * 15
            + struct.pack(
                ">6l", 0, 0, 0, len(transitions), len(offsets), len(chars)
            )
        )
        return (
            header
            + b"".join(struct.pack(time_format, t) for t, _ in transitions)
            + bytes(i for _, i in transitions)
            + types
            + chars
        )

    if footer is None:
        return block(b"\x00", ">l")
    return (
        block(b"2", ">l")
        + block(b"2", ">q")
        + b"\n"
        + footer.encode("ascii")
        + b"\n"
    )
