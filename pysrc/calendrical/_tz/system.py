"""Detection of the system zone"""

from __future__ import annotations

import os
import os.path
import platform
from typing import Literal, Optional

SYSTEM = platform.system()
LOCALTIME = "/etc/localtime"

# "key": an IANA zone ID
# "file": a path to a TZif file whose ID is unknown
# "key_or_posix": either a zone ID or a POSIX TZ string
SystemTzKind = Literal["key", "file", "key_or_posix"]

# On unix-like systems the zone is a (symlinked) file.
# Elsewhere the tzlocal package knows where to look.
if SYSTEM in ("Linux", "Darwin"):  # pragma: no cover

    def _key_or_file() -> tuple[SystemTzKind, str]:
        tzif_path = os.path.realpath(LOCALTIME)
        if tzif_path == LOCALTIME:
            # Not a symlink: the ID can't be determined
            return ("file", LOCALTIME)
        if (tzid := tzid_from_path(tzif_path)) is None:
            return ("file", tzif_path)
        return ("key", tzid)

else:  # pragma: no cover
    import tzlocal

    def _key_or_file() -> tuple[SystemTzKind, str]:
        return ("key", tzlocal.get_localzone_name())


def tzid_from_path(path: str) -> Optional[str]:
    """The zone ID from a path inside a zoneinfo directory, if it is one"""
    # e.g. `zoneinfo/` or `zoneinfo.default/`
    if (index := path.find("/", path.rfind("zoneinfo"))) == -1:
        return None
    return path[index + 1 :]


def get_tz() -> tuple[SystemTzKind, str]:
    """Determine the system zone from the TZ variable or the OS settings"""
    tz_env = os.environ.get("TZ")
    if tz_env is None:  # pragma: no cover
        return _key_or_file()
    tz_env = tz_env.removeprefix(":")

    if os.path.isabs(tz_env):
        return ("file", tz_env)
    # A digit may indicate a POSIX TZ string, although zone IDs may
    # contain digits too (e.g. Etc/GMT+5)
    elif any(c.isdigit() for c in tz_env):
        return ("key_or_posix", tz_env)
    return ("key", tz_env)
