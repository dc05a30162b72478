"""Zone database lookup (search path, then ``tzdata``) and caching."""

from __future__ import annotations

import logging
import os.path
from collections import OrderedDict
from importlib import resources
from pathlib import Path
from threading import Lock
from typing import Iterator, NewType, Optional
from weakref import WeakValueDictionary

from . import system
from .tzif import TimeZone

__all__ = [
    "TimeZoneNotFoundError",
    "get_tz",
    "get_system_tz",
    "reset_system_tz",
    "available_keys",
    "clear_tz_cache",
    "set_tzpath",
]

logger = logging.getLogger(__name__)

_TZPATH: tuple[str, ...] = ()

# Strong references to the most recently used zones keep them alive in
# the weak lookup table. The same scheme as `zoneinfo`.
_TZCACHE_LRU_SIZE = 8
_tzcache_lru: OrderedDict[str, TimeZone] = OrderedDict()
_tzcache_lookup: WeakValueDictionary[str, TimeZone] = WeakValueDictionary()
_tzcache_lock = Lock()


class TimeZoneNotFoundError(ValueError):
    """No zone data exists for the given key"""

    @classmethod
    def for_key(cls, key: str) -> TimeZoneNotFoundError:
        return cls(f"Unknown time-zone ID: {key}")


def set_tzpath(to: tuple[str, ...]) -> None:
    global _TZPATH
    logger.debug("Zone search path set to %r", to)
    _TZPATH = to


def get_tzpath() -> tuple[str, ...]:
    return _TZPATH


def clear_tz_cache(only_keys: Optional[tuple[str, ...]] = None) -> None:
    with _tzcache_lock:
        if only_keys is None:
            logger.debug("Clearing all cached zone data")
            _tzcache_lookup.clear()
            _tzcache_lru.clear()
        else:
            logger.debug("Clearing cached zone data for %r", only_keys)
            for k in only_keys:
                _tzcache_lookup.pop(k, None)
                _tzcache_lru.pop(k, None)


def get_tz(key: str) -> TimeZone:
    instance = _tzcache_lookup.get(key)
    if instance is None:
        # Two threads may load the same zone at once. Harmless, since
        # the loaded data is immutable.
        instance = _tzcache_lookup.setdefault(
            key, _load_tz(validate_tzid(key))
        )

    with _tzcache_lock:
        _tzcache_lru[key] = _tzcache_lru.pop(key, instance)
        if len(_tzcache_lru) > _TZCACHE_LRU_SIZE:
            _tzcache_lru.popitem(last=False)

    return instance


# A key confirmed to contain no path traversal or other bad characters
SafeTzId = NewType("SafeTzId", str)


def validate_tzid(key: str) -> SafeTzId:
    if (
        key.isascii()
        and 0 < len(key) < 100
        and all(b.isalnum() or b in "-_+/." for b in key)
        and ".." not in key
        and "//" not in key
        and "/./" not in key
        and key[0] not in ".-+/"
        and key[-1] != "/"
    ):
        return SafeTzId(key)
    raise TimeZoneNotFoundError.for_key(key)


def _tzdata_root() -> Optional[str]:
    try:
        import tzdata.zoneinfo
    except ImportError:
        return None
    return tzdata.zoneinfo.__path__[0]


def _tzif_from_path(key: SafeTzId) -> Optional[bytes]:
    for search_path in _TZPATH:
        target = os.path.join(search_path, key)
        if os.path.isfile(target):
            with open(target, "rb") as f:
                logger.debug("Loading zone %r from %s", key, target)
                return f.read()
    return None


def _tzif_from_tzdata(key: SafeTzId) -> bytes:
    root = _tzdata_root()
    if root is None:
        raise TimeZoneNotFoundError.for_key(key)
    target = os.path.join(root, *key.split("/"))
    # Checking first avoids platform-dependent errors from open()
    if not os.path.isfile(target):
        raise TimeZoneNotFoundError.for_key(key)
    with open(target, "rb") as f:
        logger.debug("Loading zone %r from the tzdata package", key)
        return f.read()


def _load_tz(key: SafeTzId) -> TimeZone:
    tzif = _tzif_from_path(key) or _tzif_from_tzdata(key)
    if not tzif.startswith(b"TZif"):
        # A file exists, but it isn't zone data
        raise TimeZoneNotFoundError.for_key(key)
    return TimeZone.parse_tzif(tzif, key)


def available_keys() -> set[str]:
    """All zone keys in the ``tzdata`` package and the search path.

    The special files (posixrules, right/, posix/) are left out,
    the same as :func:`zoneinfo.available_timezones` does.
    """
    keys: set[str] = set()
    try:
        with resources.files("tzdata").joinpath("zones").open("r") as f:
            keys.update(filter(None, map(str.strip, f)))
    except (ImportError, FileNotFoundError):
        logger.debug("tzdata package not available")

    for base in _TZPATH:
        keys.update(_find_all_tznames(Path(base)))

    keys.discard("posixrules")
    return keys


# The zone file tree is trusted and shallow, so recursion is fine
def _find_all_tznames(base: Path) -> Iterator[str]:
    if not base.is_dir():
        return
    for entry in base.iterdir():
        if entry.is_dir():
            if entry.name in ("right", "posix"):
                continue
            for p in _find_nested_tzfiles(entry):
                yield p.relative_to(base).as_posix()
        elif _is_tzif_file(entry):
            yield entry.name


def _find_nested_tzfiles(path: Path) -> Iterator[Path]:
    for entry in path.iterdir():
        if entry.is_dir():
            yield from _find_nested_tzfiles(entry)
        elif _is_tzif_file(entry):
            yield entry


def _is_tzif_file(p: Path) -> bool:
    try:
        with p.open("rb") as f:
            return f.read(4) == b"TZif"
    except OSError:
        return False


_CACHED_SYSTEM_TZ: Optional[TimeZone] = None


def get_system_tz() -> TimeZone:
    global _CACHED_SYSTEM_TZ
    if _CACHED_SYSTEM_TZ is None:
        _CACHED_SYSTEM_TZ = _read_system_tz()
    return _CACHED_SYSTEM_TZ


def reset_system_tz() -> None:
    """Re-read the system zone, e.g. after the TZ variable changed"""
    global _CACHED_SYSTEM_TZ
    _CACHED_SYSTEM_TZ = _read_system_tz()


def _read_system_tz() -> TimeZone:
    kind, value = system.get_tz()
    logger.debug("System zone detected as %r (%s)", value, kind)
    if kind == "key":
        return get_tz(value)
    elif kind == "key_or_posix":
        try:
            return get_tz(value)
        except TimeZoneNotFoundError:
            return TimeZone.parse_posix(value, key=value)
    with open(value, "rb") as f:
        return TimeZone.parse_tzif(f.read())
