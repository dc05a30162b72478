from __future__ import annotations

import os as _os
import sysconfig as _sysconfig
from pathlib import Path as _Path
from typing import Iterable as _Iterable

from ._pycalendrical import *
from ._pycalendrical import (  # for pickling and the docs
    __all__,
    __version__,
    _unpkl_date,
    _unpkl_dur,
    _unpkl_inst,
    _unpkl_ldt,
    _unpkl_md,
    _unpkl_odt,
    _unpkl_offset_time,
    _unpkl_offset,
    _unpkl_period,
    _unpkl_region,
    _unpkl_time,
    _unpkl_year,
    _unpkl_ym,
    _unpkl_zdt,
)
from ._tz import store as _store

TZPATH: tuple[str, ...] = ()
"""The paths in which ``calendrical`` searches for TZif zone files.
By default, this is determined the same way as :data:`zoneinfo.TZPATH`,
although you can override it using :func:`calendrical.reset_tzpath`.
Zones not found here are loaded from the ``tzdata`` package.
"""


def reset_tzpath(
    target: _Iterable[str | _os.PathLike[str]] | None = None, /
) -> None:
    """Reset or set the paths in which ``calendrical`` searches for
    zone files.

    It does not affect the :mod:`zoneinfo` module or other libraries.

    Note
    ----
    Zones that are already loaded stay cached. Call :func:`clear_tzcache`
    to force loading them from the new path.

    Behaves similarly to :func:`zoneinfo.reset_tzpath`
    """
    global TZPATH

    if target is not None:
        # This is such a common mistake, that we raise a descriptive error
        if isinstance(target, (str, bytes)):
            raise TypeError("tzpath must be an iterable of paths")

        if not all(map(_os.path.isabs, target)):
            raise ValueError("tzpaths must be absolute paths")
        TZPATH = tuple(str(_Path(p)) for p in target)
    else:
        TZPATH = _tzpath_from_env()
    _store.set_tzpath(TZPATH)


def _tzpath_from_env() -> tuple[str, ...]:
    try:
        env_var = _os.environ["PYTHONTZPATH"]
    except KeyError:
        env_var = _sysconfig.get_config_var("TZPATH")

    if not env_var:
        return ()

    raw_tzpath = env_var.split(_os.pathsep)
    # invalid paths may be silently ignored, like zoneinfo does
    return tuple(filter(_os.path.isabs, raw_tzpath))


def clear_tzcache(*, only_keys: _Iterable[str] | None = None) -> None:
    """Clear the cache of loaded zone files. If ``only_keys`` is given,
    only those zones are cleared.

    Caution
    -------
    :class:`ZoneRegion` instances hold on to the rules they were created
    with. Only regions created after clearing the cache see new data.

    Behaves similarly to :meth:`zoneinfo.ZoneInfo.clear_cache`.
    """
    _store.clear_tz_cache(None if only_keys is None else tuple(only_keys))


def reset_system_tz() -> None:
    """Re-read the system zone, e.g. after changing the ``TZ`` variable"""
    _store.reset_system_tz()


def available_zone_ids() -> set[str]:
    """All zone IDs that :meth:`ZoneId.of` can find.

    This includes IDs from registered providers, the ``TZPATH``
    directories and the ``tzdata`` package.

    Warning
    -------
    This function may open a large number of files, since the first few
    bytes of each file are read to check that it is a zone file.
    """
    return ZoneRulesProvider.get_available_zone_ids()


reset_tzpath()  # populate the tzpath once at startup
