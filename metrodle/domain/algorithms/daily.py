from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from metrodle.domain.exceptions import DataIntegrityFault
from metrodle.domain.models import Station

logger = logging.getLogger(__name__)

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
DAILY_SEED_PREFIX = "metrodlesp-"

_DATE_KEY = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a over UTF-16 code units.

    Code units (not UTF-8 bytes) keep the result identical to the browser
    build, which hashes with String.charCodeAt.
    """

    data = text.encode("utf-16-le")
    h = FNV_OFFSET_BASIS
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def pick_daily_station(
    date_key: str,
    roster: Sequence[Station],
    overrides: Mapping[str, str] | None = None,
) -> Station:
    """Deterministically pick the solution station for `date_key`.

    `roster` must already be in its stable order. `overrides` maps a date
    key to a station name and is checked before hashing.
    """

    if not _DATE_KEY.fullmatch(date_key):
        raise ValueError(f"Invalid date key: {date_key!r} (expected YYYY-MM-DD)")
    if not roster:
        raise DataIntegrityFault("Cannot pick a daily station from an empty roster")

    if overrides and date_key in overrides:
        name = overrides[date_key]
        for station in roster:
            if station.name == name:
                return station
        raise DataIntegrityFault(f"Override for {date_key} names unknown station {name!r}")

    idx = fnv1a_32(DAILY_SEED_PREFIX + date_key) % len(roster)
    logger.debug("Daily station index for %s: %d/%d", date_key, idx, len(roster))
    return roster[idx]
