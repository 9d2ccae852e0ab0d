# src/crawler/dates.py
"""Normalize the publication timestamps found in article markup.

The site emits two shapes:

- zoned ISO-8601 (``2021-05-01T12:00:00+02:00``, ``...Z``, optionally with a
  bracketed region id such as ``[Europe/Berlin]``);
- zone-less 19-char ISO-8601 (``2021-05-01T12:00:00``), read in the local zone.

A 20-char value ending in ``Z`` is stripped to the zone-less shape first, so it
is read as local time and not as UTC.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional, Tuple

from dateutil import tz
from dateutil.parser import isoparse

LOGGER = logging.getLogger(__name__)

_LOCAL_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")
_ZONED_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}T([01]\d|2[0-3]):\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})$")
_REGION_SUFFIX = re.compile(r"^(?P<stamp>.+?)\[(?P<region>[^\]]+)\]$")


def local_zone() -> tzinfo:
    return tz.tzlocal()


def _strip_utc_marker(value: str) -> str:
    return value[:-1]


def _parse_local(value: str) -> datetime:
    if not _LOCAL_SHAPE.match(value):
        raise ValueError(f"not a zone-less timestamp: {value!r}")
    return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S").replace(tzinfo=local_zone())


def _parse_zoned(value: str) -> datetime:
    region = None
    m = _REGION_SUFFIX.match(value)
    if m:
        value, region = m.group("stamp"), m.group("region")
    if not _ZONED_SHAPE.match(value):
        raise ValueError(f"not an extended ISO timestamp with zone or offset: {value!r}")
    dt = isoparse(value)
    if dt.tzinfo is None:
        raise ValueError(f"timestamp has no zone or offset: {value!r}")
    if region:
        zone = tz.gettz(region)
        if zone is None:
            raise ValueError(f"unknown zone id: {region!r}")
        dt = dt.astimezone(zone)
    return dt


# (predicate, action) rows, first match wins per stage.
_PREPROCESS: List[Tuple[Callable[[str], bool], Callable[[str], str]]] = [
    (lambda s: len(s) == 20 and s.endswith("Z"), _strip_utc_marker),
]

_PARSERS: List[Tuple[Callable[[str], bool], Callable[[str], datetime]]] = [
    (lambda s: len(s) == 19, _parse_local),
    (lambda s: True, _parse_zoned),
]


def _select(rows, value):
    for predicate, action in rows:
        if predicate(value):
            return action
    return None


def normalize_date(raw: Optional[str]) -> Optional[datetime]:
    """Parse a raw timestamp into a UTC-aware datetime; None if blank or unparseable."""
    if raw is None or not raw.strip():
        return None
    value = raw
    try:
        preprocess = _select(_PREPROCESS, value)
        if preprocess:
            value = preprocess(value)
        parse = _select(_PARSERS, value)
        return parse(value).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        LOGGER.warning("could not parse date %r: %s", raw, e)
        return None
