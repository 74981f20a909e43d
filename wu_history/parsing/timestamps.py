"""Render observation instants as HH:mm in a fixed display timezone."""

from __future__ import annotations

import datetime as dt
import re
from numbers import Real
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog

logger = structlog.get_logger(__name__)

DISPLAY_TIMEZONE = "Europe/Madrid"
PLACEHOLDER = "—"

_HOUR_MINUTE = re.compile(r"(\d{1,2}):(\d{2})")


def _zone(tz_name: Optional[str]) -> Optional[ZoneInfo]:
    if not tz_name:
        return None
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def parse_instant(value: Any, tz_name: Optional[str] = None) -> Optional[dt.datetime]:
    """Parse an ISO-ish string, datetime or epoch seconds into an aware UTC datetime.

    Naive values are station wall-clock times (``obsTimeLocal``) and are read
    in ``tz_name``; without a usable zone they are taken to be UTC. Returns
    None when nothing sensible can be parsed.
    """
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, Real) and not isinstance(value, bool):
        try:
            return dt.datetime.fromtimestamp(float(value), tz=dt.timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        s = value.strip()
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        try:
            parsed = dt.datetime.fromisoformat(s)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=_zone(tz_name) or dt.timezone.utc)
    try:
        return parsed.astimezone(dt.timezone.utc)
    except (OverflowError, ValueError):
        return None


def _match_hour_minute(formatted: str) -> Optional[str]:
    m = _HOUR_MINUTE.search(formatted)
    if not m:
        return None
    return f"{m.group(1).zfill(2)}:{m.group(2)}"


def format_zoned(instant: dt.datetime, tz_name: str) -> Optional[str]:
    """HH:mm of ``instant`` in ``tz_name``; None if the zone cannot be used."""
    try:
        local = instant.astimezone(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError, OverflowError):
        return None
    return _match_hour_minute(local.strftime("%H:%M"))


def format_utc(instant: dt.datetime) -> Optional[str]:
    try:
        utc = instant.astimezone(dt.timezone.utc)
    except (ValueError, OverflowError):
        return None
    return f"{utc.hour:02d}:{utc.minute:02d}"


def to_display_time(value: Any, tz_name: str = DISPLAY_TIMEZONE) -> str:
    """Convert an observation timestamp into an ``HH:mm`` string.

    Absent or unparseable input gives the placeholder. The zone-aware path is
    tried first and the UTC hour/minute is used when it yields nothing.
    """
    if not value:
        return PLACEHOLDER
    instant = parse_instant(value, tz_name)
    if instant is None:
        logger.debug("timestamp_unparseable", value=str(value))
        return PLACEHOLDER
    zoned = format_zoned(instant, tz_name)
    if zoned is not None:
        return zoned
    logger.warning("timezone_format_fallback", tz=tz_name)
    return format_utc(instant) or PLACEHOLDER
