"""Normalize Weather Underground history payloads into NormalizedObservation rows."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

import structlog

from ..schemas.observation import NormalizedObservation
from .aliases import FIELD_ALIASES, METRIC, OBSERVATION, TIME_FIELDS
from .coerce import pick_first
from .timestamps import DISPLAY_TIMEZONE, to_display_time

logger = structlog.get_logger(__name__)

_EMPTY: Mapping[str, Any] = {}


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def normalize_observation(raw: Any, tz_name: str = DISPLAY_TIMEZONE) -> NormalizedObservation:
    """Map one raw observation (flat or with a ``metric`` sub-record) to the display schema.

    A non-mapping entry is treated as an empty record, which yields an
    observation with every quantity set to None.
    """
    if not isinstance(raw, Mapping):
        logger.warning("observation_not_a_record", kind=type(raw).__name__)
        raw = _EMPTY

    metric = raw.get("metric")
    if not isinstance(metric, Mapping):
        metric = raw
    scopes = {METRIC: metric, OBSERVATION: raw}

    values = {
        name: pick_first(*(scopes[scope].get(key) for scope, key in lookups))
        for name, lookups in FIELD_ALIASES.items()
    }

    when_iso = _first_present(raw, TIME_FIELDS)
    return NormalizedObservation(
        when_iso=when_iso,
        when_madrid=to_display_time(when_iso, tz_name),
        **values,
    )


def extract_observations(raw: Any) -> List[Any]:
    """Unwrap a bare list or an ``{"observations": [...]}`` wrapper; anything else is empty."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return list(raw)
    if isinstance(raw, Mapping):
        obs = raw.get("observations")
        if isinstance(obs, (list, tuple)):
            return list(obs)
    return []


def parse_response(raw: Any, tz_name: str = DISPLAY_TIMEZONE) -> List[NormalizedObservation]:
    """Normalize every observation of a history response, preserving order."""
    rows = [normalize_observation(o, tz_name) for o in extract_observations(raw)]
    logger.debug("history_parsed", count=len(rows))
    return rows
