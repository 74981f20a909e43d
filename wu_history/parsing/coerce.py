"""Permissive numeric coercion for provider payload values."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

# Values stations send instead of omitting a field
SENTINELS = frozenset({"", "--", "—", "na", "null"})

_NON_NUMERIC = re.compile(r"[^0-9+\-.eE]")


def _parse_string(value: str) -> Optional[float]:
    s = value.strip()
    if s.lower() in SENTINELS:
        return None
    # Only the first comma is treated as a decimal separator
    cleaned = _NON_NUMERIC.sub("", s.replace(",", ".", 1))
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def coerce_number(value: Any) -> Optional[float]:
    """Turn a raw payload value into a finite float, or None.

    Parameters
    ----------
    value : Any
        Number, numeric-ish string ("23,5°C", " 1013.2 hPa"), sentinel
        ("--", "NA", "null") or anything else a provider might send.

    Returns
    -------
    Optional[float]
        The finite value, or None when the input carries no usable number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        n = _parse_string(value)
    else:
        # ints beyond float range overflow instead of becoming inf
        try:
            n = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
    if n is None or not math.isfinite(n):
        return None
    return n


def pick_first(*candidates: Any) -> Optional[float]:
    """Return the first candidate that coerces to a number, else None."""
    for c in candidates:
        n = coerce_number(c)
        if n is not None:
            return n
    return None
