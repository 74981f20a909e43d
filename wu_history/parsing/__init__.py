"""Parsing subpackage.

Turns heterogeneous station payloads into the fixed NormalizedObservation
schema: numeric coercion, alias resolution and display-time formatting.
"""

from .coerce import coerce_number, pick_first
from .normalize import extract_observations, normalize_observation, parse_response
from .timestamps import DISPLAY_TIMEZONE, PLACEHOLDER, to_display_time

__all__ = [
    "DISPLAY_TIMEZONE",
    "PLACEHOLDER",
    "coerce_number",
    "extract_observations",
    "normalize_observation",
    "parse_response",
    "pick_first",
    "to_display_time",
]
