"""Field-name aliases per normalized quantity.

Each entry is an ordered list of ``(scope, key)`` lookups where scope ``"m"``
is the observation's ``metric`` sub-record and ``"o"`` the observation itself.
Current readings come before averaged/high/max variants. New provider
spellings are added here, not in the normalizer.
"""

from __future__ import annotations

from typing import Final, Tuple

Lookup = Tuple[str, str]

METRIC: Final = "m"
OBSERVATION: Final = "o"

# Top-level timestamp fields, most precise first
TIME_FIELDS: Final[Tuple[str, ...]] = (
    "obsTimeUtc",
    "validTimeUtc",
    "obsTimeLocal",
    "validTimeLocal",
    "dateTimeIso",
    "dateTime",
)

FIELD_ALIASES: Final[dict[str, Tuple[Lookup, ...]]] = {
    "temp": (
        (METRIC, "temp"), (OBSERVATION, "temp"),
        (METRIC, "tempAvg"), (OBSERVATION, "tempAvg"),
        (METRIC, "temperature"), (OBSERVATION, "temperature"),
    ),
    "dew": (
        (METRIC, "dewPt"), (METRIC, "dewpoint"),
        (OBSERVATION, "dewPt"), (OBSERVATION, "dewpoint"),
        (METRIC, "dewPoint"), (OBSERVATION, "dewPoint"),
        (METRIC, "dewpt"), (OBSERVATION, "dewpt"),
    ),
    "humidity": (
        (METRIC, "humidity"), (OBSERVATION, "humidity"),
        (METRIC, "humidityAvg"), (OBSERVATION, "humidityAvg"),
    ),
    "pres": (
        (METRIC, "pressure"), (OBSERVATION, "pressure"),
        (METRIC, "pressureAvg"), (OBSERVATION, "pressureAvg"),
        (METRIC, "pressureMean"),
    ),
    "wind": (
        (METRIC, "windSpeed"), (OBSERVATION, "windSpeed"),
        (METRIC, "windSpeedAvg"), (OBSERVATION, "windSpeedAvg"),
        (METRIC, "windAvg"), (OBSERVATION, "windAvg"),
    ),
    "gust": (
        (METRIC, "windGust"), (OBSERVATION, "windGust"),
        (METRIC, "windGustMax"), (OBSERVATION, "windGustMax"),
        (METRIC, "windHigh"), (OBSERVATION, "windHigh"),
    ),
    # Direction is a top-level field in history payloads
    "dir_deg": (
        (OBSERVATION, "winddir"), (OBSERVATION, "windDir"), (OBSERVATION, "windDirection"),
        (METRIC, "winddir"), (METRIC, "windDirection"),
    ),
    "precip_rate": (
        (METRIC, "precipRate"), (OBSERVATION, "precipRate"),
        (METRIC, "precipRateMax"), (OBSERVATION, "precipRateMax"),
    ),
    "precip_total": (
        (METRIC, "precipTotal"), (OBSERVATION, "precipTotal"),
        (METRIC, "precipAccum"), (OBSERVATION, "precipAccum"),
        (METRIC, "precipRateSum"), (OBSERVATION, "precipRateSum"),
        (METRIC, "precipTotalDaily"), (OBSERVATION, "precipTotalDaily"),
    ),
    "uv": (
        (METRIC, "uv"), (OBSERVATION, "uv"),
        (METRIC, "uvHigh"), (OBSERVATION, "uvHigh"),
    ),
    "rad": (
        (METRIC, "solarRadiation"), (OBSERVATION, "solarRadiation"),
        (METRIC, "solarRadiationHigh"), (OBSERVATION, "solarRadiationHigh"),
    ),
}
