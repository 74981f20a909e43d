import datetime as dt
import re
from zoneinfo import ZoneInfo

import pytest

from wu_history.parsing import PLACEHOLDER, to_display_time
from wu_history.parsing.timestamps import format_utc, format_zoned, parse_instant

MADRID = ZoneInfo("Europe/Madrid")


def _expected(instant: dt.datetime) -> str:
    return instant.astimezone(MADRID).strftime("%H:%M")


@pytest.mark.parametrize("value", [None, "", 0])
def test_absent_gives_placeholder(value):
    assert to_display_time(value) == PLACEHOLDER


def test_summer_instant_uses_madrid_offset():
    instant = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)
    out = to_display_time("2024-05-01T12:00:00Z")
    assert out == _expected(instant)
    assert out == "14:00"


def test_winter_instant_uses_madrid_offset():
    instant = dt.datetime(2024, 1, 15, 23, 30, tzinfo=dt.timezone.utc)
    out = to_display_time("2024-01-15T23:30:00Z")
    assert out == _expected(instant)
    assert out == "00:30"


def test_output_shape_is_hh_mm():
    for value in ("2024-03-31T00:59:00Z", "2024-10-27T01:05:00+00:00", "2024-07-04T09:07:00-04:00"):
        assert re.fullmatch(r"\d{2}:\d{2}", to_display_time(value))


def test_naive_values_are_display_zone_wall_clock():
    assert to_display_time("2024-05-01 14:00:00") == "14:00"
    assert to_display_time("2024-01-15T08:30:00") == "08:30"
    assert to_display_time("2024-05-01 14:00:00", tz_name="UTC") == "14:00"


def test_naive_values_fall_back_to_utc_without_zone():
    instant = parse_instant("2024-05-01 14:00:00", "No/Such_Zone")
    assert instant == dt.datetime(2024, 5, 1, 14, 0, tzinfo=dt.timezone.utc)
    assert to_display_time("2024-05-01 14:00:00", tz_name="No/Such_Zone") == "14:00"


def test_naive_local_time_converts_to_utc_instant():
    instant = parse_instant("2024-05-01 14:00:00", "Europe/Madrid")
    assert instant == dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)


def test_epoch_seconds_and_datetime_inputs():
    assert to_display_time(1714564800) == "14:00"
    assert to_display_time(dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)) == "14:00"


def test_unparseable_gives_placeholder():
    assert to_display_time("not a date") == PLACEHOLDER
    assert to_display_time(["2024-05-01"]) == PLACEHOLDER


def test_unknown_zone_falls_back_to_utc():
    assert to_display_time("2024-05-01T12:07:00Z", tz_name="Mars/Olympus_Mons") == "12:07"


def test_primary_and_fallback_paths():
    instant = parse_instant("2024-05-01T06:05:00Z")
    assert instant is not None
    assert format_zoned(instant, "Europe/Madrid") == "08:05"
    assert format_zoned(instant, "No/Such_Zone") is None
    assert format_utc(instant) == "06:05"
