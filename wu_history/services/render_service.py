"""Table and KPI shaping for normalized observations.

Consumers (the HTML page and the CLI) only ever see formatted strings; all
number formatting and placeholder handling lives here.
"""

from __future__ import annotations

import html
import math
from typing import Any, Dict, Final, List, Optional, Sequence, Tuple

import pandas as pd

from ..parsing import PLACEHOLDER
from ..schemas.observation import Kpis, NormalizedObservation

# (attribute, header, decimals); decimals None means the value is already text
COLUMNS: Final[Tuple[Tuple[str, str, Optional[int]], ...]] = (
    ("when_madrid", "Time", None),
    ("temp", "Temp (°C)", 2),
    ("dew", "Dew point (°C)", 2),
    ("humidity", "Humidity (%)", 0),
    ("pres", "Pressure (hPa)", 1),
    ("wind", "Wind (km/h)", 1),
    ("gust", "Gust (km/h)", 1),
    ("dir_deg", "Dir (°)", 0),
    ("precip_rate", "Precip rate (mm/h)", 2),
    ("precip_total", "Precip total (mm)", 2),
    ("uv", "UV", 1),
    ("rad", "Radiation (W/m²)", 0),
)


def fmt(value: Any, digits: int = 0) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        v = float(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if not math.isfinite(v):
        return PLACEHOLDER
    return f"{v:.{digits}f}"


def build_table(rows: Sequence[NormalizedObservation]) -> pd.DataFrame:
    """One row per observation, every cell already formatted."""
    records = [
        {
            header: (getattr(r, attr) if digits is None else fmt(getattr(r, attr), digits))
            for attr, header, digits in COLUMNS
        }
        for r in rows
    ]
    return pd.DataFrame.from_records(records, columns=[header for _, header, _ in COLUMNS])


def compute_kpis(rows: Sequence[NormalizedObservation]) -> Kpis:
    temps = pd.Series([r.temp for r in rows], dtype="float64").dropna()
    if temps.empty:
        return Kpis(count=len(rows))
    return Kpis(count=len(rows), temp_min=float(temps.min()), temp_max=float(temps.max()))


def format_kpis(kpis: Kpis) -> Dict[str, str]:
    return {
        "count": str(kpis.count) if kpis.count else PLACEHOLDER,
        "min": fmt(kpis.temp_min, 2),
        "max": fmt(kpis.temp_max, 2),
    }


def render_text(rows: Sequence[NormalizedObservation]) -> str:
    if not rows:
        return "No observations."
    return build_table(rows).to_string(index=False)


def render_table_html(rows: Sequence[NormalizedObservation]) -> str:
    return build_table(rows).to_html(
        index=False,
        escape=True,
        border=0,
        table_id="dataTable",
        classes="data-table",
        na_rep=PLACEHOLDER,
    )


_PAGE: Final = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: system-ui, sans-serif; margin: 2rem; }}
.kpis {{ display: flex; gap: 2rem; margin: 1rem 0; }}
.data-table td {{ text-align: right; padding: 0 .5rem; }}
.data-table td:first-child {{ white-space: nowrap; }}
</style>
</head>
<body>
<h1>{title}</h1>
<form method="get" action="/">
  <label>Station <input id="stationId" name="stationId" value="{station}"></label>
  <label>Date <input id="date" name="date" type="date" value="{date}"></label>
  <button id="loadBtn" type="submit">Load</button>
</form>
<p id="status">{status}</p>
<div class="kpis">
  <div>Records: <strong id="kpiCount">{count}</strong></div>
  <div>Min temp: <strong id="kpiMin">{tmin}</strong></div>
  <div>Max temp: <strong id="kpiMax">{tmax}</strong></div>
</div>
{table}
</body>
</html>
"""


def render_page(
    title: str,
    station: str = "",
    date: str = "",
    status: str = "",
    rows: Optional[List[NormalizedObservation]] = None,
) -> str:
    rows = rows or []
    kpis = format_kpis(compute_kpis(rows))
    return _PAGE.format(
        title=html.escape(title),
        station=html.escape(station, quote=True),
        date=html.escape(date, quote=True),
        status=html.escape(status),
        count=kpis["count"],
        tmin=kpis["min"],
        tmax=kpis["max"],
        table=render_table_html(rows),
    )
