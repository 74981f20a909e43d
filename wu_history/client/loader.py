"""Client-side load cycle: fetch from the proxy, normalize, keep the result.

The lifecycle is IDLE -> LOADING -> DONE | ERROR. A load requested while one
is in flight is ignored; a failed load keeps the previous rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Protocol

import requests
import structlog

from ..parsing import DISPLAY_TIMEZONE, parse_response
from ..schemas.observation import Kpis, NormalizedObservation
from ..services.history_service import yyyymmdd_from_input
from ..services.render_service import compute_kpis

logger = structlog.get_logger(__name__)

STATUS_SELECT_DATE = "Select a date first."
STATUS_LOADING = "Loading…"
STATUS_ERROR = "Error loading"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    ERROR = "error"


_TRANSITIONS: Dict[LoadState, FrozenSet[LoadState]] = {
    LoadState.IDLE: frozenset({LoadState.LOADING}),
    LoadState.LOADING: frozenset({LoadState.DONE, LoadState.ERROR}),
    LoadState.DONE: frozenset({LoadState.LOADING}),
    LoadState.ERROR: frozenset({LoadState.LOADING}),
}


class HistorySource(Protocol):
    def fetch_history(self, station_id: str, yyyymmdd: str) -> Any: ...


@dataclass
class BackendClient:
    """Calls the proxy's pass-through endpoint. No retries."""

    base_url: str = "http://127.0.0.1:8000"
    timeout: float = 30.0

    def fetch_history(self, station_id: str, yyyymmdd: str) -> Any:
        url = f"{self.base_url.rstrip('/')}/api/wu/history"
        resp = requests.get(
            url,
            params={"stationId": station_id, "date": yyyymmdd},
            headers={"Cache-Control": "no-store"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()


class HistoryLoader:
    def __init__(self, source: HistorySource, tz_name: str = DISPLAY_TIMEZONE) -> None:
        self.source = source
        self.tz_name = tz_name
        self.state = LoadState.IDLE
        self.status = ""
        self.rows: List[NormalizedObservation] = []

    @property
    def kpis(self) -> Kpis:
        return compute_kpis(self.rows)

    def _transition(self, new: LoadState) -> None:
        if new not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"invalid load transition {self.state.value} -> {new.value}")
        logger.debug("load_state", old=self.state.value, new=new.value)
        self.state = new

    def _fail(self) -> LoadState:
        self.status = STATUS_ERROR
        self._transition(LoadState.ERROR)
        return self.state

    def load(self, station_id: str, date_value: str) -> LoadState:
        """Run one load cycle for a station and a ``YYYY-MM-DD`` date."""
        if self.state is LoadState.LOADING:
            logger.info("load_ignored_in_flight", station_id=station_id)
            return self.state

        station_id = (station_id or "").strip()
        yyyymmdd = yyyymmdd_from_input(date_value)
        if not station_id or not yyyymmdd:
            self.status = STATUS_SELECT_DATE
            return self.state

        self._transition(LoadState.LOADING)
        self.status = STATUS_LOADING
        try:
            raw = self.source.fetch_history(station_id, yyyymmdd)
            rows = parse_response(raw, self.tz_name)
        except (requests.RequestException, ValueError) as e:
            logger.error("load_failed", station_id=station_id, date=yyyymmdd, error=str(e))
            return self._fail()
        except Exception as e:
            logger.exception("load_failed_unexpected", station_id=station_id, date=yyyymmdd, error=str(e))
            return self._fail()

        self.rows = rows
        self.status = f"Done ({len(rows)} records)"
        self._transition(LoadState.DONE)
        logger.info("load_done", station_id=station_id, date=yyyymmdd, count=len(rows))
        return self.state
