from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import requests
import structlog
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import UpstreamError, UpstreamUnavailableError

logger = structlog.get_logger(__name__)


class HistoryClient(Protocol):
    """Provider interface for one station's observations on one day.

    Implementations return the decoded JSON body on success and raise
    `UpstreamError` / `UpstreamUnavailableError` otherwise.
    """

    def fetch_history(self, station_id: str, date: str, api_key: str) -> Any:
        """Fetch all observations for a station and day.

        Parameters
        ----------
        station_id : str
            PWS station identifier, e.g. ``IMADRI123``.
        date : str
            Day in ``YYYYMMDD`` form.
        api_key : str
            Provider API key.

        Returns
        -------
        Any
            Decoded JSON, normally ``{"observations": [...]}``.
        """
        ...


@dataclass
class WundergroundClient:
    """weather.com PWS "history/all" implementation of `HistoryClient`.

    Notes and assumptions:
    - Metric units and decimal precision are always requested.
    - HTTP 204 means the station reported nothing that day; it is returned
      as an empty observation list.
    - Retries for transient errors (429/5xx) are off unless ``max_retries`` > 0.
    """

    base_url: str = "https://api.weather.com/v2/pws/history/all"
    timeout_connect: float = 5.0
    timeout_read: float = 15.0
    max_retries: int = 0
    backoff_factor: float = 0.5

    def _session(self) -> requests.Session:
        s = requests.Session()
        retries = Retry(
            total=self.max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        s.mount("https://", adapter)
        s.mount("http://", adapter)
        return s

    def fetch_history(self, station_id: str, date: str, api_key: str) -> Any:
        params = {
            "stationId": station_id,
            "date": date,
            "format": "json",
            "units": "m",
            "numericPrecision": "decimal",
            "apiKey": api_key,
        }

        timeout = (self.timeout_connect, self.timeout_read)
        try:
            with self._session() as s:
                resp = s.get(self.base_url, params=params, timeout=timeout)
        except requests.RequestException as e:
            logger.warning("upstream_unreachable", station_id=station_id, date=date, error=str(e))
            raise UpstreamUnavailableError(f"Weather provider unreachable: {e}") from e

        if resp.status_code == 204:
            logger.info("upstream_no_content", station_id=station_id, date=date)
            return {"observations": []}

        if not 200 <= resp.status_code < 300:
            logger.error("upstream_error", station_id=station_id, date=date, status=resp.status_code)
            raise UpstreamError(resp.status_code, resp.content, resp.headers.get("content-type"))

        try:
            return resp.json()
        except ValueError as e:
            logger.error("upstream_invalid_json", station_id=station_id, date=date, error=str(e))
            raise UpstreamUnavailableError("Weather provider returned invalid JSON") from e

    @classmethod
    def from_settings(cls, settings: Any) -> "WundergroundClient":
        return cls(
            base_url=settings.wu_base_url,
            timeout_connect=settings.wu_timeout_connect,
            timeout_read=settings.wu_timeout_read,
            max_retries=settings.wu_max_retries,
        )
