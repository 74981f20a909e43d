import re
from typing import Any, List, Optional

import structlog

from ..config import AppSettings
from ..errors import InvalidQueryError, MissingApiKeyError
from ..parsing import parse_response
from ..schemas.observation import NormalizedObservation
from .wu_client import HistoryClient, WundergroundClient

logger = structlog.get_logger(__name__)

_DATE_RE = re.compile(r"[0-9]{8}")
_INPUT_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def yyyymmdd_from_input(value: Optional[str]) -> Optional[str]:
    """Convert a form date (YYYY-MM-DD) into the provider format (YYYYMMDD)."""
    m = _INPUT_DATE_RE.fullmatch(value or "")
    return "".join(m.groups()) if m else None


def validate_query(station_id: Optional[str], date: Optional[str]) -> tuple[str, str]:
    station_id = (station_id or "").strip()
    date = (date or "").strip()
    if not station_id:
        raise InvalidQueryError("stationId is required")
    if not _DATE_RE.fullmatch(date):
        raise InvalidQueryError("date must be YYYYMMDD")
    return station_id, date


class HistoryService:
    def __init__(self, settings: AppSettings, client: Optional[HistoryClient] = None):
        self.settings = settings
        self.client = client or WundergroundClient.from_settings(settings)

    def fetch_raw(self, station_id: Optional[str], date: Optional[str]) -> Any:
        station_id, date = validate_query(station_id, date)
        if not self.settings.api_key_configured:
            logger.error("api_key_missing")
            raise MissingApiKeyError()
        payload = self.client.fetch_history(station_id, date, self.settings.wu_api_key.strip())
        logger.info("history_fetched", station_id=station_id, date=date)
        return payload

    def fetch_observations(self, station_id: Optional[str], date: Optional[str]) -> List[NormalizedObservation]:
        raw = self.fetch_raw(station_id, date)
        return parse_response(raw, self.settings.display_timezone)
