from typing import Any, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from wu_history.api.main import create_app
from wu_history.config import AppSettings
from wu_history.services.history_service import HistoryService


class FakeHistoryClient:
    """Stands in for WundergroundClient; records every call."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: List[Tuple[str, str, str]] = []

    def fetch_history(self, station_id: str, date: str, api_key: str) -> Any:
        self.calls.append((station_id, date, api_key))
        if self.error is not None:
            raise self.error
        return self.payload


def sample_payload() -> dict:
    return {
        "observations": [
            {
                "stationID": "IMADRI123",
                "obsTimeUtc": "2024-05-01T12:00:00Z",
                "obsTimeLocal": "2024-05-01 14:00:00",
                "winddir": 200,
                "humidityAvg": 61,
                "uvHigh": 5.2,
                "solarRadiationHigh": 612.4,
                "metric": {
                    "tempAvg": 20.5,
                    "dewpt": 12.3,
                    "windSpeedAvg": 8.1,
                    "windGustMax": 15.0,
                    "pressureMean": 1016.1,
                    "precipRate": 0.0,
                    "precipTotal": 0.25,
                },
            },
            {
                "stationID": "IMADRI123",
                "obsTimeUtc": "2024-05-01T12:05:00Z",
                "metric": {},
            },
        ]
    }


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, wu_api_key="test-key", log_level="WARNING")


@pytest.fixture
def fake_upstream() -> FakeHistoryClient:
    return FakeHistoryClient(payload=sample_payload())


@pytest.fixture
def app(settings: AppSettings, fake_upstream: FakeHistoryClient):
    return create_app(settings, HistoryService(settings, client=fake_upstream))


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
