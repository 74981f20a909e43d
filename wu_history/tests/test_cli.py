import json

import pytest

from wu_history.client import cli
from wu_history.client.loader import BackendClient
from wu_history.tests.conftest import sample_payload


@pytest.fixture
def backend(monkeypatch):
    calls = []

    def _fetch(self, station_id, yyyymmdd):
        calls.append((self.base_url, station_id, yyyymmdd))
        return sample_payload()

    monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(BackendClient, "fetch_history", _fetch)
    return calls


def test_load_prints_table_and_kpis(backend, capsys):
    code = cli.main(["load", "--station", "IMADRI123", "--date", "2024-05-01", "--backend", "http://proxy.test"])
    out = capsys.readouterr().out
    assert code == 0
    assert backend == [("http://proxy.test", "IMADRI123", "20240501")]
    assert "14:00" in out
    assert "Records: 2  Min temp: 20.50  Max temp: 20.50" in out
    assert "Done (2 records)" in out


def test_load_json_output(backend, capsys):
    code = cli.main(["load", "--station", "IMADRI123", "--date", "2024-05-01", "--json"])
    rows = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [r["whenMadrid"] for r in rows] == ["14:00", "14:05"]
    assert rows[0]["temp"] == 20.5


def test_load_rejects_bad_date(backend, capsys):
    code = cli.main(["load", "--station", "IMADRI123", "--date", "May 1"])
    assert code == 1
    assert "Select a date first." in capsys.readouterr().err
    assert backend == []
