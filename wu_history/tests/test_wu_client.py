import unittest
from unittest.mock import Mock, patch

import requests

from wu_history.config import AppSettings
from wu_history.errors import UpstreamError, UpstreamUnavailableError
from wu_history.services.wu_client import WundergroundClient


class TestWundergroundClient(unittest.TestCase):
    def _fake_response(self, payload=None, status_code: int = 200, content: bytes = b"") -> Mock:
        m = Mock()
        m.status_code = status_code
        m.content = content
        m.headers = {"content-type": "application/json; charset=UTF-8"}
        m.json.return_value = payload
        return m

    @patch("requests.Session.get")
    def test_fetch_history_happy_path(self, mock_get: Mock) -> None:
        payload = {"observations": [{"stationID": "IMADRI123", "metric": {"tempAvg": 20.5}}]}
        mock_get.return_value = self._fake_response(payload)

        client = WundergroundClient()
        out = client.fetch_history("IMADRI123", "20240501", "secret")

        self.assertEqual(out, payload)
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://api.weather.com/v2/pws/history/all")
        self.assertEqual(
            kwargs["params"],
            {
                "stationId": "IMADRI123",
                "date": "20240501",
                "format": "json",
                "units": "m",
                "numericPrecision": "decimal",
                "apiKey": "secret",
            },
        )
        self.assertEqual(kwargs["timeout"], (5.0, 15.0))

    @patch("requests.Session.get")
    def test_no_content_is_empty_history(self, mock_get: Mock) -> None:
        mock_get.return_value = self._fake_response(status_code=204)
        out = WundergroundClient().fetch_history("IMADRI123", "20240501", "secret")
        self.assertEqual(out, {"observations": []})

    @patch("requests.Session.get")
    def test_error_status_is_forwarded(self, mock_get: Mock) -> None:
        body = b'{"errors":[{"error":{"code":"CDN-0001","message":"Invalid apiKey."}}]}'
        mock_get.return_value = self._fake_response(status_code=401, content=body)

        with self.assertRaises(UpstreamError) as ctx:
            WundergroundClient().fetch_history("IMADRI123", "20240501", "bad")
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.body, body)
        self.assertTrue(ctx.exception.is_client_error)
        self.assertEqual(ctx.exception.content_type, "application/json; charset=UTF-8")

    @patch("requests.Session.get")
    def test_connection_error_is_unavailable(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(UpstreamUnavailableError):
            WundergroundClient().fetch_history("IMADRI123", "20240501", "secret")

    @patch("requests.Session.get")
    def test_invalid_json_is_unavailable(self, mock_get: Mock) -> None:
        resp = self._fake_response()
        resp.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = resp
        with self.assertRaises(UpstreamUnavailableError):
            WundergroundClient().fetch_history("IMADRI123", "20240501", "secret")

    def test_from_settings(self) -> None:
        s = AppSettings(_env_file=None, wu_base_url="http://wu.test/history", wu_max_retries=2, wu_timeout_read=3.0)
        client = WundergroundClient.from_settings(s)
        self.assertEqual(client.base_url, "http://wu.test/history")
        self.assertEqual(client.max_retries, 2)
        self.assertEqual(client.timeout_read, 3.0)


if __name__ == "__main__":
    unittest.main()
