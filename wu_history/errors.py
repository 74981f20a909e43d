"""Exception classes for the history proxy.

Routes translate these into HTTP responses; the parsing layer never raises
them.
"""

from __future__ import annotations

from typing import Optional


class HistoryError(Exception):
    """Base class for errors while serving station history."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidQueryError(HistoryError):
    """Station id or date failed validation."""

    status_code = 400


class MissingApiKeyError(HistoryError):
    """The upstream API key is not configured."""

    status_code = 500

    def __init__(self, message: str = "Weather API key is not configured") -> None:
        super().__init__(message)


class UpstreamError(HistoryError):
    """Upstream answered with a non-2xx status.

    Carries the upstream status and body so they can be forwarded unchanged.
    """

    def __init__(self, status_code: int, body: bytes, content_type: Optional[str] = None) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body
        self.content_type = content_type or "application/json"

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500


class UpstreamUnavailableError(HistoryError):
    """Upstream could not be reached (connection error, timeout)."""

    status_code = 502
