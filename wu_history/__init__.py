"""wu-history: Weather Underground station history proxy and viewer.

Subpackages:
- parsing: normalization of raw provider observations.
- services: upstream client, history orchestration and rendering.
- api: FastAPI application, routes and middleware.
- client: backend client, load state machine and CLI.
- tests: unit and API tests.
"""

__version__ = "0.1.0"

__all__ = [
    "parsing",
    "services",
    "api",
    "client",
]
