import time
from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import AppSettings
from ..errors import HistoryError
from ..logging import init_logging
from ..services.history_service import HistoryService
from .middleware import (
    RequestIDMiddleware,
    generic_exception_handler,
    history_exception_handler,
    http_exception_handler,
)
from .routes import health, history, observations, ui


def create_app(settings: Optional[AppSettings] = None, history_service: Optional[HistoryService] = None) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service health and uptime"},
            {"name": "wu", "description": "Weather Underground station history"},
            {"name": "ui", "description": "HTML history viewer"},
        ],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(history.router, prefix="/api/wu", tags=["wu"])
    app.include_router(observations.router, prefix="/api/wu", tags=["wu"])
    app.include_router(ui.router, tags=["ui"])

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(HistoryError, history_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.state.settings = settings
    app.state.start_time = time.time()
    app.state.history_service = history_service or HistoryService(settings)

    return app


def run(settings: Optional[AppSettings] = None) -> None:
    import uvicorn

    s = settings or AppSettings()
    uvicorn.run(create_app(s), host=s.host, port=s.port, log_config=None)


if __name__ == "__main__":
    run()
