import time
from fastapi import APIRouter, Request

import structlog
from ...schemas.health import HealthResponse

router = APIRouter()
logger = structlog.get_logger()


def _uptime(request: Request) -> float:
    started = float(getattr(request.app.state, "start_time", time.time()))
    return max(0.0, time.time() - started)


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health status",
    responses={
        200: {
            "description": "Service is up; api_key_configured tells whether the proxy can reach the provider",
        }
    },
)
def health(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    if not settings.api_key_configured:
        logger.warning("health_check_no_api_key", env=settings.app_env)
    return HealthResponse(
        status="ok",
        uptime_s=_uptime(request),
        version=settings.app_version,
        api_key_configured=settings.api_key_configured,
    )
