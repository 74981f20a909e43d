from fastapi import APIRouter, Query, Request

import structlog
from ...schemas.observation import ObservationsResponse
from ...services.history_service import validate_query
from ...services.render_service import compute_kpis

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/observations",
    response_model=ObservationsResponse,
    summary="Normalized station history",
    responses={
        400: {"description": "Missing stationId or malformed date"},
        500: {"description": "API key not configured"},
        502: {"description": "Provider unreachable"},
    },
)
def observations(
    request: Request,
    station_id: str = Query("", alias="stationId", description="PWS station id"),
    date: str = Query("", description="Day as YYYYMMDD"),
) -> ObservationsResponse:
    station_id, day = validate_query(station_id, date)
    rows = request.app.state.history_service.fetch_observations(station_id, day)
    logger.info("observations_served", station_id=station_id, date=day, count=len(rows))
    return ObservationsResponse(
        station_id=station_id,
        date=day,
        count=len(rows),
        kpis=compute_kpis(rows),
        observations=rows,
    )
