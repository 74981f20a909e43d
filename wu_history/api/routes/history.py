from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get(
    "/history",
    summary="Raw station history (pass-through)",
    responses={
        200: {"description": "Provider JSON, unchanged"},
        400: {"description": "Missing stationId or malformed date"},
        500: {"description": "API key not configured"},
        502: {"description": "Provider unreachable"},
    },
)
def history(
    request: Request,
    station_id: str = Query("", alias="stationId", description="PWS station id"),
    date: str = Query("", description="Day as YYYYMMDD"),
) -> JSONResponse:
    # HistoryError subclasses are rendered by history_exception_handler
    payload = request.app.state.history_service.fetch_raw(station_id, date)
    return JSONResponse(content=payload)
