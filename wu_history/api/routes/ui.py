from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

import structlog
from ...services.history_service import yyyymmdd_from_input
from ...errors import HistoryError
from ...services.render_service import render_page

router = APIRouter()
logger = structlog.get_logger()

STATUS_SELECT_DATE = "Select a date first."
STATUS_ERROR = "Error loading"


@router.get("/", response_class=HTMLResponse, summary="History viewer page")
def index(
    request: Request,
    station_id: str = Query("", alias="stationId"),
    date: str = Query("", description="Day as YYYY-MM-DD"),
) -> HTMLResponse:
    title = request.app.state.settings.app_name
    station = station_id.strip()
    if not station and not date:
        return HTMLResponse(render_page(title))

    yyyymmdd = yyyymmdd_from_input(date)
    if not station or not yyyymmdd:
        return HTMLResponse(render_page(title, station, date, STATUS_SELECT_DATE))

    try:
        rows = request.app.state.history_service.fetch_observations(station, yyyymmdd)
    except HistoryError as e:
        logger.error("page_load_failed", station_id=station, date=yyyymmdd, status=e.status_code, error=e.message)
        return HTMLResponse(render_page(title, station, date, STATUS_ERROR))

    return HTMLResponse(render_page(title, station, date, f"Done ({len(rows)} records)", rows))
