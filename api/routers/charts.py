from datetime import date, timedelta
import logging
from typing import Tuple

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..schemas import ChartRequest, ChartOpsResponse, InfoResponse, SeriesInput, SeriesRequest, SeriesResponse
from ..services import chart_renderer, readout as readout_svc, shell_state
from ..services.series import Series, center_point, generate_series
from ..services.settings_store import SettingsError, get_store
from ..services.surfaces import PdfSurface, RecordingSurface, SvgSurface
from ..services.util.chart_defaults import DEF_HEIGHT, DEF_WIDTH, resolve_window

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/biorhythm", tags=["biorhythm"])


def _series_for(req: SeriesInput) -> Tuple[date, int, int, Series]:
    center = req.center_date or date.today()
    before, after = resolve_window(req.days_before, req.days_after)
    return center, before, after, generate_series(req.birth_date, center, before, after)


def _series_response(birth: date, center: date, before: int, after: int, series: Series) -> SeriesResponse:
    return SeriesResponse(
        birth_date=birth,
        window={
            "center_date": center,
            "start_date": center - timedelta(days=before),
            "end_date": center + timedelta(days=after),
            "days_before": before,
            "days_after": after,
        },
        points=[p.as_dict() for p in series],
        today=readout_svc.build_readout(center_point(series, before)),
    )


def _size(req: ChartRequest) -> Tuple[float, float]:
    if req.height:
        return req.width or DEF_WIDTH, req.height
    if req.width:
        # width-only requests get a height proportioned to that width
        return req.width, chart_renderer.chart_height(req.width, req.width)
    return DEF_WIDTH, DEF_HEIGHT


@router.post("/series", response_model=SeriesResponse)
def compute_series(req: SeriesRequest):
    center, before, after, series = _series_for(req)
    return _series_response(req.birth_date, center, before, after, series)


@router.post("/chart.svg", response_class=Response)
def chart_svg(req: ChartRequest):
    center, before, after, series = _series_for(req)
    width, height = _size(req)
    surface = SvgSurface(width, height)
    chart_renderer.render_chart(surface, series, width, height, before, after, center)
    return Response(content=surface.to_svg(), media_type="image/svg+xml")


@router.post("/chart.pdf", response_class=Response)
def chart_pdf(req: ChartRequest):
    center, before, after, series = _series_for(req)
    width, height = _size(req)
    surface = PdfSurface(width, height, title=f"Biorhythms {center.isoformat()}")
    chart_renderer.render_chart(surface, series, width, height, before, after, center)
    return Response(content=surface.to_pdf(), media_type="application/pdf")


@router.post("/chart/ops", response_model=ChartOpsResponse)
def chart_ops(req: ChartRequest):
    center, before, after, series = _series_for(req)
    width, height = _size(req)
    surface = RecordingSurface()
    frame = chart_renderer.render_chart(surface, series, width, height, before, after, center)
    return ChartOpsResponse(
        width=width,
        height=height,
        frame={"left": frame.left, "right": frame.right, "top": frame.top, "bottom": frame.bottom},
        ops=surface.to_dicts(),
    )


@router.get("/today", response_model=SeriesResponse)
def today():
    try:
        birth = get_store().load_birth_date()
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    if birth is None:
        logger.info("biorhythm_today_birth_date_missing")
        raise HTTPException(status_code=409, detail="Birth date not set")
    center = date.today()
    before, after = resolve_window(None, None)
    series = generate_series(birth, center, before, after)
    return _series_response(birth, center, before, after, series)


@router.get("/info", response_model=InfoResponse)
def info():
    return shell_state.info_payload()
