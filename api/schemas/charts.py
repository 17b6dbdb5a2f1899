from datetime import date
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal, Dict, Any

from ..services.util.chart_defaults import resolve_window

CycleName = Literal["physical", "emotional", "intellectual"]

class SeriesInput(BaseModel):
    birth_date: date  # YYYY-MM-DD
    center_date: Optional[date] = None  # defaults to today
    days_before: Optional[int] = Field(default=None, ge=0, le=366)
    days_after: Optional[int] = Field(default=None, ge=0, le=366)

    @model_validator(mode="after")
    def _window_within_calendar(self):
        center = self.center_date or date.today()
        before, after = resolve_window(self.days_before, self.days_after)
        if center.toordinal() - before < date.min.toordinal():
            raise ValueError("window starts before 0001-01-01")
        if center.toordinal() + after > date.max.toordinal():
            raise ValueError("window ends after 9999-12-31")
        return self

class SeriesRequest(SeriesInput):
    pass

class ChartRequest(SeriesInput):
    width: Optional[float] = Field(default=None, gt=0, le=4096)
    height: Optional[float] = Field(default=None, gt=0, le=4096)

class PointOut(BaseModel):
    date: date
    physical: float
    emotional: float
    intellectual: float

class CycleValueOut(BaseModel):
    name: CycleName
    label: str
    color: str
    value: float
    pct: int
    display: str

class ReadoutOut(BaseModel):
    date: date
    values: List[CycleValueOut]

class WindowOut(BaseModel):
    center_date: date
    start_date: date
    end_date: date
    days_before: int
    days_after: int

class SeriesResponse(BaseModel):
    birth_date: date
    window: WindowOut
    points: List[PointOut]
    today: Optional[ReadoutOut] = None

class ChartOpsResponse(BaseModel):
    width: float
    height: float
    frame: Dict[str, float]
    ops: List[Dict[str, Any]]

class CycleInfoOut(BaseModel):
    name: CycleName
    label: str
    period: int
    color: str

class InfoResponse(BaseModel):
    title: str
    text: str
    cycles: List[CycleInfoOut]
