from .charts import (
    SeriesInput,
    SeriesRequest,
    ChartRequest,
    PointOut,
    CycleValueOut,
    ReadoutOut,
    WindowOut,
    SeriesResponse,
    ChartOpsResponse,
    CycleInfoOut,
    InfoResponse,
)

from .profile import BirthDateIn, BirthDateOut
