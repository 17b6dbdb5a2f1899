from datetime import date
from pydantic import BaseModel
from typing import Optional, Literal

ViewState = Literal["no_birth_date", "picker_open", "chart_displayed"]

class BirthDateIn(BaseModel):
    birth_date: date

class BirthDateOut(BaseModel):
    birth_date: Optional[date] = None
    epoch_day: Optional[int] = None
    view_state: ViewState
