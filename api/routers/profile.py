from fastapi import APIRouter, HTTPException, Query

from ..schemas import BirthDateIn, BirthDateOut
from ..services import shell_state
from ..services.settings_store import SettingsError, epoch_day, get_store

router = APIRouter(prefix="/v1/profile", tags=["profile"])


def _out(birth, picker: bool = False) -> BirthDateOut:
    return BirthDateOut(
        birth_date=birth,
        epoch_day=epoch_day(birth) if birth is not None else None,
        view_state=shell_state.view_state(birth, picker_requested=picker),
    )


@router.get("/birth-date", response_model=BirthDateOut)
def get_birth_date(picker: bool = Query(default=False, description="The shell has the date picker open")):
    try:
        birth = get_store().load_birth_date()
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return _out(birth, picker)


@router.put("/birth-date", response_model=BirthDateOut)
def put_birth_date(req: BirthDateIn):
    try:
        get_store().save_birth_date(req.birth_date)
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return _out(req.birth_date)


@router.delete("/birth-date", response_model=BirthDateOut)
def delete_birth_date():
    try:
        get_store().clear()
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return _out(None)
