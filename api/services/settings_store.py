"""File-backed store for the single persisted setting: the birth date.

The value is kept as an integer day count from 1970-01-01 under the key
``dob_epoch_day``. The store is protected by a threading lock so the API
handlers can read and write it concurrently.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from .util.chart_defaults import DEF_SETTINGS_PATH

logger = logging.getLogger(__name__)

KEY_DOB = "dob_epoch_day"
EPOCH = date(1970, 1, 1)


class SettingsError(RuntimeError):
    """Raised when the settings file exists but cannot be parsed."""


def epoch_day(d: date) -> int:
    return (d - EPOCH).days


def from_epoch_day(days: int) -> date:
    return EPOCH + timedelta(days=int(days))


class SettingsStore:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            logger.exception("settings_store_read_failed", extra={"path": str(self.path)})
            raise SettingsError(f"Unreadable settings file: {self.path}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file is not a JSON object: {self.path}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    # Birth date ---------------------------------------------------------

    def load_birth_date(self) -> Optional[date]:
        with self._lock:
            raw = self._read().get(KEY_DOB)
        if raw is None:
            return None
        try:
            return from_epoch_day(raw)
        except (TypeError, ValueError, OverflowError) as exc:
            logger.exception("settings_store_birth_date_invalid", extra={"path": str(self.path)})
            raise SettingsError(f"Invalid {KEY_DOB} value in {self.path}: {raw!r}") from exc

    def save_birth_date(self, d: date) -> None:
        with self._lock:
            data = self._read()
            data[KEY_DOB] = epoch_day(d)
            self._write(data)
        logger.info("settings_store_birth_date_saved", extra={"epoch_day": epoch_day(d)})

    def clear(self) -> None:
        with self._lock:
            data = self._read()
            if data.pop(KEY_DOB, None) is not None:
                self._write(data)


# Global store used by the API routers.
STORE = SettingsStore(DEF_SETTINGS_PATH)


def get_store() -> SettingsStore:
    return STORE
