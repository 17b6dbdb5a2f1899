import json
from datetime import date

import pytest

from api.services.settings_store import KEY_DOB, SettingsError, SettingsStore, epoch_day, from_epoch_day
from api.services.shell_state import CHART_DISPLAYED, NO_BIRTH_DATE, PICKER_OPEN, view_state


def test_epoch_day_round_trip_edges():
    assert epoch_day(date(1970, 1, 1)) == 0
    assert epoch_day(date(1969, 12, 31)) == -1
    assert from_epoch_day(10957) == date(2000, 1, 1)


def test_missing_file_means_no_birth_date(tmp_path):
    store = SettingsStore(tmp_path / "settings.json")
    assert store.load_birth_date() is None


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path)
    store.save_birth_date(date(1990, 8, 18))
    assert json.loads(path.read_text()) == {KEY_DOB: epoch_day(date(1990, 8, 18))}
    assert SettingsStore(path).load_birth_date() == date(1990, 8, 18)


def test_save_keeps_other_keys_and_clear(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"theme": "dark"}))
    store = SettingsStore(path)
    store.save_birth_date(date(2000, 1, 1))
    assert json.loads(path.read_text()) == {"theme": "dark", KEY_DOB: 10957}
    store.clear()
    assert store.load_birth_date() is None
    assert json.loads(path.read_text()) == {"theme": "dark"}


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(SettingsError):
        SettingsStore(path).load_birth_date()


def test_view_state():
    assert view_state(None) == NO_BIRTH_DATE
    assert view_state(date(2000, 1, 1)) == CHART_DISPLAYED
    assert view_state(None, picker_requested=True) == PICKER_OPEN


@pytest.mark.parametrize("raw", ["abc", 10**12, [1, 2]])
def test_invalid_stored_value_raises_settings_error(tmp_path, raw):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({KEY_DOB: raw}))
    with pytest.raises(SettingsError):
        SettingsStore(path).load_birth_date()


def test_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    from api.services import settings_store

    def boom(*args, **kwargs):
        raise OSError("disk full")

    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    store.save_birth_date(date(2000, 1, 1))
    monkeypatch.setattr(settings_store.os, "replace", boom)
    with pytest.raises(OSError):
        store.save_birth_date(date(1990, 8, 18))
    assert sorted(p.name for p in tmp_path.iterdir()) == ["settings.json"]
    assert store.load_birth_date() == date(2000, 1, 1)
