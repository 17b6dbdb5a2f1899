import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.services import settings_store

client = TestClient(app)


@pytest.fixture
def store(tmp_path, monkeypatch):
    s = settings_store.SettingsStore(tmp_path / "settings.json")
    monkeypatch.setattr(settings_store, "STORE", s)
    return s


def test_health():
    assert client.get("/__health").json() == {"ok": True}


def test_series_endpoint():
    payload = {"birth_date": "2000-01-01", "center_date": "2000-01-24", "days_before": 2, "days_after": 3}
    res = client.post("/v1/biorhythm/series", json=payload)
    assert res.status_code == 200, res.text
    data = res.json()
    assert data["window"] == {
        "center_date": "2000-01-24",
        "start_date": "2000-01-22",
        "end_date": "2000-01-27",
        "days_before": 2,
        "days_after": 3,
    }
    assert [p["date"] for p in data["points"]][2] == "2000-01-24"
    assert len(data["points"]) == 6
    today = data["today"]
    assert today["date"] == "2000-01-24"
    physical = today["values"][0]
    assert physical["name"] == "physical"
    assert physical["pct"] == 0
    assert physical["display"] == "0"


def test_series_default_window():
    res = client.post("/v1/biorhythm/series", json={"birth_date": "1990-08-18", "center_date": "2024-06-15"})
    assert res.status_code == 200
    assert len(res.json()["points"]) == 31


def test_series_rejects_negative_window():
    res = client.post("/v1/biorhythm/series", json={"birth_date": "1990-08-18", "days_before": -1})
    assert res.status_code == 422


def test_chart_svg():
    payload = {"birth_date": "1990-08-18", "center_date": "2024-06-15", "width": 600, "height": 240}
    res = client.post("/v1/biorhythm/chart.svg", json=payload)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("image/svg+xml")
    assert res.text.startswith("<svg")
    assert 'viewBox="0 0 600 240"' in res.text


def test_chart_pdf():
    payload = {"birth_date": "1990-08-18", "center_date": "2024-06-15"}
    res = client.post("/v1/biorhythm/chart.pdf", json=payload)
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert res.content.startswith(b"%PDF")


def test_chart_ops():
    payload = {"birth_date": "1990-08-18", "center_date": "2024-06-15", "days_before": 1, "days_after": 1,
               "width": 100, "height": 60}
    res = client.post("/v1/biorhythm/chart/ops", json=payload)
    assert res.status_code == 200
    data = res.json()
    assert data["frame"] == {"left": 16.0, "right": 92.0, "top": 8.0, "bottom": 32.0}
    kinds = [op["kind"] for op in data["ops"]]
    assert kinds == ["rect"] + ["line"] * 8 + ["text"] * 3 + ["path"] * 3


def test_info():
    data = client.get("/v1/biorhythm/info").json()
    assert [c["period"] for c in data["cycles"]] == [23, 28, 33]
    assert "23 days" in data["text"]


def test_profile_flow(store):
    res = client.get("/v1/profile/birth-date")
    assert res.json() == {"birth_date": None, "epoch_day": None, "view_state": "no_birth_date"}
    assert client.get("/v1/biorhythm/today").status_code == 409

    res = client.put("/v1/profile/birth-date", json={"birth_date": "2000-01-01"})
    assert res.status_code == 200
    assert res.json() == {"birth_date": "2000-01-01", "epoch_day": 10957, "view_state": "chart_displayed"}
    assert store.load_birth_date() == date(2000, 1, 1)

    res = client.get("/v1/biorhythm/today")
    assert res.status_code == 200
    data = res.json()
    assert data["birth_date"] == "2000-01-01"
    assert data["today"]["date"] == data["window"]["center_date"]

    res = client.delete("/v1/profile/birth-date")
    assert res.json()["view_state"] == "no_birth_date"
    assert store.load_birth_date() is None


def test_corrupt_settings_is_server_error(store):
    store.path.write_text("{oops")
    assert client.get("/v1/profile/birth-date").status_code == 500


def test_access_log(monkeypatch, caplog):
    monkeypatch.setenv("LOGGING_ENABLED", "true")
    with caplog.at_level(logging.INFO, logger="api.access"):
        client.get("/__health")
    assert any('"endpoint": "/__health"' in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "route,payload",
    [
        ("/v1/biorhythm/series", {"birth_date": "0001-01-01", "center_date": "0001-01-05", "days_before": 10}),
        ("/v1/biorhythm/chart.svg", {"birth_date": "1990-08-18", "center_date": "9999-12-30", "days_after": 5}),
    ],
)
def test_window_past_calendar_edges_is_rejected(route, payload):
    res = client.post(route, json=payload)
    assert res.status_code == 422


def test_window_touching_calendar_edges_is_accepted():
    payload = {"birth_date": "0001-01-01", "center_date": "0001-01-05", "days_before": 4, "days_after": 0}
    res = client.post("/v1/biorhythm/series", json=payload)
    assert res.status_code == 200
    assert res.json()["window"]["start_date"] == "0001-01-01"
    payload = {"birth_date": "1990-08-18", "center_date": "9999-12-30", "days_before": 0, "days_after": 1}
    res = client.post("/v1/biorhythm/series", json=payload)
    assert res.status_code == 200
    assert res.json()["window"]["end_date"] == "9999-12-31"


def test_chart_width_only_derives_height():
    payload = {"birth_date": "1990-08-18", "center_date": "2024-06-15", "width": 1000}
    res = client.post("/v1/biorhythm/chart.svg", json=payload)
    assert res.status_code == 200
    assert 'viewBox="0 0 1000 450"' in res.text


def test_profile_picker_state(store):
    res = client.get("/v1/profile/birth-date", params={"picker": "true"})
    assert res.json()["view_state"] == "picker_open"


@pytest.mark.parametrize("raw", ['{"dob_epoch_day": "abc"}', '{"dob_epoch_day": 1000000000000}'])
def test_invalid_stored_value_is_server_error(store, raw):
    store.path.write_text(raw)
    assert client.get("/v1/profile/birth-date").status_code == 500
    assert client.get("/v1/biorhythm/today").status_code == 500
