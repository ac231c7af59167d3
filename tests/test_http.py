from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from idleview.api.facade import IdleviewAPI
from idleview.api.http import create_app
from idleview.settings.store import SettingsStore


@pytest.fixture
def client(api: IdleviewAPI) -> TestClient:
    return TestClient(create_app(api))


def test_health(client: TestClient) -> None:
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": "idleview-api"}


def test_get_settings_defaults(client: TestClient) -> None:
    resp = client.get("/api/settings")
    assert resp.status_code == 200
    assert resp.json() == {
        "units": {
            "temperature_unit": "celsius",
            "time_format": "24h",
            "date_format": "dmy",
            "wind_speed_unit": "kmh",
        },
        "display": {
            "show_humidity_wind": True,
            "show_precipitation_cloudiness": True,
            "show_sunrise_sunset": True,
            "show_cpu_temp": False,
            "theme": "default",
        },
        "photos": {"refresh_interval": 30, "photo_quality": "80"},
    }


def test_put_replaces_document(client: TestClient, settings_path: Path) -> None:
    resp = client.put("/api/settings", json={"units": {"temperature_unit": "fahrenheit"}})
    assert resp.status_code == 200
    assert resp.json()["units"]["temperature_unit"] == "fahrenheit"
    assert resp.json()["display"]["theme"] == "default"
    assert settings_path.exists()


def test_patch_merges(client: TestClient) -> None:
    client.patch("/api/settings", json={"display": {"theme": "nest"}})
    resp = client.patch("/api/settings", json={"photos": {"photo_quality": 95}})

    body = resp.json()
    assert resp.status_code == 200
    assert body["display"]["theme"] == "nest"
    assert body["photos"] == {"refresh_interval": 30, "photo_quality": "95"}


def test_invalid_patch_is_500_with_error(client: TestClient, store: SettingsStore) -> None:
    before = store.get()
    resp = client.patch("/api/settings", json={"photos": {"refresh_interval": 0}})

    assert resp.status_code == 500
    assert "refresh_interval" in resp.json()["error"]
    assert store.get() == before


def test_invalid_put_is_500_with_error(client: TestClient) -> None:
    resp = client.put("/api/settings", json={"display": {"show_cpu_temp": "sometimes"}})
    assert resp.status_code == 500
    assert "error" in resp.json()


def test_reset(client: TestClient) -> None:
    client.patch("/api/settings", json={"units": {"time_format": "12h"}})
    resp = client.post("/api/settings/reset")
    assert resp.status_code == 200
    assert resp.json()["units"]["time_format"] == "24h"


def test_current_photo(client: TestClient) -> None:
    assert client.get("/api/photo/current").json() is None

    photo = {"url": "https://img/1", "author": "Ansel", "author_url": "https://u/ansel"}
    assert client.post("/api/photo/current", json=photo).json() == photo
    assert client.get("/api/photo/current").json() == photo


def test_cors_allows_any_origin(client: TestClient) -> None:
    resp = client.get("/api/health", headers={"Origin": "http://phone.local"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_static_page_is_served(api: IdleviewAPI, tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<h1>remote</h1>")
    client = TestClient(create_app(api, tmp_path))

    assert "remote" in client.get("/").text
    assert client.get("/api/health").status_code == 200


def test_null_patch_is_a_no_op(client: TestClient, store: SettingsStore) -> None:
    client.patch("/api/settings", json={"display": {"theme": "nest"}})

    resp = client.patch(
        "/api/settings", content="null", headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == 200
    assert resp.json()["display"]["theme"] == "nest"
    assert store.get().display.theme == "nest"


def test_wrongly_typed_patch_is_rejected(client: TestClient) -> None:
    resp = client.patch("/api/settings", json={"photos": {"refresh_interval": "30"}})
    assert resp.status_code == 500
    assert "refresh_interval" in resp.json()["error"]
