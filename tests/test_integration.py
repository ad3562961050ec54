import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from servicearea.api.dependencies import resolve_codec
from servicearea.config import Settings
from servicearea.data import tables
from servicearea.data.cantons import RegionRegistry
from servicearea.data.postal_ranges import PostalRangeIndex
from servicearea.main import create_app
from servicearea.models.domain import Region
from servicearea.services.service_areas import ServiceAreaCodec


@pytest.fixture(autouse=True)
def clear_tables():
    tables.clear_table_cache()
    yield
    tables.clear_table_cache()


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}

    report = api_client.get("/api/health/tables").json()
    assert report["regions"] == 26
    assert report["regions_with_ranges"] == 26
    assert report["regions_without_ranges"] == []


def test_list_regions(api_client: TestClient):
    response = api_client.get("/api/regions")

    assert response.status_code == 200
    regions = response.json()
    assert len(regions) == 26
    zurich = next(region for region in regions if region["code"] == "ZH")
    assert zurich["label"] == "Zürich"
    assert zurich["display"] == "Zürich (8000-8999)"
    assert zurich["ranges"] == [
        {"start": 8000, "end": 8999, "size": 1000, "sample": ["8000", "8199", "8398", "8597", "8796"]}
    ]
    assert zurich["estimatedPostalCodes"] == 1000


def test_region_detail_and_unknown_region(api_client: TestClient):
    assert api_client.get("/api/regions/ge").json()["label"] == "Genf"
    assert api_client.get("/api/regions/XX").status_code == 404


def test_postal_code_lookup(api_client: TestClient):
    assert api_client.get("/api/postal-codes/8000").json() == {
        "postalCode": "8000",
        "region": "ZH",
        "label": "Zürich",
    }
    assert api_client.get("/api/postal-codes/9999").json()["region"] is None
    assert api_client.get("/api/postal-codes/abc").json()["region"] is None


def test_decode_endpoint(api_client: TestClient):
    response = api_client.post("/api/service-areas/decode", json={"areas": ["ZH", "BE", "LU"]})

    assert response.status_code == 200
    body = response.json()
    assert body["config"] == {
        "radius": "custom",
        "businessPlz": "",
        "businessCity": "",
        "businessCanton": "ZH",
        "customCantons": ["ZH", "BE", "LU"],
    }
    assert body["summary"] == "3 Kantone ausgewählt"
    assert body["estimatedPostalCodes"] == 1000 + 1000 + 460


def test_decode_endpoint_empty_body(api_client: TestClient):
    body = api_client.post("/api/service-areas/decode", json={}).json()

    assert body["config"]["radius"] == "canton"
    assert body["summary"] == "Kanton "
    assert body["estimatedPostalCodes"] == 0


def test_encode_endpoint_accepts_camel_case(api_client: TestClient):
    response = api_client.post(
        "/api/service-areas/encode",
        json={"radius": "custom", "customCantons": ["TI", "GR"]},
    )

    assert response.json() == {"areas": ["TI", "GR"]}
    nationwide = api_client.post("/api/service-areas/encode", json={"radius": "nationwide"}).json()
    assert len(nationwide["areas"]) == 26
    assert api_client.post("/api/service-areas/encode", json={"radius": "moon"}).json() == {"areas": []}


def test_encode_endpoint_requires_radius(api_client: TestClient):
    assert api_client.post("/api/service-areas/encode", json={"plz": "8000"}).status_code == 422


def test_summary_and_estimate_endpoints(api_client: TestClient):
    summary = api_client.post(
        "/api/service-areas/summary", json={"radius": "city", "businessCity": "Bern"}
    ).json()
    assert summary == {"summary": "Nur Bern"}

    estimate = api_client.post("/api/service-areas/estimate", json={"regions": ["ZH", "GE"]}).json()
    assert estimate == {"regions": ["ZH", "GE"], "estimatedPostalCodes": 1100}


def test_estimate_endpoint_rejects_oversized_payload(api_client: TestClient):
    response = api_client.post("/api/service-areas/estimate", json={"regions": ["ZH"] * 101})

    assert response.status_code == 422


def test_locate_endpoint(api_client: TestClient):
    body = api_client.get("/api/service-areas/locate/6003").json()

    assert body["radius"] == "canton"
    assert body["businessPlz"] == "6003"
    assert body["businessCanton"] == "LU"
    assert body["hasValidLocation"] is True

    outside = api_client.get("/api/service-areas/locate/0500").json()
    assert outside["businessCanton"] == ""
    assert outside["hasValidLocation"] is False


def test_codec_dependency_can_be_overridden():
    registry = RegionRegistry([Region("AA", "Alpha"), Region("BB", "Beta")])
    codec = ServiceAreaCodec(registry, PostalRangeIndex.from_strings({"AA": ["1000-1099"]}, registry))
    app = create_app()
    app.dependency_overrides[resolve_codec] = lambda: codec
    client = TestClient(app)

    body = client.post("/api/service-areas/decode", json={"areas": ["AA", "BB"]}).json()

    assert body["config"]["radius"] == "nationwide"
    assert body["summary"] == "Ganze Schweiz (alle Kantone)"
    assert len(client.get("/api/regions").json()) == 2


def test_toggle_custom_canton_endpoint(api_client: TestClient):
    added = api_client.post(
        "/api/service-areas/custom-cantons/toggle", json={"selection": ["ZH", "BE"], "code": "LU"}
    ).json()
    assert added == {"customCantons": ["ZH", "BE", "LU"], "summary": "3 Kantone ausgewählt"}

    removed = api_client.post(
        "/api/service-areas/custom-cantons/toggle", json={"selection": ["ZH", "BE"], "code": "ZH"}
    ).json()
    assert removed["customCantons"] == ["BE"]


def _use_range_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, payload) -> None:
    source = tmp_path / "ranges.json"
    source.write_text(json.dumps(payload), encoding="utf-8")
    monkeypatch.setattr(tables, "settings", Settings(postal_range_file=source))
    tables.clear_table_cache()


def test_invalid_range_table_returns_400(api_client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _use_range_file(tmp_path, monkeypatch, {"ZH": ["8999-8000"]})

    decode = api_client.post("/api/service-areas/decode", json={"areas": ["ZH"]})
    assert decode.status_code == 400
    assert "8999" in decode.json()["detail"]
    assert api_client.get("/api/regions").status_code == 400
    assert api_client.get("/api/health/tables").status_code == 400
    assert api_client.get("/api/health").status_code == 200


def test_missing_range_table_returns_503(api_client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(tables, "settings", Settings(postal_range_file=tmp_path / "missing.json"))
    tables.clear_table_cache()

    assert api_client.post("/api/service-areas/decode", json={"areas": ["ZH"]}).status_code == 503
    assert api_client.get("/api/health/tables").status_code == 503


def test_api_serves_reloaded_tables(api_client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    assert len(api_client.get("/api/regions").json()) == 26

    _use_range_file(tmp_path, monkeypatch, {"ZH": ["8000-8099"]})

    zurich = api_client.get("/api/regions/ZH").json()
    assert zurich["estimatedPostalCodes"] == 100
    assert api_client.get("/api/health/tables").json()["regions_with_ranges"] == 1
