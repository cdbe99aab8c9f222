import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.entrypoints.fastapi_app import create_app
from app.service_layer.demo_seed import demo_property, demo_renters


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", None)
    return TestClient(create_app())


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_only_scoring_routes_are_mounted(client):
    assert client.get("/debug/config").status_code == 404
    assert client.get("/debug/routes").status_code == 404


def test_score_pair(client):
    body = {
        "renter": {"monthlyIncome": 3000, "localArea": "Liverpool", "hasRentalHistory": True},
        "property": {"rentPcm": 1000, "address": {"street": "1 Test St", "city": "Liverpool"}, "maxOccupants": 2},
    }
    resp = client.post("/compatibility", json=body)
    assert resp.status_code == 200

    data = resp.json()
    assert data["breakdown"] == {
        "affordability": 30,
        "location": 20,
        "timing": 15,
        "property_fit": 17,
        "tenant_history": 8,
    }
    assert data["overall"] == 90
    assert data["formatted"] == "90%"
    assert data["tier"]["tier"] == "excellent"
    assert [f["flag"] for f in data["flags"]] == ["income_strong", "move_date_flexible"]
    assert data["flags"][0]["type"] == "positive"


def test_score_pair_missing_fields_is_400(client):
    resp = client.post("/compatibility", json={"renter": {"localArea": "Wigan"}, "property": {"rent_pcm": 900, "city": "Wigan"}})
    assert resp.status_code == 400
    assert "monthly_income" in resp.json()["detail"]


def test_rank(client):
    body = {"property": demo_property(), "renters": demo_renters(), "filter_by": "has_guarantor"}
    resp = client.post("/compatibility/rank", json=body)
    assert resp.status_code == 200

    data = resp.json()
    assert data["count"] == 1
    assert data["renters"][0]["renter_id"] == "demo-renter-strong"


def test_rank_rejects_unknown_filter(client):
    body = {"property": demo_property(), "renters": [], "filter_by": "cheapest"}
    assert client.post("/compatibility/rank", json=body).status_code == 422


def test_api_key_required_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", "s3cret")
    body = {"renter": {"monthly_income": 1, "local_area": "x"}, "property": {"rent_pcm": 1, "city": "x"}}

    assert client.post("/compatibility", json=body).status_code == 401
    assert client.post("/compatibility", json=body, headers={"X-API-Key": "s3cret"}).status_code == 200
    assert client.get("/health").status_code == 200
