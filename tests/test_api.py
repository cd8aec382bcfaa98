"""Tests for the JSON API."""

from conftest import SCENARIO_SOURCE, SCENARIO_TARGET


def test_detect_endpoint(client):
    response = client.post("/api/detect", json={
        "targetText": SCENARIO_TARGET,
        "sourceText": SCENARIO_SOURCE,
        "sourceDocument": "sumber.pdf",
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data["sourceDocument"] == "sumber.pdf"
    assert data["detailedAnalysis"]["wordLevel"] == 100
    assert data["algorithm"] == "Advanced Multi-Level Analysis v3.1"


def test_detect_defaults_source_document(client):
    response = client.post("/api/detect", json={"targetText": "kucing", "sourceText": "harimau"})
    assert response.status_code == 200
    assert response.get_json()["sourceDocument"] == ""


def test_malformed_json_is_rejected(client):
    response = client.post("/api/detect", data="bukan json", content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_non_object_body_is_rejected(client):
    response = client.post("/api/detect", json=["kucing", "harimau"])
    assert response.status_code == 400


def test_missing_text_is_rejected(client):
    response = client.post("/api/detect", json={"targetText": "kucing"})
    assert response.status_code == 400
    assert "source_text" in response.get_json()["error"]


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert data["algorithm"] == "Advanced Multi-Level Analysis v3.1"
    assert data["settings"]["max_excerpts"] == 8


def test_unknown_route(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Not found"


def test_wrong_method(client):
    response = client.get("/api/detect")
    assert response.status_code == 405
