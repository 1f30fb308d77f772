"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from lookalike.main import app
from tests.conftest import SAMPLE_RECORD_JSON


client = TestClient(app)

BLUE_EYES = dict(SAMPLE_RECORD_JSON, eyeColor="blue")
DIFFERENT = dict(
    SAMPLE_RECORD_JSON,
    skinTone="dark1",
    hairColor="blonde",
    faceShape="round",
    hairStyle="afro",
    eyeColor="brown",
)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["parts_registered"] > 100


def test_options():
    response = client.get("/api/avatar/options")
    assert response.status_code == 200
    data = response.json()
    assert data["views"] == ["portrait", "full_body"]
    skin = data["fields"]["skin_tone"]
    assert skin[0]["value"] == "fair1"
    assert skin[0]["label"] == "Fair 1"
    assert skin[0]["color"].startswith("#")
    assert data["fields"]["hair_style"][0]["color"] is None
    assert data["labels"]["mouth_expression"] == "expression"


def test_compose_portrait():
    response = client.post("/api/avatar/compose", json={"record": SAMPLE_RECORD_JSON})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    body = response.text
    assert body.startswith("<svg")
    assert 'viewBox="0 0 200 200"' in body
    assert "layer-glasses" in body
    assert "{{" not in body


def test_compose_full_body_with_declaration():
    response = client.post(
        "/api/avatar/compose",
        json={"record": SAMPLE_RECORD_JSON, "view": "full_body", "size": 300, "include_declaration": True},
    )
    assert response.status_code == 200
    body = response.text
    assert body.startswith("<?xml")
    assert 'width="150" height="300"' in body
    assert "layer-top" in body


def test_compose_is_stable():
    first = client.post("/api/avatar/compose", json={"record": SAMPLE_RECORD_JSON}).text
    second = client.post("/api/avatar/compose", json={"record": SAMPLE_RECORD_JSON}).text
    assert first == second


def test_compose_rejects_bad_enum():
    bad = dict(SAMPLE_RECORD_JSON, hairStyle="mohawk")
    response = client.post("/api/avatar/compose", json={"record": bad})
    assert response.status_code == 422


def test_compose_rejects_bad_size():
    response = client.post("/api/avatar/compose", json={"record": SAMPLE_RECORD_JSON, "size": 0})
    assert response.status_code == 422


def test_validate():
    response = client.post("/api/avatar/validate", json={"record": SAMPLE_RECORD_JSON, "view": "full_body"})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "missing": []}


def test_score():
    response = client.post("/api/match/score", json={"a": SAMPLE_RECORD_JSON, "b": BLUE_EYES})
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["score"] == 95
    assert data["result"]["quality"] == "excellent"
    assert data["result"]["breakdown"]["non_matching"] == ["eye_color"]
    assert data["description"] == "95% match - Excellent"
    assert data["color"] == "#34C759"


def test_score_fuzzy_override():
    b = dict(SAMPLE_RECORD_JSON, skinTone="olive2")
    strict = client.post("/api/match/score", json={"a": SAMPLE_RECORD_JSON, "b": b}).json()
    fuzzy = client.post("/api/match/score", json={"a": SAMPLE_RECORD_JSON, "b": b, "use_fuzzy": True}).json()
    assert strict["result"]["score"] == 90
    assert fuzzy["result"]["score"] == 97


def test_filter():
    entries = [
        {"id": "a", "target": DIFFERENT, "title": "Train"},
        {"id": "b", "target": BLUE_EYES},
        {"id": "c"},
    ]
    response = client.post("/api/match/filter", json={"candidate": SAMPLE_RECORD_JSON, "entries": entries})
    assert response.status_code == 200
    data = response.json()
    assert data["threshold"] == 60
    assert [e["id"] for e in data["entries"]] == ["b"]

    response = client.post(
        "/api/match/filter",
        json={"candidate": SAMPLE_RECORD_JSON, "entries": entries, "threshold": 50},
    )
    kept = response.json()["entries"]
    assert [e["id"] for e in kept] == ["a", "b"]
    assert kept[0]["title"] == "Train"


def test_rank():
    entries = [{"id": "a", "target": DIFFERENT}, {"id": "b", "target": BLUE_EYES}]
    response = client.post("/api/match/rank", json={"candidate": SAMPLE_RECORD_JSON, "entries": entries})
    assert response.status_code == 200
    ranked = response.json()["ranked"]
    assert [r["entry"]["id"] for r in ranked] == ["b", "a"]
    assert ranked[0]["result"]["score"] == 95
