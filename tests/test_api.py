import runpy

import pytest
from flask import Flask

from passgen.generator import AMBIGUOUS
from passgen.web.api import create_app


@pytest.fixture
def client():
    app = create_app({"cors_origin": "*"})
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["version"] == "1.0.0"
    assert "POST /api/generate" in body["endpoints"]


def test_cors_headers(client):
    resp = client.get("/")
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_configured_cors_origin():
    app = create_app({"cors_origin": "https://example.com"})
    resp = app.test_client().get("/api/generate/quick")
    assert resp.headers["Access-Control-Allow-Origin"] == "https://example.com"


def test_quick(client):
    body = client.get("/api/generate/quick").get_json()
    assert body["success"] is True
    assert len(body["password"]) == 12
    assert body["strength"]["score"] >= 5


def test_generate(client):
    resp = client.post("/api/generate", json={"length": 24, "excludeAmbiguous": True})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["length"] == 24
    assert not any(c in AMBIGUOUS for c in body["password"])
    assert body["options"]["excludeAmbiguous"] is True


def test_generate_without_body(client):
    resp = client.post("/api/generate", data="not json")
    assert resp.status_code == 200
    assert resp.get_json()["length"] == 12


@pytest.mark.parametrize("length", [3, 129])
def test_generate_bad_length(client, length):
    resp = client.post("/api/generate", json={"length": length})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert "between 4 and 128" in body["error"]


def test_generate_all_classes_disabled(client):
    resp = client.post("/api/generate", json={
        "includeUppercase": False,
        "includeLowercase": False,
        "includeNumbers": False,
        "includeSymbols": False,
    })
    assert resp.status_code == 400
    assert resp.get_json() == {
        "success": False,
        "error": "At least one character type must be selected",
    }
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_bulk(client):
    body = client.post("/api/generate/bulk", json={"count": 20, "length": 10}).get_json()
    assert body["count"] == 20
    for entry in body["passwords"]:
        assert len(entry["password"]) == 10
        assert "level" in entry["strength"]


@pytest.mark.parametrize("count", [0, 21])
def test_bulk_bad_count(client, count):
    resp = client.post("/api/generate/bulk", json={"count": count})
    assert resp.status_code == 400
    assert "between 1 and 20" in resp.get_json()["error"]


def test_check_strength(client):
    body = client.post("/api/check-strength", json={"password": "a" * 16}).get_json()
    assert body["success"] is True
    assert body["length"] == 16
    assert body["strength"] == {
        "score": 4,
        "level": "Medium",
        "feedback": ["Add uppercase letters", "Add numbers", "Add symbols"],
    }


def test_check_strength_missing(client):
    resp = client.post("/api/check-strength", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Password not provided"}


def test_generate_null_flag_disables_class(client):
    body = client.post("/api/generate", json={
        "length": 64,
        "includeSymbols": None,
        "includeNumbers": None,
    }).get_json()
    assert body["options"]["includeSymbols"] is False
    assert body["options"]["includeNumbers"] is False
    assert body["password"].isalpha()


def test_bulk_single(client):
    body = client.post("/api/generate/bulk", json={"count": 1}).get_json()
    assert body["count"] == 1
    assert len(body["passwords"]) == 1


def test_check_strength_non_string(client):
    resp = client.post("/api/check-strength", json={"password": 12345})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Password must be a non-empty string"


def test_module_entry_point_uses_configured_debug(monkeypatch):
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kw: calls.append(kw))
    runpy.run_module("passgen.web.api", run_name="__main__")
    assert calls == [{"host": "127.0.0.1", "port": 3000, "debug": False}]
