import json

import pytest
from fastapi.testclient import TestClient

from tradein_service.api import create_app


def _make_app(monkeypatch, **env):
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.delenv("TRADEIN_BRACKETS_PATH", raising=False)
    monkeypatch.delenv("TRADEIN_CONFIG_PATH", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, str(value))
    return create_app()


def test_health(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["bracket_rows"] > 0


def test_estimate_endpoint(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post(
            "/trade-in/estimate",
            json={"brand": "Johnson", "year": 2008, "horsepower": 60, "condition": "good"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["penalty_applied"] is True
        assert body["penalty_factor"] == 0.5
        assert body["rounded"] == 350
        assert body["pre_penalty_rounded"] == 725
        assert body["confidence"] == "low"
        assert body["low"] <= body["average"] <= body["high"]


def test_estimate_endpoint_soft_fails_on_empty_body(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post("/trade-in/estimate", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["path"] == "generic"
        assert body["rounded"] == 100


def test_estimate_endpoint_huge_horsepower(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post(
            "/trade-in/estimate",
            json={"brand": "Johnson", "year": 2020, "horsepower": 1e307, "condition": "excellent"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["penalty_applied"] is True
        assert body["rounded"] > 100


def test_estimate_endpoint_rejects_wrong_types(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post("/trade-in/estimate", json={"horsepower": "lots"})
        assert resp.status_code == 422


def test_batch_endpoint(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post(
            "/trade-in/estimate/batch",
            json={"items": [
                {"brand": "Evinrude", "year": 2017, "horsepower": 90, "condition": "fair"},
                {"brand": "Tohatsu", "year": 1990, "horsepower": 9.9},
            ]},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 2
        assert body["results"][0]["penalty_applied"] is True
        assert body["results"][0]["brand"] == "Evinrude"
        assert body["results"][1]["rounded"] == 100


def test_batch_endpoint_size_limit(monkeypatch):
    app = _make_app(monkeypatch, TRADEIN_MAX_BATCH_SIZE=1)
    with TestClient(app) as client:
        resp = client.post("/trade-in/estimate/batch", json={"items": [{}, {}]})
        assert resp.status_code == 413


def test_rounded_endpoint(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.post("/trade-in/rounded", json={"low": 349, "high": 426})
        assert resp.json()["rounded"] == 400

        resp = client.post("/trade-in/rounded", json={"low": 1000, "high": 2000, "brand": "OMC"})
        assert resp.json() == {"low": 500.0, "high": 1000.0, "rounded": 750}


def test_factors_endpoint(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.get("/trade-in/factors")
        assert "Service history" in resp.json()["factors"]


def test_config_file_overrides(monkeypatch, tmp_path):
    path = tmp_path / "valuation.json"
    path.write_text(json.dumps({"MIN_TRADE_VALUE": {"value": 500}}))
    app = _make_app(monkeypatch, TRADEIN_CONFIG_PATH=path)
    with TestClient(app) as client:
        resp = client.post("/trade-in/rounded", json={"low": 100, "high": 200})
        assert resp.json()["rounded"] == 500


def test_bracket_file_replaces_builtin_table(monkeypatch, tmp_path):
    path = tmp_path / "brackets.csv"
    path.write_text(
        "brand,year_range,horsepower,excellent,good,fair,poor\n"
        "Tohatsu,2020-2024,20,2400,2000,1500,900\n"
    )
    app = _make_app(monkeypatch, TRADEIN_BRACKETS_PATH=path)
    with TestClient(app) as client:
        assert client.get("/health").json()["bracket_rows"] == 1
        resp = client.post("/trade-in/estimate", json={"brand": "Tohatsu", "year": 2021, "horsepower": 20, "condition": "good"})
        assert resp.json()["path"] == "exact"
        assert resp.json()["average"] == pytest.approx(2000)


def test_unreadable_data_files_fall_back(monkeypatch, tmp_path):
    bad_config = tmp_path / "bad.json"
    bad_config.write_text("{not json")
    app = _make_app(
        monkeypatch,
        TRADEIN_BRACKETS_PATH=tmp_path / "missing.csv",
        TRADEIN_CONFIG_PATH=bad_config,
    )
    with TestClient(app) as client:
        assert client.get("/health").json()["bracket_rows"] > 1
        resp = client.post("/trade-in/rounded", json={"low": 10, "high": 20})
        assert resp.json()["rounded"] == 100


def test_api_correlation_id(monkeypatch):
    app = _make_app(monkeypatch)
    with TestClient(app) as client:
        resp = client.get("/health", headers={"X-Correlation-ID": "my-trace-123"})
        assert resp.status_code == 200
        assert resp.headers.get("X-Correlation-ID") == "my-trace-123"

        resp2 = client.get("/health")
        assert "X-Correlation-ID" in resp2.headers
