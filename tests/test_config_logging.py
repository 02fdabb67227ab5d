from __future__ import annotations

import json
import logging

from expense_log.core.config import Settings
from expense_log.core.logging import JsonFormatter, RequestIdFilter, request_id_ctx


def test_settings_derive_db_path_and_prefix(tmp_path):
    settings = Settings(data_dir=tmp_path / "nested", api_prefix="v1/")
    settings.init_post_load()
    assert settings.db_path == tmp_path / "nested" / "expense_logs.sqlite3"
    assert settings.db_path.parent.is_dir()
    assert settings.api_prefix == "/v1"


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DB_PATH", str(tmp_path / "env.sqlite3"))
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
    settings = Settings()
    settings.init_post_load()
    assert settings.db_path == tmp_path / "env.sqlite3"
    assert settings.cors_origins == ["http://localhost:3000"]


def test_custom_prefix_moves_routes_and_location(tmp_path):
    from fastapi.testclient import TestClient
    from expense_log.main import create_app

    settings = Settings(data_dir=tmp_path, api_prefix="/v2")
    with TestClient(create_app(settings_override=settings)) as client:
        resp = client.post(
            "/v2/expenses",
            json={"amount": "1", "style": "Food", "description": "Bagel"},
        )
        assert resp.status_code == 201
        assert resp.headers["location"] == f"/v2/expenses/{resp.json()['id']}"
        assert client.get("/api/expenses").status_code == 404


def test_json_formatter_includes_request_id_and_extras():
    record = logging.LogRecord(
        "expense_log.test", logging.INFO, __file__, 1, "hello %s", ("there",), None
    )
    record.expense_id = 7
    token = request_id_ctx.set("rid-1")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)

    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "hello there"
    assert payload["request_id"] == "rid-1"
    assert payload["expense_id"] == 7
    assert payload["level"] == "INFO"
