from __future__ import annotations

import logging

from conftest import user_dispatches
from glyph_api import APP_SECRET_KEY
from glyph_api.bootstrap import error_handler
from glyph_api.errors import handle_error
from glyph_api.middleware import request_logger
from glyph_api.routes import GLYPHS_PATH, GlyphController


def test_default_app_listens_on_factory_port(default_app):
    assert default_app.port == 5000
    assert getattr(default_app.api.state, APP_SECRET_KEY) == "test-secret"


def test_default_app_middleware_order(default_app):
    dispatches = user_dispatches(default_app)
    assert len(dispatches) == 3
    assert [dispatch.__name__ for dispatch in dispatches[:2]] == ["parse_body", "parse_body"]
    assert dispatches[2] is request_logger


def test_default_app_mounts_glyph_service(default_app, client):
    assert len(default_app.services) == 1
    service = default_app.services[0]
    assert isinstance(service, GlyphController)
    assert service.path == GLYPHS_PATH == "/glyphs"

    assert client.get("/glyphs").status_code == 200
    # The item route exists but only for GET and DELETE.
    assert client.post("/glyphs/1").status_code == 405
    assert client.get("/glyph").status_code == 404


def test_default_app_registers_single_error_handler(default_app):
    assert default_app.error_handlers == (error_handler,)
    registered = list(default_app.api.exception_handlers.values())
    assert registered.count(handle_error) == len(error_handler.exception_classes)


def test_default_app_parses_json_and_form_bodies(client):
    created_json = client.post("/glyphs", json={"name": "alpha", "symbol": "α"})
    assert created_json.status_code == 201
    assert created_json.json()["name"] == "alpha"

    created_form = client.post("/glyphs", data={"name": "beta", "symbol": "β"})
    assert created_form.status_code == 201
    assert created_form.json()["symbol"] == "β"

    listed = client.get("/glyphs").json()
    assert [item["name"] for item in listed["items"]] == ["alpha", "beta"]


def test_default_app_logs_request_before_service_handles_it(client, caplog):
    with caplog.at_level(logging.INFO, logger="glyph_api.access"):
        response = client.get("/glyphs/999", headers={"X-Request-Id": "req-42"})

    assert response.status_code == 404
    # The id set by the logger is visible to the error raised inside the route.
    assert response.json()["request_id"] == "req-42"
    assert response.headers["X-Request-Id"] == "req-42"

    records = [record for record in caplog.records if record.getMessage() == "http_request"]
    assert len(records) == 1
    assert records[0].path == "/glyphs/999"
    assert records[0].status_code == 404


def test_rejected_body_is_rendered_by_default_error_handler(client):
    response = client.post(
        "/glyphs",
        content=b"{bad",
        headers={"Content-Type": "application/json", "X-Request-Id": "parse-1"},
    )

    assert response.status_code == 400
    payload = response.json()
    assert payload["code"] == "BAD_REQUEST"
    assert payload["message"] == "Malformed JSON body"
    assert payload["request_id"] == "parse-1"
    assert response.headers["X-Request-Id"] == "parse-1"


def test_rejected_body_gets_generated_request_id(client):
    response = client.post("/glyphs", content=b"{bad", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["request_id"]
    assert response.headers["X-Request-Id"] == response.json()["request_id"]
