from __future__ import annotations

import json
import logging

import pytest
from fastapi import APIRouter

from conftest import StubService, build_test_config
from glyph_api.bootstrap import ErrorHandler, validate_startup_config
from glyph_api.logging_config import JsonFormatter, configure_logging, describe_target


def test_valid_config_passes():
    validate_startup_config(build_test_config())


@pytest.mark.parametrize(
    ("config_overrides", "expected_message"),
    [
        ({"APP_SECRET": ""}, "APP_SECRET must be set."),
        ({"APP_SECRET": "   "}, "APP_SECRET must be set."),
        ({"APP_ENV": "production", "APP_SECRET": "short"}, "APP_SECRET must be at least 32 bytes in production."),
        ({"LOG_LEVEL": "chatty"}, "LOG_LEVEL is not a known logging level: 'chatty'."),
    ],
)
def test_invalid_config_fails_fast(config_overrides, expected_message):
    with pytest.raises(RuntimeError) as exc_info:
        validate_startup_config(build_test_config(**config_overrides))
    assert str(exc_info.value) == expected_message


def test_production_accepts_long_secret():
    validate_startup_config(build_test_config(APP_ENV=" PROD ", APP_SECRET="x" * 32))


def test_app_env_defaults_to_development():
    config = build_test_config(APP_ENV="  ")
    assert config.app_env == "development"
    assert not config.is_production


def test_json_formatter_includes_request_fields():
    record = logging.LogRecord("glyph_api.access", logging.INFO, __file__, 1, "http_request", None, None)
    record.request_id = "r-1"
    record.status_code = 201

    formatted = JsonFormatter().format(record)

    assert '"message": "http_request"' in formatted
    assert '"request_id": "r-1"' in formatted
    assert '"status_code": 201' in formatted
    assert "client_ip" not in formatted


def test_configure_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.delattr(root, "_glyph_logging_configured", raising=False)
    access_logger = logging.getLogger("uvicorn.access")
    monkeypatch.setattr(access_logger, "level", access_logger.level)

    configure_logging(level="debug", json_logs=True)
    handlers = list(root.handlers)
    configure_logging(level="warning", json_logs=False)

    assert root.handlers == handlers
    assert isinstance(handlers[0].formatter, JsonFormatter)
    assert root.level == logging.WARNING
    assert access_logger.level == logging.WARNING
    del root._glyph_logging_configured


def test_json_formatter_describes_registration_records():
    async def handle_teapot(request, exc):
        return None

    record = logging.LogRecord("glyph_api.app", logging.DEBUG, __file__, 1, "error_handler_registered", None, None)
    record.stage = "error_handler"
    record.position = 0
    record.target = ErrorHandler(handle_teapot, (418,))

    payload = json.loads(JsonFormatter().format(record))

    assert payload["stage"] == "error_handler"
    assert payload["position"] == 0
    assert payload["target"].endswith("handle_teapot")


def test_describe_target_names_service_descriptors():
    assert describe_target(StubService("/glyphs", APIRouter())) == "StubService(/glyphs)"
