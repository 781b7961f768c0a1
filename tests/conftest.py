from dataclasses import dataclass
from typing import Any

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from starlette.middleware.base import BaseHTTPMiddleware

from glyph_api import App, get_default_app
from glyph_api.config import Config

TEST_SECRET = "test-secret"


@dataclass(frozen=True)
class StubService:
    path: str
    router: APIRouter


def user_dispatches(app: App) -> list[Any]:
    return [entry.kwargs["dispatch"] for entry in app.api.user_middleware if entry.cls is BaseHTTPMiddleware]


def build_test_config(**overrides: Any) -> Config:
    defaults: dict[str, Any] = {
        "APP_SECRET": TEST_SECRET,
        "APP_ENV": "test",
        "LOG_LEVEL": "WARNING",
        "LOG_JSON": False,
    }
    defaults.update(overrides)
    return Config.model_validate(defaults)


@pytest.fixture
def default_app():
    return get_default_app(TEST_SECRET)


@pytest.fixture
def client(default_app):
    with TestClient(default_app.api) as tc:
        yield tc
