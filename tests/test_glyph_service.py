from __future__ import annotations

import pytest
from fastapi import HTTPException

from glyph_api.repositories.glyph_repository import InMemoryGlyphRepository
from glyph_api.routes import GlyphController
from glyph_api.services.glyph_service import GlyphService, build_glyph_service


def test_normalize_glyph_requires_name_and_symbol():
    with pytest.raises(HTTPException) as exc_info:
        GlyphService.normalize_glyph({"name": "only-name"})
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail["code"] == "BAD_REQUEST"


def test_normalize_glyph_ignores_non_string_description():
    assert GlyphService.normalize_glyph({"name": "a", "symbol": "b", "description": 3}) == {
        "name": "a",
        "symbol": "b",
        "description": None,
    }


def test_normalize_glyph_enforces_symbol_length():
    with pytest.raises(HTTPException) as exc_info:
        GlyphService.normalize_glyph({"name": "a", "symbol": "x" * 17})
    assert "symbol must be at most 16 characters." == exc_info.value.detail["message"]


def test_list_glyphs_validates_pagination():
    service = build_glyph_service()
    with pytest.raises(HTTPException) as exc_info:
        service.list_glyphs(q=None, page=1, size=201)
    assert exc_info.value.detail["message"] == "size must be less than or equal to 200."


def test_repository_returns_copies():
    repository = InMemoryGlyphRepository()
    record = repository.add_glyph({"name": "a", "symbol": "b", "description": None})
    assert record is not None
    record["name"] = "mutated"

    assert repository.get_glyph(record["id"])["name"] == "a"


def test_controller_uses_injected_service():
    repository = InMemoryGlyphRepository()
    service = GlyphService(repository=repository)
    controller = GlyphController(service)

    assert controller.service is service
    assert controller.path == "/glyphs"


def test_controllers_do_not_share_storage():
    first = GlyphController()
    second = GlyphController()
    first.service.create_glyph({"name": "a", "symbol": "b", "description": None})

    assert second.service.list_glyphs(q=None, page=1, size=20) == ([], 0)
