from __future__ import annotations

from glyph_api.errors import http_error
from glyph_api.ports.dto import GlyphCreateDTO, GlyphRecordDTO
from glyph_api.ports.repositories import GlyphRepositoryPort
from glyph_api.ports.services import GlyphServicePort
from glyph_api.repositories.glyph_repository import InMemoryGlyphRepository
from glyph_api.utils import bad_request, normalize_optional_str, normalize_pagination

MAX_NAME_LENGTH = 64
MAX_SYMBOL_LENGTH = 16


def _normalize_glyph(item: object) -> GlyphCreateDTO:
    if not isinstance(item, dict):
        raise bad_request("Glyph payload must be an object.")

    name = normalize_optional_str(item.get("name"))
    symbol = normalize_optional_str(item.get("symbol"))
    if name is None or symbol is None:
        raise bad_request("Missing required fields: name, symbol")
    if len(name) > MAX_NAME_LENGTH:
        raise bad_request(f"name must be at most {MAX_NAME_LENGTH} characters.")
    if len(symbol) > MAX_SYMBOL_LENGTH:
        raise bad_request(f"symbol must be at most {MAX_SYMBOL_LENGTH} characters.")

    return {
        "name": name,
        "symbol": symbol,
        "description": normalize_optional_str(item.get("description")),
    }


class GlyphService:
    def __init__(self, *, repository: GlyphRepositoryPort) -> None:
        self._repository = repository

    @staticmethod
    def normalize_glyph(item: object) -> GlyphCreateDTO:
        return _normalize_glyph(item)

    def create_glyph(self, item: GlyphCreateDTO) -> GlyphRecordDTO:
        record = self._repository.add_glyph(item)
        if record is None:
            raise http_error(409, "CONFLICT", f"Glyph already exists: {item['name']}")
        return record

    def list_glyphs(self, *, q: str | None, page: int, size: int) -> tuple[list[GlyphRecordDTO], int]:
        page, size = normalize_pagination(page, size)
        return self._repository.list_glyphs(q=normalize_optional_str(q), page=page, size=size)

    def get_glyph(self, glyph_id: int) -> GlyphRecordDTO | None:
        return self._repository.get_glyph(glyph_id)

    def delete_glyph(self, glyph_id: int) -> bool:
        return self._repository.delete_glyph(glyph_id)


def build_glyph_service(*, repository: GlyphRepositoryPort | None = None) -> GlyphServicePort:
    if repository is None:
        repository = InMemoryGlyphRepository()
    return GlyphService(repository=repository)
