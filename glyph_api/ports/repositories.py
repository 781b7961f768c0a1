from __future__ import annotations

from typing import Protocol

from glyph_api.ports.dto import GlyphCreateDTO, GlyphRecordDTO


class GlyphRepositoryPort(Protocol):
    def add_glyph(self, item: GlyphCreateDTO) -> GlyphRecordDTO | None:
        ...

    def list_glyphs(self, *, q: str | None, page: int, size: int) -> tuple[list[GlyphRecordDTO], int]:
        ...

    def get_glyph(self, glyph_id: int) -> GlyphRecordDTO | None:
        ...

    def delete_glyph(self, glyph_id: int) -> bool:
        ...
