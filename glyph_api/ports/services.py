from __future__ import annotations

from typing import Protocol

from glyph_api.ports.dto import GlyphCreateDTO, GlyphRecordDTO


class GlyphServicePort(Protocol):
    def normalize_glyph(self, item: object) -> GlyphCreateDTO:
        ...

    def create_glyph(self, item: GlyphCreateDTO) -> GlyphRecordDTO:
        ...

    def list_glyphs(self, *, q: str | None, page: int, size: int) -> tuple[list[GlyphRecordDTO], int]:
        ...

    def get_glyph(self, glyph_id: int) -> GlyphRecordDTO | None:
        ...

    def delete_glyph(self, glyph_id: int) -> bool:
        ...
