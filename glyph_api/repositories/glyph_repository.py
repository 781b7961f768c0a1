from __future__ import annotations

import itertools
import threading
from datetime import datetime, timezone

from glyph_api.ports.dto import GlyphCreateDTO, GlyphRecordDTO


class InMemoryGlyphRepository:
    """Process-local glyph storage.

    Sync route handlers run on the threadpool, so every access goes through
    one lock. Names are unique case-insensitively.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._rows: dict[int, GlyphRecordDTO] = {}

    def add_glyph(self, item: GlyphCreateDTO) -> GlyphRecordDTO | None:
        with self._lock:
            name_key = item["name"].casefold()
            if any(row["name"].casefold() == name_key for row in self._rows.values()):
                return None
            record: GlyphRecordDTO = {
                "id": next(self._ids),
                "name": item["name"],
                "symbol": item["symbol"],
                "description": item.get("description"),
                "created_at": datetime.now(timezone.utc),
            }
            self._rows[record["id"]] = record
            return dict(record)  # type: ignore[return-value]

    def list_glyphs(self, *, q: str | None, page: int, size: int) -> tuple[list[GlyphRecordDTO], int]:
        with self._lock:
            rows = list(self._rows.values())
        if q:
            needle = q.casefold()
            rows = [
                row
                for row in rows
                if needle in row["name"].casefold() or needle in (row["description"] or "").casefold()
            ]
        offset = (page - 1) * size
        return [dict(row) for row in rows[offset : offset + size]], len(rows)  # type: ignore[misc]

    def get_glyph(self, glyph_id: int) -> GlyphRecordDTO | None:
        with self._lock:
            row = self._rows.get(glyph_id)
        return dict(row) if row else None  # type: ignore[return-value]

    def delete_glyph(self, glyph_id: int) -> bool:
        with self._lock:
            return self._rows.pop(glyph_id, None) is not None
