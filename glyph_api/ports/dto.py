from __future__ import annotations

from datetime import datetime
from typing import TypedDict


class GlyphCreateDTO(TypedDict):
    name: str
    symbol: str
    description: str | None


class GlyphRecordDTO(TypedDict):
    id: int
    name: str
    symbol: str
    description: str | None
    created_at: datetime
