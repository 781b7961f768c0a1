from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    code: str = Field(examples=["NOT_FOUND"])
    message: str = Field(examples=["Not Found"])
    error: str = Field(examples=["Not Found"])
    request_id: Optional[str] = Field(default=None, examples=["c752262e-cf42-4075-917b-95ffcb5ceeeb"])
    details: Any = None


class DeleteResponse(BaseModel):
    status: str
    id: int


class GlyphCreatePayload(BaseModel):
    name: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)
    description: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "lambda",
                "symbol": "λ",
                "description": "Greek small letter lambda",
            }
        }
    )


class GlyphItem(BaseModel):
    id: int
    name: str
    symbol: str
    description: Optional[str] = None
    created_at: datetime


class GlyphListResponse(BaseModel):
    page: int
    size: int
    total: int
    items: list[GlyphItem]
