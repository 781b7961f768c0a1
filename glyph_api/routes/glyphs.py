from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from glyph_api.ports.services import GlyphServicePort
from glyph_api.routes.common import ERROR_RESPONSES, ensure_delete_succeeded, ensure_resource_found, parsed_body
from glyph_api.schemas import DeleteResponse, GlyphCreatePayload, GlyphItem, GlyphListResponse
from glyph_api.services.glyph_service import build_glyph_service

GLYPHS_PATH = "/glyphs"


def build_glyph_router(service: GlyphServicePort) -> APIRouter:
    router = APIRouter(tags=["glyphs"])

    def get_service() -> GlyphServicePort:
        return service

    @router.post(
        "",
        summary="Create a glyph",
        response_model=GlyphItem,
        status_code=201,
        responses=ERROR_RESPONSES,
        openapi_extra={"requestBody": {"content": {"application/json": {"schema": GlyphCreatePayload.model_json_schema()}}}},
    )
    def create_glyph(
        body: Any = Depends(parsed_body),
        glyph_service: GlyphServicePort = Depends(get_service),
    ) -> GlyphItem:
        # The body parsers have already decoded JSON or form payloads.
        item = glyph_service.normalize_glyph(body)
        return GlyphItem.model_validate(glyph_service.create_glyph(item))

    @router.get(
        "",
        summary="List glyphs",
        response_model=GlyphListResponse,
        responses=ERROR_RESPONSES,
    )
    def list_glyphs(
        q: str | None = Query(default=None, description="name/description partial text"),
        page: int = Query(default=1, ge=1),
        size: int = Query(default=20, ge=1, le=200),
        glyph_service: GlyphServicePort = Depends(get_service),
    ) -> GlyphListResponse:
        rows, total = glyph_service.list_glyphs(q=q, page=page, size=size)
        return GlyphListResponse(page=page, size=size, total=total, items=[GlyphItem.model_validate(row) for row in rows])

    @router.get(
        "/{glyph_id}",
        summary="Get glyph detail",
        response_model=GlyphItem,
        responses=ERROR_RESPONSES,
    )
    def get_glyph(glyph_id: int, glyph_service: GlyphServicePort = Depends(get_service)) -> GlyphItem:
        return GlyphItem.model_validate(ensure_resource_found(glyph_service.get_glyph(glyph_id)))

    @router.delete(
        "/{glyph_id}",
        summary="Delete glyph",
        response_model=DeleteResponse,
        responses=ERROR_RESPONSES,
    )
    def delete_glyph(glyph_id: int, glyph_service: GlyphServicePort = Depends(get_service)) -> DeleteResponse:
        ensure_delete_succeeded(glyph_service.delete_glyph(glyph_id))
        return DeleteResponse(status="deleted", id=glyph_id)

    return router


class GlyphController:
    """Service descriptor for the glyph resource."""

    path = GLYPHS_PATH

    def __init__(self, service: GlyphServicePort | None = None) -> None:
        self.service = service if service is not None else build_glyph_service()
        self.router = build_glyph_router(self.service)
