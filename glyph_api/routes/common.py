from typing import Any, TypeVar

from fastapi import Request

from glyph_api.errors import http_error
from glyph_api.schemas import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

ResourceT = TypeVar("ResourceT")


def parsed_body(request: Request) -> Any:
    return getattr(request.state, "body", None)


def ensure_resource_found(resource: ResourceT | None) -> ResourceT:
    if not resource:
        raise http_error(404, "NOT_FOUND", "Not Found")
    return resource


def ensure_delete_succeeded(deleted: bool) -> None:
    if not deleted:
        raise http_error(404, "NOT_FOUND", "Not Found")
