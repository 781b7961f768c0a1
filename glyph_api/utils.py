from fastapi import HTTPException

from glyph_api.errors import http_error

MAX_PAGE_SIZE = 200


def bad_request(message: str) -> HTTPException:
    return http_error(400, "BAD_REQUEST", message)


def normalize_optional_str(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def normalize_pagination(page: int, size: int) -> tuple[int, int]:
    if page < 1:
        raise bad_request("page must be greater than or equal to 1.")
    if size < 1:
        raise bad_request("size must be greater than or equal to 1.")
    if size > MAX_PAGE_SIZE:
        raise bad_request(f"size must be less than or equal to {MAX_PAGE_SIZE}.")
    return page, size
