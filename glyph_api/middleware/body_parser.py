"""Request body parsers.

Each parser is a ``BaseHTTPMiddleware`` dispatch function. The decoded body is
stored on ``request.state.body``; requests the parser does not handle leave an
existing value alone and otherwise get an empty dict.

Rejected bodies raise ``HTTPException`` (400 or 413) for the registered error
handlers to render. In the default middleware order the parsers run before the
request logger, so rejected requests are not access-logged.
"""
from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl

from fastapi import HTTPException, Request
from starlette.responses import Response

from glyph_api.bootstrap.contracts import CallNext, RequestMiddleware
from glyph_api.errors import http_error

BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
DEFAULT_BODY_LIMIT_BYTES = 100 * 1024
JSON_MEDIA_TYPE = "application/json"
URLENCODED_MEDIA_TYPE = "application/x-www-form-urlencoded"
BRACKET_PART = re.compile(r"\[([^\[\]]*)\]")


class BodyParseError(ValueError):
    pass


def _media_type(request: Request) -> str:
    return (request.headers.get("content-type") or "").split(";", 1)[0].strip().lower()


def _is_json_media_type(media_type: str) -> bool:
    return media_type == JSON_MEDIA_TYPE or (media_type.startswith("application/") and media_type.endswith("+json"))


def _payload_too_large(*, limit: int, received: int) -> HTTPException:
    return http_error(
        413,
        "PAYLOAD_TOO_LARGE",
        "Payload Too Large",
        details={"max_request_body_bytes": limit, "request_body_bytes": received},
    )


def _invalid_body(message: str) -> HTTPException:
    return http_error(400, "BAD_REQUEST", message)


async def _read_body(request: Request, *, limit: int) -> bytes:
    content_length_raw = (request.headers.get("content-length") or "").strip()
    if content_length_raw:
        try:
            content_length = int(content_length_raw)
        except ValueError as exc:
            raise _invalid_body("Invalid Content-Length header") from exc
        if content_length > limit:
            raise _payload_too_large(limit=limit, received=content_length)

    body = await request.body()
    if len(body) > limit:
        raise _payload_too_large(limit=limit, received=len(body))
    return body


def _ensure_default_body(request: Request) -> None:
    if not hasattr(request.state, "body"):
        request.state.body = {}


def decode_json(body: bytes, *, strict: bool = True) -> Any:
    if not body.strip():
        return {}
    try:
        value = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise BodyParseError("Malformed JSON body") from exc
    if strict and not isinstance(value, (dict, list)):
        raise BodyParseError("JSON body must be an object or an array")
    return value


def _store(node: dict[str, Any], key: str, value: Any, *, append: bool = False) -> None:
    if key not in node:
        node[key] = [value] if append else value
    elif isinstance(node[key], list):
        node[key].append(value)
    else:
        node[key] = [node[key], value]


def _split_key(key: str) -> list[str]:
    head, bracket, _ = key.partition("[")
    if not bracket or not head:
        return [key]
    tail = key[len(head):]
    parts = BRACKET_PART.findall(tail)
    if "".join(f"[{part}]" for part in parts) != tail:
        return [key]
    return [head, *parts]


def _assign_nested(target: dict[str, Any], parts: list[str], value: str) -> None:
    append = len(parts) > 1 and parts[-1] == ""
    if append:
        parts = parts[:-1]
    node = target
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    _store(node, parts[-1], value, append=append)


def decode_urlencoded(body: bytes, *, extended: bool = True) -> dict[str, Any]:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BodyParseError("Malformed URL-encoded body") from exc

    result: dict[str, Any] = {}
    for key, value in parse_qsl(text, keep_blank_values=True):
        if extended:
            _assign_nested(result, _split_key(key), value)
        else:
            _store(result, key, value)
    return result


def _body_parser(
    *,
    matches: Callable[[str], bool],
    decode: Callable[[bytes], Any],
    limit: int,
) -> RequestMiddleware:
    async def parse_body(request: Request, call_next: CallNext) -> Response:
        if request.method not in BODY_METHODS or not matches(_media_type(request)):
            _ensure_default_body(request)
            return await call_next(request)

        body = await _read_body(request, limit=limit)
        try:
            request.state.body = decode(body)
        except BodyParseError as exc:
            raise _invalid_body(str(exc)) from exc
        return await call_next(request)

    return parse_body


def json_body_parser(*, limit: int = DEFAULT_BODY_LIMIT_BYTES, strict: bool = True) -> RequestMiddleware:
    return _body_parser(
        matches=_is_json_media_type,
        decode=lambda body: decode_json(body, strict=strict),
        limit=limit,
    )


def urlencoded_body_parser(*, extended: bool = True, limit: int = DEFAULT_BODY_LIMIT_BYTES) -> RequestMiddleware:
    return _body_parser(
        matches=lambda media_type: media_type == URLENCODED_MEDIA_TYPE,
        decode=lambda body: decode_urlencoded(body, extended=extended),
        limit=limit,
    )
