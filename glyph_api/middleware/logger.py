from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.responses import Response

from glyph_api.bootstrap.contracts import CallNext
from glyph_api.errors import ensure_request_id

logger = logging.getLogger("glyph_api.access")


def build_request_log_payload(
    *,
    request_id: str,
    method: str,
    path: str,
    status_code: int,
    elapsed_seconds: float,
    client_ip: str | None,
) -> dict[str, str | int | float | None]:
    return {
        "request_id": request_id,
        "method": method,
        "path": path,
        "status_code": int(status_code),
        "duration_ms": round(elapsed_seconds * 1000, 2),
        "client_ip": client_ip,
    }


async def request_logger(request: Request, call_next: CallNext) -> Response:
    request_id = ensure_request_id(request)
    started = time.perf_counter()
    client_ip = request.client.host if request.client else None

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "http_request_failed",
            extra=build_request_log_payload(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                status_code=500,
                elapsed_seconds=time.perf_counter() - started,
                client_ip=client_ip,
            ),
        )
        raise

    response.headers["X-Request-Id"] = request_id
    logger.info(
        "http_request",
        extra=build_request_log_payload(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            elapsed_seconds=time.perf_counter() - started,
            client_ip=client_ip,
        ),
    )
    return response
