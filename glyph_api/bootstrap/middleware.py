from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from glyph_api.bootstrap.contracts import RequestMiddleware


def register_middleware(api: FastAPI, middleware: Sequence[RequestMiddleware], *, logger: logging.Logger) -> None:
    # Starlette prepends on add_middleware, so walk backwards to keep the
    # first entry outermost.
    for _middleware in reversed(middleware):
        api.add_middleware(BaseHTTPMiddleware, dispatch=_middleware)
    for position, _middleware in enumerate(middleware):
        logger.debug(
            "middleware_registered",
            extra={"stage": "middleware", "position": position, "target": _middleware},
        )
