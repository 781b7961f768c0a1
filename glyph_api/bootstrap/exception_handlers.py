from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.exceptions import ExceptionMiddleware

from glyph_api.bootstrap.contracts import ErrorHandler
from glyph_api.errors import handle_error

SERVER_ERROR_KEYS = (500, Exception)

error_handler = ErrorHandler(
    handler=handle_error,
    exception_classes=(StarletteHTTPException, RequestValidationError, Exception),
)


def register_error_handlers(api: FastAPI, error_handlers: Sequence[ErrorHandler], *, logger: logging.Logger) -> None:
    for position, _error_handler in enumerate(error_handlers):
        for exc_class in _error_handler.exception_classes:
            api.add_exception_handler(exc_class, _error_handler.handler)
        logger.debug(
            "error_handler_registered",
            extra={"stage": "error_handler", "position": position, "target": _error_handler},
        )

    # Starlette only applies these handlers inside the user middleware. A
    # second layer, prepended after the middleware, catches what the
    # middleware itself raises. 500/Exception already live in the outermost
    # ServerErrorMiddleware.
    handlers = {key: handler for key, handler in api.exception_handlers.items() if key not in SERVER_ERROR_KEYS}
    api.add_middleware(ExceptionMiddleware, handlers=handlers, debug=api.debug)
