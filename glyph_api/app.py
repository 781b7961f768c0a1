from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from glyph_api.bootstrap import (
    ErrorHandler,
    RequestMiddleware,
    ServiceDescriptor,
    error_handler,
    register_error_handlers,
    register_middleware,
    register_services,
)
from glyph_api.middleware import json_body_parser, request_logger, urlencoded_body_parser
from glyph_api.routes import GlyphController

APP_SECRET_KEY = "APP_SECRET"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_APP_PORT = 5000

logger = logging.getLogger("glyph_api.app")


def get_app_secret(request: Request) -> str:
    return getattr(request.app.state, APP_SECRET_KEY)


class ListeningServer(uvicorn.Server):
    """uvicorn server that calls ``on_started`` once its sockets are bound."""

    def __init__(self, config: uvicorn.Config, *, on_started: Callable[[], None]) -> None:
        super().__init__(config)
        self._on_started = on_started

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # A failed bind leaves ``started`` unset; uvicorn exits on its own.
        if self.started:
            self._on_started()


class App:
    DEFAULT_PORT = 9000

    def __init__(
        self,
        *,
        app_secret: str,
        services: Sequence[ServiceDescriptor],
        port: Optional[int] = None,
        middleware: Optional[Sequence[RequestMiddleware]] = None,
        error_handlers: Optional[Sequence[ErrorHandler]] = None,
        host: str = DEFAULT_HOST,
        post_start_hook: Optional[Callable[[], None]] = None,
    ) -> None:
        self._app_secret = app_secret
        self._port = port or self.DEFAULT_PORT
        self._host = host
        self._listening = False

        self.middleware: tuple[RequestMiddleware, ...] = tuple(middleware or ())
        self.services: tuple[ServiceDescriptor, ...] = tuple(services)
        self.error_handlers: tuple[ErrorHandler, ...] = tuple(error_handlers or ())

        self.api = FastAPI()
        setattr(self.api.state, APP_SECRET_KEY, self._app_secret)

        register_middleware(self.api, self.middleware, logger=logger)
        register_services(self.api, self.services, logger=logger)
        # Error handlers go last so they see failures from routes and middleware.
        register_error_handlers(self.api, self.error_handlers, logger=logger)

        self._post_start_hook = post_start_hook or self._log_listening

    @property
    def app_secret(self) -> str:
        return self._app_secret

    @property
    def port(self) -> int:
        return self._port

    @property
    def host(self) -> str:
        return self._host

    @property
    def listening(self) -> bool:
        return self._listening

    def _log_listening(self) -> None:
        logger.info("App listening on localhost:%d", self._port, extra={"port": self._port})

    def _on_started(self) -> None:
        self._listening = True
        self._post_start_hook()

    def build_server(self) -> ListeningServer:
        config = uvicorn.Config(self.api, host=self._host, port=self._port, log_config=None)
        return ListeningServer(config, on_started=self._on_started)

    def start(self) -> None:
        self.build_server().run()


def get_default_app(app_secret: str) -> App:
    """Return an :class:`App` wired with the default middleware, services and error handlers."""
    return App(
        app_secret=app_secret,
        port=DEFAULT_APP_PORT,
        middleware=[
            json_body_parser(),
            urlencoded_body_parser(extended=True),
            request_logger,
        ],
        services=[
            GlyphController(),
        ],
        error_handlers=[
            error_handler,
        ],
    )
