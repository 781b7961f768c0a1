from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI

from glyph_api.bootstrap.contracts import ServiceDescriptor


def register_services(api: FastAPI, services: Sequence[ServiceDescriptor], *, logger: logging.Logger) -> None:
    for position, service in enumerate(services):
        api.include_router(service.router, prefix=service.path)
        logger.debug(
            "service_registered",
            extra={"stage": "service", "position": position, "target": service, "path": service.path},
        )
