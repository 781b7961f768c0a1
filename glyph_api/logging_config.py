from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

ACCESS_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
)
REGISTRATION_FIELDS = ("stage", "position", "target")
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
# request_logger already writes one record per request.
QUIETED_LOGGERS = {"uvicorn.access": logging.WARNING}


def describe_target(target: Any) -> str:
    """Readable name for a registered middleware, service or error handler."""
    handler = getattr(target, "handler", None)
    if handler is not None:
        target = handler
    name = getattr(target, "__qualname__", None)
    if name:
        return str(name)
    path = getattr(target, "path", None)
    if path is not None:
        return f"{type(target).__name__}({path})"
    return type(target).__name__


class JsonFormatter(logging.Formatter):
    EXTRA_FIELDS = ACCESS_FIELDS + REGISTRATION_FIELDS + ("port",)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in self.EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is None:
                continue
            payload[field] = describe_target(value) if field == "target" else value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    return handler


def configure_logging(*, level: str = "INFO", json_logs: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    if getattr(root, "_glyph_logging_configured", False):
        return

    root.handlers.clear()
    root.addHandler(_build_handler(json_logs))
    for name, quiet_level in QUIETED_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    root._glyph_logging_configured = True  # type: ignore[attr-defined]
