from __future__ import annotations

import logging

from glyph_api.config import Config

APP_SECRET_MIN_BYTES = 32


def validate_startup_config(config: Config) -> None:
    app_secret = (config.APP_SECRET or "").strip()
    if not app_secret:
        raise RuntimeError("APP_SECRET must be set.")
    if config.is_production and len(app_secret.encode("utf-8")) < APP_SECRET_MIN_BYTES:
        raise RuntimeError(f"APP_SECRET must be at least {APP_SECRET_MIN_BYTES} bytes in production.")
    if not isinstance(logging.getLevelName((config.LOG_LEVEL or "").strip().upper()), int):
        raise RuntimeError(f"LOG_LEVEL is not a known logging level: {config.LOG_LEVEL!r}.")
