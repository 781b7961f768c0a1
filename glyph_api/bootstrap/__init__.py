from glyph_api.bootstrap.contracts import ErrorHandler, RequestMiddleware, ServiceDescriptor
from glyph_api.bootstrap.exception_handlers import error_handler, register_error_handlers
from glyph_api.bootstrap.middleware import register_middleware
from glyph_api.bootstrap.routes import register_services
from glyph_api.bootstrap.validation import validate_startup_config

__all__ = [
    "ErrorHandler",
    "RequestMiddleware",
    "ServiceDescriptor",
    "error_handler",
    "register_middleware",
    "register_services",
    "register_error_handlers",
    "validate_startup_config",
]
