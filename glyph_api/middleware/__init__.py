from glyph_api.middleware.body_parser import json_body_parser, urlencoded_body_parser
from glyph_api.middleware.logger import request_logger

__all__ = [
    "json_body_parser",
    "urlencoded_body_parser",
    "request_logger",
]
