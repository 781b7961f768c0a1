from glyph_api.ports.repositories import GlyphRepositoryPort
from glyph_api.ports.services import GlyphServicePort

__all__ = [
    "GlyphRepositoryPort",
    "GlyphServicePort",
]
