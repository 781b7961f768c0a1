from glyph_api.routes.glyphs import GLYPHS_PATH, GlyphController, build_glyph_router

__all__ = [
    "GLYPHS_PATH",
    "GlyphController",
    "build_glyph_router",
]
