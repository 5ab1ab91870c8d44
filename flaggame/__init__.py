"""Software blitting, glyph layout, input tracking, config reading and scene management for a small 2D game."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "keys",
    "mathutil",
    "menus",
    "render",
    "scenes",
    "surface",
    "text",
]