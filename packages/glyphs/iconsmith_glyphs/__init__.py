"""Glyph sources: bundled icon catalog and emoji data."""

from .catalog import IconCatalog, IconEntry, StaticGlyphSource, svg_from_nodes
from .emoji import EmojiCatalog, EmojiEntry

__all__ = [
    "EmojiCatalog",
    "EmojiEntry",
    "IconCatalog",
    "IconEntry",
    "StaticGlyphSource",
    "svg_from_nodes",
]
