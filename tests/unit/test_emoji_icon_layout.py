import sys
import unittest
import xml.etree.ElementTree as ET
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "glyphs"))

from iconsmith_glyphs import IconCatalog, StaticGlyphSource
from iconsmith_renderer import ForegroundConfig, LayoutContext, layout_foreground
from iconsmith_renderer.foreground import (
    EMOJI_FONT_FAMILY,
    EMOJI_MONO_FONT_FAMILY,
    EmojiLayout,
    EmptyLayout,
    IconLayout,
)

OUTLINE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2"><path d="M5 12l5 5l10 -10" /></svg>'
)
FILLED = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor"><path d="M1 1h2v2z" /></svg>'


class EmojiLayoutTests(unittest.TestCase):
    def test_emoji_box_is_centered_square(self):
        layout = layout_foreground(ForegroundConfig(kind="emoji", emoji="\U0001F680", size=80), 512)
        self.assertIsInstance(layout, EmojiLayout)
        self.assertAlmostEqual(layout.extent, 409.6)
        self.assertAlmostEqual(layout.x, 51.2)
        self.assertAlmostEqual(layout.y, 51.2)
        self.assertAlmostEqual(layout.line_height, 409.6 * 0.93)
        self.assertAlmostEqual(layout.font_size, 409.6)
        self.assertEqual(layout.family, EMOJI_FONT_FAMILY)

    def test_mono_emoji_font(self):
        layout = layout_foreground(ForegroundConfig(kind="emoji-mono", emoji="⭐"), 100)
        self.assertEqual(layout.family, EMOJI_MONO_FONT_FAMILY)
        self.assertIn("font-family:Noto Emoji, Segoe UI Symbol", layout.to_markup())

    def test_default_glyph_when_unset(self):
        layout = layout_foreground(ForegroundConfig(kind="emoji", emoji=""), 100)
        self.assertEqual(layout.lines, ("\U0001F3A8",))

    def test_skin_tone_sequence_counts_as_one_glyph(self):
        layout = layout_foreground(ForegroundConfig(kind="emoji", emoji="\U0001F44D\U0001F3FD", size=50), 100)
        self.assertAlmostEqual(layout.font_size, 50.0)

    def test_foreign_object_markup(self):
        markup = layout_foreground(ForegroundConfig(kind="emoji", emoji="\U0001F525", color="#00ff00"), 100).to_markup()
        root = ET.fromstring(markup)
        self.assertEqual(root.tag, "foreignObject")
        self.assertEqual(root.get("width"), "80")
        div = root.find("{http://www.w3.org/1999/xhtml}div")
        self.assertEqual(div.text, "\U0001F525")
        self.assertIn("line-height:74.4px", div.get("style"))
        self.assertIn("color:#00ff00", div.get("style"))


class IconLayoutTests(unittest.TestCase):
    def _ctx(self) -> LayoutContext:
        return LayoutContext(glyph_source=StaticGlyphSource({"check": OUTLINE, "check-filled": FILLED, "bad": "<svg"}))

    def test_icon_positioned_and_recolored(self):
        layout = layout_foreground(ForegroundConfig(kind="icon", icon_name="check", size=50, color="#ff0000"), 100, self._ctx())
        self.assertIsInstance(layout, IconLayout)
        root = ET.fromstring(layout.to_markup())
        self.assertEqual((root.get("x"), root.get("y")), ("25", "25"))
        self.assertEqual((root.get("width"), root.get("height")), ("50", "50"))
        self.assertEqual(root.get("stroke"), "#ff0000")
        self.assertEqual(root.get("fill"), "none")
        self.assertEqual(root.get("viewBox"), "0 0 24 24")
        self.assertEqual(len(list(root)), 1)

    def test_filled_icon_fill_recolored(self):
        layout = layout_foreground(ForegroundConfig(kind="icon", icon_name="check-filled", color="#123456"), 100, self._ctx())
        root = ET.fromstring(layout.to_markup())
        self.assertEqual(root.get("fill"), "#123456")

    def test_missing_or_broken_icons_render_empty(self):
        for name in ("nope", "bad", "", None):
            layout = layout_foreground(ForegroundConfig(kind="icon", icon_name=name), 100, self._ctx())
            self.assertIsInstance(layout, EmptyLayout)
            self.assertEqual(layout.to_markup(), "")

    def test_no_glyph_source(self):
        layout = layout_foreground(ForegroundConfig(kind="icon", icon_name="check"), 100)
        self.assertEqual(layout.to_markup(), "")

    def test_builtin_catalog_icon(self):
        ctx = LayoutContext(glyph_source=IconCatalog.builtin())
        markup = layout_foreground(ForegroundConfig(kind="icon", icon_name="star"), 64, ctx).to_markup()
        self.assertTrue(markup.startswith("<svg"))
        self.assertIn('stroke="#ffffff"', markup)


class UnknownKindTests(unittest.TestCase):
    def test_unknown_kind_is_silent(self):
        layout = layout_foreground(ForegroundConfig(kind="sparkles"), 100)
        self.assertIsInstance(layout, EmptyLayout)
        self.assertEqual(layout.to_markup(), "")


if __name__ == "__main__":
    unittest.main()
