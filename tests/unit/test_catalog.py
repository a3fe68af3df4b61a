import sys
import unittest
import xml.etree.ElementTree as ET
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "glyphs"))

from iconsmith_glyphs import EmojiCatalog, IconCatalog, StaticGlyphSource, svg_from_nodes

SVG_NS = "{http://www.w3.org/2000/svg}"


class IconCatalogTests(unittest.TestCase):
    def setUp(self):
        self.catalog = IconCatalog.builtin()

    def test_builtin_has_outline_and_filled(self):
        self.assertIn("star", self.catalog)
        self.assertIn("star-filled", self.catalog)
        self.assertNotIn("nope", self.catalog)
        self.assertGreater(len(self.catalog), 10)

    def test_outline_markup(self):
        root = ET.fromstring(self.catalog.lookup("heart"))
        self.assertEqual(root.tag, f"{SVG_NS}svg")
        self.assertEqual(root.get("stroke"), "currentColor")
        self.assertEqual(root.get("fill"), "none")
        frame = root.find(f"{SVG_NS}path")
        self.assertEqual(frame.get("stroke"), "none")

    def test_filled_markup(self):
        root = ET.fromstring(self.catalog.lookup("heart-filled"))
        self.assertEqual(root.get("fill"), "currentColor")
        self.assertIsNone(root.get("stroke"))

    def test_search(self):
        names = [e.name for e in self.catalog.search("STAR")]
        self.assertEqual(names, ["star", "star-filled"])
        self.assertEqual(len(self.catalog.search("")), len(self.catalog))
        self.assertEqual(self.catalog.search("zzz"), [])

    def test_non_path_nodes(self):
        svg = svg_from_nodes([["circle", {"cx": 12, "cy": 12, "r": 3}], ["line", {"x1": "1", "y1": "2", "x2": "3", "y2": "4"}]])
        root = ET.fromstring(svg)
        self.assertEqual(root.find(f"{SVG_NS}circle").get("r"), "3")
        self.assertIsNotNone(root.find(f"{SVG_NS}line"))

    def test_missing_table(self):
        catalog = IconCatalog.from_files(Path("/nonexistent/icons.json"))
        self.assertEqual(len(catalog), 0)
        self.assertIsNone(catalog.lookup("star"))

    def test_static_source(self):
        source = StaticGlyphSource({"dot": "<svg />"})
        self.assertEqual(source.lookup("dot"), "<svg />")
        self.assertIsNone(source.lookup("other"))


class EmojiCatalogTests(unittest.TestCase):
    def setUp(self):
        self.catalog = EmojiCatalog.builtin()

    def test_entries_without_emoji_skipped(self):
        labels = [e.label for e in self.catalog.entries()]
        self.assertNotIn("regional indicator", labels)

    def test_search_by_label_and_tag(self):
        self.assertEqual([e.emoji for e in self.catalog.search("rocket")], ["\U0001F680"])
        by_tag = [e.label for e in self.catalog.search("developer")]
        self.assertEqual(by_tag, ["man technologist"])

    def test_lookup_and_reverse(self):
        self.assertEqual(self.catalog.lookup("Artist-Palette"), "\U0001F3A8")
        self.assertEqual(self.catalog.name_for("\U0001F525"), "fire")
        self.assertIsNone(self.catalog.lookup("unknown thing"))
        self.assertIsNone(self.catalog.name_for("x"))


if __name__ == "__main__":
    unittest.main()
