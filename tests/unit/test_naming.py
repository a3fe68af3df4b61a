import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from iconsmith_core import default_icon_config, export_filename, starter_icon_config
from iconsmith_renderer import BackgroundConfig, ForegroundConfig, IconConfig


class ExportFilenameTests(unittest.TestCase):
    def test_text_icon(self):
        self.assertEqual(export_filename(default_icon_config(), "svg"), "A-4a90e2-ffffff.svg")

    def test_size_suffix(self):
        self.assertEqual(export_filename(default_icon_config(), "svg", 32), "A-4a90e2-ffffff-32x32.svg")

    def test_unsafe_text_replaced(self):
        cfg = IconConfig(foreground=ForegroundConfig(text="a/b c.d"))
        self.assertTrue(export_filename(cfg, "svg").startswith("a-b-c-d-"))

    def test_emoji_uses_name_when_known(self):
        self.assertTrue(export_filename(starter_icon_config(), "svg").startswith("emoji-667eea-"))
        cfg = IconConfig(foreground=ForegroundConfig(kind="emoji", emoji_name="Artist Palette"))
        self.assertTrue(export_filename(cfg, "svg").startswith("artist-palette-"))

    def test_icon_and_alpha_colors(self):
        cfg = IconConfig(
            background=BackgroundConfig(color="#11223380"),
            foreground=ForegroundConfig(kind="icon", icon_name="star", color="#abc"),
        )
        self.assertEqual(export_filename(cfg, "png"), "star-112233-aabbcc.png")

    def test_non_text_values_do_not_break_naming(self):
        cfg = IconConfig(
            background=BackgroundConfig(kind="transparent", color=5),
            foreground=ForegroundConfig(kind="emoji", emoji_name=7, color=None),
        )
        self.assertEqual(export_filename(cfg, "svg"), "emoji-000000-000000.svg")


if __name__ == "__main__":
    unittest.main()
