import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from iconsmith_renderer.colors import is_color, split_alpha, to_hex6


class ColorTests(unittest.TestCase):
    def test_split_alpha_from_eight_digit_hex(self):
        color, alpha = split_alpha("#11223380")
        self.assertEqual(color, "#112233")
        self.assertAlmostEqual(alpha, 0x80 / 255)

    def test_split_alpha_leaves_other_forms(self):
        self.assertEqual(split_alpha("#112233"), ("#112233", 1.0))
        self.assertEqual(split_alpha("rgba(1, 2, 3, 0.5)"), ("rgba(1, 2, 3, 0.5)", 1.0))

    def test_is_color(self):
        for value in ("#fff", "#ffff", "#a1b2c3", "#a1b2c3d4", "rgb(1,2,3)", "rgba(255, 0, 0, 0.4)"):
            self.assertTrue(is_color(value), value)
        for value in ("", "red", "#12", "rgb(300,0,0)", None, 12):
            self.assertFalse(is_color(value), value)

    def test_to_hex6(self):
        self.assertEqual(to_hex6("#4a90e2ff"), "4a90e2")
        self.assertEqual(to_hex6("#abc"), "aabbcc")
        self.assertEqual(to_hex6("rgba(255, 0, 16, 0.5)"), "ff0010")
        self.assertEqual(to_hex6("hsl(1, 2%, 3%)"), "000000")
        self.assertEqual(to_hex6(None), "000000")


if __name__ == "__main__":
    unittest.main()
