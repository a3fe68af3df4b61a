"""Text width measurement oracles used by the text fitting layout."""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from .models import FontDescriptor


HEURISTIC_WIDTH_RATIO = 0.6
REFERENCE_SIZE = 100

_GENERIC_FAMILIES = {
    "sans-serif": "DejaVuSans",
    "serif": "DejaVuSerif",
    "monospace": "DejaVuSansMono",
    "cursive": "DejaVuSans",
    "fantasy": "DejaVuSans",
    "system-ui": "DejaVuSans",
}
_ZERO_WIDTH = {0x200D, 0x200C, 0x20E3}

log = logging.getLogger("iconsmith.renderer.measure")


class TextMeasurer(Protocol):
    def measure_width(self, text: str, font: FontDescriptor) -> float:
        ...


def _is_invisible(ch: str) -> bool:
    cp = ord(ch)
    if cp in _ZERO_WIDTH or 0xFE00 <= cp <= 0xFE0F or 0x1F3FB <= cp <= 0x1F3FF or 0xE0020 <= cp <= 0xE007F:
        return True
    return unicodedata.combining(ch) != 0


def visible_length(text: str) -> int:
    """Character count excluding joiners, variation selectors, skin-tone modifiers and combining marks."""
    return sum(1 for ch in text if not _is_invisible(ch))


def heuristic_width(text: str, font: FontDescriptor) -> float:
    return HEURISTIC_WIDTH_RATIO * font.size * visible_length(text)


class HeuristicTextMeasurer:
    """Fixed-ratio stand-in used when no font backend is available."""

    def measure_width(self, text: str, font: FontDescriptor) -> float:
        return heuristic_width(text, font)


def family_names(family: str) -> list[str]:
    """Split a CSS-like family list (`"Noto Emoji", serif`) into bare names."""
    names = []
    for part in family.split(","):
        name = part.strip().strip("'\"").strip()
        if name:
            names.append(name)
    return names


class PillowTextMeasurer:
    """Measures with Pillow TrueType faces.

    Faces are loaded once at `REFERENCE_SIZE` and widths are scaled linearly to the
    requested size, so measurements do not depend on integer hinting at small sizes.
    """

    def __init__(self, font_files: dict[str, str] | None = None, font_dirs: list[Path] | None = None) -> None:
        self.font_files = {k.lower(): v for k, v in (font_files or {}).items()}
        self.font_dirs = [Path(d).expanduser() for d in (font_dirs or [])]
        self._faces: dict[tuple[str, str, str], object] = {}

    def measure_width(self, text: str, font: FontDescriptor) -> float:
        face = self._face(font.family, font.weight, font.style)
        return float(face.getlength(text)) * font.size / REFERENCE_SIZE

    def _candidates(self, family: str, weight: str, style: str) -> list[str]:
        bold = str(weight).lower() in ("bold", "bolder") or (str(weight).isdigit() and int(weight) >= 600)
        italic = str(style).lower() in ("italic", "oblique")
        suffix = ("-Bold" if bold else "") + ("-Oblique" if italic else "")

        out: list[str] = []
        for name in family_names(family):
            override = self.font_files.get(name.lower())
            if override:
                out.append(override)
            base = _GENERIC_FAMILIES.get(name.lower(), name.replace(" ", ""))
            stems = [base + suffix, base] if suffix else [base]
            for stem in stems:
                for directory in self.font_dirs:
                    out.append(str(directory / f"{stem}.ttf"))
                out.append(f"{stem}.ttf")
            out.append(name)
        out.append("DejaVuSans.ttf")
        return out

    def _face(self, family: str, weight: str, style: str):
        key = (family, str(weight), str(style))
        face = self._faces.get(key)
        if face is not None:
            return face

        for candidate in self._candidates(family, weight, style):
            try:
                face = ImageFont.truetype(candidate, REFERENCE_SIZE)
                break
            except Exception:
                continue
        else:
            log.debug("no font file for %r, using Pillow default font", family)
            try:
                face = ImageFont.load_default(size=REFERENCE_SIZE)
            except Exception:
                face = ImageFont.load_default()

        self._faces[key] = face
        return face
