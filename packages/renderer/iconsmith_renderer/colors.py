"""Color string parsing and alpha extraction."""

from __future__ import annotations

import re


_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_HEX8_RE = re.compile(r"^#[0-9a-fA-F]{8}$")
_FUNC_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*(\d*\.?\d+%?)\s*)?\)$",
    re.IGNORECASE,
)


def is_color(value: object) -> bool:
    if not isinstance(value, str):
        return False
    value = value.strip()
    if _HEX_RE.match(value):
        return True
    match = _FUNC_RE.match(value)
    if not match:
        return False
    return all(int(match.group(i)) <= 255 for i in (1, 2, 3))


def split_alpha(color: str) -> tuple[str, float]:
    """Split an 8-digit hex color into its `#RRGGBB` part and alpha in [0, 1].

    Any other color form is returned untouched with alpha 1.0.
    """
    value = color.strip()
    if _HEX8_RE.match(value):
        return value[:7], int(value[7:9], 16) / 255
    return value, 1.0


def to_hex6(color: object) -> str:
    """Six hex digits for `color` with alpha dropped, `000000` when unrecognized."""
    if not isinstance(color, str) or not color:
        return "000000"
    value = color.strip()
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) in (3, 4):
            return "".join(ch * 2 for ch in digits[:3])
        return digits[:6]
    match = _FUNC_RE.match(value)
    if match:
        return "".join(f"{int(match.group(i)):02x}" for i in (1, 2, 3))
    return "000000"
