"""Small helpers shared by the markup emitters."""

from __future__ import annotations

import xml.etree.ElementTree as ET


SVG_NS = "http://www.w3.org/2000/svg"
XHTML_NS = "http://www.w3.org/1999/xhtml"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xhtml", XHTML_NS)

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    for raw, entity in _ESCAPES:
        text = text.replace(raw, entity)
    return text


def strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def fmt(value: float) -> str:
    """Compact decimal form for attribute values (at most 4 fractional digits)."""
    rounded = round(float(value), 4)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.4f}".rstrip("0").rstrip(".")


def attrs(**values: object) -> str:
    """Render keyword attributes as ` key="value"` pairs; underscores become hyphens, None is skipped."""
    parts = []
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, float):
            text = fmt(value)
        else:
            text = escape_xml(str(value))
        parts.append(f' {key.rstrip("_").replace("_", "-")}="{text}"')
    return "".join(parts)
