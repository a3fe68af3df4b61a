"""Foreground layout: fitted text, monospace grids, emoji glyphs and catalog icons.

Every foreground kind has its own layout function producing a layout object with
absolute canvas positions; `to_markup()` turns the layout into a vector fragment.
All geometry derives from `max_extent = size * foreground.size / 100`, so a layout
computed at one canvas size is a uniform scale of the layout at any other size.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Protocol

from .markup import attrs, escape_xml, fmt, strip_namespace
from .measure import HEURISTIC_WIDTH_RATIO, TextMeasurer, visible_length
from .models import DEFAULT_EMOJI, DEFAULT_FOREGROUND_SIZE, FontDescriptor, ForegroundConfig


ASCENT_RATIO = 0.85
EMOJI_LINE_HEIGHT_RATIO = 0.93
MAX_FIT_PASSES = 8
MAX_BISECT_PASSES = 32

EMOJI_FONT_FAMILY = '"Noto Color Emoji", "Segoe UI Emoji"'
EMOJI_MONO_FONT_FAMILY = '"Noto Emoji", "Segoe UI Symbol", "Noto Color Emoji"'

log = logging.getLogger("iconsmith.renderer.foreground")


class GlyphSource(Protocol):
    def lookup(self, name: str) -> str | None:
        ...


@dataclass(frozen=True)
class LayoutContext:
    measurer: TextMeasurer | None = None
    glyph_source: GlyphSource | None = None


@dataclass(frozen=True)
class PlacedText:
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class TextStyle:
    color: str
    family: str
    weight: str = "normal"
    style: str = "normal"
    decoration: str = "none"

    def attributes(self, font_size: float) -> str:
        return attrs(
            font_size=float(font_size),
            fill=self.color,
            text_anchor="middle",
            font_family=self.family,
            font_weight=self.weight,
            font_style=self.style,
            text_decoration=self.decoration,
        )


@dataclass(frozen=True)
class EmptyLayout:
    kind: str = ""

    def to_markup(self) -> str:
        return ""


@dataclass(frozen=True)
class TextLayout:
    font_size: float
    lines: tuple[PlacedText, ...]
    style: TextStyle

    def to_markup(self) -> str:
        if not self.lines:
            return ""
        first = self.lines[0]
        spans = "".join(
            f"<tspan{attrs(x=float(line.x), y=float(line.y))}>{escape_xml(line.text)}</tspan>" for line in self.lines
        )
        return f"<text{attrs(x=float(first.x), y=float(first.y))}{self.style.attributes(self.font_size)}>{spans}</text>"


@dataclass(frozen=True)
class MonospaceLayout:
    font_size: float
    char_width: float
    glyphs: tuple[PlacedText, ...]
    style: TextStyle

    def to_markup(self) -> str:
        style = self.style.attributes(self.font_size)
        return "".join(
            f"<text{attrs(x=float(g.x), y=float(g.y))}{style}>{escape_xml(g.text)}</text>" for g in self.glyphs
        )


@dataclass(frozen=True)
class EmojiLayout:
    x: float
    y: float
    extent: float
    font_size: float
    line_height: float
    family: str
    color: str
    lines: tuple[str, ...]

    def to_markup(self) -> str:
        family = self.family.replace('"', "")
        css = (
            f"font-family:{family};font-size:{fmt(self.font_size)}px;"
            f"line-height:{fmt(self.line_height)}px;color:{self.color};margin:0;padding:0;text-align:center;"
        )
        body = "".join(
            f'<div xmlns="http://www.w3.org/1999/xhtml"{attrs(style=css)}>{escape_xml(line)}</div>' for line in self.lines
        )
        box = attrs(x=float(self.x), y=float(self.y), width=float(self.extent), height=float(self.extent))
        return f"<foreignObject{box}>{body}</foreignObject>"


@dataclass(frozen=True)
class IconLayout:
    name: str
    element: ET.Element

    def to_markup(self) -> str:
        return ET.tostring(self.element, encoding="unicode")


def max_extent(fg: ForegroundConfig, size: float) -> float:
    percent = DEFAULT_FOREGROUND_SIZE if fg.size is None else fg.size
    return size * percent / 100


def _measured_width(line: str, font: FontDescriptor, measurer: TextMeasurer) -> float:
    width = float(measurer.measure_width(line, font))
    if not math.isfinite(width) or width < 0:
        raise ValueError(f"measurer returned unusable width {width!r}")
    return width


def _scale_to_fit(line: str, extent: float, font: FontDescriptor, measurer: TextMeasurer) -> float:
    font_size = extent
    for _ in range(MAX_FIT_PASSES):
        width = _measured_width(line, font.at(font_size), measurer)
        if width <= extent:
            return font_size
        font_size *= extent / width

    # Width is not proportional to font size; bisect below the last overshooting size.
    if _measured_width(line, font.at(font_size), measurer) <= extent:
        return font_size
    low, high = 0.0, font_size
    for _ in range(MAX_BISECT_PASSES):
        mid = (low + high) / 2
        if _measured_width(line, font.at(mid), measurer) <= extent:
            low = mid
        else:
            high = mid
    return low


def fit_font_size(line: str, extent: float, font: FontDescriptor, measurer: TextMeasurer | None) -> float:
    """Largest font size at which `line` measures no wider than `extent`."""
    if measurer is not None:
        try:
            return _scale_to_fit(line, extent, font, measurer)
        except Exception:
            log.debug("text measurement failed, using heuristic width", exc_info=True)
    count = visible_length(line)
    if count == 0:
        return extent
    return min(extent, extent / (HEURISTIC_WIDTH_RATIO * count))


def fitted_font_size(lines: list[str], extent: float, font: FontDescriptor, measurer: TextMeasurer | None) -> float:
    font_size = extent
    for line in lines:
        if line.strip():
            font_size = min(font_size, fit_font_size(line, extent, font, measurer))
    return min(font_size, extent / len(lines))


def _first_baseline(size: float, line_count: int, font_size: float) -> float:
    top = (size - line_count * font_size) / 2
    return top + font_size * ASCENT_RATIO


def _text_style(fg: ForegroundConfig) -> TextStyle:
    return TextStyle(
        color=fg.color,
        family=fg.font_family or "sans-serif",
        weight=fg.font_weight or "normal",
        style=fg.font_style or "normal",
        decoration=fg.text_decoration or "none",
    )


def layout_monospace(fg: ForegroundConfig, size: float, ctx: LayoutContext) -> MonospaceLayout | TextLayout:
    lines = (fg.text or " ").split("\n")
    extent = max_extent(fg, size)
    longest = max(len(line) for line in lines)
    if longest == 0 or extent <= 0:
        return _flowed_layout(fg, lines, size, ctx)

    char_width = extent / longest
    font_size = min(extent / len(lines), char_width)
    baseline = _first_baseline(size, len(lines), font_size)
    center = size / 2

    glyphs: list[PlacedText] = []
    for row, line in enumerate(lines):
        y = baseline + row * font_size
        for col, ch in enumerate(line):
            x = center + (col - len(line) / 2 + 0.5) * char_width
            glyphs.append(PlacedText(text=ch, x=x, y=y))
    return MonospaceLayout(font_size=font_size, char_width=char_width, glyphs=tuple(glyphs), style=_text_style(fg))


def _flowed_layout(fg: ForegroundConfig, lines: list[str], size: float, ctx: LayoutContext) -> TextLayout:
    style = _text_style(fg)
    extent = max_extent(fg, size)
    font = FontDescriptor(family=style.family, size=extent, weight=style.weight, style=style.style)
    font_size = fitted_font_size(lines, extent, font, ctx.measurer)
    baseline = _first_baseline(size, len(lines), font_size)
    placed = tuple(
        PlacedText(text=line, x=size / 2, y=baseline + index * font_size) for index, line in enumerate(lines)
    )
    return TextLayout(font_size=font_size, lines=placed, style=style)


def layout_text(fg: ForegroundConfig, size: float, ctx: LayoutContext) -> MonospaceLayout | TextLayout:
    if fg.monospace:
        return layout_monospace(fg, size, ctx)
    return _flowed_layout(fg, (fg.text or " ").split("\n"), size, ctx)


def layout_emoji(fg: ForegroundConfig, size: float, ctx: LayoutContext) -> EmojiLayout:
    family = EMOJI_MONO_FONT_FAMILY if fg.kind == "emoji-mono" else EMOJI_FONT_FAMILY
    lines = (fg.emoji or DEFAULT_EMOJI).split("\n")
    extent = max_extent(fg, size)
    font_size = fitted_font_size(lines, extent, FontDescriptor(family=family, size=extent), ctx.measurer)
    offset = (size - extent) / 2
    return EmojiLayout(
        x=offset,
        y=offset,
        extent=extent,
        font_size=font_size,
        line_height=extent * EMOJI_LINE_HEIGHT_RATIO,
        family=family,
        color=fg.color,
        lines=tuple(lines),
    )


def layout_icon(fg: ForegroundConfig, size: float, ctx: LayoutContext) -> IconLayout | EmptyLayout:
    if not fg.icon_name or ctx.glyph_source is None:
        return EmptyLayout(kind="icon")
    markup = ctx.glyph_source.lookup(fg.icon_name)
    if not markup:
        log.info("icon %r not found in glyph source", fg.icon_name)
        return EmptyLayout(kind="icon")
    try:
        root = ET.fromstring(markup)
    except ET.ParseError:
        log.warning("icon %r has unparseable markup", fg.icon_name)
        return EmptyLayout(kind="icon")
    if strip_namespace(root.tag) != "svg":
        log.warning("icon %r markup root is <%s>, expected <svg>", fg.icon_name, strip_namespace(root.tag))
        return EmptyLayout(kind="icon")

    extent = max_extent(fg, size)
    offset = (size - extent) / 2
    root.set("x", fmt(offset))
    root.set("y", fmt(offset))
    root.set("width", fmt(extent))
    root.set("height", fmt(extent))
    root.set("stroke", fg.color)
    if root.get("fill") == "currentColor":
        root.set("fill", fg.color)
    return IconLayout(name=fg.icon_name, element=root)


ForegroundLayout = EmptyLayout | TextLayout | MonospaceLayout | EmojiLayout | IconLayout

LAYOUTS: dict[str, Callable[[ForegroundConfig, float, LayoutContext], ForegroundLayout]] = {
    "text": layout_text,
    "emoji": layout_emoji,
    "emoji-mono": layout_emoji,
    "icon": layout_icon,
}


def layout_foreground(fg: ForegroundConfig, size: float, ctx: LayoutContext | None = None) -> ForegroundLayout:
    layout = LAYOUTS.get(fg.kind)
    if layout is None:
        log.warning("unknown foreground type %r, rendering no foreground", fg.kind)
        return EmptyLayout(kind=str(fg.kind))
    return layout(fg, size, ctx or LayoutContext())
