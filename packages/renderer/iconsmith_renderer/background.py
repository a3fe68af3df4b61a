"""Background layer composition: fill, gradient geometry, corner rounding and alpha."""

from __future__ import annotations

import math

from .colors import split_alpha
from .markup import attrs, fmt
from .models import GRADIENT_KINDS, BackgroundConfig, BackgroundLayer


GRADIENT_ID = "bgGradient"
MARKER_OPACITY = 0.01


def linear_gradient_vector(angle_degrees: float) -> tuple[float, float, float, float]:
    """Stop endpoints (x1, y1, x2, y2) in percent of the unit square, symmetric about its center."""
    rad = math.radians(angle_degrees)
    dx = math.cos(rad) * 50
    dy = math.sin(rad) * 50
    return 50 + dx, 50 + dy, 50 - dx, 50 - dy


def _stops(primary: str, secondary: str) -> str:
    first, _ = split_alpha(primary)
    second, _ = split_alpha(secondary)
    return f'<stop{attrs(offset="0%", stop_color=first)} /><stop{attrs(offset="100%", stop_color=second)} />'


def gradient_defs(bg: BackgroundConfig) -> str:
    if bg.kind not in GRADIENT_KINDS or not bg.gradient_color:
        return ""
    if bg.kind == "linear-gradient":
        x1, y1, x2, y2 = linear_gradient_vector(bg.gradient_angle or 0.0)
        opening = (
            f'<linearGradient id="{GRADIENT_ID}" x1="{fmt(x1)}%" y1="{fmt(y1)}%" x2="{fmt(x2)}%" y2="{fmt(y2)}%">'
        )
        closing = "</linearGradient>"
    else:
        radius = bg.gradient_radius or 50.0
        opening = f'<radialGradient id="{GRADIENT_ID}" cx="50%" cy="50%" r="{fmt(radius)}%">'
        closing = "</radialGradient>"
    return f"<defs>{opening}{_stops(bg.color, bg.gradient_color)}{closing}</defs>"


def compose_background(bg: BackgroundConfig, size: float) -> BackgroundLayer:
    corner_radius = (bg.corner_radius or 0.0) * size / 100
    if bg.kind == "transparent":
        return BackgroundLayer(kind=bg.kind, fill=None, corner_radius=corner_radius, alpha=0.0)

    color, alpha = split_alpha(bg.color)
    defs = gradient_defs(bg)
    # A gradient without its second stop degrades to the primary color.
    fill = f"url(#{GRADIENT_ID})" if defs else color
    return BackgroundLayer(kind=bg.kind, fill=fill, corner_radius=corner_radius, alpha=alpha, defs=defs)


def background_markup(layer: BackgroundLayer, size: float) -> str:
    out = ""
    if layer.fill is not None:
        radius = layer.corner_radius if layer.corner_radius > 0 else None
        out += (
            f"<rect{attrs(width=float(size), height=float(size), rx=radius, ry=radius)}"
            f"{attrs(fill=layer.fill, fill_opacity=float(layer.alpha))} />"
        )
    if layer.needs_markers:
        # Keep the painted bounding box at full canvas size so renderers do not crop the foreground.
        edge = float(size) - 1
        for x, y in ((0.0, 0.0), (edge, edge)):
            out += (
                f"<rect{attrs(x=x, y=y, width=1.0, height=1.0)}"
                f'{attrs(fill="#000000", fill_opacity=MARKER_OPACITY)} />'
            )
    return out
