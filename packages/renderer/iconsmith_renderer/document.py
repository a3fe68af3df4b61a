"""Assembly of background and foreground layers into one vector document."""

from __future__ import annotations

from .background import background_markup, compose_background
from .foreground import ForegroundLayout
from .markup import SVG_NS, fmt
from .models import IconConfig


def document_header(size: float) -> str:
    edge = fmt(size)
    return f'<svg xmlns="{SVG_NS}" width="{edge}" height="{edge}" viewBox="0 0 {edge} {edge}">'


def assemble_document(config: IconConfig, size: float, foreground: ForegroundLayout) -> str:
    layer = compose_background(config.background, size)
    return "".join(
        (
            document_header(size),
            layer.defs,
            background_markup(layer, size),
            foreground.to_markup(),
            "</svg>",
        )
    )
