"""Icon renderer facade: configuration in, vector document out."""

from __future__ import annotations

from typing import Iterable, TypeVar

from .document import assemble_document
from .foreground import ForegroundLayout, GlyphSource, LayoutContext, layout_foreground
from .measure import TextMeasurer
from .models import IconConfig
from .projector import Presentation, project_targets


DEFAULT_RENDER_SIZE = 512

T = TypeVar("T")


class IconRenderer:
    """Renders an `IconConfig` at any canvas size.

    The measurer and glyph source are optional; without a measurer text is fitted with
    the fixed-ratio heuristic, without a glyph source icon foregrounds render empty.
    """

    def __init__(
        self,
        config: IconConfig | None = None,
        glyph_source: GlyphSource | None = None,
        measurer: TextMeasurer | None = None,
    ) -> None:
        self._config = config or IconConfig()
        self.context = LayoutContext(measurer=measurer, glyph_source=glyph_source)

    def set_config(self, config: IconConfig) -> None:
        self._config = config

    def get_config(self) -> IconConfig:
        return self._config

    def foreground_layout(self, size: float = DEFAULT_RENDER_SIZE) -> ForegroundLayout:
        return layout_foreground(self._config.foreground, size, self.context)

    def render(self, size: float = DEFAULT_RENDER_SIZE) -> str:
        if size <= 0:
            raise ValueError(f"render size must be positive, got {size!r}")
        return assemble_document(self._config, size, self.foreground_layout(size))

    def render_many(self, targets: Iterable[tuple[T, float]]) -> list[Presentation[T]]:
        """Render once at the largest requested size and project a scaled clone per target."""
        pairs = list(targets)
        if not pairs:
            return []
        reference = self.render(max(size for _, size in pairs))
        return project_targets(reference, pairs)
