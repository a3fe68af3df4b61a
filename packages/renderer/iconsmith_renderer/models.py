"""Typed icon configuration and layout models."""

from __future__ import annotations

from dataclasses import dataclass, field


BACKGROUND_KINDS = ("solid", "transparent", "linear-gradient", "radial-gradient")
GRADIENT_KINDS = ("linear-gradient", "radial-gradient")
FOREGROUND_KINDS = ("text", "emoji", "emoji-mono", "icon")

DEFAULT_EMOJI = "\U0001F3A8"
DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_FOREGROUND_SIZE = 80.0
MAX_TEXT_LENGTH = 256


@dataclass(frozen=True)
class BackgroundConfig:
    kind: str = "solid"
    color: str = "#4a90e2"
    gradient_color: str | None = None
    gradient_angle: float = 0.0
    gradient_radius: float = 50.0
    corner_radius: float = 0.0


@dataclass(frozen=True)
class ForegroundConfig:
    kind: str = "text"
    color: str = "#ffffff"
    text: str = "A"
    emoji: str = DEFAULT_EMOJI
    emoji_name: str | None = None
    icon_name: str | None = None
    size: float = DEFAULT_FOREGROUND_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: str = "normal"
    font_style: str = "normal"
    text_decoration: str = "none"
    monospace: bool = False


@dataclass(frozen=True)
class IconConfig:
    background: BackgroundConfig = field(default_factory=BackgroundConfig)
    foreground: ForegroundConfig = field(default_factory=ForegroundConfig)


@dataclass(frozen=True)
class FontDescriptor:
    family: str
    size: float
    weight: str = "normal"
    style: str = "normal"

    def at(self, size: float) -> "FontDescriptor":
        return FontDescriptor(family=self.family, size=size, weight=self.weight, style=self.style)


@dataclass(frozen=True)
class BackgroundLayer:
    """Resolved background: fill reference, corner radius and opacity in canvas units."""

    kind: str
    fill: str | None
    corner_radius: float
    alpha: float
    defs: str = ""

    @property
    def needs_markers(self) -> bool:
        return self.alpha <= 0.01
