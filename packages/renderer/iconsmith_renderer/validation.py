"""Structural checks for icon configurations."""

from __future__ import annotations

from .colors import is_color
from .models import BACKGROUND_KINDS, FOREGROUND_KINDS, GRADIENT_KINDS, MAX_TEXT_LENGTH, IconConfig


class ConfigError(ValueError):
    """Raised when a configuration cannot be loaded or fails validation."""

    def __init__(self, problems: list[str] | str) -> None:
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def _is_token(value: object) -> bool:
    return isinstance(value, str) or (isinstance(value, int) and not isinstance(value, bool))


def _number_in(value: object, low: float, high: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return low <= value <= high


def validate_icon_config(cfg: IconConfig) -> list[str]:
    """Return every problem found; fields of inactive kinds are never inspected."""
    problems: list[str] = []
    bg = cfg.background
    fg = cfg.foreground

    if bg.kind not in BACKGROUND_KINDS:
        problems.append(f"background.type must be one of {', '.join(BACKGROUND_KINDS)}")
    else:
        if not isinstance(bg.color, str):
            problems.append(f"background.color must be a string: {bg.color!r}")
        elif bg.kind != "transparent" and not is_color(bg.color):
            problems.append(f"background.color is not a color: {bg.color!r}")
        if bg.kind in GRADIENT_KINDS:
            if not bg.gradient_color:
                problems.append(f"background.gradientColor is required for {bg.kind}")
            elif not is_color(bg.gradient_color):
                problems.append(f"background.gradientColor is not a color: {bg.gradient_color!r}")
        if bg.kind == "linear-gradient" and not _number_in(bg.gradient_angle, 0, 360):
            problems.append("background.gradientAngle must be within 0..360")
        if bg.kind == "radial-gradient" and not (_number_in(bg.gradient_radius, 0, 150) and bg.gradient_radius > 0):
            problems.append("background.gradientSize must be within (0, 150]")
    if not _number_in(bg.corner_radius, 0, 100):
        problems.append("background.borderRadius must be within 0..100")

    if fg.kind not in FOREGROUND_KINDS:
        problems.append(f"foreground.type must be one of {', '.join(FOREGROUND_KINDS)}")
        return problems
    if not is_color(fg.color):
        problems.append(f"foreground.color is not a color: {fg.color!r}")
    if not _number_in(fg.size, 0, 150):
        problems.append("foreground.size must be within 0..150")

    if fg.kind == "text":
        if not isinstance(fg.text, str):
            problems.append("foreground.text must be a string")
        elif len(fg.text) > MAX_TEXT_LENGTH:
            problems.append(f"foreground.text exceeds {MAX_TEXT_LENGTH} characters")
        if not isinstance(fg.font_family, str) or not fg.font_family.strip():
            problems.append("foreground.fontFamily must be a non-empty string")
        if not isinstance(fg.monospace, bool):
            problems.append("foreground.monospace must be a boolean")
        for wire, value in (
            ("fontWeight", fg.font_weight),
            ("fontStyle", fg.font_style),
            ("textDecoration", fg.text_decoration),
        ):
            if not _is_token(value):
                problems.append(f"foreground.{wire} must be a string or integer")
    elif fg.kind in ("emoji", "emoji-mono"):
        if not isinstance(fg.emoji, str):
            problems.append("foreground.emoji must be a string")
        elif len(fg.emoji) > MAX_TEXT_LENGTH:
            problems.append(f"foreground.emoji exceeds {MAX_TEXT_LENGTH} characters")
        if fg.emoji_name is not None and not isinstance(fg.emoji_name, str):
            problems.append("foreground.emojiName must be a string")
    elif fg.icon_name is not None and not isinstance(fg.icon_name, str):
        problems.append("foreground.iconName must be a string")

    return problems


def ensure_valid(cfg: IconConfig) -> IconConfig:
    problems = validate_icon_config(cfg)
    if problems:
        raise ConfigError(problems)
    return cfg
