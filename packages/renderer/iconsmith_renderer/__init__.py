"""Renderer package for icon document composition."""

from .background import compose_background, gradient_defs, linear_gradient_vector
from .colors import is_color, split_alpha, to_hex6
from .document import assemble_document
from .engine import DEFAULT_RENDER_SIZE, IconRenderer
from .foreground import LayoutContext, layout_foreground
from .measure import HeuristicTextMeasurer, PillowTextMeasurer, TextMeasurer
from .models import (
    BACKGROUND_KINDS,
    FOREGROUND_KINDS,
    BackgroundConfig,
    BackgroundLayer,
    FontDescriptor,
    ForegroundConfig,
    IconConfig,
)
from .projector import Presentation, project, project_targets
from .validation import ConfigError, ensure_valid, validate_icon_config

__all__ = [
    "BACKGROUND_KINDS",
    "BackgroundConfig",
    "BackgroundLayer",
    "ConfigError",
    "DEFAULT_RENDER_SIZE",
    "FOREGROUND_KINDS",
    "FontDescriptor",
    "ForegroundConfig",
    "HeuristicTextMeasurer",
    "IconConfig",
    "IconRenderer",
    "LayoutContext",
    "PillowTextMeasurer",
    "Presentation",
    "TextMeasurer",
    "assemble_document",
    "compose_background",
    "ensure_valid",
    "gradient_defs",
    "is_color",
    "layout_foreground",
    "linear_gradient_vector",
    "project",
    "project_targets",
    "split_alpha",
    "to_hex6",
    "validate_icon_config",
]
