"""Export file names derived from the icon configuration."""

from __future__ import annotations

import re

from iconsmith_renderer import IconConfig, to_hex6


_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9]")


def _content_part(cfg: IconConfig) -> str:
    fg = cfg.foreground
    if fg.kind == "text" and isinstance(fg.text, str) and fg.text:
        return _UNSAFE_RE.sub("-", fg.text)[:20]
    if fg.kind in ("emoji", "emoji-mono"):
        if isinstance(fg.emoji_name, str) and fg.emoji_name:
            return _UNSAFE_RE.sub("-", fg.emoji_name).lower()[:30]
        return "emoji"
    if fg.kind == "icon" and isinstance(fg.icon_name, str) and fg.icon_name:
        return fg.icon_name
    return "icon"


def export_filename(cfg: IconConfig, extension: str, size: int | None = None) -> str:
    parts = [_content_part(cfg), to_hex6(cfg.background.color), to_hex6(cfg.foreground.color)]
    if size:
        parts.append(f"{size}x{size}")
    return f"{'-'.join(parts)}.{extension}"
