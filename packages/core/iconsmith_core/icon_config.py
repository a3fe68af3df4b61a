"""Icon configuration codec: JSON dicts, files and shareable tokens.

This is the only place external configuration enters the renderer, so every
malformed payload is turned into a `ConfigError` here.
"""

from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path
from typing import Any

from iconsmith_renderer import BackgroundConfig, ConfigError, ForegroundConfig, IconConfig, ensure_valid


_BACKGROUND_KEYS = {
    "type": "kind",
    "color": "color",
    "gradientColor": "gradient_color",
    "gradientAngle": "gradient_angle",
    "gradientSize": "gradient_radius",
    "borderRadius": "corner_radius",
}
_FOREGROUND_KEYS = {
    "type": "kind",
    "color": "color",
    "text": "text",
    "emoji": "emoji",
    "emojiName": "emoji_name",
    "iconName": "icon_name",
    "size": "size",
    "fontFamily": "font_family",
    "fontWeight": "font_weight",
    "fontStyle": "font_style",
    "textDecoration": "text_decoration",
    "monospace": "monospace",
}


def default_icon_config() -> IconConfig:
    return IconConfig(
        background=BackgroundConfig(
            kind="solid",
            color="#4a90e2",
            gradient_color="#357abd",
            gradient_angle=45,
            gradient_radius=50,
            corner_radius=0,
        ),
        foreground=ForegroundConfig(kind="text", color="#ffffff", text="A", size=80, font_family="sans-serif"),
    )


def starter_icon_config() -> IconConfig:
    return IconConfig(
        background=BackgroundConfig(
            kind="linear-gradient",
            color="#667eea",
            gradient_color="#764ba2",
            gradient_angle=135,
            gradient_radius=50,
            corner_radius=20,
        ),
        foreground=ForegroundConfig(kind="emoji", color="#ffffff", emoji="\U0001F3A8", size=80),
    )


def _section(raw: dict[str, Any], name: str, keys: dict[str, str]) -> dict[str, Any]:
    section = raw.get(name, {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be an object")
    return {attr: section[wire] for wire, attr in keys.items() if section.get(wire) is not None}


def icon_config_from_dict(raw: Any) -> IconConfig:
    if not isinstance(raw, dict):
        raise ConfigError("icon configuration must be a JSON object")
    cfg = IconConfig(
        background=BackgroundConfig(**_section(raw, "background", _BACKGROUND_KEYS)),
        foreground=ForegroundConfig(**_section(raw, "foreground", _FOREGROUND_KEYS)),
    )
    return ensure_valid(cfg)


def icon_config_to_dict(cfg: IconConfig) -> dict[str, Any]:
    def _dump(obj: object, keys: dict[str, str]) -> dict[str, Any]:
        return {wire: getattr(obj, attr) for wire, attr in keys.items() if getattr(obj, attr) is not None}

    return {
        "background": _dump(cfg.background, _BACKGROUND_KEYS),
        "foreground": _dump(cfg.foreground, _FOREGROUND_KEYS),
    }


def parse_icon_config(text: str) -> IconConfig:
    try:
        raw = json.loads(text)
    except ValueError as exc:
        raise ConfigError(f"invalid JSON: {exc}") from exc
    return icon_config_from_dict(raw)


def load_icon_config(path: Path) -> IconConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return parse_icon_config(text)


def save_icon_config(cfg: IconConfig, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(icon_config_to_dict(cfg), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def encode_share_token(cfg: IconConfig) -> str:
    payload = json.dumps(icon_config_to_dict(cfg), separators=(",", ":"), ensure_ascii=False)
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def decode_share_token(token: str) -> IconConfig:
    token = token.strip()
    padded = token + "=" * (-len(token) % 4)
    try:
        text = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ConfigError(f"invalid share token: {exc}") from exc
    return parse_icon_config(text)
