"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2
DEFAULT_PREVIEW_SIZES = [512, 64, 32, 24, 16]


@dataclass
class RenderSettings:
    default_size: int = 512
    preview_sizes: list[int] = field(default_factory=lambda: list(DEFAULT_PREVIEW_SIZES))
    output_dir: str | None = None


@dataclass
class FontSettings:
    directories: list[str] = field(default_factory=list)
    files: dict[str, str] = field(default_factory=dict)


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderSettings = field(default_factory=RenderSettings)
    fonts: FontSettings = field(default_factory=FontSettings)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Iconsmith"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Iconsmith"
    return Path.home() / ".config" / "iconsmith"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    try:
        cfg.render.default_size = max(1, min(4096, int(cfg.render.default_size)))
    except (TypeError, ValueError):
        cfg.render.default_size = RenderSettings.default_size

    sizes: list[int] = []
    for value in cfg.render.preview_sizes if isinstance(cfg.render.preview_sizes, list) else []:
        try:
            size = int(value)
        except (TypeError, ValueError):
            continue
        if 1 <= size <= 4096 and size not in sizes:
            sizes.append(size)
    cfg.render.preview_sizes = sizes or list(DEFAULT_PREVIEW_SIZES)


def _normalize_fonts(cfg: AppConfig) -> None:
    if not isinstance(cfg.fonts.directories, list):
        cfg.fonts.directories = []
    cfg.fonts.directories = [str(d) for d in cfg.fonts.directories if d]
    if not isinstance(cfg.fonts.files, dict):
        cfg.fonts.files = {}


def _normalize_diagnostics(cfg: AppConfig) -> None:
    try:
        cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))
    except (TypeError, ValueError):
        cfg.diagnostics.keep_log_files = DiagnosticsConfig.keep_log_files


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept preview sizes and the font directory at the top level.
        render = dict(data.get("render", {}) or {})
        if "preview_sizes" in data:
            render.setdefault("preview_sizes", data.pop("preview_sizes"))
        data["render"] = render
        fonts = dict(data.get("fonts", {}) or {})
        if "font_dir" in data:
            fonts.setdefault("directories", [data.pop("font_dir")])
        data["fonts"] = fonts
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderSettings, data.get("render", {})),
        fonts=_merge(FontSettings, data.get("fonts", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_render(cfg)
    _normalize_fonts(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
