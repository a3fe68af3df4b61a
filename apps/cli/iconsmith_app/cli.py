"""CLI entrypoints for rendering icons, multi-size previews, config files and catalog search."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from iconsmith_core import (
    AppConfig,
    decode_share_token,
    default_icon_config,
    encode_share_token,
    export_filename,
    icon_config_to_dict,
    load_config,
    load_icon_config,
    starter_icon_config,
)
from iconsmith_core.logging_setup import configure_logging, get_logger
from iconsmith_glyphs import EmojiCatalog, IconCatalog
from iconsmith_renderer import ConfigError, IconConfig, IconRenderer, PillowTextMeasurer


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _icon_config(args: argparse.Namespace) -> IconConfig:
    if getattr(args, "token", None):
        return decode_share_token(args.token)
    if getattr(args, "config", None):
        return load_icon_config(Path(args.config).expanduser())
    return starter_icon_config()


def build_renderer(settings: AppConfig, icon_cfg: IconConfig) -> IconRenderer:
    measurer = PillowTextMeasurer(
        font_files=settings.fonts.files,
        font_dirs=[Path(d) for d in settings.fonts.directories],
    )
    return IconRenderer(icon_cfg, glyph_source=IconCatalog.builtin(), measurer=measurer)


def _output_dir(settings: AppConfig, override: str | None) -> Path:
    raw = override or settings.render.output_dir or "."
    return Path(raw).expanduser().resolve()


def _parse_sizes(value: str) -> list[int]:
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size list: {value!r}") from exc
    if not sizes or any(size <= 0 for size in sizes):
        raise argparse.ArgumentTypeError("sizes must be positive integers")
    return sizes


def cmd_render(args: argparse.Namespace) -> int:
    settings = load_config()
    icon_cfg = _icon_config(args)
    size = args.size or settings.render.default_size
    renderer = build_renderer(settings, icon_cfg)

    if args.out:
        out = Path(args.out).expanduser().resolve()
    else:
        out = _output_dir(settings, None) / export_filename(icon_cfg, "svg")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(renderer.render(size), encoding="utf-8")

    get_logger().info(
        "rendered %s at %s",
        out,
        size,
        extra={"event": "render", "path": out, "size": size, "foreground": icon_cfg.foreground.kind},
    )
    _print_json({"success": True, "path": str(out), "size": size})
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    settings = load_config()
    icon_cfg = _icon_config(args)
    sizes = args.sizes or settings.render.preview_sizes
    out_dir = _output_dir(settings, args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    renderer = build_renderer(settings, icon_cfg)
    targets = [(out_dir / export_filename(icon_cfg, "svg", size), size) for size in sizes]
    written = []
    for item in renderer.render_many(targets):
        item.target.write_text(item.markup, encoding="utf-8")
        written.append({"path": str(item.target), "size": item.size})

    get_logger().info(
        "wrote %d previews to %s",
        len(written),
        out_dir,
        extra={"event": "preview", "path": out_dir, "sizes": list(sizes), "foreground": icon_cfg.foreground.kind},
    )
    _print_json({"success": True, "reference_size": max(sizes), "previews": written})
    return 0


def cmd_config_defaults(_args: argparse.Namespace) -> int:
    _print_json(icon_config_to_dict(default_icon_config()))
    return 0


def cmd_config_starter(_args: argparse.Namespace) -> int:
    _print_json(icon_config_to_dict(starter_icon_config()))
    return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
    load_icon_config(Path(args.path).expanduser())
    _print_json({"valid": True, "path": args.path})
    return 0


def cmd_config_encode(args: argparse.Namespace) -> int:
    token = encode_share_token(load_icon_config(Path(args.path).expanduser()))
    _print_json({"token": token})
    return 0


def cmd_config_decode(args: argparse.Namespace) -> int:
    _print_json(icon_config_to_dict(decode_share_token(args.token)))
    return 0


def cmd_icons_search(args: argparse.Namespace) -> int:
    catalog = IconCatalog.builtin()
    _print_json([{"name": e.name, "display_name": e.display_name} for e in catalog.search(args.query)])
    return 0


def cmd_emoji_search(args: argparse.Namespace) -> int:
    catalog = EmojiCatalog.builtin()
    _print_json([{"emoji": e.emoji, "label": e.label, "tags": list(e.tags)} for e in catalog.search(args.query)])
    return 0


def _add_source_args(cmd: argparse.ArgumentParser) -> None:
    source = cmd.add_mutually_exclusive_group()
    source.add_argument("--config", default=None, help="Path to icon configuration JSON")
    source.add_argument("--token", default=None, help="Shareable configuration token")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconsmith", description="Icon renderer and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render an icon configuration to an SVG file")
    _add_source_args(render_cmd)
    render_cmd.add_argument("--size", type=int, default=None, help="Canvas edge length in pixels")
    render_cmd.add_argument("--out", default=None, help="Output file (default: derived from the configuration)")
    render_cmd.set_defaults(func=cmd_render)

    preview_cmd = sub.add_parser("preview", help="Render once and write scaled copies at several sizes")
    _add_source_args(preview_cmd)
    preview_cmd.add_argument("--sizes", type=_parse_sizes, default=None, help="Comma separated sizes, e.g. 512,64,32")
    preview_cmd.add_argument("--out-dir", default=None, help="Output directory")
    preview_cmd.set_defaults(func=cmd_preview)

    config_cmd = sub.add_parser("config", help="Icon configuration helpers")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("defaults", help="Print the default configuration").set_defaults(func=cmd_config_defaults)
    config_sub.add_parser("starter", help="Print the starter configuration").set_defaults(func=cmd_config_starter)
    validate_cmd = config_sub.add_parser("validate", help="Validate a configuration file")
    validate_cmd.add_argument("path")
    validate_cmd.set_defaults(func=cmd_config_validate)
    encode_cmd = config_sub.add_parser("encode", help="Encode a configuration file as a share token")
    encode_cmd.add_argument("path")
    encode_cmd.set_defaults(func=cmd_config_encode)
    decode_cmd = config_sub.add_parser("decode", help="Decode a share token to JSON")
    decode_cmd.add_argument("token")
    decode_cmd.set_defaults(func=cmd_config_decode)

    icons_cmd = sub.add_parser("icons", help="Icon catalog")
    icons_sub = icons_cmd.add_subparsers(dest="icons_cmd", required=True)
    icons_search = icons_sub.add_parser("search", help="Search icons by name")
    icons_search.add_argument("query", nargs="?", default="")
    icons_search.set_defaults(func=cmd_icons_search)

    emoji_cmd = sub.add_parser("emoji", help="Emoji catalog")
    emoji_sub = emoji_cmd.add_subparsers(dest="emoji_cmd", required=True)
    emoji_search = emoji_sub.add_parser("search", help="Search emoji by label or tag")
    emoji_search.add_argument("query", nargs="?", default="")
    emoji_search.set_defaults(func=cmd_emoji_search)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_config()
    configure_logging(keep_files=settings.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ConfigError as exc:
        get_logger().warning("configuration rejected: %s", exc, extra={"event": "config_error"})
        print(json.dumps({"success": False, "errors": exc.problems}, indent=2, sort_keys=True), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
