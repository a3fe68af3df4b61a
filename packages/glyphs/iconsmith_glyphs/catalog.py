"""Vector icon catalog built from outline/filled node tables."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from xml.sax.saxutils import quoteattr


DATA_DIR = Path(__file__).resolve().parent / "data"
FILLED_SUFFIX = "-filled"

_OUTLINE_ROOT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
)
_FILLED_ROOT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor">'
)

log = logging.getLogger("iconsmith.glyphs.catalog")


@dataclass(frozen=True)
class IconEntry:
    name: str
    display_name: str
    svg: str


def _node_markup(node: list[Any]) -> str:
    tag, attributes = node[0], dict(node[1] if len(node) > 1 else {})
    if tag == "path" and str(attributes.get("d", "")).startswith("M0 0"):
        # 24x24 frame path that only reserves the viewport.
        return f'<path stroke="none" fill="none" d={quoteattr(attributes["d"])} />'
    parts = "".join(f" {key}={quoteattr(str(value))}" for key, value in attributes.items())
    return f"<{tag}{parts} />"


def svg_from_nodes(nodes: list[list[Any]], filled: bool = False) -> str:
    body = "".join(_node_markup(node) for node in nodes if node)
    root = _FILLED_ROOT if filled else _OUTLINE_ROOT
    return f"{root}{body}</svg>"


def _read_table(path: Path) -> dict[str, list[list[Any]]]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.error("failed to load icon table %s: %s", path, exc)
        return {}
    if not isinstance(raw, dict):
        log.error("icon table %s is not an object", path)
        return {}
    return raw


class IconCatalog:
    """Name to markup lookup over outline icons and their `-filled` variants."""

    def __init__(
        self,
        outline: dict[str, list[list[Any]]] | None = None,
        filled: dict[str, list[list[Any]]] | None = None,
    ) -> None:
        entries: list[IconEntry] = []
        for name, nodes in (outline or {}).items():
            entries.append(IconEntry(name=name, display_name=name.replace("-", " "), svg=svg_from_nodes(nodes)))
        for name, nodes in (filled or {}).items():
            entries.append(
                IconEntry(
                    name=f"{name}{FILLED_SUFFIX}",
                    display_name=f"{name.replace('-', ' ')} (filled)",
                    svg=svg_from_nodes(nodes, filled=True),
                )
            )
        entries.sort(key=lambda e: e.name)
        self._entries = entries
        self._by_name = {e.name: e.svg for e in entries}
        log.debug("icon catalog loaded with %d icons", len(entries))

    @classmethod
    def from_files(cls, outline_path: Path, filled_path: Path | None = None) -> "IconCatalog":
        return cls(_read_table(outline_path), _read_table(filled_path) if filled_path else None)

    @classmethod
    def builtin(cls) -> "IconCatalog":
        return cls.from_files(DATA_DIR / "icons-outline.json", DATA_DIR / "icons-filled.json")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def entries(self) -> list[IconEntry]:
        return list(self._entries)

    def lookup(self, name: str) -> str | None:
        return self._by_name.get(name)

    def search(self, query: str) -> list[IconEntry]:
        needle = query.lower().strip()
        if not needle:
            return self.entries()
        return [e for e in self._entries if needle in e.display_name or needle in e.name]


class StaticGlyphSource:
    def __init__(self, glyphs: dict[str, str] | None = None) -> None:
        self.glyphs = dict(glyphs or {})

    def lookup(self, name: str) -> str | None:
        return self.glyphs.get(name)
