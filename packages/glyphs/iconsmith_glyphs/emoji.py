"""Emoji catalog with label and tag search."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .catalog import DATA_DIR


log = logging.getLogger("iconsmith.glyphs.emoji")


@dataclass(frozen=True)
class EmojiEntry:
    emoji: str
    label: str
    tags: tuple[str, ...] = ()


def _normalize(name: str) -> str:
    return " ".join(name.lower().replace("-", " ").replace("_", " ").split())


class EmojiCatalog:
    def __init__(self, entries: list[EmojiEntry] | None = None) -> None:
        self._entries = list(entries or [])
        self._by_label = {_normalize(e.label): e for e in self._entries}

    @classmethod
    def from_file(cls, path: Path) -> "EmojiCatalog":
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.error("failed to load emoji data %s: %s", path, exc)
            return cls()
        entries = []
        for item in raw if isinstance(raw, list) else []:
            if not isinstance(item, dict) or not item.get("emoji"):
                continue
            label = item.get("label") or item.get("annotation") or "Unknown"
            entries.append(EmojiEntry(emoji=item["emoji"], label=label, tags=tuple(item.get("tags") or ())))
        return cls(entries)

    @classmethod
    def builtin(cls) -> "EmojiCatalog":
        return cls.from_file(DATA_DIR / "emoji.json")

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[EmojiEntry]:
        return list(self._entries)

    def search(self, query: str) -> list[EmojiEntry]:
        needle = query.lower().strip()
        if not needle:
            return self.entries()
        return [
            e for e in self._entries if needle in e.label.lower() or any(needle in tag.lower() for tag in e.tags)
        ]

    def lookup(self, name: str) -> str | None:
        entry = self._by_label.get(_normalize(name))
        return entry.emoji if entry else None

    def name_for(self, emoji: str) -> str | None:
        for entry in self._entries:
            if entry.emoji == emoji:
                return entry.label
        return None
