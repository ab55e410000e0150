"""Icon table: slug -> inline SVG markup and brand colour."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..logging import get_logger

DEFAULT_DATASET = Path(__file__).with_name("icons.json")
DEFAULT_BRAND_COLOR = "#ffffff"

_SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor">'
PLACEHOLDER_SVG = _SVG_OPEN + '<circle cx="12" cy="12" r="10"/></svg>'

_logger = get_logger("icons")


@dataclass(frozen=True)
class IconData:
    title: str
    slug: str
    hex: str
    path: str


class IconTable:
    """Read-only icon lookup built once per process.

    A table that failed to load is simply empty: every lookup then returns
    the placeholder glyph and the neutral colour.
    """

    def __init__(self, icons: Iterable[IconData] = ()) -> None:
        self._icons: Dict[str, IconData] = {icon.slug.lower(): icon for icon in icons}

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "IconTable":
        dataset = path or DEFAULT_DATASET
        try:
            payload = json.loads(dataset.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            _logger.warning("Icon dataset %s unavailable (%s); icons will use placeholders", dataset, exc)
            return cls()
        if not isinstance(payload, list):
            _logger.warning("Icon dataset %s is not a list; icons will use placeholders", dataset)
            return cls()

        icons = [icon for icon in (_icon_from_dict(entry) for entry in payload) if icon is not None]
        _logger.debug("Loaded %d icons from %s", len(icons), dataset)
        return cls(icons)

    def __len__(self) -> int:
        return len(self._icons)

    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and slug.lower() in self._icons

    def resolve(self, slug: str) -> str:
        icon = self._icons.get((slug or "").lower())
        if icon is None:
            return PLACEHOLDER_SVG
        return f'{_SVG_OPEN}<path d="{icon.path}"/></svg>'

    def brand_color(self, slug: str) -> str:
        icon = self._icons.get((slug or "").lower())
        if icon is None or not icon.hex:
            return DEFAULT_BRAND_COLOR
        return f"#{icon.hex}"


def _icon_from_dict(payload: object) -> Optional[IconData]:
    if not isinstance(payload, dict):
        return None
    slug = payload.get("slug")
    path = payload.get("path")
    if not isinstance(slug, str) or not slug or not isinstance(path, str):
        return None
    title = payload.get("title")
    hex_value = payload.get("hex")
    return IconData(
        title=title if isinstance(title, str) else slug,
        slug=slug,
        hex=hex_value.lstrip("#") if isinstance(hex_value, str) else "",
        path=path,
    )


__all__ = ["DEFAULT_BRAND_COLOR", "IconData", "IconTable", "PLACEHOLDER_SVG"]
