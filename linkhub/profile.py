"""Profile document loading (config/config.yml)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

from .errors import ConfigLoadError
from .logging import get_logger
from .models import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_SCHEMA_VERSION,
    DEFAULT_THEME,
    Background,
    BackgroundKind,
    Link,
    Profile,
    Section,
    Social,
)
from .utils import as_dict, as_float, as_int, as_list, as_str, read_yaml_mapping

_logger = get_logger("profile")


def load_profile(path: Path) -> Profile:
    """Load and default-fill the profile document at ``path``."""
    if not path.is_file():
        raise ConfigLoadError(f"profile not found at {path}")

    data = read_yaml_mapping(path, ConfigLoadError)
    _logger.debug("Loaded profile document %s (%d keys)", path, len(data))
    return profile_from_mapping(data)


def profile_from_mapping(data: Dict[str, Any]) -> Profile:
    schema_version = as_str(data.get("configVersion")) or as_str(data.get("schemaVersion"))
    return Profile(
        schema_version=schema_version or DEFAULT_SCHEMA_VERSION,
        name=as_str(data.get("name")),
        subtitle=as_str(data.get("subtitle")),
        description=as_str(data.get("description")),
        avatar=as_str(data.get("avatar")),
        theme=as_str(data.get("theme")).strip() or DEFAULT_THEME,
        background=_parse_background(data.get("background")),
        links=_parse_links(data.get("links"), "links"),
        sections=_parse_sections(data.get("sections")),
        socials=_parse_socials(data.get("socials")),
    )


def _parse_background(raw: Any) -> Background:
    data = as_dict(raw)
    raw_type = as_str(data.get("type")).strip()
    if not raw_type:
        kind = BackgroundKind.COLOR
        value = DEFAULT_BACKGROUND_COLOR
    else:
        kind = BackgroundKind.parse(raw_type)
        value = as_str(data.get("value"))
        if kind is BackgroundKind.UNKNOWN:
            _logger.warning("Unrecognized background type %r; using default colour", raw_type)

    blur = as_int(data.get("blur")) or 0
    opacity = as_float(data.get("opacity"))
    if opacity is None or opacity <= 0:
        opacity = 1.0
    return Background(kind=kind, value=value, blur=max(blur, 0), opacity=min(opacity, 1.0))


def _parse_links(raw: Any, where: str) -> Tuple[Link, ...]:
    links: List[Link] = []
    for index, item in enumerate(as_list(raw)):
        if not isinstance(item, dict):
            _logger.debug("Skipping %s[%d]: expected a mapping", where, index)
            continue
        links.append(
            Link(
                title=as_str(item.get("title")),
                url=as_str(item.get("url")),
                icon=as_str(item.get("icon")),
                icon_url=as_str(item.get("iconUrl")),
                color=as_str(item.get("color")),
            )
        )
    return tuple(links)


def _parse_sections(raw: Any) -> Tuple[Section, ...]:
    sections: List[Section] = []
    for index, item in enumerate(as_list(raw)):
        if not isinstance(item, dict):
            _logger.debug("Skipping sections[%d]: expected a mapping", index)
            continue
        sections.append(
            Section(
                title=as_str(item.get("title")),
                links=_parse_links(item.get("links"), f"sections[{index}].links"),
            )
        )
    return tuple(sections)


def _parse_socials(raw: Any) -> Tuple[Social, ...]:
    socials: List[Social] = []
    for index, item in enumerate(as_list(raw)):
        if not isinstance(item, dict):
            _logger.debug("Skipping socials[%d]: expected a mapping", index)
            continue
        socials.append(
            Social(
                icon=as_str(item.get("icon")),
                url=as_str(item.get("url")),
                color=as_str(item.get("color")),
            )
        )
    return tuple(socials)


__all__ = ["load_profile", "profile_from_mapping"]
