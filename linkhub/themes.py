"""Theme manifest resolution (theme.yaml with a legacy fallback)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from .errors import ThemeLoadError
from .logging import get_logger
from .models import DEFAULT_THEME_VERSION, ThemeFeatures, ThemeManifest
from .utils import as_bool, as_dict, as_str, as_str_list, read_yaml_mapping

MANIFEST_NAME = "theme.yaml"
LEGACY_STYLESHEET = "styles.css"
# Probed in order when a manifest declares no styles.
STYLESHEET_CANDIDATES = ("styles/base.css", LEGACY_STYLESHEET)
COLOR_SCHEMES = {"light", "dark"}

_logger = get_logger("themes")


def resolve_theme(theme_root: Path) -> ThemeManifest:
    """Return the manifest for the theme rooted at ``theme_root``.

    Themes without a ``theme.yaml`` are treated as legacy themes and get a
    synthesized manifest; that is not an error.
    """
    if not theme_root.is_dir():
        raise ThemeLoadError(f"theme directory not found: {theme_root}")

    manifest_path = theme_root / MANIFEST_NAME
    if not manifest_path.exists():
        _logger.debug("No %s in %s; using legacy manifest", MANIFEST_NAME, theme_root)
        return _legacy_manifest(theme_root)

    data = read_yaml_mapping(manifest_path, ThemeLoadError)
    return _manifest_from_mapping(theme_root, data)


def _legacy_manifest(theme_root: Path) -> ThemeManifest:
    styles = [LEGACY_STYLESHEET] if (theme_root / LEGACY_STYLESHEET).is_file() else []
    return ThemeManifest(root=theme_root, name=theme_root.name, styles=tuple(styles))


def _manifest_from_mapping(theme_root: Path, data: Dict[str, Any]) -> ThemeManifest:
    features = as_dict(data.get("features"))
    styles = as_str_list(data.get("styles"))
    if not styles:
        styles = _probe_styles(theme_root)

    scheme = as_str(data.get("defaultColorScheme")).strip().lower()
    if scheme and scheme not in COLOR_SCHEMES:
        _logger.warning("Theme %s declares unknown colour scheme %r; using dark", theme_root.name, scheme)
        scheme = ""

    return ThemeManifest(
        root=theme_root,
        name=as_str(data.get("name")).strip() or theme_root.name,
        version=as_str(data.get("version")).strip() or DEFAULT_THEME_VERSION,
        author=as_str(data.get("author")),
        description=as_str(data.get("description")),
        license=as_str(data.get("license")),
        features=ThemeFeatures(
            particles=bool(as_bool(features.get("particles"))),
            animations=bool(as_bool(features.get("animations"))),
        ),
        styles=tuple(styles),
        scripts=tuple(as_str_list(data.get("scripts"))),
        template=as_str(data.get("template")).strip() or "template.html",
        default_color_scheme=scheme or "dark",
    )


def _probe_styles(theme_root: Path) -> List[str]:
    for candidate in STYLESHEET_CANDIDATES:
        if (theme_root / candidate).is_file():
            return [candidate]
    return []


__all__ = ["MANIFEST_NAME", "resolve_theme"]
