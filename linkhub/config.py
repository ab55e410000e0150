"""Project settings loading (.linkhub.yml plus environment overrides)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigLoadError
from .logging import get_logger
from .models import DEFAULT_THEME
from .utils import as_float, as_int, as_str, read_yaml_mapping

SETTINGS_FILE = ".linkhub.yml"
DEFAULT_PROFILE_PATH = "config/config.yml"
DEFAULT_THEMES_DIR = "themes"
DEFAULT_OUTPUT_DIR = "dist"
DEFAULT_ASSETS_DIR = "assets"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_DEBOUNCE_SECONDS = 0.1
PORT_ENV = "PORT"

# Starter themes shipped with the package, used when a project lacks its own copy.
BUNDLED_THEMES_DIR = Path(__file__).with_name("bundled_themes")

_logger = get_logger("config")


class SettingsError(ConfigLoadError):
    """Raised when .linkhub.yml or an environment override is invalid."""

    stage = "load settings"


@dataclass
class Settings:
    """Resolved locations and server options for one linkhub project."""

    root: Path
    profile_path: Path
    themes_dir: Path
    output_dir: Path
    assets_dir: Path
    icons_path: Optional[Path] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS

    @classmethod
    def defaults(cls, root: Path) -> "Settings":
        root = root.expanduser().resolve()
        return cls(
            root=root,
            profile_path=root / DEFAULT_PROFILE_PATH,
            themes_dir=root / DEFAULT_THEMES_DIR,
            output_dir=root / DEFAULT_OUTPUT_DIR,
            assets_dir=root / DEFAULT_ASSETS_DIR,
        )

    def theme_root(self, theme_name: str) -> Path:
        """Directory of ``theme_name``; the bundled starter stands in for a missing ``default``."""
        candidate = self.themes_dir / theme_name
        if theme_name == DEFAULT_THEME and not candidate.is_dir():
            bundled = BUNDLED_THEMES_DIR / theme_name
            if bundled.is_dir():
                _logger.debug("No %s theme under %s; using the bundled starter", theme_name, self.themes_dir)
                return bundled
        return candidate


def load_settings(root: Path, environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings for the project at ``root``.

    ``.linkhub.yml`` is optional; the ``PORT`` environment variable wins over
    the file.
    """
    settings = Settings.defaults(root)
    env = os.environ if environ is None else environ

    settings_file = settings.root / SETTINGS_FILE
    if settings_file.is_file():
        data = read_yaml_mapping(settings_file, SettingsError)
        base = settings.root
        for key, attr in (
            ("profile", "profile_path"),
            ("themes_dir", "themes_dir"),
            ("output_dir", "output_dir"),
            ("assets_dir", "assets_dir"),
            ("icons", "icons_path"),
        ):
            value = as_str(data.get(key)).strip()
            if value:
                setattr(settings, attr, base / value)

        host = as_str(data.get("host")).strip()
        if host:
            settings.host = host
        if data.get("port") is not None:
            settings.port = _validate_port(data.get("port"), SETTINGS_FILE)
        debounce_ms = as_float(data.get("debounce_ms"))
        if debounce_ms is not None:
            if debounce_ms < 0:
                raise SettingsError(f"debounce_ms must not be negative in {SETTINGS_FILE}")
            settings.debounce_seconds = debounce_ms / 1000.0

    env_port = env.get(PORT_ENV, "").strip()
    if env_port:
        settings.port = _validate_port(env_port, f"${PORT_ENV}")
    return settings


def _validate_port(raw: object, source: str) -> int:
    port = as_int(raw)
    if port is None or not 0 < port < 65536:
        raise SettingsError(f"invalid port {raw!r} from {source}")
    return port


__all__ = [
    "DEFAULT_PORT",
    "PORT_ENV",
    "SETTINGS_FILE",
    "Settings",
    "SettingsError",
    "load_settings",
]
