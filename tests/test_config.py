"""Tests for linkhub.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkhub.config import BUNDLED_THEMES_DIR, Settings, SettingsError, load_settings
from linkhub.errors import ConfigLoadError


def test_load_settings_returns_defaults_when_missing(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, environ={})

    assert isinstance(settings, Settings)
    root = tmp_path.resolve()
    assert settings.root == root
    assert settings.profile_path == root / "config" / "config.yml"
    assert settings.themes_dir == root / "themes"
    assert settings.output_dir == root / "dist"
    assert settings.assets_dir == root / "assets"
    assert settings.icons_path is None
    assert settings.port == 3000
    assert settings.debounce_seconds == pytest.approx(0.1)


def test_load_settings_reads_settings_file(tmp_path: Path) -> None:
    (tmp_path / ".linkhub.yml").write_text(
        """
profile: profile/me.yml
themes_dir: looks
output_dir: public
assets_dir: static
icons: data/icons.json
host: 127.0.0.1
port: 8080
debounce_ms: 250
""",
        encoding="utf-8",
    )

    settings = load_settings(tmp_path, environ={})

    root = tmp_path.resolve()
    assert settings.profile_path == root / "profile" / "me.yml"
    assert settings.themes_dir == root / "looks"
    assert settings.output_dir == root / "public"
    assert settings.assets_dir == root / "static"
    assert settings.icons_path == root / "data" / "icons.json"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.debounce_seconds == pytest.approx(0.25)
    assert settings.theme_root("neon") == root / "looks" / "neon"


def test_port_environment_override_wins(tmp_path: Path) -> None:
    (tmp_path / ".linkhub.yml").write_text("port: 8080\n", encoding="utf-8")

    settings = load_settings(tmp_path, environ={"PORT": "4321"})

    assert settings.port == 4321


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_invalid_port_raises(tmp_path: Path, value: str) -> None:
    with pytest.raises(SettingsError):
        load_settings(tmp_path, environ={"PORT": value})


def test_malformed_settings_file_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".linkhub.yml").write_text("port: [1, 2\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as excinfo:
        load_settings(tmp_path, environ={})

    assert excinfo.value.stage == "load settings"


def test_missing_default_theme_falls_back_to_bundled_starter(tmp_path: Path) -> None:
    settings = Settings.defaults(tmp_path)

    assert settings.theme_root("default") == BUNDLED_THEMES_DIR / "default"
    assert (settings.theme_root("default") / "template.html").is_file()
    assert settings.theme_root("neon") == tmp_path.resolve() / "themes" / "neon"


def test_project_default_theme_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "themes" / "default").mkdir(parents=True)

    settings = Settings.defaults(tmp_path)

    assert settings.theme_root("default") == tmp_path.resolve() / "themes" / "default"
