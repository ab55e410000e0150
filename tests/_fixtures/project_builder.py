"""Helper utilities for constructing throwaway linkhub projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from linkhub.config import Settings

BASIC_TEMPLATE = """\
<!doctype html>
<html data-theme="{{ default_theme }}">
<head>
<title>{{ profile.name }}</title>
{% for style in theme_styles %}<link rel="stylesheet" href="{{ style }}">
{% endfor %}</head>
<body style="{{ background_css }}">
<h1>{{ profile.name }}</h1>
<p class="description">{{ description_html }}</p>
{% for link in links %}<a class="link" href="{{ link.url }}" style="--brand: {{ link.brand_color }}">{{ link.icon_svg }}<span>{{ link.title }}</span></a>
{% endfor %}{% for section in sections %}<section><h2>{{ section.title }}</h2>
{% for link in section.links %}<a class="section-link" href="{{ link.url }}">{{ link.icon_svg }}{{ link.title }}</a>
{% endfor %}</section>
{% endfor %}{% for social in socials %}<a class="social" href="{{ social.url }}">{{ social.icon_svg }}</a>
{% endfor %}{% for script in theme_scripts %}<script src="{{ script }}"></script>
{% endfor %}</body>
</html>
"""


class ProjectBuilder:
    """Writes profile, theme and asset files under a temporary project root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "site"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def profile(self, content: str) -> Path:
        self.write({"config/config.yml": content})
        return self.root / "config" / "config.yml"

    def theme(self, name: str = "default", files: Mapping[str, str] | None = None) -> Path:
        """Create a theme directory; a basic template is added unless supplied."""
        theme_files = {"template.html": BASIC_TEMPLATE}
        theme_files.update(files or {})
        self.write({f"themes/{name}/{rel}": body for rel, body in theme_files.items()})
        return self.root / "themes" / name

    def settings(self) -> Settings:
        return Settings.defaults(self.root)

    @property
    def output(self) -> Path:
        return self.root / "dist"


__all__ = ["BASIC_TEMPLATE", "ProjectBuilder"]
