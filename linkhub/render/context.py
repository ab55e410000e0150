"""Template context assembly for a single render pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from markupsafe import Markup, escape

from ..icons import IconTable
from ..models import Link, Profile, Social, ThemeManifest
from .background import background_style


@dataclass(frozen=True)
class LinkView:
    title: str
    url: str
    icon_svg: Markup
    icon_url: str
    color: str
    brand_color: str


@dataclass(frozen=True)
class SectionView:
    title: str
    links: Tuple[LinkView, ...]


@dataclass(frozen=True)
class SocialView:
    url: str
    icon: str
    icon_svg: Markup
    color: str
    brand_color: str


@dataclass(frozen=True)
class RenderContext:
    """Read-only view of everything a theme template may reference."""

    profile: Profile
    theme: ThemeManifest
    links: Tuple[LinkView, ...]
    sections: Tuple[SectionView, ...]
    socials: Tuple[SocialView, ...]
    background_css: Markup
    description_html: Markup
    default_theme: str
    theme_styles: Tuple[str, ...]
    theme_scripts: Tuple[str, ...]

    def as_template_vars(self) -> Dict[str, Any]:
        return {
            "profile": self.profile,
            "theme": self.theme,
            "links": self.links,
            "sections": self.sections,
            "socials": self.socials,
            "background_css": self.background_css,
            "description_html": self.description_html,
            "default_theme": self.default_theme,
            "theme_styles": self.theme_styles,
            "theme_scripts": self.theme_scripts,
        }


def build_context(profile: Profile, theme: ThemeManifest, icons: IconTable) -> RenderContext:
    return RenderContext(
        profile=profile,
        theme=theme,
        links=tuple(_link_view(link, icons) for link in profile.links),
        sections=tuple(
            SectionView(
                title=section.title,
                links=tuple(_link_view(link, icons) for link in section.links),
            )
            for section in profile.sections
        ),
        socials=tuple(_social_view(social, icons) for social in profile.socials),
        background_css=Markup(background_style(profile.background)),
        description_html=description_markup(profile.description),
        default_theme=theme.default_color_scheme,
        theme_styles=theme.styles,
        theme_scripts=theme.scripts,
    )


def description_markup(text: str) -> Markup:
    """Escape free text and turn line breaks into ``<br>`` tags."""
    lines: List[str] = (text or "").replace("\r\n", "\n").split("\n")
    return Markup("<br>").join(escape(line) for line in lines)


def _link_view(link: Link, icons: IconTable) -> LinkView:
    return LinkView(
        title=link.title,
        url=link.url,
        icon_svg=Markup(icons.resolve(link.icon)),
        icon_url=link.icon_url,
        color=link.color,
        brand_color=icons.brand_color(link.icon),
    )


def _social_view(social: Social, icons: IconTable) -> SocialView:
    return SocialView(
        url=social.url,
        icon=social.icon,
        icon_svg=Markup(icons.resolve(social.icon)),
        color=social.color,
        brand_color=icons.brand_color(social.icon),
    )


__all__ = [
    "LinkView",
    "RenderContext",
    "SectionView",
    "SocialView",
    "build_context",
    "description_markup",
]
