"""Core data models shared across linkhub components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_SCHEMA_VERSION = "1.0"
DEFAULT_THEME = "default"
DEFAULT_BACKGROUND_COLOR = "#1e1f26"
DEFAULT_THEME_VERSION = "1.0.0"


class BackgroundKind(Enum):
    """Closed set of background variants a profile can declare."""

    COLOR = "color"
    IMAGE = "image"
    GRADIENT = "gradient"
    PARTICLES = "particles"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "BackgroundKind":
        if not raw:
            return cls.UNKNOWN
        try:
            kind = cls(raw.strip().lower())
        except ValueError:
            return cls.UNKNOWN
        return kind


@dataclass(frozen=True)
class Background:
    """Page background declaration."""

    kind: BackgroundKind = BackgroundKind.COLOR
    value: str = DEFAULT_BACKGROUND_COLOR
    blur: int = 0
    opacity: float = 1.0


@dataclass(frozen=True)
class Link:
    title: str = ""
    url: str = ""
    icon: str = ""
    icon_url: str = ""
    color: str = ""


@dataclass(frozen=True)
class Section:
    title: str = ""
    links: Tuple[Link, ...] = ()


@dataclass(frozen=True)
class Social:
    icon: str = ""
    url: str = ""
    color: str = ""


@dataclass(frozen=True)
class Profile:
    """The user's page definition, default-filled and immutable after load."""

    schema_version: str = DEFAULT_SCHEMA_VERSION
    name: str = ""
    subtitle: str = ""
    description: str = ""
    avatar: str = ""
    theme: str = DEFAULT_THEME
    background: Background = field(default_factory=Background)
    links: Tuple[Link, ...] = ()
    sections: Tuple[Section, ...] = ()
    socials: Tuple[Social, ...] = ()


@dataclass(frozen=True)
class ThemeFeatures:
    particles: bool = False
    animations: bool = False


@dataclass(frozen=True)
class ThemeManifest:
    """Theme metadata; asset paths are relative to ``root``."""

    root: Path
    name: str
    version: str = DEFAULT_THEME_VERSION
    author: str = ""
    description: str = ""
    license: str = ""
    features: ThemeFeatures = field(default_factory=ThemeFeatures)
    styles: Tuple[str, ...] = ()
    scripts: Tuple[str, ...] = ()
    template: str = "template.html"
    default_color_scheme: str = "dark"


@dataclass
class OutputTree:
    """Files produced by one render pass."""

    root: Path
    page: Path
    copied: list[Path] = field(default_factory=list)
