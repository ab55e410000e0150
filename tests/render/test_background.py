"""Tests for linkhub.render.background."""

from __future__ import annotations

import pytest

from linkhub.models import Background, BackgroundKind
from linkhub.render import DEFAULT_BACKGROUND_CSS, background_style


def test_color_background() -> None:
    assert background_style(Background(BackgroundKind.COLOR, "#111111")) == "background-color: #111111;"


def test_particles_background_matches_color() -> None:
    assert background_style(Background(BackgroundKind.PARTICLES, "#222")) == "background-color: #222;"


def test_gradient_background_used_verbatim() -> None:
    value = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

    assert background_style(Background(BackgroundKind.GRADIENT, value)) == f"background: {value};"


def test_image_background_without_blur() -> None:
    css = background_style(Background(BackgroundKind.IMAGE, "bg.jpg"))

    assert css.startswith("background-image: url('bg.jpg');")
    assert "background-size: cover;" in css
    assert "background-position: center;" in css
    assert "background-repeat: no-repeat;" in css
    assert "filter" not in css


def test_image_background_with_blur() -> None:
    css = background_style(Background(BackgroundKind.IMAGE, "bg.jpg", blur=6))

    assert css.endswith(" filter: blur(6px);")


@pytest.mark.parametrize(
    "background",
    [
        None,
        Background(BackgroundKind.UNKNOWN, "#abcdef"),
        Background(BackgroundKind.COLOR, ""),
        Background(BackgroundKind.IMAGE, "   "),
        Background(BackgroundKind.GRADIENT, ""),
    ],
)
def test_unknown_or_empty_backgrounds_fall_back_to_default(background: Background | None) -> None:
    assert background_style(background) == DEFAULT_BACKGROUND_CSS == "background-color: #1e1f26;"


def test_every_kind_is_handled() -> None:
    for kind in BackgroundKind:
        assert background_style(Background(kind, "#010101")).endswith(";")
