"""Background style computation for the rendered page."""

from __future__ import annotations

from typing import assert_never

from ..models import DEFAULT_BACKGROUND_COLOR, Background, BackgroundKind

DEFAULT_BACKGROUND_CSS = f"background-color: {DEFAULT_BACKGROUND_COLOR};"


def background_style(background: Background | None) -> str:
    """Return the inline CSS for ``background``; never raises."""
    if background is None or not (background.value or "").strip():
        return DEFAULT_BACKGROUND_CSS

    kind = background.kind
    value = background.value.strip()
    if kind is BackgroundKind.COLOR or kind is BackgroundKind.PARTICLES:
        # The particle layer itself is drawn by the theme's scripts.
        return f"background-color: {value};"
    if kind is BackgroundKind.IMAGE:
        css = (
            f"background-image: url('{value}'); "
            "background-size: cover; "
            "background-position: center; "
            "background-repeat: no-repeat;"
        )
        if background.blur > 0:
            css += f" filter: blur({background.blur}px);"
        return css
    if kind is BackgroundKind.GRADIENT:
        return f"background: {value};"
    if kind is BackgroundKind.UNKNOWN:
        return DEFAULT_BACKGROUND_CSS
    assert_never(kind)


__all__ = ["DEFAULT_BACKGROUND_CSS", "background_style"]
