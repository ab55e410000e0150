"""Page rendering and output tree materialization."""

from .background import DEFAULT_BACKGROUND_CSS, background_style
from .context import RenderContext, build_context, description_markup
from .generator import PAGE_NAME, Generator

__all__ = [
    "DEFAULT_BACKGROUND_CSS",
    "Generator",
    "PAGE_NAME",
    "RenderContext",
    "background_style",
    "build_context",
    "description_markup",
]
