"""Brand icon lookup backed by a bundled Simple Icons dataset."""

from .resolver import PLACEHOLDER_SVG, IconData, IconTable

__all__ = ["IconData", "IconTable", "PLACEHOLDER_SVG"]
