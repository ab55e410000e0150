"""Error taxonomy shared across linkhub stages."""

from __future__ import annotations


class LinkhubError(RuntimeError):
    """Base class for failures raised by the build and watch pipelines."""

    stage = "build"


class ConfigLoadError(LinkhubError):
    """Raised when the profile or settings document cannot be read or parsed."""

    stage = "load profile"


class ThemeLoadError(LinkhubError):
    """Raised when a theme directory or its manifest cannot be loaded."""

    stage = "resolve theme"


class RenderError(LinkhubError):
    """Raised when the theme template fails to parse or render."""

    stage = "render page"


class AssetCopyError(LinkhubError):
    """Raised when copying a theme or user asset fails."""

    stage = "copy assets"


class WatcherSetupError(LinkhubError):
    """Raised when a source root cannot be scheduled for watching."""

    stage = "watch sources"


__all__ = [
    "AssetCopyError",
    "ConfigLoadError",
    "LinkhubError",
    "RenderError",
    "ThemeLoadError",
    "WatcherSetupError",
]
