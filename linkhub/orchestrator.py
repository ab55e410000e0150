"""Pipeline orchestration for the build and watch commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from .config import Settings, load_settings
from .errors import ConfigLoadError
from .icons import IconTable
from .logging import get_logger
from .models import OutputTree, Profile, ThemeManifest
from .profile import load_profile
from .render import Generator
from .service import ReloadBroadcaster, create_app, run_service
from .themes import resolve_theme
from .watch import ChangeWatcher, Debouncer, RebuildLoop, RebuildSignal, WatchRoot


class Orchestrator:
    """Coordinates settings, icons, profile, theme and generator for one project."""

    def __init__(
        self,
        settings: Settings,
        *,
        icons: IconTable | None = None,
        generator: Generator | None = None,
    ) -> None:
        self.settings = settings
        self.icons = icons if icons is not None else IconTable.load(settings.icons_path)
        self.generator = generator or Generator(self.icons)
        self.logger = get_logger("orchestrator")

    @classmethod
    def for_path(cls, path: str | Path) -> "Orchestrator":
        return cls(load_settings(Path(path)))

    def run_build(self) -> OutputTree:
        """Load the profile and theme, then render the output tree.

        The profile and theme are fully resolved before anything is written, so
        a bad profile never creates or touches the output directory.
        """
        profile = self.load_profile()
        theme = self.load_theme(profile)
        self.logger.debug("Rendering theme %s %s into %s", theme.name, theme.version, self.settings.output_dir)
        tree = self.generator.generate(
            profile,
            theme,
            self.settings.output_dir,
            assets_dir=self.settings.assets_dir,
        )
        self.logger.info("Build complete: %s", tree.page)
        return tree

    def load_profile(self) -> Profile:
        return load_profile(self.settings.profile_path)

    def load_theme(self, profile: Profile) -> ThemeManifest:
        return resolve_theme(self.settings.theme_root(profile.theme))

    def watch_roots(self) -> List[WatchRoot]:
        """Roots observed in watch mode: profile dir, active theme, user assets."""
        roots = [WatchRoot(self.settings.profile_path.parent, recursive=False)]
        try:
            theme_name = self.load_profile().theme
        except ConfigLoadError as exc:
            self.logger.debug("Profile unreadable while collecting watch roots: %s", exc)
        else:
            roots.append(WatchRoot(self.settings.theme_root(theme_name), recursive=True))
        roots.append(WatchRoot(self.settings.assets_dir, recursive=True))
        return roots

    def run_watch(
        self,
        serve: Optional[Callable[..., None]] = None,
    ) -> None:
        """Build once, then watch sources, rebuild on change and serve with live reload.

        A failed initial build propagates; later failures are absorbed by the
        rebuild loop.
        """
        self.run_build()

        broadcaster = ReloadBroadcaster()
        signal = RebuildSignal()
        loop = RebuildLoop(signal, self.run_build, broadcaster.publish)
        watcher = ChangeWatcher(
            self.watch_roots(),
            Debouncer(signal.fire, delay=self.settings.debounce_seconds),
        )
        app = create_app(self.settings.output_dir, broadcaster, rebuild_loop=loop)

        watched = watcher.start()
        if not watched:
            self.logger.warning("No source directories could be watched; live reload is inactive")
        loop.start()
        self.logger.info("Watching for changes... (Ctrl+C to stop)")
        try:
            (serve or run_service)(app, host=self.settings.host, port=self.settings.port)
        except KeyboardInterrupt:
            self.logger.info("Shutting down")
        finally:
            watcher.stop()
            loop.stop()


__all__ = ["Orchestrator"]
