"""Filesystem watching for profile, theme and asset sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from ..errors import WatcherSetupError
from ..logging import get_logger
from .signal import Debouncer

_QUALIFYING_EVENTS = {
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MOVED,
}


@dataclass(frozen=True)
class WatchRoot:
    path: Path
    recursive: bool = False


class SourceChangeHandler(FileSystemEventHandler):
    """Forwards qualifying watchdog events to a debouncer."""

    def __init__(self, debouncer: Debouncer) -> None:
        super().__init__()
        self.debouncer = debouncer
        self.logger = get_logger("watcher")

    def on_any_event(self, event: FileSystemEvent) -> None:
        if not is_qualifying(event):
            return
        self.logger.debug("Change detected: %s %s", event.event_type, event.src_path)
        self.debouncer.trigger()


def is_qualifying(event: FileSystemEvent) -> bool:
    """Return True for create/write/remove/move events that should trigger a rebuild."""
    if event.event_type not in _QUALIFYING_EVENTS:
        return False
    # Directory mtime updates accompany every file event inside it.
    if event.is_directory and event.event_type == EVENT_TYPE_MODIFIED:
        return False
    return True


class ChangeWatcher:
    """Schedules watchdog observers for every available source root."""

    def __init__(
        self,
        roots: Sequence[WatchRoot],
        debouncer: Debouncer,
        *,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self.roots = list(roots)
        self.debouncer = debouncer
        self._observer_factory = observer_factory
        self._observer: BaseObserver | None = None
        self.watched: List[WatchRoot] = []
        self.logger = get_logger("watcher")

    def start(self) -> List[WatchRoot]:
        """Start observing and return the roots that are actually watched.

        Missing or unwatchable roots are logged and skipped.
        """
        observer = self._observer_factory()
        handler = SourceChangeHandler(self.debouncer)
        self.watched = []
        for root in self.roots:
            try:
                self._schedule(observer, handler, root)
            except WatcherSetupError as exc:
                self.logger.warning("Not watching %s: %s", root.path, exc)
                continue
            self.watched.append(root)
            self.logger.debug("Watching %s%s", root.path, " (recursive)" if root.recursive else "")

        observer.daemon = True
        observer.start()
        self._observer = observer
        return list(self.watched)

    def stop(self) -> None:
        self.debouncer.cancel()
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None

    @staticmethod
    def _schedule(observer: BaseObserver, handler: FileSystemEventHandler, root: WatchRoot) -> None:
        if not root.path.is_dir():
            raise WatcherSetupError("directory does not exist")
        try:
            observer.schedule(handler, str(root.path), recursive=root.recursive)
        except OSError as exc:
            raise WatcherSetupError(str(exc)) from exc


__all__ = ["ChangeWatcher", "SourceChangeHandler", "WatchRoot", "is_qualifying"]
