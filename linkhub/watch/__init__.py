"""Change watching, debounce and the rebuild loop used by ``linkhub watch``."""

from .loop import LoopState, RebuildLoop
from .signal import Debouncer, RebuildSignal
from .watcher import ChangeWatcher, SourceChangeHandler, WatchRoot, is_qualifying

__all__ = [
    "ChangeWatcher",
    "Debouncer",
    "LoopState",
    "RebuildLoop",
    "RebuildSignal",
    "SourceChangeHandler",
    "WatchRoot",
    "is_qualifying",
]
