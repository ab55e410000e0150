"""Rebuild executor consuming debounced change signals."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable, Optional

from ..errors import LinkhubError
from ..logging import get_logger
from .signal import RebuildSignal


class LoopState(Enum):
    IDLE = "idle"
    BUILDING = "building"
    SERVING_STALE = "serving-stale"


class RebuildLoop:
    """Re-runs ``build`` for each consumed signal and calls ``notify`` afterwards.

    Build failures are logged and absorbed; whatever the previous successful
    build wrote stays on disk and keeps being served.
    """

    def __init__(
        self,
        signal: RebuildSignal,
        build: Callable[[], object],
        notify: Callable[[], None],
    ) -> None:
        self.signal = signal
        self._build = build
        self._notify = notify
        self.state = LoopState.IDLE
        self.generation = 0
        self.last_error: Optional[str] = None
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.logger = get_logger("rebuild")

    def start(self) -> None:
        thread = threading.Thread(target=self.run, name="linkhub-rebuild", daemon=True)
        self._thread = thread
        thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        self._stopped.set()
        # Wake the blocked receive; a dropped fire means one is already pending.
        self.signal.fire()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def run(self) -> None:
        while not self._stopped.is_set():
            self.signal.wait()
            if self._stopped.is_set():
                break
            self.rebuild_once()

    def rebuild_once(self) -> bool:
        """Run one rebuild attempt and notify sessions; return True on success."""
        self.state = LoopState.BUILDING
        self.logger.info("Rebuilding...")
        try:
            self._build()
        except (LinkhubError, OSError) as exc:
            self.last_error = str(exc)
            self.state = LoopState.SERVING_STALE
            self.logger.error("Rebuild failed; serving previous output: %s", exc)
            succeeded = False
        except Exception as exc:
            # Keep the rebuild thread alive; the next change gets another attempt.
            self.last_error = f"{exc.__class__.__name__}: {exc}"
            self.state = LoopState.SERVING_STALE
            self.logger.exception("Unexpected rebuild failure; serving previous output")
            succeeded = False
        else:
            self.last_error = None
            self.state = LoopState.IDLE
            self.logger.info("Rebuild complete")
            succeeded = True
        self.generation += 1
        self._notify()
        return succeeded


__all__ = ["LoopState", "RebuildLoop"]
