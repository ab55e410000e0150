"""Coalescing rebuild signal and trailing-edge debouncer."""

from __future__ import annotations

import queue
import threading
from typing import Callable, Optional


class RebuildSignal:
    """Single-slot token meaning "something changed since the last rebuild began".

    ``fire`` never blocks: when a token is already pending the extra fire is
    dropped. ``wait`` blocks until a token is available and consumes it.
    """

    def __init__(self) -> None:
        self._slot: "queue.Queue[None]" = queue.Queue(maxsize=1)

    def fire(self) -> bool:
        """Post a token; return False when one was already pending."""
        try:
            self._slot.put_nowait(None)
        except queue.Full:
            return False
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        try:
            self._slot.get(timeout=timeout)
        except queue.Empty:
            return False
        return True

    @property
    def pending(self) -> bool:
        return self._slot.full()


class Debouncer:
    """Calls ``callback`` once ``delay`` seconds pass without another ``trigger``."""

    def __init__(self, callback: Callable[[], object], delay: float = 0.1) -> None:
        self._callback = callback
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.delay, self._expire)
            timer.daemon = True
            timer.name = "linkhub-debounce"
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _expire(self) -> None:
        with self._lock:
            # A newer trigger replaced this timer after it had already fired.
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        self._callback()


__all__ = ["Debouncer", "RebuildSignal"]
