"""Live-reload fan-out over Server-Sent Events."""

from __future__ import annotations

import asyncio
import threading
from typing import AsyncIterator, Optional

from ..logging import get_logger

LIVERELOAD_PATH = "/__livereload"

LIVERELOAD_SNIPPET = """<script>
(function() {
  const es = new EventSource('%s');
  es.onmessage = function(e) {
    if (e.data === 'reload') {
      location.reload();
    }
  };
  es.onerror = function() {
    console.log('Live reload disconnected, retrying...');
    setTimeout(function() { location.reload(); }, 1000);
  };
})();
</script>""" % LIVERELOAD_PATH

_logger = get_logger("livereload")


class ReloadBroadcaster:
    """Generation-based fan-out from the rebuild thread to preview sessions.

    Each generation owns one ``asyncio.Event``. Publishing swaps in a fresh
    event and sets the previous one, waking every session that waited on it.
    Sessions keep no shared registry; each holds its own ``Subscription``.
    Closing the broadcaster ends every subscription, so open event streams
    finish and the server can shut down.
    """

    def __init__(self) -> None:
        self.generation = 0
        self.closed = False
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._event: Optional[asyncio.Event] = None
        self._bind_lock = threading.Lock()

    @property
    def bound(self) -> bool:
        """True once a session has subscribed on a serving event loop."""
        with self._bind_lock:
            return self._loop is not None

    def subscribe(self) -> "Subscription":
        """Create a subscription; must be called on the serving event loop."""
        return Subscription(self, self._current_event())

    def publish(self) -> None:
        """Wake every subscription. Safe to call from any thread."""
        with self._bind_lock:
            loop = self._loop
        if loop is None or loop.is_closed():
            return
        try:
            loop.call_soon_threadsafe(self._advance)
        except RuntimeError:
            # Loop closed between the check and the call; nobody is listening.
            _logger.debug("Reload publish skipped: event loop closed")

    def close(self) -> None:
        """End every open subscription. Safe to call from any thread."""
        with self._bind_lock:
            loop = self._loop
        if loop is None or loop.is_closed():
            self.closed = True
            return
        try:
            loop.call_soon_threadsafe(self._shutdown)
        except RuntimeError:
            self.closed = True

    def _current_event(self) -> asyncio.Event:
        loop = asyncio.get_running_loop()
        with self._bind_lock:
            if self._loop is not loop or self._event is None:
                self._loop = loop
                self._event = asyncio.Event()
                if self.closed:
                    self._event.set()
            return self._event

    def _advance(self) -> None:
        previous = self._event
        self._event = asyncio.Event()
        self.generation += 1
        if previous is not None:
            previous.set()

    def _shutdown(self) -> None:
        self.closed = True
        if self._event is not None:
            self._event.set()


class Subscription:
    """Async iterator yielding the broadcaster generation after each publish."""

    def __init__(self, broadcaster: ReloadBroadcaster, event: asyncio.Event) -> None:
        self._broadcaster = broadcaster
        self._event = event
        self._seen = broadcaster.generation

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> int:
        while self._seen == self._broadcaster.generation:
            if self._broadcaster.closed:
                raise StopAsyncIteration
            await self._event.wait()
            # Re-arm before yielding control so no publish can slip between.
            self._event = self._broadcaster._current_event()
        self._seen = self._broadcaster.generation
        return self._seen


def sse_message(data: str) -> str:
    return f"data: {data}\n\n"


async def preview_session(broadcaster: ReloadBroadcaster) -> AsyncIterator[str]:
    """Event stream for one browser tab: ``connected`` then ``reload`` per rebuild.

    The stream ends when the client disconnects and the server cancels it, or
    when the broadcaster is closed.
    """
    subscription = broadcaster.subscribe()
    _logger.debug("Preview session connected")
    try:
        yield sse_message("connected")
        async for _generation in subscription:
            yield sse_message("reload")
    finally:
        _logger.debug("Preview session closed")


def inject_live_reload(html: str) -> str:
    """Insert the live-reload client before ``</body>`` (or append it)."""
    marker = "</body>"
    index = html.lower().find(marker)
    if index == -1:
        return html + LIVERELOAD_SNIPPET
    return html[:index] + LIVERELOAD_SNIPPET + html[index:]


__all__ = [
    "LIVERELOAD_PATH",
    "LIVERELOAD_SNIPPET",
    "ReloadBroadcaster",
    "Subscription",
    "inject_live_reload",
    "preview_session",
    "sse_message",
]
