"""Shutdown behaviour of the uvicorn-backed preview server."""

from __future__ import annotations

import signal
import socket
import threading
import time
from pathlib import Path

import httpx

from linkhub.service import ReloadBroadcaster, build_server, create_app
from linkhub.service.app import SHUTDOWN_GRACE_SECONDS, PreviewServer


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _wait_until_started(server: PreviewServer, thread: threading.Thread) -> None:
    deadline = time.monotonic() + 10.0
    while not server.started:
        assert thread.is_alive(), "server thread exited during startup"
        assert time.monotonic() < deadline, "server did not start"
        time.sleep(0.05)


def test_build_server_bounds_graceful_shutdown(tmp_path: Path) -> None:
    broadcaster = ReloadBroadcaster()

    server = build_server(create_app(tmp_path, broadcaster), host="127.0.0.1", port=3001)

    assert isinstance(server, PreviewServer)
    assert server.broadcaster is broadcaster
    assert server.config.timeout_graceful_shutdown == SHUTDOWN_GRACE_SECONDS


def test_interrupt_stops_server_with_connected_livereload_client(tmp_path: Path) -> None:
    output = tmp_path / "dist"
    output.mkdir()
    (output / "index.html").write_text("<html><body><h1>Ada</h1></body></html>", encoding="utf-8")
    port = _free_port()
    server = build_server(create_app(output, ReloadBroadcaster()), host="127.0.0.1", port=port)
    thread = threading.Thread(target=server.run, name="preview-server", daemon=True)
    thread.start()
    _wait_until_started(server, thread)

    with httpx.stream("GET", f"http://127.0.0.1:{port}/__livereload", timeout=5.0) as response:
        lines = response.iter_lines()
        assert next(lines) == "data: connected"
        server.handle_exit(signal.SIGINT, None)
        remaining = [line for line in lines if line]

    thread.join(timeout=5.0)

    assert not thread.is_alive()
    assert remaining == []
