"""FastAPI preview server for ``linkhub watch``."""

from __future__ import annotations

from pathlib import Path
from types import FrameType
from typing import Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse, PlainTextResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from ..logging import get_logger
from ..render import PAGE_NAME
from ..watch import RebuildLoop
from .livereload import LIVERELOAD_PATH, ReloadBroadcaster, inject_live_reload, preview_session

_logger = get_logger("service")

# Seconds uvicorn waits for open responses before cancelling them on shutdown.
SHUTDOWN_GRACE_SECONDS = 1


class HealthResponse(BaseModel):
    status: str


class StatusResponse(BaseModel):
    state: str
    generation: int
    last_error: Optional[str] = None


def create_app(
    output_dir: Path,
    broadcaster: ReloadBroadcaster,
    *,
    rebuild_loop: RebuildLoop | None = None,
) -> FastAPI:
    """Create the preview application serving ``output_dir`` with live reload."""

    app = FastAPI(title="linkhub preview", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.broadcaster = broadcaster

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/__status", response_model=StatusResponse)
    async def status() -> StatusResponse:
        if rebuild_loop is None:
            return StatusResponse(state="idle", generation=0)
        return StatusResponse(
            state=rebuild_loop.state.value,
            generation=rebuild_loop.generation,
            last_error=rebuild_loop.last_error,
        )

    @app.get(LIVERELOAD_PATH)
    async def livereload() -> StreamingResponse:
        return StreamingResponse(
            preview_session(broadcaster),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "Access-Control-Allow-Origin": "*",
            },
        )

    @app.get("/", response_class=HTMLResponse)
    async def index() -> Response:
        page = output_dir / PAGE_NAME
        try:
            html = page.read_text(encoding="utf-8")
        except FileNotFoundError:
            return PlainTextResponse("Not found", status_code=404)
        return HTMLResponse(inject_live_reload(html), headers={"Cache-Control": "no-cache"})

    app.mount("/", StaticFiles(directory=str(output_dir), check_dir=False), name="output")
    return app


class PreviewServer(uvicorn.Server):
    """uvicorn server that closes live-reload streams when asked to exit."""

    def __init__(self, config: uvicorn.Config, broadcaster: ReloadBroadcaster | None = None) -> None:
        super().__init__(config)
        self.broadcaster = broadcaster

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if self.broadcaster is not None:
            self.broadcaster.close()
        super().handle_exit(sig, frame)


def build_server(app: FastAPI, host: str = "0.0.0.0", port: int = 3000) -> PreviewServer:
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="warning",
        timeout_graceful_shutdown=SHUTDOWN_GRACE_SECONDS,
    )
    return PreviewServer(config, getattr(app.state, "broadcaster", None))


def run_service(app: FastAPI, host: str = "0.0.0.0", port: int = 3000) -> None:  # pragma: no cover - integration path
    """Serve ``app`` until interrupted; Ctrl+C ends open live-reload streams first."""
    _logger.info("Serving at http://%s:%d", "localhost" if host in {"0.0.0.0", "::"} else host, port)
    build_server(app, host=host, port=port).run()


__all__ = [
    "HealthResponse",
    "PreviewServer",
    "SHUTDOWN_GRACE_SECONDS",
    "StatusResponse",
    "build_server",
    "create_app",
    "run_service",
]
