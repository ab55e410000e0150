"""Preview server (FastAPI) with Server-Sent Events live reload."""

from .app import build_server, create_app, run_service
from .livereload import ReloadBroadcaster, inject_live_reload, preview_session

__all__ = [
    "ReloadBroadcaster",
    "build_server",
    "create_app",
    "inject_live_reload",
    "preview_session",
    "run_service",
]
