"""HTTP API for remote control of the idle display."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from idleview import __version__
from idleview.api.facade import IdleviewAPI
from idleview.errors import IdleviewError
from idleview.photos.unsplash import CurrentPhoto

logger: Final = logging.getLogger(__name__)


async def idleview_error_handler(request: Request, exc: IdleviewError) -> JSONResponse:
    """Report any idleview error as HTTP 500 with an ``error`` message."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


def create_router(api: IdleviewAPI) -> APIRouter:
    """Build the ``/api`` routes bound to *api*.

    Handlers are plain functions, so FastAPI runs them in its worker
    thread pool and the settings store sees truly concurrent callers.
    """
    router = APIRouter()

    @router.get("/settings")
    def get_settings() -> dict[str, Any]:
        """Return the current settings."""
        return api.get_settings().to_json_tree()

    @router.put("/settings")
    def update_settings(settings: Any = Body(...)) -> dict[str, Any]:
        """Replace all settings with the request body."""
        return api.replace_settings(settings).to_json_tree()

    @router.patch("/settings")
    def patch_settings(updates: Any = Body(None)) -> dict[str, Any]:
        """Merge the request body into the current settings."""
        return api.patch_settings(updates).to_json_tree()

    @router.post("/settings/reset")
    def reset_settings() -> dict[str, Any]:
        """Reset all settings to defaults."""
        return api.reset_settings().to_json_tree()

    @router.get("/photo/current")
    def get_current_photo() -> CurrentPhoto | None:
        return api.get_current_photo()

    @router.post("/photo/current")
    def update_current_photo(photo: CurrentPhoto) -> CurrentPhoto:
        return api.set_current_photo(photo)

    @router.get("/health")
    def health_check() -> dict[str, str]:
        return api.health()

    return router


def create_app(api: IdleviewAPI, static_dir: Path | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        api: Facade the routes delegate to
        static_dir: Optional remote-control web page served at ``/``

    Returns:
        Configured application
    """
    app = FastAPI(
        title="Idleview API",
        description="Settings and status API for the idleview display",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(IdleviewError, idleview_error_handler)  # type: ignore[arg-type]
    app.include_router(create_router(api), prefix="/api")
    app.state.idleview = api

    if static_dir is not None:
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory %s not found, control page disabled", static_dir)

    return app
