# -*- coding: utf-8 -*-
"""
Workout tracker API

Shared workout menus, session comments and body measurements for a trainer
and trainees polling the same deployment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .comments.api import router as comments_router
from .config import Settings, settings as default_settings
from .deps import build_services
from .errors import NotFoundError, StorageWriteError, ValidationError
from .export.api import router as export_router
from .measurements.api import router as measurements_router
from .menus.api import router as menus_router
from .store import DocumentStore, create_store
from .sync.api import router as sync_router
from .users.api import router as users_router

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StorageWriteError)
    async def _write_failed(request: Request, exc: StorageWriteError):
        logger.error("Write failed on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": f"Failed to save data: {exc.name}"})


def _mount_frontend(app: FastAPI, public_dir: Path) -> None:
    root = public_dir.resolve()

    @app.get("/{path:path}", include_in_schema=False)
    def frontend(path: str) -> FileResponse:
        if path == "api" or path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")
        if path:
            candidate = (root / path).resolve()
            if candidate.is_file() and candidate.is_relative_to(root):
                return FileResponse(candidate)
        # SPA fallback: the client router handles every other path.
        index_file = root / "index.html"
        if not index_file.exists():
            raise HTTPException(status_code=404, detail="frontend not found")
        return FileResponse(index_file)


def create_app(store: Optional[DocumentStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    if store is None:
        store = create_store(settings.store_backend, settings.data_root)

    app = FastAPI(
        title="Workout Tracker",
        description="Shared workout menus, comments and body measurements",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.services = build_services(store, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True}

    app.include_router(users_router)
    app.include_router(menus_router)
    app.include_router(comments_router)
    app.include_router(sync_router)
    app.include_router(measurements_router)
    app.include_router(export_router)

    # Registered last so it never shadows an API route.
    _mount_frontend(app, settings.public_dir)
    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, default_settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Workout tracker listening on http://%s:%d", default_settings.host, default_settings.port)
    logger.info("Trainer and trainees share this URL; data is stored in %s", default_settings.data_root)
    uvicorn.run("workout_tracker.api:app", host=default_settings.host, port=default_settings.port, reload=False)
