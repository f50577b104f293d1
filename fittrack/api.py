# -*- coding: utf-8 -*-
"""
FitTrack API

Training and diet plans built from exercise / recipe catalogs, progress
tracking, and health-vs-economic indicator analyses.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .analytics.api import analyses_router, router as analytics_router
from .app_db import init_app_db
from .auth.api import profile_router, router as auth_router
from .auth.security import get_current_user_from_request
from .catalog.api import router as catalog_router
from .config import settings
from .errors import FitTrackError
from .i18n import get_locale
from .plans.api import diet_router, training_router
from .progress.api import router as progress_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FitTrack",
    description="Training and diet plans, progress tracking and correlation analyses",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            request.state.user = get_current_user_from_request(request)
        except FitTrackError as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload(get_locale(request)))
    return await call_next(request)


@app.exception_handler(FitTrackError)
async def _fittrack_error_handler(request: Request, exc: FitTrackError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(get_locale(request)))


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(training_router)
app.include_router(diet_router)
app.include_router(catalog_router)
app.include_router(progress_router)
app.include_router(analytics_router)
app.include_router(analyses_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": app.version}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("FITTRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("FITTRACK_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        logger.warning("Invalid port %r, falling back to 8000", port_raw)
        port = 8000

    uvicorn.run("fittrack.api:app", host=host, port=port, reload=False)
