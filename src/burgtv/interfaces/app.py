"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.responses import Response

from burgtv.infrastructure.config import AppConfig
from burgtv.interfaces.api.responses import error_response, success_response
from burgtv.interfaces.app_state import AppState
from burgtv.interfaces.composition import lifespan

log = structlog.get_logger(__name__)

APP_VERSION = "1.0.0"

_CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
_CORS_HEADERS = ["Content-Type", "Authorization", "X-API-Key"]
_CORS_MAX_AGE = 86400


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app: configuration ONLY, NO resource initialization.

    Resources (HTTP client, playlist validator) are created in lifespan().
    """
    app = FastAPI(
        title="BurgTV API",
        description="Remote M3U playlist validation",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config
    app.state.started_at = time.monotonic()

    # "*" echoes the request Origin rather than a literal "*".
    allow_any_origin = "*" in config.cors_allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[] if allow_any_origin else config.cors_allowed_origins,
        allow_origin_regex=".*" if allow_any_origin else None,
        allow_credentials=True,
        allow_methods=_CORS_METHODS,
        allow_headers=_CORS_HEADERS,
        max_age=_CORS_MAX_AGE,
    )

    from burgtv.interfaces.api.playlists import router as playlists_router

    app.include_router(playlists_router, prefix="/api/v1")

    @app.get("/api/v1/healthz")
    async def healthz() -> JSONResponse:
        """Liveness probe: returns 200 as long as the process is running."""
        state: AppState = app.state
        return success_response(
            {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc)
                .isoformat()
                .replace("+00:00", "Z"),
                "version": APP_VERSION,
                "environment": state.config.environment,
                "uptime": round(time.monotonic() - state.started_at, 3),
            }
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        log.error(
            "unhandled_exception",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )
        message = (
            "An unexpected error occurred"
            if config.environment == "prod"
            else str(exc) or type(exc).__name__
        )
        return error_response(500, "Internal server error", message)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
                user_agent=request.headers.get("user-agent"),
            )

    return app
