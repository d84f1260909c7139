"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from burgtv.infrastructure.validation import HttpPlaylistValidator
from burgtv.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (required by the validator)
        2. Playlist validator
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) Shared HTTP client
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=config.http_follow_redirects,
    )
    log.info(
        "http_client_initialized",
        timeout_seconds=config.http_timeout_seconds,
        user_agent=config.http_user_agent,
    )

    # 2) Playlist validator
    state.playlist_validator = HttpPlaylistValidator(
        http_client=state.http_client,
        head_timeout_seconds=config.validation.head_timeout_seconds,
        content_timeout_seconds=config.validation.content_timeout_seconds,
        prefix_bytes=config.validation.prefix_bytes,
        detailed=config.validation.detailed,
    )
    log.info(
        "playlist_validator_initialized",
        detailed=config.validation.detailed,
        prefix_bytes=config.validation.prefix_bytes,
    )

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")

        log.info("app_shutdown_complete")
