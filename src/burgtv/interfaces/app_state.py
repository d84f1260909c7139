"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

import httpx
from starlette.datastructures import State

from burgtv.domain.ports import PlaylistValidatorPort
from burgtv.infrastructure.config import AppConfig


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Process start (time.monotonic()), for the health endpoint's uptime
    started_at: float

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    playlist_validator: PlaylistValidatorPort
