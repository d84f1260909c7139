"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "burgtv",
    "environment": "dev",
    "http": {
        "timeout_seconds": 30.0,
        "follow_redirects": True,
        "user_agent": "BurgTV-API/1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "validation": {
        "head_timeout_seconds": 10.0,
        "content_timeout_seconds": 15.0,
        "prefix_bytes": 2048,
        "detailed": True,
    },
    "cors": {
        "allowed_origins": ["*"],
    },
}
