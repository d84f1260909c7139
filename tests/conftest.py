"""Shared test fixtures for the BurgTV test suite."""

from __future__ import annotations

import os

import pytest

from burgtv.infrastructure.config import AppConfig

# ---------------------------------------------------------------------------
# Playlist samples
# ---------------------------------------------------------------------------

BASIC_PLAYLIST = (
    "#EXTM3U\n"
    "#EXTINF:-1,Channel1\n"
    "http://x/1\n"
    "#EXTINF:-1,Channel2\n"
    "http://x/2\n"
)

EXTENDED_PLAYLIST = (
    "#EXTM3U\n"
    '#EXTINF:-1 tvg-id="1" tvg-name="Das Erste",Das Erste\n'
    "http://x/1\n"
    '#EXTINF:-1 tvg-id="2" tvg-name="ZDF",ZDF\n'
    "http://x/2\n"
)


@pytest.fixture()
def basic_playlist() -> str:
    return BASIC_PLAYLIST


@pytest.fixture()
def extended_playlist() -> str:
    return EXTENDED_PLAYLIST


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def app_config() -> AppConfig:
    """AppConfig with defaults, test environment."""
    return AppConfig(environment="test")


@pytest.fixture(autouse=True)
def _clean_burgtv_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host BURGTV_* variables out of config loading."""
    for key in list(os.environ):
        if key.upper().startswith("BURGTV_"):
            monkeypatch.delenv(key, raising=False)
