"""Playlist validation adapters."""

from __future__ import annotations

from .http_playlist_validator import HttpPlaylistValidator
from .m3u_content import analyze_m3u_content

__all__ = [
    "HttpPlaylistValidator",
    "analyze_m3u_content",
]
