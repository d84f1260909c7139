from .playlist import (
    FORMAT_M3U,
    FORMAT_M3U_EXTENDED,
    FORMAT_UNKNOWN,
    PlaylistVerdict,
)
from .url import is_http_url

__all__ = [
    "FORMAT_M3U",
    "FORMAT_M3U_EXTENDED",
    "FORMAT_UNKNOWN",
    "PlaylistVerdict",
    "is_http_url",
]
