"""Classification of (partial) M3U playlist text."""

from __future__ import annotations

from burgtv.domain.entities.playlist import (
    FORMAT_M3U,
    FORMAT_M3U_EXTENDED,
    PlaylistVerdict,
)

M3U_HEADER = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"
_URL_PREFIXES = ("http://", "https://")
_EXTENDED_MARKER = "tvg-"


def analyze_m3u_content(content: str) -> PlaylistVerdict:
    """Classify playlist text, typically only the first few KB of a file.

    The channel count is ``min(#EXTINF lines, URL lines)`` over the given
    text, so a truncated sample undercounts large playlists.
    """
    lines = [line.strip() for line in content.split("\n")]
    lines = [line for line in lines if line]

    if not lines:
        return PlaylistVerdict.invalid("Empty content")

    if not lines[0].startswith(M3U_HEADER):
        return PlaylistVerdict.invalid("Missing #EXTM3U header")

    channel_lines = sum(1 for line in lines if line.startswith(EXTINF_PREFIX))
    url_lines = sum(
        1
        for line in lines
        if not line.startswith("#") and line.startswith(_URL_PREFIXES)
    )

    if channel_lines == 0:
        return PlaylistVerdict.invalid("No channels found in playlist")
    if url_lines == 0:
        return PlaylistVerdict.invalid("No valid URLs found in playlist")

    is_extended = any(_EXTENDED_MARKER in line for line in lines)
    return PlaylistVerdict.valid(
        channel_count=min(channel_lines, url_lines),
        format=FORMAT_M3U_EXTENDED if is_extended else FORMAT_M3U,
    )
