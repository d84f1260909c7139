"""Port for validating remote M3U playlist URLs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from burgtv.domain.entities.playlist import PlaylistVerdict


@runtime_checkable
class PlaylistValidatorPort(Protocol):
    """Judges whether a URL serves a usable M3U/M3U8 playlist.

    Implementations probe with HEAD first, then sample the start of the
    content with a ranged GET.
    """

    async def validate(self, url: str) -> PlaylistVerdict:
        """Validate a single playlist URL.

        Args:
            url: Absolute http(s) URL (checked by the caller).

        Returns:
            A verdict. Failures are reported in ``verdict.error``,
            never raised.
        """
        ...
