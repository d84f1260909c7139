"""Domain entities for M3U playlist validation.

Pure value objects, no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

FORMAT_M3U = "M3U"
FORMAT_M3U_EXTENDED = "M3U Extended"
FORMAT_UNKNOWN = "unknown"


@dataclass(frozen=True)
class PlaylistVerdict:
    """Outcome of validating a remote playlist URL.

    ``channel_count`` is only set when the playlist content was parsed.
    It is sampled from the fetched prefix, so for large playlists it is
    a lower bound rather than the full channel count.

    ``error`` is set if and only if ``is_valid`` is False.
    """

    is_valid: bool
    channel_count: int | None = None
    format: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.is_valid and self.error is not None:
            raise ValueError("a valid verdict cannot carry an error")
        if not self.is_valid and not self.error:
            raise ValueError("an invalid verdict requires an error")
        if self.channel_count is not None and self.channel_count < 0:
            raise ValueError("channel_count must be >= 0")

    @classmethod
    def valid(
        cls, *, channel_count: int | None = None, format: str | None = None
    ) -> PlaylistVerdict:
        return cls(is_valid=True, channel_count=channel_count, format=format)

    @classmethod
    def invalid(cls, error: str) -> PlaylistVerdict:
        return cls(is_valid=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """JSON wire form (camelCase keys, unset fields omitted)."""
        data: dict[str, Any] = {"isValid": self.is_valid}
        if self.channel_count is not None:
            data["channelCount"] = self.channel_count
        if self.format is not None:
            data["format"] = self.format
        if self.error is not None:
            data["error"] = self.error
        return data
