"""HTTP-based M3U playlist validator: HEAD probe, then a ranged content sample."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from httpx import HTTPError, TimeoutException

from burgtv.domain.entities.playlist import FORMAT_UNKNOWN, PlaylistVerdict
from burgtv.infrastructure.validation.m3u_content import analyze_m3u_content

if TYPE_CHECKING:
    from httpx import AsyncClient

log = structlog.get_logger(__name__)

# Content types a playlist server plausibly answers with (substring match).
PLAYLIST_CONTENT_TYPES: tuple[str, ...] = (
    "application/x-mpegurl",
    "audio/x-mpegurl",
    "text/plain",
    "application/octet-stream",
)

NOT_A_PLAYLIST_ERROR = "URL does not appear to be a valid M3U playlist"


def has_playlist_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    return any(known in content_type for known in PLAYLIST_CONTENT_TYPES)


def has_m3u_extension(url: str) -> bool:
    return ".m3u" in url.lower()


def _network_error(exc: BaseException) -> str:
    return f"Network error: {str(exc) or type(exc).__name__}"


class HttpPlaylistValidator:
    """Validates M3U playlist URLs over HTTP.

    Pipeline:
        1. HEAD request. Timeouts, transport errors and non-2xx statuses
           are final.
        2. Content-type / ``.m3u`` heuristic. If neither matches, no GET
           is issued.
        3. Ranged GET of the first ``prefix_bytes`` bytes. Any failure here
           is tolerated: HEAD already succeeded, so the URL is reported
           valid with the HEAD content type as its format.
        4. The sampled text is classified by ``analyze_m3u_content``.

    With ``detailed=False`` the pipeline stops after step 2.

    Each probe gets its own deadline; when it expires the request is
    cancelled and its connection released.

    Args:
        http_client: Shared httpx.AsyncClient (injected).
        head_timeout_seconds: Deadline for the HEAD probe (default: 10s).
        content_timeout_seconds: Deadline for the content probe (default: 15s).
        prefix_bytes: Last byte offset requested via ``Range`` (default: 2048).
        detailed: Sample and classify the content (default: True).
    """

    def __init__(
        self,
        http_client: AsyncClient,
        head_timeout_seconds: float = 10.0,
        content_timeout_seconds: float = 15.0,
        prefix_bytes: int = 2048,
        detailed: bool = True,
    ) -> None:
        self.http_client = http_client
        self.head_timeout = head_timeout_seconds
        self.content_timeout = content_timeout_seconds
        self.prefix_bytes = prefix_bytes
        self.detailed = detailed

    async def validate(self, url: str) -> PlaylistVerdict:
        """Validate a playlist URL. Never raises."""
        try:
            verdict = await self._validate(url)
        except Exception as e:  # noqa: BLE001
            log.warning("playlist_validation_unexpected_error", url=url, error=str(e))
            return PlaylistVerdict.invalid(_network_error(e))

        log.info(
            "playlist_validated",
            url=url,
            valid=verdict.is_valid,
            channel_count=verdict.channel_count,
            format=verdict.format,
            error=verdict.error,
        )
        return verdict

    async def _validate(self, url: str) -> PlaylistVerdict:
        try:
            response = await asyncio.wait_for(
                self.http_client.head(
                    url,
                    timeout=self.head_timeout,
                    follow_redirects=True,
                ),
                timeout=self.head_timeout,
            )
        except (asyncio.TimeoutError, TimeoutException):
            log.debug("playlist_head_timeout", url=url, timeout=self.head_timeout)
            return PlaylistVerdict.invalid(
                f"Network error: timed out after {self.head_timeout:g}s"
            )
        except HTTPError as e:
            log.debug("playlist_head_http_error", url=url, error=str(e))
            return PlaylistVerdict.invalid(_network_error(e))

        log.debug(
            "playlist_head_result",
            url=url,
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
        )

        if not response.is_success:
            return PlaylistVerdict.invalid(
                f"HTTP {response.status_code}: {response.reason_phrase}"
            )

        content_type = response.headers.get("content-type")
        if not has_playlist_content_type(content_type) and not has_m3u_extension(url):
            return PlaylistVerdict.invalid(NOT_A_PLAYLIST_ERROR)

        head_only = PlaylistVerdict.valid(format=content_type or FORMAT_UNKNOWN)
        if not self.detailed:
            return head_only

        try:
            content = await asyncio.wait_for(
                self._fetch_prefix(url), timeout=self.content_timeout
            )
        except (asyncio.TimeoutError, TimeoutException):
            log.warning(
                "playlist_content_timeout", url=url, timeout=self.content_timeout
            )
            return head_only
        except HTTPError as e:
            log.warning("playlist_content_http_error", url=url, error=str(e))
            return head_only
        except Exception as e:  # noqa: BLE001
            log.warning("playlist_content_failed", url=url, error=str(e))
            return head_only

        if content is None:
            return head_only
        return analyze_m3u_content(content)

    async def _fetch_prefix(self, url: str) -> str | None:
        """GET the first bytes of ``url`` as text. None on non-2xx status.

        Stops reading after the prefix window even if the server ignores
        the ``Range`` header.
        """
        limit = self.prefix_bytes + 1
        async with self.http_client.stream(
            "GET",
            url,
            headers={"Range": f"bytes=0-{self.prefix_bytes}"},
            timeout=self.content_timeout,
            follow_redirects=True,
        ) as response:
            log.debug(
                "playlist_content_result",
                url=url,
                status_code=response.status_code,
            )
            if not response.is_success:
                return None

            raw = bytearray()
            async for chunk in response.aiter_bytes():
                raw.extend(chunk)
                if len(raw) >= limit:
                    break
            encoding = response.encoding or "utf-8"

        sample = bytes(raw[:limit])
        try:
            return sample.decode(encoding, errors="replace")
        except LookupError:
            return sample.decode("utf-8", errors="replace")
