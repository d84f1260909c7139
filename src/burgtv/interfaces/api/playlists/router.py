"""Playlist endpoints (remote M3U validation)."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from burgtv.interfaces.api.playlists.schemas import (
    ValidatePlaylistRequest,
    describe_validation_error,
)
from burgtv.interfaces.api.responses import error_response, success_response
from burgtv.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/playlists", tags=["playlists"])


@router.post("/validate")
async def validate_playlist(request: Request) -> JSONResponse:
    """Validate a remote M3U playlist URL.

    Body: ``{"url": "https://..."}``

    Any verdict, valid or not, is returned as ``{"success": true, "data":
    verdict}``: validity is business data, not a transport error.

    Returns:
        200 with the verdict, 400 for malformed input, 500 if the
        validator itself fails.
    """
    state = cast(AppState, request.app.state)

    try:
        body = await request.json()
    except ValueError:
        log.info("playlist_validate_invalid_json")
        return error_response(400, "Invalid JSON body")

    try:
        payload = ValidatePlaylistRequest.model_validate(body)
    except ValidationError as e:
        message = describe_validation_error(e)
        log.info("playlist_validate_rejected", reason=message)
        return error_response(400, "Validation failed", message)

    try:
        verdict = await state.playlist_validator.validate(payload.url)
    except Exception as e:
        log.error("playlist_validate_failed", url=payload.url, error=str(e))
        return error_response(
            500, "Validation failed", "Unable to validate playlist URL"
        )

    return success_response(verdict.to_dict())
