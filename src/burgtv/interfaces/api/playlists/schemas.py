"""Request bodies for the playlist endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError, field_validator

from burgtv.domain.entities.url import is_http_url

_VALUE_ERROR_PREFIX = "Value error, "


class ValidatePlaylistRequest(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        if not is_http_url(v):
            raise ValueError("Invalid URL format")
        return v


def describe_validation_error(exc: ValidationError) -> str:
    """Join pydantic error messages into one human-readable line."""
    messages = []
    for error in exc.errors():
        msg = error["msg"]
        if msg.startswith(_VALUE_ERROR_PREFIX):
            msg = msg[len(_VALUE_ERROR_PREFIX) :]
        messages.append(msg)
    return ", ".join(messages)
