"""JSON envelope shared by all API endpoints.

Success: ``{"success": true, "data": ...}``
Failure: ``{"success": false, "error": ..., "message": ...}``
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse


def success_response(data: Any, *, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": data},
    )


def error_response(
    status_code: int, error: str, message: str | None = None
) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=content)
