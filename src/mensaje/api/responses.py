"""Response helpers and the CORS header sets used by the action endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"

METADATA_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ALLOWED_METHODS,
}

EXECUTION_CORS_HEADERS = {
    **METADATA_CORS_HEADERS,
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

PREFLIGHT_CORS_HEADERS = {
    **METADATA_CORS_HEADERS,
    "Access-Control-Allow-Headers": (
        "Content-Type, Authorization, X-CSRF-Token, X-Requested-With, Accept, "
        "Accept-Version, Content-Length, Content-MD5, Date, X-Api-Version"
    ),
}


def json_response(
    body: Any,
    status: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(content=body, status_code=status, headers=dict(headers or {}))


def error_response(
    message: str,
    status: int,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    return json_response({"error": message}, status=status, headers=headers)


def empty_response(status: int = 204, headers: Optional[Mapping[str, str]] = None) -> Response:
    return Response(status_code=status, headers=dict(headers or {}))
