"""Action endpoint: metadata (GET), transaction (POST) and preflight (OPTIONS)."""

import logging

from fastapi import APIRouter, Depends, Request

from ..action import (
    ACTION_PATH,
    MESSAGE_PARAM,
    base_url_from_headers,
    build_descriptor,
    build_execution_response,
)
from ..config import Settings, get_settings
from ..errors import MissingParameterError
from ..spec.models import create_metadata
from .responses import (
    EXECUTION_CORS_HEADERS,
    METADATA_CORS_HEADERS,
    PREFLIGHT_CORS_HEADERS,
    empty_response,
    error_response,
    json_response,
)

logger = logging.getLogger(__name__)

action_router = APIRouter(tags=["action"])


@action_router.get(ACTION_PATH)
async def get_metadata(request: Request, settings: Settings = Depends(get_settings)):
    """Action metadata for the client to render."""
    try:
        base_url = base_url_from_headers(
            request.headers.get("host"),
            request.headers.get("x-forwarded-proto"),
            default_host=settings.default_host,
        )
        descriptor = build_descriptor(base_url, chain_key=settings.chain_key)
        validated = create_metadata(descriptor)
    except Exception:
        logger.exception("Error creating metadata")
        return error_response("Error al crear metadata", status=500)

    return json_response(validated, headers=METADATA_CORS_HEADERS)


@action_router.post(ACTION_PATH)
async def post_execution(request: Request, settings: Settings = Depends(get_settings)):
    """Unsigned storeMessage transaction for the submitted message."""
    try:
        # first value wins when the key repeats
        values = request.query_params.getlist(MESSAGE_PARAM)
        message = values[0] if values else None
        response = build_execution_response(message, settings)
        body = response.to_dict()
    except MissingParameterError:
        return error_response(
            "Message parameter is required", status=400, headers=EXECUTION_CORS_HEADERS
        )
    except Exception:
        # no CORS headers on this path
        logger.exception("Error in POST request")
        return error_response("Internal Server Error", status=500)

    return json_response(body, headers=EXECUTION_CORS_HEADERS)


@action_router.options(ACTION_PATH)
async def preflight():
    return empty_response(204, headers=PREFLIGHT_CORS_HEADERS)
