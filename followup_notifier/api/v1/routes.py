"""
API v1 routes.

Defines the follow-up endpoint. Every response carries a permissive
Access-Control-Allow-Origin header, and every failure is returned as
`{"success": false, "error": <message>}` rather than FastAPI's default
error bodies.
"""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from followup_notifier.api.dependencies import get_follow_up_service
from followup_notifier.api.models import ErrorResponse, FollowUpRequest, FollowUpResponse
from followup_notifier.domain.exceptions import (
    INVALID_FIELDS_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    MethodNotAllowed,
    TriggerValidationError,
)
from followup_notifier.domain.followup import FollowUpService
from followup_notifier.domain.ports import Trigger

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

FOLLOW_UP_PATH = "/send-followup"

CORS_ORIGIN_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_ORIGIN_HEADERS,
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def error_response(exc: Exception) -> JSONResponse:
    """
    Convert any pipeline failure into the error envelope.

    405 only for the method-not-allowed message; everything else is 400.
    The exception, with any chained upstream cause, goes to the log.
    """
    message = str(exc) or type(exc).__name__
    status_code = (
        status.HTTP_405_METHOD_NOT_ALLOWED
        if message == METHOD_NOT_ALLOWED_MESSAGE
        else status.HTTP_400_BAD_REQUEST
    )

    logger.error("Error sending follow-up: %s", message, exc_info=exc)

    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
        headers=CORS_ORIGIN_HEADERS,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Answer the router's own 405 for the follow-up path with the error envelope.

    Starlette raises it for any method without a matching route, including
    CONNECT and extension verbs. Other HTTP errors keep FastAPI's default body.
    """
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path.endswith(FOLLOW_UP_PATH)
    ):
        return error_response(MethodNotAllowed())
    return await default_http_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Install the follow-up error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


def parse_trigger(payload: object) -> Trigger:
    """
    Build a trigger from the decoded JSON body.

    A body that is not an object has no fields. Non-string identifiers are
    rejected with a short message instead of pydantic's full report.
    """
    if not isinstance(payload, dict):
        payload = {}
    try:
        body = FollowUpRequest.model_validate(payload)
    except ValidationError as e:
        raise TriggerValidationError(INVALID_FIELDS_MESSAGE) from e
    return Trigger(request_id=body.request_id or "", user_id=body.user_id or "")


@router.post(
    FOLLOW_UP_PATH,
    response_model=FollowUpResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input, lookup or delivery failure"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
    },
    summary="Send a follow-up email",
    description="Look up the user and the request, then email the user a reminder "
    "with a link back to their request.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": FollowUpRequest.model_json_schema(by_alias=True),
                }
            },
        }
    },
)
async def send_followup(
    request: Request,
    service: FollowUpService = Depends(get_follow_up_service),
) -> JSONResponse:
    """
    Send a follow-up email for one request.

    - **requestId**: Request to follow up on
    - **userId**: User who owns the request

    Returns the provider-assigned email id on success.
    """
    try:
        trigger = parse_trigger(await request.json())
        email_id = await service.send_follow_up(trigger)
    except Exception as e:
        return error_response(e)

    return JSONResponse(
        FollowUpResponse(email_id=email_id).model_dump(by_alias=True),
        headers=CORS_ORIGIN_HEADERS,
    )


@router.options(FOLLOW_UP_PATH, include_in_schema=False)
async def send_followup_preflight() -> Response:
    """Answer CORS preflight without reading the body."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=PREFLIGHT_HEADERS)
