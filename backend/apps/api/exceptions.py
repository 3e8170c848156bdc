from __future__ import annotations

from typing import Any, Dict

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

NOT_FOUND_MESSAGE = "Item not found"
SERVER_ERROR_MESSAGE = "Something went wrong"

DEFAULT_MESSAGES: Dict[type, str] = {
    ParseError: "Malformed request",
    MethodNotAllowed: "Method not allowed",
    UnsupportedMediaType: "Unsupported media type",
    ValidationError: "Validation failed",
}


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Turn every exception escaping a DRF view into ``{"error": message}``.

    Framework errors keep their status code. Anything else, including store
    faults outside id lookups, is logged with its traceback and answered with
    a 500 that reveals nothing about the cause.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, (Http404, NotFound)):
        bound_logger.info("Converted not-found exception")
        return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

    response = drf_exception_handler(exc, context)
    if response is not None:
        message = _extract_message(exc, response.data)
        bound_logger.info(
            "Converted API exception",
            exception=exc.__class__.__name__,
            status=response.status_code,
        )
        # Keep Allow / Retry-After style headers; the body is re-rendered
        headers = {
            key: value
            for key, value in getattr(response, "headers", {}).items()
            if key.lower() != "content-type"
        }
        return error_response(message, response.status_code, headers=headers)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(SERVER_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _extract_message(exc: Exception, payload: Any) -> str:
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail.strip():
            return detail
    for exc_type, message in DEFAULT_MESSAGES.items():
        if isinstance(exc, exc_type):
            return message
    return "Request failed"


__all__ = ["global_exception_handler"]
