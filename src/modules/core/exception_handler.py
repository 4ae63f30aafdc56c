"""DRF exception handler rendering every failure in the error envelope.

Framework errors (authentication, parse errors, method not allowed,
throttling) keep their status code and headers; only the body is
rewritten.  Anything DRF does not recognise is an unexpected fault: it
is logged with its traceback and answered with a generic 500 so no
internal detail reaches the caller.
"""

from __future__ import annotations

from typing import Any, List

import structlog
from rest_framework import status
from rest_framework.views import exception_handler

from modules.core.responses import error_body, error_response

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _flatten(data: Any, prefix: str = "") -> List[str]:
    if isinstance(data, dict):
        messages: List[str] = []
        for key, value in data.items():
            messages.extend(_flatten(value, f"{prefix}{key}: "))
        return messages
    if isinstance(data, (list, tuple)):
        messages = []
        for value in data:
            messages.extend(_flatten(value, prefix))
        return messages
    return [f"{prefix}{data}"]


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "api.unhandled_exception",
            view=type(view).__name__ if view else None,
            error_type=type(exc).__name__,
        )
        return error_response(
            INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        response.data = error_body(str(data["detail"]))
    else:
        response.data = error_body("Invalid request", _flatten(data))
    return response
