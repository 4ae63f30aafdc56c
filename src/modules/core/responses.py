"""Single JSON error envelope used by every endpoint.

Shape: ``{"error": true, "message": "...", "details": [...]}`` where
``details`` is only present for input validation failures.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework.response import Response


def error_body(message: str, details: Optional[List[Any]] = None) -> dict:
    body: dict = {"error": True, "message": message}
    if details:
        body["details"] = details
    return body


def validation_details(exc: PydanticValidationError) -> List[str]:
    """Render pydantic errors as ``"field: message"`` strings."""
    details = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        details.append(f"{field}: {error['msg']}" if field else error["msg"])
    return details


def error_response(
    message: str, status_code: int, details: Optional[List[Any]] = None
) -> Response:
    return Response(error_body(message, details), status=status_code)
