import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Binds a correlation ID to every log line emitted while serving a request.

    Reads the X-Request-ID header from the incoming request or generates a
    UUID4 when it is absent. The ID lives in a ContextVar and in structlog's
    context for the duration of the request, is echoed back via the
    X-Request-ID response header, and is cleared once the response is built
    so nothing leaks into the next request served by the same worker.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        token = correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        try:
            response = self.get_response(request)
            logger.info(
                "request.finished",
                method=request.method,
                path=request.path,
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()
            correlation_id_var.reset(token)

        response[REQUEST_ID_HEADER] = cid
        return response
