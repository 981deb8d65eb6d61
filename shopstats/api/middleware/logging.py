"""
Request Logging Middleware
Assigns request ids and logs one line per completed request.
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .timing import resource_family

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request):
    """Id assigned to the request by ``RequestLoggingMiddleware``, if any."""
    return getattr(request.state, "request_id", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag requests with an id and log their outcome.

    The id is taken from the ``X-Request-ID`` header or generated, kept on
    ``request.state.request_id`` for the handlers and error handlers, and
    returned in the ``X-Request-ID`` response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        if request.url.query:
            context["query"] = request.url.query

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            context["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.exception(f"{request.method} {request.url.path} failed", extra=context)
            raise

        context.update(
            status_code=response.status_code,
            resource=resource_family(request),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}", extra=context)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
