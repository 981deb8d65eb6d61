"""
Middleware
Request id, logging and latency middleware for the FastAPI application.
"""

from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware, get_request_id
from .timing import (
    LatencySnapshot,
    LatencyTracker,
    RequestTimingMiddleware,
    get_latency_tracker,
    resource_family,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "LatencySnapshot",
    "LatencyTracker",
    "RequestLoggingMiddleware",
    "RequestTimingMiddleware",
    "get_latency_tracker",
    "get_request_id",
    "resource_family",
]
