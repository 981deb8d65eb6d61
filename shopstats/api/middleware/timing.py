"""
Request Timing Middleware
Per-resource latency windows behind the status and metrics endpoints.
"""

import logging
import math
import time
from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict, List, Optional, Sequence

from fastapi import Request, Response
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

ROOT = "root"
UNMATCHED = "unmatched"


def resource_family(request: Request) -> str:
    """
    Name the resource family a request was routed to.

    Routes are grouped by their router tag (``categories``, ``users``,
    ``health`` ...). Untagged routes fall back to the first segment of
    their path template, the bare ``/`` is ``root`` and requests that
    matched no route share ``unmatched``.
    """
    route = request.scope.get("route")
    if route is None:
        return UNMATCHED

    tags = getattr(route, "tags", None)
    if tags:
        return str(tags[0])

    segment = getattr(route, "path", "").strip("/").split("/", 1)[0]
    return segment or ROOT


class LatencySnapshot(BaseModel):
    """Summary of one latency window, in milliseconds."""

    count: int = 0
    p50_ms: float = 0.0
    p95_ms: float = 0.0
    p99_ms: float = 0.0
    mean_ms: float = 0.0
    min_ms: float = 0.0
    max_ms: float = 0.0

    @classmethod
    def of(cls, samples: Sequence[float]) -> "LatencySnapshot":
        if not samples:
            return cls()
        ordered = sorted(samples)

        def rank(q: float) -> float:
            # Nearest-rank percentile
            return round(ordered[max(math.ceil(q * len(ordered)) - 1, 0)], 2)

        return cls(
            count=len(ordered),
            p50_ms=rank(0.50),
            p95_ms=rank(0.95),
            p99_ms=rank(0.99),
            mean_ms=round(sum(ordered) / len(ordered), 2),
            min_ms=round(ordered[0], 2),
            max_ms=round(ordered[-1], 2),
        )


class LatencyTracker:
    """
    Rolling latency windows.

    Keeps the last ``window_size`` latencies overall and, separately, the
    last ``window_size`` latencies of every resource family seen so far.
    """

    def __init__(self, window_size: int = 1000):
        self.window_size = window_size
        self._overall: Deque[float] = deque(maxlen=window_size)
        self._families: Dict[str, Deque[float]] = {}
        self._lock = Lock()

    def record(self, family: str, latency_ms: float) -> None:
        with self._lock:
            self._overall.append(latency_ms)
            window = self._families.get(family)
            if window is None:
                window = self._families[family] = deque(maxlen=self.window_size)
            window.append(latency_ms)

    def reset(self) -> None:
        with self._lock:
            self._overall.clear()
            self._families.clear()

    def families(self) -> List[str]:
        """Resource families with at least one recorded request, sorted."""
        with self._lock:
            return sorted(self._families)

    def snapshot(self, family: Optional[str] = None) -> LatencySnapshot:
        """
        Summarize a window.

        Args:
            family: Resource family to summarize, or None for all requests

        Returns:
            The window's snapshot; an empty one for an unknown family
        """
        with self._lock:
            if family is None:
                samples = list(self._overall)
            else:
                samples = list(self._families.get(family, ()))
        return LatencySnapshot.of(samples)


_latency_tracker = LatencyTracker()


def get_latency_tracker() -> LatencyTracker:
    """Process-wide latency tracker."""
    return _latency_tracker


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """
    Time every request and file it under its resource family.

    Requests that end in an unhandled exception are recorded as well.
    The elapsed time is returned in ``X-Response-Time`` and requests slower
    than ``slow_request_ms`` are logged as warnings.
    """

    def __init__(
        self,
        app,
        tracker: Optional[LatencyTracker] = None,
        slow_request_ms: float = 300,
    ):
        super().__init__(app)
        self.tracker = tracker or get_latency_tracker()
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            family = resource_family(request)
            self.tracker.record(family, elapsed_ms)

        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        if elapsed_ms > self.slow_request_ms:
            logger.warning(
                f"Slow {family} request: {request.method} {request.url.path}",
                extra={
                    "resource": family,
                    "duration_ms": round(elapsed_ms, 2),
                    "slow_request_ms": self.slow_request_ms,
                },
            )

        return response
