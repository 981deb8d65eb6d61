"""
Health Check Endpoints
Endpoints for health checks and status monitoring.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from ...db import DataStore
from ..config import APISettings, get_settings
from ..dependencies import get_store
from ..middleware.timing import get_latency_tracker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check.

    Returns:
        Simple health status
    """
    return {"status": "healthy", "timestamp": _now()}


@router.get("/status", status_code=status.HTTP_200_OK)
async def status_check(
    settings: APISettings = Depends(get_settings),
    store: DataStore = Depends(get_store),
) -> Dict[str, Any]:
    """
    Detailed status check.

    Reports dataset collection sizes and request latency. The status is
    "degraded" when the dataset holds no records at all.

    Returns:
        Detailed status information
    """
    collections = store.stats()
    latency = get_latency_tracker().snapshot()

    dataset_loaded = any(collections.values())
    if not dataset_loaded:
        logger.warning("Status check: dataset is empty", extra={"database_file": settings.database_file})

    return {
        "status": "healthy" if dataset_loaded else "degraded",
        "timestamp": _now(),
        "version": settings.version,
        "components": {
            "dataset": {
                "status": "loaded" if dataset_loaded else "empty",
                "file": settings.database_file,
                "collections": collections,
            },
        },
        "performance": {
            "request_count": latency.count,
            "latency_p50_ms": latency.p50_ms,
            "latency_p95_ms": latency.p95_ms,
            "latency_p99_ms": latency.p99_ms,
            "slow_request_ms": settings.slow_request_ms,
        },
    }


@router.get("/metrics", status_code=status.HTTP_200_OK)
async def get_metrics() -> Dict[str, Any]:
    """
    Get performance metrics.

    Reports latency over all requests and per resource family
    (categories, products, orders, users ...).

    Returns:
        Request counts and latency statistics
    """
    tracker = get_latency_tracker()
    overall = tracker.snapshot()
    resources = {family: tracker.snapshot(family) for family in tracker.families()}

    return {
        "requests": {
            "total": overall.count,
            "by_resource": {family: snapshot.count for family, snapshot in resources.items()},
        },
        "latency": overall.model_dump(exclude={"count"}),
        "resources": {
            family: snapshot.model_dump(exclude={"count"}) for family, snapshot in resources.items()
        },
        "timestamp": _now(),
    }


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check(store: DataStore = Depends(get_store)) -> Dict[str, Any]:
    """
    Readiness probe.

    Ready once the dataset has been loaded (an empty dataset is still ready).

    Returns:
        Readiness status
    """
    return {"status": "ready", "collections": store.stats(), "timestamp": _now()}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> Dict[str, str]:
    """
    Liveness probe.

    Returns:
        Liveness status
    """
    return {"status": "alive", "timestamp": _now()}
