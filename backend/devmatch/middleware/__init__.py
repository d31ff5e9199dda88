"""
Middleware Package

Contains FastAPI middleware for:
- Prometheus metrics collection
- Request latency monitoring
"""

from devmatch.middleware.metrics import (
    PrometheusMiddleware,
    setup_metrics,
    REQUEST_LATENCY,
    REQUEST_COUNT,
    ACTIVE_REQUESTS,
    MATCH_SCORE_LATENCY,
    SWIPES_TOTAL,
    MATCHES_CREATED,
)

__all__ = [
    "PrometheusMiddleware",
    "setup_metrics",
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "MATCH_SCORE_LATENCY",
    "SWIPES_TOTAL",
    "MATCHES_CREATED",
]
