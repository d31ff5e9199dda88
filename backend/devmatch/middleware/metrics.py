"""
Prometheus Metrics Middleware

Provides request/response metrics for monitoring:
- HTTP request latency (p50, p95, p99)
- Request count by endpoint and status
- Active request gauge
- Feed ranking latency, swipes and matches created

Usage:
    from devmatch.middleware.metrics import setup_metrics

    # In main.py
    app = FastAPI()
    setup_metrics(app)

Metrics Endpoint:
    GET /metrics - Prometheus-format metrics
"""

import time
import logging
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    CONTENT_TYPE_LATEST,
    generate_latest,
    REGISTRY,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

logger = logging.getLogger(__name__)

# ==================== Prometheus Metrics ====================

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of active HTTP requests",
    ["method", "endpoint"]
)

# Feed ranking over one candidate batch
MATCH_SCORE_LATENCY = Histogram(
    "match_score_calculation_seconds",
    "Time to score and rank a candidate batch",
    buckets=[0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1]
)

SWIPES_TOTAL = Counter(
    "swipes_total",
    "Total swipes recorded",
    ["liked"]
)

MATCHES_CREATED = Counter(
    "matches_created_total",
    "Total mutual-like matches created"
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for Prometheus metrics collection.

    Records:
    - Request latency
    - Request count by status code
    - Active request count
    """

    def __init__(self, app: FastAPI, app_name: str = "devmatch"):
        super().__init__(app)
        self.app_name = app_name

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """Process request and record metrics."""
        method = request.method
        endpoint = self._get_endpoint(request)

        if endpoint == "/metrics":
            return await call_next(request)

        active = ACTIVE_REQUESTS.labels(method=method, endpoint=endpoint)
        active.inc()
        start_time = time.perf_counter()
        status = "500"

        try:
            response = await call_next(request)
            status = str(response.status_code)
            return response
        except Exception:
            logger.exception(f"Unhandled error on {method} {endpoint}")
            raise
        finally:
            # The router records the matched route in the scope once it has run
            labels = {"method": method, "endpoint": self._get_endpoint(request)}
            REQUEST_LATENCY.labels(status=status, **labels).observe(time.perf_counter() - start_time)
            REQUEST_COUNT.labels(status=status, **labels).inc()
            active.dec()

    def _get_endpoint(self, request: Request) -> str:
        """
        Get normalized endpoint path from request.

        Uses route pattern (e.g., /messages/{id}) instead of
        actual path to avoid high cardinality.
        """
        path = getattr(request.scope.get("route"), "path", None)
        if path:
            return path

        for route in request.app.routes:
            path = getattr(route, "path", None)
            if path is None:
                continue
            match, _ = route.matches(request.scope)
            if match == Match.FULL:
                return path

        return request.url.path


def metrics_endpoint(request: Request) -> Response:
    """Prometheus scrape endpoint (text exposition format)."""
    return PlainTextResponse(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )


def setup_metrics(app: FastAPI) -> None:
    """
    Configure Prometheus metrics for FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(PrometheusMiddleware, app_name="devmatch")
    app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    logger.info("Prometheus metrics configured")


# ==================== Helper Functions ====================

def record_match_score_latency(duration: float) -> None:
    """Record feed ranking latency."""
    MATCH_SCORE_LATENCY.observe(duration)


def record_swipe(liked: bool) -> None:
    SWIPES_TOTAL.labels(liked=str(liked).lower()).inc()


def record_match_created() -> None:
    MATCHES_CREATED.inc()
