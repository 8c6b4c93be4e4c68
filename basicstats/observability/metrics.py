"""Prometheus metrics & middleware for the statistics service.

Collects per-endpoint request count and latency plus per-computation outcomes,
and exposes them on /metrics for Prometheus.
"""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
import time

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "basicstats_request_total"
REQUEST_LATENCY_NAME = "basicstats_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "basicstats_request_errors_total"
COMPUTATION_COUNT_NAME = "basicstats_computations_total"
SAMPLE_SIZE_NAME = "basicstats_sample_size"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# REQUEST_COUNT: Counter for total HTTP requests, labeled by path, method, and status code.
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

# REQUEST_LATENCY: Histogram for request duration (seconds), labeled by path and method.
REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

# REQUEST_ERROR_COUNT: Counter for error responses (status >= 400)
REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# COMPUTATION_COUNT: one increment per /stats run; outcome is "ok" or the error class name.
COMPUTATION_COUNT = Counter(
    name=COMPUTATION_COUNT_NAME,
    documentation="Statistics computations by outcome",
    labelnames=["outcome"],
)

# SAMPLE_SIZE: number of values per request. Buckets follow the buffer's doubling law.
SAMPLE_SIZE = Histogram(
    name=SAMPLE_SIZE_NAME,
    documentation="Number of values submitted per computation",
    buckets=(20, 40, 80, 160, 320, 640, 1280, 2560, 5120, 10240, float("inf")),
)

# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Wraps every HTTP request: records the start time, and on response start
# increments the request counters and observes the latency.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # Only instrument HTTP requests (not websockets, lifespan, etc.)
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                # Route template when matched, raw path otherwise
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)

# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    # Plaintext exposition format for Prometheus scraping
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
