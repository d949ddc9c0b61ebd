"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
        30.0,
        60.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

CLEANING_ATTEMPTS = Counter(
    "text_cleaning_attempts_total",
    "Upstream text cleaning attempts by status",
    ("status",),
)

CLEANING_RESULTS = Counter(
    "text_cleaning_results_total",
    "Classified text cleaning outcomes",
    ("result",),
)

PIPELINE_RESPONSES = Counter(
    "transcription_pipeline_responses_total",
    "Transcription pipeline responses by shape",
    ("shape",),
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


def record_cleaning_attempt(status: str) -> None:
    """Count one upstream cleanup attempt (success, timeout or api_error)."""

    CLEANING_ATTEMPTS.labels(status=status).inc()


def record_cleaning_result(result: str) -> None:
    CLEANING_RESULTS.labels(result=result).inc()


def record_pipeline_response(shape: str) -> None:
    PIPELINE_RESPONSES.labels(shape=shape).inc()
