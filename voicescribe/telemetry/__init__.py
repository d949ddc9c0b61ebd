"""Telemetry helpers and metrics."""

from .metrics import (
    CLEANING_ATTEMPTS,
    CLEANING_RESULTS,
    ERROR_COUNTER,
    PIPELINE_RESPONSES,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    record_cleaning_attempt,
    record_cleaning_result,
    record_pipeline_response,
)

__all__ = [
    "CLEANING_ATTEMPTS",
    "CLEANING_RESULTS",
    "ERROR_COUNTER",
    "PIPELINE_RESPONSES",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "record_cleaning_attempt",
    "record_cleaning_result",
    "record_pipeline_response",
]
