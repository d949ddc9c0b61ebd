"""Pydantic schemas used as views in the MVC architecture."""

from .transcription import (
    TranscriptionErrorResponse,
    TranscriptionFallbackResponse,
    TranscriptionResponse,
    TranscriptionSuccessResponse,
    is_error_response,
    is_fallback_response,
    is_success_response,
    response_body,
)

__all__ = [
    "TranscriptionErrorResponse",
    "TranscriptionFallbackResponse",
    "TranscriptionResponse",
    "TranscriptionSuccessResponse",
    "is_error_response",
    "is_fallback_response",
    "is_success_response",
    "response_body",
]
