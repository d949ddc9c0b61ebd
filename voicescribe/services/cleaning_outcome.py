"""Classification of text cleaning outcomes.

Every failure coming out of the cleanup stage is reduced to a plain message
before any decision is made on it, so callers never branch on the type of
whatever was raised upstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from voicescribe.telemetry import record_cleaning_result

logger = logging.getLogger("voicescribe.pipeline")

DEFAULT_FAILURE_MESSAGE = "Text cleaning failed"


class CleaningResult(str, Enum):
    """Result of a text cleaning operation."""

    SUCCESS = "success"
    TIMEOUT = "timeout"
    API_ERROR = "api_error"
    # Reserved for a manual override path; never produced by classify_failure.
    FALLBACK = "fallback"


@dataclass(frozen=True)
class TextCleaningResponse:
    """Detailed cleanup outcome, including the text to show the user."""

    cleaned_text: str
    result: CleaningResult
    original_text: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is CleaningResult.SUCCESS


def describe_failure(failure: object, default: str = DEFAULT_FAILURE_MESSAGE) -> str:
    """Return a human-readable message for any raised value."""

    if isinstance(failure, BaseException):
        message = str(failure).strip()
        if message:
            return message
    return default


def classify_failure(message: str) -> CleaningResult:
    if "timeout" in message.lower():
        return CleaningResult.TIMEOUT
    return CleaningResult.API_ERROR


def success_response(cleaned_text: str, original_text: str) -> TextCleaningResponse:
    record_cleaning_result(CleaningResult.SUCCESS.value)
    logger.info("Text cleaning completed successfully")
    return TextCleaningResponse(
        cleaned_text=cleaned_text,
        result=CleaningResult.SUCCESS,
        original_text=original_text,
    )


def failure_response(original_text: str, failure: object) -> TextCleaningResponse:
    """Fall back to the original text and keep the reason for diagnostics."""

    message = describe_failure(failure)
    result = classify_failure(message)
    record_cleaning_result(result.value)

    if result is CleaningResult.TIMEOUT:
        logger.warning("Text cleaning failed due to timeout: %s", message)
    else:
        logger.warning("Text cleaning failed with API error: %s", message)
    logger.warning("Falling back to original transcription text due to cleaning failure")

    return TextCleaningResponse(
        cleaned_text=original_text,
        result=result,
        original_text=original_text,
        error=message,
    )


__all__ = [
    "CleaningResult",
    "DEFAULT_FAILURE_MESSAGE",
    "TextCleaningResponse",
    "classify_failure",
    "describe_failure",
    "failure_response",
    "success_response",
]
