"""Response schemas for the transcription endpoint.

Exactly one of the three shapes is returned per request; they are told
apart by which fields are present.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class TranscriptionSuccessResponse(BaseModel):
    """Cleaned text plus the transcription it was produced from."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    original_text: str = Field(alias="originalText")

    @property
    def status_code(self) -> int:
        return 200


class TranscriptionFallbackResponse(BaseModel):
    """Original transcription returned because cleanup failed."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    cleaning_error: str = Field(alias="cleaningError")

    @property
    def status_code(self) -> int:
        return 200


class TranscriptionErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: str
    status_code: int = Field(default=500, exclude=True)


TranscriptionResponse = Union[
    TranscriptionSuccessResponse,
    TranscriptionFallbackResponse,
    TranscriptionErrorResponse,
]


def response_body(response: TranscriptionResponse) -> dict[str, str]:
    """Serialize with the public camelCase field names."""

    return response.model_dump(by_alias=True)


def is_success_response(response: TranscriptionResponse) -> bool:
    body = response_body(response)
    return "originalText" in body and "error" not in body and "cleaningError" not in body


def is_fallback_response(response: TranscriptionResponse) -> bool:
    body = response_body(response)
    return "cleaningError" in body and "error" not in body


def is_error_response(response: TranscriptionResponse) -> bool:
    return "error" in response_body(response)
