"""Transcribe → clean composition and response shaping (Stage 4).

Transcription failures end the request with an error response. Cleanup
failures never do: the caller gets the raw transcription back together with
the reason cleanup failed.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from voicescribe.services.cleaning_outcome import DEFAULT_FAILURE_MESSAGE, describe_failure
from voicescribe.services.errors import ConfigurationError
from voicescribe.services.transcribe import AudioUpload
from voicescribe.telemetry import record_pipeline_response
from voicescribe.views import (
    TranscriptionErrorResponse,
    TranscriptionFallbackResponse,
    TranscriptionResponse,
    TranscriptionSuccessResponse,
)

logger = logging.getLogger("voicescribe.pipeline")

NO_FILE_MESSAGE = "No file uploaded"
NOT_CONFIGURED_MESSAGE = "Transcription service is not configured"
SERVER_ERROR_MESSAGE = "Server error"


class Transcriber(Protocol):
    async def transcribe(self, audio: AudioUpload) -> str: ...


class TextCleaner(Protocol):
    async def clean_text(self, raw_text: str) -> str: ...


class TranscriptionPipeline:
    """Run transcription followed by cleanup for one uploaded file."""

    def __init__(self, transcriber: Transcriber, cleaner: TextCleaner) -> None:
        self._transcriber = transcriber
        self._cleaner = cleaner

    async def run(self, audio: AudioUpload) -> TranscriptionResponse:
        try:
            original_text = await self._transcriber.transcribe(audio)
        except Exception as exc:
            logger.exception("Transcription error for %s", audio.filename)
            return _error(describe_failure(exc, SERVER_ERROR_MESSAGE), 500)

        logger.info("Starting text cleaning process...")
        try:
            cleaned_text = await self._cleaner.clean_text(original_text)
        except Exception as exc:
            message = describe_failure(exc, DEFAULT_FAILURE_MESSAGE)
            logger.warning("Text cleaning failed, returning original text: %s", message)
            record_pipeline_response("fallback")
            return TranscriptionFallbackResponse(text=original_text, cleaning_error=message)

        record_pipeline_response("success")
        return TranscriptionSuccessResponse(text=cleaned_text, original_text=original_text)


PipelineFactory = Callable[[], TranscriptionPipeline]


async def handle_audio(
    audio: AudioUpload | None,
    pipeline_factory: PipelineFactory,
) -> TranscriptionResponse:
    """Validate the upload, resolve the configured pipeline and run it."""

    if audio is None:
        return _error(NO_FILE_MESSAGE, 400)

    try:
        pipeline = pipeline_factory()
    except ConfigurationError as exc:
        logger.error("Upstream clients are not configured: %s", exc)
        return _error(NOT_CONFIGURED_MESSAGE, 500)

    return await pipeline.run(audio)


def _error(message: str, status_code: int) -> TranscriptionErrorResponse:
    record_pipeline_response("error")
    return TranscriptionErrorResponse(error=message, status_code=status_code)


__all__ = [
    "NO_FILE_MESSAGE",
    "NOT_CONFIGURED_MESSAGE",
    "PipelineFactory",
    "TextCleaner",
    "Transcriber",
    "TranscriptionPipeline",
    "handle_audio",
]
