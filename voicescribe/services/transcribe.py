"""OpenAI speech-to-text integration (single pass-through call)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from openai import AsyncOpenAI

from voicescribe.config.settings import settings
from voicescribe.services.errors import TranscriptionError
from voicescribe.services.openai_factory import ClientKind, create_openai_client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AudioUpload:
    """Uploaded audio payload handed to the transcription stage."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


def extract_transcript_text(result: Any) -> str:
    """Return ``result.text``, or the whole result serialized as JSON when absent."""

    text = result.get("text") if isinstance(result, dict) else getattr(result, "text", None)
    if isinstance(text, str) and text:
        return text

    if hasattr(result, "model_dump_json"):
        return result.model_dump_json()
    return json.dumps(result, default=str)


class TranscribeService:
    """Facade over ``audio.transcriptions.create``."""

    def __init__(self, client: AsyncOpenAI, model: str | None = None) -> None:
        self._client = client
        self._model = model or settings.transcription.model

    @property
    def model(self) -> str:
        return self._model

    async def transcribe(self, audio: AudioUpload) -> str:
        """Send ``audio`` to the transcription model and return its text."""

        logger.info(
            "Sending %s bytes (%s) to %s",
            len(audio.content),
            audio.filename,
            self._model,
        )
        try:
            result = await self._client.audio.transcriptions.create(
                file=(audio.filename, audio.content, audio.content_type),
                model=self._model,
            )
        except Exception as exc:
            message = str(exc).strip() or "Server error"
            raise TranscriptionError(message) from exc

        text = extract_transcript_text(result)
        logger.info("Transcription complete. Length: %s", len(text))
        return text


def create_transcribe_service(client: AsyncOpenAI | None = None) -> TranscribeService:
    """Build a transcription service wired to the configured deployment."""

    return TranscribeService(client or create_openai_client(ClientKind.TRANSCRIPTION))


__all__ = [
    "AudioUpload",
    "TranscribeService",
    "create_transcribe_service",
    "extract_transcript_text",
]
