"""High-level orchestration map for the transcription pipeline.

``voicescribe.pipelines.audio.composer`` holds the code that ties the stages
together; this module documents the canonical execution order:

1. ``ingestion`` – pull the ``file`` form field into memory.
2. ``transcription`` – call the configured speech-to-text deployment.
3. ``cleaning`` – rewrite the transcript with the chat deployment, retrying
   with backoff and falling back to the raw transcript on failure.
4. ``response`` – shape the result as success, fallback or error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in the transcription pipeline."""

    order: int
    name: str
    module: str
    summary: str


class TranscriptionFlow:
    """Utility wrapper for documenting the `/api/transcribe` flow."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Ingestion",
            "voicescribe.pipelines.audio.ingestion",
            "Read the multipart `file` field; missing or empty uploads end with a 400.",
        ),
        PipelineStage(
            2,
            "Transcription",
            "voicescribe.services.transcribe",
            "Forward the audio to the OpenAI / Azure OpenAI transcription deployment.",
        ),
        PipelineStage(
            3,
            "Cleaning",
            "voicescribe.services.text_cleaning",
            "Polish the transcript with the chat deployment (timeout, retries, backoff).",
        ),
        PipelineStage(
            4,
            "Response",
            "voicescribe.pipelines.audio.composer",
            "Return cleaned text, or the raw transcript plus the cleanup error.",
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["TranscriptionFlow", "PipelineStage"]
