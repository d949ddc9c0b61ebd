"""Transcription pipeline package.

Modules are organised by the order in which `/api/transcribe` executes:

1. `ingestion` – turn the multipart upload into an `AudioUpload`.
2. `composer` – transcribe, clean and shape the response.
3. `flow` – human-readable description of the end-to-end stages.
"""

from .composer import (
    NO_FILE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    PipelineFactory,
    TranscriptionPipeline,
    handle_audio,
)
from .flow import PipelineStage, TranscriptionFlow
from .ingestion import read_audio_upload, resolve_content_type

__all__ = [
    "NO_FILE_MESSAGE",
    "NOT_CONFIGURED_MESSAGE",
    "PipelineFactory",
    "PipelineStage",
    "TranscriptionFlow",
    "TranscriptionPipeline",
    "handle_audio",
    "read_audio_upload",
    "resolve_content_type",
]
