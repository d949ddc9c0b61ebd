"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from voicescribe.pipelines.audio import PipelineFactory, TranscriptionPipeline
from voicescribe.services import create_text_cleaning_service, create_transcribe_service


@lru_cache(maxsize=1)
def get_transcription_pipeline() -> TranscriptionPipeline:
    """Build the process-wide pipeline on first use.

    Raises ``ConfigurationError`` when credentials are missing; the failure
    is not cached, so fixing the environment and retrying works.
    """

    return TranscriptionPipeline(
        transcriber=create_transcribe_service(),
        cleaner=create_text_cleaning_service(),
    )


def get_pipeline_factory() -> PipelineFactory:
    return get_transcription_pipeline


PipelineFactoryDep = Annotated[PipelineFactory, Depends(get_pipeline_factory)]


__all__ = ["get_pipeline_factory", "get_transcription_pipeline", "PipelineFactoryDep"]
