"""Audio transcription endpoint.

For a stage-by-stage map see `voicescribe.pipelines.audio.flow.TranscriptionFlow`.
The POST `/api/transcribe` pipeline performs:

1. Validation of the multipart `file` field.
2. Transcription of the recording with the configured deployment.
3. Cleanup of the transcript, degrading to the raw text on failure.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from voicescribe.controllers.dependencies import PipelineFactoryDep
from voicescribe.pipelines.audio import TranscriptionFlow, handle_audio, read_audio_upload
from voicescribe.views import response_body

router = APIRouter(prefix="/api", tags=["transcription"])

logger = logging.getLogger(__name__)

PIPELINE_STAGES = tuple(TranscriptionFlow.describe())
"""Ordered pipeline metadata used for quick reference and debugging."""


@router.post("/transcribe")
async def transcribe(request: Request, pipeline_factory: PipelineFactoryDep) -> JSONResponse:
    """Transcribe an uploaded audio file and return the cleaned text."""

    form = await request.form()
    audio = await read_audio_upload(form.get("file"))
    response = await handle_audio(audio, pipeline_factory)

    logger.info("Transcription request finished status=%s", response.status_code)
    return JSONResponse(response_body(response), status_code=response.status_code)
