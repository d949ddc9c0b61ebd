"""Request ingestion helpers (Stage 1 of the transcription pipeline)."""

from __future__ import annotations

import mimetypes
from typing import Any

from starlette.datastructures import UploadFile

from voicescribe.services.transcribe import AudioUpload

_DEFAULT_FILENAME = "audio"


def resolve_content_type(upload: UploadFile) -> str:
    """Use the client-supplied content type, guessing from the filename otherwise."""

    content_type = upload.content_type
    if not content_type and upload.filename:
        guessed_type, _ = mimetypes.guess_type(upload.filename)
        content_type = guessed_type
    return content_type or "application/octet-stream"


async def read_audio_upload(form_value: Any) -> AudioUpload | None:
    """Load the ``file`` form field into memory.

    Returns ``None`` when the field is missing, is not a file, or is empty.
    """

    if not isinstance(form_value, UploadFile):
        return None

    try:
        content = await form_value.read()
    finally:
        await form_value.close()
    if not content:
        return None

    return AudioUpload(
        filename=form_value.filename or _DEFAULT_FILENAME,
        content=content,
        content_type=resolve_content_type(form_value),
    )


__all__ = ["read_audio_upload", "resolve_content_type"]
