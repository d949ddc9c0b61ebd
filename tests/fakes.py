"""Fake OpenAI clients shaped like the SDK objects the services touch."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock


def completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like a chat completion response."""

    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def fake_chat_client(*results) -> tuple[SimpleNamespace, AsyncMock]:
    """Return a client whose ``chat.completions.create`` yields ``results`` in order."""

    create = AsyncMock(side_effect=list(results))
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client, create


def fake_audio_client(result=None, error: Exception | None = None) -> tuple[SimpleNamespace, AsyncMock]:
    """Return a client whose ``audio.transcriptions.create`` returns or raises."""

    create = AsyncMock(side_effect=error, return_value=result)
    client = SimpleNamespace(audio=SimpleNamespace(transcriptions=SimpleNamespace(create=create)))
    return client, create
