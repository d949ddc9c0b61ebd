"""Integration-style tests for the /api/transcribe endpoint."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from fakes import completion, fake_audio_client, fake_chat_client
from voicescribe.config.settings import CleanupCredentials, TranscriptionCredentials, settings
from voicescribe.controllers.dependencies import get_pipeline_factory, get_transcription_pipeline
from voicescribe.main import app
from voicescribe.pipelines.audio import NOT_CONFIGURED_MESSAGE, TranscriptionPipeline
from voicescribe.services import TextCleaningOptions, TextCleaningService, TranscribeService

UPLOAD = {"file": ("clip.mp3", b"fake-audio", "audio/mpeg")}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use_pipeline(transcription_client, chat_client, sleep, max_retries: int = 1) -> None:
    pipeline = TranscriptionPipeline(
        TranscribeService(transcription_client, model="gpt-4o-transcribe"),
        TextCleaningService(
            chat_client,
            TextCleaningOptions(max_retries=max_retries),
            sleep=sleep,
        ),
    )
    app.dependency_overrides[get_pipeline_factory] = lambda: (lambda: pipeline)


def test_upload_returns_cleaned_text(client, no_sleep):
    audio_client, transcribe_create = fake_audio_client(result={"text": "um, hello there"})
    chat_client, chat_create = fake_chat_client(completion("Hello there.\n"))
    _use_pipeline(audio_client, chat_client, no_sleep)

    response = client.post("/api/transcribe", files=UPLOAD)

    assert response.status_code == 200
    assert response.json() == {"text": "Hello there.", "originalText": "um, hello there"}
    transcribe_create.assert_awaited_once()
    assert chat_create.await_count == 1


def test_cleanup_failure_returns_original_text(client, no_sleep):
    audio_client, _ = fake_audio_client(result={"text": "test"})
    chat_client, chat_create = fake_chat_client(
        RuntimeError("rate limit"), RuntimeError("rate limit")
    )
    _use_pipeline(audio_client, chat_client, no_sleep, max_retries=1)

    response = client.post("/api/transcribe", files=UPLOAD)

    assert response.status_code == 200
    assert response.json() == {"text": "test", "cleaningError": "rate limit"}
    assert chat_create.await_count == 2
    assert no_sleep.await_count == 1


def test_missing_file_is_rejected_without_upstream_calls(client):
    factory = MagicMock()
    app.dependency_overrides[get_pipeline_factory] = lambda: factory

    response = client.post("/api/transcribe", data={"note": "no audio here"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}
    factory.assert_not_called()


def test_non_file_field_is_rejected(client):
    factory = MagicMock()
    app.dependency_overrides[get_pipeline_factory] = lambda: factory

    response = client.post("/api/transcribe", data={"file": "not-a-file"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}
    factory.assert_not_called()


def test_transcription_failure_returns_500_and_skips_cleanup(client, no_sleep):
    audio_client, _ = fake_audio_client(error=RuntimeError("Invalid file format."))
    chat_client, chat_create = fake_chat_client()
    _use_pipeline(audio_client, chat_client, no_sleep)

    response = client.post("/api/transcribe", files=UPLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid file format."}
    assert chat_create.await_count == 0


def test_transcription_without_text_passes_serialized_result(client, no_sleep):
    audio_client, _ = fake_audio_client(result={"segments": []})
    chat_client, chat_create = fake_chat_client(completion("Cleaned."))
    _use_pipeline(audio_client, chat_client, no_sleep)

    response = client.post("/api/transcribe", files=UPLOAD)

    assert response.json() == {"text": "Cleaned.", "originalText": '{"segments": []}'}
    assert chat_create.await_args.kwargs["messages"][0]["content"].endswith('{"segments": []}')


def test_missing_credentials_return_configuration_error(client, monkeypatch):
    monkeypatch.setattr(settings, "transcription_credentials", TranscriptionCredentials(_env_file=None))
    monkeypatch.setattr(settings, "cleanup_credentials", CleanupCredentials(_env_file=None))
    get_transcription_pipeline.cache_clear()

    try:
        response = client.post("/api/transcribe", files=UPLOAD)
    finally:
        get_transcription_pipeline.cache_clear()

    assert response.status_code == 500
    assert response.json() == {"error": NOT_CONFIGURED_MESSAGE}


def test_pipeline_is_built_once_from_settings(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(settings, "transcription_credentials", TranscriptionCredentials(_env_file=None))
    monkeypatch.setattr(settings, "cleanup_credentials", CleanupCredentials(_env_file=None))
    get_transcription_pipeline.cache_clear()

    try:
        first = get_transcription_pipeline()
        second = get_transcription_pipeline()
    finally:
        get_transcription_pipeline.cache_clear()

    assert isinstance(first, TranscriptionPipeline)
    assert first is second


def test_health_and_metrics(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "text_cleaning_attempts_total" in metrics.text


def test_root_lists_pipeline_stages(client):
    payload = client.get("/").json()

    assert payload["pipeline"] == ["Ingestion", "Transcription", "Cleaning", "Response"]


def test_unknown_route_uses_error_shape(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
