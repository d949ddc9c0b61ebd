"""Service layer helpers for the upstream OpenAI integrations."""

from .cleaning_outcome import CleaningResult, TextCleaningResponse
from .errors import (
    CleanupFailure,
    ConfigurationError,
    TextValidationError,
    TranscriptionError,
    UpstreamAPIError,
    UpstreamError,
    UpstreamTimeoutError,
    VoicescribeError,
)
from .openai_factory import ClientKind, ConfigurationProfile, create_openai_client
from .text_cleaning import (
    TextCleaningOptions,
    TextCleaningService,
    create_text_cleaning_service,
)
from .transcribe import AudioUpload, TranscribeService, create_transcribe_service

__all__ = [
    "AudioUpload",
    "ClientKind",
    "CleaningResult",
    "CleanupFailure",
    "ConfigurationError",
    "ConfigurationProfile",
    "TextCleaningOptions",
    "TextCleaningResponse",
    "TextCleaningService",
    "TextValidationError",
    "TranscribeService",
    "TranscriptionError",
    "UpstreamAPIError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "VoicescribeError",
    "create_openai_client",
    "create_text_cleaning_service",
    "create_transcribe_service",
]
