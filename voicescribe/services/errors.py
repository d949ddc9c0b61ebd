"""Exception hierarchy shared by the transcription and cleanup services."""

from __future__ import annotations


class VoicescribeError(RuntimeError):
    """Base class for errors raised by the voicescribe service layer."""


class ConfigurationError(VoicescribeError):
    """Raised when no usable upstream credentials are configured."""


class TextValidationError(ValueError, VoicescribeError):
    """Raised when the text handed to the cleanup stage is empty."""


class UpstreamError(VoicescribeError):
    """Raised when a single upstream cleanup attempt fails."""


class UpstreamTimeoutError(UpstreamError):
    """Raised when a cleanup attempt exceeds its deadline."""


class UpstreamAPIError(UpstreamError):
    """Raised when the upstream API rejects or fails a cleanup attempt."""


class TranscriptionError(VoicescribeError):
    """Raised when the speech-to-text call fails."""


class CleanupFailure(VoicescribeError):
    """Raised when every cleanup attempt has been exhausted."""


__all__ = [
    "VoicescribeError",
    "ConfigurationError",
    "TextValidationError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamAPIError",
    "TranscriptionError",
    "CleanupFailure",
]
