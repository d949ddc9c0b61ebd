"""Transcript cleanup through a chat completion, with retries and timeouts."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from openai import AsyncOpenAI

from voicescribe.config.settings import settings
from voicescribe.services.cleaning_outcome import (
    TextCleaningResponse,
    describe_failure,
    failure_response,
    success_response,
)
from voicescribe.services.errors import (
    CleanupFailure,
    TextValidationError,
    UpstreamAPIError,
    UpstreamError,
    UpstreamTimeoutError,
)
from voicescribe.services.openai_factory import ClientKind, create_openai_client
from voicescribe.telemetry import record_cleaning_attempt

logger = logging.getLogger("voicescribe.pipeline")

Sleep = Callable[[float], Awaitable[Any]]

MIN_RESPONSE_TOKENS = 1000

CLEANING_PROMPT = """Please clean and improve the following transcribed text. Make it more readable by:
- Fixing grammar and punctuation
- Removing filler words (um, uh, like, you know)
- Removing repetitions and false starts
- Creating proper paragraph breaks
- Ensuring consistent capitalization

Preserve the original meaning and don't add any new information. Return only the cleaned text.

Text to clean:
"""


@dataclass(frozen=True)
class TextCleaningOptions:
    """Per-service cleanup settings; fixed for the lifetime of the service."""

    timeout_ms: int = 30000
    max_retries: int = 1
    model: str = "gpt-5"
    temperature: float = 0.1

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")

    @classmethod
    def from_settings(cls) -> "TextCleaningOptions":
        return cls(
            timeout_ms=settings.cleaning.timeout_ms,
            max_retries=settings.cleaning.max_retries,
            model=settings.cleaning.model,
            temperature=settings.cleaning.temperature,
        )


def response_token_budget(raw_text: str) -> int:
    """Leave room for a cleaned copy of the text, never below the floor."""

    return max(MIN_RESPONSE_TOKENS, len(raw_text) * 2)


def backoff_seconds(attempt: int) -> float:
    return float(2**attempt)


class TextCleaningService:
    """Clean raw transcripts with a chat model, retrying with backoff."""

    def __init__(
        self,
        client: AsyncOpenAI,
        options: TextCleaningOptions | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._client = client
        self._options = options or TextCleaningOptions()
        self._sleep = sleep

    @property
    def options(self) -> TextCleaningOptions:
        return self._options

    async def clean_text(self, raw_text: str) -> str:
        """Return the cleaned text or raise ``CleanupFailure`` once retries run out."""

        if not raw_text or not raw_text.strip():
            logger.error("Text cleaning validation failed: raw text is empty")
            raise TextValidationError("Raw text cannot be empty")

        total_attempts = self._options.max_retries + 1
        last_error: UpstreamError | None = None

        for attempt in range(total_attempts):
            logger.info(
                "Text cleaning attempt %s/%s",
                attempt + 1,
                total_attempts,
                extra={"attempt": attempt, "chars": len(raw_text)},
            )
            try:
                cleaned_text = await self._perform_cleaning(raw_text)
            except UpstreamError as exc:
                last_error = exc
                logger.warning("Text cleaning attempt %s failed: %s", attempt + 1, exc)
            else:
                if attempt > 0:
                    logger.info("Text cleaning succeeded on retry attempt %s", attempt + 1)
                return cleaned_text

            if attempt < self._options.max_retries:
                delay = backoff_seconds(attempt)
                logger.info("Retrying text cleaning in %.0fms", delay * 1000)
                await self._sleep(delay)

        message = describe_failure(last_error, "Text cleaning failed after all retry attempts")
        logger.error("Text cleaning failed after all retry attempts: %s", message)
        raise CleanupFailure(message) from last_error

    async def clean_text_with_details(self, raw_text: str) -> TextCleaningResponse:
        """Like ``clean_text`` but never raises; failures fall back to ``raw_text``."""

        try:
            cleaned_text = await self.clean_text(raw_text)
        except Exception as exc:
            return failure_response(raw_text, exc)
        return success_response(cleaned_text, raw_text)

    async def _perform_cleaning(self, raw_text: str) -> str:
        timeout_ms = self._options.timeout_ms
        deadline = asyncio.timeout(timeout_ms / 1000)
        try:
            async with deadline:
                response = await self._client.chat.completions.create(
                    model=self._options.model,
                    messages=[
                        {
                            "role": "user",
                            "content": f"{CLEANING_PROMPT}\n\n{raw_text}",
                        }
                    ],
                    temperature=self._options.temperature,
                    max_tokens=response_token_budget(raw_text),
                )
        except Exception as exc:
            # Only this attempt's own deadline counts as a timeout.
            if isinstance(exc, TimeoutError) and deadline.expired():
                record_cleaning_attempt("timeout")
                logger.warning("Text cleaning timeout triggered after %sms", timeout_ms)
                raise UpstreamTimeoutError(f"Text cleaning timeout after {timeout_ms}ms") from exc
            record_cleaning_attempt("api_error")
            message = describe_failure(exc, "Unknown error during text cleaning")
            logger.error("OpenAI API error during text cleaning: %s", message)
            raise UpstreamAPIError(message) from exc

        cleaned_text = _first_choice_text(response)
        if not cleaned_text:
            record_cleaning_attempt("api_error")
            raise UpstreamAPIError("No cleaned text received from the cleanup model")

        record_cleaning_attempt("success")
        return cleaned_text


def _first_choice_text(response: Any) -> str | None:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return None
    return content.strip() or None


def create_text_cleaning_service(
    options: TextCleaningOptions | None = None,
    client: AsyncOpenAI | None = None,
) -> TextCleaningService:
    """Build a cleanup service wired to the configured cleanup deployment."""

    return TextCleaningService(
        client or create_openai_client(ClientKind.CLEANUP),
        options or TextCleaningOptions.from_settings(),
    )


__all__ = [
    "CLEANING_PROMPT",
    "TextCleaningOptions",
    "TextCleaningService",
    "backoff_seconds",
    "create_text_cleaning_service",
    "response_token_budget",
]
