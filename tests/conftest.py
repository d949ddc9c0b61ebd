"""Shared fixtures for the voicescribe test-suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

CREDENTIAL_ENV_VARS = (
    "OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_DEPLOYMENT",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_LLM_API_KEY",
    "AZURE_OPENAI_LLM_DEPLOYMENT",
)


@pytest.fixture(autouse=True)
def clean_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials from the developer's shell out of the tests."""

    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Stand-in for ``asyncio.sleep`` that records backoff delays."""

    return AsyncMock(return_value=None)
