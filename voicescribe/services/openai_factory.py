"""OpenAI / Azure OpenAI client construction for each pipeline capability."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from openai import AsyncAzureOpenAI, AsyncOpenAI
from pydantic import SecretStr

from voicescribe.config.settings import (
    DEFAULT_AZURE_API_VERSION,
    CapabilityCredentials,
    CleanupCredentials,
    TranscriptionCredentials,
    settings,
)
from voicescribe.services.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ClientKind(str, Enum):
    """Upstream capabilities that get their own client."""

    TRANSCRIPTION = "transcription"
    CLEANUP = "cleanup"


@dataclass(frozen=True)
class ConfigurationProfile:
    """Resolved client configuration; immutable once built."""

    use_primary: bool
    credential: str
    endpoint_base: str | None = None
    deployment_name: str | None = None
    api_version: str = DEFAULT_AZURE_API_VERSION

    @property
    def provider(self) -> str:
        return "openai" if self.use_primary else "azure"


def _clean(value: str | SecretStr | None) -> str | None:
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_profile(credentials: CapabilityCredentials) -> ConfigurationProfile:
    """Pick the Azure profile only when endpoint, key and deployment are all set."""

    endpoint = _clean(credentials.azure_endpoint)
    azure_key = _clean(credentials.azure_api_key)
    deployment = _clean(credentials.azure_deployment)

    if endpoint and azure_key and deployment:
        return ConfigurationProfile(
            use_primary=False,
            credential=azure_key,
            endpoint_base=endpoint.rstrip("/"),
            deployment_name=deployment,
            api_version=_clean(credentials.azure_api_version) or DEFAULT_AZURE_API_VERSION,
        )

    api_key = _clean(credentials.openai_api_key)
    if not api_key:
        raise ConfigurationError(
            "Invalid Setting: configure OPENAI_API_KEY or a complete Azure OpenAI deployment"
        )
    return ConfigurationProfile(use_primary=True, credential=api_key)


def build_client(profile: ConfigurationProfile) -> AsyncOpenAI:
    """Instantiate the SDK client described by ``profile`` (no network I/O).

    SDK-level retries are disabled; callers own the retry policy.
    """

    if profile.use_primary:
        return AsyncOpenAI(api_key=profile.credential, max_retries=0)

    return AsyncAzureOpenAI(
        api_key=profile.credential,
        azure_endpoint=profile.endpoint_base,
        azure_deployment=profile.deployment_name,
        api_version=profile.api_version,
        max_retries=0,
    )


def credentials_for(kind: ClientKind) -> CapabilityCredentials:
    if kind is ClientKind.TRANSCRIPTION:
        return settings.transcription_credentials
    return settings.cleanup_credentials


def create_openai_client(
    kind: ClientKind,
    credentials: CapabilityCredentials | None = None,
) -> AsyncOpenAI:
    """Resolve the profile for ``kind`` and return a configured async client."""

    profile = resolve_profile(credentials or credentials_for(kind))
    logger.info(
        "Configured %s client provider=%s deployment=%s",
        kind.value,
        profile.provider,
        profile.deployment_name or "-",
    )
    return build_client(profile)


__all__ = [
    "ClientKind",
    "ConfigurationProfile",
    "CleanupCredentials",
    "TranscriptionCredentials",
    "build_client",
    "create_openai_client",
    "credentials_for",
    "resolve_profile",
]
