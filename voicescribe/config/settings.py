from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AZURE_API_VERSION = "2024-06-01"


class CapabilityCredentials(BaseSettings):
    """Credentials for one upstream capability (transcription or cleanup).

    Subclasses only change the environment variable names, so both
    capabilities share the same profile resolution logic.
    """

    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias="OPENAI_API_KEY",
    )
    azure_endpoint: Optional[str] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_ENDPOINT",
    )
    azure_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_API_KEY",
    )
    azure_deployment: Optional[str] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_DEPLOYMENT",
    )
    azure_api_version: Optional[str] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_API_VERSION",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class TranscriptionCredentials(CapabilityCredentials):
    """Audio transcription deployment (e.g. gpt-4o-transcribe)."""


class CleanupCredentials(CapabilityCredentials):
    """Chat deployment used to clean transcripts (e.g. gpt-5)."""

    azure_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_LLM_API_KEY",
    )
    azure_deployment: Optional[str] = Field(
        default=None,
        validation_alias="AZURE_OPENAI_LLM_DEPLOYMENT",
    )


class TranscriptionConfig(BaseSettings):
    """Speech-to-text call configuration."""

    model: str = "gpt-4o-transcribe"

    model_config = SettingsConfigDict(
        env_prefix="TRANSCRIPTION_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class CleaningConfig(BaseSettings):
    """Transcript cleanup (chat completion) configuration."""

    model: str = "gpt-5"
    timeout_ms: int = Field(default=30000, ge=1)
    max_retries: int = Field(default=1, ge=0, le=10)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)

    model_config = SettingsConfigDict(
        env_prefix="CLEANING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Voicescribe API"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/pipeline.log"

    # Upstream credentials
    transcription_credentials: TranscriptionCredentials = Field(
        default_factory=TranscriptionCredentials
    )
    cleanup_credentials: CleanupCredentials = Field(default_factory=CleanupCredentials)

    # Pipeline stages
    transcription: TranscriptionConfig = Field(default_factory=TranscriptionConfig)
    cleaning: CleaningConfig = Field(default_factory=CleaningConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
