"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from job_parser_core.constants import (
    DEFAULT_LLM_API_URL,
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_TEMPERATURE,
    MAX_TEXT_LENGTH,
    TRUNCATION_MARKER,
)


class Settings(BaseSettings):
    """Central configuration for job-posting-parser."""

    model_config = SettingsConfigDict(
        env_prefix="JP_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # --- LLM ---
    llm_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("JP_LLM_API_KEY", "GROQ_API_KEY"),
        description="API key for the chat-completion provider",
    )
    llm_api_url: str = Field(
        default=DEFAULT_LLM_API_URL,
        description="Chat-completion endpoint URL",
    )
    llm_model: str = Field(
        default=DEFAULT_LLM_MODEL,
        description="Model ID sent with every completion request",
    )
    llm_temperature: float = Field(
        default=DEFAULT_LLM_TEMPERATURE,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    llm_json_response_format: bool = Field(
        default=True,
        description="Send response_format={'type': 'json_object'} with the request",
    )
    llm_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for the completion request in seconds",
    )

    # --- Fetching / extraction ---
    fetch_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for fetching a job page in seconds",
    )
    max_text_length: int = Field(
        default=MAX_TEXT_LENGTH,
        description="Maximum characters of extracted text sent to the LLM",
    )

    # --- HTTP service ---
    host: str = Field(default="0.0.0.0", description="Bind address for the API server")
    port: int = Field(default=3000, description="Port for the API server")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @model_validator(mode="after")
    def validate_text_length(self) -> Settings:
        """Ensure truncated text still has room for content before the marker."""
        if self.max_text_length <= len(TRUNCATION_MARKER):
            msg = f"max_text_length must be greater than {len(TRUNCATION_MARKER)}"
            raise ValueError(msg)
        return self
