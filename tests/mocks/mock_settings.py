"""Shared mock Settings factory and real Settings factory."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

from pydantic import SecretStr

if TYPE_CHECKING:
    from job_parser_core.config.settings import Settings


def make_settings(**overrides: object) -> MagicMock:
    """Create a mock Settings with sensible defaults.

    Parser, client, and API code rely on these fields. Override any
    attribute via keyword arguments.
    """
    settings = MagicMock()
    settings.llm_api_key = SecretStr("gsk-test")
    settings.llm_api_url = "https://llm.test/v1/chat/completions"
    settings.llm_model = "llama3-8b-8192"
    settings.llm_temperature = 0.7
    settings.llm_json_response_format = True
    settings.llm_timeout_seconds = 5.0
    settings.fetch_timeout_seconds = 5.0
    settings.max_text_length = 8000
    settings.host = "127.0.0.1"
    settings.port = 3000
    settings.cors_origins = ["*"]
    settings.log_level = "INFO"
    settings.log_format = "console"

    for key, value in overrides.items():
        setattr(settings, key, value)

    return settings


def make_real_settings(**overrides: object) -> Settings:
    """Create a real Settings instance pointing at a fake LLM endpoint."""
    from job_parser_core.config.settings import Settings as _Settings

    defaults: dict[str, object] = {
        "llm_api_key": "gsk-test",
        "llm_api_url": "https://llm.test/v1/chat/completions",
        "llm_timeout_seconds": 5.0,
        "fetch_timeout_seconds": 5.0,
    }
    defaults.update(overrides)
    return _Settings(**defaults)  # type: ignore[arg-type]
