"""Integration test fixtures: real app and settings, faked HTTP upstreams."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from job_parser_core.config.settings import Settings
from job_parser_service.api.app import create_app
from tests.mocks.mock_llm import ACME_CONTENT, make_completion, make_http_client, make_response
from tests.mocks.mock_pages import LINKEDIN_PAGE
from tests.mocks.mock_settings import make_real_settings

JOB_URL = "https://www.linkedin.com/jobs/view/123456"


@pytest.fixture
def real_settings() -> Settings:
    """Real Settings pointing at a fake completion endpoint."""
    return make_real_settings()


@pytest.fixture
def fake_upstreams() -> Generator[AsyncMock, None, None]:
    """Patch httpx.AsyncClient so GET serves a job page and POST a completion."""
    mock_http = make_http_client()
    mock_http.get.return_value = make_response(200, text=LINKEDIN_PAGE, method="GET", url=JOB_URL)
    mock_http.post.return_value = make_response(200, json_body=make_completion(ACME_CONTENT))
    with patch("httpx.AsyncClient", return_value=mock_http):
        yield mock_http


@pytest.fixture
def api_client(real_settings: Settings) -> TestClient:
    """TestClient over the fully wired application."""
    return TestClient(create_app(real_settings))
