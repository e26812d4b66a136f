"""Job posting parser: fetch, extract, prompt, and call the LLM in sequence."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import structlog

from job_parser_core.constants import JOB_POSTING_PROMPT_VERSION, MISSING_INPUT_MESSAGE
from job_parser_core.exceptions import InputError
from job_parser_service.prompts.job_posting import build_job_posting_prompt
from job_parser_service.tools.html_text import TextExtractor
from job_parser_service.tools.llm_client import ChatCompletionClient
from job_parser_service.tools.page_fetcher import PageFetcher

if TYPE_CHECKING:
    from job_parser_core.config.settings import Settings
    from job_parser_core.models.job import ExtractionRequest

logger = structlog.get_logger()


class JobPostingParser:
    """Turn an ExtractionRequest into the LLM's JSON object.

    Collaborators default to instances built from settings and may be
    injected individually.
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: PageFetcher | None = None,
        extractor: TextExtractor | None = None,
        llm: ChatCompletionClient | None = None,
    ) -> None:
        """Initialize with settings and optional collaborators."""
        self.settings = settings
        self.fetcher = fetcher or PageFetcher(timeout=settings.fetch_timeout_seconds)
        self.extractor = extractor or TextExtractor(max_length=settings.max_text_length)
        self.llm = llm or ChatCompletionClient.from_settings(settings)

    async def resolve_text(self, request: ExtractionRequest) -> str:
        """Return the posting text for a request.

        A URL is fetched and run through the text extractor; content is
        used as given.
        """
        if request.url:
            html = await self.fetcher.fetch(request.url)
            return self.extractor.extract(html, url=request.url)
        if request.content:
            return request.content
        msg = MISSING_INPUT_MESSAGE
        raise InputError(msg)

    async def parse(self, request: ExtractionRequest) -> dict[str, Any]:
        """Run the full flow and return the parsed completion."""
        logger.info("parse_start", source=request.source, url=request.url)
        start = time.monotonic()

        text = await self.resolve_text(request)
        prompt = build_job_posting_prompt(text)
        result = await self.llm.complete_json(prompt)

        logger.info(
            "parse_complete",
            source=request.source,
            text_length=len(text),
            prompt_version=JOB_POSTING_PROMPT_VERSION,
            fields=sorted(result),
            duration_seconds=round(time.monotonic() - start, 2),
        )
        return result
