"""Fetch job posting pages over HTTP."""

from __future__ import annotations

import httpx
import structlog

from job_parser_core.constants import DEFAULT_FETCH_HEADERS
from job_parser_core.exceptions import FetchError

logger = structlog.get_logger()


class PageFetcher:
    """Single-attempt HTTP GET for job pages."""

    def __init__(
        self, timeout: float = 30.0, headers: dict[str, str] | None = None
    ) -> None:
        """Initialize with a request timeout and request headers."""
        self.timeout = timeout
        self.headers = headers or dict(DEFAULT_FETCH_HEADERS)

    async def fetch(self, url: str) -> str:
        """Return the page body as text.

        Raises FetchError on a non-success status or a transport failure.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=self.headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("fetch_failed", url=url, status_code=status)
            msg = f"Fetching {url} returned HTTP {status}"
            raise FetchError(msg, status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("fetch_failed", url=url, error=str(e))
            msg = f"Fetching {url} failed: {e}"
            raise FetchError(msg) from e

        logger.info(
            "page_fetched",
            url=url,
            status_code=response.status_code,
            length=len(response.text),
        )
        return response.text
