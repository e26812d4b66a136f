"""Job posting models: extraction request and parsed posting."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from job_parser_core.constants import MISSING_FIELD_PLACEHOLDER


class ExtractionRequest(BaseModel):
    """Input to a parse: a job page URL or raw posting content.

    Exactly one should be supplied. Empty strings count as absent and
    ``url`` takes precedence when both are given.
    """

    url: str | None = Field(default=None, description="URL of the job posting page")
    content: str | None = Field(default=None, description="Raw posting text or HTML")

    @property
    def source(self) -> str | None:
        """Return 'url', 'content', or None when neither is usable."""
        if self.url:
            return "url"
        if self.content:
            return "content"
        return None


class JobPosting(BaseModel):
    """Structured job posting as returned by the LLM.

    Fields are best-effort: the model may omit any of them or return a
    non-string value (salary often arrives as a number). Unknown keys are
    kept. Defaults are applied only when rendering.
    """

    model_config = ConfigDict(extra="allow")

    company: Any = None
    title: Any = None
    location: Any = None
    description: Any = None
    salary: Any = None
    requirements: Any = None

    def display_value(self, field_name: str) -> str:
        """Render a field for display, substituting the N/A placeholder."""
        value = getattr(self, field_name, None)
        if value is None or value == "":
            return MISSING_FIELD_PLACEHOLDER
        if isinstance(value, list):
            return "; ".join(str(item) for item in value) or MISSING_FIELD_PLACEHOLDER
        return str(value)
