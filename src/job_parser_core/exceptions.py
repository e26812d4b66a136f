"""Custom exception hierarchy for job-posting-parser."""

from __future__ import annotations


class JobParserError(Exception):
    """Base exception for all job-posting-parser errors."""

    error_kind: str = "job_parser_error"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Store the message and the upstream HTTP status, if any."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InputError(JobParserError):
    """Raised when a request supplies neither a URL nor content."""

    error_kind = "input_error"


class FetchError(JobParserError):
    """Raised when the job page cannot be retrieved."""

    error_kind = "fetch_error"


class LLMCallError(JobParserError):
    """Raised when the chat-completion API fails or returns a non-success status."""

    error_kind = "llm_call_error"


class ParseError(JobParserError):
    """Raised when the completion content is not a JSON object."""

    error_kind = "parse_error"
