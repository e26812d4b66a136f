"""Shared constants for job-posting-parser."""

from __future__ import annotations

# Prompt versions: increment when prompt templates change
JOB_POSTING_PROMPT_VERSION = "v2"

# LLM defaults (Groq OpenAI-compatible endpoint)
DEFAULT_LLM_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_LLM_MODEL = "llama3-8b-8192"
DEFAULT_LLM_TEMPERATURE = 0.7

# Text extraction
MAX_TEXT_LENGTH = 8000
TRUNCATION_MARKER = "..."

# Fields requested from the LLM, in prompt order
JOB_POSTING_FIELDS: tuple[str, ...] = (
    "company",
    "title",
    "location",
    "description",
    "salary",
)

# Placeholder shown for fields the LLM did not return
MISSING_FIELD_PLACEHOLDER = "N/A"

# Browser-like headers for fetching job pages
DEFAULT_FETCH_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# Returned when a request carries neither a URL nor content
MISSING_INPUT_MESSAGE = "Either URL or content must be provided"
