"""Job posting extraction prompt template (v2)."""

from __future__ import annotations

JOB_POSTING_USER = """\
Please analyze this job posting and extract the following information in valid JSON format:
{{
    "company": "company name",
    "title": "job title",
    "location": "job location",
    "description": "summarize the job description in one to two sentences",
    "salary": "salary information if available, just a number or range"
}}

Job Posting:
{job_posting_text}

Please provide only the valid JSON response, no additional text. \
Also ensure that the salary value is a string and not a raw integer or range"""


def build_job_posting_prompt(job_posting_text: str) -> str:
    """Embed posting text verbatim in the extraction instructions."""
    return JOB_POSTING_USER.format(job_posting_text=job_posting_text)
