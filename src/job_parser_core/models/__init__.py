"""Domain models for job-posting-parser."""

from job_parser_core.models.job import ExtractionRequest, JobPosting

__all__ = [
    "ExtractionRequest",
    "JobPosting",
]
