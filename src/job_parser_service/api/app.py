"""HTTP API: POST /parse-job with an explicit error contract."""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_parser_core.config.settings import Settings
from job_parser_core.constants import MISSING_INPUT_MESSAGE
from job_parser_core.exceptions import (
    FetchError,
    InputError,
    JobParserError,
    LLMCallError,
    ParseError,
)
from job_parser_core.models.job import ExtractionRequest
from job_parser_service.observability.logging import (
    bind_request_context,
    clear_request_context,
)
from job_parser_service.parser import JobPostingParser

logger = structlog.get_logger()

ERROR_STATUS: dict[type[JobParserError], int] = {
    InputError: status.HTTP_400_BAD_REQUEST,
    FetchError: status.HTTP_502_BAD_GATEWAY,
    LLMCallError: status.HTTP_502_BAD_GATEWAY,
    ParseError: status.HTTP_502_BAD_GATEWAY,
}


def error_status(error: JobParserError) -> int:
    """Map an error to the HTTP status returned to the client."""
    for error_type, code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def input_error_from_validation(exc: RequestValidationError) -> InputError:
    """Turn a rejected request body into an InputError.

    A missing body means neither url nor content was supplied.
    """
    errors = exc.errors()
    if not errors or all(
        err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",)
        for err in errors
    ):
        return InputError(MISSING_INPUT_MESSAGE)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return InputError(f"Invalid request body at {location}: {first.get('msg', 'invalid')}")


def error_response(request: Request, exc: JobParserError) -> JSONResponse:
    """Log the error and render it as the JSON error body."""
    code = error_status(exc)
    logger.error(
        "parse_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
        upstream_status=exc.status_code,
    )
    body: dict[str, Any] = {"error": exc.error_kind, "detail": exc.message}
    if exc.status_code is not None:
        body["status_code"] = exc.status_code
    return JSONResponse(status_code=code, content=body)


def get_parser(request: Request) -> JobPostingParser:
    """Resolve the parser stored on the application."""
    parser: JobPostingParser = request.app.state.parser
    return parser


def create_app(
    settings: Settings | None = None, parser: JobPostingParser | None = None
) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or Settings()
    app = FastAPI(title="job-posting-parser")
    app.state.settings = settings
    app.state.parser = parser or JobPostingParser(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.llm_api_key is None:
        logger.warning("llm_api_key_missing", api_url=settings.llm_api_url)

    @app.middleware("http")
    async def request_context(request: Request, call_next: Any) -> Response:
        request_id = request.headers.get("x-request-id") or uuid4().hex
        bind_request_context(request_id, method=request.method, path=request.url.path)
        start = time.monotonic()
        try:
            response: Response = await call_next(request)
            logger.info(
                "request_complete",
                status_code=response.status_code,
                duration=round(time.monotonic() - start, 3),
            )
        finally:
            clear_request_context()
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(JobParserError)
    async def job_parser_error_handler(
        request: Request, exc: JobParserError
    ) -> JSONResponse:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(request, input_error_from_validation(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "model": settings.llm_model}

    @app.post("/parse-job")
    async def parse_job(
        body: ExtractionRequest,
        job_parser: JobPostingParser = Depends(get_parser),
    ) -> dict[str, Any]:
        return await job_parser.parse(body)

    return app
