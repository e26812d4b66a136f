"""Chat-completion client that returns the completion parsed as a JSON object."""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from job_parser_core.exceptions import LLMCallError, ParseError

if TYPE_CHECKING:
    from job_parser_core.config.settings import Settings

logger = structlog.get_logger()


class ChatCompletionClient:
    """Single-attempt client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(
        self,
        api_url: str,
        model: str,
        api_key: str | None = None,
        temperature: float = 0.7,
        json_response_format: bool = True,
        timeout: float = 60.0,
    ) -> None:
        """Initialize with endpoint, model, and an explicitly injected API key."""
        self.api_url = api_url
        self.model = model
        self._api_key = api_key
        self.temperature = temperature
        self.json_response_format = json_response_format
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> ChatCompletionClient:
        """Build a client from application settings."""
        api_key = (
            settings.llm_api_key.get_secret_value()
            if settings.llm_api_key is not None
            else None
        )
        return cls(
            api_url=settings.llm_api_url,
            model=settings.llm_model,
            api_key=api_key,
            temperature=settings.llm_temperature,
            json_response_format=settings.llm_json_response_format,
            timeout=settings.llm_timeout_seconds,
        )

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the request body with the prompt as a single user message."""
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }
        if self.json_response_format:
            payload["response_format"] = {"type": "json_object"}
        return payload

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def complete_json(self, prompt: str) -> dict[str, Any]:
        """Send the prompt and parse the completion content as a JSON object.

        Raises LLMCallError on a non-success status or transport failure,
        ParseError when the content is missing or not a JSON object.
        The object's fields are not validated.
        """
        start = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=self.build_payload(prompt),
                    headers=self._headers(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text
            logger.error(
                "llm_call_failed",
                model=self.model,
                status_code=status,
                body=body[:500],
            )
            msg = f"Completion API returned HTTP {status}: {body[:200]}"
            raise LLMCallError(msg, status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("llm_call_failed", model=self.model, error=str(e))
            msg = f"Completion API request failed: {e}"
            raise LLMCallError(msg) from e

        envelope = self._decode_envelope(response)
        content = _message_content(envelope)
        result = _parse_object(content)

        usage = envelope.get("usage") or {}
        logger.debug(
            "llm_call_complete",
            model=self.model,
            duration=round(time.monotonic() - start, 2),
            prompt_tokens=usage.get("prompt_tokens", 0),
            completion_tokens=usage.get("completion_tokens", 0),
        )
        return result

    @staticmethod
    def _decode_envelope(response: httpx.Response) -> dict[str, Any]:
        """Decode the completion response body."""
        try:
            envelope = response.json()
        except ValueError as e:
            msg = "Completion API returned a non-JSON body"
            raise ParseError(msg) from e
        if not isinstance(envelope, dict):
            msg = "Completion API returned an unexpected body"
            raise ParseError(msg)
        return envelope


def _message_content(envelope: dict[str, Any]) -> str:
    """Pull choices[0].message.content out of a completion envelope."""
    try:
        content = envelope["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        msg = "Completion response has no message content"
        raise ParseError(msg) from e
    if not isinstance(content, str):
        msg = "Completion message content is not a string"
        raise ParseError(msg)
    return content


def _parse_object(content: str) -> dict[str, Any]:
    """Parse completion content strictly as a JSON object."""
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("llm_content_not_json", preview=content[:100])
        msg = f"Completion content is not valid JSON: {e.msg}"
        raise ParseError(msg) from e
    if not isinstance(parsed, dict):
        msg = f"Completion content is JSON {type(parsed).__name__}, expected an object"
        raise ParseError(msg)
    return parsed
