"""Fake chat-completion responses and a patchable httpx client."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import httpx

LLM_URL = "https://llm.test/v1/chat/completions"

ACME_POSTING: dict[str, str] = {
    "company": "Acme",
    "title": "Engineer",
    "location": "Remote",
    "description": "Builds things.",
    "salary": "100k",
}

ACME_CONTENT = (
    '{"company":"Acme","title":"Engineer","location":"Remote",'
    '"description":"Builds things.","salary":"100k"}'
)


def make_completion(content: str, **usage: int) -> dict[str, Any]:
    """Build a chat-completion envelope whose first choice carries content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "llama3-8b-8192",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "prompt_tokens": usage.get("prompt_tokens", 120),
            "completion_tokens": usage.get("completion_tokens", 40),
        },
    }


def make_response(
    status_code: int = 200,
    json_body: object | None = None,
    text: str | None = None,
    method: str = "POST",
    url: str = LLM_URL,
) -> httpx.Response:
    """Build a real httpx.Response bound to a request so raise_for_status works."""
    request = httpx.Request(method, url)
    if json_body is not None:
        return httpx.Response(status_code, content=json.dumps(json_body), request=request)
    return httpx.Response(status_code, text=text or "", request=request)


def make_http_client(
    response: httpx.Response | None = None, side_effect: Exception | None = None
) -> AsyncMock:
    """Build an AsyncMock usable as ``async with httpx.AsyncClient(...)``.

    Both get and post return the response or raise side_effect.
    """
    client = AsyncMock()
    for method in (client.get, client.post):
        if side_effect is not None:
            method.side_effect = side_effect
        else:
            method.return_value = response
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client
