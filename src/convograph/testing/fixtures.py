"""Test doubles for the answer layer."""

import json
from unittest.mock import MagicMock

import httpx

from convograph.llm.client import LLMClient


def create_mock_llm_client(answer: str = "mock LLM response") -> MagicMock:
    """Create a mock LLMClient whose complete() returns ``answer``.

    Args:
        answer: Return value for complete().

    Returns:
        MagicMock with the LLMClient interface; is_available() is True.
    """
    mock = MagicMock(spec=LLMClient)
    mock.complete.return_value = answer
    mock.is_available.return_value = True
    mock.__enter__.return_value = mock
    return mock


def create_stub_llm_client(
    content: str = "stub completion",
    status_code: int = 200,
) -> tuple[LLMClient, list[dict]]:
    """Create a real LLMClient served by an in-process transport.

    Every request is answered with ``status_code`` and, for completions, a
    chat payload carrying ``content``.

    Returns:
        The client and a list that collects each request as
        ``{"method", "path", "headers", "json"}``.
    """
    requests: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "headers": dict(request.headers),
                "json": json.loads(request.content) if request.content else None,
            }
        )
        if request.url.path.endswith("/models"):
            return httpx.Response(status_code, json={"data": []})
        return httpx.Response(
            status_code,
            json={"choices": [{"message": {"role": "assistant", "content": content}}]},
        )

    client = LLMClient(
        base_url="http://llm.test/v1",
        api_key="test-key",
        transport=httpx.MockTransport(handler),
    )
    return client, requests
