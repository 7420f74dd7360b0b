"""OpenAI-compatible HTTP client used to phrase answers.

Only the answer layer talks to a model; extraction and graph building are
purely deterministic.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class LLMResponseError(ValueError):
    """The server answered, but not with a usable completion."""


class LLMClient:
    """Single-prompt completion client for an OpenAI-compatible server.

    Args:
        base_url: Base URL of the server (e.g. http://localhost:5000/v1).
        timeout: Request timeout in seconds.
        api_key: Optional bearer token sent with every request.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        ValueError: If base_url is empty or not an http(s) URL.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        api_key: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("LLMClient requires a non-empty base_url")
        base_url = base_url.strip()
        if not base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")

        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int | None = 1024,
        temperature: float = 0.7,
    ) -> str:
        """Send ``prompt`` as a single user turn and return the reply text.

        Raises:
            httpx.HTTPError: On transport failures or error status codes.
            LLMResponseError: If the reply carries no message content.
        """
        payload: dict[str, Any] = {
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }
        if model:
            payload["model"] = model
        if max_tokens:
            payload["max_tokens"] = max_tokens

        logger.debug("Requesting completion (%d prompt chars).", len(prompt))
        resp = self.client.post("/chat/completions", json=payload)
        resp.raise_for_status()
        return self._content(resp)

    @staticmethod
    def _content(resp: httpx.Response) -> str:
        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMResponseError(f"Malformed completion response: {e!r}") from e
        if not isinstance(content, str):
            raise LLMResponseError("Completion content is not text")
        return content

    def is_available(self) -> bool:
        """Whether the server answers its model listing without an error."""
        try:
            return self.client.get("/models").status_code < 400
        except httpx.TransportError as e:
            logger.debug("LLM server unreachable: %s", e)
            return False

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "LLMClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
