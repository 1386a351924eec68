from typing import Any

import httpx

from conceptmap.generation.client_base import BaseGenerationClient
from conceptmap.generation.exceptions import GenerationNetworkError, GenerationResponseError

DEFAULT_BASE_URL = "https://api.anthropic.com"


class AnthropicClientAdapter(BaseGenerationClient):
    """Generation client for the Anthropic Messages API over plain httpx."""

    def __init__(
        self,
        *,
        api_key: str,
        api_version: str,
        timeout_seconds: float | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_version = api_version
        self._timeout = httpx.Timeout(timeout_seconds)
        self._base_url = base_url or DEFAULT_BASE_URL
        self._transport = transport

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        prompt: str,
    ) -> str:
        payload = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self._api_version,
            "content-type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post("/v1/messages", json=payload, headers=headers)
                response.raise_for_status()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise GenerationNetworkError(
                f"AI provider API error: {exc.response.status_code} {exc.response.text[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise GenerationResponseError(f"AI returned invalid JSON: {exc}") from exc
        return self._first_text(data)

    @staticmethod
    def _first_text(data: Any) -> str:
        content = data.get("content") if isinstance(data, dict) else None
        if not content or not isinstance(content, list):
            raise GenerationResponseError("AI returned no content blocks")
        first = content[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not text:
            raise GenerationResponseError("AI returned empty response")
        return str(text)
