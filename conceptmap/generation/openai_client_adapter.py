from typing import Any

import httpx
import openai

from conceptmap.generation.client_base import BaseGenerationClient
from conceptmap.generation.exceptions import GenerationNetworkError, GenerationResponseError


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float | None = None,
        base_url: str | None = None,
    ) -> None:
        options: dict[str, Any] = {"api_key": api_key, "base_url": base_url}
        if timeout_seconds is not None:
            options["timeout"] = timeout_seconds
        self._client = openai.AsyncOpenAI(**options)

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        prompt: str,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise GenerationResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise GenerationResponseError("AI returned empty response")
        return content
