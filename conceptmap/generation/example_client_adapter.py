"""Offline generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in GeneratorFactory.
"""

from typing import ClassVar

from conceptmap.generation.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    """Returns a fixed one-node diagram without any network calls.

    Useful for local development and for exercising the HTTP surface without
    provider credentials.
    """

    DEFAULT_RESPONSE: ClassVar[str] = 'graph TD\nDOC_EXAMPLE["Example document"]:::document'

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        prompt: str,
    ) -> str:
        _ = model, max_tokens, prompt
        return self.DEFAULT_RESPONSE
