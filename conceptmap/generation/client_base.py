from abc import ABC, abstractmethod


class BaseGenerationClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        prompt: str,
    ) -> str:
        """Send a single user message and return the first text payload.

        Raises:
            GenerationNetworkError: on transport or API failures.
            GenerationResponseError: when the response carries no text.
        """
